"""
OAuth helpers for the Yandex Disk SDK.

Only the authorization URL is built here; the user opens it in a browser
and the token is returned to the app's redirect URI in the URL fragment.
"""

import uuid
from typing import Optional
from urllib.parse import urlencode

AUTHORIZE_URL = "https://oauth.yandex.ru/authorize"


def generate_url(client_id: str, device_id: Optional[str] = None) -> str:
    """
    Generate the URL used to obtain a token for an OAuth app.

    Args:
        client_id: Client ID of the OAuth app
        device_id: Device identifier; a random UUID is used when omitted

    Returns:
        Authorization URL
    """
    args = {
        "response_type": "token",
        "client_id": client_id,
        "device_id": device_id or str(uuid.uuid4()),
    }
    return f"{AUTHORIZE_URL}?{urlencode(args)}"
