"""
Data models for the Yandex Disk SDK.

Every operation returns either ``Ok(value)`` or ``Error(code, description)``.
The remaining classes describe the payloads those results carry.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union


class Status(str, Enum):
    """Status tags returned by operations that carry no metadata."""
    OK = "ok"
    REMOVED = "removed"
    REMOVING = "removing"
    RESTORED = "restored"
    RESTORING = "restoring"


class TransferFailure(str, Enum):
    """Failure kinds of the byte-transfer phase of an upload or download."""
    PRECONDITION_FAILED = "precondition_failed"
    PAYLOAD_TOO_LARGE = "payload_too_large"
    INTERNAL_SERVER_ERROR = "internal_server_error"
    SERVICE_UNAVAILABLE = "service_unavailable"
    INSUFFICIENT_STORAGE = "insufficient_storage"
    TIMEOUT = "timeout"
    UNEXPECTED_STATUS = "unexpected_status"
    REDIRECT_MISSING = "redirect_missing"
    FILE_REQUIRED = "file_required"
    FILE_EXISTS = "file_exists"
    LOCAL_FILE_NOT_FOUND = "local_file_not_found"


@dataclass(frozen=True)
class Ok:
    """Successful operation result."""

    value: Any = Status.OK

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Error:
    """Failed operation result.

    ``code`` is the provider error identifier (e.g. ``DiskNotFoundError``),
    a ``TransferFailure`` for transfer-phase failures, or ``"no_resource"`` for
    status-driven endpoints answering 404.
    """

    code: str
    description: str = ""

    @property
    def is_ok(self) -> bool:
        return False


Result = Union[Ok, Error]


@dataclass(frozen=True)
class ApiResponse:
    """Decoded answer of a single API call."""

    status_code: int
    body: Any
    headers: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class TransferDescriptor:
    """Where and how to stream file bytes, as issued by the provider."""

    href: Optional[str]
    method: str = "GET"
    operation_id: Optional[str] = None
    templated: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TransferDescriptor":
        """Create TransferDescriptor from API response dictionary."""
        return cls(
            href=data.get("href"),
            method=data.get("method", "GET"),
            operation_id=data.get("operation_id"),
            templated=data.get("templated", False),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert TransferDescriptor to dictionary."""
        result = {
            "href": self.href,
            "method": self.method,
            "templated": self.templated,
        }

        if self.operation_id:
            result["operation_id"] = self.operation_id

        return result


@dataclass(frozen=True)
class FileListing:
    """A page of resources in provider order."""

    items: List[Dict[str, Any]]
    offset: int = 0


@dataclass
class TransferProgress:
    """Progress information for uploads and downloads."""

    filename: str
    total_bytes: Optional[int]
    transferred_bytes: int = 0

    @property
    def percentage(self) -> Optional[float]:
        """Transferred share in percent, or None when the size is unknown."""
        if not self.total_bytes:
            return None
        return (self.transferred_bytes / self.total_bytes) * 100
