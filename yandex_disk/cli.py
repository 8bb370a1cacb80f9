"""
Command-line interface for the Yandex Disk SDK.

This module provides the ``yandex-disk`` tool for working with a Yandex Disk
from the command line.
"""

import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn
from rich.table import Table

from . import auth, disk, files, folders, public_files, trash
from .client import DEFAULT_ENDPOINT, TOKEN_ENV_VAR, YandexDiskClient, make_client
from .exceptions import AuthenticationError, YandexDiskError
from .models import Result, TransferProgress
from .utils import format_file_size


logger = logging.getLogger(__name__)

console = Console()


CONFIG_FILE = Path.home() / ".yandex_disk" / "config.json"


class CLIContext:
    """State shared by commands: the stored config and a lazily built client."""

    def __init__(self, config_file: Path = CONFIG_FILE):
        self.config_file = config_file
        self.config: Dict[str, Any] = {}
        self.client: Optional[YandexDiskClient] = None

    def load_config(self):
        """Read the stored token and endpoint; an unreadable file counts as empty."""
        if not self.config_file.is_file():
            return
        try:
            self.config = json.loads(self.config_file.read_text())
        except (ValueError, OSError) as e:
            logger.warning("Ignoring unreadable config %s: %s", self.config_file, e)
            self.config = {}

    def save_config(self):
        """Write the config with owner-only permissions."""
        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(json.dumps(self.config, indent=2))
        self.config_file.chmod(0o600)

    def get_client(self) -> YandexDiskClient:
        """Return the client, building it on first use from the config or the environment."""
        if self.client is not None:
            return self.client

        token = self.config.get('token') or os.getenv(TOKEN_ENV_VAR)
        if not token:
            raise AuthenticationError(
                f"Token not configured. Run 'yandex-disk config' or set {TOKEN_ENV_VAR}."
            )

        self.client = make_client(token, endpoint=self.config.get('endpoint', DEFAULT_ENDPOINT))
        return self.client


# Create CLI context
cli_context = CLIContext()


def _unwrap(result: Result, action: str) -> Any:
    """Return the value of an Ok result, or report the Error and exit."""
    if not result.is_ok:
        code = getattr(result.code, "value", result.code)
        console.print(f"❌ {action} failed: {escape(f'[{code}] {result.description}')}")
        sys.exit(1)
    return result.value


def _print_items(items, title: str):
    table = Table(title=title)
    table.add_column("Path", style="cyan")
    table.add_column("Type", style="blue")
    table.add_column("Size", style="yellow")
    table.add_column("Modified", style="magenta")

    for item in items:
        table.add_row(
            item.get('path', item.get('name', '')),
            item.get('type', ''),
            format_file_size(item['size']) if item.get('size') is not None else '-',
            item.get('modified', ''),
        )

    console.print(table)


def _transfer_progress():
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console
    )


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, debug):
    """Yandex Disk CLI - manage files on your Yandex Disk."""
    ctx.ensure_object(dict)
    ctx.obj['debug'] = debug

    # Load configuration
    cli_context.load_config()

    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console)],
        )
        console.print("[dim]Debug mode enabled[/dim]")


@cli.command()
@click.option('--token', prompt=True, hide_input=True, help='OAuth token')
@click.option('--endpoint', default=DEFAULT_ENDPOINT, help='Yandex Disk API endpoint')
def config(token, endpoint):
    """Store the OAuth token and endpoint."""
    cli_context.config.update({
        'token': token,
        'endpoint': endpoint
    })
    cli_context.save_config()
    cli_context.client = None

    console.print("✅ Configuration saved successfully!")


@cli.command(name='auth-url')
@click.argument('client_id')
def auth_url(client_id):
    """Print the URL that grants a token to an OAuth app."""
    console.print(auth.generate_url(client_id), soft_wrap=True)


@cli.command()
def info():
    """Show disk usage."""
    try:
        about = _unwrap(disk.about(cli_context.get_client()), "Disk info")
    except YandexDiskError as e:
        console.print(f"❌ Disk info failed: {escape(str(e))}")
        sys.exit(1)

    table = Table(title="Yandex Disk")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("User", str(about.get('user', {}).get('login', 'unknown')))
    table.add_row("Total space", format_file_size(about.get('total_space', 0)))
    table.add_row("Used space", format_file_size(about.get('used_space', 0)))
    table.add_row("Trash size", format_file_size(about.get('trash_size', 0)))

    console.print(table)


@cli.command()
@click.argument('path')
def stat(path):
    """Show metadata of a file or folder."""
    try:
        meta = _unwrap(disk.metadata(cli_context.get_client(), path), "Metadata")
    except YandexDiskError as e:
        console.print(f"❌ Metadata failed: {escape(str(e))}")
        sys.exit(1)

    console.print(json.dumps(meta, indent=2, ensure_ascii=False), markup=False)


@cli.command(name='ls')
@click.option('--limit', '-l', default=files.DEFAULT_LIMIT, help='Maximum number of files to list')
@click.option('--offset', '-o', default=0, help='Number of files to skip')
@click.option('--json', 'output_json', is_flag=True, help='Output as JSON')
def list_files(limit, offset, output_json):
    """List all files on the disk."""
    try:
        listing = _unwrap(files.index(cli_context.get_client(), limit=limit, offset=offset), "Listing")
    except YandexDiskError as e:
        console.print(f"❌ Failed to list files: {escape(str(e))}")
        sys.exit(1)

    if output_json:
        console.print(json.dumps(listing.items, indent=2, ensure_ascii=False), markup=False)
    elif not listing.items:
        console.print("No files found.")
    else:
        _print_items(listing.items, f"Files (offset {listing.offset})")


@cli.command()
@click.option('--limit', '-l', default=files.DEFAULT_LIMIT, help='Maximum number of files to list')
def recent(limit):
    """List recently uploaded files."""
    try:
        items = _unwrap(files.recent(cli_context.get_client(), limit=limit), "Listing")
    except YandexDiskError as e:
        console.print(f"❌ Failed to list files: {escape(str(e))}")
        sys.exit(1)

    if not items:
        console.print("No files found.")
        return
    _print_items(items, "Recently uploaded")


@cli.command()
@click.argument('local_file', type=click.Path(exists=True, dir_okay=False))
@click.argument('remote_path')
@click.option('--overwrite', is_flag=True, help='Replace an existing file')
def upload(local_file, remote_path, overwrite):
    """Upload a local file to REMOTE_PATH."""
    try:
        client = cli_context.get_client()

        with _transfer_progress() as progress:
            task = progress.add_task(f"Uploading {Path(local_file).name}", total=100)

            def progress_callback(prog: TransferProgress):
                if prog.percentage is not None:
                    progress.update(task, completed=prog.percentage)

            result = files.create(
                client,
                remote_path,
                local_file,
                overwrite=overwrite or None,
                progress_callback=progress_callback,
            )
            progress.update(task, completed=100)
    except YandexDiskError as e:
        console.print(f"❌ Upload failed: {escape(str(e))}")
        sys.exit(1)

    _unwrap(result, "Upload")
    console.print(f"✅ Uploaded: {local_file} -> {remote_path}")


@cli.command()
@click.argument('remote_path')
@click.argument('local_file', type=click.Path(dir_okay=False))
def download(remote_path, local_file):
    """Download REMOTE_PATH into a local file."""
    try:
        client = cli_context.get_client()

        with _transfer_progress() as progress:
            task = progress.add_task(f"Downloading {remote_path}", total=100)

            def progress_callback(prog: TransferProgress):
                if prog.percentage is not None:
                    progress.update(task, completed=prog.percentage)

            result = files.get(client, remote_path, local_file, progress_callback=progress_callback)
            progress.update(task, completed=100)
    except YandexDiskError as e:
        console.print(f"❌ Download failed: {escape(str(e))}")
        sys.exit(1)

    console.print(f"✅ Downloaded: {_unwrap(result, 'Download')}")


@cli.command()
@click.argument('path')
@click.option('--force', '-p', is_flag=True, help='Create missing parent folders')
def mkdir(path, force):
    """Create a folder."""
    try:
        _unwrap(folders.create(cli_context.get_client(), path, force=force), "Create folder")
    except YandexDiskError as e:
        console.print(f"❌ Create folder failed: {escape(str(e))}")
        sys.exit(1)

    console.print(f"✅ Created: {path}")


@cli.command()
@click.argument('path')
@click.option('--permanently', is_flag=True, help='Delete without moving to the trash')
@click.confirmation_option(prompt='Are you sure you want to delete this resource?')
def rm(path, permanently):
    """Delete a file or folder."""
    try:
        _unwrap(files.destroy(cli_context.get_client(), path, permanently=permanently or None), "Delete")
    except YandexDiskError as e:
        console.print(f"❌ Delete failed: {escape(str(e))}")
        sys.exit(1)

    console.print(f"✅ Deleted: {path}")


@cli.command()
@click.argument('source')
@click.argument('destination')
@click.option('--overwrite', is_flag=True, help='Replace an existing resource')
def cp(source, destination, overwrite):
    """Copy a file or folder."""
    try:
        _unwrap(files.copy(cli_context.get_client(), source, destination, overwrite=overwrite or None), "Copy")
    except YandexDiskError as e:
        console.print(f"❌ Copy failed: {escape(str(e))}")
        sys.exit(1)

    console.print(f"✅ Copied: {source} -> {destination}")


@cli.command()
@click.argument('source')
@click.argument('destination')
@click.option('--overwrite', is_flag=True, help='Replace an existing resource')
def mv(source, destination, overwrite):
    """Move or rename a file or folder."""
    try:
        _unwrap(files.move(cli_context.get_client(), source, destination, overwrite=overwrite or None), "Move")
    except YandexDiskError as e:
        console.print(f"❌ Move failed: {escape(str(e))}")
        sys.exit(1)

    console.print(f"✅ Moved: {source} -> {destination}")


@cli.command()
@click.argument('path')
def publish(path):
    """Publish a resource and show its public link."""
    try:
        client = cli_context.get_client()
        _unwrap(public_files.create(client, path), "Publish")
        meta = _unwrap(disk.metadata(client, path, fields="public_url"), "Metadata")
    except YandexDiskError as e:
        console.print(f"❌ Publish failed: {escape(str(e))}")
        sys.exit(1)

    console.print(Panel(
        f"Path: {path}\n"
        f"URL: {meta.get('public_url', 'unknown')}",
        title="Public Link",
        border_style="green"
    ))


@cli.command()
@click.argument('path')
def unpublish(path):
    """Remove the public link of a resource."""
    try:
        _unwrap(public_files.destroy(cli_context.get_client(), path), "Unpublish")
    except YandexDiskError as e:
        console.print(f"❌ Unpublish failed: {escape(str(e))}")
        sys.exit(1)

    console.print(f"✅ Unpublished: {path}")


@cli.command()
@click.option('--offset', '-o', default=0, help='Number of resources to skip')
@click.option('--limit', '-l', default=files.DEFAULT_LIMIT, help='Maximum number of resources to list')
def public(offset, limit):
    """List published files."""
    try:
        listing = _unwrap(public_files.index(cli_context.get_client(), offset=offset, limit=limit), "Listing")
    except YandexDiskError as e:
        console.print(f"❌ Failed to list public files: {escape(str(e))}")
        sys.exit(1)

    if not listing.items:
        console.print("No public files found.")
        return
    _print_items(listing.items, "Public files")


@cli.command()
@click.argument('operation_id')
def operation(operation_id):
    """Show the status of an asynchronous operation."""
    try:
        status = _unwrap(disk.operation_status(cli_context.get_client(), operation_id), "Operation status")
    except YandexDiskError as e:
        console.print(f"❌ Operation status failed: {escape(str(e))}")
        sys.exit(1)

    console.print(f"Operation {operation_id}: {status.get('status', 'unknown')}")


@cli.group(name='trash')
def trash_group():
    """Manage the trash."""


@trash_group.command(name='clear')
@click.argument('path', required=False)
@click.confirmation_option(prompt='Are you sure you want to clear the trash?')
def trash_clear(path):
    """Empty the trash, or remove PATH from it."""
    try:
        status = _unwrap(trash.clear(cli_context.get_client(), path), "Trash clear")
    except YandexDiskError as e:
        console.print(f"❌ Trash clear failed: {escape(str(e))}")
        sys.exit(1)

    console.print(f"✅ Trash: {status.value}")


@trash_group.command(name='restore')
@click.argument('path')
def trash_restore(path):
    """Restore PATH from the trash."""
    try:
        status = _unwrap(trash.restore(cli_context.get_client(), path), "Trash restore")
    except YandexDiskError as e:
        console.print(f"❌ Trash restore failed: {escape(str(e))}")
        sys.exit(1)

    console.print(f"✅ {path}: {status.value}")


if __name__ == '__main__':
    cli()
