"""User facing node operations built from the services."""

import asyncio
import logging
import sys
from typing import Any, Coroutine, Optional

import click
import httpx

from figma_cli.config import Settings, get_settings
from figma_cli.exceptions import MissingTokenError
from figma_cli.services.clipboard import ClipboardWriter, get_clipboard_writer
from figma_cli.services.figma_client import FigmaClient
from figma_cli.services.image_fetcher import ImageFetcher, setup_output_directory
from figma_cli.services.url_parser import parse_figma_url

logger = logging.getLogger(__name__)


def validate_figma_token(settings: Optional[Settings] = None) -> str:
    """Return the access token or fail before any request is made."""
    settings = settings or get_settings()
    token = settings.figma_personal_access_token
    if not token:
        raise MissingTokenError()
    return token


async def copy_figma_node(
    url: str,
    output_path: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    clipboard: Optional[ClipboardWriter] = None,
) -> None:
    """Download a node's images and put the first one on the clipboard."""
    settings = get_settings()
    token = validate_figma_token(settings)
    parts = parse_figma_url(url)
    image_urls = await FigmaClient(token, transport=transport).fetch_image_urls(
        parts.file_id, parts.node_id
    )

    target_dir = setup_output_directory(output_path, settings.copy_dir_prefix)
    downloaded_images = await ImageFetcher(transport=transport).download_images(
        image_urls, target_dir, parts.node_id
    )

    click.echo(f"Downloaded {len(downloaded_images)} image(s) to: {target_dir}")

    if downloaded_images:
        clipboard = clipboard or get_clipboard_writer()
        await clipboard.copy_image(downloaded_images[0])
        if clipboard.supported:
            click.echo("✓ Image copied to clipboard")


async def show_figma_node_url(
    url: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> None:
    """Print the rendered image URLs of a node without downloading them."""
    token = validate_figma_token()
    parts = parse_figma_url(url)
    image_urls = await FigmaClient(token, transport=transport).fetch_image_urls(
        parts.file_id, parts.node_id
    )

    for image_url in image_urls:
        click.echo(image_url)


async def export_figma_node(
    url: str,
    output_path: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> None:
    """Download a node's images into a directory."""
    settings = get_settings()
    token = validate_figma_token(settings)
    parts = parse_figma_url(url)
    image_urls = await FigmaClient(token, transport=transport).fetch_image_urls(
        parts.file_id, parts.node_id
    )

    target_dir = setup_output_directory(output_path, settings.export_dir_prefix)
    downloaded_images = await ImageFetcher(transport=transport).download_images(
        image_urls, target_dir, parts.node_id
    )

    click.echo(f"Downloaded {len(downloaded_images)} image(s) to: {target_dir}")


def report_error_and_exit(error: Exception) -> None:
    """Write ``Error: <message>`` to stderr and exit with status 1."""
    logger.debug("Operation failed", exc_info=error)
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


def execute_with_error_handling(operation: Coroutine[Any, Any, None]) -> None:
    """Run an operation, reporting any failure and exiting with status 1."""
    try:
        asyncio.run(operation)
    except Exception as e:
        report_error_and_exit(e)
