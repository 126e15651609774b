"""Services package initialization."""

from figma_cli.services.url_parser import parse_figma_url
from figma_cli.services.figma_client import FigmaClient
from figma_cli.services.image_fetcher import ImageFetcher, setup_output_directory, generate_image_filename
from figma_cli.services.clipboard import ClipboardWriter, get_clipboard_writer

__all__ = [
    "parse_figma_url",
    "FigmaClient",
    "ImageFetcher",
    "setup_output_directory",
    "generate_image_filename",
    "ClipboardWriter",
    "get_clipboard_writer",
]
