"""Clipboard writers for downloaded node images.

Only macOS can put an image on the clipboard; every other platform gets a
writer that tells the user where the file was saved instead.
"""

import asyncio
from abc import ABC, abstractmethod
import logging
import sys

import click

from figma_cli.exceptions import ClipboardFailedError

logger = logging.getLogger(__name__)


class ClipboardWriter(ABC):
    """Places an image file on the system clipboard."""

    supported = False

    @abstractmethod
    async def copy_image(self, image_path: str) -> None:
        """Put the image at ``image_path`` on the clipboard."""


class MacClipboardWriter(ClipboardWriter):
    """Copies PNG data to the clipboard through ``osascript``."""

    supported = True

    @staticmethod
    def build_script(image_path: str) -> str:
        return f'set the clipboard to (read (POSIX file "{image_path}") as «class PNGf»)'

    async def copy_image(self, image_path: str) -> None:
        logger.debug("Running osascript for %s", image_path)
        process = await asyncio.create_subprocess_exec(
            "osascript",
            "-e",
            self.build_script(image_path),
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        _, stderr = await process.communicate()
        if process.returncode != 0:
            raise ClipboardFailedError(stderr.decode("utf-8", errors="replace"))


class NoopClipboardWriter(ClipboardWriter):
    """Reports the saved file instead of touching the clipboard."""

    async def copy_image(self, image_path: str) -> None:
        click.echo(f"Clipboard copying is only supported on macOS. Image saved to: {image_path}")


def get_clipboard_writer(platform: str = sys.platform) -> ClipboardWriter:
    """Pick the clipboard writer for ``platform``."""
    if platform == "darwin":
        return MacClipboardWriter()
    return NoopClipboardWriter()
