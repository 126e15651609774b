"""Download rendered node images to disk."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, List

import httpx

from figma_cli.config import get_settings
from figma_cli.exceptions import DownloadFailedError

logger = logging.getLogger(__name__)


def setup_output_directory(output_path: Optional[str] = None, prefix: str = "figma-cli-") -> str:
    """Return the directory images should be written to.

    A user supplied path is created if missing. Without one a fresh temp
    directory is made; it is never removed by this tool.
    """
    if output_path:
        Path(output_path).mkdir(parents=True, exist_ok=True)
        return output_path
    return tempfile.mkdtemp(prefix=prefix)


def generate_image_filename(node_id: str, index: int) -> str:
    """Build the file name for the ``index``-th image of a node."""
    return f"figma-node-{node_id.replace(':', '-', 1)}-{index}.png"


class ImageFetcher:
    """Fetches image URLs one after another into a directory."""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.transport = transport
        self.timeout = get_settings().request_timeout

    async def download_image(self, client: httpx.AsyncClient, image_url: str, output_path: str) -> None:
        """Write the body of ``image_url`` to ``output_path``."""
        try:
            response = await client.get(image_url, timeout=self.timeout)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise DownloadFailedError(
                image_url, e.response.status_code, e.response.reason_phrase
            ) from e
        except httpx.RequestError as e:
            raise DownloadFailedError(image_url, reason=str(e) or type(e).__name__) from e

        with open(output_path, "wb") as f:
            f.write(response.content)
        logger.debug("Saved %d bytes to %s", len(response.content), output_path)

    async def download_images(self, image_urls: List[str], target_dir: str, node_id: str) -> List[str]:
        """Download every URL in order and return the written file paths.

        The first failure aborts the batch; files written before it are
        left on disk but no result is returned.
        """
        downloaded_images = []
        async with httpx.AsyncClient(transport=self.transport, follow_redirects=True) as client:
            for index, image_url in enumerate(image_urls):
                output_path = os.path.abspath(
                    os.path.join(target_dir, generate_image_filename(node_id, index))
                )
                await self.download_image(client, image_url, output_path)
                downloaded_images.append(output_path)
        return downloaded_images
