"""Figma API client for resolving rendered node images."""

import logging
from typing import Optional, List

import httpx
from pydantic import ValidationError

from figma_cli.config import get_settings
from figma_cli.exceptions import (
    ApiReportedError,
    ApiRequestFailedError,
    NoImagesFoundError,
)
from figma_cli.schemas import ImageQueryResult

logger = logging.getLogger(__name__)


class FigmaClient:
    """Client for interacting with the Figma API."""

    def __init__(
        self,
        access_token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.access_token = access_token or settings.figma_personal_access_token
        self.base_url = settings.figma_api_base_url
        self.timeout = settings.request_timeout
        self.headers = {"X-FIGMA-TOKEN": self.access_token}
        self.transport = transport

    async def get_images(self, file_id: str, node_id: str) -> ImageQueryResult:
        """Ask the rendering endpoint for an image of a single node."""
        url = f"{self.base_url}/images/{file_id}"
        logger.debug("Requesting %s ids=%s", url, node_id)
        async with httpx.AsyncClient(transport=self.transport) as client:
            try:
                response = await client.get(
                    url,
                    headers=self.headers,
                    params={"ids": node_id},
                    timeout=self.timeout,
                )
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise ApiRequestFailedError(
                    e.response.status_code, e.response.reason_phrase
                ) from e
            except httpx.RequestError as e:
                raise ApiRequestFailedError(reason=str(e) or type(e).__name__) from e

        logger.debug("Figma API responded with %s", response.status_code)
        try:
            return ImageQueryResult.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise ApiRequestFailedError(
                response.status_code, f"unexpected response body ({e})"
            ) from e

    async def fetch_image_urls(self, file_id: str, node_id: str) -> List[str]:
        """Resolve a node to the list of downloadable image URLs.

        Every non-empty value of the ``images`` mapping is returned, in the
        order the API sent them, not only the entry for ``node_id``.
        """
        result = await self.get_images(file_id, node_id)

        if result.err:
            raise ApiReportedError(result.err)

        image_urls = result.image_urls()
        if not image_urls:
            raise NoImagesFoundError()

        logger.debug("Resolved %d image URL(s) for node %s", len(image_urls), node_id)
        return image_urls
