"""Pydantic schemas for URL parts and API responses."""

from typing import Optional, Dict, List
from pydantic import BaseModel, ConfigDict, Field


class FigmaUrlParts(BaseModel):
    """File and node identifiers taken from a design URL."""

    model_config = ConfigDict(frozen=True)

    file_id: str = Field(..., min_length=1)
    node_id: str = Field(..., min_length=1)


class ImageQueryResult(BaseModel):
    """Body returned by the image rendering endpoint."""

    err: Optional[str] = None
    images: Optional[Dict[str, Optional[str]]] = None

    def image_urls(self) -> List[str]:
        """Non-empty image URLs in the order the API returned them."""
        return [url for url in (self.images or {}).values() if url]
