"""Tests for the Figma client service."""

import asyncio

import httpx
import pytest

from figma_cli.exceptions import (
    ApiReportedError,
    ApiRequestFailedError,
    NoImagesFoundError,
)
from figma_cli.services.figma_client import FigmaClient


def make_client(handler):
    return FigmaClient(access_token="test_token", transport=httpx.MockTransport(handler))


class TestFigmaClient:
    """Test cases for FigmaClient."""

    def setup_method(self):
        """Setup test fixtures."""
        self.requests = []

    def respond(self, status_code=200, json=None):
        def handler(request):
            self.requests.append(request)
            return httpx.Response(status_code, json=json)

        return handler

    def test_fetch_image_urls_success(self):
        """Test resolving a single image URL."""
        client = make_client(self.respond(json={"err": None, "images": {"1-2": "https://x/a.png"}}))

        urls = asyncio.run(client.fetch_image_urls("ABC123", "1-2"))

        assert urls == ["https://x/a.png"]

    def test_request_shape(self):
        """Test endpoint, query and token header of the request."""
        client = make_client(self.respond(json={"err": None, "images": {"1:2": "https://x/a.png"}}))

        asyncio.run(client.fetch_image_urls("ABC123", "1:2"))

        assert len(self.requests) == 1
        request = self.requests[0]
        assert request.method == "GET"
        assert request.url.host == "api.figma.com"
        assert request.url.path == "/v1/images/ABC123"
        assert request.url.params["ids"] == "1:2"
        assert request.headers["X-FIGMA-TOKEN"] == "test_token"

    def test_token_defaults_to_settings(self):
        """Test that the token is read from settings when not given."""
        client = FigmaClient()
        assert client.access_token == "test_token"

    def test_returns_all_non_empty_entries_in_order(self):
        """Test that every non-empty mapping value is returned."""
        images = {"1-2": "https://x/a.png", "3-4": None, "5-6": "", "7-8": "https://x/b.png"}
        client = make_client(self.respond(json={"err": None, "images": images}))

        urls = asyncio.run(client.fetch_image_urls("ABC123", "1-2"))

        assert urls == ["https://x/a.png", "https://x/b.png"]

    def test_api_reported_error(self):
        """Test that the err field is surfaced."""
        client = make_client(self.respond(json={"err": "bad request", "images": {}}))

        with pytest.raises(ApiReportedError) as exc_info:
            asyncio.run(client.fetch_image_urls("ABC123", "1-2"))

        assert exc_info.value.err == "bad request"
        assert "bad request" in str(exc_info.value)

    def test_no_images_found(self):
        """Test a response whose image values are all empty."""
        client = make_client(self.respond(json={"err": None, "images": {"1-2": None, "3-4": ""}}))

        with pytest.raises(NoImagesFoundError):
            asyncio.run(client.fetch_image_urls("ABC123", "1-2"))

    def test_missing_images_mapping(self):
        """Test a response without an images mapping."""
        client = make_client(self.respond(json={"err": None}))

        with pytest.raises(NoImagesFoundError):
            asyncio.run(client.fetch_image_urls("ABC123", "1-2"))

    def test_http_error_status(self):
        """Test that non-2xx responses carry the status."""
        client = make_client(self.respond(status_code=403, json={"status": 403, "err": "Invalid token"}))

        with pytest.raises(ApiRequestFailedError) as exc_info:
            asyncio.run(client.fetch_image_urls("ABC123", "1-2"))

        assert exc_info.value.status_code == 403
        assert str(exc_info.value) == "Figma API request failed: 403 Forbidden"

    def test_network_error(self):
        """Test that transport failures are wrapped."""

        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ApiRequestFailedError) as exc_info:
            asyncio.run(make_client(handler).fetch_image_urls("ABC123", "1-2"))

        assert exc_info.value.status_code is None
        assert "connection refused" in str(exc_info.value)

    def test_invalid_json_body(self):
        """Test a successful status with a body that is not JSON."""

        def handler(request):
            return httpx.Response(200, content=b"<html></html>")

        with pytest.raises(ApiRequestFailedError):
            asyncio.run(make_client(handler).fetch_image_urls("ABC123", "1-2"))
