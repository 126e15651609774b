"""Errors raised while exporting a Figma node."""

from typing import Optional


class FigmaCliError(Exception):
    """Base class for every error reported to the user."""


class MissingTokenError(FigmaCliError):
    def __init__(self, variable: str = "FIGMA_PERSONAL_ACCESS_TOKEN"):
        self.variable = variable
        super().__init__(f"{variable} environment variable is not set")


class MalformedUrlError(FigmaCliError):
    """The input could not be split into a file id and a node id.

    ``reason`` is one of ``not-a-url``, ``missing-design-segment`` or
    ``missing-node-id``.
    """

    NOT_A_URL = "not-a-url"
    MISSING_DESIGN_SEGMENT = "missing-design-segment"
    MISSING_NODE_ID = "missing-node-id"

    def __init__(self, reason: str, detail: str):
        self.reason = reason
        super().__init__(f"Failed to parse Figma URL: {detail}")


class ApiRequestFailedError(FigmaCliError):
    def __init__(self, status_code: Optional[int] = None, reason: str = ""):
        self.status_code = status_code
        self.reason = reason
        if status_code is None:
            message = f"Figma API request failed: {reason}"
        else:
            message = f"Figma API request failed: {status_code} {reason}"
        super().__init__(message)


class ApiReportedError(FigmaCliError):
    def __init__(self, err: str):
        self.err = err
        super().__init__(f"Figma API error: {err}")


class NoImagesFoundError(FigmaCliError):
    def __init__(self):
        super().__init__("No images found for the specified node")


class DownloadFailedError(FigmaCliError):
    def __init__(self, url: str, status_code: Optional[int] = None, reason: str = ""):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        if status_code is None:
            message = f"Failed to download image: {reason} ({url})"
        else:
            message = f"Failed to download image: {status_code} {reason} ({url})"
        super().__init__(message)


class ClipboardFailedError(FigmaCliError):
    def __init__(self, stderr: str):
        self.stderr = stderr
        super().__init__(f"Failed to copy image to clipboard: {stderr}")
