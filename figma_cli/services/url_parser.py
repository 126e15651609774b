"""Split Figma design URLs into file and node identifiers."""

from urllib.parse import urlparse, parse_qs

from figma_cli.exceptions import MalformedUrlError
from figma_cli.schemas import FigmaUrlParts


def parse_figma_url(url: str) -> FigmaUrlParts:
    """Extract the file id and node id from a Figma design URL.

    The file id is the path segment right after ``design`` and the node id
    is the ``node-id`` query parameter, e.g.
    ``https://www.figma.com/design/ABC123/Name?node-id=1-2`` gives
    ``FigmaUrlParts(file_id="ABC123", node_id="1-2")``.

    Raises:
        MalformedUrlError: If the string is not a URL or lacks either part.
    """
    try:
        parsed = urlparse(url.strip())
    except ValueError:
        parsed = None
    if parsed is None or not parsed.scheme or not parsed.netloc:
        raise MalformedUrlError(
            MalformedUrlError.NOT_A_URL, f"not a valid URL: {url}"
        )

    path_parts = parsed.path.split("/")
    design_index = path_parts.index("design") if "design" in path_parts else -1
    if design_index == -1 or design_index + 1 >= len(path_parts) or not path_parts[design_index + 1]:
        raise MalformedUrlError(
            MalformedUrlError.MISSING_DESIGN_SEGMENT,
            "Invalid Figma URL: missing design file ID",
        )
    file_id = path_parts[design_index + 1]

    node_ids = parse_qs(parsed.query).get("node-id")
    if not node_ids or not node_ids[0]:
        raise MalformedUrlError(
            MalformedUrlError.MISSING_NODE_ID,
            "Invalid Figma URL: missing node-id parameter",
        )

    return FigmaUrlParts(file_id=file_id, node_id=node_ids[0])
