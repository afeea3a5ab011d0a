"""Loading component metadata documents.

Metadata comes either from a local JSON file (typically the output of a
component compiler's docs step) or from an HTTP(S) URL.
"""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .codegen.core.schema import ComponentMetadata, SchemaError, convert_metadata_document
from .logging_config import get_logger

logger = get_logger(__name__)


class MetadataLoaderError(Exception):
    """Raised when a metadata document cannot be read or parsed."""

    pass


def read_metadata_file(file_path: str | Path) -> Any:
    """Read and parse a metadata document from disk.

    Raises:
        FileNotFoundError: If file doesn't exist.
        MetadataLoaderError: If the file is unreadable or not JSON.
    """
    file_path = Path(file_path)

    if not file_path.is_file():
        logger.error("Metadata file not found: %s", file_path)
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning("Metadata file %s has no .json extension", file_path)

    try:
        return json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise MetadataLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        raise MetadataLoaderError(f"Error reading file {file_path}: {e}") from e


def fetch_metadata(url: str, timeout: int = 30) -> Any:
    """Download and parse a metadata document.

    Args:
        url: HTTP(S) location of the document.
        timeout: Request timeout in seconds.

    Raises:
        MetadataLoaderError: If the URL is malformed, the request fails, or
            the body is not JSON.
    """
    parsed_url = urlparse(url)
    if parsed_url.scheme not in ("http", "https") or not parsed_url.netloc:
        raise MetadataLoaderError(f"Invalid URL: {url}")

    logger.debug("Fetching metadata from %s", url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.HTTPError as e:
        raise MetadataLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        raise MetadataLoaderError(f"Request failed for URL {url}: {e}") from e

    content_type = response.headers.get("content-type", "").lower()
    if "json" not in content_type:
        logger.warning("Response from %s has content type %r", url, content_type)

    try:
        return response.json()
    except ValueError as e:
        raise MetadataLoaderError(f"Invalid JSON response from URL {url}: {e}") from e


def load_components(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, list[ComponentMetadata]]:
    """Load component metadata from either a file or URL.

    Args:
        file_path: Path to local metadata file (mutually exclusive with url).
        url: URL to fetch metadata from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, components in document order).

    Raises:
        MetadataLoaderError: If neither or both sources are provided, loading
            fails, or the document is not valid component metadata.
        FileNotFoundError: If file doesn't exist.
    """
    if bool(file_path) == bool(url):
        raise MetadataLoaderError("Exactly one of file_path or url must be provided")

    if file_path:
        source = str(file_path)
        document = read_metadata_file(file_path)
    else:
        source = url
        document = fetch_metadata(url, timeout)

    try:
        components = convert_metadata_document(document)
    except SchemaError as e:
        raise MetadataLoaderError(f"Invalid component metadata in {source}: {e}") from e

    logger.info("Loaded %d component(s) from %s", len(components), source)
    return source, components
