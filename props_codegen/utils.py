"""Loading of component schema documents.

A schema comes from exactly one source, a local JSON file or a URL, and is
converted into the schema model before generation.
"""

import json
from pathlib import Path
from urllib.parse import urlparse

import requests

from .core.schema import Schema, convert_schema_document
from .logging_config import get_logger

logger = get_logger(__name__)


class SchemaLoadError(Exception):
    """Exception raised when a schema document cannot be loaded."""

    pass


def load_schema(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, Schema]:
    """
    Load a component schema from a file or a URL.

    Args:
        file_path: Local schema file (mutually exclusive with url)
        url: Address to fetch the schema from (mutually exclusive with file_path)
        timeout: Request timeout in seconds, used for URLs only

    Returns:
        Tuple of (source, schema model)

    Raises:
        FileNotFoundError: If the schema file does not exist
        SchemaLoadError: If the source is ambiguous, unreadable or not a JSON object
        InvalidSchema: If the document declares an unknown type annotation
    """
    if (file_path is None) == (url is None):
        raise SchemaLoadError("Give exactly one of a schema file or a schema URL")

    if file_path is not None:
        source = str(file_path)
        document = _read_schema_file(Path(file_path))
    else:
        source = url
        document = _fetch_schema(url, timeout)

    if not isinstance(document, dict):
        raise SchemaLoadError(
            f"Schema document must be a JSON object, got {type(document).__name__}: {source}"
        )

    schema = convert_schema_document(document)
    logger.info("Loaded %d module(s) from %s", len(schema.modules), source)
    return source, schema


def _read_schema_file(path: Path):
    """Decode a schema file; a missing file is not a load error."""
    if not path.is_file():
        raise FileNotFoundError(f"Schema file not found: {path}")

    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise SchemaLoadError(f"{path} is not valid JSON: {e}") from e
    except OSError as e:
        raise SchemaLoadError(f"Cannot read {path}: {e}") from e


def _fetch_schema(url: str, timeout: int):
    """Fetch and decode a schema over HTTP(S)."""
    parsed = urlparse(url)
    if not (parsed.scheme and parsed.netloc):
        raise SchemaLoadError(f"Invalid schema URL: {url}")

    logger.debug("Fetching schema from %s", url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.Timeout as e:
        raise SchemaLoadError(f"Schema request to {url} hit the {timeout}s timeout") from e
    except requests.exceptions.HTTPError as e:
        raise SchemaLoadError(
            f"Schema request to {url} failed with HTTP error {e.response.status_code}"
        ) from e
    except requests.exceptions.JSONDecodeError as e:
        raise SchemaLoadError(f"Schema at {url} is not valid JSON: {e}") from e
    except requests.exceptions.RequestException as e:
        raise SchemaLoadError(f"Schema request to {url} failed: {e}") from e
