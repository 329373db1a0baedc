"""Utility functions for loading interface descriptions and writing output.

This module loads the IDD JSON from files and URLs with proper error
handling, and writes generated source files to an output directory.
"""

import json
from pathlib import Path
from typing import Any, Dict, List
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)


class IDDLoaderError(Exception):
    """Raised when an interface description cannot be loaded or written out."""

    pass


def _check_document(data: Any, source: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        logger.error("IDD from %s is not a JSON object", source)
        raise IDDLoaderError(f"Interface description must be a JSON object: {source}")
    return data


def load_idd_from_file(file_path: str | Path) -> tuple[str, Dict[str, Any]]:
    """Load an IDD from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Tuple of (source description, parsed document).

    Raises:
        FileNotFoundError: If file doesn't exist.
        IDDLoaderError: If file cannot be read or is not a JSON object.
    """
    file_path = Path(file_path)
    logger.debug("Attempting to load IDD from file: %s", file_path)

    if not file_path.exists():
        logger.error("File not found: %s", file_path)
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning("File does not have .json extension: %s", file_path)

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in file %s: %s", file_path, e)
        raise IDDLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        logger.error("Error reading file %s: %s", file_path, e)
        raise IDDLoaderError(f"Error reading file {file_path}: {e}") from e

    logger.info("Loaded IDD from %s", file_path)
    return str(file_path), _check_document(data, str(file_path))


def load_idd_from_url(url: str, timeout: int = 30) -> tuple[str, Dict[str, Any]]:
    """Load an IDD from a URL.

    Args:
        url: URL to fetch the document from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, parsed document).

    Raises:
        IDDLoaderError: If the URL is invalid, the request fails, or the
            response is not a JSON object.
    """
    logger.debug("Attempting to load IDD from URL: %s", url)

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error("Invalid URL format: %s", url)
        raise IDDLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()

        content_type = response.headers.get("content-type", "").lower()
        if "json" not in content_type and not url.endswith(".json"):
            logger.warning(
                "URL %s does not have JSON content type: %s", url, content_type
            )

        data = response.json()
    except requests.exceptions.Timeout as e:
        logger.error("Request timeout for URL: %s", url)
        raise IDDLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error("Connection error for URL %s: %s", url, e)
        raise IDDLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error("HTTP error %s for URL: %s", e.response.status_code, url)
        raise IDDLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error("Request error for URL %s: %s", url, e)
        raise IDDLoaderError(f"Request error for URL {url}: {e}") from e
    except ValueError as e:
        # requests raises a ValueError subclass for undecodable bodies
        logger.error("Invalid JSON response from URL %s: %s", url, e)
        raise IDDLoaderError(f"Invalid JSON response from URL {url}: {e}") from e

    logger.info("Loaded IDD from %s", url)
    return url, _check_document(data, url)


def load_idd(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, Dict[str, Any]]:
    """Load an IDD from either a file or URL.

    Args:
        file_path: Path to local JSON file (mutually exclusive with url).
        url: URL to fetch JSON from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, parsed document).

    Raises:
        IDDLoaderError: If neither or both parameters are provided, or loading fails.
        FileNotFoundError: If file doesn't exist.
    """
    if not file_path and not url:
        logger.error("Neither file_path nor url provided")
        raise IDDLoaderError("Either file_path or url must be provided")

    if file_path and url:
        logger.error("Both file_path and url provided")
        raise IDDLoaderError("Cannot specify both file_path and url")

    if file_path:
        return load_idd_from_file(file_path)
    return load_idd_from_url(url, timeout)


def write_generated_files(output_dir: str | Path, files: Dict[str, str]) -> List[Path]:
    """Write generated sources into a directory, creating it if needed.

    Existing files with the same names are overwritten; nothing else in the
    directory is touched.

    Args:
        output_dir: Destination directory.
        files: Mapping of file name to file content.

    Returns:
        Paths of the written files, in input order.

    Raises:
        IDDLoaderError: If the directory or a file cannot be written.
    """
    output_dir = Path(output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("Cannot create output directory %s: %s", output_dir, e)
        raise IDDLoaderError(f"Cannot create output directory {output_dir}: {e}") from e

    written = []
    for name, text in files.items():
        path = output_dir / name
        try:
            # Keep line endings exactly as generated
            with path.open("w", encoding="utf-8", newline="") as f:
                f.write(text)
        except OSError as e:
            logger.error("Error writing %s: %s", path, e)
            raise IDDLoaderError(f"Error writing {path}: {e}") from e
        logger.debug("Wrote %s", path)
        written.append(path)

    logger.info("Wrote %d file(s) to %s", len(written), output_dir)
    return written
