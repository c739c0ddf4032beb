"""Load an OpenAPI document from a local file or a URL.

YAML (.yaml, .yml) and JSON (.json) documents are supported; the format is
chosen from the file or URL path suffix.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path, PurePosixPath
from typing import Any
from urllib.parse import urlparse

import httpx
import yaml

from .pipeline.errors import SpecLoadError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _suffix(source: str) -> str:
    if is_url(source):
        return PurePosixPath(urlparse(source).path).suffix.lower()
    return Path(source).suffix.lower()


def fetch(url: str, timeout: float = 30.0) -> str:
    """Download a document over http(s)."""
    logger.info("Fetching %s", url)
    try:
        resp = httpx.get(url, timeout=timeout, follow_redirects=True)
        resp.raise_for_status()
    except httpx.HTTPError as e:
        raise SpecLoadError(f"Failed to fetch {url}: {e}") from e
    return resp.text


def read_source(source: str, timeout: float = 30.0) -> str:
    """Read the raw text of a document from a path or URL."""
    if is_url(source):
        return fetch(source, timeout)
    try:
        return Path(source).read_text(encoding="utf-8")
    except OSError as e:
        raise SpecLoadError(f"Failed to read {source}: {e}") from e


def parse_content(content: str, suffix: str) -> Any:
    """Parse document text according to its file suffix."""
    try:
        if suffix in YAML_SUFFIXES:
            return yaml.safe_load(content)
        if suffix in JSON_SUFFIXES:
            return json.loads(content)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise SpecLoadError(f"Failed to parse document: {e}") from e
    raise SpecLoadError("Unsupported file format. Please provide a YAML or JSON file.")


def load_spec(source: str, timeout: float = 30.0) -> dict[str, Any]:
    """
    Load an OpenAPI document.

    Args:
        source: Local path or http(s) URL
        timeout: Network timeout in seconds for URLs

    Returns:
        The decoded document

    Raises:
        SpecLoadError: If the document cannot be read, fetched or parsed
    """
    suffix = _suffix(source)
    if suffix not in YAML_SUFFIXES + JSON_SUFFIXES:
        raise SpecLoadError("Unsupported file format. Please provide a YAML or JSON file.")

    spec = parse_content(read_source(source, timeout), suffix)
    if not isinstance(spec, dict):
        raise SpecLoadError(f"Expected a mapping at the top level of {source}, got {type(spec).__name__}")
    return spec
