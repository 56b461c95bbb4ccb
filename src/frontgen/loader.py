from __future__ import annotations

import json
import logging
from os import PathLike
from pathlib import Path
from typing import Mapping, cast
from urllib.parse import urlparse

import httpx
import yaml

from .errors import SpecError
from .openapi import OpenAPIDocument

logger = logging.getLogger(__name__)

OpenAPISource = str | PathLike[str] | Mapping[str, object]


def load_openapi(source: OpenAPISource) -> OpenAPIDocument:
    """Load an OpenAPI document from a mapping, a file path or an http(s) URL.

    References are left in place; they are resolved lazily while generating.

    Args:
        source: A dict-like document, a path to a JSON/YAML file, or a URL

    Returns:
        The OpenAPI document as plain dicts

    Raises:
        SpecError: If the source cannot be read or is not an OpenAPI object
    """
    document = _read_source(source)
    if not isinstance(document, dict):
        raise SpecError("OpenAPI document must be an object")
    openapi_version = document.get("openapi")
    if not isinstance(openapi_version, str):
        raise SpecError("Missing or invalid 'openapi' field in document")
    return cast(OpenAPIDocument, document)


def is_url(source: str) -> bool:
    """Check if the source string is an http(s) URL."""
    parsed = urlparse(source)
    return parsed.scheme in {"http", "https"}


def url_origin(url: str) -> str:
    """Return the ``scheme://host[:port]`` part of a URL."""
    parsed = urlparse(url)
    return f"{parsed.scheme}://{parsed.netloc}"


def _fetch_url(url: str) -> str:
    """Fetch content from a URL.

    Raises:
        SpecError: If the URL cannot be fetched
    """
    logger.info("Fetching OpenAPI document from %s", url)
    try:
        response = httpx.get(url, headers={"User-Agent": "frontgen"}, timeout=30, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        raise SpecError(f"Failed to fetch URL: {url}") from exc
    return response.text


def _get_url_extension(url: str) -> str:
    """Extract file extension from URL path."""
    path = urlparse(url).path
    if "." in path:
        return "." + path.rsplit(".", 1)[-1].lower()
    return ""


def _read_source(source: OpenAPISource) -> object:
    if isinstance(source, Mapping):
        return dict(source)

    source_str = str(source) if isinstance(source, PathLike) else source

    if is_url(source_str):
        text = _fetch_url(source_str)
        if _get_url_extension(source_str) in {".yaml", ".yml"}:
            return _load_yaml(text)
        return _load_json_or_yaml(text)

    path = Path(source_str)
    logger.debug("Reading OpenAPI document from %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise
    except (OSError, UnicodeDecodeError) as exc:
        raise SpecError(f"Failed to read {path}: {exc}") from exc
    if path.suffix in {".yaml", ".yml"}:
        return _load_yaml(text)
    return _load_json_or_yaml(text)


def _load_json_or_yaml(text: str) -> object:
    """Try to load as JSON, fall back to YAML if that fails."""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return _load_yaml(text)


def _load_yaml(text: str) -> object:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SpecError("Document is neither valid JSON nor valid YAML") from exc
