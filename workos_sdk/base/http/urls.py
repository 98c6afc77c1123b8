"""Base URL validation and path joining.

All request URLs are absolute: paths are resolved against the configured
base URL with RFC 3986 rules (a leading ``/`` replaces the base path).
Anything that does not end up as an absolute ``http``/``https`` URL is a
configuration error and raises :class:`UrlParseError`.
"""
from __future__ import annotations

from urllib.parse import quote

import httpx

from ..errors import UrlParseError

_SCHEMES = ("http", "https")


def _ensure_absolute(url: httpx.URL, raw: str) -> httpx.URL:
    if url.scheme not in _SCHEMES or not url.host:
        raise UrlParseError(f"URL parse error: {raw!r} is not an absolute http(s) URL", url=raw)
    return url


def parse_base_url(value: str) -> httpx.URL:
    """Parse and validate a base URL."""
    try:
        url = httpx.URL(value)
    except (httpx.InvalidURL, TypeError) as exc:
        raise UrlParseError(f"URL parse error: {exc}", url=str(value)) from exc
    return _ensure_absolute(url, str(value))


def join_url(base: httpx.URL, path: str) -> httpx.URL:
    """Resolve ``path`` against ``base``; the result must be absolute."""
    try:
        joined = base.join(path)
    except httpx.InvalidURL as exc:
        raise UrlParseError(f"URL parse error: {exc}", url=path) from exc
    return _ensure_absolute(joined, str(joined))


def path_segment(value: object) -> str:
    """Percent-encode an identifier for use as a single path segment."""
    text = str(value)
    if not text:
        raise UrlParseError("URL parse error: empty path segment", url=text)
    return quote(text, safe="")


__all__ = ["parse_base_url", "join_url", "path_segment"]
