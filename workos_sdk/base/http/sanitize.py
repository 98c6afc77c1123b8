"""Header and body sanitizing for HTTP diagnostics.

Everything that reaches a log record or an error message passes through
here first:

- ``sanitize_headers`` redacts ``Authorization`` (any case) and replaces
  values that are not displayable ASCII with a fixed placeholder, keeping
  the original order and duplicates.
- ``truncate_for_log`` caps text at a UTF-8 byte budget without splitting a
  multi-byte character, appending an ellipsis only when something was cut.
- ``extract_request_body`` produces a preview of an outbound body without
  consuming it; streaming bodies get a fixed placeholder.

Sanitizing is idempotent: feeding sanitized pairs back in returns them
unchanged.
"""
from __future__ import annotations

from typing import Iterable, List, Mapping, Optional, Tuple, Union

import httpx

from ...config.defaults import MAX_BODY_LOG_BYTES

REDACTED = "<redacted>"
NON_TEXT_VALUE = "<non-utf8-value>"
NON_REPLAYABLE_BODY = "<non-replayable body>"
ELLIPSIS = "…"

HeaderValue = Union[str, bytes]
HeaderSource = Union[
    httpx.Headers,
    Mapping[str, HeaderValue],
    Iterable[Tuple[HeaderValue, HeaderValue]],
]
SanitizedHeaders = List[Tuple[str, str]]


def _is_visible(value: str) -> bool:
    # Visible ASCII plus horizontal tab, as allowed in an HTTP field value.
    return all(ch == "\t" or " " <= ch <= "~" for ch in value)


def _display_value(value: HeaderValue) -> str:
    if isinstance(value, bytes):
        try:
            text = value.decode("ascii")
        except UnicodeDecodeError:
            return NON_TEXT_VALUE
    else:
        text = value
    return text if _is_visible(text) else NON_TEXT_VALUE


def _display_name(name: HeaderValue) -> str:
    return name.decode("latin-1") if isinstance(name, bytes) else name


def _iter_pairs(headers: HeaderSource) -> Iterable[Tuple[HeaderValue, HeaderValue]]:
    if isinstance(headers, httpx.Headers):
        # ``raw`` keeps wire order, duplicates and the undecoded bytes.
        return headers.raw
    if isinstance(headers, Mapping):
        return headers.items()
    return headers


def sanitize_headers(headers: HeaderSource) -> SanitizedHeaders:
    """Return ``(name, value)`` string pairs safe to log.

    The ``authorization`` value is always replaced by ``REDACTED``; any other
    value that is not displayable text becomes ``NON_TEXT_VALUE``.
    """
    sanitized: SanitizedHeaders = []
    for raw_name, raw_value in _iter_pairs(headers):
        name = _display_name(raw_name)
        if name.lower() == "authorization":
            value = REDACTED
        else:
            value = _display_value(raw_value)
        sanitized.append((name, value))
    return sanitized


def truncate_for_log(text: str, limit: int = MAX_BODY_LOG_BYTES) -> str:
    """Cap ``text`` at ``limit`` UTF-8 bytes, never cutting inside a character.

    Text within the budget is returned unchanged; otherwise the longest
    whole-character prefix that fits is returned followed by ``ELLIPSIS``.
    """
    encoded = text.encode("utf-8", "surrogatepass")
    if len(encoded) <= limit:
        return text
    # A cut inside a multi-byte sequence leaves an incomplete tail that
    # "ignore" drops, so the prefix always ends on a character boundary.
    prefix = encoded[:limit].decode("utf-8", "ignore")
    return prefix + ELLIPSIS


def extract_request_body(request: httpx.Request, limit: int = MAX_BODY_LOG_BYTES) -> Optional[str]:
    """Preview an outbound request body for logging.

    Returns ``None`` when there is no body, ``NON_REPLAYABLE_BODY`` for
    streaming bodies that cannot be read without consuming them, and a
    truncated lossy-decoded string otherwise.
    """
    try:
        content = request.content
    except httpx.RequestNotRead:
        return NON_REPLAYABLE_BODY
    if not content:
        return None
    return truncate_for_log(content.decode("utf-8", "replace"), limit)


__all__ = [
    "REDACTED",
    "NON_TEXT_VALUE",
    "NON_REPLAYABLE_BODY",
    "ELLIPSIS",
    "SanitizedHeaders",
    "sanitize_headers",
    "truncate_for_log",
    "extract_request_body",
]
