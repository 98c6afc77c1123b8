"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Lets callers treat foreign exceptions (anything carrying an HTTP status, or
raw transport errors) with the same taxonomy as the client's own errors.
"""
from __future__ import annotations

import ipaddress
from typing import Dict, Optional

import httpx

from .error_code import ErrorCode
from .workos_error import WorkOsError


def _valid_status(value: object) -> Optional[int]:
    return value if isinstance(value, int) and 100 <= value < 600 else None


def _extract_status(exc: BaseException) -> Optional[int]:
    """HTTP status carried by ``exc`` itself or by its ``response``, if any."""
    for holder, attrs in ((exc, ("status_code", "status")), (getattr(exc, "response", None), ("status_code",))):
        for attr in attrs:
            status = _valid_status(getattr(holder, attr, None))
            if status is not None:
                return status
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    401: ErrorCode.UNAUTHORIZED,
    429: ErrorCode.RATE_LIMITED,
}


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. WorkOsError passthrough.
        2. HTTP status mapping (401, 429, other 4xx/5xx -> ``REQUEST``).
        3. URL / IP address parse failures.
        4. httpx transport errors -> ``REQUEST``.
        5. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, WorkOsError):
        return exc.code
    status = _extract_status(exc)
    if status is not None:
        if status in _HTTP_STATUS_MAP:
            return _HTTP_STATUS_MAP[status]
        if status >= 400:
            return ErrorCode.REQUEST
    if isinstance(exc, httpx.InvalidURL):
        return ErrorCode.URL_PARSE
    if isinstance(exc, ipaddress.AddressValueError) or (
        isinstance(exc, ValueError) and "does not appear to be an IPv4 or IPv6 address" in str(exc)
    ):
        return ErrorCode.IP_ADDR_PARSE
    if isinstance(exc, (httpx.HTTPError, httpx.StreamError)):
        return ErrorCode.REQUEST
    return ErrorCode.UNKNOWN


__all__ = [
    "classify_exception",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]
