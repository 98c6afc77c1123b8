"""
Normalized WorkOS error codes (taxonomy).

Defines the closed `ErrorCode` enumeration shared by every exception the
client raises. Values are lowercase snake_case and are a stable public
contract for logging and analytics.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated error codes representing the ways a call can fail."""

    OPERATION = "operation"
    UNAUTHORIZED = "unauthorized"
    RATE_LIMITED = "rate_limited"
    URL_PARSE = "url_parse"
    IP_ADDR_PARSE = "ip_addr_parse"
    REQUEST = "request"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
