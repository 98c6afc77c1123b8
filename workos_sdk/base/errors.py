"""Unified WorkOS error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``workos_sdk.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts import (
    ErrorCode,
    IpAddrParseError,
    OperationError,
    RateLimitedError,
    RequestError,
    UnauthorizedError,
    UrlParseError,
    WorkOsError,
    classify_exception,
)

__all__ = [
    "ErrorCode",
    "WorkOsError",
    "OperationError",
    "UnauthorizedError",
    "RateLimitedError",
    "UrlParseError",
    "IpAddrParseError",
    "RequestError",
    "classify_exception",
]
