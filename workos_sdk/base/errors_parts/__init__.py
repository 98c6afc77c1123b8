"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `workos_sdk.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .workos_error import WorkOsError
from .operation_error import OperationError
from .unauthorized_error import UnauthorizedError
from .rate_limited_error import RateLimitedError
from .url_parse_error import UrlParseError
from .ip_addr_parse_error import IpAddrParseError
from .request_error import RequestError
from .classification import classify_exception

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
