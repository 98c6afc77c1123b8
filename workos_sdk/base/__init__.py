"""
WorkOS client base package.

Houses everything shared by the resource modules:
- errors: the closed error taxonomy
- http: dispatcher support (sanitizing, error chains, context, classifier)
- diagnostics: pluggable sinks for request/response records
- logging: structured JSON logging setup
- models: shared value types and pydantic bases
"""

from .diagnostics import DiagnosticsSink, LoggingDiagnostics, NullDiagnostics
from .errors import (
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
from .models import ApiKey, Metadata, PaginatedList, PaginationOrder, PaginationParams, UnpaginatedList

__all__ = [
    "DiagnosticsSink",
    "LoggingDiagnostics",
    "NullDiagnostics",
    "ErrorCode",
    "IpAddrParseError",
    "OperationError",
    "RateLimitedError",
    "RequestError",
    "UnauthorizedError",
    "UrlParseError",
    "WorkOsError",
    "classify_exception",
    "ApiKey",
    "Metadata",
    "PaginatedList",
    "PaginationOrder",
    "PaginationParams",
    "UnpaginatedList",
]
