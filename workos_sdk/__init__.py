"""WorkOS API client.

Typical use::

    from workos_sdk import WorkOs

    workos = WorkOs("sk_...")
    org = workos.organizations().get_organization("org_123")

Every call raises a :class:`WorkOsError` subclass on failure; see
:mod:`workos_sdk.base.errors`.
"""

from .base.diagnostics import DiagnosticsSink, LoggingDiagnostics, NullDiagnostics
from .base.errors import (
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
from .base.logging import configure_logger, get_logger
from .base.models import (
    ApiKey,
    ListMetadata,
    Metadata,
    PaginatedList,
    PaginationOrder,
    PaginationParams,
    UnpaginatedList,
)
from .config.defaults import SDK_VERSION
from .webhooks import Webhook, parse_webhook
from .workos import WorkOs, WorkOsBuilder

__version__ = SDK_VERSION

__all__ = [
    "__version__",
    "WorkOs",
    "WorkOsBuilder",
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
    "configure_logger",
    "get_logger",
    "ApiKey",
    "ListMetadata",
    "Metadata",
    "PaginatedList",
    "PaginationOrder",
    "PaginationParams",
    "UnpaginatedList",
    "Webhook",
    "parse_webhook",
]
