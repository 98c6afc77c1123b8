"""HTTP pipeline shared by every WorkOS endpoint.

Exposes the pooled httpx clients, header/body sanitizing, transport error
diagnostics, the response context carrier and the response classifier.
"""

from .client import build_httpx_client, close_all_clients, get_httpx_client
from .context import ResponseLogContext, TrackedResponse
from .error_chain import collect_error_chain, derive_error_hint, error_flags
from .response import (
    decode_operation_error,
    handle_generic_error,
    handle_unauthorized_error,
    handle_unauthorized_or_generic_error,
    response_to_request_error,
)
from .sanitize import extract_request_body, sanitize_headers, truncate_for_log
from .urls import join_url, parse_base_url, path_segment

__all__ = [
    "build_httpx_client",
    "get_httpx_client",
    "close_all_clients",
    "ResponseLogContext",
    "TrackedResponse",
    "collect_error_chain",
    "derive_error_hint",
    "error_flags",
    "decode_operation_error",
    "handle_generic_error",
    "handle_unauthorized_error",
    "handle_unauthorized_or_generic_error",
    "response_to_request_error",
    "extract_request_body",
    "sanitize_headers",
    "truncate_for_log",
    "join_url",
    "parse_base_url",
    "path_segment",
]
