"""Response classification for WorkOS API calls.

Three composable checks, each returning its input unchanged on pass-through
and raising a typed error otherwise:

- :func:`handle_unauthorized_error`: 401 -> :class:`UnauthorizedError`
  (the body is never read).
- :func:`handle_generic_error`: any non-2xx -> :class:`RequestError` whose
  message embeds method, URL, status and the truncated body.
- :func:`handle_unauthorized_or_generic_error`: both, in that order. This
  is what most endpoints use.

Endpoints with structured error bodies run :func:`handle_unauthorized_error`,
intercept their own statuses with :func:`decode_operation_error`, and fall
back to :func:`response_to_request_error`.

Each function accepts a :class:`TrackedResponse` from the dispatcher or a
bare ``httpx.Response``; the latter is reported with method ``UNKNOWN`` and
zero duration.
"""
from __future__ import annotations

from typing import Callable, Optional, Tuple, TypeVar, Union

import httpx

from ...config.defaults import MAX_BODY_LOG_BYTES
from ..diagnostics import DiagnosticsSink, GuardedDiagnostics, guard
from ..errors import OperationError, RequestError, UnauthorizedError
from .context import ResponseLogContext, TrackedResponse, unknown_context
from .sanitize import sanitize_headers, truncate_for_log

R = TypeVar("R", TrackedResponse, httpx.Response)
E = TypeVar("E")

AnyResponse = Union[TrackedResponse, httpx.Response]


def _resolve(
    response: AnyResponse, diagnostics: Optional[DiagnosticsSink]
) -> Tuple[httpx.Response, ResponseLogContext, GuardedDiagnostics]:
    if isinstance(response, TrackedResponse):
        sink = guard(diagnostics) if diagnostics is not None else response.diagnostics
        return response.response, response.context, sink
    ctx = unknown_context(response, sanitize_headers(response.headers))
    return response, ctx, guard(diagnostics)


def status_text(response: httpx.Response) -> str:
    """``"404 Not Found"`` style rendering of the status line."""
    reason = response.reason_phrase
    return f"{response.status_code} {reason}" if reason else str(response.status_code)


def format_error_message(method: str, url: str, status: str, body: str) -> str:
    if not body:
        return f"{method} {url} returned {status} with empty body"
    return f"{method} {url} returned {status} with body: {body}"


def handle_unauthorized_error(response: R, diagnostics: Optional[DiagnosticsSink] = None) -> R:
    """Raise :class:`UnauthorizedError` for a 401, otherwise pass through."""
    raw, ctx, sink = _resolve(response, diagnostics)
    if raw.status_code != httpx.codes.UNAUTHORIZED:
        return response
    sink.unauthorized(ctx.method, ctx.url, raw.status_code, ctx.response_headers, ctx.duration)
    raw.close()
    raise UnauthorizedError()


def response_to_request_error(
    response: AnyResponse, diagnostics: Optional[DiagnosticsSink] = None
) -> RequestError:
    """Consume the body of a failed response and build the matching :class:`RequestError`.

    A body that cannot be read is reported in the message rather than raised
    as a second error.
    """
    raw, ctx, sink = _resolve(response, diagnostics)
    status = status_text(raw)
    try:
        raw.read()
    except (httpx.HTTPError, httpx.StreamError) as exc:
        sink.error_body_unreadable(ctx.method, ctx.url, raw.status_code, ctx.response_headers, str(exc), ctx.duration)
        return RequestError(
            f"{ctx.method} {ctx.url} returned {status} but the response body could not be read: {exc}",
            source=exc,
        )
    body = truncate_for_log(raw.text, MAX_BODY_LOG_BYTES)
    sink.error_response(ctx.method, ctx.url, raw.status_code, ctx.response_headers, body, ctx.duration)
    return RequestError(format_error_message(ctx.method, ctx.url, status, body))


def handle_generic_error(response: R, diagnostics: Optional[DiagnosticsSink] = None) -> R:
    """Raise :class:`RequestError` for any non-2xx status, otherwise pass through."""
    raw = response.response if isinstance(response, TrackedResponse) else response
    if raw.is_success:
        return response
    raise response_to_request_error(response, diagnostics)


def handle_unauthorized_or_generic_error(response: R, diagnostics: Optional[DiagnosticsSink] = None) -> R:
    """Unauthorized check followed by the generic check."""
    return handle_generic_error(handle_unauthorized_error(response, diagnostics), diagnostics)


def decode_operation_error(response: TrackedResponse, decode: Callable[[object], E]) -> OperationError[E]:
    """Decode a structured error body into an :class:`OperationError`.

    ``decode`` receives the parsed JSON payload (typically a pydantic
    ``model_validate`` or ``TypeAdapter.validate_python``). Unreadable or
    undecodable bodies raise :class:`RequestError`.
    """
    payload = response.json()
    try:
        error = decode(payload)
    except ValueError as exc:
        raise RequestError(
            f"{response.context.method} {response.context.url} returned {status_text(response.response)} "
            f"with an unrecognized error body: {truncate_for_log(response.response.text)}",
            source=exc,
        ) from exc
    return OperationError(error=error)


__all__ = [
    "status_text",
    "format_error_message",
    "handle_unauthorized_error",
    "handle_generic_error",
    "handle_unauthorized_or_generic_error",
    "response_to_request_error",
    "decode_operation_error",
]
