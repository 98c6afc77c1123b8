"""Pluggable diagnostics sinks for the HTTP pipeline.

The dispatcher and classifier always talk to a :class:`DiagnosticsSink`;
whether anything is recorded depends only on which sink the client was
built with:

- :class:`NullDiagnostics` discards every record (default unless
  ``WORKOS_DIAGNOSTICS`` is enabled).
- :class:`LoggingDiagnostics` emits structured JSON events on the
  ``workos.http`` logger: debug for requests and responses, warning for
  unauthorized responses, error for failures.

Sinks must not influence request outcomes. :class:`GuardedDiagnostics`
wraps a sink so that an exception raised while recording is logged and
dropped instead of failing the call.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple, runtime_checkable

from .log_support import LogContext
from .logging import get_logger, log_event

Headers = Sequence[Tuple[str, str]]


def _elapsed_ms(duration: float) -> int:
    return int(duration * 1000)


@runtime_checkable
class DiagnosticsSink(Protocol):
    """Receiver for HTTP pipeline diagnostic records."""

    def request_sent(self, method: str, url: str, headers: Headers, body: Optional[str]) -> None:
        ...

    def request_failed(
        self,
        method: str,
        url: str,
        headers: Headers,
        body: Optional[str],
        duration: float,
        error: BaseException,
        flags: Dict[str, bool],
        chain: List[str],
        hint: Optional[str],
    ) -> None:
        ...

    def response_received(self, method: str, url: str, status: int, headers: Headers, duration: float) -> None:
        ...

    def response_status(self, method: str, url: str, status: int, headers: Headers, duration: float) -> None:
        ...

    def unauthorized(self, method: str, url: str, status: int, headers: Headers, duration: float) -> None:
        ...

    def error_response(
        self, method: str, url: str, status: int, headers: Headers, body: str, duration: float
    ) -> None:
        ...

    def error_body_unreadable(
        self, method: str, url: str, status: int, headers: Headers, error: str, duration: float
    ) -> None:
        ...


class NullDiagnostics:
    """Sink that records nothing."""

    def request_sent(self, method, url, headers, body) -> None:
        return None

    def request_failed(self, method, url, headers, body, duration, error, flags, chain, hint) -> None:
        return None

    def response_received(self, method, url, status, headers, duration) -> None:
        return None

    def response_status(self, method, url, status, headers, duration) -> None:
        return None

    def unauthorized(self, method, url, status, headers, duration) -> None:
        return None

    def error_response(self, method, url, status, headers, body, duration) -> None:
        return None

    def error_body_unreadable(self, method, url, status, headers, error, duration) -> None:
        return None


class LoggingDiagnostics:
    """Sink emitting one structured log event per record."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or get_logger("workos.http")

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def request_sent(self, method, url, headers, body) -> None:
        log_event(
            self._logger,
            "http.request",
            LogContext(method=method, url=url),
            level=logging.DEBUG,
            request_headers=[list(h) for h in headers],
            request_body=body if body is not None else "<empty>",
        )

    def request_failed(self, method, url, headers, body, duration, error, flags, chain, hint) -> None:
        log_event(
            self._logger,
            "http.request_failed",
            LogContext(method=method, url=url, elapsed_ms=_elapsed_ms(duration)),
            level=logging.ERROR,
            request_headers=[list(h) for h in headers],
            request_body=body if body is not None else "<empty>",
            error=str(error),
            error_chain=list(chain),
            error_hint=hint,
            **flags,
        )

    def response_received(self, method, url, status, headers, duration) -> None:
        log_event(
            self._logger,
            "http.response",
            LogContext(method=method, url=url, status=status, elapsed_ms=_elapsed_ms(duration)),
            level=logging.DEBUG,
            response_headers=[list(h) for h in headers],
        )

    def response_status(self, method, url, status, headers, duration) -> None:
        log_event(
            self._logger,
            "http.response_non_success",
            LogContext(method=method, url=url, status=status, elapsed_ms=_elapsed_ms(duration)),
            level=logging.DEBUG,
            response_headers=[list(h) for h in headers],
        )

    def unauthorized(self, method, url, status, headers, duration) -> None:
        log_event(
            self._logger,
            "http.unauthorized",
            LogContext(method=method, url=url, status=status, elapsed_ms=_elapsed_ms(duration)),
            level=logging.WARNING,
            response_headers=[list(h) for h in headers],
        )

    def error_response(self, method, url, status, headers, body, duration) -> None:
        log_event(
            self._logger,
            "http.error_response",
            LogContext(method=method, url=url, status=status, elapsed_ms=_elapsed_ms(duration)),
            level=logging.ERROR,
            response_headers=[list(h) for h in headers],
            response_body=body,
        )

    def error_body_unreadable(self, method, url, status, headers, error, duration) -> None:
        log_event(
            self._logger,
            "http.error_response_unreadable",
            LogContext(method=method, url=url, status=status, elapsed_ms=_elapsed_ms(duration)),
            level=logging.ERROR,
            response_headers=[list(h) for h in headers],
            error=error,
        )


class GuardedDiagnostics:
    """Wrap a sink so recording failures never reach the caller."""

    def __init__(self, inner: DiagnosticsSink) -> None:
        self._inner = inner
        self._logger = logging.getLogger("workos.diagnostics")

    @property
    def inner(self) -> DiagnosticsSink:
        return self._inner

    def _call(self, hook: str, *args: Any) -> None:
        try:
            getattr(self._inner, hook)(*args)
        except Exception as exc:  # noqa: BLE001 - a broken sink must not fail requests
            self._logger.debug("diagnostics sink %s failed: %s", type(self._inner).__name__, exc)

    def request_sent(self, method, url, headers, body) -> None:
        self._call("request_sent", method, url, headers, body)

    def request_failed(self, method, url, headers, body, duration, error, flags, chain, hint) -> None:
        self._call("request_failed", method, url, headers, body, duration, error, flags, chain, hint)

    def response_received(self, method, url, status, headers, duration) -> None:
        self._call("response_received", method, url, status, headers, duration)

    def response_status(self, method, url, status, headers, duration) -> None:
        self._call("response_status", method, url, status, headers, duration)

    def unauthorized(self, method, url, status, headers, duration) -> None:
        self._call("unauthorized", method, url, status, headers, duration)

    def error_response(self, method, url, status, headers, body, duration) -> None:
        self._call("error_response", method, url, status, headers, body, duration)

    def error_body_unreadable(self, method, url, status, headers, error, duration) -> None:
        self._call("error_body_unreadable", method, url, status, headers, error, duration)


def guard(sink: Optional[DiagnosticsSink]) -> GuardedDiagnostics:
    """Return ``sink`` wrapped in :class:`GuardedDiagnostics` (null sink when ``None``)."""
    if isinstance(sink, GuardedDiagnostics):
        return sink
    return GuardedDiagnostics(sink if sink is not None else NullDiagnostics())


__all__ = [
    "DiagnosticsSink",
    "NullDiagnostics",
    "LoggingDiagnostics",
    "GuardedDiagnostics",
    "guard",
]
