"""WorkOS client handle and request dispatcher.

``WorkOs`` owns the base URL, the API key, the pooled ``httpx.Client`` and
the diagnostics sink. Every endpoint builds its request through
:meth:`WorkOs.build_request` and executes it through :meth:`WorkOs.send`,
which records the outgoing request, times the exchange, converts transport
failures into :class:`RequestError` and 429 responses into
:class:`RateLimitedError`. Everything else is returned as a
:class:`TrackedResponse` for the response classifier.

The handle is cheap to share across threads: it holds no per-request state.
"""
from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any, Dict, Optional

import httpx

from .base.diagnostics import DiagnosticsSink, LoggingDiagnostics, guard
from .base.errors import RateLimitedError, RequestError
from .base.http import (
    ResponseLogContext,
    TrackedResponse,
    build_httpx_client,
    collect_error_chain,
    derive_error_hint,
    error_flags,
    extract_request_body,
    get_httpx_client,
    join_url,
    parse_base_url,
    sanitize_headers,
)
from .base.logging import get_logger, resolve_level
from .base.models import ApiKey
from .config import get_client_config

if TYPE_CHECKING:
    from .admin_portal import AdminPortal
    from .directory_sync import DirectorySync
    from .organizations import Organizations
    from .roles import Roles
    from .user_management import UserManagement


def _parse_retry_after(value: Optional[str]) -> Optional[float]:
    """Seconds from a ``Retry-After`` header; ``None`` when absent or not numeric."""
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


class WorkOs:
    """Entry point to the WorkOS API.

    Args:
        key: Secret API key (``sk_...``). Falls back to ``WORKOS_API_KEY``.
        base_url: API root. Defaults to ``https://api.workos.com``.
        timeout: Per-request timeout in seconds.
        diagnostics: Sink receiving request/response records. When omitted,
            ``WORKOS_DIAGNOSTICS`` decides between logging and no recording.
        transport: Optional ``httpx`` transport; clients built with one are
            private to this handle instead of pooled.

    Raises:
        UrlParseError: ``base_url`` is not an absolute http(s) URL.
        ValueError: no API key was supplied or configured.
    """

    def __init__(
        self,
        key: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        diagnostics: Optional[DiagnosticsSink] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        cfg = get_client_config({"api_key": key, "base_url": base_url, "timeout": timeout})
        if not cfg["api_key"]:
            raise ValueError("a WorkOS API key is required (pass key= or set WORKOS_API_KEY)")
        self._key = ApiKey(cfg["api_key"])
        self._base_url = parse_base_url(cfg["base_url"])
        self._timeout = float(cfg["timeout"])

        if diagnostics is None and cfg["diagnostics"]:
            level = resolve_level(cfg["log_level"]) if cfg["log_level"] else None
            diagnostics = LoggingDiagnostics(get_logger("workos.http", level=level))
        self._diagnostics = guard(diagnostics)

        self._client: Optional[httpx.Client] = None
        if transport is not None:
            self._client = build_httpx_client(self._timeout, transport)

    @classmethod
    def builder(cls, key: str) -> "WorkOsBuilder":
        return WorkOsBuilder(key)

    @classmethod
    def from_env(cls, **overrides: Any) -> "WorkOs":
        """Build a client entirely from ``WORKOS_*`` environment variables.

        Keyword ``overrides`` are forwarded to the constructor and win over
        the environment.
        """
        return cls(**overrides)

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    @property
    def key(self) -> ApiKey:
        return self._key

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def client(self) -> httpx.Client:
        """The client requests go through.

        Pooled handles look the client up on every call, so a pool emptied by
        ``close_all_clients`` hands out a fresh one.
        """
        if self._client is not None:
            return self._client
        return get_httpx_client(self._timeout)

    @property
    def diagnostics(self) -> DiagnosticsSink:
        return self._diagnostics.inner

    # Resources

    def admin_portal(self) -> "AdminPortal":
        from .admin_portal import AdminPortal

        return AdminPortal(self)

    def directory_sync(self) -> "DirectorySync":
        from .directory_sync import DirectorySync

        return DirectorySync(self)

    def organizations(self) -> "Organizations":
        from .organizations import Organizations

        return Organizations(self)

    def roles(self) -> "Roles":
        from .roles import Roles

        return Roles(self)

    def user_management(self) -> "UserManagement":
        from .user_management import UserManagement

        return UserManagement(self)

    # Requests

    def build_request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Optional[Dict[str, Any]] = None,
        authenticated: bool = True,
    ) -> httpx.Request:
        """Build a request for ``path`` relative to the base URL.

        ``authenticated`` requests carry ``Authorization: Bearer <key>``.

        Raises:
            UrlParseError: the joined URL is not absolute.
            RequestError: ``json`` could not be serialized.
        """
        url = join_url(self._base_url, path)
        headers = {"Authorization": self._key.bearer()} if authenticated else None
        try:
            return self.client.build_request(method, url, json=json, params=params, headers=headers)
        except (TypeError, ValueError) as exc:
            raise RequestError(f"{method} {url} could not be built: {exc}", source=exc) from exc

    def send(self, request: httpx.Request) -> TrackedResponse:
        """Execute ``request`` and pair the response with its log context.

        Non-2xx responses other than 429 are returned, not raised; pass the
        result through the response classifier.

        Raises:
            RequestError: the request failed before a response arrived.
            RateLimitedError: the API answered 429.
        """
        method = request.method
        url = str(request.url)
        request_headers = sanitize_headers(request.headers)
        request_body = extract_request_body(request)
        self._diagnostics.request_sent(method, url, request_headers, request_body)

        started = time.perf_counter()
        try:
            response = self.client.send(request, stream=True)
        except (httpx.HTTPError, httpx.StreamError, httpx.InvalidURL) as exc:
            duration = time.perf_counter() - started
            chain = collect_error_chain(exc)
            self._diagnostics.request_failed(
                method,
                url,
                request_headers,
                request_body,
                duration,
                exc,
                error_flags(exc),
                chain,
                derive_error_hint(exc, chain),
            )
            raise RequestError(f"{method} {url} request failed: {exc}", source=exc) from exc
        duration = time.perf_counter() - started

        status = response.status_code
        response_headers = sanitize_headers(response.headers)
        if response.is_success:
            self._diagnostics.response_received(method, url, status, response_headers, duration)
        else:
            self._diagnostics.response_status(method, url, status, response_headers, duration)

        if status == httpx.codes.TOO_MANY_REQUESTS:
            retry_after = _parse_retry_after(response.headers.get("Retry-After"))
            response.close()
            raise RateLimitedError(retry_after=retry_after)

        context = ResponseLogContext(method=method, url=url, response_headers=response_headers, duration=duration)
        return TrackedResponse(response, context, self._diagnostics)

    def close(self) -> None:
        """Close the underlying client if this handle owns it."""
        if self._client is not None:
            self._client.close()

    def __enter__(self) -> "WorkOs":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"WorkOs(base_url={str(self._base_url)!r}, key={self._key!r})"


class WorkOsBuilder:
    """Fluent construction of a :class:`WorkOs` handle.

    ``base_url`` is validated eagerly so a bad URL fails at the call that
    supplied it.
    """

    def __init__(self, key: str) -> None:
        self._key = key
        self._base_url: Optional[str] = None
        self._timeout: Optional[float] = None
        self._diagnostics: Optional[DiagnosticsSink] = None
        self._transport: Optional[httpx.BaseTransport] = None

    def base_url(self, base_url: str) -> "WorkOsBuilder":
        parse_base_url(base_url)
        self._base_url = base_url
        return self

    def key(self, key: str) -> "WorkOsBuilder":
        self._key = key
        return self

    def timeout(self, seconds: float) -> "WorkOsBuilder":
        if seconds <= 0:
            raise ValueError("timeout must be positive")
        self._timeout = seconds
        return self

    def diagnostics(self, sink: DiagnosticsSink) -> "WorkOsBuilder":
        self._diagnostics = sink
        return self

    def transport(self, transport: httpx.BaseTransport) -> "WorkOsBuilder":
        self._transport = transport
        return self

    def build(self) -> WorkOs:
        return WorkOs(
            self._key,
            base_url=self._base_url,
            timeout=self._timeout,
            diagnostics=self._diagnostics,
            transport=self._transport,
        )


__all__ = ["WorkOs", "WorkOsBuilder"]
