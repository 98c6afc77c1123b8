"""Response diagnostic context and the dispatcher's return type.

The dispatcher pairs every received response with a
:class:`ResponseLogContext` (method, URL, sanitized response headers,
elapsed time) so the classifier, which only sees the response, can still
build a fully descriptive error message. The pair travels explicitly as a
:class:`TrackedResponse`; nothing is stashed on the ``httpx.Response``.

Responses are dispatched with ``stream=True``: the body is read on first
access through :meth:`TrackedResponse.read`, :meth:`TrackedResponse.json`
or :meth:`TrackedResponse.json_model`, and read failures surface as
:class:`RequestError`.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, List, Tuple, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..diagnostics import GuardedDiagnostics, guard
from ..errors import RequestError

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class ResponseLogContext:
    """Request-side facts captured at dispatch time for later error formatting."""

    method: str
    url: str
    response_headers: List[Tuple[str, str]]
    duration: float


@dataclass
class TrackedResponse:
    """A received ``httpx.Response`` plus its diagnostic context."""

    response: httpx.Response
    context: ResponseLogContext
    diagnostics: GuardedDiagnostics = field(default_factory=lambda: guard(None), repr=False)

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.response.headers

    @property
    def is_success(self) -> bool:
        return self.response.is_success

    def close(self) -> None:
        """Release the connection without reading the body."""
        self.response.close()

    def read(self) -> bytes:
        """Read (once) and return the raw body."""
        try:
            return self.response.read()
        except (httpx.HTTPError, httpx.StreamError) as exc:
            raise RequestError(
                f"{self.context.method} {self.context.url} returned {self.status_code} "
                f"but the response body could not be read: {exc}",
                source=exc,
            ) from exc

    def text(self) -> str:
        self.read()
        return self.response.text

    def json(self) -> Any:
        """Decode the body as JSON."""
        content = self.read()
        try:
            return json.loads(content)
        except ValueError as exc:
            raise RequestError(
                f"{self.context.method} {self.context.url} returned a body that is not valid JSON: {exc}",
                source=exc,
            ) from exc

    def json_model(self, model: Type[M]) -> M:
        """Decode the body and validate it into ``model``."""
        payload = self.json()
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise RequestError(
                f"{self.context.method} {self.context.url} returned a body that does not match "
                f"{model.__name__}: {exc.error_count()} validation error(s)",
                source=exc,
            ) from exc


def unknown_context(response: httpx.Response, headers: List[Tuple[str, str]]) -> ResponseLogContext:
    """Fallback context for responses that did not come through the dispatcher."""
    try:
        url = str(response.url)
    except RuntimeError:
        # No request attached to the response.
        url = "<unknown>"
    return ResponseLogContext(method="UNKNOWN", url=url, response_headers=headers, duration=0.0)


__all__ = [
    "ResponseLogContext",
    "TrackedResponse",
    "unknown_context",
]
