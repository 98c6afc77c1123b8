"""
Catch-all request failure.

Covers transport failures (connect errors, timeouts, unreadable bodies) and
non-2xx responses that no more specific type claims. ``message`` embeds the
method, URL and truncated response body; ``source`` keeps the underlying
exception when there is one.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode
from .workos_error import WorkOsError


@dataclass(eq=False)
class RequestError(WorkOsError):
    """Unhandled API request failure with optional originating exception."""

    code: ErrorCode = ErrorCode.REQUEST
    source: Optional[BaseException] = None

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.source is not None and self.__cause__ is None:
            self.__cause__ = self.source


__all__ = ["RequestError"]
