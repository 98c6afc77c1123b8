"""Malformed or non-absolute URL supplied as configuration or produced by a path join."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode
from .workos_error import WorkOsError


@dataclass(eq=False)
class UrlParseError(WorkOsError):
    message: str = "URL parse error"
    code: ErrorCode = ErrorCode.URL_PARSE
    url: Optional[str] = None


__all__ = ["UrlParseError"]
