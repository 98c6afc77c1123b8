"""
HTTP 429 from the WorkOS API.

The client never retries; ``retry_after`` is the server's ``Retry-After``
hint in seconds, or ``None`` when absent or unparsable.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode
from .workos_error import WorkOsError


@dataclass(eq=False)
class RateLimitedError(WorkOsError):
    message: str = "rate limited"
    code: ErrorCode = ErrorCode.RATE_LIMITED
    retry_after: Optional[float] = None


__all__ = ["RateLimitedError"]
