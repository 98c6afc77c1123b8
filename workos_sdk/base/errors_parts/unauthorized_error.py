"""HTTP 401 from the WorkOS API (or an authenticate call rejecting the client)."""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode
from .workos_error import WorkOsError


@dataclass(eq=False)
class UnauthorizedError(WorkOsError):
    message: str = "unauthorized"
    code: ErrorCode = ErrorCode.UNAUTHORIZED


__all__ = ["UnauthorizedError"]
