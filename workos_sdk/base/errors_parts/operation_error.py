"""
Endpoint-specific operation failure.

Raised by endpoints that decode a structured JSON error body (e.g. a 400 or
404 carrying a ``code`` or ``error`` field). The decoded value lives in
``error``; endpoints without structured errors never raise this type.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .error_code import ErrorCode
from .workos_error import WorkOsError

E = TypeVar("E")


@dataclass(eq=False)
class OperationError(WorkOsError, Generic[E]):
    """Wraps the endpoint's decoded error value."""

    message: str = ""
    code: ErrorCode = ErrorCode.OPERATION
    error: Optional[E] = None

    def __post_init__(self) -> None:
        if not self.message:
            self.message = f"operational error: {self.error}" if self.error is not None else "operational error"
        super().__post_init__()


__all__ = ["OperationError"]
