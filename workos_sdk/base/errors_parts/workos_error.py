"""
Base exception type for the WorkOS client.

Every failure surfaced to callers derives from :class:`WorkOsError` and
carries a normalized :class:`ErrorCode`. Subclasses add the variant-specific
payload (retry hint, decoded operation error, underlying cause).
"""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode


@dataclass(eq=False)
class WorkOsError(Exception):
    """Root of the WorkOS error taxonomy.

    Attributes:
        message: Human-readable description of the failure.
        code: Normalized :class:`ErrorCode` classification.
    """

    message: str
    code: ErrorCode = ErrorCode.UNKNOWN

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


__all__ = ["WorkOsError"]
