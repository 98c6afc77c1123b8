"""
Cursor pagination parameters shared by list endpoints.

Only parameter construction lives here; walking cursors is left to callers.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from pydantic import Field

from .base_model import WorkOsParams


class PaginationOrder(str, Enum):
    """Sort order of list results."""

    ASC = "asc"
    DESC = "desc"


class PaginationParams(WorkOsParams):
    """Cursor window for list endpoints (``order`` defaults to ``desc``)."""

    order: PaginationOrder = PaginationOrder.DESC
    after: Optional[str] = None
    before: Optional[str] = None
    limit: Optional[int] = Field(default=None, ge=1, le=100)

    def to_query(self) -> Dict[str, str]:
        return {k: str(v) for k, v in self.to_body().items()}


__all__ = ["PaginationOrder", "PaginationParams"]
