"""
List envelopes returned by collection endpoints.
"""
from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ListMetadata(BaseModel):
    """Cursors pointing at the neighbouring pages."""

    before: Optional[str] = None
    after: Optional[str] = None


class PaginatedList(BaseModel, Generic[T]):
    data: List[T]
    list_metadata: ListMetadata = Field(default_factory=ListMetadata)


class UnpaginatedList(BaseModel, Generic[T]):
    data: List[T]


__all__ = ["ListMetadata", "PaginatedList", "UnpaginatedList"]
