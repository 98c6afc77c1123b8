"""Shared WorkOS value types (one concern per module)."""

from .api_key import ApiKey
from .base_model import WorkOsModel, WorkOsParams
from .lists import ListMetadata, PaginatedList, UnpaginatedList
from .pagination import PaginationOrder, PaginationParams

__all__ = [
    "ApiKey",
    "WorkOsModel",
    "WorkOsParams",
    "ListMetadata",
    "PaginatedList",
    "UnpaginatedList",
    "PaginationOrder",
    "PaginationParams",
]
