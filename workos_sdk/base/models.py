"""
Shared WorkOS value types public surface.

This module re-exports the implementations under
``workos_sdk.base.models_parts`` to keep a single stable import path.
"""

from typing import Dict

from .models_parts import (
    ApiKey,
    ListMetadata,
    PaginatedList,
    PaginationOrder,
    PaginationParams,
    UnpaginatedList,
    WorkOsModel,
    WorkOsParams,
)

# Free-form key/value metadata attached to organizations and users.
Metadata = Dict[str, str]

__all__ = [
    "ApiKey",
    "Metadata",
    "WorkOsModel",
    "WorkOsParams",
    "ListMetadata",
    "PaginatedList",
    "UnpaginatedList",
    "PaginationOrder",
    "PaginationParams",
]
