"""
Pydantic bases for WorkOS resources and request parameters.

Resources accept unknown fields so the client keeps working as the API grows;
only identifying fields are declared on each resource. Parameters are strict
and serialize without ``None`` values.
"""
from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class WorkOsModel(BaseModel):
    """Base for deserialized API resources."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class WorkOsParams(BaseModel):
    """Base for request parameters sent as JSON or query strings."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def to_body(self) -> Dict[str, Any]:
        """JSON-ready mapping with unset optional fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


__all__ = ["WorkOsModel", "WorkOsParams"]
