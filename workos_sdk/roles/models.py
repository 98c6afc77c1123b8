"""Role resources."""
from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import Field

from ..base.models import WorkOsModel


class RoleType(str, Enum):
    ENVIRONMENT_ROLE = "EnvironmentRole"
    ORGANIZATION_ROLE = "OrganizationRole"


class Role(WorkOsModel):
    id: str
    name: str
    slug: str
    permissions: List[str] = Field(default_factory=list)
    type: RoleType


class RoleSlugObject(WorkOsModel):
    """``{"slug": ...}`` reference to a role, as embedded in memberships."""

    slug: str


__all__ = ["RoleType", "Role", "RoleSlugObject"]
