"""Admin Portal link parameters."""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import Field

from ..base.models import WorkOsModel, WorkOsParams


class AdminPortalIntent(str, Enum):
    """Which part of the portal the link opens."""

    SSO = "sso"
    DIRECTORY_SYNC = "dsync"


class GeneratePortalLinkParams(WorkOsParams):
    organization_id: str = Field(serialization_alias="organization")
    intent: AdminPortalIntent
    return_url: Optional[str] = None


class GeneratePortalLinkResponse(WorkOsModel):
    link: str


__all__ = ["AdminPortalIntent", "GeneratePortalLinkParams", "GeneratePortalLinkResponse"]
