"""Directory Sync resources."""
from __future__ import annotations

from typing import Optional

from ..base.models import WorkOsModel


class Directory(WorkOsModel):
    """A connected directory (SCIM, Google Workspace, ...)."""

    id: str
    organization_id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    state: Optional[str] = None


class DirectoryUser(WorkOsModel):
    id: str
    directory_id: Optional[str] = None
    organization_id: Optional[str] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


__all__ = ["Directory", "DirectoryUser"]
