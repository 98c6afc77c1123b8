"""Roles API."""
from __future__ import annotations

from typing import TYPE_CHECKING

from ..base.http import handle_unauthorized_or_generic_error, path_segment
from ..base.models import UnpaginatedList
from .models import Role

if TYPE_CHECKING:
    from ..workos import WorkOs


class Roles:
    def __init__(self, workos: "WorkOs") -> None:
        self._workos = workos

    def list_organization_roles(self, organization_id: str) -> UnpaginatedList[Role]:
        """Environment and organization roles available to ``organization_id``."""
        request = self._workos.build_request("GET", f"/organizations/{path_segment(organization_id)}/roles")
        response = handle_unauthorized_or_generic_error(self._workos.send(request))
        return response.json_model(UnpaginatedList[Role])


__all__ = ["Roles"]
