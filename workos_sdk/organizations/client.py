"""Organizations API (``/organizations``)."""
from __future__ import annotations

from typing import TYPE_CHECKING

from ..base.http import handle_unauthorized_or_generic_error, path_segment
from .models import CreateOrganizationParams, Organization, UpdateOrganizationParams

if TYPE_CHECKING:
    from ..workos import WorkOs


class Organizations:
    """Create, read, update and delete organizations."""

    def __init__(self, workos: "WorkOs") -> None:
        self._workos = workos

    def create_organization(self, params: CreateOrganizationParams) -> Organization:
        request = self._workos.build_request("POST", "/organizations", json=params.to_body())
        response = handle_unauthorized_or_generic_error(self._workos.send(request))
        return response.json_model(Organization)

    def get_organization(self, organization_id: str) -> Organization:
        request = self._workos.build_request("GET", f"/organizations/{path_segment(organization_id)}")
        response = handle_unauthorized_or_generic_error(self._workos.send(request))
        return response.json_model(Organization)

    def update_organization(self, params: UpdateOrganizationParams) -> Organization:
        request = self._workos.build_request(
            "PUT",
            f"/organizations/{path_segment(params.organization_id)}",
            json=params.to_body(),
        )
        response = handle_unauthorized_or_generic_error(self._workos.send(request))
        return response.json_model(Organization)

    def update_external_id(self, organization_id: str, external_id: str) -> Organization:
        """Set only the ``external_id`` of an organization."""
        request = self._workos.build_request(
            "PUT",
            f"/organizations/{path_segment(organization_id)}",
            json={"external_id": external_id},
        )
        response = handle_unauthorized_or_generic_error(self._workos.send(request))
        return response.json_model(Organization)

    def delete_organization(self, organization_id: str) -> None:
        request = self._workos.build_request("DELETE", f"/organizations/{path_segment(organization_id)}")
        handle_unauthorized_or_generic_error(self._workos.send(request)).close()


__all__ = ["Organizations"]
