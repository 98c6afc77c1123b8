"""Admin Portal API."""
from __future__ import annotations

from typing import TYPE_CHECKING

from ..base.http import handle_unauthorized_or_generic_error
from .models import GeneratePortalLinkParams, GeneratePortalLinkResponse

if TYPE_CHECKING:
    from ..workos import WorkOs


class AdminPortal:
    def __init__(self, workos: "WorkOs") -> None:
        self._workos = workos

    def generate_portal_link(self, params: GeneratePortalLinkParams) -> GeneratePortalLinkResponse:
        """Create a short-lived Admin Portal link for an organization."""
        request = self._workos.build_request("POST", "/portal/generate_link", json=params.to_body())
        response = handle_unauthorized_or_generic_error(self._workos.send(request))
        return response.json_model(GeneratePortalLinkResponse)


__all__ = ["AdminPortal"]
