"""Directory Sync API (``/directories``, ``/directory_users``)."""
from __future__ import annotations

from typing import TYPE_CHECKING

from ..base.http import handle_unauthorized_or_generic_error, path_segment
from .models import Directory, DirectoryUser

if TYPE_CHECKING:
    from ..workos import WorkOs


class DirectorySync:
    def __init__(self, workos: "WorkOs") -> None:
        self._workos = workos

    def get_directory(self, directory_id: str) -> Directory:
        request = self._workos.build_request("GET", f"/directories/{path_segment(directory_id)}")
        response = handle_unauthorized_or_generic_error(self._workos.send(request))
        return response.json_model(Directory)

    def get_directory_user(self, directory_user_id: str) -> DirectoryUser:
        request = self._workos.build_request("GET", f"/directory_users/{path_segment(directory_user_id)}")
        response = handle_unauthorized_or_generic_error(self._workos.send(request))
        return response.json_model(DirectoryUser)

    def delete_directory(self, directory_id: str) -> None:
        request = self._workos.build_request("DELETE", f"/directories/{path_segment(directory_id)}")
        handle_unauthorized_or_generic_error(self._workos.send(request)).close()


__all__ = ["DirectorySync"]
