"""User Management API (``/user_management``).

Most operations use the combined unauthorized/generic check. Password
resets, auth factor enrollment and the ``authenticate_with_*`` family decode
structured error bodies into :class:`OperationError`; see
:mod:`workos_sdk.user_management.handlers`.

The authenticate endpoints are not bearer-authenticated: the API key travels
in the body as ``client_secret`` next to ``client_id`` and ``grant_type``.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

from ..base.http import (
    TrackedResponse,
    handle_unauthorized_error,
    handle_unauthorized_or_generic_error,
    path_segment,
)
from ..base.models import PaginatedList, WorkOsParams
from .handlers import (
    handle_authenticate_error,
    handle_create_password_reset_error,
    handle_enroll_auth_factor_error,
    handle_reset_password_error,
)
from .models import (
    AuthenticateWithCodeParams,
    AuthenticateWithEmailVerificationParams,
    AuthenticateWithMagicAuthParams,
    AuthenticateWithPasswordParams,
    AuthenticationResponse,
    CreateMagicAuthParams,
    CreateOrganizationMembershipParams,
    CreatePasswordResetParams,
    CreateUserParams,
    EmailVerification,
    EnrollAuthFactorParams,
    EnrollAuthFactorResponse,
    Identity,
    IdentityList,
    ListOrganizationMembershipsParams,
    ListUsersParams,
    MagicAuth,
    OrganizationMembership,
    PasswordReset,
    ResetPasswordParams,
    ResetPasswordResponse,
    UpdateUserParams,
    User,
)

if TYPE_CHECKING:
    from ..workos import WorkOs

GRANT_TYPE_PASSWORD = "password"
GRANT_TYPE_AUTHORIZATION_CODE = "authorization_code"
GRANT_TYPE_MAGIC_AUTH = "urn:workos:oauth:grant-type:magic-auth:code"
GRANT_TYPE_EMAIL_VERIFICATION = "urn:workos:oauth:grant-type:email-verification:code"

_USERS = "/user_management/users"
_MEMBERSHIPS = "/user_management/organization_memberships"


class UserManagement:
    def __init__(self, workos: "WorkOs") -> None:
        self._workos = workos

    def _call(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> TrackedResponse:
        request = self._workos.build_request(method, path, json=json, params=params)
        return handle_unauthorized_or_generic_error(self._workos.send(request))

    # Users

    def get_user(self, user_id: str) -> User:
        return self._call("GET", f"{_USERS}/{path_segment(user_id)}").json_model(User)

    def list_users(self, params: Optional[ListUsersParams] = None) -> PaginatedList[User]:
        """One page of users, newest first unless ``params.order`` says otherwise."""
        query = (params or ListUsersParams()).to_query()
        return self._call("GET", _USERS, params=query).json_model(PaginatedList[User])

    def create_user(self, params: CreateUserParams) -> User:
        return self._call("POST", _USERS, json=params.to_body()).json_model(User)

    def update_user(self, user_id: str, params: UpdateUserParams) -> User:
        return self._call("PUT", f"{_USERS}/{path_segment(user_id)}", json=params.to_body()).json_model(User)

    def update_external_id(self, user_id: str, external_id: str) -> User:
        body = {"external_id": external_id}
        return self._call("PUT", f"{_USERS}/{path_segment(user_id)}", json=body).json_model(User)

    def delete_user(self, user_id: str) -> None:
        self._call("DELETE", f"{_USERS}/{path_segment(user_id)}").close()

    def get_user_identities(self, user_id: str) -> List[Identity]:
        response = self._call("GET", f"{_USERS}/{path_segment(user_id)}/identities")
        return response.json_model(IdentityList).root

    # Magic Auth, email verification, password reset

    def create_magic_auth(self, params: CreateMagicAuthParams) -> MagicAuth:
        return self._call("POST", "/user_management/magic_auth", json=params.to_body()).json_model(MagicAuth)

    def get_magic_auth(self, magic_auth_id: str) -> MagicAuth:
        return self._call("GET", f"/user_management/magic_auth/{path_segment(magic_auth_id)}").json_model(MagicAuth)

    def get_email_verification(self, email_verification_id: str) -> EmailVerification:
        path = f"/user_management/email_verification/{path_segment(email_verification_id)}"
        return self._call("GET", path).json_model(EmailVerification)

    def get_password_reset(self, password_reset_id: str) -> PasswordReset:
        path = f"/user_management/password_reset/{path_segment(password_reset_id)}"
        return self._call("GET", path).json_model(PasswordReset)

    def create_password_reset(self, params: CreatePasswordResetParams) -> PasswordReset:
        """Start a password reset.

        Raises:
            OperationError: 404 with a :class:`CreatePasswordResetError` body
                (no user with that email).
        """
        request = self._workos.build_request("POST", "/user_management/password_reset", json=params.to_body())
        response = handle_create_password_reset_error(handle_unauthorized_error(self._workos.send(request)))
        return response.json_model(PasswordReset)

    def reset_password(self, params: ResetPasswordParams) -> ResetPasswordResponse:
        """Complete a password reset with the emailed token.

        Raises:
            OperationError: 400/404 with a :class:`ResetPasswordError` body.
        """
        request = self._workos.build_request(
            "POST", "/user_management/password_reset/confirm", json=params.to_body()
        )
        response = handle_reset_password_error(handle_unauthorized_error(self._workos.send(request)))
        return response.json_model(ResetPasswordResponse)

    # Organization memberships

    def create_organization_membership(self, params: CreateOrganizationMembershipParams) -> OrganizationMembership:
        return self._call("POST", _MEMBERSHIPS, json=params.to_body()).json_model(OrganizationMembership)

    def list_organization_memberships(
        self, params: Optional[ListOrganizationMembershipsParams] = None
    ) -> PaginatedList[OrganizationMembership]:
        query = (params or ListOrganizationMembershipsParams()).to_query()
        return self._call("GET", _MEMBERSHIPS, params=query).json_model(PaginatedList[OrganizationMembership])

    def deactivate_organization_membership(self, membership_id: str) -> OrganizationMembership:
        path = f"{_MEMBERSHIPS}/{path_segment(membership_id)}/deactivate"
        return self._call("PUT", path).json_model(OrganizationMembership)

    # MFA

    def enroll_auth_factor(self, params: EnrollAuthFactorParams) -> EnrollAuthFactorResponse:
        """Enroll a TOTP factor for a user.

        Raises:
            OperationError: 400 with an :class:`EnrollAuthFactorError` body.
        """
        request = self._workos.build_request(
            "POST", f"{_USERS}/{path_segment(params.user_id)}/auth_factors", json=params.to_body()
        )
        response = handle_enroll_auth_factor_error(handle_unauthorized_error(self._workos.send(request)))
        return response.json_model(EnrollAuthFactorResponse)

    # Authentication

    def _authenticate(self, grant_type: str, params: WorkOsParams) -> AuthenticationResponse:
        body = {"client_secret": str(self._workos.key), "grant_type": grant_type, **params.to_body()}
        request = self._workos.build_request(
            "POST", "/user_management/authenticate", json=body, authenticated=False
        )
        response = handle_authenticate_error(self._workos.send(request))
        return response.json_model(AuthenticationResponse)

    def authenticate_with_password(self, params: AuthenticateWithPasswordParams) -> AuthenticationResponse:
        return self._authenticate(GRANT_TYPE_PASSWORD, params)

    def authenticate_with_code(self, params: AuthenticateWithCodeParams) -> AuthenticationResponse:
        """Exchange an authorization code (from AuthKit or SSO) for tokens."""
        return self._authenticate(GRANT_TYPE_AUTHORIZATION_CODE, params)

    def authenticate_with_magic_auth(self, params: AuthenticateWithMagicAuthParams) -> AuthenticationResponse:
        return self._authenticate(GRANT_TYPE_MAGIC_AUTH, params)

    def authenticate_with_email_verification(
        self, params: AuthenticateWithEmailVerificationParams
    ) -> AuthenticationResponse:
        """Finish a sign-in that stopped at ``email_verification_required``."""
        return self._authenticate(GRANT_TYPE_EMAIL_VERIFICATION, params)


__all__ = [
    "UserManagement",
    "GRANT_TYPE_PASSWORD",
    "GRANT_TYPE_AUTHORIZATION_CODE",
    "GRANT_TYPE_MAGIC_AUTH",
    "GRANT_TYPE_EMAIL_VERIFICATION",
]
