"""User Management resources and request parameters."""
from __future__ import annotations

import ipaddress
from enum import Enum
from typing import List, Optional

from pydantic import Field, RootModel, field_validator, model_validator

from ..base.errors import IpAddrParseError
from ..base.models import Metadata, PaginationParams, WorkOsModel, WorkOsParams
from ..mfa.models import AuthenticationChallenge, AuthenticationFactor
from ..roles.models import RoleSlugObject

# Resources


class User(WorkOsModel):
    id: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email_verified: bool = False
    profile_picture_url: Optional[str] = None
    last_sign_in_at: Optional[str] = None
    external_id: Optional[str] = None
    metadata: Optional[Metadata] = None


class Identity(WorkOsModel):
    """An identity linked to a user by an OAuth provider."""

    idp_id: str
    type: str
    provider: Optional[str] = None


class IdentityList(RootModel[List[Identity]]):
    pass


class Impersonator(WorkOsModel):
    email: str
    reason: Optional[str] = None


class MagicAuth(WorkOsModel):
    id: str
    user_id: str
    email: str
    expires_at: str
    code: str


class EmailVerification(WorkOsModel):
    id: str
    user_id: str
    email: str
    expires_at: str
    code: str


class PasswordReset(WorkOsModel):
    id: str
    user_id: str
    email: str
    password_reset_token: str
    password_reset_url: str
    expires_at: str
    created_at: str


class OrganizationMembershipStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"


class OrganizationMembership(WorkOsModel):
    id: str
    user_id: str
    organization_id: str
    role: RoleSlugObject
    status: OrganizationMembershipStatus


class AuthenticationMethod(str, Enum):
    SSO = "SSO"
    PASSWORD = "Password"
    PASSKEY = "Passkey"
    APPLE_OAUTH = "AppleOAuth"
    GITHUB_OAUTH = "GitHubOAuth"
    GOOGLE_OAUTH = "GoogleOAuth"
    MICROSOFT_OAUTH = "MicrosoftOAuth"
    MAGIC_AUTH = "MagicAuth"
    IMPERSONATION = "Impersonation"


class AuthenticationResponse(WorkOsModel):
    """Tokens and user returned by every ``authenticate_with_*`` call."""

    user: User
    organization_id: Optional[str] = None
    access_token: str
    refresh_token: str
    authentication_method: Optional[AuthenticationMethod] = None
    impersonator: Optional[Impersonator] = None


class ResetPasswordResponse(WorkOsModel):
    user: User


class EnrollAuthFactorResponse(WorkOsModel):
    challenge: AuthenticationChallenge
    factor: AuthenticationFactor


# Parameters


class PasswordHashType(str, Enum):
    BCRYPT = "bcrypt"
    SCRYPT = "scrypt"
    FIREBASE_SCRYPT = "firebase-scrypt"
    SSHA = "ssha"
    PBKDF2 = "pbkdf2"


class _UserFields(WorkOsParams):
    """Fields shared by user creation and update.

    A user's password is set either in clear text (``password``) or as a
    pre-computed hash (``password_hash`` plus ``password_hash_type``).
    """

    password: Optional[str] = None
    password_hash: Optional[str] = None
    password_hash_type: Optional[PasswordHashType] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email_verified: Optional[bool] = None
    external_id: Optional[str] = None
    metadata: Optional[Metadata] = None

    @model_validator(mode="after")
    def check_password(self):
        if self.password is not None and self.password_hash is not None:
            raise ValueError("set either password or password_hash, not both")
        if (self.password_hash is None) != (self.password_hash_type is None):
            raise ValueError("password_hash and password_hash_type must be set together")
        return self


class CreateUserParams(_UserFields):
    email: str


class UpdateUserParams(_UserFields):
    email: Optional[str] = None


class ListUsersParams(PaginationParams):
    email: Optional[str] = None
    organization_id: Optional[str] = None


class CreateMagicAuthParams(WorkOsParams):
    email: str
    invitation_token: Optional[str] = None


class CreatePasswordResetParams(WorkOsParams):
    email: str


class ResetPasswordParams(WorkOsParams):
    token: str
    new_password: str


class CreateOrganizationMembershipParams(WorkOsParams):
    user_id: str
    organization_id: str
    role_slug: Optional[str] = None


class ListOrganizationMembershipsParams(PaginationParams):
    organization_id: Optional[str] = None
    user_id: Optional[str] = None


class EnrollAuthFactorParams(WorkOsParams):
    """TOTP enrollment; the user id travels in the path."""

    user_id: str = Field(exclude=True)
    type: str = "totp"
    totp_issuer: Optional[str] = None
    totp_user: Optional[str] = None
    totp_secret: Optional[str] = None


class _AuthenticateParams(WorkOsParams):
    client_id: str
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None

    @field_validator("ip_address", mode="before")
    @classmethod
    def check_ip_address(cls, value):
        # IpAddrParseError is not a ValueError, so pydantic lets it through unwrapped.
        if value is None:
            return None
        try:
            return str(ipaddress.ip_address(value))
        except ValueError as exc:
            raise IpAddrParseError(f"IP address parse error: {exc}", value=str(value)) from exc


class AuthenticateWithPasswordParams(_AuthenticateParams):
    email: str
    password: str
    invitation_token: Optional[str] = None


class AuthenticateWithCodeParams(_AuthenticateParams):
    code: str
    code_verifier: Optional[str] = None
    invitation_token: Optional[str] = None


class AuthenticateWithMagicAuthParams(_AuthenticateParams):
    code: str
    email: str
    invitation_token: Optional[str] = None


class AuthenticateWithEmailVerificationParams(_AuthenticateParams):
    code: str
    pending_authentication_token: str


__all__ = [
    "User",
    "Identity",
    "IdentityList",
    "Impersonator",
    "MagicAuth",
    "EmailVerification",
    "PasswordReset",
    "OrganizationMembershipStatus",
    "OrganizationMembership",
    "AuthenticationMethod",
    "AuthenticationResponse",
    "ResetPasswordResponse",
    "EnrollAuthFactorResponse",
    "PasswordHashType",
    "CreateUserParams",
    "UpdateUserParams",
    "ListUsersParams",
    "CreateMagicAuthParams",
    "CreatePasswordResetParams",
    "ResetPasswordParams",
    "CreateOrganizationMembershipParams",
    "ListOrganizationMembershipsParams",
    "EnrollAuthFactorParams",
    "AuthenticateWithPasswordParams",
    "AuthenticateWithCodeParams",
    "AuthenticateWithMagicAuthParams",
    "AuthenticateWithEmailVerificationParams",
]
