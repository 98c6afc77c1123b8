"""User Management resource: users, memberships, password resets and authentication."""

from .client import UserManagement
from .errors import (
    AuthenticateError,
    AuthenticateErrorWithCode,
    AuthenticateErrorWithError,
    CreatePasswordResetError,
    EnrollAuthFactorError,
    PasswordResetIssue,
    ResetPasswordError,
)
from .models import (
    AuthenticateWithCodeParams,
    AuthenticateWithEmailVerificationParams,
    AuthenticateWithMagicAuthParams,
    AuthenticateWithPasswordParams,
    AuthenticationMethod,
    AuthenticationResponse,
    CreateMagicAuthParams,
    CreateOrganizationMembershipParams,
    CreatePasswordResetParams,
    CreateUserParams,
    EmailVerification,
    EnrollAuthFactorParams,
    EnrollAuthFactorResponse,
    Identity,
    Impersonator,
    ListOrganizationMembershipsParams,
    ListUsersParams,
    MagicAuth,
    OrganizationMembership,
    OrganizationMembershipStatus,
    PasswordHashType,
    PasswordReset,
    ResetPasswordParams,
    ResetPasswordResponse,
    UpdateUserParams,
    User,
)

__all__ = [
    "UserManagement",
    "AuthenticateError",
    "AuthenticateErrorWithCode",
    "AuthenticateErrorWithError",
    "CreatePasswordResetError",
    "EnrollAuthFactorError",
    "PasswordResetIssue",
    "ResetPasswordError",
    "AuthenticateWithCodeParams",
    "AuthenticateWithEmailVerificationParams",
    "AuthenticateWithMagicAuthParams",
    "AuthenticateWithPasswordParams",
    "AuthenticationMethod",
    "AuthenticationResponse",
    "CreateMagicAuthParams",
    "CreateOrganizationMembershipParams",
    "CreatePasswordResetParams",
    "CreateUserParams",
    "EmailVerification",
    "EnrollAuthFactorParams",
    "EnrollAuthFactorResponse",
    "Identity",
    "Impersonator",
    "ListOrganizationMembershipsParams",
    "ListUsersParams",
    "MagicAuth",
    "OrganizationMembership",
    "OrganizationMembershipStatus",
    "PasswordHashType",
    "PasswordReset",
    "ResetPasswordParams",
    "ResetPasswordResponse",
    "UpdateUserParams",
    "User",
]
