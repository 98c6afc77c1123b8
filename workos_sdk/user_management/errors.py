"""Structured error bodies decoded by User Management endpoints.

Each model is carried as ``OperationError.error`` when its endpoint
recognizes the status. ``str()`` renders the ``code: message`` pair.
"""
from __future__ import annotations

from typing import List, Literal, Optional, Union

from pydantic import Field, TypeAdapter

from ..base.models import WorkOsModel
from ..mfa.models import AuthenticationFactorIdAndType
from ..organizations.models import OrganizationIdAndName
from .models import User


class _CodedError(WorkOsModel):
    code: str
    message: str

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class CreatePasswordResetError(_CodedError):
    """404 from ``POST /user_management/password_reset``."""

    code: Literal["entity_not_found"]
    entity_id: str


class PasswordResetIssue(_CodedError):
    """One entry of ``ResetPasswordError.errors`` (expired token, weak password)."""

    suggestions: Optional[List[str]] = None
    warning: Optional[str] = None


class ResetPasswordError(_CodedError):
    code: Literal["password_reset_token_not_found", "password_reset_error"]
    errors: List[PasswordResetIssue] = Field(default_factory=list)


class EnrollAuthFactorError(_CodedError):
    pass


class AuthenticateErrorWithCode(_CodedError):
    """Authenticate failure tagged by ``code``.

    Continuation fields are populated depending on the code, e.g.
    ``email_verification_required`` carries ``pending_authentication_token``
    and ``email_verification_id``; ``mfa_challenge`` carries
    ``authentication_factors``.
    """

    pending_authentication_token: Optional[str] = None
    email: Optional[str] = None
    email_verification_id: Optional[str] = None
    user: Optional[User] = None
    authentication_factors: Optional[List[AuthenticationFactorIdAndType]] = None
    organizations: Optional[List[OrganizationIdAndName]] = None


class AuthenticateErrorWithError(WorkOsModel):
    """Authenticate failure in OAuth form (``error`` / ``error_description``)."""

    error: str
    error_description: str
    email: Optional[str] = None
    sso_connection_ids: Optional[List[str]] = None
    pending_authentication_token: Optional[str] = None

    def __str__(self) -> str:
        return f"{self.error}: {self.error_description}"


AuthenticateError = Union[AuthenticateErrorWithCode, AuthenticateErrorWithError]

_AUTHENTICATE_ERROR = TypeAdapter(AuthenticateError)


def decode_authenticate_error(payload: object) -> AuthenticateError:
    return _AUTHENTICATE_ERROR.validate_python(payload)


__all__ = [
    "CreatePasswordResetError",
    "PasswordResetIssue",
    "ResetPasswordError",
    "EnrollAuthFactorError",
    "AuthenticateErrorWithCode",
    "AuthenticateErrorWithError",
    "AuthenticateError",
    "decode_authenticate_error",
]
