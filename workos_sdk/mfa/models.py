"""Multi-factor authentication resources."""
from __future__ import annotations

from enum import Enum
from typing import Optional

from ..base.models import WorkOsModel


class AuthenticationFactorTypeString(str, Enum):
    TOTP = "totp"
    SMS = "sms"


class AuthenticationFactorIdAndType(WorkOsModel):
    id: str
    type: AuthenticationFactorTypeString


class TotpFactor(WorkOsModel):
    """TOTP enrollment details (QR code, secret and provisioning URI)."""

    issuer: Optional[str] = None
    user: Optional[str] = None
    qr_code: Optional[str] = None
    secret: Optional[str] = None
    uri: Optional[str] = None


class SmsFactor(WorkOsModel):
    phone_number: str


class AuthenticationFactor(WorkOsModel):
    id: str
    type: AuthenticationFactorTypeString
    totp: Optional[TotpFactor] = None
    sms: Optional[SmsFactor] = None


class AuthenticationChallenge(WorkOsModel):
    id: str
    authentication_factor_id: str
    expires_at: Optional[str] = None


__all__ = [
    "AuthenticationFactorTypeString",
    "AuthenticationFactorIdAndType",
    "TotpFactor",
    "SmsFactor",
    "AuthenticationFactor",
    "AuthenticationChallenge",
]
