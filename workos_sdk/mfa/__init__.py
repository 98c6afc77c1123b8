"""MFA value types shared with User Management."""

from .models import (
    AuthenticationChallenge,
    AuthenticationFactor,
    AuthenticationFactorIdAndType,
    AuthenticationFactorTypeString,
    SmsFactor,
    TotpFactor,
)

__all__ = [
    "AuthenticationChallenge",
    "AuthenticationFactor",
    "AuthenticationFactorIdAndType",
    "AuthenticationFactorTypeString",
    "SmsFactor",
    "TotpFactor",
]
