"""Invalid IP address supplied in request parameters."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode
from .workos_error import WorkOsError


@dataclass(eq=False)
class IpAddrParseError(WorkOsError):
    message: str = "IP address parse error"
    code: ErrorCode = ErrorCode.IP_ADDR_PARSE
    value: Optional[str] = None


__all__ = ["IpAddrParseError"]
