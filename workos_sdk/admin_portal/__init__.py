"""Admin Portal resource."""

from .client import AdminPortal
from .models import AdminPortalIntent, GeneratePortalLinkParams, GeneratePortalLinkResponse

__all__ = ["AdminPortal", "AdminPortalIntent", "GeneratePortalLinkParams", "GeneratePortalLinkResponse"]
