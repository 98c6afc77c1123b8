"""Organizations resource."""

from .client import Organizations
from .models import (
    CreateOrganizationParams,
    DomainData,
    DomainDataState,
    Organization,
    OrganizationDomain,
    OrganizationIdAndName,
    UpdateOrganizationParams,
)

__all__ = [
    "Organizations",
    "CreateOrganizationParams",
    "DomainData",
    "DomainDataState",
    "Organization",
    "OrganizationDomain",
    "OrganizationIdAndName",
    "UpdateOrganizationParams",
]
