"""Organization resources and request parameters."""
from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import Field

from ..base.models import Metadata, WorkOsModel, WorkOsParams


class DomainDataState(str, Enum):
    PENDING = "pending"
    VERIFIED = "verified"


class DomainData(WorkOsParams):
    """A domain to associate with an organization."""

    domain: str
    state: DomainDataState


class OrganizationDomain(WorkOsModel):
    id: str
    domain: str


class Organization(WorkOsModel):
    """A WorkOS organization.

    Only identifying fields are declared; timestamps, metadata and any
    newer fields remain available as extra attributes.
    """

    id: str
    name: str
    external_id: Optional[str] = None
    allow_profiles_outside_organization: bool = False
    domains: List[OrganizationDomain] = Field(default_factory=list)


class OrganizationIdAndName(WorkOsModel):
    id: str
    name: str


class CreateOrganizationParams(WorkOsParams):
    name: str
    domain_data: List[DomainData] = Field(default_factory=list)
    external_id: Optional[str] = None
    metadata: Optional[Metadata] = None


class UpdateOrganizationParams(WorkOsParams):
    """Fields to change; the organization id travels in the path."""

    organization_id: str = Field(exclude=True)
    name: Optional[str] = None
    domain_data: Optional[List[DomainData]] = None
    stripe_customer_id: Optional[str] = None
    external_id: Optional[str] = None
    metadata: Optional[Metadata] = None


__all__ = [
    "DomainDataState",
    "DomainData",
    "OrganizationDomain",
    "Organization",
    "OrganizationIdAndName",
    "CreateOrganizationParams",
    "UpdateOrganizationParams",
]
