"""Roles resource."""

from .client import Roles
from .models import Role, RoleSlugObject, RoleType

__all__ = ["Roles", "Role", "RoleSlugObject", "RoleType"]
