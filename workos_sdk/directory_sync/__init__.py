"""Directory Sync resource."""

from .client import DirectorySync
from .models import Directory, DirectoryUser

__all__ = ["DirectorySync", "Directory", "DirectoryUser"]
