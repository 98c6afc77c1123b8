"""Structured logging context object for HTTP diagnostics.

This module defines :class:`LogContext`, a dataclass carrying the common
fields of an HTTP diagnostic event (method, URL, status, elapsed time and
extra metadata). ``to_dict`` merges the ``extra`` mapping and prunes ``None``
values for clean structured output.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for HTTP logging events."""

    method: Optional[str] = None
    url: Optional[str] = None
    status: Optional[int] = None
    elapsed_ms: Optional[int] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
