"""
API key value type.

An opaque secret supplied at client construction. Behaves like ``str`` on
the wire but never reveals itself in ``repr`` so it stays out of logs and
tracebacks.
"""
from __future__ import annotations


class ApiKey(str):
    """WorkOS secret API key (``sk_...``)."""

    def __repr__(self) -> str:
        visible = self[:7] if len(self) > 12 else ""
        return f"ApiKey('{visible}…')"

    def bearer(self) -> str:
        """Value for the ``Authorization`` header."""
        return f"Bearer {self}"


__all__ = ["ApiKey"]
