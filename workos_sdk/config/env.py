"""workos_sdk.config.env
======================

Centralized environment variable mapping and helpers for client settings.

Purpose
-------
- Provide a single source of truth for the environment variable names the
  client understands (canonical and aliases).
- Offer small utilities to read those values in a consistent way.

Failure Modes
-------------
- Helpers never raise on unset or malformed variables; they return ``None``
  and let the caller fall back to defaults.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

# Client setting -> canonical env var
ENV_MAP: Dict[str, str] = {
    "api_key": "WORKOS_API_KEY",  # pragma: allowlist secret - env var name, not a secret
    "base_url": "WORKOS_BASE_URL",
    "timeout": "WORKOS_TIMEOUT_SECONDS",
    "diagnostics": "WORKOS_DIAGNOSTICS",
    "log_level": "WORKOS_LOG_LEVEL",
}

# Setting -> ordered tuple of acceptable env var names (canonical first)
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "api_key": ("WORKOS_API_KEY", "WORKOS_SECRET_KEY"),
}

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme' or 'your_api_key'. The
    check is case-insensitive and resilient to surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or "your_api_key" in v


def get_env_var_candidates(setting: str) -> Iterable[str]:
    """Yield acceptable environment variable names for a setting.

    The canonical name is yielded first, followed by any aliases.
    """
    s = (setting or "").lower()
    canonical = ENV_MAP.get(s)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(s, ()):  # pragma: no branch - small tuples
        if alias != canonical:
            yield alias


def resolve_env_value(setting: str) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(value, env_var_used)`` for the first non-empty candidate.

    ``(None, None)`` when nothing is set.
    """
    for name in get_env_var_candidates(setting):
        if val := os.environ.get(name, "").strip():
            return val, name
    return None, None


def parse_bool(raw: Optional[str]) -> Optional[bool]:
    """Parse common boolean spellings; ``None`` for unset or unknown values."""
    if raw is None:
        return None
    v = raw.strip().lower()
    if v in _TRUTHY:
        return True
    if v in _FALSY:
        return False
    return None


def parse_positive_float(raw: Optional[str]) -> Optional[float]:
    """Parse a strictly positive float; ``None`` when unset or invalid."""
    if not raw:
        return None
    try:
        val = float(raw)
    except ValueError:
        return None
    return val if val > 0 else None


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "is_placeholder",
    "get_env_var_candidates",
    "resolve_env_value",
    "parse_bool",
    "parse_positive_float",
]
