"""Unified configuration layer for the WorkOS client.

Goals
-----
* Centralize defaults (base URL, timeout, diagnostics toggle).
* Merge sources in a predictable order:
    1. Built-in defaults
    2. Environment variables (``WORKOS_API_KEY``, ``WORKOS_BASE_URL``, ...)
    3. In-code overrides passed to the helper (``None`` values are ignored)
* Provide a single call site: ``get_client_config(overrides)``.

Public API
----------
* get_client_config(overrides: dict | None = None) -> dict
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from .defaults import (
    WORKOS_DEFAULT_BASE_URL,
    WORKOS_DEFAULT_DIAGNOSTICS,
    WORKOS_DEFAULT_TIMEOUT_SECONDS,
)
from .env import is_placeholder, parse_bool, parse_positive_float, resolve_env_value


DEFAULTS: Dict[str, Any] = {
    "api_key": None,
    "base_url": WORKOS_DEFAULT_BASE_URL,
    "timeout": WORKOS_DEFAULT_TIMEOUT_SECONDS,
    "diagnostics": WORKOS_DEFAULT_DIAGNOSTICS,
    # Unset unless WORKOS_LOG_LEVEL provides one; the logger keeps its own level otherwise.
    "log_level": None,
}


def _env_layer() -> Dict[str, Any]:
    """Collect settings present in the environment, coerced to their types."""
    layer: Dict[str, Any] = {}

    api_key, _ = resolve_env_value("api_key")
    if api_key and not is_placeholder(api_key):
        layer["api_key"] = api_key

    base_url, _ = resolve_env_value("base_url")
    if base_url:
        layer["base_url"] = base_url

    timeout = parse_positive_float(resolve_env_value("timeout")[0])
    if timeout is not None:
        layer["timeout"] = timeout

    diagnostics = parse_bool(resolve_env_value("diagnostics")[0])
    if diagnostics is not None:
        layer["diagnostics"] = diagnostics

    log_level, _ = resolve_env_value("log_level")
    if log_level:
        layer["log_level"] = log_level
    return layer


def get_client_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the merged client configuration.

    Later layers win: defaults < environment < ``overrides``. Override keys
    whose value is ``None`` are skipped so callers can pass optional
    arguments straight through.
    """
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg.update(_env_layer())
    if overrides:
        cfg.update({k: v for k, v in overrides.items() if v is not None})
    return cfg


__all__ = ["DEFAULTS", "get_client_config"]
