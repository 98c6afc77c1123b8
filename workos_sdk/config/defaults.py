"""workos_sdk.config.defaults
==========================

Central place for small, stable default values used across the client.
These defaults can be overridden via environment variables or builder
arguments, but provide sensible fallbacks for local development and tests.

This module intentionally avoids importing from other ``workos_sdk``
packages to prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Client identity ----
SDK_VERSION = "0.1.0"
# Product/version string advertised on every request.
USER_AGENT = f"workos-python/{SDK_VERSION}"

# ---- HTTP layer ----
WORKOS_DEFAULT_BASE_URL = "https://api.workos.com"
# Baseline per-request timeout handed to the transport (seconds).
WORKOS_DEFAULT_TIMEOUT_SECONDS = 30.0

# ---- Diagnostics ----
# Structured diagnostics are opt-in; the null sink is used otherwise.
WORKOS_DEFAULT_DIAGNOSTICS = False
# Level of the shared logger when it is first set up.
WORKOS_DEFAULT_LOG_LEVEL = "INFO"
# Largest body preview (in UTF-8 bytes) that appears in logs or error messages.
MAX_BODY_LOG_BYTES = 8 * 1024


__all__ = [
    "SDK_VERSION",
    "USER_AGENT",
    "WORKOS_DEFAULT_BASE_URL",
    "WORKOS_DEFAULT_TIMEOUT_SECONDS",
    "WORKOS_DEFAULT_DIAGNOSTICS",
    "WORKOS_DEFAULT_LOG_LEVEL",
    "MAX_BODY_LOG_BYTES",
]
