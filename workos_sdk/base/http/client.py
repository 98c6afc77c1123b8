"""Shared HTTP client pool for the WorkOS client.

Purpose:
    Provide a centralized, thread-safe pool of reusable ``httpx.Client``
    instances so every ``WorkOs`` handle built with the same transport
    settings shares one connection pool.

External dependencies:
    - ``httpx`` for the underlying synchronous HTTP client.

Lifecycle & cleanup:
    - Clients are cached by ``(timeout, purpose)``. Base URL and API key are
      not part of the key: requests are always built with absolute URLs and
      explicit headers, so the pooled client carries no per-tenant state.
    - Clients built around a caller-supplied transport (tests, proxies) are
      never pooled.
    - All pooled clients are closed at interpreter exit via ``atexit``.
      Tests may also call :func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import contextlib
import threading
from typing import Dict, Optional, Tuple

import httpx

from ...config.defaults import USER_AGENT

_CLIENTS: Dict[Tuple[float, str], httpx.Client] = {}
_LOCK = threading.RLock()


def build_httpx_client(timeout: float, transport: Optional[httpx.BaseTransport] = None) -> httpx.Client:
    """Return a new ``httpx.Client`` advertising the SDK ``User-Agent``."""
    kwargs = {"timeout": timeout, "headers": {"User-Agent": USER_AGENT}}
    if transport is not None:
        kwargs["transport"] = transport
    return httpx.Client(**kwargs)


def get_httpx_client(timeout: float, purpose: str = "workos") -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given timeout and purpose.

    The first request for a key creates the client; subsequent requests reuse
    the same instance. Safe for concurrent use; per-key creation is guarded by
    a re-entrant lock.
    """
    key = (float(timeout), purpose)
    client = _CLIENTS.get(key)
    if client is not None and not client.is_closed:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None and not client.is_closed:
            return client
        client = build_httpx_client(timeout)
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        clients = list(_CLIENTS.values())
        _CLIENTS.clear()
    for client in clients:
        with contextlib.suppress(Exception):
            client.close()


def _cleanup_at_exit() -> None:
    """atexit hook to ensure clients are closed on interpreter exit."""
    close_all_clients()


atexit.register(_cleanup_at_exit)

__all__ = ["build_httpx_client", "get_httpx_client", "close_all_clients"]
