"""Transport error diagnostics: cause chain, category flags, and hints.

Used only to enrich the "request failed" diagnostic; nothing here drives
control flow.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

import httpx

# (hint, substrings) checked in priority order against the lowercased,
# " | "-joined messages of the error and its causes.
_HINT_PATTERNS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    (
        "DNS resolution failed for the WorkOS endpoint",
        (
            "dns error",
            "failed to lookup address information",
            "failed to resolve",
            "name or service not known",
            "temporary failure in name resolution",
            "nodename nor servname",
            "getaddrinfo failed",
        ),
    ),
    (
        "Remote host refused the TCP connection",
        ("connection refused",),
    ),
    (
        "TLS certificate verification failed; ensure the trust store is available",
        ("certificate verify failed", "unable to get local issuer certificate"),
    ),
    (
        "OpenSSL certificate store loader is unavailable; check OpenSSL providers/config",
        ("ossl_store_get0_loader_int", "unregistered scheme"),
    ),
)

TIMEOUT_HINT = "Connection timed out while contacting WorkOS"


def _next_cause(exc: BaseException) -> Optional[BaseException]:
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__context__ is not None and not exc.__suppress_context__:
        return exc.__context__
    return None


def collect_error_chain(err: BaseException) -> List[str]:
    """Return the messages of ``err``'s causes, outermost first.

    ``err`` itself is not included. Consecutive duplicate messages are
    collapsed and the walk stops if the chain loops back on itself.
    """
    chain: List[str] = []
    seen = {id(err)}
    current = _next_cause(err)
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        text = str(current) or type(current).__name__
        if not chain or chain[-1] != text:
            chain.append(text)
        current = _next_cause(current)
    return chain


def derive_error_hint(err: BaseException, chain: Sequence[str]) -> Optional[str]:
    """Return at most one human-readable hint for a transport failure.

    Priority: timeout, DNS failure, connection refused, TLS verification,
    TLS store/provider unavailable. ``None`` when nothing matches.
    """
    messages = [str(err), *chain]
    combined = " | ".join(messages).lower()

    if isinstance(err, httpx.TimeoutException) or "timed out" in combined:
        return TIMEOUT_HINT
    for hint, needles in _HINT_PATTERNS:
        if any(needle in combined for needle in needles):
            return hint
    return None


def error_flags(err: BaseException) -> Dict[str, bool]:
    """Category flags describing a transport exception."""
    return {
        "error_is_timeout": isinstance(err, httpx.TimeoutException),
        "error_is_request": isinstance(err, httpx.RequestError),
        "error_is_connect": isinstance(err, (httpx.ConnectError, httpx.ConnectTimeout)),
        "error_is_body": isinstance(err, (httpx.ReadError, httpx.WriteError, httpx.StreamError)),
        "error_is_decode": isinstance(err, httpx.DecodingError),
        "error_is_builder": isinstance(err, (httpx.UnsupportedProtocol, httpx.InvalidURL, httpx.LocalProtocolError)),
    }


__all__ = [
    "TIMEOUT_HINT",
    "collect_error_chain",
    "derive_error_hint",
    "error_flags",
]
