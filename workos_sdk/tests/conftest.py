"""Pytest configuration for the WorkOS client test suite.

Every test runs with the ``WORKOS_*`` environment cleared and the shared
client pool emptied afterwards, so configuration never leaks between tests.
Wire traffic goes through ``httpx.MockTransport``; nothing touches the
network.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Optional, Tuple

import httpx
import pytest

from workos_sdk import WorkOs
from workos_sdk.base.http import close_all_clients
from workos_sdk.config.env import ENV_ALIASES, ENV_MAP

API_KEY = "sk_example_123456789"  # pragma: allowlist secret - test fixture value


class RecordingDiagnostics:
    """Diagnostics sink that keeps ``(hook, args)`` for every record."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, Tuple[Any, ...]]] = []

    def hooks(self) -> List[str]:
        return [name for name, _ in self.records]

    def last(self, hook: str) -> Tuple[Any, ...]:
        for name, args in reversed(self.records):
            if name == hook:
                return args
        raise AssertionError(f"no {hook!r} record in {self.hooks()}")

    def __getattr__(self, hook: str) -> Callable[..., None]:
        if hook.startswith("_"):
            raise AttributeError(hook)

        def record(*args: Any) -> None:
            self.records.append((hook, args))

        return record


class FailingStream(httpx.SyncByteStream):
    """Response body whose first read fails, as if the connection dropped."""

    def __init__(self) -> None:
        self.iterated = False

    def __iter__(self) -> Iterator[bytes]:
        self.iterated = True
        raise httpx.ReadError("connection reset while reading body")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear every ``WORKOS_*`` variable the config layer reads."""

    names = set(ENV_MAP.values())
    for aliases in ENV_ALIASES.values():
        names.update(aliases)
    for name in names:
        monkeypatch.delenv(name, raising=False)
    yield
    close_all_clients()


@pytest.fixture()
def recorder() -> RecordingDiagnostics:
    return RecordingDiagnostics()


@pytest.fixture()
def failing_stream() -> FailingStream:
    return FailingStream()


@pytest.fixture()
def make_workos(recorder: RecordingDiagnostics) -> Callable[..., WorkOs]:
    """Build a ``WorkOs`` whose transport is the given request handler."""

    def factory(
        handler: Callable[[httpx.Request], httpx.Response],
        *,
        base_url: str = "https://api.workos.test",
        diagnostics: Optional[Any] = None,
    ) -> WorkOs:
        return (
            WorkOs.builder(API_KEY)
            .base_url(base_url)
            .diagnostics(diagnostics if diagnostics is not None else recorder)
            .transport(httpx.MockTransport(handler))
            .build()
        )

    return factory
