"""Unit tests for environment mapping and the merged client configuration."""
from __future__ import annotations

import pytest

from workos_sdk import UrlParseError, WorkOs
from workos_sdk.base.diagnostics import LoggingDiagnostics, NullDiagnostics
from workos_sdk.config import DEFAULTS, get_client_config
from workos_sdk.config.defaults import WORKOS_DEFAULT_BASE_URL, WORKOS_DEFAULT_TIMEOUT_SECONDS
from workos_sdk.config.env import (
    ENV_MAP,
    get_env_var_candidates,
    is_placeholder,
    parse_bool,
    parse_positive_float,
    resolve_env_value,
)


def test_env_map_contains_expected_settings():
    assert ENV_MAP["api_key"] == "WORKOS_API_KEY"  # pragma: allowlist secret
    for setting in ("base_url", "timeout", "diagnostics", "log_level"):
        assert ENV_MAP[setting].startswith("WORKOS_")


def test_candidates_canonical_first_then_alias():
    assert list(get_env_var_candidates("api_key")) == ["WORKOS_API_KEY", "WORKOS_SECRET_KEY"]
    assert list(get_env_var_candidates("unknown")) == []


def test_alias_is_used_when_canonical_missing(monkeypatch):
    monkeypatch.setenv("WORKOS_SECRET_KEY", "sk_alias")
    assert resolve_env_value("api_key") == ("sk_alias", "WORKOS_SECRET_KEY")
    monkeypatch.setenv("WORKOS_API_KEY", "sk_canonical")
    assert resolve_env_value("api_key") == ("sk_canonical", "WORKOS_API_KEY")


def test_blank_values_count_as_unset(monkeypatch):
    monkeypatch.setenv("WORKOS_BASE_URL", "   ")
    assert resolve_env_value("base_url") == (None, None)


def test_is_placeholder_heuristics():
    assert is_placeholder("placeholder-value")
    assert is_placeholder("ChangeMe123")
    assert is_placeholder(" your_api_key ")
    assert not is_placeholder("sk_live_abc")
    assert not is_placeholder(None)


def test_parsers():
    assert parse_bool("YES") is True
    assert parse_bool("off") is False
    assert parse_bool("maybe") is None
    assert parse_bool(None) is None
    assert parse_positive_float("2.5") == 2.5
    assert parse_positive_float("0") is None
    assert parse_positive_float("abc") is None
    assert parse_positive_float(None) is None


def test_defaults_when_environment_is_empty():
    cfg = get_client_config()
    assert cfg == DEFAULTS
    assert cfg["base_url"] == WORKOS_DEFAULT_BASE_URL
    assert cfg["timeout"] == WORKOS_DEFAULT_TIMEOUT_SECONDS


def test_environment_then_overrides(monkeypatch):
    monkeypatch.setenv("WORKOS_API_KEY", "sk_env")
    monkeypatch.setenv("WORKOS_BASE_URL", "https://env.workos.test")
    monkeypatch.setenv("WORKOS_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("WORKOS_DIAGNOSTICS", "true")

    cfg = get_client_config({"base_url": "https://override.workos.test", "timeout": None})
    assert cfg["api_key"] == "sk_env"
    assert cfg["base_url"] == "https://override.workos.test"
    assert cfg["timeout"] == 5.0
    assert cfg["diagnostics"] is True


def test_log_level_is_unset_unless_environment_provides_it(monkeypatch):
    assert get_client_config()["log_level"] is None
    monkeypatch.setenv("WORKOS_LOG_LEVEL", "debug")
    assert get_client_config()["log_level"] == "debug"


def test_placeholder_key_in_environment_is_ignored(monkeypatch):
    monkeypatch.setenv("WORKOS_API_KEY", "changeme")
    assert get_client_config()["api_key"] is None


def test_from_env_builds_client(monkeypatch):
    monkeypatch.setenv("WORKOS_API_KEY", "sk_env")
    monkeypatch.setenv("WORKOS_BASE_URL", "https://env.workos.test/")
    monkeypatch.setenv("WORKOS_DIAGNOSTICS", "1")
    workos = WorkOs.from_env()
    assert str(workos.key) == "sk_env"
    assert str(workos.base_url) == "https://env.workos.test/"
    assert isinstance(workos.diagnostics, LoggingDiagnostics)


def test_diagnostics_default_to_null_sink():
    workos = WorkOs("sk_test")
    assert isinstance(workos.diagnostics, NullDiagnostics)


def test_missing_key_is_rejected():
    with pytest.raises(ValueError, match="API key"):
        WorkOs()


@pytest.mark.parametrize("base_url", ["not a url", "/relative/path", "ftp://files.workos.test"])
def test_invalid_base_url_is_rejected(base_url):
    with pytest.raises(UrlParseError):
        WorkOs("sk_test", base_url=base_url)
    with pytest.raises(UrlParseError):
        WorkOs.builder("sk_test").base_url(base_url)


def test_builder_sets_every_option():
    sink = NullDiagnostics()
    workos = WorkOs.builder("sk_one").key("sk_two").base_url("https://b.workos.test").timeout(3).diagnostics(sink).build()
    assert str(workos.key) == "sk_two"
    assert workos.timeout == 3.0
    assert workos.diagnostics is sink


def test_builder_rejects_non_positive_timeout():
    with pytest.raises(ValueError):
        WorkOs.builder("sk_test").timeout(0)
