# tests/test_config.py

"""
Config resolution tests

Targets: check_cdap/config.py

What we verify:
1) flags win over CHECK_CDAP_* env values; env fills the gaps.
2) default timeout is 30 seconds.
3) URI normalisation (scheme default, trailing slash).
4) missing URI / bad timeout raise ConfigError (reported as UNKNOWN).
"""

import pytest

from check_cdap.config import DEFAULT_TIMEOUT, load_config
from check_cdap.errors import ConfigError
from check_cdap.models import NagiosState


def test_defaults_from_flags_only():
    cfg = load_config(uri="https://cdap.test:10443")
    assert cfg.uri == "https://cdap.test:10443"
    assert cfg.timeout == DEFAULT_TIMEOUT == 30
    assert cfg.token is None
    assert cfg.insecure is False


def test_env_fallbacks(monkeypatch):
    monkeypatch.setenv("CHECK_CDAP_URI", "http://env-host:11015")
    monkeypatch.setenv("CHECK_CDAP_TIMEOUT", "7.5")
    monkeypatch.setenv("CHECK_CDAP_TOKEN", "env-token")

    cfg = load_config()
    assert cfg.uri == "http://env-host:11015"
    assert cfg.timeout == 7.5
    assert cfg.token == "env-token"


def test_flags_override_env(monkeypatch):
    monkeypatch.setenv("CHECK_CDAP_URI", "http://env-host:11015")
    monkeypatch.setenv("CHECK_CDAP_TIMEOUT", "7")
    monkeypatch.setenv("CHECK_CDAP_TOKEN", "env-token")

    cfg = load_config(uri="http://flag-host:11015", timeout="3", token="flag-token")
    assert cfg.uri == "http://flag-host:11015"
    assert cfg.timeout == 3
    assert cfg.token == "flag-token"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("cdap.test:11015", "http://cdap.test:11015"),
        ("http://cdap.test:11015/", "http://cdap.test:11015"),
        ("  https://cdap.test//  ", "https://cdap.test"),
    ],
)
def test_uri_normalisation(raw, expected):
    assert load_config(uri=raw).uri == expected


def test_blank_token_counts_as_no_token():
    assert load_config(uri="http://cdap.test", token="  ").token is None


@pytest.mark.parametrize("uri", [None, "", "   "])
def test_missing_uri_is_unknown(uri):
    with pytest.raises(ConfigError) as ei:
        load_config(uri=uri)
    assert ei.value.state == NagiosState.UNKNOWN
    assert "CHECK_CDAP_URI" in str(ei.value)


@pytest.mark.parametrize("timeout", ["abc", "0", "-5", "nan"])
def test_bad_timeout_is_config_error(timeout):
    with pytest.raises(ConfigError) as ei:
        load_config(uri="http://cdap.test", timeout=timeout)
    assert "timeout" in str(ei.value)


def test_empty_env_timeout_uses_default(monkeypatch):
    monkeypatch.setenv("CHECK_CDAP_TIMEOUT", "")
    assert load_config(uri="http://cdap.test").timeout == DEFAULT_TIMEOUT
