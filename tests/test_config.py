import pytest

from ann_helper.config import AnnConfig, DEFAULT_BASE_URL, DEFAULT_TIMEOUT, UA, get_log_level


def test_from_env_defaults(monkeypatch):
    for var in ("ANN_BASE_URL", "ANN_TIMEOUT", "ANN_USER_AGENT"):
        monkeypatch.delenv(var, raising=False)
    cfg = AnnConfig.from_env()
    assert cfg == AnnConfig(DEFAULT_BASE_URL, DEFAULT_TIMEOUT, UA)


def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv("ANN_BASE_URL", "http://localhost:8080/enc/")
    monkeypatch.setenv("ANN_TIMEOUT", "2.5")
    monkeypatch.setenv("ANN_USER_AGENT", "me/2")
    cfg = AnnConfig.from_env()
    assert cfg.api_url == "http://localhost:8080/enc/api.xml"
    assert cfg.timeout == 2.5
    assert cfg.user_agent == "me/2"


@pytest.mark.parametrize("raw", ["fast", "-3", "0"])
def test_from_env_bad_timeout_falls_back(monkeypatch, raw):
    monkeypatch.setenv("ANN_TIMEOUT", raw)
    assert AnnConfig.from_env().timeout == DEFAULT_TIMEOUT


@pytest.mark.parametrize("raw, expected", [
    ("debug", "DEBUG"),
    ("", "INFO"),
    ("LOUD", "INFO"),
])
def test_get_log_level(monkeypatch, raw, expected):
    monkeypatch.setenv("ANN_LOG_LEVEL", raw)
    assert get_log_level() == expected
