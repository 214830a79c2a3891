from __future__ import annotations

import logging

import pytest

from python_provision import Settings
from python_provision._config import (
    DEFAULT_INDEX_URL,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_WAIT_ATTEMPTS,
    DEFAULT_WAIT_INTERVAL,
)


def test_defaults() -> None:
    settings = Settings.from_env({})
    assert settings == Settings()
    assert settings.index_url == DEFAULT_INDEX_URL == "https://pypi.org"
    assert settings.wait_interval == DEFAULT_WAIT_INTERVAL == 0.01
    assert settings.wait_attempts == DEFAULT_WAIT_ATTEMPTS == 1000


def test_from_env() -> None:
    settings = Settings.from_env({
        "PYTHON_PROVISION_INDEX_URL": "https://mirror.example.org/",
        "PYTHON_PROVISION_TIMEOUT": "3",
        "PYTHON_PROVISION_WAIT_INTERVAL": "0.5",
        "PYTHON_PROVISION_WAIT_ATTEMPTS": "20",
    })
    assert settings.index_url == "https://mirror.example.org"
    assert settings.request_timeout == 3.0
    assert settings.wait_interval == 0.5
    assert settings.wait_attempts == 20


def test_from_process_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYTHON_PROVISION_WAIT_ATTEMPTS", "7")
    assert Settings.from_env().wait_attempts == 7


def test_invalid_number_falls_back(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING)
    settings = Settings.from_env({"PYTHON_PROVISION_WAIT_ATTEMPTS": "many", "PYTHON_PROVISION_TIMEOUT": " "})
    assert settings.wait_attempts == DEFAULT_WAIT_ATTEMPTS
    assert settings.request_timeout == 30.0
    assert "PYTHON_PROVISION_WAIT_ATTEMPTS" in caplog.text


@pytest.mark.parametrize(
    ("key", "raw", "field", "default"),
    [
        pytest.param("PYTHON_PROVISION_WAIT_ATTEMPTS", "0", "wait_attempts", DEFAULT_WAIT_ATTEMPTS, id="zero-attempts"),
        pytest.param("PYTHON_PROVISION_WAIT_ATTEMPTS", "-3", "wait_attempts", DEFAULT_WAIT_ATTEMPTS, id="negative-attempts"),
        pytest.param("PYTHON_PROVISION_WAIT_INTERVAL", "-1", "wait_interval", DEFAULT_WAIT_INTERVAL, id="negative-interval"),
        pytest.param("PYTHON_PROVISION_WAIT_INTERVAL", "nan", "wait_interval", DEFAULT_WAIT_INTERVAL, id="nan-interval"),
        pytest.param("PYTHON_PROVISION_WAIT_INTERVAL", "inf", "wait_interval", DEFAULT_WAIT_INTERVAL, id="inf-interval"),
        pytest.param("PYTHON_PROVISION_TIMEOUT", "0", "request_timeout", DEFAULT_REQUEST_TIMEOUT, id="zero-timeout"),
        pytest.param("PYTHON_PROVISION_TIMEOUT", "nan", "request_timeout", DEFAULT_REQUEST_TIMEOUT, id="nan-timeout"),
    ],
)
def test_out_of_range_number_falls_back(
    caplog: pytest.LogCaptureFixture, key: str, raw: str, field: str, default: float
) -> None:
    caplog.set_level(logging.WARNING)
    settings = Settings.from_env({key: raw})
    assert getattr(settings, field) == default
    assert f"ignoring invalid value {raw!r} for {key}" in caplog.text


def test_zero_interval_is_allowed() -> None:
    assert Settings.from_env({"PYTHON_PROVISION_WAIT_INTERVAL": "0"}).wait_interval == 0.0


def test_cache_dir_is_not_a_setting() -> None:
    settings = Settings.from_env({"PYTHON_PROVISION_CACHE_DIR": "/somewhere"})
    assert settings == Settings()
    assert not hasattr(settings, "cache_dir")
