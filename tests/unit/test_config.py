"""
配置模块单元测试
"""

from __future__ import annotations

from argparse import Namespace

import pytest

from fa_query.config import Config
from fa_query.constants import DEFAULT_REQUEST_TIMEOUT, FLIGHTXML_WSDL
from fa_query.exceptions import ConfigurationError


def test_defaults() -> None:
    config = Config.from_env()

    assert config.wsdl_url == FLIGHTXML_WSDL
    assert config.request_timeout == DEFAULT_REQUEST_TIMEOUT
    assert config.log_level == "WARNING"
    assert config.log_format == "text"
    assert config.json_indent == 4


def test_values_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLIGHTXML_WSDL", "http://localhost:8080/FlightXML2.wsdl")
    monkeypatch.setenv("FLIGHTXML_TIMEOUT", "5")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "JSON")
    monkeypatch.setenv("JSON_INDENT", "2")

    config = Config.from_env()
    assert config.wsdl_url == "http://localhost:8080/FlightXML2.wsdl"
    assert config.request_timeout == 5.0
    assert config.log_level == "DEBUG"
    assert config.log_format == "json"
    assert config.json_indent == 2


@pytest.mark.parametrize("raw", ["abc", "0", "-3", "nan", "inf", "-inf"])
def test_invalid_timeout_raises(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("FLIGHTXML_TIMEOUT", raw)

    with pytest.raises(ConfigurationError):
        Config.from_env()


def test_invalid_log_format_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_FORMAT", "xml")

    with pytest.raises(ConfigurationError):
        Config.from_env()


def test_invalid_log_level_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "LOUD")

    with pytest.raises(ConfigurationError):
        Config.from_env()


def test_from_args_timeout_overrides_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLIGHTXML_TIMEOUT", "5")

    config = Config.from_args(Namespace(timeout=9.0))
    assert config.request_timeout == 9.0


def test_from_args_without_timeout_keeps_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLIGHTXML_TIMEOUT", "5")

    config = Config.from_args(Namespace(timeout=None))
    assert config.request_timeout == 5.0


def test_from_args_rejects_non_positive_timeout() -> None:
    with pytest.raises(ConfigurationError):
        Config.from_args(Namespace(timeout=0.0))


def test_to_dict_has_no_credentials() -> None:
    data = Config().to_dict()

    assert set(data) == {"wsdl_url", "request_timeout", "log_level", "log_format", "json_indent"}


@pytest.mark.parametrize("timeout", [float("nan"), float("inf")])
def test_from_args_rejects_non_finite_timeout(timeout: float) -> None:
    with pytest.raises(ConfigurationError):
        Config.from_args(Namespace(timeout=timeout))
