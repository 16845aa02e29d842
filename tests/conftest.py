"""
pytest 配置和共享 fixtures

提供测试所需的伪造 SOAP 客户端和适配器工厂。
"""

from __future__ import annotations

import logging
from typing import Any, Generator

import pytest

# 添加项目根目录到路径
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from fa_query.config import Config
from fa_query.services.remote import RemoteCallAdapter


class FakeService:
    """
    伪造的 zeep service 代理

    responses: 方法名 -> 返回值或异常
    """

    def __init__(self, responses: dict[str, Any]):
        self._responses = responses
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or name not in self._responses:
            raise AttributeError(f"Service has no operation {name!r}")

        def method(**kwargs: Any) -> Any:
            self.calls.append((name, kwargs))
            response = self._responses[name]
            if isinstance(response, BaseException):
                raise response
            return response

        return method


class FakeClient:
    """伪造的 zeep.Client，只暴露 service 属性"""

    def __init__(self, responses: dict[str, Any] | None = None):
        self.service = FakeService(responses or {})


class RecordingAdapterFactory:
    """
    记录构造和调用次数的适配器工厂

    用于验证参数错误时不会发生远程调用。
    """

    def __init__(self, responses: dict[str, Any] | None = None):
        self.client = FakeClient(responses)
        self.created: list[tuple[str, str, Config]] = []
        self.closed = 0

    def __call__(self, login: str, key: str, config: Config) -> RemoteCallAdapter:
        self.created.append((login, key, config))
        factory = self

        class _Adapter(RemoteCallAdapter):
            def close(self) -> None:
                factory.closed += 1
                super().close()

        return _Adapter(login, key, client=self.client)

    @property
    def calls(self) -> list[tuple[str, dict[str, Any]]]:
        return self.client.service.calls


@pytest.fixture
def make_client() -> type[FakeClient]:
    return FakeClient


@pytest.fixture
def make_adapter_factory() -> type[RecordingAdapterFactory]:
    return RecordingAdapterFactory


@pytest.fixture
def adapter_factory() -> RecordingAdapterFactory:
    return RecordingAdapterFactory(
        {
            "AircraftType": {"AircraftTypeResult": {"manufacturer": "Boeing", "type": "737-800"}},
            "TailOwner": {"TailOwnerResult": {"owner": "Acme Air"}},
            "AirlineFlightInfo": {"AirlineFlightInfoResult": {"faFlightID": "UAL1-1", "seats_cabin_coach": 150}},
        }
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """隔离环境变量和日志配置"""
    for name in ("FLIGHTXML_WSDL", "FLIGHTXML_TIMEOUT", "LOG_LEVEL", "LOG_FORMAT", "JSON_INDENT"):
        monkeypatch.delenv(name, raising=False)
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)


@pytest.fixture
def flightxml_wsdl() -> Path:
    """本地 document-literal WSDL，只包含 AircraftType 操作"""
    return Path(__file__).parent / "resources" / "flightxml2.wsdl"
