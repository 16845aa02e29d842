"""
远程调用适配模块

通过 zeep 调用 FlightXML2 SOAP 接口，并拆开 <MethodName>Result 响应信封。
"""

from __future__ import annotations

import time
from typing import Any

from requests import Session
from requests.auth import HTTPBasicAuth
from requests.exceptions import RequestException
from zeep import Client
from zeep.exceptions import Error as ZeepError
from zeep.helpers import serialize_object
from zeep.transports import Transport

from ..config import Config
from ..constants import DEFAULT_REQUEST_TIMEOUT, FLIGHTXML_WSDL
from ..exceptions import RemoteFaultError
from ..operations import Operation
from ..utils.logger import get_logger

logger = get_logger(__name__)


def _fault_message(exc: Exception) -> str:
    """提取远程错误的原始消息"""
    message = getattr(exc, "message", None)
    return str(message or str(exc) or type(exc).__name__)


class RemoteCallAdapter:
    """
    远程调用适配器

    持有登录凭据和 SOAP 客户端，每次进程只执行一次调用，不做重试。
    """

    def __init__(
        self,
        login: str,
        key: str,
        wsdl_url: str = FLIGHTXML_WSDL,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        client: Any = None,
    ):
        """
        初始化适配器并加载 WSDL

        Args:
            login: FlightAware 登录名
            key: FlightAware API Key
            wsdl_url: 接口定义地址
            timeout: 请求超时（秒）
            client: 预先构建的 SOAP 客户端（测试用），提供时不加载 WSDL

        Raises:
            RemoteFaultError: WSDL 获取或解析失败
        """
        self._login = login
        self._wsdl_url = wsdl_url
        self._session: Session | None = None

        if client is not None:
            self._client = client
            return

        self._session = Session()
        self._session.auth = HTTPBasicAuth(login, key)
        transport = Transport(
            session=self._session,
            timeout=timeout,
            operation_timeout=timeout,
        )

        start = time.perf_counter()
        try:
            self._client = Client(wsdl_url, transport=transport)
        except (ZeepError, RequestException, OSError) as e:
            self.close()
            logger.debug(
                "Failed to load service definition",
                extra_fields={"wsdl": wsdl_url, "error": _fault_message(e)},
            )
            raise RemoteFaultError(_fault_message(e)) from e

        logger.debug(
            "Service definition loaded",
            extra_fields={
                "wsdl": wsdl_url,
                "login": login,
                "duration_ms": round((time.perf_counter() - start) * 1000, 1),
            },
        )

    def call(self, op: Operation, validated: tuple[str, Any]) -> dict[str, Any]:
        """
        执行远程调用

        Args:
            op: 目标操作
            validated: 验证后的 (参数名, 参数值)

        Returns:
            <MethodName>Result 字段的内容

        Raises:
            RemoteFaultError: 传输或远程服务错误
        """
        key, value = validated

        try:
            method = getattr(self._client.service, op.method_name)
        except AttributeError as e:
            raise RemoteFaultError(
                f"Service has no operation {op.method_name}",
                method=op.method_name,
            ) from e

        start = time.perf_counter()
        try:
            response = method(**{key: value})
        except (ZeepError, RequestException, OSError, ValueError, TypeError) as e:
            # ValueError/TypeError: zeep 无法按 schema 序列化参数值
            logger.debug(
                "Remote call failed",
                extra_fields={"method": op.method_name, "error": _fault_message(e)},
            )
            raise RemoteFaultError(_fault_message(e), method=op.method_name) from e

        logger.info(
            "Remote call completed",
            extra_fields={
                "method": op.method_name,
                "duration_ms": round((time.perf_counter() - start) * 1000, 1),
            },
        )
        return self._unwrap(op, response)

    def _unwrap(self, op: Operation, response: Any) -> dict[str, Any]:
        """拆开响应信封"""
        payload = serialize_object(response, dict)

        if isinstance(payload, dict) and op.result_field in payload:
            result = payload[op.result_field]
        else:
            # zeep 会自行折叠只有一个子元素的响应包装
            result = payload

        if result is None:
            return {}
        if not isinstance(result, dict):
            raise RemoteFaultError(
                f"Unexpected response for {op.method_name}: missing {op.result_field}",
                method=op.method_name,
            )
        return result

    def close(self) -> None:
        """关闭 HTTP 会话"""
        if self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self) -> "RemoteCallAdapter":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()


def create_remote_adapter(login: str, key: str, config: Config) -> RemoteCallAdapter:
    """创建远程调用适配器"""
    return RemoteCallAdapter(
        login,
        key,
        wsdl_url=config.wsdl_url,
        timeout=config.request_timeout,
    )
