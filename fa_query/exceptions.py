"""
异常定义模块

定义系统中所有自定义异常类，提供统一的错误处理机制。
每个异常携带错误码和退出码，由命令行层统一报告。
"""

from __future__ import annotations

from typing import Any

from .constants import (
    ERROR_CODE_ARGUMENT,
    ERROR_CODE_CONFIGURATION,
    ERROR_CODE_INVALID_PARAMS,
    ERROR_CODE_MISSING_PARAM,
    ERROR_CODE_REMOTE_FAULT,
    ERROR_CODE_UNKNOWN,
    ERROR_CODE_UNKNOWN_ACTION,
    EXIT_FAILURE,
    EXIT_USAGE,
)


class FaQueryError(Exception):
    """
    基础异常类

    所有自定义异常都继承此类，提供统一的错误码和消息格式。

    Attributes:
        message: 错误消息
        code: 错误码
        details: 额外的错误详情
        exit_code: 进程退出码
    """

    exit_code: int = EXIT_FAILURE

    def __init__(
        self,
        message: str,
        code: str = ERROR_CODE_UNKNOWN,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """转换为字典格式（用于日志和JSON输出）"""
        result: dict[str, Any] = {
            "error": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


class ConfigurationError(FaQueryError):
    """配置错误"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, code=ERROR_CODE_CONFIGURATION, details=details)


class ArgumentError(FaQueryError):
    """命令行参数缺失或格式错误"""

    exit_code = EXIT_USAGE

    def __init__(self, message: str):
        super().__init__(message, code=ERROR_CODE_ARGUMENT)


class InvalidParamsError(FaQueryError):
    """--params 不是合法的 JSON 对象"""

    exit_code = EXIT_USAGE

    def __init__(self, message: str, raw: str | None = None):
        details = {"raw": raw} if raw is not None else None
        super().__init__(
            f"Unable to parse params: {message}",
            code=ERROR_CODE_INVALID_PARAMS,
            details=details,
        )


class UnknownActionError(FaQueryError):
    """
    未知动作

    携带全部已知动作列表 (名称, 说明, 文档地址)，由命令行层打印。
    """

    exit_code = EXIT_USAGE

    def __init__(self, action: str, known_actions: list[tuple[str, str, str]]):
        super().__init__(
            f"Invalid Action: {action}",
            code=ERROR_CODE_UNKNOWN_ACTION,
            details={"action": action},
        )
        self.action = action
        self.known_actions = list(known_actions)


class MissingParamError(FaQueryError):
    """必需参数缺失或为空"""

    exit_code = EXIT_USAGE

    def __init__(self, key: str):
        super().__init__(
            f"Missing Params: {key}",
            code=ERROR_CODE_MISSING_PARAM,
            details={"param": key},
        )
        self.key = key


class RemoteFaultError(FaQueryError):
    """远程服务或传输层错误（WSDL 加载失败、网络、认证、SOAP Fault）"""

    def __init__(self, message: str, method: str | None = None):
        details = {"method": method} if method else None
        super().__init__(message, code=ERROR_CODE_REMOTE_FAULT, details=details)
        self.method = method
