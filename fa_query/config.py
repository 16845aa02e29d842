"""
配置管理模块

提供统一的配置管理，支持环境变量和命令行参数覆盖。
登录名和 API Key 只从命令行获取，不属于配置。
"""

from __future__ import annotations

import argparse
import logging
import math
import os
from dataclasses import dataclass
from typing import Any

from .constants import (
    DEFAULT_JSON_INDENT,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_REQUEST_TIMEOUT,
    FLIGHTXML_WSDL,
    LOG_FORMATS,
)
from .exceptions import ConfigurationError


def _parse_timeout(raw: Any, source: str) -> float:
    """解析超时时间，必须为正数"""
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(
            f"{source} must be a number",
            details={source: raw},
        ) from None
    if not math.isfinite(value) or value <= 0:
        raise ConfigurationError(
            f"{source} must be a finite number greater than 0",
            details={source: raw},
        )
    return value


def _parse_log_level(raw: str) -> str:
    level = (raw or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(
            "LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL",
            details={"LOG_LEVEL": raw},
        )
    return level


def _parse_log_format(raw: str) -> str:
    fmt = (raw or DEFAULT_LOG_FORMAT).strip().lower()
    if fmt not in LOG_FORMATS:
        raise ConfigurationError(
            "LOG_FORMAT must be 'text' or 'json'",
            details={"LOG_FORMAT": raw},
        )
    return fmt


def _parse_indent(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(
            "JSON_INDENT must be an integer",
            details={"JSON_INDENT": raw},
        ) from None
    return max(0, value)


@dataclass
class Config:
    """应用配置"""

    # 远程服务配置
    wsdl_url: str = FLIGHTXML_WSDL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT  # 秒

    # 日志配置
    log_level: str = DEFAULT_LOG_LEVEL
    log_format: str = DEFAULT_LOG_FORMAT  # text | json

    # 输出配置
    json_indent: int = DEFAULT_JSON_INDENT

    @classmethod
    def from_env(cls) -> "Config":
        """从环境变量加载配置"""
        timeout_raw = os.getenv("FLIGHTXML_TIMEOUT", "").strip()

        return cls(
            wsdl_url=os.getenv("FLIGHTXML_WSDL", "").strip() or FLIGHTXML_WSDL,
            request_timeout=(
                _parse_timeout(timeout_raw, "FLIGHTXML_TIMEOUT")
                if timeout_raw
                else DEFAULT_REQUEST_TIMEOUT
            ),
            log_level=_parse_log_level(os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)),
            log_format=_parse_log_format(os.getenv("LOG_FORMAT", DEFAULT_LOG_FORMAT)),
            json_indent=_parse_indent(os.getenv("JSON_INDENT", str(DEFAULT_JSON_INDENT))),
        )

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "Config":
        """从命令行参数加载配置"""
        config = cls.from_env()

        # 命令行参数覆盖
        if getattr(args, "timeout", None) is not None:
            config.request_timeout = _parse_timeout(args.timeout, "--timeout")

        return config

    def to_dict(self) -> dict[str, Any]:
        """转换为字典（用于日志和调试）"""
        return {
            "wsdl_url": self.wsdl_url,
            "request_timeout": self.request_timeout,
            "log_level": self.log_level,
            "log_format": self.log_format,
            "json_indent": self.json_indent,
        }
