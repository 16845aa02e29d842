"""
日志配置模块

日志统一写入 stderr，stdout 只输出查询结果。支持 JSON 和文本两种格式。
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

# 这些字段的值不会出现在日志中
REDACTED_FIELDS = frozenset({"key", "api_key", "password"})
REDACTED = "***"


def _redact(fields: dict[str, Any]) -> dict[str, Any]:
    return {k: (REDACTED if k.lower() in REDACTED_FIELDS else v) for k, v in fields.items()}


class JSONFormatter(logging.Formatter):
    """
    JSON 格式化器

    每条日志一行 JSON，便于脚本收集。
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra_fields = getattr(record, "extra_fields", None)
        if extra_fields:
            log_entry.update(_redact(extra_fields))

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
            log_entry["exception_type"] = record.exc_info[0].__name__ if record.exc_info[0] else None

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """文本格式化器"""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        base = f"[{timestamp}] [{record.levelname:5}] [{record.name}] {record.getMessage()}"

        extra_fields = getattr(record, "extra_fields", None)
        if extra_fields:
            extra_str = " ".join(f"{k}={v}" for k, v in _redact(extra_fields).items())
            base = f"{base} | {extra_str}"

        if record.exc_info:
            base = f"{base}\n{self.formatException(record.exc_info)}"

        return base


class ExtraLogAdapter(logging.LoggerAdapter):
    """
    日志适配器

    支持 logger.info("msg", extra_fields={...}) 的写法。
    """

    def process(
        self,
        msg: str,
        kwargs: dict[str, Any],
    ) -> tuple[str, dict[str, Any]]:
        extra_fields = dict(self.extra or {})
        extra_fields.update(kwargs.pop("extra_fields", {}))

        if extra_fields:
            kwargs["extra"] = kwargs.get("extra", {})
            kwargs["extra"]["extra_fields"] = extra_fields

        return msg, kwargs


def setup_logging(
    level: str = "WARNING",
    format_type: str = "text",
    stream: Any = None,
) -> None:
    """
    配置日志系统

    Args:
        level: 日志级别 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: 日志格式 (json, text)
        stream: 输出流，默认为 sys.stderr
    """
    if stream is None:
        stream = sys.stderr

    handler = logging.StreamHandler(stream)

    if format_type.lower() == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(TextFormatter())

    root_logger = logging.root
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper()))

    # zeep 在 DEBUG 下会输出完整的 SOAP 报文
    logging.getLogger("zeep").setLevel(max(root_logger.level, logging.INFO))


def get_logger(
    name: str,
    extra: dict[str, Any] | None = None,
) -> ExtraLogAdapter:
    """
    获取日志器

    Args:
        name: 日志器名称
        extra: 额外字段

    Returns:
        日志适配器
    """
    logger = logging.getLogger(name)
    return ExtraLogAdapter(logger, extra or {})
