"""
输出格式化模块

负责查询结果的 JSON 输出和可用动作列表的文本渲染。
"""

from __future__ import annotations

import json
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Iterable

from ..constants import DEFAULT_JSON_INDENT


def _json_default(value: Any) -> Any:
    """处理 zeep 反序列化产生的非 JSON 原生类型"""
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def dump_json(obj: Any, indent: int = DEFAULT_JSON_INDENT) -> str:
    """将结果序列化为格式化的 JSON 文本"""
    return json.dumps(
        obj,
        indent=indent or None,
        ensure_ascii=False,
        default=_json_default,
    )


def format_action_list(actions: Iterable[tuple[str, str, str]]) -> str:
    """
    渲染可用动作列表

    Args:
        actions: (动作名, 说明, 文档地址) 序列

    Returns:
        多行文本，首行为标题，每个动作一行
    """
    lines = ["Available Actions:"]
    for name, _description, url in actions:
        lines.append(f"\t{name} {url}")
    return "\n".join(lines)
