"""
参数解析与验证模块
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from ..exceptions import InvalidParamsError, MissingParamError
from ..operations import Operation


def parse_params(raw: str | None) -> dict[str, Any]:
    """
    解析 --params 的 JSON 文本

    未提供或为空字符串时返回空字典。

    Raises:
        InvalidParamsError: 不是合法 JSON，或不是 JSON 对象
    """
    if raw is None or raw == "":
        return {}

    try:
        params = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidParamsError(str(e), raw=raw) from e

    if not isinstance(params, dict):
        raise InvalidParamsError("params must be a JSON object", raw=raw)
    return params


def validate(op: Operation, params: Mapping[str, Any] | None) -> tuple[str, Any]:
    """
    检查操作的必需参数

    缺失、None 或空字符串视为缺失；其他值（包括非字符串）原样透传。

    Args:
        op: 目标操作
        params: 用户提供的参数

    Returns:
        (参数名, 参数值)

    Raises:
        MissingParamError: 必需参数缺失
    """
    key = op.required_param
    value = (params or {}).get(key)
    if value is None or value == "":
        raise MissingParamError(key)
    return key, value
