"""
远程操作定义模块

定义客户端支持的 FlightXML2 操作静态表，以及方法名与动作名之间的相互转换。

动作名是用户在命令行中使用的连字符小写形式，例如::

    AircraftType       <-> aircraft-type
    TailOwner          <-> tail-owner
    AirlineFlightInfo  <-> airline-flight-info
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .constants import FLIGHTXML_DOC_URL, RESULT_FIELD_SUFFIX
from .exceptions import ConfigurationError

# 大写字母边界；连续大写且后面不跟小写字母的视为一个单元（缩写）
_UPPER_BOUNDARY_RE = re.compile(r"[A-Z]([A-Z](?![a-z]))*")


@dataclass(frozen=True)
class Operation:
    """单个远程操作"""

    method_name: str
    required_param: str
    description: str

    @property
    def result_field(self) -> str:
        """响应信封中的结果字段名"""
        return f"{self.method_name}{RESULT_FIELD_SUFFIX}"

    @property
    def action(self) -> str:
        """用户可见的动作名"""
        return method_to_action(self.method_name)

    @property
    def doc_url(self) -> str:
        """FlightXML2 文档地址"""
        return f"{FLIGHTXML_DOC_URL}#op_{self.method_name}"


def method_to_action(method_name: str) -> str:
    """将方法名转换为动作名: AirlineFlightInfo -> airline-flight-info"""
    hyphenated = _UPPER_BOUNDARY_RE.sub(r"-\g<0>", method_name)
    return hyphenated.lower().lstrip("-")


def action_to_method(action: str) -> str:
    """将动作名转换为方法名: airline-flight-info -> AirlineFlightInfo"""
    words = action.split("-")
    return "".join(word[:1].upper() + word[1:] for word in words)


AIRCRAFT_TYPE = Operation(
    method_name="AircraftType",
    required_param="type",
    description="Information about an aircraft type, such as manufacturer and engine type.",
)

TAIL_OWNER = Operation(
    method_name="TailOwner",
    required_param="ident",
    description="Registered owner of an aircraft by tail number.",
)

AIRLINE_FLIGHT_INFO = Operation(
    method_name="AirlineFlightInfo",
    required_param="faFlightID",
    description="Additional information about an airline flight, such as gates and seats.",
)

OPERATIONS: tuple[Operation, ...] = (
    AIRCRAFT_TYPE,
    TAIL_OWNER,
    AIRLINE_FLIGHT_INFO,
)


def build_index(operations: tuple[Operation, ...]) -> dict[str, Operation]:
    """
    构建查找表

    键为方法名的小写形式；两个操作规范化后冲突时抛出 ConfigurationError。

    Args:
        operations: 操作列表

    Returns:
        方法名(小写) -> 操作
    """
    index: dict[str, Operation] = {}
    seen_actions: dict[str, str] = {}
    for op in operations:
        action = op.action
        if action in seen_actions:
            raise ConfigurationError(
                f"Operations {seen_actions[action]} and {op.method_name} share action name {action}",
                details={"action": action},
            )
        seen_actions[action] = op.method_name
        index[op.method_name.lower()] = op
    return index
