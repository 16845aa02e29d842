"""
动作分发模块

将用户输入的动作名解析为唯一的远程操作。
"""

from __future__ import annotations

from ..exceptions import UnknownActionError
from ..operations import OPERATIONS, Operation, action_to_method, build_index
from ..utils.logger import get_logger

logger = get_logger(__name__)


class Dispatcher:
    """
    动作分发器

    基于静态查找表解析动作名，不做任何运行时反射。
    """

    def __init__(self, operations: tuple[Operation, ...] = OPERATIONS):
        self._operations = operations
        self._index = build_index(operations)

    def resolve(self, action: str) -> Operation:
        """
        解析动作名

        Args:
            action: 连字符形式的动作名，例如 tail-owner

        Returns:
            对应的操作

        Raises:
            UnknownActionError: 动作名无法匹配任何操作
        """
        name = (action or "").strip()
        op = self._index.get(action_to_method(name).lower()) if name else None
        if op is None:
            logger.debug("Unknown action", extra_fields={"action": action})
            raise UnknownActionError(action, self.list_actions())

        logger.debug(
            "Action resolved",
            extra_fields={"action": name, "method": op.method_name},
        )
        return op

    def list_actions(self) -> list[tuple[str, str, str]]:
        """返回 (动作名, 说明, 文档地址) 列表，按定义顺序"""
        return [(op.action, op.description, op.doc_url) for op in self._operations]


_dispatcher: Dispatcher | None = None


def get_dispatcher() -> Dispatcher:
    """获取默认分发器"""
    global _dispatcher
    if _dispatcher is None:
        _dispatcher = Dispatcher()
    return _dispatcher
