"""业务逻辑层模块 - 动作分发、参数验证、远程调用"""

from .dispatcher import Dispatcher, get_dispatcher
from .validator import parse_params, validate
from .remote import RemoteCallAdapter, create_remote_adapter

__all__ = [
    "Dispatcher",
    "get_dispatcher",
    "parse_params",
    "validate",
    "RemoteCallAdapter",
    "create_remote_adapter",
]
