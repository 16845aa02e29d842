"""工具模块 - 日志、输出格式化"""

from .logger import setup_logging, get_logger
from .output import dump_json, format_action_list

__all__ = [
    "setup_logging",
    "get_logger",
    "dump_json",
    "format_action_list",
]
