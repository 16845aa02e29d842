"""
命令行命令定义

解析命令行参数，执行一次 FlightXML2 查询，并将结果以 JSON 输出到 stdout。
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence

from fa_query.config import Config
from fa_query.constants import EXIT_OK, PROG_NAME, VERSION
from fa_query.exceptions import ArgumentError, FaQueryError, UnknownActionError
from fa_query.services.dispatcher import get_dispatcher
from fa_query.services.remote import RemoteCallAdapter, create_remote_adapter
from fa_query.services.validator import parse_params, validate
from fa_query.utils.logger import get_logger, setup_logging
from fa_query.utils.output import dump_json, format_action_list

logger = get_logger("cli")

AdapterFactory = Callable[[str, str, Config], RemoteCallAdapter]


class _ArgumentParser(argparse.ArgumentParser):
    """参数错误时抛出 ArgumentError，由 main 统一报告"""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise ArgumentError(message)


def cmd_run(
    args: argparse.Namespace,
    adapter_factory: AdapterFactory = create_remote_adapter,
) -> int:
    """
    执行一次查询

    Args:
        args: 命令行参数
        adapter_factory: 远程调用适配器工厂

    Returns:
        退出码
    """
    config = Config.from_args(args)
    setup_logging(level=config.log_level, format_type=config.log_format)
    logger.debug("Configuration loaded", extra_fields=config.to_dict())

    # 参数必须在任何远程交互之前解析
    params = parse_params(args.params)

    adapter = adapter_factory(args.login, args.key, config)
    try:
        op = get_dispatcher().resolve(args.action)
        validated = validate(op, params)
        result = adapter.call(op, validated)
    finally:
        adapter.close()

    print(dump_json(result, indent=config.json_indent))
    return EXIT_OK


def _report_error(parser: argparse.ArgumentParser, error: FaQueryError) -> None:
    """将错误写入 stderr"""
    if isinstance(error, ArgumentError):
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {error.message}", file=sys.stderr)
        return

    print(error.message, file=sys.stderr)
    if isinstance(error, UnknownActionError):
        print(format_action_list(error.known_actions), file=sys.stderr)


def create_parser() -> argparse.ArgumentParser:
    """创建命令行参数解析器"""
    parser = _ArgumentParser(
        prog=PROG_NAME,
        description="Query the FlightAware FlightXML2 API and print the result as JSON.",
        epilog=format_action_list(get_dispatcher().list_actions()),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {VERSION}",
    )
    parser.add_argument("-l", "--login", required=True, help="Your FlightAware Login")
    parser.add_argument("-k", "--key", required=True, help="Your FlightAware API Key")
    parser.add_argument(
        "-a",
        "--action",
        required=True,
        help="The endpoint you would like to query",
    )
    parser.add_argument("-p", "--params", help="The JSON encoded params of your request.")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")

    return parser


def main(
    argv: Sequence[str] | None = None,
    adapter_factory: AdapterFactory = create_remote_adapter,
) -> int:
    """主入口"""
    parser = create_parser()

    try:
        args = parser.parse_args(argv)
        return cmd_run(args, adapter_factory)
    except FaQueryError as e:
        logger.debug("Run failed", extra_fields=e.to_dict())
        _report_error(parser, e)
        return e.exit_code


if __name__ == "__main__":
    sys.exit(main())
