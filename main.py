#!/usr/bin/env python3
"""
fa_query - FlightAware FlightXML2 命令行查询工具

将动作名和 JSON 参数映射为 FlightXML2 SOAP 调用，并以 JSON 输出结果。

用法:
    python -m fa_query -l LOGIN -k KEY -a tail-owner -p '{"ident": "N12345"}'
    python -m fa_query -l LOGIN -k KEY -a aircraft-type -p '{"type": "B738"}'
    python -m fa_query --help
"""

from __future__ import annotations

import sys

from cli.commands import main

if __name__ == "__main__":
    sys.exit(main())
