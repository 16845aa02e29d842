"""
常量定义模块

定义系统中使用的所有常量，包括远程服务地址、默认值、错误码等。
"""

from __future__ import annotations

# ============================================================
# 版本信息
# ============================================================

VERSION = "1.0.0"

PROG_NAME = "fa_query"

# ============================================================
# FlightXML2 远程服务
# ============================================================

FLIGHTXML_WSDL = "https://flightxml.flightaware.com/soap/FlightXML2/wsdl"
FLIGHTXML_DOC_URL = "https://flightxml.flightaware.com/soap/FlightXML2/doc"

# 响应信封字段后缀: <MethodName>Result
RESULT_FIELD_SUFFIX = "Result"

# ============================================================
# 默认值
# ============================================================

DEFAULT_REQUEST_TIMEOUT = 30.0  # 秒
DEFAULT_JSON_INDENT = 4
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "text"
LOG_FORMATS = ("text", "json")

# ============================================================
# 错误码
# ============================================================

ERROR_CODE_UNKNOWN = "UNKNOWN"
ERROR_CODE_CONFIGURATION = "CONFIGURATION_ERROR"
ERROR_CODE_ARGUMENT = "ARGUMENT_ERROR"
ERROR_CODE_INVALID_PARAMS = "INVALID_PARAMS"
ERROR_CODE_UNKNOWN_ACTION = "UNKNOWN_ACTION"
ERROR_CODE_MISSING_PARAM = "MISSING_PARAM"
ERROR_CODE_REMOTE_FAULT = "REMOTE_FAULT"

# ============================================================
# 退出码
# ============================================================

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
