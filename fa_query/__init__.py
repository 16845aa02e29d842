"""fa_query - FlightAware FlightXML2 命令行查询工具"""

from .constants import VERSION as __version__

__all__ = ["__version__"]
