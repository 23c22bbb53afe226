"""Package Docs MCP Server - npm and PyPI documentation over FastMCP."""

__version__ = "0.1.0"

from .dispatcher import Dispatcher
from .results import ToolResult

__all__ = ["Dispatcher", "ToolResult", "__version__"]
