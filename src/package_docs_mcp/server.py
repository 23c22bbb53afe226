"""FastMCP server exposing npm and PyPI documentation tools."""

import sys
from contextlib import asynccontextmanager
from typing import Annotated

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from loguru import logger
from pydantic import Field

from . import __version__
from .config import Config
from .dispatcher import Dispatcher
from .registry.models import ARGUMENT_NAME, CapabilityRecord
from .validation import validate_exposed_tools

# Constants
SERVER_NAME = "package-docs-server"

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> | <level>{message}</level>"
)


def _make_tool(dispatcher: Dispatcher, capability: CapabilityRecord) -> Tool:
    """
    Wrap one capability as a FastMCP tool that delegates to the dispatcher.

    Failed ToolResults are raised as ToolError so the transport reports
    them as tool errors on the same channel as successes.
    """
    tool_name = capability.name

    async def call(
        package_name: Annotated[str, Field(description=capability.argument_description)],
    ) -> str:
        result = await dispatcher.invoke(tool_name, {ARGUMENT_NAME: package_name})
        if result.is_error:
            raise ToolError(result.error.message)
        return result.text

    return Tool.from_function(call, name=tool_name, description=capability.description)


def build_server(dispatcher: Dispatcher | None = None) -> FastMCP:
    """
    Create the FastMCP server with one tool per registered capability.

    Args:
        dispatcher: Dispatcher to route invocations through; defaults to one
            built from Config

    Returns:
        Configured FastMCP instance
    """
    if dispatcher is None:
        dispatcher = Dispatcher.from_config(Config)

    @asynccontextmanager
    async def lifespan(app):
        # STARTUP
        logger.info(f"Starting {SERVER_NAME} v{__version__}...")
        logger.info(f"npm registry: {Config.NPM_REGISTRY_URL}")
        logger.info(f"PyPI registry: {Config.PYPI_REGISTRY_URL}")
        await validate_exposed_tools(app, dispatcher.registry)
        logger.info(f"{SERVER_NAME} startup complete")

        yield  # Server runs here

        # SHUTDOWN
        logger.info(f"{SERVER_NAME} shutting down...")

    mcp = FastMCP(name=SERVER_NAME, lifespan=lifespan)
    for capability in dispatcher.registry.get_all():
        mcp.add_tool(_make_tool(dispatcher, capability))
    return mcp


def configure_logging() -> None:
    """
    Configure loguru sinks.

    stderr only, since stdout carries the stdio transport. A rotating file
    sink is added when LOG_FILE is set.
    """
    logger.remove()  # Remove default handler

    logger.add(sys.stderr, format=LOG_FORMAT, level=Config.LOG_LEVEL)

    if Config.LOG_FILE:
        logger.add(
            Config.LOG_FILE,
            rotation="10 MB",
            retention="7 days",
            compression="zip",
            level="DEBUG",
        )


mcp = build_server()


def main():
    """
    Main entry point for the package docs server.

    Configures:
    - Loguru for structured logging
    - Transport from MCP_TRANSPORT (stdio by default)
    """
    # Validate first: a bad LOG_LEVEL would otherwise fail inside logger.add
    try:
        Config.validate()
    except ValueError as e:
        logger.error(str(e))
        sys.exit(2)

    configure_logging()

    logger.info(f"Starting {SERVER_NAME} on {Config.TRANSPORT}...")

    try:
        if Config.TRANSPORT == "stdio":
            mcp.run(transport="stdio")
        else:
            mcp.run(transport=Config.TRANSPORT, host=Config.HOST, port=Config.PORT)
    except KeyboardInterrupt:
        logger.info("Shutting down...")
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
