"""Centralized configuration for the package docs server."""

import os
from pathlib import Path

from . import __version__

_VALID_TRANSPORTS = ("stdio", "sse", "http", "streamable-http")
_VALID_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Config:
    """
    Server configuration with environment variable overrides.

    All configuration values are centralized here with sensible defaults.
    Values can be overridden via environment variables.
    """

    @staticmethod
    def _parse_port(port_str: str) -> int:
        """Parse and validate port number from string."""
        try:
            port = int(port_str)
            if not (1 <= port <= 65535):
                raise ValueError(f"Port must be 1-65535, got {port}")
            return port
        except ValueError as e:
            raise ValueError(f"Invalid PORT environment variable: {e}")

    # ========================================================================
    # Upstream Registries
    # ========================================================================
    NPM_REGISTRY_URL: str = os.getenv("NPM_REGISTRY_URL", "https://registry.npmjs.org")
    PYPI_REGISTRY_URL: str = os.getenv("PYPI_REGISTRY_URL", "https://pypi.org/pypi")

    # ========================================================================
    # HTTP Client
    # ========================================================================
    HTTP_TIMEOUT: float = float(os.getenv("HTTP_TIMEOUT", "30"))
    HTTP_CONNECT_TIMEOUT: float = float(os.getenv("HTTP_CONNECT_TIMEOUT", "10"))
    USER_AGENT: str = os.getenv("USER_AGENT", f"package-docs-mcp/{__version__}")

    # ========================================================================
    # Server Configuration
    # ========================================================================
    TRANSPORT: str = os.getenv("MCP_TRANSPORT", "stdio")
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = _parse_port.__func__(os.getenv("PORT", "8001"))

    # ========================================================================
    # Logging
    # ========================================================================
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FILE: str | None = os.getenv("LOG_FILE") or None

    # ========================================================================
    # Capability Definitions
    # ========================================================================
    TOOLS_YAML_PATH: str = os.getenv("TOOLS_YAML_PATH") or str(
        Path(__file__).parent / "data" / "tools.yaml"
    )

    @classmethod
    def validate(cls) -> bool:
        """
        Validate configuration consistency.

        Checks:
        - Registry base URLs are http(s) URLs
        - Timeouts are > 0
        - Transport is one FastMCP can run
        - LOG_LEVEL is a loguru level name

        Returns:
            True if validation passes

        Raises:
            ValueError: If validation fails
        """
        errors = []

        for attr in ("NPM_REGISTRY_URL", "PYPI_REGISTRY_URL"):
            value = getattr(cls, attr)
            if not value.startswith(("http://", "https://")):
                errors.append(f"{attr} must be an http(s) URL, got '{value}'")

        if cls.HTTP_TIMEOUT <= 0:
            errors.append(f"HTTP_TIMEOUT must be > 0, got {cls.HTTP_TIMEOUT}")
        if cls.HTTP_CONNECT_TIMEOUT <= 0:
            errors.append(
                f"HTTP_CONNECT_TIMEOUT must be > 0, got {cls.HTTP_CONNECT_TIMEOUT}"
            )

        if cls.TRANSPORT not in _VALID_TRANSPORTS:
            errors.append(
                f"MCP_TRANSPORT must be one of {', '.join(_VALID_TRANSPORTS)}, "
                f"got '{cls.TRANSPORT}'"
            )

        if cls.LOG_LEVEL not in _VALID_LOG_LEVELS:
            errors.append(
                f"LOG_LEVEL must be one of {', '.join(_VALID_LOG_LEVELS)}, "
                f"got '{cls.LOG_LEVEL}'"
            )

        if errors:
            raise ValueError(f"Config validation failed: {'; '.join(errors)}")

        return True
