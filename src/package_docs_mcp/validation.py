"""
Startup compliance validation.

Checks that the tools the FastMCP server exposes match the capability
registry one-for-one. Runs at startup, logs warnings, does not block startup.
"""

from typing import Any

from loguru import logger


async def validate_exposed_tools(mcp_instance: Any, registry: Any) -> bool:
    """
    Validate that exactly the registered capabilities are exposed.

    Args:
        mcp_instance: FastMCP server instance
        registry: CapabilityRegistry instance

    Returns:
        True if validation passes, False if mismatch detected
    """
    expected = {capability.name for capability in registry.get_all()}

    try:
        tools = await mcp_instance.get_tools()
        actual = {tool.name for tool in tools.values()}
    except Exception as e:
        logger.error(f"Failed to get tool list for validation: {e}")
        return False

    if actual == expected:
        logger.info(
            f"✓ Tool validation PASSED: {len(actual)} tools exposed "
            f"({', '.join(sorted(actual))})"
        )
        return True

    logger.warning("⚠ TOOL VALIDATION FAILED")
    logger.warning(f"Expected tools: {sorted(expected)}")
    logger.warning(f"Actual tools:   {sorted(actual)}")
    if actual - expected:
        logger.warning(f"Extra tools (not in registry): {sorted(actual - expected)}")
    if expected - actual:
        logger.warning(f"Missing tools (registered but not exposed): {sorted(expected - actual)}")
    return False
