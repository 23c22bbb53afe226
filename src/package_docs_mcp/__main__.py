"""
Entry point for running package_docs_mcp as a module.

Allows running the Package Docs MCP Server via:
    python -m package_docs_mcp
    uv run python -m package_docs_mcp
"""

from package_docs_mcp.server import main

if __name__ == "__main__":
    main()
