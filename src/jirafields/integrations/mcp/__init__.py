"""MCP (Model Context Protocol) integration for jirafields.

This module provides an MCP server that exposes Jira field resources and
field tools to AI agents.

Example:
    # Run the MCP server
    python -m jirafields.integrations.mcp.server --url https://jira.example.com --dynamic

    # Or via entry point (after pip install)
    jirafields-mcp --url https://jira.example.com --dynamic
"""

from jirafields.integrations.mcp.server import create_server, mcp

__all__ = ["mcp", "create_server"]
