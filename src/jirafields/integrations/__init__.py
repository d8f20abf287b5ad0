"""Agent framework integrations.

Available integrations:
- jirafields.integrations.mcp - MCP (Model Context Protocol) server
"""
