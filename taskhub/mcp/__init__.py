"""
MCP (Model Context Protocol) Server Package

Exposes the task store to MCP clients as tools, resources, prompts and
argument completions.
"""

from taskhub.mcp.server import TaskHubMCP, build_server

__all__ = ["TaskHubMCP", "build_server"]
