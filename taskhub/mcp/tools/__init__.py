"""
MCP tool handlers, one module per entity plus statistics.

Each module exposes a handler class holding the store and a
``register_*_tools(server, store)`` function that binds the handlers to
named tools on the server.
"""

from mcp.server.fastmcp import FastMCP

from taskhub.mcp.tools.comments import CommentTools, register_comment_tools
from taskhub.mcp.tools.projects import ProjectTools, register_project_tools
from taskhub.mcp.tools.statistics import StatisticsTools, register_statistics_tools
from taskhub.mcp.tools.tags import DEFAULT_CONFIRMATION_TIMEOUT, TagTools, register_tag_tools
from taskhub.mcp.tools.tasks import TaskTools, register_task_tools
from taskhub.mcp.tools.users import UserTools, register_user_tools
from taskhub.services.store import Store


def register_all_tools(
    server: FastMCP,
    store: Store,
    confirmation_timeout: float = DEFAULT_CONFIRMATION_TIMEOUT,
) -> None:
    """Register every entity's tools with the MCP server"""
    register_user_tools(server, store)
    register_project_tools(server, store)
    register_task_tools(server, store)
    register_tag_tools(server, store, confirmation_timeout=confirmation_timeout)
    register_comment_tools(server, store)
    register_statistics_tools(server, store)


__all__ = [
    "CommentTools",
    "ProjectTools",
    "StatisticsTools",
    "TagTools",
    "TaskTools",
    "UserTools",
    "register_all_tools",
]
