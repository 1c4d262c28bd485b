"""Statistics MCP Tools"""

from typing import Annotated, Any, Dict

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from taskhub.mcp.base_tool import BaseMCPTool, create_success_response, invoke
from taskhub.services.store import Store


class StatisticsTools(BaseMCPTool):
    """Handlers for statistics tools"""

    def task_statistics(self) -> Dict[str, Any]:
        return create_success_response(self.store.statistics.task_statistics())

    def project_statistics(self, project_id: str) -> Dict[str, Any]:
        # Unknown projects report zero counts rather than an error
        return create_success_response(self.store.statistics.project_statistics(project_id))


def register_statistics_tools(server: FastMCP, store: Store) -> None:
    """Register statistics tools with the MCP server"""
    handler = StatisticsTools(store)

    @server.tool(
        name="get_task_statistics",
        description="Get task counts by status and priority, plus the number of overdue tasks",
    )
    def get_task_statistics() -> Dict[str, Any]:
        return invoke("get_task_statistics", handler.task_statistics)

    @server.tool(
        name="get_project_statistics",
        description="Get task counts and team members for a project",
    )
    def get_project_statistics(
        project_id: Annotated[str, Field(description="Project ID")],
    ) -> Dict[str, Any]:
        return invoke("get_project_statistics", lambda: handler.project_statistics(project_id))
