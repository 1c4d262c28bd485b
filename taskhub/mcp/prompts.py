"""
MCP prompts

Every prompt returns a single user message of narrative text built by the
formatters. Unknown ids produce an inline not-found sentence.
"""

from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from taskhub.mcp import formatters
from taskhub.services.store import Store


def register_prompts(server: FastMCP, store: Store) -> None:
    """Register narrative prompts for every entity"""

    # --- Users ---

    @server.prompt(
        name="get_user_details",
        description="Get detailed information about a specific user",
    )
    def get_user_details(
        user_id: Annotated[str, Field(description="User ID to get details for")],
    ) -> str:
        return formatters.user_details(store, user_id)

    @server.prompt(
        name="list_all_users",
        description="List all users in the system with their basic information",
    )
    def list_all_users() -> str:
        return formatters.user_list(store)

    # --- Projects ---

    @server.prompt(
        name="get_project_details",
        description="Get detailed information about a specific project",
    )
    def get_project_details(
        project_id: Annotated[str, Field(description="Project ID to get details for")],
    ) -> str:
        return formatters.project_details(store, project_id)

    @server.prompt(
        name="list_all_projects",
        description="List all projects in the system with their basic information",
    )
    def list_all_projects() -> str:
        return formatters.project_list(store)

    @server.prompt(
        name="get_projects_by_owner",
        description="List all projects owned by a specific user",
    )
    def get_projects_by_owner(
        owner_id: Annotated[str, Field(description="Owner user ID to get projects for")],
    ) -> str:
        return formatters.projects_by_owner(store, owner_id)

    @server.prompt(
        name="get_project_summary",
        description="Summarize a project with its task statistics and team members",
    )
    def get_project_summary(
        project_id: Annotated[str, Field(description="Project ID to summarize")],
    ) -> str:
        return formatters.project_summary(store, project_id)

    # --- Tasks ---

    @server.prompt(
        name="get_task_details",
        description="Get detailed information about a specific task",
    )
    def get_task_details(
        task_id: Annotated[str, Field(description="Task ID to get details for")],
    ) -> str:
        return formatters.task_details(store, task_id)

    @server.prompt(
        name="list_all_tasks",
        description="List all tasks in the system with their basic information",
    )
    def list_all_tasks() -> str:
        return formatters.task_list(store)

    @server.prompt(
        name="get_tasks_by_project",
        description="List all tasks in a specific project",
    )
    def get_tasks_by_project(
        project_id: Annotated[str, Field(description="Project ID to get tasks for")],
    ) -> str:
        return formatters.tasks_by_project(store, project_id)

    # --- Tags ---

    @server.prompt(
        name="get_tag_details",
        description="Get detailed information about a specific tag",
    )
    def get_tag_details(
        tag_id: Annotated[str, Field(description="Tag ID to get details for")],
    ) -> str:
        return formatters.tag_details(store, tag_id)

    @server.prompt(
        name="list_all_tags",
        description="List all tags in the system with their usage counts",
    )
    def list_all_tags() -> str:
        return formatters.tag_list(store)

    # --- Comments ---

    @server.prompt(
        name="get_comment_details",
        description="Get detailed information about a specific comment",
    )
    def get_comment_details(
        comment_id: Annotated[str, Field(description="Comment ID to get details for")],
    ) -> str:
        return formatters.comment_details(store, comment_id)

    @server.prompt(
        name="get_comments_by_task",
        description="List all comments on a specific task",
    )
    def get_comments_by_task(
        task_id: Annotated[str, Field(description="Task ID to get comments for")],
    ) -> str:
        return formatters.comments_by_task(store, task_id)
