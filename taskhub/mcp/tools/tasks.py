"""
Task MCP Tools

CRUD, filtered listings and free-text search over tasks. Due dates arrive
as ISO-8601 strings and are parsed only when present.
"""

from datetime import datetime
from typing import Annotated, Any, Dict, List, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from taskhub.mcp.base_tool import BaseMCPTool, MCPToolError, create_success_response, invoke
from taskhub.mcp.formatters import serialize, serialize_many
from taskhub.models.task import TaskPriority, TaskStatus
from taskhub.schemas.common import parse_datetime
from taskhub.schemas.task import TaskChanges, TaskCreate, TaskUpdate
from taskhub.services.store import Store


class TaskTools(BaseMCPTool):
    """Handlers for task tools"""

    def parse_due_date(self, due_date: Optional[str]) -> Optional[datetime]:
        """
        Convert a due date string to a datetime; empty or None clears it

        Raises:
            MCPToolError: If the string is not ISO-8601
        """
        if not due_date:
            return None
        try:
            return parse_datetime(due_date)
        except ValueError:
            raise MCPToolError(
                code="VALIDATION_ERROR",
                message=f"Invalid due date: {due_date!r} (expected ISO-8601)",
                details={"field": "due_date"},
            )

    def create(
        self,
        title: str,
        project_id: str,
        description: str = "",
        assignee_id: Optional[str] = None,
        status: str = "todo",
        priority: str = "medium",
        due_date: Optional[str] = None,
        tags: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        self.log_tool_invocation("create_task", {"title": title, "project_id": project_id})
        task = self.store.tasks.create(TaskCreate(
            title=title,
            description=description,
            project_id=project_id,
            assignee_id=assignee_id,
            status=status,
            priority=priority,
            due_date=self.parse_due_date(due_date),
            tags=tags or [],
        ))
        return create_success_response(serialize(task), message=f"Task '{task.title}' created")

    def get(self, task_id: str) -> Dict[str, Any]:
        task = self.store.tasks.get(task_id)
        if not task:
            raise self.not_found("Task", task_id)
        return create_success_response(serialize(task))

    def list(self) -> Dict[str, Any]:
        return create_success_response(serialize_many(self.store.tasks.list()))

    def list_by_project(self, project_id: str) -> Dict[str, Any]:
        return create_success_response(serialize_many(self.store.tasks.list_by_project(project_id)))

    def list_by_assignee(self, assignee_id: str) -> Dict[str, Any]:
        return create_success_response(
            serialize_many(self.store.tasks.list_by_assignee(assignee_id))
        )

    def list_by_status(self, status: str) -> Dict[str, Any]:
        return create_success_response(serialize_many(self.store.tasks.list_by_status(status)))

    def list_by_tag(self, tag_id: str) -> Dict[str, Any]:
        return create_success_response(serialize_many(self.store.tasks.list_by_tag(tag_id)))

    def search(self, query: str) -> Dict[str, Any]:
        self.log_tool_invocation("search_tasks", {"query": query})
        return create_success_response(serialize_many(self.store.tasks.search(query)))

    def update(self, task_id: str, changes: TaskChanges) -> Dict[str, Any]:
        self.log_tool_invocation("update_task", {"task_id": task_id})
        fields = changes.model_dump(exclude_unset=True)
        self.require_changes(fields, task_id)

        if "due_date" in fields:
            fields["due_date"] = self.parse_due_date(fields["due_date"])

        task = self.store.tasks.update(task_id, TaskUpdate(**fields))
        if not task:
            raise self.not_found("Task", task_id)
        return create_success_response(serialize(task), message=f"Task '{task.title}' updated")

    def delete(self, task_id: str) -> Dict[str, Any]:
        self.log_tool_invocation("delete_task", {"task_id": task_id})
        if not self.store.tasks.delete(task_id):
            raise self.not_found("Task", task_id)
        return create_success_response({"id": task_id}, message="Task deleted")


TaskId = Annotated[str, Field(description="Task ID")]


def register_task_tools(server: FastMCP, store: Store) -> None:
    """Register task tools with the MCP server"""
    handler = TaskTools(store)

    @server.tool(name="create_task", description="Create a new task")
    def create_task(
        title: Annotated[str, Field(description="Task title")],
        project_id: Annotated[str, Field(description="Project ID")],
        description: Annotated[str, Field(description="Task description")] = "",
        assignee_id: Annotated[Optional[str], Field(description="Assignee user ID (optional)")] = None,
        status: Annotated[TaskStatus, Field(description="Task status")] = "todo",
        priority: Annotated[TaskPriority, Field(description="Task priority")] = "medium",
        due_date: Annotated[Optional[str], Field(description="Due date (ISO string, optional)")] = None,
        tags: Annotated[Optional[List[str]], Field(description="Tag IDs")] = None,
    ) -> Dict[str, Any]:
        return invoke("create_task", lambda: handler.create(
            title, project_id, description, assignee_id, status, priority, due_date, tags
        ))

    @server.tool(name="get_task", description="Get task details by ID")
    def get_task(task_id: TaskId) -> Dict[str, Any]:
        return invoke("get_task", lambda: handler.get(task_id))

    @server.tool(name="list_tasks", description="List all tasks in the system")
    def list_tasks() -> Dict[str, Any]:
        return invoke("list_tasks", handler.list)

    @server.tool(name="get_tasks_by_project", description="Get all tasks for a project")
    def get_tasks_by_project(
        project_id: Annotated[str, Field(description="Project ID")],
    ) -> Dict[str, Any]:
        return invoke("get_tasks_by_project", lambda: handler.list_by_project(project_id))

    @server.tool(name="get_tasks_by_assignee", description="Get all tasks assigned to a user")
    def get_tasks_by_assignee(
        assignee_id: Annotated[str, Field(description="Assignee user ID")],
    ) -> Dict[str, Any]:
        return invoke("get_tasks_by_assignee", lambda: handler.list_by_assignee(assignee_id))

    @server.tool(name="get_tasks_by_status", description="Get all tasks with a specific status")
    def get_tasks_by_status(
        status: Annotated[TaskStatus, Field(description="Task status")],
    ) -> Dict[str, Any]:
        return invoke("get_tasks_by_status", lambda: handler.list_by_status(status))

    @server.tool(name="get_tasks_by_tag", description="Get all tasks with a specific tag")
    def get_tasks_by_tag(
        tag_id: Annotated[str, Field(description="Tag ID")],
    ) -> Dict[str, Any]:
        return invoke("get_tasks_by_tag", lambda: handler.list_by_tag(tag_id))

    @server.tool(name="search_tasks", description="Search tasks by title or description")
    def search_tasks(
        query: Annotated[str, Field(description="Search query")],
    ) -> Dict[str, Any]:
        return invoke("search_tasks", lambda: handler.search(query))

    @server.tool(
        name="update_task",
        description=(
            "Update task details. Only the fields given in 'updates' change; "
            "set assignee_id or due_date to null to clear them"
        ),
    )
    def update_task(task_id: TaskId, updates: TaskChanges) -> Dict[str, Any]:
        return invoke("update_task", lambda: handler.update(task_id, updates))

    @server.tool(name="delete_task", description="Delete a task and its comments")
    def delete_task(task_id: TaskId) -> Dict[str, Any]:
        return invoke("delete_task", lambda: handler.delete(task_id))
