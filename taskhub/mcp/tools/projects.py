"""
Project MCP Tools

Deleting a project also deletes its tasks and their comments.
"""

from typing import Annotated, Any, Dict

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from taskhub.mcp.base_tool import BaseMCPTool, create_success_response, invoke
from taskhub.mcp.formatters import serialize, serialize_many
from taskhub.models.project import ProjectStatus
from taskhub.schemas.project import ProjectCreate, ProjectUpdate
from taskhub.services.store import Store


class ProjectTools(BaseMCPTool):
    """Handlers for project tools"""

    def create(self, name: str, description: str, owner_id: str, status: str) -> Dict[str, Any]:
        self.log_tool_invocation("create_project", {"name": name, "owner_id": owner_id})
        project = self.store.projects.create(
            ProjectCreate(name=name, description=description, owner_id=owner_id, status=status)
        )
        return create_success_response(
            serialize(project), message=f"Project '{project.name}' created"
        )

    def get(self, project_id: str) -> Dict[str, Any]:
        project = self.store.projects.get(project_id)
        if not project:
            raise self.not_found("Project", project_id)
        return create_success_response(serialize(project))

    def list(self) -> Dict[str, Any]:
        return create_success_response(serialize_many(self.store.projects.list()))

    def list_by_owner(self, owner_id: str) -> Dict[str, Any]:
        return create_success_response(
            serialize_many(self.store.projects.list_by_owner(owner_id))
        )

    def update(self, project_id: str, updates: ProjectUpdate) -> Dict[str, Any]:
        self.log_tool_invocation("update_project", {"project_id": project_id})
        self.require_changes(updates.model_dump(exclude_unset=True), project_id)

        project = self.store.projects.update(project_id, updates)
        if not project:
            raise self.not_found("Project", project_id)
        return create_success_response(
            serialize(project), message=f"Project '{project.name}' updated"
        )

    def delete(self, project_id: str) -> Dict[str, Any]:
        self.log_tool_invocation("delete_project", {"project_id": project_id})
        if not self.store.projects.delete(project_id):
            raise self.not_found("Project", project_id)
        return create_success_response({"id": project_id}, message="Project deleted")


ProjectId = Annotated[str, Field(description="Project ID")]
OwnerId = Annotated[str, Field(description="Owner user ID")]


def register_project_tools(server: FastMCP, store: Store) -> None:
    """Register project tools with the MCP server"""
    handler = ProjectTools(store)

    @server.tool(name="create_project", description="Create a new project")
    def create_project(
        name: Annotated[str, Field(description="Project name")],
        owner_id: OwnerId,
        description: Annotated[str, Field(description="Project description")] = "",
        status: Annotated[ProjectStatus, Field(description="Project status")] = "active",
    ) -> Dict[str, Any]:
        return invoke(
            "create_project", lambda: handler.create(name, description, owner_id, status)
        )

    @server.tool(name="get_project", description="Get project details by ID")
    def get_project(project_id: ProjectId) -> Dict[str, Any]:
        return invoke("get_project", lambda: handler.get(project_id))

    @server.tool(name="list_projects", description="List all projects in the system")
    def list_projects() -> Dict[str, Any]:
        return invoke("list_projects", handler.list)

    @server.tool(name="get_projects_by_owner", description="Get all projects owned by a user")
    def get_projects_by_owner(owner_id: OwnerId) -> Dict[str, Any]:
        return invoke("get_projects_by_owner", lambda: handler.list_by_owner(owner_id))

    @server.tool(
        name="update_project",
        description="Update project details; only the fields given in 'updates' change",
    )
    def update_project(project_id: ProjectId, updates: ProjectUpdate) -> Dict[str, Any]:
        return invoke("update_project", lambda: handler.update(project_id, updates))

    @server.tool(
        name="delete_project",
        description="Delete a project together with its tasks and their comments",
    )
    def delete_project(project_id: ProjectId) -> Dict[str, Any]:
        return invoke("delete_project", lambda: handler.delete(project_id))
