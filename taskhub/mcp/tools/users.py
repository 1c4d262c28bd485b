"""
User MCP Tools

create_user, get_user, list_users, update_user, delete_user.
Deleting a user does not cascade: projects, tasks and comments keep the id.
"""

from typing import Annotated, Any, Dict

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from taskhub.mcp.base_tool import BaseMCPTool, create_success_response, invoke
from taskhub.mcp.formatters import serialize, serialize_many
from taskhub.models.user import UserRole
from taskhub.schemas.user import UserCreate, UserUpdate
from taskhub.services.store import Store


class UserTools(BaseMCPTool):
    """Handlers for user tools"""

    def create(self, name: str, email: str, role: str) -> Dict[str, Any]:
        self.log_tool_invocation("create_user", {"name": name, "role": role})
        user = self.store.users.create(UserCreate(name=name, email=email, role=role))
        return create_success_response(serialize(user), message=f"User '{user.name}' created")

    def get(self, user_id: str) -> Dict[str, Any]:
        user = self.store.users.get(user_id)
        if not user:
            raise self.not_found("User", user_id)
        return create_success_response(serialize(user))

    def list(self) -> Dict[str, Any]:
        return create_success_response(serialize_many(self.store.users.list()))

    def update(self, user_id: str, updates: UserUpdate) -> Dict[str, Any]:
        self.log_tool_invocation("update_user", {"user_id": user_id})
        self.require_changes(updates.model_dump(exclude_unset=True), user_id)

        user = self.store.users.update(user_id, updates)
        if not user:
            raise self.not_found("User", user_id)
        return create_success_response(serialize(user), message=f"User '{user.name}' updated")

    def delete(self, user_id: str) -> Dict[str, Any]:
        self.log_tool_invocation("delete_user", {"user_id": user_id})
        if not self.store.users.delete(user_id):
            raise self.not_found("User", user_id)
        return create_success_response({"id": user_id}, message="User deleted")


UserId = Annotated[str, Field(description="User ID")]


def register_user_tools(server: FastMCP, store: Store) -> None:
    """Register user tools with the MCP server"""
    handler = UserTools(store)

    @server.tool(name="create_user", description="Create a new user in the system")
    def create_user(
        name: Annotated[str, Field(description="User full name")],
        email: Annotated[str, Field(description="User email address")],
        role: Annotated[UserRole, Field(description="User role")],
    ) -> Dict[str, Any]:
        return invoke("create_user", lambda: handler.create(name, email, role))

    @server.tool(name="get_user", description="Get user details by ID")
    def get_user(user_id: UserId) -> Dict[str, Any]:
        return invoke("get_user", lambda: handler.get(user_id))

    @server.tool(name="list_users", description="List all users in the system")
    def list_users() -> Dict[str, Any]:
        return invoke("list_users", handler.list)

    @server.tool(
        name="update_user",
        description="Update user details; only the fields given in 'updates' change",
    )
    def update_user(user_id: UserId, updates: UserUpdate) -> Dict[str, Any]:
        return invoke("update_user", lambda: handler.update(user_id, updates))

    @server.tool(
        name="delete_user",
        description="Delete a user; records referencing the user are kept",
    )
    def delete_user(user_id: UserId) -> Dict[str, Any]:
        return invoke("delete_user", lambda: handler.delete(user_id))
