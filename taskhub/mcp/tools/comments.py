"""
Comment MCP Tools

Comments reference a task and an author by id; neither is validated.
Per-task and per-user listings come back oldest first.
"""

from typing import Annotated, Any, Dict

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from taskhub.mcp.base_tool import BaseMCPTool, create_success_response, invoke
from taskhub.mcp.formatters import serialize, serialize_many
from taskhub.schemas.comment import CommentCreate, CommentUpdate
from taskhub.services.store import Store


class CommentTools(BaseMCPTool):
    """Handlers for comment tools"""

    def create(self, task_id: str, user_id: str, content: str) -> Dict[str, Any]:
        self.log_tool_invocation("create_comment", {"task_id": task_id, "user_id": user_id})
        comment = self.store.comments.create(
            CommentCreate(task_id=task_id, user_id=user_id, content=content)
        )
        return create_success_response(serialize(comment), message="Comment created")

    def get(self, comment_id: str) -> Dict[str, Any]:
        comment = self.store.comments.get(comment_id)
        if not comment:
            raise self.not_found("Comment", comment_id)
        return create_success_response(serialize(comment))

    def list_by_task(self, task_id: str) -> Dict[str, Any]:
        return create_success_response(serialize_many(self.store.comments.list_by_task(task_id)))

    def list_by_user(self, user_id: str) -> Dict[str, Any]:
        return create_success_response(serialize_many(self.store.comments.list_by_user(user_id)))

    def update(self, comment_id: str, content: str) -> Dict[str, Any]:
        self.log_tool_invocation("update_comment", {"comment_id": comment_id})
        comment = self.store.comments.update(comment_id, CommentUpdate(content=content))
        if not comment:
            raise self.not_found("Comment", comment_id)
        return create_success_response(serialize(comment), message="Comment updated")

    def delete(self, comment_id: str) -> Dict[str, Any]:
        self.log_tool_invocation("delete_comment", {"comment_id": comment_id})
        if not self.store.comments.delete(comment_id):
            raise self.not_found("Comment", comment_id)
        return create_success_response({"id": comment_id}, message="Comment deleted")


CommentId = Annotated[str, Field(description="Comment ID")]


def register_comment_tools(server: FastMCP, store: Store) -> None:
    """Register comment tools with the MCP server"""
    handler = CommentTools(store)

    @server.tool(name="create_comment", description="Create a new comment on a task")
    def create_comment(
        task_id: Annotated[str, Field(description="Task ID")],
        user_id: Annotated[str, Field(description="User ID (comment author)")],
        content: Annotated[str, Field(description="Comment content")],
    ) -> Dict[str, Any]:
        return invoke("create_comment", lambda: handler.create(task_id, user_id, content))

    @server.tool(name="get_comment", description="Get comment details by ID")
    def get_comment(comment_id: CommentId) -> Dict[str, Any]:
        return invoke("get_comment", lambda: handler.get(comment_id))

    @server.tool(name="get_comments_by_task", description="Get all comments for a task")
    def get_comments_by_task(
        task_id: Annotated[str, Field(description="Task ID")],
    ) -> Dict[str, Any]:
        return invoke("get_comments_by_task", lambda: handler.list_by_task(task_id))

    @server.tool(name="get_comments_by_user", description="Get all comments by a user")
    def get_comments_by_user(
        user_id: Annotated[str, Field(description="User ID")],
    ) -> Dict[str, Any]:
        return invoke("get_comments_by_user", lambda: handler.list_by_user(user_id))

    @server.tool(name="update_comment", description="Update comment content")
    def update_comment(
        comment_id: CommentId,
        content: Annotated[str, Field(description="Comment content")],
    ) -> Dict[str, Any]:
        return invoke("update_comment", lambda: handler.update(comment_id, content))

    @server.tool(name="delete_comment", description="Delete a comment")
    def delete_comment(comment_id: CommentId) -> Dict[str, Any]:
        return invoke("delete_comment", lambda: handler.delete(comment_id))
