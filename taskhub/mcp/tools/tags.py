"""
Tag MCP Tools

Deleting a tag asks the user first: the handler suspends on a confirmation
round-trip and only mutates the store when the answer is accept + confirm.
"""

from typing import Annotated, Any, Dict
import logging

import anyio
from mcp.server.fastmcp import Context, FastMCP
from pydantic import Field

from taskhub.mcp.base_tool import (
    BaseMCPTool,
    MCPToolError,
    ainvoke,
    create_success_response,
    invoke,
)
from taskhub.mcp.confirmation import CANCEL, DECLINE, Confirmer, ConfirmationResult, elicitation_confirmer
from taskhub.mcp.formatters import serialize, serialize_many
from taskhub.schemas.tag import TagCreate, TagUpdate
from taskhub.services.store import Store

logger = logging.getLogger(__name__)

DEFAULT_CONFIRMATION_TIMEOUT = 300.0


class TagTools(BaseMCPTool):
    """Handlers for tag tools"""

    def __init__(self, store: Store, confirmation_timeout: float = DEFAULT_CONFIRMATION_TIMEOUT):
        super().__init__(store)
        self.confirmation_timeout = confirmation_timeout

    def create(self, name: str, color: str) -> Dict[str, Any]:
        self.log_tool_invocation("create_tag", {"name": name, "color": color})
        tag = self.store.tags.create(TagCreate(name=name, color=color))
        return create_success_response(serialize(tag), message=f"Tag '{tag.name}' created")

    def get(self, tag_id: str) -> Dict[str, Any]:
        tag = self.store.tags.get(tag_id)
        if not tag:
            raise self.not_found("Tag", tag_id)
        return create_success_response(serialize(tag))

    def list(self) -> Dict[str, Any]:
        return create_success_response(serialize_many(self.store.tags.list()))

    def update(self, tag_id: str, updates: TagUpdate) -> Dict[str, Any]:
        self.log_tool_invocation("update_tag", {"tag_id": tag_id})
        self.require_changes(updates.model_dump(exclude_unset=True), tag_id)

        tag = self.store.tags.update(tag_id, updates)
        if not tag:
            raise self.not_found("Tag", tag_id)
        return create_success_response(serialize(tag), message=f"Tag '{tag.name}' updated")

    async def delete(self, tag_id: str, confirm: Confirmer) -> Dict[str, Any]:
        """
        Delete a tag after the user confirms

        Returns:
            {"success": True, "message"} when deleted, otherwise
            {"success": False, "reason": "declined" | "cancelled", "message"}

        Raises:
            MCPToolError: If the tag does not exist (checked before asking)
        """
        self.log_tool_invocation("delete_tag", {"tag_id": tag_id})
        tag = self.store.tags.get(tag_id)
        if not tag:
            raise self.not_found("Tag", tag_id)

        message = (
            f'Are you sure you want to delete the tag "{tag.name}" (ID: {tag.id})? '
            "This action cannot be undone."
        )
        try:
            with anyio.fail_after(self.confirmation_timeout):
                answer = await confirm(message)
        except TimeoutError:
            logger.warning(
                f"No confirmation for tag {tag_id} after {self.confirmation_timeout}s"
            )
            answer = ConfirmationResult(action=CANCEL)

        if answer.approved:
            if not self.store.tags.delete(tag_id):
                raise MCPToolError(
                    code="INTERNAL_ERROR",
                    message="Tag deletion failed",
                    details={"id": tag_id},
                )
            return {"success": True, "message": f'Tag "{tag.name}" deleted successfully'}

        if answer.action == DECLINE:
            return {
                "success": False,
                "reason": "declined",
                "message": "Tag deletion declined by user",
            }
        return {"success": False, "reason": "cancelled", "message": "Tag deletion cancelled"}


TagId = Annotated[str, Field(description="Tag ID")]


def register_tag_tools(
    server: FastMCP,
    store: Store,
    confirmation_timeout: float = DEFAULT_CONFIRMATION_TIMEOUT,
) -> None:
    """Register tag tools with the MCP server"""
    handler = TagTools(store, confirmation_timeout=confirmation_timeout)

    @server.tool(name="create_tag", description="Create a new tag")
    def create_tag(
        name: Annotated[str, Field(description="Tag name")],
        color: Annotated[str, Field(description="Tag color (hex code)")],
    ) -> Dict[str, Any]:
        return invoke("create_tag", lambda: handler.create(name, color))

    @server.tool(name="get_tag", description="Get tag details by ID")
    def get_tag(tag_id: TagId) -> Dict[str, Any]:
        return invoke("get_tag", lambda: handler.get(tag_id))

    @server.tool(name="list_tags", description="List all tags in the system")
    def list_tags() -> Dict[str, Any]:
        return invoke("list_tags", handler.list)

    @server.tool(
        name="update_tag",
        description="Update tag details; only the fields given in 'updates' change",
    )
    def update_tag(tag_id: TagId, updates: TagUpdate) -> Dict[str, Any]:
        return invoke("update_tag", lambda: handler.update(tag_id, updates))

    @server.tool(
        name="delete_tag",
        description="Delete a tag after asking the user to confirm; tasks keep their other tags",
    )
    async def delete_tag(tag_id: TagId, ctx: Context) -> Dict[str, Any]:
        return await ainvoke(
            "delete_tag", lambda: handler.delete(tag_id, elicitation_confirmer(ctx))
        )
