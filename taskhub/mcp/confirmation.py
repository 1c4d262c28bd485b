"""
Interactive confirmation for destructive actions

The server asks the client a yes/no question through MCP elicitation and
suspends until the correlated answer arrives. Handlers only see the
``Confirmer`` callable, so the flow can be driven without a live client.
"""

from dataclasses import dataclass
from typing import Awaitable, Callable
import logging

from mcp.server.fastmcp import Context
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

ACCEPT = "accept"
DECLINE = "decline"
CANCEL = "cancel"


class DeleteConfirmation(BaseModel):
    """Schema presented to the user when confirming a deletion."""
    confirm: bool = Field(
        title="Confirm deletion",
        description="Check this box to confirm you want to delete this tag",
    )


@dataclass
class ConfirmationResult:
    """Outcome of a confirmation request: accept, decline or cancel."""
    action: str
    confirmed: bool = False

    @property
    def approved(self) -> bool:
        return self.action == ACCEPT and self.confirmed


Confirmer = Callable[[str], Awaitable[ConfirmationResult]]


def elicitation_confirmer(ctx: Context) -> Confirmer:
    """Build a Confirmer that asks the connected client via elicitation."""

    async def confirm(message: str) -> ConfirmationResult:
        result = await ctx.elicit(message=message, schema=DeleteConfirmation)
        logger.info(f"Confirmation answered: {result.action}")
        if result.action == ACCEPT:
            return ConfirmationResult(action=ACCEPT, confirmed=bool(result.data.confirm))
        return ConfirmationResult(action=result.action)

    return confirm
