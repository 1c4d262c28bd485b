"""
MCP Server Assembly

Builds the FastMCP server around an injected Store: tools, resources,
prompts and the completion handler all close over the same instance.
"""

from typing import List, Optional
import logging

from mcp.server.fastmcp import FastMCP
from mcp.types import Resource

from taskhub.config import Settings
from taskhub.mcp.completions import register_completions
from taskhub.mcp.prompts import register_prompts
from taskhub.mcp.resources import iter_entity_resources, register_resources
from taskhub.mcp.tools import register_all_tools
from taskhub.services.store import Store

logger = logging.getLogger(__name__)


class TaskHubMCP(FastMCP):
    """
    FastMCP server that also lists one concrete resource per stored record

    FastMCP only lists static resources; the per-id templates are expanded
    here against the store so clients can browse known ids.
    """

    def __init__(self, store: Store, *args, **kwargs):
        self.store = store
        super().__init__(*args, **kwargs)

    async def list_resources(self) -> List[Resource]:
        resources = await super().list_resources()
        return resources + iter_entity_resources(self.store)


def build_server(store: Store, settings: Optional[Settings] = None) -> TaskHubMCP:
    """
    Create the MCP server and register every capability

    Args:
        store: The store all handlers read and mutate
        settings: Runtime settings; defaults are used when omitted

    Returns:
        The configured server, ready to ``run``
    """
    settings = settings or Settings()
    server = TaskHubMCP(
        store,
        settings.server_name,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )

    register_all_tools(server, store, confirmation_timeout=settings.elicitation_timeout_seconds)
    register_resources(server, store)
    register_prompts(server, store)
    register_completions(server, store)

    logger.info(f"Initialized MCP server: {settings.server_name}")
    return server
