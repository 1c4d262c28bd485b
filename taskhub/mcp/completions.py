"""
Argument completion

Suggests live ids for id-style prompt arguments and resource template
variables. Matching is a case-insensitive prefix test.
"""

from typing import Dict, List, Optional, Union

from mcp.server.fastmcp import FastMCP
from mcp.types import (
    Completion,
    CompletionArgument,
    CompletionContext,
    PromptReference,
    ResourceTemplateReference,
)

from taskhub.services.store import Store

MAX_COMPLETION_VALUES = 100

# argument name -> store collection, per prompt
PROMPT_ID_ARGUMENTS: Dict[str, Dict[str, str]] = {
    "get_user_details": {"user_id": "users"},
    "get_project_details": {"project_id": "projects"},
    "get_projects_by_owner": {"owner_id": "users"},
    "get_project_summary": {"project_id": "projects"},
    "get_task_details": {"task_id": "tasks"},
    "get_tasks_by_project": {"project_id": "projects"},
    "get_tag_details": {"tag_id": "tags"},
    "get_comment_details": {"comment_id": "comments"},
    "get_comments_by_task": {"task_id": "tasks"},
}

# variable name -> store collection, per resource template
RESOURCE_ID_ARGUMENTS: Dict[str, Dict[str, str]] = {
    "user-manager://users/{user_id}": {"user_id": "users"},
    "project-manager://projects/{project_id}": {"project_id": "projects"},
    "task-manager://tasks/{task_id}": {"task_id": "tasks"},
    "tag-manager://tags/{tag_id}": {"tag_id": "tags"},
    "comment-manager://comments/{comment_id}": {"comment_id": "comments"},
}


def complete_ids(store: Store, collection: str, partial: str) -> Completion:
    """Ids in ``collection`` starting with ``partial``, ignoring case."""
    prefix = partial.lower()
    service = getattr(store, collection)
    matches: List[str] = [
        record.id for record in service.list() if record.id.lower().startswith(prefix)
    ]
    return Completion(
        values=matches[:MAX_COMPLETION_VALUES],
        total=len(matches),
        hasMore=len(matches) > MAX_COMPLETION_VALUES,
    )


def resolve_collection(ref: Union[PromptReference, ResourceTemplateReference], argument_name: str) -> Optional[str]:
    if isinstance(ref, PromptReference):
        return PROMPT_ID_ARGUMENTS.get(ref.name, {}).get(argument_name)
    if isinstance(ref, ResourceTemplateReference):
        return RESOURCE_ID_ARGUMENTS.get(ref.uri, {}).get(argument_name)
    return None


def register_completions(server: FastMCP, store: Store) -> None:
    """Register the completion/complete handler"""

    @server.completion()
    async def handle_completion(
        ref: Union[PromptReference, ResourceTemplateReference],
        argument: CompletionArgument,
        context: Optional[CompletionContext],
    ) -> Optional[Completion]:
        collection = resolve_collection(ref, argument.name)
        if collection is None:
            return None
        return complete_ids(store, collection, argument.value)
