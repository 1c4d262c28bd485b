"""
MCP resources

Each entity has a collection resource ``<entity>-manager://<entities>``
and a per-id template ``<entity>-manager://<entities>/{<entity>_id}``.
Lookups never raise: a missing or unknown id yields an error document.
"""

from typing import Any, Callable, List, Optional
import json

from mcp.server.fastmcp import FastMCP
from mcp.types import Resource

from taskhub.mcp.formatters import serialize, serialize_many
from taskhub.services.store import Store

JSON_MIME_TYPE = "application/json"
STATISTICS_URI = "task-manager://statistics"


def _document(payload: Any) -> str:
    return json.dumps(payload, indent=2)


def entity_document(entity: str, entity_id: Optional[str], lookup: Callable[[str], Any]) -> str:
    """Render one record, or an error document when the id is blank or unknown."""
    if not entity_id:
        return _document({"error": f"{entity} ID is required"})

    record = lookup(entity_id)
    if record is None:
        return _document({"error": f"{entity} not found"})
    return _document(serialize(record))


def iter_entity_resources(store: Store) -> List[Resource]:
    """Concrete per-id resources for every record currently in the store."""
    resources: List[Resource] = []

    for user in store.users.list():
        resources.append(Resource(
            uri=f"user-manager://users/{user.id}",
            name=user.name,
            description=f"User: {user.name} ({user.email})",
            mimeType=JSON_MIME_TYPE,
        ))
    for project in store.projects.list():
        resources.append(Resource(
            uri=f"project-manager://projects/{project.id}",
            name=project.name,
            description=f"Project: {project.name} ({project.status})",
            mimeType=JSON_MIME_TYPE,
        ))
    for task in store.tasks.list():
        resources.append(Resource(
            uri=f"task-manager://tasks/{task.id}",
            name=task.title,
            description=f"Task: {task.title} ({task.status})",
            mimeType=JSON_MIME_TYPE,
        ))
    for tag in store.tags.list():
        resources.append(Resource(
            uri=f"tag-manager://tags/{tag.id}",
            name=tag.name,
            description=f"Tag: {tag.name}",
            mimeType=JSON_MIME_TYPE,
        ))
    for comment in store.comments.list():
        preview = comment.content[:50]
        resources.append(Resource(
            uri=f"comment-manager://comments/{comment.id}",
            name=f"Comment on task {comment.task_id}",
            description=f"Comment by user {comment.user_id}: {preview}",
            mimeType=JSON_MIME_TYPE,
        ))

    return resources


def register_resources(server: FastMCP, store: Store) -> None:
    """Register collection, per-id and statistics resources"""

    # --- Users ---

    @server.resource(
        "user-manager://users",
        name="All Users",
        description="List of all users in the system",
        mime_type=JSON_MIME_TYPE,
    )
    def all_users() -> str:
        return _document(serialize_many(store.users.list()))

    @server.resource(
        "user-manager://users/{user_id}",
        name="User by ID",
        description="Get a specific user by ID",
        mime_type=JSON_MIME_TYPE,
    )
    def user_by_id(user_id: str) -> str:
        return entity_document("User", user_id, store.users.get)

    # --- Projects ---

    @server.resource(
        "project-manager://projects",
        name="All Projects",
        description="List of all projects in the system",
        mime_type=JSON_MIME_TYPE,
    )
    def all_projects() -> str:
        return _document(serialize_many(store.projects.list()))

    @server.resource(
        "project-manager://projects/{project_id}",
        name="Project by ID",
        description="Get a specific project by ID",
        mime_type=JSON_MIME_TYPE,
    )
    def project_by_id(project_id: str) -> str:
        return entity_document("Project", project_id, store.projects.get)

    # --- Tasks ---

    @server.resource(
        "task-manager://tasks",
        name="All Tasks",
        description="List of all tasks in the system",
        mime_type=JSON_MIME_TYPE,
    )
    def all_tasks() -> str:
        return _document(serialize_many(store.tasks.list()))

    @server.resource(
        "task-manager://tasks/{task_id}",
        name="Task by ID",
        description="Get a specific task by ID",
        mime_type=JSON_MIME_TYPE,
    )
    def task_by_id(task_id: str) -> str:
        return entity_document("Task", task_id, store.tasks.get)

    @server.resource(
        STATISTICS_URI,
        name="Task Statistics",
        description="Task counts by status and priority, plus overdue tasks",
        mime_type=JSON_MIME_TYPE,
    )
    def task_statistics() -> str:
        return _document(store.statistics.task_statistics())

    # --- Tags ---

    @server.resource(
        "tag-manager://tags",
        name="All Tags",
        description="List of all tags in the system",
        mime_type=JSON_MIME_TYPE,
    )
    def all_tags() -> str:
        return _document(serialize_many(store.tags.list()))

    @server.resource(
        "tag-manager://tags/{tag_id}",
        name="Tag by ID",
        description="Get a specific tag by ID",
        mime_type=JSON_MIME_TYPE,
    )
    def tag_by_id(tag_id: str) -> str:
        return entity_document("Tag", tag_id, store.tags.get)

    # --- Comments ---

    @server.resource(
        "comment-manager://comments",
        name="All Comments",
        description="List of all comments in the system",
        mime_type=JSON_MIME_TYPE,
    )
    def all_comments() -> str:
        return _document(serialize_many(store.comments.list()))

    @server.resource(
        "comment-manager://comments/{comment_id}",
        name="Comment by ID",
        description="Get a specific comment by ID",
        mime_type=JSON_MIME_TYPE,
    )
    def comment_by_id(comment_id: str) -> str:
        return entity_document("Comment", comment_id, store.comments.get)

