"""
Presentation formatters

Structured output serializes records through the response schemas
(data-model field names, ISO-8601 UTC timestamps). Narrative output
renders fixed text templates for prompts, resolving cross references by
name and falling back to placeholders when a reference dangles.
"""

from typing import Any, Dict, Iterable, List, Optional, Type

from taskhub.models import Comment, Project, Tag, Task, User
from taskhub.schemas import (
    CommentResponse,
    ProjectResponse,
    TagResponse,
    TaskResponse,
    UserResponse,
)
from taskhub.schemas.common import ResponseModel, format_timestamp
from taskhub.services.store import Store

UNKNOWN = "Unknown"
UNASSIGNED = "Unassigned"

RESPONSE_SCHEMAS: Dict[type, Type[ResponseModel]] = {
    User: UserResponse,
    Project: ProjectResponse,
    Task: TaskResponse,
    Tag: TagResponse,
    Comment: CommentResponse,
}


# --- Structured ---

def serialize(record: Any) -> Dict[str, Any]:
    """Serialize one entity to its JSON-ready dict."""
    schema = RESPONSE_SCHEMAS[type(record)]
    return schema.model_validate(record).to_payload()


def serialize_many(records: Iterable[Any]) -> List[Dict[str, Any]]:
    return [serialize(record) for record in records]


# --- Cross-reference resolution ---

def user_name(store: Store, user_id: Optional[str], missing: str = UNKNOWN) -> str:
    user = store.users.get(user_id) if user_id else None
    return user.name if user else missing


def project_name(store: Store, project_id: str) -> str:
    project = store.projects.get(project_id)
    return project.name if project else UNKNOWN


def task_title(store: Store, task_id: str) -> str:
    task = store.tasks.get(task_id)
    return task.title if task else UNKNOWN


def assignee_label(store: Store, task: Task, with_id: bool = False) -> str:
    if not task.assignee_id:
        return UNASSIGNED
    user = store.users.get(task.assignee_id)
    if not user:
        return UNASSIGNED
    return f"{user.name} ({task.assignee_id})" if with_id else user.name


def not_found_sentence(entity: str, entity_id: str) -> str:
    return f'{entity} with ID "{entity_id}" not found.'


# --- Users ---

def user_details(store: Store, user_id: str) -> str:
    user = store.users.get(user_id)
    if not user:
        return not_found_sentence("User", user_id)

    return "\n".join([
        "User Details:",
        f"ID: {user.id}",
        f"Name: {user.name}",
        f"Email: {user.email}",
        f"Role: {user.role}",
        f"Created: {format_timestamp(user.created_at)}",
        f"Last Updated: {format_timestamp(user.updated_at)}",
    ])


def user_list(store: Store) -> str:
    users = store.users.list()
    if not users:
        return "No users found in the system."

    lines = [f"- {u.name} ({u.email}) - Role: {u.role} - ID: {u.id}" for u in users]
    return f"All Users ({len(users)} total):\n\n" + "\n".join(lines)


# --- Projects ---

def project_details(store: Store, project_id: str) -> str:
    project = store.projects.get(project_id)
    if not project:
        return not_found_sentence("Project", project_id)

    return "\n".join([
        "Project Details:",
        f"ID: {project.id}",
        f"Name: {project.name}",
        f"Description: {project.description}",
        f"Status: {project.status}",
        f"Owner: {user_name(store, project.owner_id)} ({project.owner_id})",
        f"Created: {format_timestamp(project.created_at)}",
        f"Last Updated: {format_timestamp(project.updated_at)}",
    ])


def project_list(store: Store) -> str:
    projects = store.projects.list()
    if not projects:
        return "No projects found in the system."

    lines = [
        f"- {p.name} ({p.status}) - Owner: {user_name(store, p.owner_id)} - ID: {p.id}"
        for p in projects
    ]
    return f"All Projects ({len(projects)} total):\n\n" + "\n".join(lines)


def projects_by_owner(store: Store, owner_id: str) -> str:
    owner = store.users.get(owner_id)
    if not owner:
        return not_found_sentence("User", owner_id)

    projects = store.projects.list_by_owner(owner_id)
    if not projects:
        return f"{owner.name} has no projects."

    lines = [f"- {p.name} ({p.status}) - ID: {p.id}" for p in projects]
    return (
        f"Projects owned by {owner.name} ({len(projects)} total):\n\n" + "\n".join(lines)
    )


def project_summary(store: Store, project_id: str) -> str:
    """Project details followed by its task statistics and named team members."""
    project = store.projects.get(project_id)
    if not project:
        return not_found_sentence("Project", project_id)

    stats = store.statistics.project_statistics(project_id)
    members = [
        f"{user_name(store, member_id)} ({member_id})" for member_id in stats["teamMembers"]
    ]

    return "\n".join([
        f'Project Summary: "{project.name}" ({project.status})',
        f"Owner: {user_name(store, project.owner_id)} ({project.owner_id})",
        f"Total Tasks: {stats['totalTasks']}",
        f"Completed: {stats['completedTasks']}",
        f"In Progress: {stats['inProgressTasks']}",
        f"Team Members: {', '.join(members) if members else 'None'}",
    ])


# --- Tasks ---

def task_details(store: Store, task_id: str) -> str:
    task = store.tasks.get(task_id)
    if not task:
        return not_found_sentence("Task", task_id)

    tags = [tag for tag in (store.tags.get(tag_id) for tag_id in task.tags) if tag]

    return "\n".join([
        "Task Details:",
        f"ID: {task.id}",
        f"Title: {task.title}",
        f"Description: {task.description}",
        f"Project: {project_name(store, task.project_id)} ({task.project_id})",
        f"Assignee: {assignee_label(store, task, with_id=True)}",
        f"Status: {task.status}",
        f"Priority: {task.priority}",
        f"Due Date: {format_timestamp(task.due_date) if task.due_date else 'Not set'}",
        f"Tags: {', '.join(tag.name for tag in tags) if tags else 'None'}",
        f"Created: {format_timestamp(task.created_at)}",
        f"Last Updated: {format_timestamp(task.updated_at)}",
    ])


def task_list(store: Store) -> str:
    tasks = store.tasks.list()
    if not tasks:
        return "No tasks found in the system."

    lines = [
        f"- {t.title} ({t.status}, {t.priority}) - Project: {project_name(store, t.project_id)}"
        f" - Assignee: {assignee_label(store, t)} - ID: {t.id}"
        for t in tasks
    ]
    return f"All Tasks ({len(tasks)} total):\n\n" + "\n".join(lines)


def tasks_by_project(store: Store, project_id: str) -> str:
    project = store.projects.get(project_id)
    if not project:
        return not_found_sentence("Project", project_id)

    tasks = store.tasks.list_by_project(project_id)
    if not tasks:
        return f'Project "{project.name}" has no tasks.'

    lines = [
        f"- {t.title} ({t.status}, {t.priority}) - Assignee: {assignee_label(store, t)} - ID: {t.id}"
        for t in tasks
    ]
    return (
        f'Tasks for project "{project.name}" ({len(tasks)} total):\n\n' + "\n".join(lines)
    )


# --- Tags ---

def tag_details(store: Store, tag_id: str) -> str:
    tag = store.tags.get(tag_id)
    if not tag:
        return not_found_sentence("Tag", tag_id)

    usage = len(store.tasks.list_by_tag(tag_id))
    return "\n".join([
        "Tag Details:",
        f"ID: {tag.id}",
        f"Name: {tag.name}",
        f"Color: {tag.color}",
        f"Created: {format_timestamp(tag.created_at)}",
        f"Used in {usage} task(s)",
    ])


def tag_list(store: Store) -> str:
    tags = store.tags.list()
    if not tags:
        return "No tags found in the system."

    lines = [
        f"- {tag.name} ({tag.color}) - Used in {len(store.tasks.list_by_tag(tag.id))} task(s)"
        f" - ID: {tag.id}"
        for tag in tags
    ]
    return f"All Tags ({len(tags)} total):\n\n" + "\n".join(lines)


# --- Comments ---

def comment_details(store: Store, comment_id: str) -> str:
    comment = store.comments.get(comment_id)
    if not comment:
        return not_found_sentence("Comment", comment_id)

    return "\n".join([
        "Comment Details:",
        f"ID: {comment.id}",
        f"Content: {comment.content}",
        f"Task: {task_title(store, comment.task_id)} ({comment.task_id})",
        f"Author: {user_name(store, comment.user_id)} ({comment.user_id})",
        f"Created: {format_timestamp(comment.created_at)}",
        f"Last Updated: {format_timestamp(comment.updated_at)}",
    ])


def comments_by_task(store: Store, task_id: str) -> str:
    task = store.tasks.get(task_id)
    if not task:
        return not_found_sentence("Task", task_id)

    comments = store.comments.list_by_task(task_id)
    if not comments:
        return f'Task "{task.title}" has no comments.'

    lines = [
        f"- {user_name(store, c.user_id)}: {c.content} ({format_timestamp(c.created_at)})"
        for c in comments
    ]
    return (
        f'Comments for task "{task.title}" ({len(comments)} total):\n\n' + "\n".join(lines)
    )
