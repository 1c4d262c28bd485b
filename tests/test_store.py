"""
Tests for the store services
============================
CRUD, filters, cascades and statistics against an in-memory database.
"""

from datetime import datetime, timedelta

import pytest
from sqlalchemy import DateTime

from taskhub.db import seed_sample_data
from taskhub.models import Comment, Project, Tag, Task, User
from taskhub.models.common import utcnow
from taskhub.schemas import (
    CommentCreate,
    CommentUpdate,
    ProjectCreate,
    TagCreate,
    TagUpdate,
    TaskCreate,
    TaskUpdate,
    UserCreate,
    UserUpdate,
)


def _user(store, name="Carol", role="user"):
    return store.users.create(UserCreate(name=name, email=f"{name.lower()}@example.com", role=role))


def _project(store, owner_id="user-1", name="Mobile App"):
    return store.projects.create(ProjectCreate(name=name, description="", owner_id=owner_id))


def _task(store, project_id, **fields):
    fields.setdefault("title", "Write docs")
    return store.tasks.create(TaskCreate(project_id=project_id, **fields))


# ============================================================================
# Round trips
# ============================================================================

class TestCreateAndGet:

    def test_user_round_trip(self, store):
        user = _user(store)
        assert user.id.startswith("user-")
        assert user.created_at == user.updated_at

        fetched = store.users.get(user.id)
        assert fetched.name == "Carol"
        assert fetched.email == "carol@example.com"
        assert fetched.role == "user"

    def test_project_round_trip(self, store):
        project = _project(store)
        fetched = store.projects.get(project.id)
        assert fetched.name == "Mobile App"
        assert fetched.status == "active"
        assert fetched.owner_id == "user-1"

    def test_task_round_trip_with_defaults(self, store):
        task = _task(store, "project-9")
        fetched = store.tasks.get(task.id)
        assert fetched.status == "todo"
        assert fetched.priority == "medium"
        assert fetched.assignee_id is None
        assert fetched.due_date is None
        assert fetched.tags == []

    def test_tag_round_trip(self, store):
        tag = store.tags.create(TagCreate(name="urgent", color="#ff0000"))
        fetched = store.tags.get(tag.id)
        assert fetched.name == "urgent"
        assert fetched.color == "#ff0000"

    def test_comment_round_trip(self, store):
        comment = store.comments.create(
            CommentCreate(task_id="task-1", user_id="user-1", content="Looks good")
        )
        fetched = store.comments.get(comment.id)
        assert fetched.content == "Looks good"
        assert fetched.task_id == "task-1"

    def test_ids_are_unique(self, store):
        ids = {_user(store, name=f"User{i}").id for i in range(20)}
        assert len(ids) == 20

    def test_unknown_id_returns_none(self, store):
        assert store.users.get("user-missing") is None
        assert store.tasks.get("") is None

    def test_dangling_references_are_accepted(self, store):
        project = _project(store, owner_id="user-nobody")
        task = _task(store, "project-nowhere", assignee_id="user-nobody")
        assert store.projects.get(project.id).owner_id == "user-nobody"
        assert store.tasks.get(task.id).project_id == "project-nowhere"


# ============================================================================
# Timestamp storage
# ============================================================================

class TestTimestampStorage:

    @pytest.mark.parametrize("model", [User, Project, Task, Tag, Comment])
    def test_timestamp_columns_are_naive_datetime(self, model):
        columns = [c for c in model.__table__.columns if c.name in ("created_at", "updated_at", "due_date")]
        assert columns
        for column in columns:
            assert type(column.type) is DateTime
            assert column.type.timezone is False

    def test_seed_create_and_update_round_trip(self, store):
        seed_sample_data(store.session)
        user = _user(store)
        store.users.update(user.id, UserUpdate(name="Carla"))
        task = _task(store, "project-1", due_date=datetime(2030, 1, 1))
        store.tasks.update(task.id, TaskUpdate(status="done"))

        store.session.expire_all()

        fetched = store.users.get(user.id)
        assert fetched.name == "Carla"
        assert fetched.updated_at.tzinfo is None
        assert fetched.updated_at >= fetched.created_at
        assert store.tasks.get(task.id).due_date == datetime(2030, 1, 1)
        assert store.users.get("user-1").created_at == datetime(2024, 1, 1)


# ============================================================================
# Updates
# ============================================================================

class TestUpdate:

    def test_status_only_update_changes_status_and_updated_at(self, seeded_store):
        before = seeded_store.tasks.get("task-2")
        snapshot = before.model_dump()

        updated = seeded_store.tasks.update("task-2", TaskUpdate(status="done"))

        after = updated.model_dump()
        assert after["status"] == "done"
        assert after["updated_at"] > snapshot["updated_at"]
        for field in ("title", "description", "project_id", "assignee_id", "priority",
                      "due_date", "tags", "created_at", "id"):
            assert after[field] == snapshot[field]

    def test_explicit_null_clears_assignee_and_due_date(self, seeded_store):
        task = seeded_store.tasks.update("task-1", TaskUpdate(assignee_id=None, due_date=None))
        assert task.assignee_id is None
        assert task.due_date is None

    def test_update_unknown_returns_none(self, store):
        assert store.users.update("user-missing", UserUpdate(name="X")) is None

    def test_tag_update_keeps_created_at(self, seeded_store):
        tag = seeded_store.tags.update("tag-1", TagUpdate(color="#000000"))
        assert tag.color == "#000000"
        assert tag.name == "frontend"
        assert tag.created_at == datetime(2024, 1, 1)

    def test_comment_update(self, seeded_store):
        comment = seeded_store.comments.update("comment-1", CommentUpdate(content="Done"))
        assert comment.content == "Done"
        assert comment.updated_at > datetime(2024, 1, 6)


# ============================================================================
# Deletes and cascades
# ============================================================================

class TestDelete:

    @pytest.mark.parametrize("collection", ["users", "projects", "tasks", "tags", "comments"])
    def test_delete_unknown_leaves_collection_unchanged(self, seeded_store, collection):
        service = getattr(seeded_store, collection)
        before = [record.id for record in service.list()]

        assert service.delete("does-not-exist") is False
        assert [record.id for record in service.list()] == before

    def test_user_delete_does_not_cascade(self, seeded_store):
        assert seeded_store.users.delete("user-1") is True
        assert seeded_store.users.get("user-1") is None
        assert seeded_store.projects.get("project-1").owner_id == "user-1"
        assert seeded_store.comments.get("comment-1") is not None

    def test_task_delete_removes_its_comments(self, seeded_store):
        assert seeded_store.tasks.delete("task-1") is True
        assert seeded_store.tasks.get("task-1") is None
        assert seeded_store.comments.get("comment-1") is None
        assert seeded_store.tasks.get("task-2") is not None

    def test_project_delete_cascades_to_tasks_and_comments(self, seeded_store):
        other = _project(seeded_store, name="Other")
        survivor = _task(seeded_store, other.id)

        assert seeded_store.projects.delete("project-1") is True

        assert seeded_store.projects.get("project-1") is None
        assert seeded_store.tasks.list_by_project("project-1") == []
        assert seeded_store.comments.list_by_task("task-1") == []
        assert seeded_store.tasks.get(survivor.id) is not None

    def test_project_cascade_order(self, seeded_store, monkeypatch):
        deleted = []
        original_delete = seeded_store.session.delete

        def recording_delete(instance):
            deleted.append(instance.id)
            original_delete(instance)

        monkeypatch.setattr(seeded_store.session, "delete", recording_delete)
        seeded_store.projects.delete("project-1")

        assert deleted[-1] == "project-1"
        assert deleted.index("comment-1") < deleted.index("task-1")
        assert set(deleted) == {"comment-1", "task-1", "task-2", "project-1"}

    def test_failed_cascade_rolls_back(self, seeded_store, monkeypatch):
        def failing_commit():
            raise RuntimeError("disk full")

        monkeypatch.setattr(seeded_store.session, "commit", failing_commit)
        with pytest.raises(RuntimeError):
            seeded_store.projects.delete("project-1")
        monkeypatch.undo()

        assert seeded_store.projects.get("project-1") is not None
        assert seeded_store.tasks.get("task-1") is not None
        assert seeded_store.comments.get("comment-1") is not None

    def test_tag_delete_detaches_tag_and_touches_task(self, seeded_store):
        before = seeded_store.tasks.get("task-2").updated_at

        assert seeded_store.tags.delete("tag-3") is True

        task = seeded_store.tasks.get("task-2")
        assert task.tags == ["tag-2"]
        assert task.updated_at > before
        assert seeded_store.tags.get("tag-3") is None
        # Untagged tasks are untouched
        assert seeded_store.tasks.get("task-1").updated_at == datetime(2024, 1, 10)

    def test_tag_delete_commits_once(self, seeded_store, monkeypatch):
        commits = []
        original_commit = seeded_store.session.commit

        def counting_commit():
            commits.append(1)
            original_commit()

        monkeypatch.setattr(seeded_store.session, "commit", counting_commit)
        seeded_store.tags.delete("tag-2")
        assert len(commits) == 1


# ============================================================================
# Filters
# ============================================================================

class TestFilters:

    def test_projects_by_owner(self, seeded_store):
        assert [p.id for p in seeded_store.projects.list_by_owner("user-1")] == ["project-1"]
        assert seeded_store.projects.list_by_owner("user-2") == []

    def test_tasks_by_project_assignee_status(self, seeded_store):
        assert {t.id for t in seeded_store.tasks.list_by_project("project-1")} == {"task-1", "task-2"}
        assert [t.id for t in seeded_store.tasks.list_by_assignee("user-2")] == ["task-2"]
        assert [t.id for t in seeded_store.tasks.list_by_status("in-progress")] == ["task-1"]
        assert seeded_store.tasks.list_by_status("review") == []
        assert seeded_store.tasks.list_by_project("project-") == []

    def test_tasks_by_tag_is_exact_membership(self, seeded_store):
        _task(seeded_store, "project-1", title="Similar", tags=["tag-10"])
        assert [t.id for t in seeded_store.tasks.list_by_tag("tag-1")] == ["task-1"]
        assert seeded_store.tasks.list_by_tag("tag") == []

    def test_search_is_case_insensitive_over_title_and_description(self, seeded_store):
        assert [t.id for t in seeded_store.tasks.search("LOGIN")] == ["task-2"]
        assert [t.id for t in seeded_store.tasks.search("mockups")] == ["task-1"]
        assert seeded_store.tasks.search("nothing like this") == []

    def test_comments_ordered_by_created_at(self, store):
        store.session.add_all([
            Comment(id="c-late", task_id="t", user_id="u", content="third",
                    created_at=datetime(2024, 3, 1), updated_at=datetime(2024, 3, 1)),
            Comment(id="c-early", task_id="t", user_id="u", content="first",
                    created_at=datetime(2024, 1, 1), updated_at=datetime(2024, 1, 1)),
            Comment(id="c-mid", task_id="t", user_id="v", content="second",
                    created_at=datetime(2024, 2, 1), updated_at=datetime(2024, 2, 1)),
        ])
        store.session.commit()

        assert [c.id for c in store.comments.list_by_task("t")] == ["c-early", "c-mid", "c-late"]
        assert [c.id for c in store.comments.list_by_user("u")] == ["c-early", "c-late"]


# ============================================================================
# Statistics
# ============================================================================

class TestStatistics:

    def test_empty_store(self, store):
        assert store.statistics.task_statistics() == {
            "total": 0, "byStatus": {}, "byPriority": {}, "overdue": 0,
        }

    def test_overdue_excludes_done_and_future(self, store):
        past = utcnow() - timedelta(days=1)
        future = utcnow() + timedelta(days=1)
        _task(store, "p", title="late", due_date=past)
        _task(store, "p", title="late but done", due_date=past, status="done")
        _task(store, "p", title="not yet", due_date=future)
        _task(store, "p", title="no date")

        stats = store.statistics.task_statistics()
        assert stats["total"] == 4
        assert stats["overdue"] == 1
        assert stats["byStatus"] == {"todo": 3, "done": 1}
        assert stats["byPriority"] == {"medium": 4}

    def test_seeded_task_statistics(self, seeded_store):
        stats = seeded_store.statistics.task_statistics()
        assert stats["total"] == 2
        assert stats["byStatus"] == {"in-progress": 1, "todo": 1}
        assert stats["byPriority"] == {"high": 1, "urgent": 1}
        assert stats["overdue"] == 2

    def test_project_statistics_dedupes_team_members(self, seeded_store):
        _task(seeded_store, "project-1", title="More", assignee_id="user-1", status="done")
        stats = seeded_store.statistics.project_statistics("project-1")
        assert stats == {
            "totalTasks": 3,
            "completedTasks": 1,
            "inProgressTasks": 1,
            "teamMembers": ["user-1", "user-2"],
        }

    def test_unknown_project_has_zero_counts(self, store):
        assert store.statistics.project_statistics("project-missing") == {
            "totalTasks": 0, "completedTasks": 0, "inProgressTasks": 0, "teamMembers": [],
        }


# ============================================================================
# Scenarios
# ============================================================================

def test_scenario_admin_project_unassigned_task(store):
    admin = _user(store, name="Dana", role="admin")
    project = _project(store, owner_id=admin.id, name="Launch")
    _task(store, project.id, title="Plan launch")

    assert store.statistics.project_statistics(project.id) == {
        "totalTasks": 1, "completedTasks": 0, "inProgressTasks": 0, "teamMembers": [],
    }


def test_scenario_tag_lifecycle(store):
    tag = store.tags.create(TagCreate(name="hot", color="#ff0000"))
    task = _task(store, "project-x", title="Tagged", tags=[tag.id, "tag-other"])

    assert [t.id for t in store.tasks.list_by_tag(tag.id)] == [task.id]

    store.tags.delete(tag.id)

    assert store.tags.get(tag.id) is None
    assert store.tasks.get(task.id).tags == ["tag-other"]
    assert store.tasks.list_by_tag(tag.id) == []
