"""
Tests for resources and argument completion
===========================================
"""

import json

import pytest
from mcp.types import PromptReference, ResourceTemplateReference

from taskhub.mcp.completions import MAX_COMPLETION_VALUES, complete_ids, resolve_collection
from taskhub.mcp.resources import entity_document, iter_entity_resources
from taskhub.schemas import TagCreate


async def read_json(server, uri):
    contents = list(await server.read_resource(uri))
    assert contents[0].mime_type == "application/json"
    return json.loads(contents[0].content)


# ============================================================================
# Resources
# ============================================================================

class TestResources:

    @pytest.mark.asyncio
    async def test_collection_resource(self, server):
        tasks = await read_json(server, "task-manager://tasks")
        assert {t["id"] for t in tasks} == {"task-1", "task-2"}
        assert "projectId" in tasks[0]

    @pytest.mark.asyncio
    async def test_entity_resource(self, server):
        user = await read_json(server, "user-manager://users/user-2")
        assert user["name"] == "Bob Smith"
        assert user["createdAt"] == "2024-01-02T00:00:00.000Z"

    @pytest.mark.asyncio
    async def test_unknown_entity_is_error_document(self, server):
        assert await read_json(server, "tag-manager://tags/tag-404") == {"error": "Tag not found"}

    @pytest.mark.asyncio
    async def test_statistics_resource(self, server):
        stats = await read_json(server, "task-manager://statistics")
        assert stats["total"] == 2
        assert stats["byPriority"] == {"high": 1, "urgent": 1}

    def test_blank_id_is_error_document(self, seeded_store):
        document = entity_document("Comment", "", seeded_store.comments.get)
        assert json.loads(document) == {"error": "Comment ID is required"}

    def test_iter_entity_resources_lists_every_record(self, seeded_store):
        uris = {str(resource.uri) for resource in iter_entity_resources(seeded_store)}
        assert "user-manager://users/user-1" in uris
        assert "project-manager://projects/project-1" in uris
        assert "task-manager://tasks/task-2" in uris
        assert "tag-manager://tags/tag-3" in uris
        assert "comment-manager://comments/comment-1" in uris
        assert len(uris) == 9

    @pytest.mark.asyncio
    async def test_list_resources_includes_static_and_per_id(self, server, seeded_store):
        seeded_store.tags.create(TagCreate(name="new", color="#123456"))
        resources = await server.list_resources()
        names = {resource.name for resource in resources}

        assert {"All Users", "All Tasks", "Task Statistics", "new"} <= names

    @pytest.mark.asyncio
    async def test_templates_registered(self, server):
        templates = {t.uriTemplate for t in await server.list_resource_templates()}
        assert templates == {
            "user-manager://users/{user_id}",
            "project-manager://projects/{project_id}",
            "task-manager://tasks/{task_id}",
            "tag-manager://tags/{tag_id}",
            "comment-manager://comments/{comment_id}",
        }


# ============================================================================
# Completions
# ============================================================================

class TestCompletions:

    def test_prefix_match_is_case_insensitive(self, seeded_store):
        completion = complete_ids(seeded_store, "tasks", "TASK-")
        assert sorted(completion.values) == ["task-1", "task-2"]
        assert completion.hasMore is False

    def test_no_match(self, seeded_store):
        assert complete_ids(seeded_store, "users", "zzz").values == []

    def test_results_are_capped(self, store):
        for i in range(MAX_COMPLETION_VALUES + 5):
            store.tags.create(TagCreate(name=f"t{i}", color="#000"))
        completion = complete_ids(store, "tags", "")
        assert len(completion.values) == MAX_COMPLETION_VALUES
        assert completion.total == MAX_COMPLETION_VALUES + 5
        assert completion.hasMore is True

    def test_resolve_prompt_argument(self):
        ref = PromptReference(type="ref/prompt", name="get_projects_by_owner")
        assert resolve_collection(ref, "owner_id") == "users"
        assert resolve_collection(ref, "other") is None

    def test_resolve_resource_template_variable(self):
        ref = ResourceTemplateReference(type="ref/resource", uri="comment-manager://comments/{comment_id}")
        assert resolve_collection(ref, "comment_id") == "comments"

    def test_unknown_reference(self):
        ref = PromptReference(type="ref/prompt", name="list_all_users")
        assert resolve_collection(ref, "user_id") is None
