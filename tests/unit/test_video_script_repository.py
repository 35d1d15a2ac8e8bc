"""
Unit tests for Video Script Repository.
"""

from uuid import uuid4

import pytest

from app.core.exceptions import InvalidTransitionError
from app.models.enums import ScriptStatus


@pytest.mark.asyncio
async def test_create_starts_pending(script_repo, test_user_id):
    script = await script_repo.create(test_user_id, "FINALIZED SCRIPT\nTitle: Flu")

    assert script.status == ScriptStatus.PENDING
    assert script.user_id == test_user_id
    assert script.content == "FINALIZED SCRIPT\nTitle: Flu"
    assert script.reason is None
    assert script.video_url is None


@pytest.mark.asyncio
async def test_get_missing_returns_none(script_repo):
    assert await script_repo.get(uuid4()) is None


@pytest.mark.asyncio
async def test_approve_sets_video_url(script_repo, test_user_id):
    script = await script_repo.create(test_user_id, "FINALIZED SCRIPT")

    approved = await script_repo.transition(
        script.id, ScriptStatus.APPROVED, video_url="https://cdn.example.com/v.mp4"
    )

    assert approved.status == ScriptStatus.APPROVED
    assert approved.video_url == "https://cdn.example.com/v.mp4"
    assert approved.reason is None
    stored = await script_repo.get(script.id)
    assert stored.status == ScriptStatus.APPROVED


@pytest.mark.asyncio
async def test_reject_sets_reason(script_repo, test_user_id):
    script = await script_repo.create(test_user_id, "FINALIZED SCRIPT")

    rejected = await script_repo.transition(script.id, ScriptStatus.REJECTED, reason="Too long")

    assert rejected.status == ScriptStatus.REJECTED
    assert rejected.reason == "Too long"
    assert rejected.video_url is None


@pytest.mark.asyncio
async def test_status_never_changes_twice(script_repo, test_user_id):
    script = await script_repo.create(test_user_id, "FINALIZED SCRIPT")
    await script_repo.transition(script.id, ScriptStatus.REJECTED, reason="Off topic")

    with pytest.raises(InvalidTransitionError) as exc_info:
        await script_repo.transition(
            script.id, ScriptStatus.APPROVED, video_url="https://cdn.example.com/v.mp4"
        )

    assert exc_info.value.current_status == "REJECTED"
    stored = await script_repo.get(script.id)
    assert stored.status == ScriptStatus.REJECTED
    assert stored.video_url is None


@pytest.mark.asyncio
async def test_transition_missing_returns_none(script_repo):
    result = await script_repo.transition(uuid4(), ScriptStatus.REJECTED, reason="x")
    assert result is None


@pytest.mark.asyncio
async def test_list_filters_and_counts(script_repo):
    a = await script_repo.create("doc_a", "FINALIZED SCRIPT a1")
    await script_repo.create("doc_a", "FINALIZED SCRIPT a2")
    b = await script_repo.create("doc_b", "FINALIZED SCRIPT b1")
    await script_repo.transition(a.id, ScriptStatus.APPROVED, video_url="https://x.test/a.mp4")
    await script_repo.transition(b.id, ScriptStatus.REJECTED, reason="no")

    doc_a = await script_repo.list(user_id="doc_a")
    pending = await script_repo.list(status=ScriptStatus.PENDING)
    counts = await script_repo.count_by_status()

    assert {s.content for s in doc_a} == {"FINALIZED SCRIPT a1", "FINALIZED SCRIPT a2"}
    assert [s.content for s in pending] == ["FINALIZED SCRIPT a2"]
    assert counts == {
        ScriptStatus.PENDING: 1,
        ScriptStatus.APPROVED: 1,
        ScriptStatus.REJECTED: 1,
    }


@pytest.mark.asyncio
async def test_count_by_status_empty(script_repo):
    counts = await script_repo.count_by_status()
    assert counts == {status: 0 for status in ScriptStatus}
