"""
Integration tests for the chat and script review API.

Runs the FastAPI app against in-memory repositories and a fake LLM.
Auth uses the mock provider: token is "user_id:role:session_id".
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.api.deps import get_conversation_service, get_video_script_repository
from main import app

DOCTOR = {"Authorization": "Bearer doc1:DOCTOR:sess-1"}
OTHER_DOCTOR = {"Authorization": "Bearer doc2:DOCTOR:sess-2"}
ADMIN = {"Authorization": "Bearer boss:ADMIN:sess-admin"}


@pytest.fixture
async def client(conversation, script_repo):
    app.dependency_overrides[get_conversation_service] = lambda: conversation
    app.dependency_overrides[get_video_script_repository] = lambda: script_repo
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.mark.integration
@pytest.mark.asyncio
async def test_send_and_fetch(client, fake_llm):
    fake_llm.replies = ["Flu symptoms include fever..."]

    response = await client.post(
        "/api/chat/messages", json={"message": "What are flu symptoms?"}, headers=DOCTOR
    )

    assert response.status_code == 200, response.text
    assert response.json() == {"message": "Flu symptoms include fever...", "finalized": False}

    response = await client.get("/api/chat/messages", headers=DOCTOR)
    assert response.status_code == 200
    data = response.json()
    assert [(m["role"], m["content"]) for m in data] == [
        ("user", "What are flu symptoms?"),
        ("assistant", "Flu symptoms include fever..."),
    ]
    assert all(isinstance(m["id"], str) and m["id"] for m in data)


@pytest.mark.integration
@pytest.mark.asyncio
async def test_sessions_do_not_share_history(client):
    await client.post("/api/chat/messages", json={"message": "mine"}, headers=DOCTOR)

    response = await client.get("/api/chat/messages", headers=OTHER_DOCTOR)

    assert response.json() == []


@pytest.mark.integration
@pytest.mark.asyncio
async def test_delete_starts_new_conversation(client):
    await client.post("/api/chat/messages", json={"message": "hello"}, headers=DOCTOR)

    response = await client.delete("/api/chat/messages", headers=DOCTOR)
    assert response.status_code == 204

    response = await client.get("/api/chat/messages", headers=DOCTOR)
    assert response.json() == []


@pytest.mark.integration
@pytest.mark.asyncio
async def test_llm_failure_is_502_and_stores_nothing(client, fake_llm, count_rows):
    fake_llm.error = RuntimeError("provider down")

    response = await client.post("/api/chat/messages", json={"message": "hello"}, headers=DOCTOR)

    assert response.status_code == 502
    assert "try again" in response.json()["detail"]
    assert await count_rows() == (0, 0)


@pytest.mark.integration
@pytest.mark.asyncio
async def test_invalid_input_rejected_before_llm(client, fake_llm):
    for payload in ({"message": ""}, {"message": "<p></p>"}, {}):
        response = await client.post("/api/chat/messages", json=payload, headers=DOCTOR)
        assert response.status_code == 422

    assert fake_llm.calls == []


@pytest.mark.integration
@pytest.mark.asyncio
async def test_auth_required(client):
    response = await client.get("/api/chat/messages")
    assert response.status_code == 401

    response = await client.get("/api/chat/messages", headers={"Authorization": "Token doc1"})
    assert response.status_code == 401

    overlong = {"Authorization": "Bearer doc1:DOCTOR:" + "s" * 101}
    response = await client.get("/api/chat/messages", headers=overlong)
    assert response.status_code == 401


@pytest.mark.integration
@pytest.mark.asyncio
async def test_finalize_then_admin_approves(client, fake_llm):
    fake_llm.replies = ["FINALIZED SCRIPT\nTitle: Flu basics"]

    response = await client.post(
        "/api/chat/messages", json={"message": "generate script"}, headers=DOCTOR
    )
    assert response.json() == {"message": "FINALIZED SCRIPT\nTitle: Flu basics", "finalized": True}

    mine = await client.get("/api/scripts/mine", headers=DOCTOR)
    assert [s["status"] for s in mine.json()] == ["PENDING"]

    listing = await client.get("/api/scripts", params={"status": "PENDING"}, headers=ADMIN)
    assert listing.status_code == 200
    body = listing.json()
    assert body["pending_count"] == 1
    script_id = body["scripts"][0]["id"]

    response = await client.post(
        f"/api/scripts/{script_id}/approve",
        json={"video_url": "https://cdn.example.com/flu.mp4"},
        headers=ADMIN,
    )
    assert response.status_code == 200
    assert response.json()["status"] == "APPROVED"
    assert response.json()["video_url"] == "https://cdn.example.com/flu.mp4"

    response = await client.post(
        f"/api/scripts/{script_id}/reject", json={"reason": "changed my mind"}, headers=ADMIN
    )
    assert response.status_code == 409


@pytest.mark.integration
@pytest.mark.asyncio
async def test_reject_requires_reason_and_admin(client, script_repo):
    script = await script_repo.create("doc1", "FINALIZED SCRIPT")

    response = await client.post(
        f"/api/scripts/{script.id}/reject", json={"reason": "off topic"}, headers=DOCTOR
    )
    assert response.status_code == 403

    response = await client.post(
        f"/api/scripts/{script.id}/reject", json={"reason": ""}, headers=ADMIN
    )
    assert response.status_code == 422

    response = await client.post(
        f"/api/scripts/{script.id}/reject", json={"reason": "off topic"}, headers=ADMIN
    )
    assert response.status_code == 200
    assert response.json()["reason"] == "off topic"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_review_unknown_script_is_404(client):
    response = await client.post(
        "/api/scripts/00000000-0000-0000-0000-000000000000/approve",
        json={"video_url": "https://cdn.example.com/v.mp4"},
        headers=ADMIN,
    )
    assert response.status_code == 404


@pytest.mark.integration
@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_get_script_visible_to_author_and_admin_only(client, script_repo):
    script = await script_repo.create("doc1", "FINALIZED SCRIPT\nTitle: Flu")

    response = await client.get(f"/api/scripts/{script.id}", headers=DOCTOR)
    assert response.status_code == 200
    assert response.json()["content"] == "FINALIZED SCRIPT\nTitle: Flu"

    response = await client.get(f"/api/scripts/{script.id}", headers=ADMIN)
    assert response.status_code == 200

    response = await client.get(f"/api/scripts/{script.id}", headers=OTHER_DOCTOR)
    assert response.status_code == 404
