"""End-to-end tests for content flags and search."""

import json
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from loop.interface.api.app import create_app
from tests.conftest import bearer
from tests.di import build_test_container


@pytest.fixture
def admin_id():
    return str(uuid4())


@pytest.fixture
def moderation_client(monkeypatch, admin_id):
    """Client whose configuration names one bootstrap admin."""
    monkeypatch.setenv("AUTH__ADMIN_USER_IDS", json.dumps([admin_id]))
    return TestClient(create_app(container=build_test_container()))


def _post_loop(client, headers, body):
    response = client.post(
        "/loops", json={"content": {"type": "text", "text": body}}, headers=headers
    )
    assert response.status_code == 201
    return response.json()["loop"]


class TestFlagFlow:
    """End-to-end tests for reporting content and reviewing reports."""

    def test_report_then_resolve(self, moderation_client, admin_id):
        client = moderation_client
        reporter_id = str(uuid4())
        reporter = bearer(reporter_id)
        loop = _post_loop(client, bearer(), "spam spam spam")

        created = client.post(
            "/moderation/flags",
            json={
                "target_type": "loop",
                "target_id": loop["id"],
                "reason": "spam",
                "description": "same link in every post",
            },
            headers=reporter,
        )
        assert created.status_code == 201
        flag = created.json()["flag"]
        assert flag["status"] == "pending"
        assert flag["reporter_id"] == reporter_id

        queue = client.get("/moderation/flags", headers=bearer(admin_id))
        assert queue.status_code == 200
        assert [f["id"] for f in queue.json()["flags"]] == [flag["id"]]

        resolved = client.put(
            f"/moderation/flags/{flag['id']}",
            json={
                "status": "resolved",
                "moderator_notes": "Confirmed spam",
                "action_taken": "loop_removed",
            },
            headers=bearer(admin_id),
        )
        assert resolved.status_code == 200
        body = resolved.json()["flag"]
        assert body["status"] == "resolved"
        assert body["moderator_id"] == admin_id
        assert body["reviewed_at"] is not None

        own_view = client.get(f"/moderation/flags/{flag['id']}", headers=reporter)
        assert own_view.json()["status"] == "resolved"

        pending = client.get("/moderation/flags", headers=bearer(admin_id)).json()
        everything = client.get(
            "/moderation/flags", params={"status": "all"}, headers=bearer(admin_id)
        ).json()
        assert pending["flags"] == []
        assert len(everything["flags"]) == 1

    def test_duplicate_report_conflicts(self, moderation_client):
        client = moderation_client
        reporter = bearer()
        loop = _post_loop(client, bearer(), "hello")
        payload = {"target_type": "loop", "target_id": loop["id"], "reason": "other"}

        first = client.post("/moderation/flags", json=payload, headers=reporter)
        second = client.post("/moderation/flags", json=payload, headers=reporter)

        assert first.status_code == 201
        assert second.status_code == 409

    def test_queue_and_review_need_moderate_content(self, moderation_client):
        client = moderation_client
        loop = _post_loop(client, bearer(), "hello")
        flag = client.post(
            "/moderation/flags",
            json={"target_type": "loop", "target_id": loop["id"], "reason": "spam"},
            headers=bearer(),
        ).json()["flag"]

        queue = client.get("/moderation/flags", headers=bearer())
        review = client.put(
            f"/moderation/flags/{flag['id']}",
            json={"status": "dismissed"},
            headers=bearer(),
        )

        assert queue.status_code == 403
        assert review.status_code == 403

    def test_review_cannot_reopen_a_flag(self, moderation_client, admin_id):
        client = moderation_client
        loop = _post_loop(client, bearer(), "hello")
        flag = client.post(
            "/moderation/flags",
            json={"target_type": "loop", "target_id": loop["id"], "reason": "spam"},
            headers=bearer(),
        ).json()["flag"]

        response = client.put(
            f"/moderation/flags/{flag['id']}",
            json={"status": "pending"},
            headers=bearer(admin_id),
        )

        assert response.status_code == 400

    def test_flagging_unknown_target_is_not_found(self, moderation_client):
        response = moderation_client.post(
            "/moderation/flags",
            json={"target_type": "comment", "target_id": str(uuid4()), "reason": "spam"},
            headers=bearer(),
        )

        assert response.status_code == 404

    def test_reporting_requires_auth(self, moderation_client):
        response = moderation_client.post(
            "/moderation/flags",
            json={"target_type": "loop", "target_id": str(uuid4()), "reason": "spam"},
        )

        assert response.status_code == 401


class TestSearchFlow:
    """End-to-end tests for search."""

    def test_anonymous_search(self, client):
        _post_loop(client, bearer(), "Modular synth patch")
        client.put("/users/profile", json={"username": "synth_head"}, headers=bearer())

        response = client.get("/search", params={"q": "synth"})

        assert response.status_code == 200
        body = response.json()
        assert body["query"] == "synth"
        assert len(body["loops"]) == 1
        assert [u["username"] for u in body["users"]] == ["synth_head"]
        assert body["total"] == 2

    def test_scope_limits_sections(self, client):
        _post_loop(client, bearer(), "ambient drone")

        body = client.get("/search", params={"q": "drone", "scope": "users"}).json()

        assert body["loops"] == []

    def test_query_too_short(self, client):
        response = client.get("/search", params={"q": "a"})

        assert response.status_code == 400
        assert "error" in response.json()
