"""End-to-end tests for circles, streams, uploads and moderation."""

from uuid import uuid4

from tests.conftest import bearer


class TestCircleFlow:
    """End-to-end tests for circles."""

    def test_circle_posting_requires_membership(self, client):
        owner, member = bearer(), bearer()
        circle = client.post("/circles", json={"name": "Lo-fi"}, headers=owner).json()[
            "circle"
        ]

        outsider_post = client.post(
            "/loops",
            json={"content": {"type": "text", "text": "hi"}, "circle_id": circle["id"]},
            headers=member,
        )
        joined = client.post(f"/circles/{circle['id']}/join", headers=member)
        member_post = client.post(
            "/loops",
            json={"content": {"type": "text", "text": "hi"}, "circle_id": circle["id"]},
            headers=member,
        )

        assert outsider_post.status_code == 403
        assert joined.json() == {"success": True, "joined": True}
        assert member_post.status_code == 201
        assert member_post.json()["loop"]["circle_id"] == circle["id"]

        info = client.get(f"/circles/{circle['id']}", headers=member).json()
        assert info["is_member"] is True
        assert info["circle"]["member_count"] == 2


class TestStreamFlow:
    """End-to-end tests for live streams."""

    def test_going_live_notifies_followers(self, client):
        streamer_id = str(uuid4())
        streamer = bearer(streamer_id)
        fan_id = str(uuid4())
        client.post(
            "/users/follow", json={"target_user_id": streamer_id}, headers=bearer(fan_id)
        )

        stream = client.post(
            "/streams", json={"title": "Sunday set"}, headers=streamer
        ).json()["stream"]
        started = client.post(
            "/streams/notifications",
            json={"stream_id": stream["id"], "action": "start"},
            headers=streamer,
        )

        assert started.status_code == 200
        assert started.json()["notified_followers"] == 1
        notes = client.get("/notifications", headers=bearer(fan_id)).json()
        assert notes["notifications"][0]["type"] == "live_stream_started"

    def test_only_streamer_can_start(self, client):
        stream = client.post(
            "/streams", json={"title": "Sunday set"}, headers=bearer()
        ).json()["stream"]

        response = client.post(
            "/streams/notifications",
            json={"stream_id": stream["id"], "action": "start"},
            headers=bearer(),
        )

        assert response.status_code == 403


class TestUploadFlow:
    """End-to-end tests for media uploads."""

    def test_upload_image(self, client):
        response = client.post(
            "/upload",
            files={"file": ("cover.png", b"\x89PNG data", "image/png")},
            headers=bearer(),
        )

        assert response.status_code == 200
        assert response.json()["kind"] == "image"
        assert response.json()["url"].endswith("cover.png")

    def test_upload_requires_auth(self, client):
        response = client.post(
            "/upload", files={"file": ("cover.png", b"\x89PNG data", "image/png")}
        )

        assert response.status_code == 401


class TestAdminFlow:
    """End-to-end tests for capability management."""

    def test_non_admin_cannot_grant(self, client):
        target_id = str(uuid4())
        client.put("/users/profile", json={"username": "target"}, headers=bearer(target_id))

        response = client.patch(
            f"/admin/users/{target_id}/capabilities",
            json={"moderator": True},
            headers=bearer(),
        )

        assert response.status_code == 403
        assert "error" in response.json()
