"""HTTP tests for the /api routes."""

from fastapi.testclient import TestClient

from race_event_api.app.main import create_app
from race_event_api.app.storage import MemStorage


EVENT_BODY = {
    "title": "Sunrise Half Marathon",
    "description": "21K along the coast",
    "date": "2024-06-02T05:30:00",
    "location": "Surabaya, Indonesia",
    "category": "Running",
    "capacity": 2,
    "price": 40,
    "organizerId": 2,
    "status": "published",
}

USER_BODY = {
    "username": "rina",
    "password": "hunter2",
    "email": "rina@example.com",
    "fullName": "Rina Runner",
}


class TestAuth:
    def test_login_and_me(self, client):
        assert client.post("/api/users", json=USER_BODY).status_code == 201

        response = client.post("/api/auth/login", json={"username": "rina", "password": "hunter2"})
        assert response.status_code == 200
        body = response.json()
        assert body["user"]["username"] == "rina"
        assert "password" not in body["user"]

        me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {body['token']}"})
        assert me.status_code == 200
        assert me.json()["fullName"] == "Rina Runner"

    def test_bad_credentials(self, client):
        client.post("/api/users", json=USER_BODY)
        response = client.post("/api/auth/login", json={"username": "rina", "password": "nope"})
        assert response.status_code == 401
        assert response.json() == {"message": "Invalid username or password"}

    def test_me_requires_token(self, client):
        response = client.get("/api/auth/me")
        assert response.status_code == 401
        assert response.json() == {"message": "Authentication required"}

    def test_me_rejects_bad_token(self, client):
        response = client.get("/api/auth/me", headers={"Authorization": "Bearer not.a.token"})
        assert response.status_code == 401
        assert response.json() == {"message": "Invalid or expired token"}

    def test_seeded_accounts(self, seeded_client):
        response = seeded_client.post("/api/auth/login", json={"username": "organizer", "password": "organizer123"})
        assert response.status_code == 200
        assert response.json()["user"]["role"] == "organizer"


class TestUsers:
    def test_create_hides_password(self, client, storage):
        response = client.post("/api/users", json=USER_BODY)
        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 1
        assert body["role"] == "participant"
        assert "password" not in body
        assert storage.get_user(1).password != "hunter2"

    def test_duplicate_username_and_email(self, client):
        client.post("/api/users", json=USER_BODY)

        same_name = client.post("/api/users", json={**USER_BODY, "email": "other@example.com"})
        assert same_name.status_code == 400
        assert same_name.json() == {"message": "Username already exists"}

        same_email = client.post("/api/users", json={**USER_BODY, "username": "other"})
        assert same_email.status_code == 400
        assert same_email.json() == {"message": "Email already exists"}

    def test_update_cannot_take_another_users_name(self, client):
        client.post("/api/users", json=USER_BODY)
        client.post("/api/users", json={**USER_BODY, "username": "budi", "email": "budi@example.com"})

        response = client.patch("/api/users/2", json={"username": "rina"})
        assert response.status_code == 400

        response = client.patch("/api/users/2", json={"fullName": "Budi Santoso"})
        assert response.status_code == 200
        assert response.json()["username"] == "budi"

    def test_list_is_admin_only(self, client, admin_headers, participant_headers):
        client.post("/api/users", json=USER_BODY)

        assert client.get("/api/users").status_code == 401
        forbidden = client.get("/api/users", headers=participant_headers)
        assert forbidden.status_code == 403
        assert forbidden.json() == {"message": "Insufficient permissions"}

        response = client.get("/api/users", headers=admin_headers)
        assert response.status_code == 200
        assert [user["username"] for user in response.json()] == ["rina"]
        assert all("password" not in user for user in response.json())

    def test_delete_is_admin_only(self, client, admin_headers, participant_headers):
        client.post("/api/users", json=USER_BODY)
        assert client.delete("/api/users/1", headers=participant_headers).status_code == 403
        assert client.delete("/api/users/1", headers=admin_headers).status_code == 204
        assert client.get("/api/users/1").status_code == 404

    def test_missing_fields(self, client):
        response = client.post("/api/users", json={"username": "rina"})
        assert response.status_code == 400
        message = response.json()["message"]
        assert '"password"' in message
        assert '"email"' in message


class TestEvents:
    def test_create_and_read(self, client):
        response = client.post("/api/events", json=EVENT_BODY)
        assert response.status_code == 201
        event = response.json()
        assert event["id"] == 1
        assert event["organizerId"] == 2
        assert event["registrationOpen"] is True
        assert "createdAt" in event

        assert client.get("/api/events/1").json()["title"] == "Sunrise Half Marathon"

    def test_filters_combine(self, client):
        client.post("/api/events", json=EVENT_BODY)
        client.post("/api/events", json={**EVENT_BODY, "status": "draft"})
        client.post("/api/events", json={**EVENT_BODY, "organizerId": 9})

        published = client.get("/api/events", params={"status": "published"}).json()
        assert [e["id"] for e in published] == [1, 3]

        mine = client.get("/api/events", params={"organizerId": 2, "status": "published"}).json()
        assert [e["id"] for e in mine] == [1]

    def test_unknown_status_filter(self, client):
        assert client.get("/api/events", params={"status": "archived"}).status_code == 400

    def test_patch_keeps_other_fields(self, client):
        client.post("/api/events", json=EVENT_BODY)
        response = client.patch("/api/events/1", json={"status": "cancelled"})
        assert response.status_code == 200
        event = response.json()
        assert event["status"] == "cancelled"
        assert event["title"] == EVENT_BODY["title"]
        assert event["capacity"] == 2

    def test_patch_cannot_null_required_field(self, client):
        client.post("/api/events", json=EVENT_BODY)
        response = client.patch("/api/events/1", json={"title": None})
        assert response.status_code == 400
        assert client.get("/api/events/1").json()["title"] == EVENT_BODY["title"]

    def test_not_found(self, client):
        response = client.get("/api/events/42")
        assert response.status_code == 404
        assert response.json() == {"message": "Event not found"}
        assert client.patch("/api/events/42", json={"title": "x"}).status_code == 404

    def test_delete(self, client):
        client.post("/api/events", json=EVENT_BODY)
        assert client.delete("/api/events/1").status_code == 204
        assert client.delete("/api/events/1").status_code == 404


class TestRegistrations:
    def test_policy_over_http(self, client, make_event):
        event = make_event(capacity=2)

        first = client.post("/api/registrations", json={"eventId": event.id, "userId": 10})
        assert first.status_code == 201
        assert first.json()["status"] == "registered"

        again = client.post("/api/registrations", json={"eventId": event.id, "userId": 10})
        assert again.status_code == 400
        assert again.json() == {"message": "User is already registered for this event"}

        assert client.post("/api/registrations", json={"eventId": event.id, "userId": 11}).status_code == 201

        full = client.post("/api/registrations", json={"eventId": event.id, "userId": 12})
        assert full.status_code == 400
        assert full.json() == {"message": "Event has reached maximum capacity"}

        listed = client.get("/api/registrations", params={"eventId": event.id}).json()
        assert [r["userId"] for r in listed] == [10, 11]

    def test_unknown_and_closed_events(self, client, make_event):
        missing = client.post("/api/registrations", json={"eventId": 99, "userId": 1})
        assert missing.status_code == 404
        assert missing.json() == {"message": "Event not found"}

        closed = make_event(registration_open=False)
        response = client.post("/api/registrations", json={"eventId": closed.id, "userId": 1})
        assert response.status_code == 400
        assert response.json() == {"message": "Registration for this event is closed"}

    def test_unknown_events_leave_no_locks(self, storage):
        app = create_app(storage=storage)
        client = TestClient(app)
        for event_id in range(1000, 1050):
            response = client.post("/api/registrations", json={"eventId": event_id, "userId": 1})
            assert response.status_code == 404
        assert len(app.state.registration_locks) == 0

    def test_list_requires_filter(self, client):
        response = client.get("/api/registrations")
        assert response.status_code == 400
        assert response.json() == {"message": "Either eventId or userId query parameter is required"}

    def test_patch_and_delete(self, client, make_event):
        event = make_event()
        client.post("/api/registrations", json={"eventId": event.id, "userId": 3, "bibNumber": "C-7"})

        response = client.patch("/api/registrations/1", json={"status": "checked_in", "eventId": 999})
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "checked_in"
        assert body["bibNumber"] == "C-7"
        assert body["eventId"] == event.id

        assert client.delete("/api/registrations/1").status_code == 204
        assert client.get("/api/registrations/1").status_code == 404


class TestCommunities:
    def test_crud_and_members(self, client):
        created = client.post(
            "/api/communities",
            json={"name": "Bandung Trail Club", "description": "Weekend trail runs", "managerId": 2},
        )
        assert created.status_code == 201
        community_id = created.json()["id"]

        assert client.get("/api/communities", params={"managerId": 2}).json()[0]["name"] == "Bandung Trail Club"
        renamed = client.patch(f"/api/communities/{community_id}", json={"name": "Bandung Trail Runners"})
        assert renamed.json()["description"] == "Weekend trail runs"

        for _ in range(2):
            joined = client.post("/api/community-members", json={"communityId": community_id, "userId": 3})
            assert joined.status_code == 201
            assert "joinDate" in joined.json()

        members = client.get("/api/community-members", params={"communityId": community_id}).json()
        assert len(members) == 2
        assert client.get("/api/community-members").status_code == 400

        assert client.delete(f"/api/community-members/{members[0]['id']}").status_code == 204
        assert client.get(f"/api/community-members/{members[0]['id']}").status_code == 404
        assert client.delete(f"/api/communities/{community_id}").status_code == 204

    def test_move_member(self, client):
        joined = client.post("/api/community-members", json={"communityId": 1, "userId": 3}).json()

        moved = client.patch(f"/api/community-members/{joined['id']}", json={"communityId": 2})
        assert moved.status_code == 200
        assert moved.json()["communityId"] == 2
        assert moved.json()["userId"] == 3
        assert moved.json()["joinDate"] == joined["joinDate"]

        assert client.get("/api/community-members", params={"communityId": 1}).json() == []
        assert client.patch("/api/community-members/1", json={"userId": None}).status_code == 400
        assert client.patch("/api/community-members/99", json={"userId": 4}).status_code == 404


class TestRacePacks:
    PACK = {
        "eventId": 1,
        "name": "Finisher Medal",
        "sku": "MD-1",
        "category": "Awards",
        "stockQuantity": 10,
        "distributedQuantity": 4,
    }

    def test_list_requires_event(self, client):
        response = client.get("/api/race-packs")
        assert response.status_code == 400
        assert response.json() == {"message": "eventId query parameter is required"}

    def test_create_and_distribute(self, client):
        assert client.post("/api/race-packs", json=self.PACK).status_code == 201
        response = client.patch("/api/race-packs/1", json={"distributedQuantity": 10})
        assert response.status_code == 200
        assert response.json()["stockQuantity"] == 10
        assert [p["sku"] for p in client.get("/api/race-packs", params={"eventId": 1}).json()] == ["MD-1"]

    def test_overdraw_is_rejected(self, client):
        response = client.post("/api/race-packs", json={**self.PACK, "distributedQuantity": 11})
        assert response.status_code == 400
        assert "distributedQuantity cannot exceed stockQuantity" in response.json()["message"]

        client.post("/api/race-packs", json=self.PACK)
        assert client.patch("/api/race-packs/1", json={"stockQuantity": 3}).status_code == 400
        assert client.get("/api/race-packs/1").json()["distributedQuantity"] == 4


class TestCheckpoints:
    def test_record_and_list(self, client):
        response = client.post(
            "/api/participant-checkpoints",
            json={"registrationId": 5, "checkpointName": "Checkpoint 1", "checkpointDistance": 7, "status": "active"},
        )
        assert response.status_code == 201
        assert response.json()["timestamp"]

        assert client.get("/api/participant-checkpoints").status_code == 400
        listed = client.get("/api/participant-checkpoints", params={"registrationId": 5}).json()
        assert [c["checkpointName"] for c in listed] == ["Checkpoint 1"]

        finished = client.patch("/api/participant-checkpoints/1", json={"status": "finished"})
        assert finished.json()["status"] == "finished"
        assert client.delete("/api/participant-checkpoints/1").status_code == 204

    def test_unknown_status(self, client):
        response = client.post(
            "/api/participant-checkpoints",
            json={"registrationId": 5, "checkpointName": "Gate", "status": "lost"},
        )
        assert response.status_code == 400


class TestStats:
    def test_empty_store(self, client):
        assert client.get("/api/stats").json() == {
            "activeEvents": 0,
            "totalRegistrations": 0,
            "communities": 0,
            "revenue": 0,
        }

    def test_seeded_store(self, seeded_client):
        assert seeded_client.get("/api/stats").json() == {
            "activeEvents": 3,
            "totalRegistrations": 1145,
            "communities": 5,
            "revenue": 86545,
        }

    def test_only_published_events_count(self, client, make_event):
        event = make_event(price=50)
        make_event(status="draft", price=1000)
        client.post("/api/registrations", json={"eventId": event.id, "userId": 3})
        client.post("/api/registrations", json={"eventId": 2, "userId": 3})

        stats = client.get("/api/stats").json()
        assert stats["activeEvents"] == 1
        assert stats["totalRegistrations"] == 1
        assert stats["revenue"] == 50


class TestErrors:
    def test_unknown_route(self, client):
        response = client.get("/api/nowhere")
        assert response.status_code == 404
        assert "message" in response.json()

    def test_unexpected_error_is_500(self):
        class BrokenStorage(MemStorage):
            def list_events(self):
                raise RuntimeError("disk on fire")

        client = TestClient(create_app(storage=BrokenStorage()), raise_server_exceptions=False)
        response = client.get("/api/events")
        assert response.status_code == 500
        assert response.json() == {"message": "Internal server error"}
