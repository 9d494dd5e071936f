"""Test the /rest-timer endpoints."""

from fastapi.testclient import TestClient

from tests._factories import FakeClock


def _start_rest(client: TestClient) -> None:
    session = client.post("/session", json={}).json()
    bench = session["exercises"][0]
    working = next(s for s in bench["sets"] if s["set_type"] == "working")
    client.post(f"/session/exercises/{bench['id']}/sets/{working['id']}/toggle")


class TestRestTimer:
    """Test the rest timer lifecycle over HTTP."""

    def test_idle(self, client: TestClient):
        data = client.get("/rest-timer").json()
        assert data["running"] is False
        assert data["remaining_seconds"] == 0

    def test_counts_down(self, client: TestClient, clock: FakeClock):
        _start_rest(client)
        clock.advance(100)

        data = client.get("/rest-timer").json()

        assert data["running"] is True
        assert data["duration_seconds"] == 150
        assert data["remaining_seconds"] == 50
        assert data["expired"] is False

    def test_expires(self, client: TestClient, clock: FakeClock):
        _start_rest(client)
        clock.advance(200)
        data = client.get("/rest-timer").json()
        assert data["remaining_seconds"] == 0
        assert data["expired"] is True

    def test_extend_and_dismiss(self, client: TestClient, clock: FakeClock):
        _start_rest(client)
        clock.advance(140)

        response = client.post("/rest-timer/extend", json={})
        assert response.status_code == 200
        assert response.json()["remaining_seconds"] == 40

        response = client.delete("/rest-timer")
        assert response.status_code == 200
        assert response.json()["running"] is False

    def test_expiry_flagged_on_one_poll(self, client: TestClient, clock: FakeClock):
        _start_rest(client)
        clock.advance(200)

        first = client.get("/rest-timer").json()
        second = client.get("/rest-timer").json()

        assert first["just_expired"] is True
        assert second["expired"] is True
        assert second["just_expired"] is False

    def test_extend_rejects_non_positive(self, client: TestClient):
        _start_rest(client)
        assert client.post("/rest-timer/extend", json={"seconds": -30}).status_code == 422
        assert client.post("/rest-timer/extend", json={"seconds": 0}).status_code == 422

    def test_extend_when_idle(self, client: TestClient):
        assert client.post("/rest-timer/extend", json={"seconds": 30}).status_code == 409
