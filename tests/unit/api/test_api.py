"""
API smoke tests.

Runs the full app against an in-memory SQLite database through
``TestClient`` with the ``get_db`` dependency overridden.
"""

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from fitcoach.api.dependencies import result_or_raise
from fitcoach.core.result import Ok, not_found, persistence_failed, validation_failed
from fitcoach.db.base import metadata
from fitcoach.db.session import get_db
from fitcoach.main import app

SLEEP = {
    "date": "2026-10-19",
    "start_time": "23:00:00",
    "end_time": "07:00:00",
    "duration": 480,
    "quality": 8,
    "hrv": 65,
    "resting_heart_rate": 52,
}
MOOD = {
    "date": "2026-10-19",
    "mood_level": 7,
    "energy_level": 8,
    "stress_level": 3,
    "anxiety_level": 3,
    "mental_clarity": 8,
    "factors": [],
}


@pytest.fixture
def client():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    metadata.create_all(engine)

    def override_get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


class TestHealth:

    def test_root_and_health(self, client):
        assert client.get("/").json()["status"] == "healthy"
        assert client.get("/health").json()["service"] == "fitcoach-api"


class TestSleepAndMood:

    def test_upsert_status_codes(self, client):
        r = client.put("/api/v1/users/u1/sleep/2026-10-19", json=SLEEP)
        assert r.status_code == 201
        r = client.put("/api/v1/users/u1/sleep/2026-10-19", json={**SLEEP, "quality": 6})
        assert r.status_code == 200
        assert r.json()["quality"] == 6

    def test_out_of_range_input_rejected(self, client):
        r = client.put("/api/v1/users/u1/mood/2026-10-19", json={**MOOD, "mood_level": 11})
        assert r.status_code == 422

    def test_delete(self, client):
        client.put("/api/v1/users/u1/mood/2026-10-19", json=MOOD)
        assert client.delete("/api/v1/users/u1/mood/2026-10-19").status_code == 204
        assert client.get("/api/v1/users/u1/mood/2026-10-19").status_code == 404


class TestReadiness:

    def test_insufficient_data_is_404(self, client):
        r = client.post("/api/v1/users/u1/readiness/2026-10-19")
        assert r.status_code == 404
        assert "Insufficient data" in r.json()["detail"]

    def test_flow(self, client):
        client.put("/api/v1/users/u1/sleep/2026-10-19", json=SLEEP)
        client.put("/api/v1/users/u1/mood/2026-10-19", json=MOOD)

        r = client.get("/api/v1/users/u1/readiness/2026-10-19")
        assert r.status_code == 200
        body = r.json()
        assert body["overall_score"] == 79
        assert body["training_adjustment"] == "normal"

        r = client.post("/api/v1/users/u1/readiness/2026-10-19")
        assert r.json()["id"] == body["id"]

        assert len(client.get("/api/v1/users/u1/readiness").json()) == 1
        stats = client.get("/api/v1/users/u1/readiness-stats", params={"as_of": "2026-10-19"}).json()
        assert stats["trends"]["overall"] == [79]
        assert stats["training_adjustments"]["normal"] == 1


class TestVolume:

    def test_flow(self, client):
        r = client.post("/api/v1/users/u1/volume/initialize", params={"level": "beginner"})
        assert r.status_code == 200
        assert len(r.json()) == 10

        r = client.put("/api/v1/users/u1/volume/chest/current", json={"current_volume": 4})
        assert r.json()["status"] == "below_mev"
        assert r.json()["action"] == "increase"

        r = client.put("/api/v1/users/u1/volume/chest", json={"mev": 10, "mav": 8, "mrv": 6})
        assert r.status_code == 422
        assert r.json()["detail"] == ["MAV must be greater than MEV", "MRV must be greater than MAV"]

        recs = client.get("/api/v1/users/u1/volume/recommendations").json()
        assert {r["muscle_group"] for r in recs} >= {"chest", "back"}

        assert client.get("/api/v1/users/u1/volume/forearms").status_code == 404

    def test_goal_range(self, client):
        r = client.get("/api/v1/volume/goal/hypertrophy", params={"muscle_group": "chest"})
        assert r.json() == {"min": 11, "optimal": 18, "max": 20}


class TestSessions:

    def test_physiology(self, client):
        payload = {
            "session": {
                "name": "Pump",
                "exercises": [{"name": "Cable fly", "sets": 4, "reps": "12-15", "rir": 3, "rest_seconds": 30}],
                "special_techniques": [{"name": "Drop set", "parameters": {"type": "drop_set"}}],
            },
            "user_fatigue": 80,
        }
        r = client.post("/api/v1/sessions/physiology", json=payload)
        assert r.status_code == 200
        body = r.json()
        assert body["metabolic_stress"] == 95
        assert body["recovery_time"]["hours"] == 48
        assert len(body["recommendations"]) == 3
        assert sum(body["energy_distribution"].values()) == pytest.approx(100)
        assert set(body["fiber_distribution"]) == {"type_i", "type_iia", "type_iix"}
        assert set(body["fatigue_distribution"]) == {"neural", "metabolic"}


class TestErrorMapping:

    @pytest.mark.parametrize("err,code,detail", [
        (not_found("No volume landmark for 'chest'"), 404, "No volume landmark for 'chest'"),
        (validation_failed(["MAV must be greater than MEV"]), 422, ["MAV must be greater than MEV"]),
        (persistence_failed(context="Failed to save readiness score"), 503, "Failed to save readiness score"),
    ])
    def test_error_kind_to_status(self, err, code, detail):
        with pytest.raises(HTTPException) as exc:
            result_or_raise(err)
        assert exc.value.status_code == code
        assert exc.value.detail == detail

    def test_ok_passes_value_through(self):
        assert result_or_raise(Ok(42)) == 42
