"""
Tests for the ladder play API.
"""

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from ladder.models import LadderDay


@pytest.fixture
def started_day(session: Session) -> LadderDay:
    day = LadderDay(date=(datetime.utcnow() - timedelta(minutes=10)).replace(microsecond=0))
    session.add(day)
    session.commit()
    session.refresh(day)
    return day


def test_health(client: TestClient):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_next_ladder_day_none(client: TestClient):
    response = client.get("/api/play/next-ladder-day")
    assert response.status_code == 200
    assert response.json() is None


def test_next_ladder_day_not_started(client: TestClient, session: Session, make_team):
    day = LadderDay(date=(datetime.utcnow() + timedelta(days=2)).replace(microsecond=0))
    session.add(day)
    session.commit()
    for _ in range(4):
        make_team()

    response = client.get("/api/play/next-ladder-day")
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == day.id
    assert data["matches"] == []


def test_next_ladder_day_generates_on_read(client: TestClient, started_day, make_team):
    for _ in range(8):
        make_team()

    response = client.get("/api/play/next-ladder-day")
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == started_day.id
    assert len(data["matches"]) == 8

    for match in data["matches"]:
        assert match["order"] in (1, 2)
        assert len(match["maplist"]) == 9
        assert len(match["players"]) == 8
        assert {p["team"] for p in match["players"]} == {"ALPHA", "BRAVO"}
        assert {e["mode"] for e in match["maplist"]} <= {"SZ", "TC", "RM", "CB"}

    # Second read returns the same schedule
    again = client.get("/api/play/next-ladder-day").json()
    assert [m["id"] for m in again["matches"]] == [m["id"] for m in data["matches"]]


def test_insufficient_teams_returns_day_without_matches(client: TestClient, started_day, make_team):
    for _ in range(3):
        make_team()

    data = client.get("/api/play/next-ladder-day").json()
    assert data["id"] == started_day.id
    assert data["matches"] == []
    assert len(client.get("/api/play/registered-teams").json()) == 3


def test_rounds_grouped(client: TestClient, started_day, make_team):
    for _ in range(4):
        make_team()

    response = client.get("/api/play/rounds")
    assert response.status_code == 200
    rounds = response.json()
    assert [r["order"] for r in rounds] == [1, 2]

    for r in rounds:
        assert len(r["maplist"]) == 9
        assert len(r["matches"]) == 2
        for match in r["matches"]:
            assert len(match["alpha"]) == 4
            assert len(match["bravo"]) == 4

    stages_r1 = {e["stage"] for e in rounds[0]["maplist"]}
    stages_r2 = {e["stage"] for e in rounds[1]["maplist"]}
    assert not stages_r1 & stages_r2


def test_rounds_empty_without_day(client: TestClient):
    assert client.get("/api/play/rounds").json() == []


def test_registered_teams_sorted_by_roster_size(client: TestClient, make_team):
    small = make_team(1)
    full = make_team(4)
    mid = make_team(2)

    response = client.get("/api/play/registered-teams")
    assert response.status_code == 200
    data = response.json()
    assert [t["id"] for t in data] == [full.id, mid.id, small.id]
    assert [len(t["roster"]) for t in data] == [4, 2, 1]
    assert data[0]["owner_id"] in [u["id"] for u in data[0]["roster"]]


def test_create_ladder_day(client: TestClient):
    response = client.post("/api/play/ladder-days", json={"date": "2026-11-07T18:00:00"})
    assert response.status_code == 201
    assert response.json()["date"] == "2026-11-07T18:00:00"

    duplicate = client.post("/api/play/ladder-days", json={"date": "2026-11-07T18:00:00"})
    assert duplicate.status_code == 409
    assert "already exists" in duplicate.json()["detail"]


def test_create_ladder_day_converts_to_utc(client: TestClient):
    response = client.post("/api/play/ladder-days", json={"date": "2026-11-07T20:00:00+02:00"})
    assert response.status_code == 201
    assert response.json()["date"] == "2026-11-07T18:00:00"


def test_create_ladder_day_rejects_garbage(client: TestClient):
    response = client.post("/api/play/ladder-days", json={"date": "next saturday"})
    assert response.status_code == 422
