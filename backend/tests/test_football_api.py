"""v1 API: clubs, coaches, footballers, stadiums, tournaments over an in-memory store."""

from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from core.database import get_database_manager
from core.dependencies import get_db_session, get_retry_policy
from core.retry import RetryPolicy
from main import app
from version import is_semver

ARSENAL = {"club_name": "Arsenal", "city": "London", "founded": "1886-01-01"}


@pytest_asyncio.fixture
async def client(test_db, sleep):
    async def override_session():
        async with get_database_manager().session() as s:
            yield s

    app.dependency_overrides[get_db_session] = override_session
    app.dependency_overrides[get_retry_policy] = lambda: RetryPolicy(sleep=sleep)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.pop(get_db_session, None)
    app.dependency_overrides.pop(get_retry_policy, None)


@pytest.mark.asyncio
async def test_club_lifecycle(client):
    r = await client.post("/api/v1/clubs", json=ARSENAL)
    assert r.status_code == 201
    assert r.json()["status"] == "created"
    assert r.json()["id"] > 0

    r = await client.post(
        "/api/v1/coaches",
        json={"name": "Mikel", "surname": "Arteta", "current_club": "Arsenal"},
    )
    assert r.status_code == 201

    r = await client.post(
        "/api/v1/stadiums",
        json={"stadium_name": "Emirates Stadium", "capacity": 60704, "club": "Arsenal"},
    )
    assert r.status_code == 201

    r = await client.get("/api/v1/clubs/Arsenal")
    assert r.status_code == 200
    body = r.json()
    assert body["city"] == "London"
    assert body["coach"] == {"full_name": "Mikel Arteta"}
    assert body["stadium"]["capacity"] == 60704
    assert body["footballers"] == []
    assert body["age"] > 0

    r = await client.put("/api/v1/clubs/Arsenal", json={**ARSENAL, "city": "Islington"})
    assert r.status_code == 200
    assert r.json() == {"status": "updated"}

    r = await client.get("/api/v1/clubs")
    assert [c["city"] for c in r.json()] == ["Islington"]

    r = await client.delete("/api/v1/clubs/Arsenal")
    assert r.status_code == 200
    assert r.json() == {"status": "deleted"}

    r = await client.get("/api/v1/coaches/Arteta")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_empty_collections_are_empty_lists(client):
    for path in ("clubs", "coaches", "footballers", "stadiums", "tournaments"):
        r = await client.get(f"/api/v1/{path}")
        assert r.status_code == 200
        assert r.json() == []


@pytest.mark.asyncio
async def test_unknown_keys_are_404(client):
    r = await client.get("/api/v1/clubs/Chelsea")
    assert r.status_code == 404
    assert r.json()["detail"] == "Club with name Chelsea doesn't exist."

    r = await client.post(
        "/api/v1/footballers",
        json={"name": "Cole", "surname": "Palmer", "current_club": "Chelsea"},
    )
    assert r.status_code == 404

    r = await client.delete("/api/v1/stadiums/Anfield")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_invalid_bodies_are_422(client):
    r = await client.post("/api/v1/clubs", json={**ARSENAL, "club_name": "arsenal"})
    assert r.status_code == 422

    r = await client.post("/api/v1/clubs", json={**ARSENAL, "founded": "1700-01-01"})
    assert r.status_code == 422

    r = await client.post(
        "/api/v1/stadiums",
        json={"stadium_name": "Emirates Stadium", "capacity": -1, "club": "Arsenal"},
    )
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_footballer_transfer(client):
    await client.post("/api/v1/clubs", json=ARSENAL)
    await client.post("/api/v1/clubs", json={**ARSENAL, "club_name": "Liverpool", "city": "Liverpool"})
    await client.post(
        "/api/v1/footballers",
        json={"name": "Bukayo", "surname": "Saka", "current_club": "Arsenal"},
    )

    r = await client.put(
        "/api/v1/footballers/Saka",
        json={"name": "Bukayo", "surname": "Saka", "current_club": "Liverpool"},
    )
    assert r.status_code == 200

    r = await client.get("/api/v1/footballers/Saka")
    assert r.json() == {"full_name": "Bukayo Saka", "current_club": "Liverpool"}

    r = await client.get("/api/v1/clubs/Liverpool")
    assert r.json()["footballers"] == ["Bukayo Saka"]


@pytest.mark.asyncio
async def test_deleting_club_with_footballers_is_500(client, sleep):
    await client.post("/api/v1/clubs", json=ARSENAL)
    await client.post(
        "/api/v1/footballers",
        json={"name": "Bukayo", "surname": "Saka", "current_club": "Arsenal"},
    )

    r = await client.delete("/api/v1/clubs/Arsenal")
    assert r.status_code == 500
    assert r.json() == {"detail": "Storage failure"}
    assert sleep.waits == []

    r = await client.get("/api/v1/clubs/Arsenal")
    assert r.status_code == 200


@pytest.mark.asyncio
async def test_tournament_membership(client):
    await client.post("/api/v1/clubs", json=ARSENAL)
    r = await client.post("/api/v1/tournaments", json={"tournament_name": "Premier League"})
    assert r.status_code == 201

    r = await client.put("/api/v1/tournaments/Premier League/clubs/Arsenal")
    assert r.json() == {"status": "enrolled"}

    r = await client.get("/api/v1/tournaments/Premier League")
    assert r.json() == {"tournament_name": "Premier League", "clubs": ["Arsenal"]}

    r = await client.delete("/api/v1/tournaments/Premier League/clubs/Arsenal")
    assert r.json() == {"status": "withdrawn"}

    r = await client.delete("/api/v1/tournaments/Premier League/clubs/Arsenal")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_meta_version(client):
    r = await client.get("/api/v1/meta/version")
    assert r.status_code == 200
    assert is_semver(r.json()["version"])
