from unittest.mock import AsyncMock

from sqlalchemy.exc import OperationalError

from cotitra.adapters.persistence.database import get_session


def _override_session(client, session):
    async def override():
        yield session

    client.app.dependency_overrides[get_session] = override


def test_health_ok(api):
    client, _ = api
    _override_session(client, AsyncMock())

    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["email"] == "InMemoryEmailAdapter"


def test_health_degraded_when_database_unreachable(api):
    client, _ = api
    session = AsyncMock()
    session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("refused"))
    _override_session(client, session)

    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "degraded",
        "database": "unreachable",
        "email": "InMemoryEmailAdapter",
        "service": "CoTiTra",
    }
