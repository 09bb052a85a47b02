import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """Test that health check endpoint returns OK without a token."""
    response = await client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"


@pytest.mark.asyncio
async def test_readiness_check(client: AsyncClient):
    """Test that readiness check reports the database."""
    response = await client.get("/api/health/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["checks"]["database"] == "healthy"


@pytest.mark.asyncio
async def test_readiness_reports_schema_state(client: AsyncClient):
    before = await client.get("/api/health/ready")
    assert before.json()["checks"]["schema"] == "uninitialized"

    await client.get("/api/init")

    after = await client.get("/api/health/ready")
    assert after.json()["checks"]["schema"] == "initialized"
    assert "auth" not in after.json()


@pytest.mark.asyncio
async def test_readiness_hides_database_errors(
    client: AsyncClient, db_session: AsyncSession, monkeypatch
):
    async def broken_execute(*args, **kwargs):
        raise OperationalError(
            "SELECT 1", {}, Exception("unable to open /srv/private/navhive.db")
        )

    monkeypatch.setattr(db_session, "execute", broken_execute)

    response = await client.get("/api/health/ready")
    assert response.status_code == 200
    data = response.json()
    assert data == {
        "status": "unhealthy",
        "checks": {"database": "unhealthy", "schema": "unknown"},
    }
    assert "/srv/private" not in response.text
