import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from navhive.models.config_entry import DB_INITIALIZED_KEY
from navhive.services.config_service import ConfigService


class TestInit:
    """Tests for first-run database initialization."""

    @pytest.mark.asyncio
    async def test_init_is_idempotent(self, client: AsyncClient, db_session: AsyncSession):
        first = await client.get("/api/init")
        assert first.status_code == 200
        assert first.json()["alreadyInitialized"] is False

        second = await client.get("/api/init")
        assert second.status_code == 200
        assert second.json()["alreadyInitialized"] is True

        assert await ConfigService(db_session).get(DB_INITIALIZED_KEY) == "true"

    @pytest.mark.asyncio
    async def test_init_creates_missing_tables(
        self, client: AsyncClient, async_engine, db_session: AsyncSession
    ):
        from navhive.database import Base

        async with async_engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

        response = await client.get("/api/init")
        assert response.status_code == 200
        assert response.json()["alreadyInitialized"] is False

        assert await ConfigService(db_session).get_all() == {DB_INITIALIZED_KEY: "true"}
