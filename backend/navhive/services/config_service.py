from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from navhive.models.config_entry import DB_INITIALIZED_KEY, ConfigEntry


class ConfigService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_all(self, include_internal: bool = True) -> dict[str, str]:
        query = select(ConfigEntry).order_by(ConfigEntry.key)
        if not include_internal:
            query = query.where(ConfigEntry.key != DB_INITIALIZED_KEY)
        result = await self.db.execute(query)
        return {entry.key: entry.value for entry in result.scalars().all()}

    async def get(self, key: str) -> str | None:
        entry = await self.db.get(ConfigEntry, key)
        return entry.value if entry else None

    async def set(self, key: str, value: str) -> None:
        entry = await self.db.get(ConfigEntry, key)
        if entry is None:
            self.db.add(ConfigEntry(key=key, value=value))
        else:
            entry.value = value
        await self.db.flush()

    async def delete(self, key: str) -> bool:
        entry = await self.db.get(ConfigEntry, key)
        if entry is None:
            return False
        await self.db.delete(entry)
        await self.db.flush()
        return True
