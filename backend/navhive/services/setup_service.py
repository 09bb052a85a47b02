import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from navhive.database import Base
from navhive.models.config_entry import DB_INITIALIZED_KEY
from navhive.services.config_service import ConfigService

logger = logging.getLogger(__name__)


class SetupService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def is_initialized(self) -> bool:
        try:
            return await ConfigService(self.db).get(DB_INITIALIZED_KEY) == "true"
        except SQLAlchemyError:
            # The configs table does not exist yet
            await self.db.rollback()
            return False

    async def initialize(self) -> bool:
        """Create the schema on first run. Returns False if it already existed."""
        if await self.is_initialized():
            return False

        connection = await self.db.connection()
        await connection.run_sync(Base.metadata.create_all)
        await ConfigService(self.db).set(DB_INITIALIZED_KEY, "true")
        await self.db.commit()

        logger.info("Database initialized")
        return True
