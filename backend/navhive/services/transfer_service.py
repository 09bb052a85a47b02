import logging
from datetime import UTC, datetime

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from navhive.models.config_entry import DB_INITIALIZED_KEY
from navhive.models.group import Group
from navhive.models.site import Site
from navhive.schemas.transfer import EXPORT_FORMAT_VERSION, ExportData, GroupRecord, SiteRecord
from navhive.services.config_service import ConfigService
from navhive.services.group_service import GroupService
from navhive.services.site_service import SiteService

logger = logging.getLogger(__name__)


class TransferService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def export_data(self) -> ExportData:
        groups = await GroupService(self.db).get_list()
        sites = await SiteService(self.db).get_list()
        configs = await ConfigService(self.db).get_all(include_internal=False)

        return ExportData(
            groups=[GroupRecord.model_validate(group) for group in groups],
            sites=[SiteRecord.model_validate(site) for site in sites],
            configs=configs,
            version=EXPORT_FORMAT_VERSION,
            export_date=datetime.now(UTC).isoformat(),
        )

    async def import_data(self, data: ExportData) -> bool:
        """
        Replace all groups and sites with the imported ones and merge configs.

        Group ids are reassigned by the database; sites follow their group
        through the old-to-new id mapping, so every site must reference a group
        in the same document. Runs in one transaction.
        """
        config_service = ConfigService(self.db)
        try:
            await self.db.execute(delete(Site))
            await self.db.execute(delete(Group))

            group_ids: dict[int, int] = {}
            for record in data.groups:
                group = Group(name=record.name, order_num=record.order_num)
                self.db.add(group)
                await self.db.flush()
                if record.id is not None:
                    group_ids[record.id] = group.id

            for record in data.sites:
                self.db.add(
                    Site(
                        group_id=group_ids[record.group_id],
                        name=record.name,
                        url=record.url,
                        icon=record.icon or "",
                        description=record.description or "",
                        notes=record.notes or "",
                        order_num=record.order_num,
                    )
                )
            await self.db.flush()

            for key, value in data.configs.items():
                if key != DB_INITIALIZED_KEY:
                    await config_service.set(key, value)

            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            logger.exception("Failed to import data")
            return False

        self.db.expire_all()
        logger.info(f"Imported {len(data.groups)} groups and {len(data.sites)} sites")
        return True
