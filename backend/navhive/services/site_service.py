from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from navhive.models.site import Site
from navhive.schemas.site import SiteCreate, SiteUpdate


class SiteService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_list(self, group_id: int | None = None) -> list[Site]:
        query = select(Site)

        if group_id is not None:
            query = query.where(Site.group_id == group_id)

        query = query.order_by(Site.order_num, Site.id)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_by_id(self, site_id: int) -> Site | None:
        result = await self.db.execute(select(Site).where(Site.id == site_id))
        return result.scalar_one_or_none()

    async def create(self, site_data: SiteCreate) -> Site:
        site = Site(
            group_id=site_data.group_id,
            name=site_data.name,
            url=site_data.url,
            icon=site_data.icon or "",
            description=site_data.description or "",
            notes=site_data.notes or "",
            order_num=site_data.order_num,
        )
        self.db.add(site)
        await self.db.flush()
        await self.db.refresh(site)
        return site

    async def update(self, site: Site, site_data: SiteUpdate) -> Site:
        update_data = site_data.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in update_data.items():
            setattr(site, field, value)
        await self.db.flush()
        await self.db.refresh(site)
        return site

    async def delete(self, site_id: int) -> bool:
        site = await self.get_by_id(site_id)
        if site is None:
            return False
        await self.db.delete(site)
        await self.db.flush()
        return True
