from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from navhive.models.group import Group
from navhive.schemas.group import GroupCreate, GroupUpdate


class GroupService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_list(self) -> list[Group]:
        result = await self.db.execute(select(Group).order_by(Group.order_num, Group.id))
        return list(result.scalars().all())

    async def get_by_id(self, group_id: int, load_sites: bool = False) -> Group | None:
        query = select(Group).where(Group.id == group_id)

        if load_sites:
            query = query.options(selectinload(Group.sites))

        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def create(self, group_data: GroupCreate) -> Group:
        group = Group(name=group_data.name, order_num=group_data.order_num)
        self.db.add(group)
        await self.db.flush()
        await self.db.refresh(group)
        return group

    async def update(self, group: Group, group_data: GroupUpdate) -> Group:
        update_data = group_data.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in update_data.items():
            setattr(group, field, value)
        await self.db.flush()
        await self.db.refresh(group)
        return group

    async def delete(self, group_id: int) -> bool:
        # Sites must be loaded so the ORM cascade can remove them
        group = await self.get_by_id(group_id, load_sites=True)
        if group is None:
            return False
        await self.db.delete(group)
        await self.db.flush()
        return True
