# pos_api/crud/crud_item.py
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pos_api.models.item import Item
from pos_api.schemas.item import ItemCreateSchemas


class CRUDItem:
    async def get_multi(self, db: AsyncSession) -> List[Item]:
        result = await db.execute(select(Item))
        return list(result.scalars().all())

    async def create(self, db: AsyncSession, *, obj_in: ItemCreateSchemas) -> Item:
        db_obj = Item(**obj_in.model_dump())
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj


item = CRUDItem()
