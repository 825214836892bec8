# pos_api/crud/crud_customer.py
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pos_api.models.customer import Customer
from pos_api.schemas.customer import CustomerCreateSchemas


class CRUDCustomer:
    async def get_multi(self, db: AsyncSession) -> List[Customer]:
        result = await db.execute(select(Customer))
        return list(result.scalars().all())

    async def create(self, db: AsyncSession, *, obj_in: CustomerCreateSchemas) -> Customer:
        db_obj = Customer(
            name=obj_in.name,
            email=obj_in.email,
            phone=obj_in.phone,
            address=obj_in.address,
            pincode=obj_in.pincode,
            payment_mode=obj_in.payment_mode,
            account_manager=obj_in.account_manager,
            billing_currency=obj_in.billing_currency,
        )
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj


customer = CRUDCustomer()
