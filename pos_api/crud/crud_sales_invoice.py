# pos_api/crud/crud_sales_invoice.py
from typing import List, Optional, Union
import uuid

from sqlalchemy import Select, func, literal_column, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from pos_api.models.sales_invoice import SalesInvoice
from pos_api.schemas.report import DailySalesSchemas
from pos_api.schemas.sales_invoice import SalesInvoiceCreateSchemas


def _day_of(column, dialect_name: str):
    """Expressão 'YYYY-MM-DD' da data de um timestamp, conforme o dialeto."""
    # Formato como literal: o PostgreSQL exige a mesma expressão no SELECT e no GROUP BY
    if dialect_name == "sqlite":
        return func.strftime(literal_column("'%Y-%m-%d'"), column)
    if dialect_name in ("mysql", "mariadb"):
        return func.date_format(column, literal_column("'%Y-%m-%d'"))
    return func.to_char(column, literal_column("'YYYY-MM-DD'"))


def daily_totals_query(dialect_name: str) -> Select:
    """Soma de total_amount por dia, em ordem crescente de data."""
    day = _day_of(SalesInvoice.created_at, dialect_name).label("day")
    return (
        select(day, func.sum(SalesInvoice.total_amount).label("total_amount"))
        .group_by(day)
        .order_by(day)
    )


class CRUDSalesInvoice:
    async def create(self, db: AsyncSession, *, obj_in: SalesInvoiceCreateSchemas) -> SalesInvoice:
        # Identificador malformado ou modo de pagamento inválido levantam ValueError aqui
        db_obj = SalesInvoice(
            customer_id=obj_in.customer_id,
            payment_mode=obj_in.payment_mode,
            total_amount=obj_in.total_amount,
        )
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def get_with_customer(
        self, db: AsyncSession, id: Union[str, uuid.UUID]
    ) -> Optional[SalesInvoice]:
        if not isinstance(id, uuid.UUID):
            id = uuid.UUID(id)
        result = await db.execute(
            select(SalesInvoice)
            .options(selectinload(SalesInvoice.customer))
            .where(SalesInvoice.id == id)
        )
        return result.scalars().first()

    async def get_daily_totals(self, db: AsyncSession) -> List[DailySalesSchemas]:
        result = await db.execute(daily_totals_query(db.get_bind().dialect.name))
        return [DailySalesSchemas.model_validate(row) for row in result.all()]


sales_invoice = CRUDSalesInvoice()
