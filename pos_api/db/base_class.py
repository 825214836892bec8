import re
import uuid

from sqlalchemy import Column, Uuid
from sqlalchemy.orm import as_declarative, declared_attr


@as_declarative()
class Base:
    """
    Base class which provides automated table name
    and surrogate primary key column.
    """

    @declared_attr
    def __tablename__(cls) -> str:
        # Ex: SalesInvoice -> sales_invoices
        return re.sub(r"(?<!^)(?=[A-Z])", "_", cls.__name__).lower() + "s"

    # Identificador opaco gerado pelo servidor (exposto como "_id" na API)
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
