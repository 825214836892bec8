# pos_api/models/sales_invoice.py
import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Enum as SAEnum, Float, Uuid
from sqlalchemy.orm import relationship, validates

from pos_api.db.base_class import Base


class PaymentMode(str, enum.Enum):
    CASH = "Cash"
    UPI = "UPI"
    CARD = "Card"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SalesInvoice(Base):
    # id é herdado da Base

    # Referência "mole" ao cliente: sem ForeignKey, a nota pode apontar para um cliente inexistente
    customer_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    payment_mode = Column(
        SAEnum(PaymentMode, name="payment_mode", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    total_amount = Column(Float, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)

    # Projeção do cliente resolvida apenas quando pedida (selectinload no CRUD)
    customer = relationship(
        "Customer",
        primaryjoin="foreign(SalesInvoice.customer_id) == Customer.id",
        viewonly=True,
        lazy="raise",
    )

    @validates("customer_id")
    def validate_customer_id(self, key, value):
        if value is None or isinstance(value, uuid.UUID):
            return value
        return uuid.UUID(str(value))  # ValueError para identificador malformado

    @validates("payment_mode")
    def validate_payment_mode(self, key, value):
        if value is None or isinstance(value, PaymentMode):
            return value
        return PaymentMode(value)  # ValueError fora de Cash/UPI/Card

    @validates("total_amount")
    def validate_total_amount(self, key, value):
        if value is None:
            return value
        if isinstance(value, bool):
            raise ValueError("totalAmount must be a number")
        return float(value)  # ValueError/TypeError para valor não numérico
