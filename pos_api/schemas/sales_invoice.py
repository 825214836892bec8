# pos_api/schemas/sales_invoice.py
from datetime import datetime
from typing import Any, Optional
import uuid

from pydantic import BaseModel, ConfigDict, Field

from pos_api.models.sales_invoice import PaymentMode
from pos_api.schemas.customer import CustomerRefSchemas


class SalesInvoiceCreateSchemas(BaseModel):
    # Sem coerção aqui: tipos, obrigatórios e o enum de pagamento são checados pelo modelo
    model_config = ConfigDict(populate_by_name=True)

    customer_id: Optional[Any] = Field(None, alias="customerId")
    payment_mode: Optional[Any] = Field(None, alias="paymentMode")
    total_amount: Optional[Any] = Field(None, alias="totalAmount")


class SalesInvoiceInDBBaseSchemas(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: uuid.UUID = Field(alias="_id")
    payment_mode: PaymentMode = Field(alias="paymentMode")
    total_amount: float = Field(alias="totalAmount")
    created_at: datetime = Field(alias="createdAt")


class SalesInvoiceSchemas(SalesInvoiceInDBBaseSchemas):
    customer_id: uuid.UUID = Field(alias="customerId")


class SalesInvoiceDetailSchemas(SalesInvoiceInDBBaseSchemas):
    # "customerId" substituído pela projeção do cliente; None se a referência não existe
    customer: Optional[CustomerRefSchemas] = Field(None, alias="customerId")


class SalesInvoiceCreatedSchemas(BaseModel):
    message: str
    salesInvoice: SalesInvoiceSchemas


class SalesInvoiceDetailResponseSchemas(BaseModel):
    salesInvoice: SalesInvoiceDetailSchemas
