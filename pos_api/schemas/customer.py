# pos_api/schemas/customer.py
from typing import Optional
import uuid

from pydantic import BaseModel, ConfigDict, Field


class CustomerCreateSchemas(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    pincode: Optional[str] = None
    payment_mode: Optional[str] = Field(None, alias="paymentMode")
    account_manager: Optional[str] = Field(None, alias="accountManager")
    billing_currency: Optional[str] = Field(None, alias="billingCurrency")


class CustomerSchemas(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: uuid.UUID = Field(alias="_id")
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    pincode: Optional[str] = None
    payment_mode: Optional[str] = Field(None, alias="paymentMode")
    account_manager: Optional[str] = Field(None, alias="accountManager")
    billing_currency: Optional[str] = Field(None, alias="billingCurrency")


class CustomerRefSchemas(BaseModel):
    """Projeção do cliente embutida na nota (somente nome e telefone)."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: uuid.UUID = Field(alias="_id")
    name: Optional[str] = None
    phone: Optional[str] = None


class CustomerCreatedSchemas(BaseModel):
    message: str
    customer: CustomerSchemas
