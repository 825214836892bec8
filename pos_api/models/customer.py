from sqlalchemy import Column, String

from pos_api.db.base_class import Base


class Customer(Base):
    name = Column(String, nullable=True, index=True)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    address = Column(String, nullable=True)
    pincode = Column(String, nullable=True)
    payment_mode = Column(String, nullable=True)  # texto livre, diferente da nota fiscal
    account_manager = Column(String, nullable=True)
    billing_currency = Column(String, nullable=True)
