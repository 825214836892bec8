from .customer import Customer
from .item import Item
from .sales_invoice import PaymentMode, SalesInvoice
