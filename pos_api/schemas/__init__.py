from .customer import (
    CustomerCreateSchemas as CustomerCreate,
    CustomerCreatedSchemas as CustomerCreated,
    CustomerRefSchemas as CustomerRef,
    CustomerSchemas as Customer,
)
from .item import ItemCreateSchemas as ItemCreate, ItemCreatedSchemas as ItemCreated, ItemSchemas as Item
from .report import DailySalesSchemas as DailySales
from .sales_invoice import (
    SalesInvoiceCreateSchemas as SalesInvoiceCreate,
    SalesInvoiceCreatedSchemas as SalesInvoiceCreated,
    SalesInvoiceDetailResponseSchemas as SalesInvoiceDetailResponse,
    SalesInvoiceDetailSchemas as SalesInvoiceDetail,
    SalesInvoiceSchemas as SalesInvoice,
)
