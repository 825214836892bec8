from .crud_customer import customer
from .crud_item import item
from .crud_sales_invoice import sales_invoice
