from fastapi import APIRouter

from pos_api.api.endpoints import (
    customers,
    items,
    reports,
    sales_invoices,
)

api_router = APIRouter()

# Rotas planas sob /api, sem prefixo por recurso
api_router.include_router(sales_invoices.router, tags=["Sales Invoices"])
api_router.include_router(reports.router, tags=["Reports"])
api_router.include_router(items.router, tags=["Items"])
api_router.include_router(customers.router, tags=["Customers"])
