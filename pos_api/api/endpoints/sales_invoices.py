# pos_api/api/endpoints/sales_invoices.py
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from pos_api import crud, schemas
from pos_api.api import deps
from pos_api.core.logging import logger

router = APIRouter()


@router.post(
    "/create_sales_invoice",
    response_model=schemas.SalesInvoiceCreated,
    status_code=status.HTTP_201_CREATED,
)
async def create_sales_invoice(
    *,
    db: AsyncSession = Depends(deps.get_db),
    invoice_in: schemas.SalesInvoiceCreate,
) -> Any:
    """
    Registra uma nota de venda.

    O cliente referenciado não é verificado: uma nota pode apontar para um
    cliente inexistente. Modo de pagamento fora de Cash/UPI/Card é recusado.
    """
    try:
        invoice = await crud.sales_invoice.create(db=db, obj_in=invoice_in)
    except Exception as e:
        logger.error(f"Error creating sales invoice: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create sales invoice",
        )

    logger.info(f"Sales invoice {invoice.id} created ({invoice.payment_mode.value}, {invoice.total_amount})")
    return schemas.SalesInvoiceCreated(
        message="Sales invoice created successfully",
        salesInvoice=schemas.SalesInvoice.model_validate(invoice),
    )


@router.get("/get_sales_invoice/{invoice_id}", response_model=schemas.SalesInvoiceDetailResponse)
async def read_sales_invoice(
    invoice_id: str,
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    Recupera uma nota pelo ID, com nome e telefone do cliente no lugar do customerId.
    """
    try:
        invoice = await crud.sales_invoice.get_with_customer(db, id=invoice_id)
    except Exception as e:
        logger.error(f"Error fetching invoice {invoice_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch invoice details",
        )

    if not invoice:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invoice not found")
    return schemas.SalesInvoiceDetailResponse(salesInvoice=schemas.SalesInvoiceDetail.model_validate(invoice))
