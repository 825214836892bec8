# pos_api/api/endpoints/reports.py
import io
from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import StreamingResponse
from sqlalchemy.ext.asyncio import AsyncSession

from pos_api import crud, schemas
from pos_api.api import deps
from pos_api.core.logging import logger
from pos_api.services.report_service import ReportService, SALES_REPORT_FILENAME, XLSX_MEDIA_TYPE

router = APIRouter()


@router.get("/sales_report", response_model=List[schemas.DailySales])
async def read_sales_report(db: AsyncSession = Depends(deps.get_db)) -> Any:
    """
    Total de vendas por dia (YYYY-MM-DD), em ordem crescente de data.
    """
    try:
        return await crud.sales_invoice.get_daily_totals(db)
    except Exception as e:
        logger.error(f"Error fetching sales report: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "Failed to fetch sales data"},
        )


@router.get("/download_sales_report")
async def download_sales_report(db: AsyncSession = Depends(deps.get_db)):
    """
    Mesmo relatório de /sales_report, exportado como planilha .xlsx.
    """
    try:
        rows = await crud.sales_invoice.get_daily_totals(db)
        content = ReportService.build_sales_report(rows)
    except Exception as e:
        logger.error(f"Error generating Excel report: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "Failed to generate Excel report"},
        )

    return StreamingResponse(
        io.BytesIO(content),
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f"attachment; filename={SALES_REPORT_FILENAME}"},
    )
