# pos_api/services/report_service.py
import io
from typing import Iterable

from openpyxl import Workbook
from openpyxl.styles import Font

from pos_api.schemas.report import DailySalesSchemas

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
SALES_REPORT_FILENAME = "sales_report.xlsx"

SALES_REPORT_COLUMNS = [
    ("Date", 20),
    ("Total Sales (₹)", 20),
]


class ReportService:
    """Exportação do relatório de vendas em planilha."""

    @staticmethod
    def build_sales_report(rows: Iterable[DailySalesSchemas]) -> bytes:
        """
        Gera a planilha "Sales Report" em memória.

        Uma linha por dia, na mesma ordem recebida (data crescente).
        Nada é gravado em disco.
        """
        wb = Workbook()
        ws = wb.active
        ws.title = "Sales Report"

        ws.append([header for header, _ in SALES_REPORT_COLUMNS])
        for col_num, (_, width) in enumerate(SALES_REPORT_COLUMNS, 1):
            ws.cell(row=1, column=col_num).font = Font(bold=True)
            ws.column_dimensions[ws.cell(row=1, column=col_num).column_letter].width = width

        for row in rows:
            ws.append([row.day, row.total_amount])

        buffer = io.BytesIO()
        wb.save(buffer)
        return buffer.getvalue()
