# utils/orders/excel_generator.py
"""
Excel Generator for order reports
Single "Orders" worksheet: header row plus one row per order

Version: 1.0.0
"""

import logging
from io import BytesIO

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from .report import ReportSnapshot

logger = logging.getLogger(__name__)

SHEET_NAME = "Orders"

# ==================== Style Definitions ====================

HEADER_BG = PatternFill(start_color="2C3E50", end_color="2C3E50", fill_type="solid")
HEADER_FONT = Font(name='Arial', size=10, bold=True, color="FFFFFF")
NORMAL_FONT = Font(name='Arial', size=9, color="000000")

THIN_BORDER = Border(
    left=Side(style='thin', color='BDC3C7'),
    right=Side(style='thin', color='BDC3C7'),
    top=Side(style='thin', color='BDC3C7'),
    bottom=Side(style='thin', color='BDC3C7')
)

CENTER_ALIGN = Alignment(horizontal='center', vertical='center', wrap_text=True)
LEFT_ALIGN = Alignment(horizontal='left', vertical='top', wrap_text=True)

MIN_COLUMN_WIDTH = 10
MAX_COLUMN_WIDTH = 60


class OrdersExcelGenerator:
    """Render a ReportSnapshot as an .xlsx workbook"""

    key = "excel"
    label = "Excel"
    extension = "xlsx"
    mime = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

    def build_workbook(self, snapshot: ReportSnapshot) -> Workbook:
        wb = Workbook()
        ws = wb.active
        ws.title = SHEET_NAME

        ws.append(list(snapshot.columns))
        for cell in ws[1]:
            cell.font = HEADER_FONT
            cell.fill = HEADER_BG
            cell.alignment = CENTER_ALIGN
            cell.border = THIN_BORDER

        for row in snapshot.rows:
            ws.append(list(row))

        for row_cells in ws.iter_rows(min_row=2, max_row=ws.max_row):
            for cell in row_cells:
                # Backend text is stored literally, never as a formula
                cell.data_type = "s"
                cell.font = NORMAL_FONT
                cell.alignment = LEFT_ALIGN
                cell.border = THIN_BORDER

        self._set_column_widths(ws, snapshot)
        ws.freeze_panes = "A2"
        return wb

    @staticmethod
    def _set_column_widths(ws, snapshot: ReportSnapshot):
        for idx, column in enumerate(snapshot.columns, start=1):
            longest = max([len(column)] + [len(row[idx - 1]) for row in snapshot.rows])
            width = min(max(longest + 2, MIN_COLUMN_WIDTH), MAX_COLUMN_WIDTH)
            ws.column_dimensions[get_column_letter(idx)].width = width

    def encode(self, snapshot: ReportSnapshot) -> bytes:
        wb = self.build_workbook(snapshot)
        output = BytesIO()
        wb.save(output)
        return output.getvalue()
