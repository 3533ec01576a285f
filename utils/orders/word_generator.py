# utils/orders/word_generator.py
"""
Word Generator for order reports
One table with a bold header row and one row per order

Version: 1.0.0
"""

import logging
from io import BytesIO

from docx import Document
from docx.enum.section import WD_ORIENT
from docx.shared import Mm, Pt

from .report import ReportSnapshot

logger = logging.getLogger(__name__)


class OrdersWordGenerator:
    """Render a ReportSnapshot as a .docx document"""

    key = "word"
    label = "Word"
    extension = "docx"
    mime = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

    def __init__(self, font_size: int = 8):
        self.font_size = font_size

    def build_document(self, snapshot: ReportSnapshot):
        document = Document()

        # Landscape A4 for nine columns
        section = document.sections[0]
        section.orientation = WD_ORIENT.LANDSCAPE
        section.page_width, section.page_height = Mm(297), Mm(210)
        for side in ("left_margin", "right_margin", "top_margin", "bottom_margin"):
            setattr(section, side, Mm(10))

        table = document.add_table(rows=1, cols=len(snapshot.columns))
        table.style = "Table Grid"

        for cell, text in zip(table.rows[0].cells, snapshot.columns):
            run = cell.paragraphs[0].add_run(text)
            run.bold = True
            run.font.size = Pt(self.font_size)

        for row in snapshot.rows:
            cells = table.add_row().cells
            for cell, text in zip(cells, row):
                run = cell.paragraphs[0].add_run(text)
                run.font.size = Pt(self.font_size)

        return document

    def encode(self, snapshot: ReportSnapshot) -> bytes:
        output = BytesIO()
        self.build_document(snapshot).save(output)
        return output.getvalue()
