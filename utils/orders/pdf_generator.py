# utils/orders/pdf_generator.py
"""
PDF Generator for order reports
Landscape A4 table with the header row repeated on every page

Version: 1.0.0
"""

import logging
from io import BytesIO
from pathlib import Path
from typing import Any, Dict, List, Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_LEFT
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ..config import EXPORT_CONFIG
from .report import ReportSnapshot

logger = logging.getLogger(__name__)

# Relative widths for Order ID, Customer, Email, Address, Items, Total, Status, Paid, Date
COLUMN_WEIGHTS = (30, 25, 35, 50, 55, 17, 20, 10, 25)


class OrdersPDFGenerator:
    """Render a ReportSnapshot as a paginated PDF table"""

    key = "pdf"
    label = "PDF"
    extension = "pdf"
    mime = "application/pdf"

    def __init__(self, fonts_dir: Optional[Path] = None,
                 font_size: Optional[int] = None):
        self.fonts_dir = Path(fonts_dir or EXPORT_CONFIG["FONTS_DIR"])
        self.font_size = font_size or EXPORT_CONFIG["PDF_FONT_SIZE"]
        self._registered_fonts = set()
        self.font_available = self._setup_fonts()

    def _setup_fonts(self) -> bool:
        """Setup DejaVu fonts for currency symbols and non-Latin names"""
        try:
            if not self.fonts_dir.exists():
                logger.debug(f"Fonts directory not found: {self.fonts_dir}")
                return False

            dejavu_regular = self.fonts_dir / 'DejaVuSans.ttf'
            dejavu_bold = self.fonts_dir / 'DejaVuSans-Bold.ttf'

            if not dejavu_regular.exists() or not dejavu_bold.exists():
                logger.warning("⚠️ DejaVu fonts not found, falling back to Helvetica")
                return False

            for name, path in (('DejaVuSans', dejavu_regular),
                               ('DejaVuSans-Bold', dejavu_bold)):
                if name in self._registered_fonts or name in pdfmetrics.getRegisteredFontNames():
                    self._registered_fonts.add(name)
                    continue
                pdfmetrics.registerFont(TTFont(name, str(path)))
                self._registered_fonts.add(name)

            logger.info("✅ DejaVu fonts registered successfully")
            return True

        except Exception as e:
            logger.error(f"❌ Font setup error: {e}")
            return False

    def get_custom_styles(self) -> Dict[str, Any]:
        styles = getSampleStyleSheet()

        base_font = 'DejaVuSans' if self.font_available else 'Helvetica'
        bold_font = 'DejaVuSans-Bold' if self.font_available else 'Helvetica-Bold'

        styles.add(ParagraphStyle(
            name='ReportTitle',
            parent=styles['Title'],
            fontName=bold_font,
            fontSize=14,
            alignment=TA_CENTER,
            spaceAfter=4,
        ))
        styles.add(ParagraphStyle(
            name='ReportSubtitle',
            parent=styles['Normal'],
            fontName=base_font,
            fontSize=9,
            alignment=TA_CENTER,
            textColor=colors.HexColor('#666666'),
        ))
        styles.add(ParagraphStyle(
            name='TableHeader',
            parent=styles['Normal'],
            fontName=bold_font,
            fontSize=self.font_size,
            leading=self.font_size + 2,
            alignment=TA_CENTER,
            textColor=colors.white,
        ))
        styles.add(ParagraphStyle(
            name='TableCell',
            parent=styles['Normal'],
            fontName=base_font,
            fontSize=self.font_size,
            leading=self.font_size + 2,
            alignment=TA_LEFT,
        ))
        return styles

    def build_table_data(self, snapshot: ReportSnapshot,
                         styles: Optional[Dict[str, Any]] = None) -> List[List[Paragraph]]:
        """Header row followed by one row per order"""
        styles = styles or self.get_custom_styles()
        header = [Paragraph(escape(col), styles['TableHeader']) for col in snapshot.columns]
        body = [
            [Paragraph(escape(cell), styles['TableCell']) for cell in row]
            for row in snapshot.rows
        ]
        return [header] + body

    def encode(self, snapshot: ReportSnapshot) -> bytes:
        """
        Build the PDF document

        Raises:
            Exception: any reportlab failure propagates to the exporter
        """
        page_size = landscape(A4)
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer, pagesize=page_size,
            rightMargin=10*mm, leftMargin=10*mm,
            topMargin=10*mm, bottomMargin=10*mm,
            title="Orders",
        )

        styles = self.get_custom_styles()
        story = [
            Paragraph("Orders", styles['ReportTitle']),
            Paragraph(
                f"Generated: {snapshot.generated_at.strftime('%d/%m/%Y %H:%M')} | "
                f"Orders: {snapshot.row_count}",
                styles['ReportSubtitle'],
            ),
            Spacer(1, 5*mm),
        ]

        content_width = page_size[0] - doc.leftMargin - doc.rightMargin
        total_weight = sum(COLUMN_WEIGHTS)
        col_widths = [content_width * w / total_weight for w in COLUMN_WEIGHTS]

        table = Table(self.build_table_data(snapshot, styles),
                      colWidths=col_widths, repeatRows=1)
        style = [
            ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#2c3e50')),
            ('VALIGN', (0, 0), (-1, -1), 'TOP'),
            ('GRID', (0, 0), (-1, -1), 0.5, colors.HexColor('#bdc3c7')),
            ('TOPPADDING', (0, 0), (-1, -1), 3),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 3),
        ]
        if not snapshot.is_empty():
            style.append(('ROWBACKGROUNDS', (0, 1), (-1, -1), [colors.white, colors.HexColor('#f8f9fa')]))
        table.setStyle(TableStyle(style))
        story.append(table)

        doc.build(story)
        pdf_content = buffer.getvalue()
        buffer.close()
        return pdf_content
