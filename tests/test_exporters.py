"""Tests for the PDF, Excel and Word report encoders."""

import threading
from io import BytesIO
from unittest.mock import MagicMock

import pytest
from docx import Document
from openpyxl import load_workbook

from utils.orders.excel_generator import SHEET_NAME, OrdersExcelGenerator
from utils.orders.export import ExportError, OrderReportExporter
from utils.orders.pdf_generator import OrdersPDFGenerator
from utils.orders.report import REPORT_COLUMNS, build_report
from utils.orders.word_generator import OrdersWordGenerator


def excel_rows(data):
    ws = load_workbook(BytesIO(data))[SHEET_NAME]
    return [tuple(row) for row in ws.iter_rows(values_only=True)]


def word_rows(data):
    table = Document(BytesIO(data)).tables[0]
    return [tuple(cell.text for cell in row.cells) for row in table.rows]


def pdf_rows(snapshot):
    table_data = OrdersPDFGenerator().build_table_data(snapshot)
    return [tuple(p.getPlainText() for p in row) for row in table_data]


@pytest.fixture
def snapshot(sample_orders):
    return build_report(sample_orders)


def test_excel_sheet_has_header_and_one_row_per_order(snapshot):
    rows = excel_rows(OrdersExcelGenerator().encode(snapshot))

    assert rows[0] == REPORT_COLUMNS
    assert len(rows) == snapshot.row_count + 1


def test_word_table_has_bold_header(snapshot):
    document = Document(BytesIO(OrdersWordGenerator().encode(snapshot)))
    table = document.tables[0]

    assert len(document.tables) == 1
    assert len(table.rows) == snapshot.row_count + 1
    header = table.rows[0].cells
    assert tuple(c.text for c in header) == REPORT_COLUMNS
    assert all(run.bold for c in header for run in c.paragraphs[0].runs)


def test_pdf_is_a_document_with_header_row(snapshot):
    data = OrdersPDFGenerator().encode(snapshot)

    assert data.startswith(b"%PDF")
    assert len(OrdersPDFGenerator().build_table_data(snapshot)) == snapshot.row_count + 1


def test_all_sinks_carry_identical_cells(snapshot):
    expected = [REPORT_COLUMNS] + list(snapshot.rows)

    assert excel_rows(OrdersExcelGenerator().encode(snapshot)) == expected
    assert word_rows(OrdersWordGenerator().encode(snapshot)) == expected
    assert pdf_rows(snapshot) == expected


def test_empty_projection_gives_header_only_files():
    snapshot = build_report([])
    exporter = OrderReportExporter()

    pdf = exporter.encode_snapshot("pdf", snapshot)
    excel = exporter.encode_snapshot("excel", snapshot)
    word = exporter.encode_snapshot("word", snapshot)

    assert pdf.data.startswith(b"%PDF")
    assert excel_rows(excel.data) == [REPORT_COLUMNS]
    assert word_rows(word.data) == [REPORT_COLUMNS]
    assert pdf.row_count == excel.row_count == word.row_count == 0


def test_export_result_metadata(sample_orders):
    result = OrderReportExporter().export("excel", sample_orders)

    assert result.filename.startswith("orders_")
    assert result.filename.endswith(".xlsx")
    assert result.row_count == len(sample_orders)
    assert result.label == "Excel"


def test_unknown_format_raises():
    with pytest.raises(ExportError):
        OrderReportExporter().export("csv", [])


def test_encoder_failure_is_wrapped(sample_orders):
    broken = MagicMock(key="pdf", label="PDF", extension="pdf", mime="application/pdf")
    broken.encode.side_effect = RuntimeError("layout error")

    with pytest.raises(ExportError, match="layout error"):
        OrderReportExporter(encoders=[broken]).export("pdf", sample_orders)


def test_async_export_waits_for_completion(sample_orders):
    owner = MagicMock(is_active=True)
    job = OrderReportExporter().export_async("word", sample_orders, owner=owner)

    result = job.wait(timeout=30)

    assert job.done()
    assert result.filename.endswith(".docx")
    assert len(word_rows(result.data)) == len(sample_orders) + 1


def test_async_export_snapshot_taken_at_invocation(sample_orders):
    orders = list(sample_orders)
    job = OrderReportExporter().export_async("word", orders)
    orders.clear()

    assert job.wait(timeout=30).row_count == len(sample_orders)


def test_stale_completion_is_discarded(sample_orders):
    """A job whose screen session closed returns None instead of a file."""
    release = threading.Event()
    slow = MagicMock(key="word", label="Word", extension="docx", mime="application/octet-stream")
    slow.encode.side_effect = lambda snapshot: release.wait(5) and b"docx"

    owner = MagicMock(is_active=True)
    job = OrderReportExporter(encoders=[slow]).export_async("word", sample_orders, owner=owner)
    owner.is_active = False
    release.set()

    assert job.wait(timeout=10) is None


def test_async_encoder_failure_surfaces_on_wait(sample_orders):
    broken = MagicMock(key="word", label="Word", extension="docx", mime="application/octet-stream")
    broken.encode.side_effect = RuntimeError("disk full")

    job = OrderReportExporter(encoders=[broken]).export_async("word", sample_orders)

    with pytest.raises(ExportError, match="disk full"):
        job.wait(timeout=10)


def test_excel_keeps_formula_like_text_literal(make_order):
    snapshot = build_report([make_order(customer="=1+2", email="=HYPERLINK(\"x\")")])

    ws = load_workbook(BytesIO(OrdersExcelGenerator().encode(snapshot)))[SHEET_NAME]

    assert ws.cell(2, 2).data_type == "s"
    assert ws.cell(2, 2).value == "=1+2"
    assert ws.cell(2, 3).value == "=HYPERLINK(\"x\")"
    assert all(cell.data_type == "s" for cell in ws[2])


def test_stale_failed_export_is_discarded(sample_orders):
    """A failure after the screen session closed is dropped, not raised."""
    release = threading.Event()

    def encode(snapshot):
        release.wait(5)
        raise RuntimeError("boom")

    slow = MagicMock(key="word", label="Word", extension="docx", mime="application/octet-stream")
    slow.encode.side_effect = encode

    owner = MagicMock(is_active=True)
    job = OrderReportExporter(encoders=[slow]).export_async("word", sample_orders, owner=owner)
    owner.is_active = False
    release.set()

    assert job.wait(timeout=10) is None
