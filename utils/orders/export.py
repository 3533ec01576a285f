# utils/orders/export.py
"""
Order report exporter
Shapes the filtered projection once and hands the snapshot to a pluggable encoder

Version: 1.0.0

Encoders:
- pdf:   OrdersPDFGenerator   (synchronous)
- excel: OrdersExcelGenerator (synchronous)
- word:  OrdersWordGenerator  (encoded on a worker thread, see export_async)
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Protocol, Sequence

from ..config import EXPORT_CONFIG
from .common import OrderConstants
from .excel_generator import OrdersExcelGenerator
from .models import Order
from .pdf_generator import OrdersPDFGenerator
from .report import ReportSnapshot, build_report
from .word_generator import OrdersWordGenerator

logger = logging.getLogger(__name__)

_executor = None
_executor_lock = threading.Lock()


def _get_executor() -> ThreadPoolExecutor:
    global _executor

    if _executor is None:
        with _executor_lock:
            if _executor is None:
                _executor = ThreadPoolExecutor(
                    max_workers=EXPORT_CONFIG["EXPORT_WORKERS"],
                    thread_name_prefix="order-export",
                )
    return _executor


class ExportError(Exception):
    """Report could not be produced; no file is exposed"""
    pass


class ReportEncoder(Protocol):
    """Container format for a ReportSnapshot"""
    key: str
    label: str
    extension: str
    mime: str

    def encode(self, snapshot: ReportSnapshot) -> bytes:
        ...


class SessionOwner(Protocol):
    is_active: bool


@dataclass(frozen=True)
class ExportResult:
    filename: str
    mime: str
    data: bytes
    row_count: int
    label: str


class ExportJob:
    """
    Handle on an export encoding in the background

    wait() returns None when the owning screen session was closed before the
    encoding finished; the finished file is then dropped silently.
    """

    def __init__(self, key: str, future: Future, owner: Optional[SessionOwner] = None):
        self.key = key
        self.future = future
        self.owner = owner

    def done(self) -> bool:
        return self.future.done()

    def is_stale(self) -> bool:
        return self.owner is not None and not getattr(self.owner, "is_active", True)

    def wait(self, timeout: Optional[float] = None) -> Optional[ExportResult]:
        """
        Block until the encoder signals completion

        A stale job returns None whether the encoding succeeded or failed.

        Raises:
            ExportError: encoding failed or did not finish within timeout
        """
        timeout = EXPORT_CONFIG["EXPORT_TIMEOUT"] if timeout is None else timeout
        try:
            result = self.future.result(timeout=timeout)
        except FutureTimeoutError as e:
            raise ExportError(f"{self.key} export timed out after {timeout:.0f}s") from e
        except ExportError as e:
            if self.is_stale():
                logger.info(f"Discarding failed {self.key} export: screen session closed ({e})")
                return None
            raise

        if self.is_stale():
            logger.info(f"Discarding {self.key} export: screen session closed")
            return None
        return result


class OrderReportExporter:
    """Registry of encoders sharing one row-shaping step"""

    def __init__(self, encoders: Optional[Iterable[ReportEncoder]] = None):
        if encoders is None:
            encoders = (OrdersPDFGenerator(), OrdersExcelGenerator(), OrdersWordGenerator())
        self.encoders: Dict[str, ReportEncoder] = {enc.key: enc for enc in encoders}

    @property
    def formats(self):
        return list(self.encoders)

    def get_encoder(self, key: str) -> ReportEncoder:
        try:
            return self.encoders[key]
        except KeyError:
            raise ExportError(f"Unknown export format: {key}") from None

    @staticmethod
    def make_filename(encoder: ReportEncoder, snapshot: ReportSnapshot) -> str:
        stamp = snapshot.generated_at.strftime('%Y%m%d_%H%M%S')
        return f"{OrderConstants.EXPORT_FILE_PREFIX}_{stamp}.{encoder.extension}"

    def encode_snapshot(self, key: str, snapshot: ReportSnapshot) -> ExportResult:
        """
        Encode an already-shaped snapshot

        Raises:
            ExportError: wraps any encoder failure
        """
        encoder = self.get_encoder(key)
        try:
            data = encoder.encode(snapshot)
        except Exception as e:
            logger.error(f"❌ {encoder.label} export failed: {e}", exc_info=True)
            raise ExportError(f"{encoder.label} export failed: {e}") from e

        logger.info(f"✅ {encoder.label} export generated ({snapshot.row_count} orders)")
        return ExportResult(
            filename=self.make_filename(encoder, snapshot),
            mime=encoder.mime,
            data=data,
            row_count=snapshot.row_count,
            label=encoder.label,
        )

    def export(self, key: str, orders: Sequence[Order]) -> ExportResult:
        """Shape the projection now and encode it synchronously"""
        self.get_encoder(key)
        snapshot = build_report(orders)
        return self.encode_snapshot(key, snapshot)

    def export_async(self, key: str, orders: Sequence[Order],
                     owner: Optional[SessionOwner] = None) -> ExportJob:
        """
        Shape the projection now, encode on a worker thread

        The snapshot is taken before returning, so later filter changes do
        not affect the running export.
        """
        self.get_encoder(key)
        snapshot = build_report(orders)
        future = _get_executor().submit(self.encode_snapshot, key, snapshot)
        return ExportJob(key, future, owner)
