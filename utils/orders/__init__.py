# utils/orders/__init__.py
"""
Orders domain - filtering, status changes and report exports

Version: 1.0.0
"""

from .common import OrderStatus, PaymentState
from .export import ExportError, ExportJob, ExportResult, OrderReportExporter
from .facets import OrderFacets, derive_facets, seed_price_range
from .filters import FilterCriteria, count_active_filters, filter_orders
from .manager import OrderManager
from .models import Order, OrderItem
from .queries import OrderQueries
from .report import REPORT_COLUMNS, ReportSnapshot, build_report, shape_row
from .store import OrderError, OrderFetchError, OrderStatusError, OrderStore

__all__ = [
    'Order',
    'OrderItem',
    'OrderStatus',
    'PaymentState',
    'OrderQueries',
    'OrderStore',
    'OrderManager',
    'OrderError',
    'OrderFetchError',
    'OrderStatusError',
    'FilterCriteria',
    'filter_orders',
    'count_active_filters',
    'OrderFacets',
    'derive_facets',
    'seed_price_range',
    'REPORT_COLUMNS',
    'ReportSnapshot',
    'build_report',
    'shape_row',
    'OrderReportExporter',
    'ExportJob',
    'ExportResult',
    'ExportError',
]
