# utils/sections/__init__.py
"""
Sections domain - landing page section curation

Version: 1.0.0
"""

from .manager import SectionManager
from .models import Section, build_upsert_payload
from .queries import SectionQueries
from .store import (
    SectionEditor, SectionError, SectionFetchError, SectionSaveError,
    SectionStore, SectionValidationError
)
from .validators import (
    SectionOrderCheck, next_default_order, used_orders,
    validate_section_form, validate_section_order
)

__all__ = [
    'Section',
    'build_upsert_payload',
    'SectionQueries',
    'SectionStore',
    'SectionEditor',
    'SectionManager',
    'SectionError',
    'SectionFetchError',
    'SectionSaveError',
    'SectionValidationError',
    'SectionOrderCheck',
    'used_orders',
    'validate_section_order',
    'next_default_order',
    'validate_section_form',
]
