# utils/sections/manager.py
"""
Section Manager - save and delete landing page sections

Version: 1.0.0
"""

import logging
from typing import Any, Dict, Optional

from ..api import ApiError
from ..validation import ValidationResults
from .models import build_upsert_payload
from .queries import SectionQueries
from .store import (
    SectionFetchError, SectionSaveError, SectionStore, SectionValidationError
)
from .validators import validate_section_form

logger = logging.getLogger(__name__)


class SectionManager:
    """Validated upsert/delete, followed by a store refresh"""

    def __init__(self, store: SectionStore, queries: Optional[SectionQueries] = None):
        self.store = store
        self.queries = queries or store.queries or SectionQueries()

    def validate(self, values: Dict[str, Any], editing_id: Optional[str] = None) -> ValidationResults:
        return validate_section_form(values, self.store.sections, editing_id)

    def save(self, values: Dict[str, Any], editing_id: Optional[str] = None) -> ValidationResults:
        """
        Create or update a section

        Args:
            values: Form values (title, description, product_ids, image, order, active)
            editing_id: Id of the section being edited, None for a new one

        Returns:
            Validation results (warnings only; blocks raise)

        Raises:
            SectionValidationError: blocked locally, backend not called
            SectionSaveError: backend failure, store unchanged
        """
        results = self.validate(values, editing_id)
        if results.has_blocks:
            logger.info(f"Section save blocked: {results.rule_ids()}")
            raise SectionValidationError(results)

        payload = build_upsert_payload(values, editing_id)
        try:
            self.queries.upsert_section(payload)
        except ApiError as e:
            logger.error(f"❌ Error saving section: {e}")
            raise SectionSaveError(f"Failed to save section: {e}") from e

        logger.info(f"✅ Section saved: {payload['title']} (order {payload['order']})")
        self._refresh()
        return results

    def delete(self, section_id: str) -> bool:
        """
        Raises:
            SectionSaveError: backend failure, store unchanged
        """
        try:
            self.queries.delete_section(section_id)
        except ApiError as e:
            logger.error(f"❌ Error deleting section {section_id}: {e}")
            raise SectionSaveError(f"Failed to delete section: {e}") from e

        logger.info(f"✅ Section deleted: {section_id}")
        self._refresh()
        return True

    def _refresh(self):
        try:
            self.store.reload()
        except SectionFetchError as e:
            logger.warning(f"⚠️ Sections not refreshed after change: {e}")
