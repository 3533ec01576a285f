# utils/sections/store.py
"""
Section Store and editor snapshot

Version: 1.0.0
"""

import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set, Tuple

from ..api import ApiError
from .models import Section
from .queries import SectionQueries
from .validators import next_default_order, used_orders

logger = logging.getLogger(__name__)


class SectionError(Exception):
    """Base exception for section operations"""
    pass


class SectionFetchError(SectionError):
    pass


class SectionValidationError(SectionError):
    """Local validation failed; nothing was sent"""

    def __init__(self, results):
        self.results = results
        super().__init__("; ".join(r.message for r in results.blocks))


class SectionSaveError(SectionError):
    pass


class SectionStore:
    """Sections for one Sections screen session"""

    def __init__(self, queries: Optional[SectionQueries] = None,
                 sections: Optional[List[Section]] = None):
        self.queries = queries
        self._sections: Tuple[Section, ...] = tuple(sections or ())

    @property
    def sections(self) -> Tuple[Section, ...]:
        return self._sections

    def get(self, section_id: str) -> Optional[Section]:
        return next((s for s in self._sections if s.id == section_id), None)

    def used_orders(self, editing_id: Optional[str] = None) -> Set[int]:
        return used_orders(self._sections, editing_id)

    def reload(self) -> int:
        """
        Raises:
            SectionFetchError: previous contents are kept
        """
        if self.queries is None:
            self.queries = SectionQueries()

        try:
            fresh = self.queries.fetch_sections()
        except ApiError as e:
            logger.error(f"❌ Failed to fetch sections: {e}")
            raise SectionFetchError(f"Failed to fetch sections: {e}") from e

        self._sections = tuple(fresh)
        return len(self._sections)


@dataclass(frozen=True)
class SectionEditor:
    """
    Add/Edit dialog state captured when the dialog opens

    default_order is computed once from the store snapshot and is not
    recomputed while the dialog stays open.
    """
    editing_id: Optional[str]
    default_order: int
    initial_values: Dict[str, Any] = field(default_factory=dict)
    key: str = field(default_factory=lambda: uuid.uuid4().hex[:8])

    @property
    def is_new(self) -> bool:
        return self.editing_id is None

    @classmethod
    def open(cls, store: SectionStore, section: Optional[Section] = None) -> "SectionEditor":
        if section is not None:
            return cls(
                editing_id=section.id,
                default_order=section.order,
                initial_values=section.to_form_values(),
            )

        default_order = next_default_order(store.sections)
        return cls(
            editing_id=None,
            default_order=default_order,
            initial_values={
                "title": "",
                "description": "",
                "product_ids": [],
                "image": "",
                "order": default_order,
                "active": False,
            },
        )
