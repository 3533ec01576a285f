# utils/sections/queries.py
"""
Backend queries for Sections domain

Version: 1.0.0
"""

import logging
from typing import Any, Dict, List, Optional

from ..api import ApiClient, get_api_client
from .models import Section

logger = logging.getLogger(__name__)


class SectionQueries:
    """Backend calls for landing page sections"""

    LIST_PATH = "/api/section/admin"
    UPSERT_PATH = "/api/section/upsert"
    DELETE_PATH = "/api/section/delete"

    def __init__(self, client: Optional[ApiClient] = None):
        self.client = client or get_api_client()

    def fetch_sections(self) -> List[Section]:
        """
        Raises:
            ApiError: if the backend call fails
        """
        data = self.client.get(self.LIST_PATH)
        sections = [Section.from_api(s) for s in data.get("sections") or []]
        logger.info(f"Fetched {len(sections)} sections")
        return sections

    def upsert_section(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Create (no id) or update (with id) a section"""
        return self.client.post(self.UPSERT_PATH, json=payload)

    def delete_section(self, section_id: str) -> Dict[str, Any]:
        return self.client.post(self.DELETE_PATH, json={"id": section_id})
