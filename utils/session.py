# utils/session.py
"""
Screen session management
Each screen owns one state container, created on entry and discarded on exit

Version: 1.0.0
"""

import logging
import uuid
from typing import Any, Callable, Dict, Optional

import streamlit as st

logger = logging.getLogger(__name__)


class ScreenSession:
    """
    State owned by one screen visit

    Objects that outlive a rerun (stores, editor snapshots, export jobs) are
    kept in `data`. Once closed, `is_active` is False and background work
    holding a reference must not publish results.
    """

    def __init__(self, screen: str):
        self.screen = screen
        self.session_id = uuid.uuid4().hex
        self.is_active = True
        self.data: Dict[str, Any] = {}

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def set(self, key: str, value: Any):
        self.data[key] = value

    def setdefault(self, key: str, factory: Callable[[], Any]) -> Any:
        if key not in self.data:
            self.data[key] = factory()
        return self.data[key]

    def pop(self, key: str, default: Any = None) -> Any:
        return self.data.pop(key, default)

    def close(self):
        self.is_active = False
        self.data.clear()
        logger.debug(f"Screen session closed: {self.screen} ({self.session_id})")


class ScreenSessionManager:
    """Tracks the active screen in st.session_state"""

    ACTIVE_SCREEN = 'screen_active'
    SESSIONS = 'screen_sessions'

    def __init__(self, state: Optional[Dict[str, Any]] = None):
        self.state = st.session_state if state is None else state
        if self.SESSIONS not in self.state:
            self.state[self.SESSIONS] = {}
        if self.ACTIVE_SCREEN not in self.state:
            self.state[self.ACTIVE_SCREEN] = None

    def enter(self, screen: str) -> ScreenSession:
        """
        Return the session for `screen`, closing any other screen's session

        A screen re-entered after leaving gets a fresh session.
        """
        sessions: Dict[str, ScreenSession] = self.state[self.SESSIONS]

        for name in list(sessions):
            if name != screen:
                sessions.pop(name).close()

        session = sessions.get(screen)
        if session is None or not session.is_active:
            session = ScreenSession(screen)
            sessions[screen] = session
            logger.info(f"Entered screen: {screen}")

        self.state[self.ACTIVE_SCREEN] = screen
        return session

    def close(self, screen: str):
        session = self.state[self.SESSIONS].pop(screen, None)
        if session is not None:
            session.close()


def enter_screen(screen: str) -> ScreenSession:
    """Convenience wrapper used by the pages"""
    return ScreenSessionManager().enter(screen)
