"""
tap_store.py

In-memory TapSession per page session id.
Sessions are lost on restart and not shared between worker processes.

Every page load picks a new id, so sessions idle for longer than
CONFIG.tap_store_idle_ms (server clock) are dropped on the next access.
Reads never create a session.
"""

from __future__ import annotations

from threading import Lock
from typing import Optional
import time

from tempo_app.config import CONFIG
from tempo_app.core.tap_tempo import TapSession

TAP_SESSIONS: dict[str, TapSession] = {}
TAP_TOUCHED: dict[str, float] = {}
TAP_LOCK = Lock()


def _server_ms() -> float:
    return time.monotonic() * 1000.0


def purge_idle(now: Optional[float] = None) -> None:
    now = _server_ms() if now is None else now
    for session_id, touched in list(TAP_TOUCHED.items()):
        if now - touched > CONFIG.tap_store_idle_ms:
            drop_session(session_id)


def find_session(session_id: str, now: Optional[float] = None) -> Optional[TapSession]:
    """Lookup without inserting."""
    purge_idle(now)
    return TAP_SESSIONS.get(session_id)


def get_session(session_id: str, now: Optional[float] = None) -> TapSession:
    """Lookup or create; marks the session as used."""
    now = _server_ms() if now is None else now
    purge_idle(now)
    session = TAP_SESSIONS.get(session_id)
    if session is None:
        session = TapSession()
        TAP_SESSIONS[session_id] = session
    TAP_TOUCHED[session_id] = now
    return session


def drop_session(session_id: str) -> None:
    TAP_SESSIONS.pop(session_id, None)
    TAP_TOUCHED.pop(session_id, None)
