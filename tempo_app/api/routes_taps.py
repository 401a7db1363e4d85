"""
routes_taps.py

Tap tempo API. The page owns a random session id and posts one request per tap
(button click or space bar). Timestamps come from the page's monotonic clock
(performance.now()); without one the server clock is used.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field
import time

from tempo_app.core.tap_tempo import TapSession, format_bpm_text
from tempo_app.services.tap_store import TAP_LOCK, drop_session, find_session, get_session
from tempo_app.utils.calc_logger import log_calc_event


router = APIRouter(prefix="/api/taps", tags=["taps"])


class TapRequest(BaseModel):
    """Tap request body."""
    now_ms: float | None = Field(default=None, ge=0)


def tap_hint(bpm: float | None) -> str:
    if bpm is None:
        return "Tap 2+ times to detect"
    return f"Tap result: {format_bpm_text(bpm)} BPM"


def session_view(session: TapSession) -> dict:
    bpm = session.estimate()
    return {
        "taps": len(session.taps),
        "bpm": bpm,
        "bpm_text": format_bpm_text(bpm) if bpm is not None else None,
        "hint": tap_hint(bpm),
    }


@router.post("/{session_id}")
def tap(session_id: str, req: TapRequest | None = None):
    """
    Registers one tap and returns the current estimate (null if none).
    """
    now = req.now_ms if req is not None and req.now_ms is not None else time.monotonic() * 1000.0

    with TAP_LOCK:
        session = get_session(session_id)
        session.tap(now)
        view = session_view(session)

    log_calc_event(session=session_id, action="tap", source="TAP", detail=f"taps={view['taps']} bpm={view['bpm_text']}")
    return view


@router.get("/{session_id}")
def get_estimate(session_id: str):
    with TAP_LOCK:
        session = find_session(session_id)
        return session_view(session or TapSession())


@router.post("/{session_id}/apply")
def apply_tapped_bpm(session_id: str):
    """
    Hands the tapped BPM to the BPM input and clears the session.
    409 when there is nothing to apply yet.
    """
    with TAP_LOCK:
        session = find_session(session_id)
        bpm = session.apply() if session is not None else None
        if bpm is not None:
            drop_session(session_id)

    if bpm is None:
        raise HTTPException(status_code=409, detail="No tap tempo detected yet")

    log_calc_event(session=session_id, action="apply", source="TAP", detail=f"bpm={format_bpm_text(bpm)}")
    return {"bpm": bpm, "bpm_text": format_bpm_text(bpm)}


@router.delete("/{session_id}")
def reset_taps(session_id: str):
    with TAP_LOCK:
        drop_session(session_id)

    log_calc_event(session=session_id, action="reset", source="TAP")
    return {"taps": 0, "bpm": None, "bpm_text": None, "hint": tap_hint(None)}
