"""
routes_copy.py

Copy-to-clipboard support.
- /api/copy: the exact text to put in the clipboard
- /api/copy/status: the status line after the browser reported the result
"""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel, Field

from tempo_app.config import CONFIG
from tempo_app.core.clipboard import CopyKind, clipboard_text, copy_status_message
from tempo_app.utils.calc_logger import log_calc_event


router = APIRouter(prefix="/api/copy", tags=["copy"])


class CopyRequest(BaseModel):
    label: str = Field(default="")
    value: float
    kind: CopyKind = "ms"


class CopyStatusRequest(BaseModel):
    label: str
    done: bool
    session_id: str = Field(default="anonymous")


@router.post("")
def copy_text(req: CopyRequest):
    return {"label": req.label, "text": clipboard_text(req.value, req.kind)}


@router.post("/status")
def copy_status(req: CopyStatusRequest):
    """
    Status message for the page; it disappears after clear_after_ms.
    Failed copies are reported only, never retried.
    """
    if not req.done:
        log_calc_event(session=req.session_id, action="copy_failed", source="COPY", detail=req.label)
    return {
        "message": copy_status_message(req.label, req.done),
        "clear_after_ms": CONFIG.copy_message_ms,
    }
