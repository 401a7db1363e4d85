from dataclasses import asdict

from fastapi import APIRouter

from tempo_app.config import CONFIG
from tempo_app.core.notation import MODE_PRESETS, NOTE_DIVISIONS, REVERB_SIZE_PRESETS
from tempo_app.core.time_signature import DEFAULT_TIME_SIGNATURE, TIME_SIGNATURES

router = APIRouter(tags=["meta"])


@router.get("/api/catalog")
def get_catalog():
    """
    Static tables the page needs to draw its buttons and labels.
    """
    return {
        "note_divisions": [asdict(n) for n in NOTE_DIVISIONS],
        "reverb_presets": [asdict(p) for p in REVERB_SIZE_PRESETS],
        "time_signatures": [asdict(s) for s in TIME_SIGNATURES],
        "default_time_signature": DEFAULT_TIME_SIGNATURE.id,
        "modes": [asdict(m) for m in MODE_PRESETS.values()],
        "bpm_presets": list(CONFIG.bpm_presets),
        "default_bpm": CONFIG.default_bpm,
        "min_bpm": CONFIG.min_bpm,
        "max_bpm": CONFIG.max_bpm,
        "copy_message_ms": CONFIG.copy_message_ms,
    }
