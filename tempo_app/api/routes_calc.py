"""
routes_calc.py

Calculation API the page calls whenever BPM, mode or signature changes.
Nothing is stored; every request recomputes the rows.
"""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Query

from tempo_app.config import CONFIG
from tempo_app.core.notation import CalculatorMode, get_mode_config
from tempo_app.core.tempo import (
    format_ms,
    formula_base_ms,
    get_delay_rows,
    get_reverb_rows,
    read_bpm_text,
)
from tempo_app.core.time_signature import (
    DEFAULT_TIME_SIGNATURE,
    find_time_signature,
    parse_time_signature,
    resolve_time_signature,
)


router = APIRouter(prefix="/api", tags=["calc"])


def bpm_hint(is_valid: bool, bpm: float) -> str:
    """Text under the BPM input."""
    if is_valid:
        return f"Detected: {bpm:.1f} BPM"
    return f"Type a value from {CONFIG.min_bpm:.0f} to {CONFIG.max_bpm:.0f} BPM"


@router.get("/calc")
def calculate(
    bpm: str = Query(default=f"{CONFIG.default_bpm:.0f}"),
    mode: CalculatorMode = Query(default="delay"),
    signature: str = Query(default=DEFAULT_TIME_SIGNATURE.id),
    custom: str = Query(default=""),
    last_valid: str | None = Query(default=None),
):
    """
    Delay rows for every mode, reverb rows in reverb mode.

    - bpm: raw input text; invalid text returns empty tables
    - signature: preset id; custom: free text "N/M" that overrides it
    - last_valid: signature id to fall back to while custom text is invalid
    """
    reading = read_bpm_text(bpm)

    fallback = None
    if last_valid:
        fallback = parse_time_signature(last_valid) or find_time_signature(last_valid)
    resolution = resolve_time_signature(signature, custom, fallback)

    mode_cfg = get_mode_config(mode)

    delay_rows = []
    reverb_rows = []
    formula_base = "Enter BPM"
    if reading.is_valid:
        delay_rows = [asdict(r) for r in get_delay_rows(reading.bpm, mode)]
        if mode == "reverb":
            rows = get_reverb_rows(reading.bpm, resolution.signature.beats_per_bar)
            reverb_rows = [asdict(r) for r in rows]
        formula_base = f"1/4 = {format_ms(formula_base_ms(reading.bpm))}"

    return {
        "bpm": {
            "raw": reading.raw,
            "value": reading.bpm,
            "is_valid": reading.is_valid,
            "hint": bpm_hint(reading.is_valid, reading.bpm),
        },
        "mode": asdict(mode_cfg),
        "signature": {
            **asdict(resolution.signature),
            "source": resolution.source,
            "is_typing": resolution.is_typing,
        },
        "formula_base": formula_base,
        "delay_rows": delay_rows,
        "reverb_rows": reverb_rows,
    }


@router.get("/time-signatures/parse")
def parse_signature(text: str = Query(default="")):
    """
    Free-text signature check for the custom input box.
    """
    parsed = parse_time_signature(text)
    if parsed is None:
        return {"valid": False, "beats_per_bar": None, "label": None}
    return {"valid": True, "beats_per_bar": parsed.beats_per_bar, "label": parsed.label}
