"""
tempo.py

BPM -> milliseconds / hertz conversion and the row builders the UI renders.

- 1 beat (quarter note) = 60000 / bpm ms
- dotted = x1.5, triplet = x2/3
- hz = 1000 / ms (0 means "n/a")

All values are computed from unrounded floats. format_ms / format_hz
are for display only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional
import math
import re

from tempo_app.config import CONFIG
from tempo_app.core.notation import (
    NOTE_DIVISIONS,
    REVERB_SIZE_PRESETS,
    CalculatorMode,
    NoteDivision,
    get_mode_config,
)


MS_PER_MINUTE = 60000.0
DOTTED_FACTOR = 1.5
TRIPLET_FACTOR = 2 / 3

RE_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


@dataclass(frozen=True)
class BpmReading:
    """
    Raw BPM text as typed by the user.

    - bpm: always usable (normalized)
    - is_valid: the text itself was a finite number in range
    """
    raw: str
    bpm: float
    is_valid: bool


@dataclass(frozen=True)
class DelayRow:
    id: str
    note_label: str
    notes_ms: float
    notes_hz: float
    dotted_ms: float
    dotted_hz: float
    triplet_ms: float
    triplet_hz: float


@dataclass(frozen=True)
class ReverbRow:
    name: str
    total_label: str
    pre_delay_label: str
    total_ms: float
    pre_delay_ms: float
    decay_ms: float


def normalize_bpm(raw: Any) -> float:
    """Non-finite -> default BPM, otherwise clamp to [min_bpm, max_bpm]."""
    try:
        value = float(raw)
    except OverflowError:
        # int too large for a float: clamp by sign
        return CONFIG.max_bpm if raw > 0 else CONFIG.min_bpm
    except (TypeError, ValueError):
        return CONFIG.default_bpm
    if not math.isfinite(value):
        return CONFIG.default_bpm
    return min(CONFIG.max_bpm, max(CONFIG.min_bpm, value))


def read_bpm_text(text: Optional[str]) -> BpmReading:
    """
    Parses the BPM input box. Never raises.

    Like a browser number parse: the leading ASCII number counts,
    trailing text is ignored ("128 bpm" -> 128).
    """
    raw = text if text is not None else ""
    m = RE_LEADING_NUMBER.match(raw.strip())
    parsed = float(m.group(0)) if m else math.nan
    is_valid = math.isfinite(parsed) and CONFIG.min_bpm <= parsed <= CONFIG.max_bpm
    return BpmReading(raw=raw, bpm=normalize_bpm(parsed), is_valid=is_valid)


def ms_from_bpm(bpm: float, beat_value: float) -> float:
    return (MS_PER_MINUTE / normalize_bpm(bpm)) * beat_value


def hz_from_ms(ms: float) -> float:
    # 0 is a sentinel, not a real rate
    if ms <= 0:
        return 0.0
    return 1000.0 / ms


def dotted_ms(base_ms: float) -> float:
    return base_ms * DOTTED_FACTOR


def triplet_ms(base_ms: float) -> float:
    return base_ms * TRIPLET_FACTOR


def formula_base_ms(bpm: float) -> float:
    """Length of one quarter note ("1/4 = 500.00 ms" at 120 BPM)."""
    return ms_from_bpm(bpm, 1.0)


def format_ms(ms: float) -> str:
    return f"{ms:.2f} ms"


def format_hz(hz: float) -> str:
    return f"{hz:.2f} Hz"


def _to_delay_row(division: NoteDivision, bpm: float) -> DelayRow:
    base = ms_from_bpm(bpm, division.beat_value)
    dotted = dotted_ms(base)
    triplet = triplet_ms(base)
    return DelayRow(
        id=division.id,
        note_label=f"{division.label} ({division.description})",
        notes_ms=base,
        notes_hz=hz_from_ms(base),
        dotted_ms=dotted,
        dotted_hz=hz_from_ms(dotted),
        triplet_ms=triplet,
        triplet_hz=hz_from_ms(triplet),
    )


def get_delay_rows(bpm: float, mode: CalculatorMode | None = None) -> list[DelayRow]:
    """
    One row per note division, in catalog order.

    With a mode, only that mode's divisions are returned (order unchanged).
    """
    divisions = NOTE_DIVISIONS
    if mode is not None:
        wanted = set(get_mode_config(mode).division_ids)
        divisions = tuple(d for d in NOTE_DIVISIONS if d.id in wanted)
    return [_to_delay_row(d, bpm) for d in divisions]


def get_reverb_rows(bpm: float, beats_per_bar: float) -> list[ReverbRow]:
    """
    Reverb size presets for the active signature.

    total scales with beats_per_bar / 4 (floored at 1 beat per bar),
    pre-delay stays on its sub-beat value. decay = total - pre-delay,
    kept as-is even when negative.
    """
    scale = max(1.0, beats_per_bar) / 4

    rows: list[ReverbRow] = []
    for preset in REVERB_SIZE_PRESETS:
        total = ms_from_bpm(bpm, preset.total_beats * scale)
        pre_delay = ms_from_bpm(bpm, preset.pre_delay_beat_value)
        rows.append(ReverbRow(
            name=preset.name,
            total_label=preset.total_label,
            pre_delay_label=preset.pre_delay_label,
            total_ms=total,
            pre_delay_ms=pre_delay,
            decay_ms=total - pre_delay,
        ))
    return rows
