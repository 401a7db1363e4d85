"""
time_signature.py

Time signatures normalized to quarter-note beats per bar.

- presets: 2/4, 3/4, 4/4, 6/8
- free text "N/M" -> N * (4 / M), N and M in 1..64

An invalid free-text signature is never used for a calculation.
The caller falls back to the last valid preset instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional
import re


RE_SIGNATURE = re.compile(r"^(\d{1,3})/(\d{1,3})$", re.ASCII)
SIGNATURE_MIN = 1
SIGNATURE_MAX = 64

SignatureSource = Literal["preset", "custom"]


@dataclass(frozen=True)
class TimeSignature:
    """
    - id / label: "6/8"
    - beats_per_bar: bar length in quarter-note beats (6/8 -> 3.0)
    """
    id: str
    label: str
    beats_per_bar: float


@dataclass(frozen=True)
class SignatureResolution:
    """
    Which signature the calculation actually uses.

    - signature: always a valid signature
    - source: "custom" when the free text won, else "preset"
    - is_typing: free text is present but does not parse (UI flags it)
    """
    signature: TimeSignature
    source: SignatureSource
    is_typing: bool = False


TIME_SIGNATURES: tuple[TimeSignature, ...] = (
    TimeSignature("2/4", "2/4", 2.0),
    TimeSignature("3/4", "3/4", 3.0),
    TimeSignature("4/4", "4/4", 4.0),
    TimeSignature("6/8", "6/8", 3.0),
)

DEFAULT_TIME_SIGNATURE = TIME_SIGNATURES[2]


def parse_time_signature(text: str) -> Optional[TimeSignature]:
    """
    Free-text signature parser.

    Whitespace anywhere is ignored (" 7 / 8 " == "7/8").
    Returns None for anything that is not digits/digits within 1..64.
    """
    if text is None:
        return None
    compact = re.sub(r"\s+", "", text)
    m = RE_SIGNATURE.match(compact)
    if not m:
        return None

    numerator = int(m.group(1))
    denominator = int(m.group(2))
    if not (SIGNATURE_MIN <= numerator <= SIGNATURE_MAX):
        return None
    if not (SIGNATURE_MIN <= denominator <= SIGNATURE_MAX):
        return None

    label = f"{numerator}/{denominator}"
    return TimeSignature(id=label, label=label, beats_per_bar=numerator * (4 / denominator))


def find_time_signature(signature_id: str | None) -> TimeSignature:
    """Preset lookup; unknown ids fall back to 4/4."""
    return next((s for s in TIME_SIGNATURES if s.id == signature_id), DEFAULT_TIME_SIGNATURE)


def resolve_time_signature(
    preset_id: str | None,
    custom_text: str | None = None,
    last_valid: TimeSignature | None = None,
) -> SignatureResolution:
    """
    Picks the signature to compute with.

    Valid free text beats the preset. Invalid free text is flagged
    and the last valid signature (or the preset) is used.
    """
    preset = find_time_signature(preset_id)
    text = (custom_text or "").strip()
    if not text:
        return SignatureResolution(signature=preset, source="preset")

    parsed = parse_time_signature(text)
    if parsed is not None:
        return SignatureResolution(signature=parsed, source="custom")

    return SignatureResolution(signature=last_valid or preset, source="preset", is_typing=True)
