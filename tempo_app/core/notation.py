"""
notation.py

Static catalogs the calculator is built on:
- note divisions (1/1 .. 1/256) as multiples of one quarter-note beat
- reverb size presets
- calculator modes (delay / reverb / lfo)

Everything here is read-only. Row order in the UI follows tuple order here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


CalculatorMode = Literal["delay", "reverb", "lfo"]


@dataclass(frozen=True)
class NoteDivision:
    """
    One rhythmic subdivision.

    - id: stable key ("1/8")
    - label: display text
    - beat_value: length in quarter-note beats (1/8 -> 0.5)
    - description: short human text ("1/2 Beat")
    """
    id: str
    label: str
    beat_value: float
    description: str

    def __post_init__(self) -> None:
        if not self.beat_value > 0:
            raise ValueError(f"beat_value must be > 0: {self.id}")


@dataclass(frozen=True)
class ReverbSizePreset:
    """
    Reverb size preset at nominal 4/4.

    total_beats is scaled by the active time signature,
    pre_delay_beat_value is not.
    """
    name: str
    total_label: str
    total_beats: float
    pre_delay_label: str
    pre_delay_beat_value: float


@dataclass(frozen=True)
class ModePreset:
    id: CalculatorMode
    name: str
    description: str
    division_ids: tuple[str, ...]


NOTE_DIVISIONS: tuple[NoteDivision, ...] = (
    NoteDivision("1/1", "1/1", 4.0, "1 Bar"),
    NoteDivision("1/2", "1/2", 2.0, "2 Beats"),
    NoteDivision("1/4", "1/4", 1.0, "1 Beat"),
    NoteDivision("1/8", "1/8", 0.5, "1/2 Beat"),
    NoteDivision("1/16", "1/16", 0.25, "1/4 Beat"),
    NoteDivision("1/32", "1/32", 0.125, "1/8 Beat"),
    NoteDivision("1/64", "1/64", 0.0625, "1/16 Beat"),
    NoteDivision("1/128", "1/128", 0.03125, "1/32 Beat"),
    NoteDivision("1/256", "1/256", 0.015625, "1/64 Beat"),
)

# largest to smallest total length
REVERB_SIZE_PRESETS: tuple[ReverbSizePreset, ...] = (
    ReverbSizePreset("Hall", "2 Bars", 8.0, "1/32", 0.125),
    ReverbSizePreset("Large Room", "1 Bar", 4.0, "1/64", 0.0625),
    ReverbSizePreset("Small Room", "1/2 Note", 2.0, "1/128", 0.03125),
    ReverbSizePreset("Tight Ambience", "1/4 Note", 1.0, "1/256", 0.015625),
)

_ALL_DIVISION_IDS = tuple(n.id for n in NOTE_DIVISIONS)

MODE_PRESETS: dict[CalculatorMode, ModePreset] = {
    "delay": ModePreset(
        id="delay",
        name="Delay",
        description="Find rhythmically synced delay settings for your tempo.",
        division_ids=_ALL_DIVISION_IDS,
    ),
    "reverb": ModePreset(
        id="reverb",
        name="Reverb / Pre-Delay",
        description="Find practical pre-delay and decay combinations from the delay values.",
        division_ids=_ALL_DIVISION_IDS,
    ),
    "lfo": ModePreset(
        id="lfo",
        name="LFO",
        description="Use delay ms and matching LFO speeds (Hz) for your tempo.",
        division_ids=_ALL_DIVISION_IDS,
    ),
}


def get_mode_config(mode: CalculatorMode) -> ModePreset:
    """Mode lookup. Unknown modes are a programming error (KeyError)."""
    return MODE_PRESETS[mode]