"""
tap_tempo.py

Tap tempo: turns a list of tap timestamps (monotonic ms) into a BPM.

Session rules:
- a gap longer than the session timeout starts over at [now]
- only taps inside the rolling window are kept, newest N at most

Estimate:
- intervals outside [min, max] ms are ignored (double clicks, long pauses)
- the most recent intervals are averaged and converted to BPM
- None means "no estimate", never 0 BPM
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from tempo_app.config import CONFIG
from tempo_app.core.tempo import MS_PER_MINUTE, normalize_bpm


def register_tap(taps: Sequence[float], now: float) -> list[float]:
    """
    Returns the new tap list after a tap at `now`. Input is not modified.
    A tap older than the last one (clock reset) also starts over.
    """
    if taps and (now < taps[-1] or now - taps[-1] > CONFIG.tap_session_timeout_ms):
        return [now]

    kept = [t for t in [*taps, now] if now - t <= CONFIG.tap_window_ms]
    if len(kept) > CONFIG.tap_max_taps:
        kept = kept[-CONFIG.tap_max_taps:]
    return kept


def tap_intervals(taps: Sequence[float]) -> list[float]:
    """Successive intervals that fall in the plausible musical range."""
    gaps: list[float] = []
    for prev, cur in zip(taps[:-1], taps[1:]):
        interval = cur - prev
        if CONFIG.tap_min_interval_ms <= interval <= CONFIG.tap_max_interval_ms:
            gaps.append(interval)
    return gaps


def estimate_bpm(taps: Sequence[float]) -> Optional[float]:
    if len(taps) < 2:
        return None

    gaps = tap_intervals(taps)
    if not gaps:
        return None

    recent = gaps[-CONFIG.tap_average_count:]
    average = sum(recent) / len(recent)
    return normalize_bpm(MS_PER_MINUTE / average)


def format_bpm_text(bpm: float) -> str:
    """Text written back into the BPM input ("128.0")."""
    return f"{bpm:.1f}"


@dataclass
class TapSession:
    """
    One user's tapping state.

    - taps: timestamps in ms, oldest first
    """
    taps: list[float] = field(default_factory=list)

    def tap(self, now: float) -> Optional[float]:
        self.taps = register_tap(self.taps, now)
        return self.estimate()

    def estimate(self) -> Optional[float]:
        return estimate_bpm(self.taps)

    def apply(self) -> Optional[float]:
        """
        Hands out the estimate and starts a fresh session.
        Without an estimate nothing changes.
        """
        bpm = self.estimate()
        if bpm is None:
            return None
        self.reset()
        return bpm

    def reset(self) -> None:
        self.taps = []
