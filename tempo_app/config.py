"""
config.py

Central place for the calculator's defaults and limits.
If something needs to change per deployment, change it here.
"""

from dataclasses import dataclass, field
from pathlib import Path


PKG_ROOT = Path(__file__).resolve().parent


@dataclass(frozen=True)
class AppConfig:
    """
    Application settings.

    - default_bpm: BPM used when the input is not a finite number
    - min_bpm / max_bpm: every BPM is clamped into this range
    - bpm_presets: quick-pick buttons under the BPM input
    - tap_session_timeout_ms: a gap longer than this starts a new tap session
    - tap_window_ms: taps older than this (relative to the newest) are dropped
    - tap_max_taps: how many taps a session keeps
    - tap_min_interval_ms / tap_max_interval_ms: plausible inter-tap range
    - tap_average_count: how many recent intervals are averaged
    - tap_store_idle_ms: server-side idle time after which a tap session is forgotten
    - copy_message_ms: how long the copy status stays on screen
    """
    default_bpm: float = 120.0
    min_bpm: float = 1.0
    max_bpm: float = 999.0
    bpm_presets: tuple[int, ...] = (60, 66, 72, 78, 84, 90, 96, 100, 110, 120, 130, 140, 150, 160)

    tap_session_timeout_ms: float = 3500.0
    tap_window_ms: float = 12000.0
    tap_max_taps: int = 12
    tap_min_interval_ms: float = 120.0
    tap_max_interval_ms: float = 3000.0
    tap_average_count: int = 6
    tap_store_idle_ms: float = 60000.0

    copy_message_ms: int = 1300

    templates_dir: Path = field(default=PKG_ROOT / "templates")
    static_dir: Path = field(default=PKG_ROOT / "static")


CONFIG = AppConfig()
