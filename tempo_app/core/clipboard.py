"""
clipboard.py

Text that ends up in the clipboard and the short status line shown
after a copy attempt. The actual clipboard write happens in the browser
and only reports success/failure; failures are shown, not retried.
"""

from __future__ import annotations

from typing import Literal

from tempo_app.core.tempo import format_hz, format_ms


CopyKind = Literal["ms", "hz"]

COPY_BLOCKED_MESSAGE = "Copy blocked by browser. Please try again."


def clipboard_text(value: float, kind: CopyKind) -> str:
    if kind == "ms":
        return format_ms(value)
    return format_hz(value)


def copy_status_message(label: str, done: bool) -> str:
    return f"{label} copied" if done else COPY_BLOCKED_MESSAGE
