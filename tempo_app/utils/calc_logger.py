"""
calc_logger.py

One-line log output for things the server does on behalf of a page session:
- tap registered / applied / reset
- copy attempts reported by the page
"""

from typing import Literal, Optional
from datetime import datetime

EventSource = Literal["TAP", "COPY"]


def log_calc_event(
    *,
    session: str,
    action: str,
    source: EventSource,
    detail: Optional[str] = None,
):
    """
    Prints a timestamped line.

    source:
      - TAP  : tap tempo session changes
      - COPY : clipboard results from the page
    """
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    print(
        f"[{source}][{ts}] "
        f"session={session} "
        f"action={action} "
        + (f"detail={detail}" if detail else "")
    )
