"""Wall-clock utilities.

This module is the single source of "now" for sample producers so tests
can monkey-patch it trivially.
"""

from __future__ import annotations

from datetime import datetime

CLOCK_LABEL_FORMAT = "%H:%M:%S"


def local_now() -> datetime:
    """Return the current local time as a timezone-aware datetime."""
    return datetime.now().astimezone()


def clock_label(moment: datetime | None = None) -> str:
    """Format *moment* (default: now) as an ``HH:MM:SS`` display label."""
    return (moment or local_now()).strftime(CLOCK_LABEL_FORMAT)
