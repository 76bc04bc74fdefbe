# src/task_cli/storage/timestamps.py

"""
Local timestamps as `YYYY-MM-DD HH:MM:SS`.

Decoding is strict: every field must be zero-padded to its full width, so
`2024-5-1 9:30:00` is rejected and falls back to EPOCH like any other
undecodable value.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Final

TIMESTAMP_FORMAT: Final = "%Y-%m-%d %H:%M:%S"

# Unix epoch as a local naive datetime; substituted for undecodable timestamps.
EPOCH: Final = datetime.fromtimestamp(0)

_TIMESTAMP_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2}) (\d{2}):(\d{2}):(\d{2})", re.ASCII)


def now_local() -> datetime:
    """Current local time truncated to the second."""
    return datetime.now().replace(microsecond=0)


def format_timestamp(ts: datetime) -> str:
    # strftime("%Y") does not zero-pad years below 1000 on every platform.
    return (
        f"{ts.year:04d}-{ts.month:02d}-{ts.day:02d} "
        f"{ts.hour:02d}:{ts.minute:02d}:{ts.second:02d}"
    )


def parse_timestamp(text: str) -> tuple[datetime, str | None]:
    """
    Decode `YYYY-MM-DD HH:MM:SS`.

    Returns (value, problem). On any failure value is EPOCH and problem
    describes what went wrong; the caller keeps the record either way.
    """
    m = _TIMESTAMP_RE.fullmatch(text)
    if m is None:
        return EPOCH, f"timestamp {text!r} does not match {TIMESTAMP_FORMAT}"

    year, month, day, hour, minute, second = (int(g) for g in m.groups())
    try:
        return datetime(year, month, day, hour, minute, second), None
    except ValueError as e:
        return EPOCH, f"timestamp {text!r} is not a valid date/time ({e})"
