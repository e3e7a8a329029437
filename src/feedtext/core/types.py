"""Season/day type aliases and the ordering used by era thresholds.

Event time is a ``(season, day)`` pair where the day may be unknown.
Keys compare lexicographically:
    (1, None) < (1, 0) < (1, 1) < ... < (2, None) < (2, 0) ...
An unknown day sorts before every known day of the same season.
"""

from __future__ import annotations

from typing import TypeAlias

Season: TypeAlias = int  # >= 0
Day: TypeAlias = int  # >= 0

TimeKey: TypeAlias = tuple[int, int]

_UNKNOWN_DAY = -1
MAX_U8 = 255
MIN_I16 = -32768
MAX_I16 = 32767


def time_key(season: Season, day: Day | None) -> TimeKey:
    """Total ordering key for an event or threshold time."""
    if season < 0:
        raise ValueError(f"Invalid season: {season!r}")
    if day is None:
        return (season, _UNKNOWN_DAY)
    if day < 0:
        raise ValueError(f"Invalid day: {day!r}")
    return (season, day)


def format_time(season: Season, day: Day | None) -> str:
    """Human-readable time, e.g. ``S1D120`` or ``S2D?``."""
    return f"S{season}D{'?' if day is None else day}"
