"""Era thresholds marking changes in feed event phrasing.

The table is plain data: appending a new era means adding a
:class:`Breakpoint` member and a row to :data:`DEFAULT_BREAKPOINTS`.
Grammars and renderers only ask :meth:`BreakpointTable.before` /
:meth:`BreakpointTable.after`.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType

from feedtext.core.types import Day, Season, TimeKey, format_time, time_key


class UnknownBreakpointError(KeyError, ValueError):
    """Raised when a table has no threshold for a breakpoint."""


class Breakpoint(StrEnum):
    """Named phrasing change."""

    SEASON1_ENCHANTMENT_CHANGE = "season1_enchantment_change"
    SEASON1_ATTRIBUTE_EQUAL_CHANGE = "season1_attribute_equal_change"


@dataclass(frozen=True, slots=True)
class EraThreshold:
    """First moment at which a new phrasing is in effect.

    ``day=None`` means the start of ``season``.
    """

    season: Season
    day: Day | None = None

    def __post_init__(self) -> None:
        time_key(self.season, self.day)

    @property
    def key(self) -> TimeKey:
        return time_key(self.season, self.day)

    def __str__(self) -> str:
        if self.day is None:
            return f"S{self.season}"
        return format_time(self.season, self.day)


class BreakpointTable(Mapping[Breakpoint, EraThreshold]):
    """Read-only mapping of breakpoints to thresholds with era comparisons."""

    __slots__ = ("_thresholds",)

    def __init__(self, thresholds: Mapping[Breakpoint, EraThreshold]) -> None:
        self._thresholds = MappingProxyType(dict(thresholds))

    def __getitem__(self, breakpoint: Breakpoint) -> EraThreshold:
        try:
            return self._thresholds[breakpoint]
        except KeyError:
            raise UnknownBreakpointError(
                f"Unknown breakpoint: {breakpoint!r}"
            ) from None

    def __iter__(self) -> Iterator[Breakpoint]:
        return iter(self._thresholds)

    def __len__(self) -> int:
        return len(self._thresholds)

    def __repr__(self) -> str:
        rows = ", ".join(f"{bp.value}={th}" for bp, th in self._thresholds.items())
        return f"BreakpointTable({rows})"

    def after(self, breakpoint: Breakpoint, season: Season, day: Day | None) -> bool:
        """True when ``(season, day)`` is at or after *breakpoint*.

        An unknown day is the earliest moment of its season.
        """
        return time_key(season, day) >= self[breakpoint].key

    def before(self, breakpoint: Breakpoint, season: Season, day: Day | None) -> bool:
        return not self.after(breakpoint, season, day)

    def with_threshold(
        self, breakpoint: Breakpoint, threshold: EraThreshold
    ) -> BreakpointTable:
        """Return a copy with *breakpoint* set to *threshold*."""
        thresholds = dict(self._thresholds)
        thresholds[breakpoint] = threshold
        return BreakpointTable(thresholds)


DEFAULT_BREAKPOINTS = BreakpointTable(
    {
        Breakpoint.SEASON1_ENCHANTMENT_CHANGE: EraThreshold(season=1, day=120),
        Breakpoint.SEASON1_ATTRIBUTE_EQUAL_CHANGE: EraThreshold(season=1, day=200),
    }
)
