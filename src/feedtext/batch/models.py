"""Data models produced by batch parsing."""

from __future__ import annotations

from dataclasses import dataclass

from feedtext.core.enums import ParseFailure
from feedtext.core.models import FeedEvent
from feedtext.core.parsed import ParsedFeedEventText, ParseError


@dataclass(slots=True, frozen=True)
class BatchEntry:
    """One input event with its parse result.

    ``round_trip_ok`` is ``None`` unless round-trip verification was on.
    """

    index: int
    event: FeedEvent
    parsed: ParsedFeedEventText
    round_trip_ok: bool | None = None

    @property
    def failure(self) -> ParseFailure | None:
        if isinstance(self.parsed, ParseError):
            return self.parsed.error.reason
        return None


@dataclass(slots=True, frozen=True)
class BatchReport:
    """Results for a whole batch, in input order."""

    entries: tuple[BatchEntry, ...]
    parsed: int
    unrecognized: int
    failed: int
    round_trip_mismatches: int = 0

    @property
    def total(self) -> int:
        return len(self.entries)

    @property
    def failures(self) -> tuple[BatchEntry, ...]:
        return tuple(entry for entry in self.entries if entry.failure is not None)
