"""Batch parser service: run the core parser over many feed events."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from feedtext.batch.models import BatchEntry, BatchReport
from feedtext.batch.settings import BatchSettings
from feedtext.core.enums import ParseFailure
from feedtext.core.models import FeedEvent
from feedtext.core.notation import parse_feed_event, unparse_feed_event_text
from feedtext.core.parsed import ParseError
from feedtext.core.types import format_time

_LOGGER = logging.getLogger(__name__)

CancelCheck = Callable[[], bool]
ProgressCallback = Callable[[int, int], None]


class BatchCancelled(Exception):
    """Raised when a running batch was cancelled."""


@dataclass(slots=True)
class _BatchAcc:
    parsed: int = 0
    unrecognized: int = 0
    failed: int = 0
    round_trip_mismatches: int = 0


class FeedEventBatchParser:
    """Parses feed events one at a time and collects a report.

    Each event is independent, so callers may split a workload across
    several parsers; a single parser keeps input order.
    """

    __slots__ = ("_settings",)

    def __init__(self, settings: BatchSettings | None = None) -> None:
        self._settings = settings or BatchSettings()

    @property
    def settings(self) -> BatchSettings:
        return self._settings

    def parse_one(self, index: int, event: FeedEvent) -> BatchEntry:
        """Parse a single event and, if enabled, check its round trip."""
        settings = self._settings
        parsed = parse_feed_event(event, settings.breakpoints)

        round_trip_ok: bool | None = None
        if settings.verify_round_trip:
            rendered = unparse_feed_event_text(
                parsed, event, breakpoints=settings.breakpoints
            )
            round_trip_ok = rendered == event.text
            if not round_trip_ok:
                _LOGGER.warning(
                    "Round trip mismatch for event %d: %r rendered as %r",
                    index,
                    event.text,
                    rendered,
                )

        if settings.log_failures and isinstance(parsed, ParseError):
            _LOGGER.log(
                settings.failure_log_level,
                "Event %d (%s): %s",
                index,
                format_time(event.season, event.day),
                parsed.error.message,
            )

        return BatchEntry(
            index=index, event=event, parsed=parsed, round_trip_ok=round_trip_ok
        )

    def parse_batch(
        self,
        events: Iterable[FeedEvent],
        *,
        is_cancelled: CancelCheck | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> BatchReport:
        """Parse *events* in order and return a report."""
        batch = list(events)
        cancelled = is_cancelled or (lambda: False)
        total = len(batch)

        acc = _BatchAcc()
        entries: list[BatchEntry] = []
        for index, event in enumerate(batch):
            if cancelled():
                raise BatchCancelled

            entry = self.parse_one(index, event)
            entries.append(entry)

            failure = entry.failure
            if failure is None:
                acc.parsed += 1
            elif failure == ParseFailure.EVENT_TYPE_NOT_RECOGNIZED:
                acc.unrecognized += 1
            else:
                acc.failed += 1
            if entry.round_trip_ok is False:
                acc.round_trip_mismatches += 1

            if on_progress is not None:
                on_progress(index + 1, total)

        _LOGGER.info(
            "Parsed %d/%d feed events (%d unrecognized, %d failed)",
            acc.parsed,
            total,
            acc.unrecognized,
            acc.failed,
        )
        return BatchReport(
            entries=tuple(entries),
            parsed=acc.parsed,
            unrecognized=acc.unrecognized,
            failed=acc.failed,
            round_trip_mismatches=acc.round_trip_mismatches,
        )
