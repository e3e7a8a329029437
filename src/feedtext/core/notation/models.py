"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from feedtext.core.parsed import ParsedFeedEventText


class AttemptOutcome(IntEnum):
    """Result of trying one grammar against the full event text."""

    NO_MATCH = 0
    PARTIAL = 1
    FULL = 2


@dataclass(frozen=True, slots=True)
class GrammarAttempt:
    """Outcome of one grammar attempt.

    ``parsed`` is set for ``PARTIAL`` and ``FULL``; ``leftover`` holds the
    unconsumed tail of a ``PARTIAL`` match.
    """

    grammar: str
    outcome: AttemptOutcome
    parsed: ParsedFeedEventText | None = None
    leftover: str = ""

    @classmethod
    def no_match(cls, grammar: str) -> GrammarAttempt:
        return cls(grammar, AttemptOutcome.NO_MATCH)
