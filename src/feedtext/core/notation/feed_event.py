"""Feed event dispatcher: pick the candidate grammars and apply the first match."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from feedtext.core.breakpoints import DEFAULT_BREAKPOINTS, BreakpointTable
from feedtext.core.models import EventClassification, FeedEvent, NotRecognized
from feedtext.core.notation.grammars import GRAMMARS, GrammarRule
from feedtext.core.notation.models import AttemptOutcome, GrammarAttempt
from feedtext.core.notation.tokens import NoMatch, TextCursor
from feedtext.core.parsed import FeedEventParseError, ParsedFeedEventText, ParseError
from feedtext.core.types import Day, Season

_LOGGER = logging.getLogger(__name__)


def attempt_grammar(rule: GrammarRule, text: str) -> GrammarAttempt:
    """Try *rule* against the whole of *text*."""
    cur = TextCursor(text)
    try:
        parsed = rule.parse(cur)
    except NoMatch:
        return GrammarAttempt.no_match(rule.name)
    if cur.at_end:
        return GrammarAttempt(rule.name, AttemptOutcome.FULL, parsed)
    return GrammarAttempt(rule.name, AttemptOutcome.PARTIAL, parsed, cur.rest)


def candidate_grammars(
    event_type: EventClassification,
    season: Season,
    day: Day | None,
    breakpoints: BreakpointTable = DEFAULT_BREAKPOINTS,
) -> Iterator[GrammarRule]:
    """Candidates for *event_type* in priority order, filtered by era."""
    if isinstance(event_type, NotRecognized):
        return
    for rule in GRAMMARS[event_type]:
        if rule.applies(breakpoints, season, day):
            yield rule


def parse_feed_event_text(
    text: str,
    event_type: EventClassification,
    *,
    season: Season,
    day: Day | None = None,
    breakpoints: BreakpointTable = DEFAULT_BREAKPOINTS,
) -> ParsedFeedEventText:
    """Interpret one feed event sentence.

    Never raises for bad text: unknown classifications and text that no
    grammar fully matches come back as :class:`ParseError` holding the
    original text.

    Invalid metadata is still rejected once an era-guarded grammar is
    reached: a negative season or day raises :class:`ValueError`, and a
    custom *breakpoints* table lacking the guarded threshold raises
    :class:`~feedtext.core.breakpoints.UnknownBreakpointError`.
    """
    if isinstance(event_type, NotRecognized):
        _LOGGER.debug("Feed event type %s not recognized", event_type.token)
        return ParseError(FeedEventParseError.not_recognized(event_type.token), text)

    for rule in candidate_grammars(event_type, season, day, breakpoints):
        attempt = attempt_grammar(rule, text)
        if attempt.outcome == AttemptOutcome.NO_MATCH:
            continue
        if attempt.outcome == AttemptOutcome.FULL:
            assert attempt.parsed is not None
            return attempt.parsed
        _LOGGER.debug(
            "%s feed event matched %s with leftover %r from %r",
            event_type,
            rule.name,
            attempt.leftover,
            text,
        )
        break
    else:
        _LOGGER.debug("%s feed event matched no grammar: %r", event_type, text)

    return ParseError(FeedEventParseError.failed_parsing(event_type, text), text)


def parse_feed_event(
    event: FeedEvent, breakpoints: BreakpointTable = DEFAULT_BREAKPOINTS
) -> ParsedFeedEventText:
    """Parse ``event.text`` using the event's classification and time."""
    return parse_feed_event_text(
        event.text,
        event.event_type,
        season=event.season,
        day=event.day,
        breakpoints=breakpoints,
    )
