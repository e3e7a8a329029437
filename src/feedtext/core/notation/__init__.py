"""Notation package: feed event text parsing and rendering."""

from feedtext.core.notation.feed_event import (
    attempt_grammar,
    candidate_grammars,
    parse_feed_event,
    parse_feed_event_text,
)
from feedtext.core.notation.grammars import AUGMENT_GRAMMARS, GAME_GRAMMARS, GrammarRule
from feedtext.core.notation.models import AttemptOutcome, GrammarAttempt
from feedtext.core.notation.unparse import (
    attribute_equal_phrase,
    unparse_delivery,
    unparse_feed_event_text,
)

__all__ = [
    "AUGMENT_GRAMMARS",
    "GAME_GRAMMARS",
    "AttemptOutcome",
    "GrammarAttempt",
    "GrammarRule",
    "attempt_grammar",
    "attribute_equal_phrase",
    "candidate_grammars",
    "parse_feed_event",
    "parse_feed_event_text",
    "unparse_delivery",
    "unparse_feed_event_text",
]
