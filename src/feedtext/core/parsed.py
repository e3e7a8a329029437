"""Structured results of interpreting feed event text.

:class:`ParsedFeedEventText` is a closed set of variants; every parse
returns exactly one of them. Unparseable text becomes a
:class:`ParseError` that keeps the original text verbatim, so rendering
it reproduces the input.

Captured fields are ``str`` values; Python strings are immutable, so a
result stays valid independent of the buffer it was parsed from.
"""

from __future__ import annotations

from dataclasses import dataclass

from feedtext.core.enums import Attribute, FeedEventType, ParseFailure
from feedtext.core.models import (
    AttributeChange,
    AttributeEqual,
    EmojilessItem,
    EmojiTeam,
    FeedDelivery,
)


@dataclass(frozen=True, slots=True)
class FeedEventParseError:
    """Why a feed event could not be interpreted (a value, never raised)."""

    reason: ParseFailure
    event_type: FeedEventType | None = None
    token: str | None = None
    text: str = ""

    @classmethod
    def not_recognized(cls, token: str) -> FeedEventParseError:
        return cls(ParseFailure.EVENT_TYPE_NOT_RECOGNIZED, token=token)

    @classmethod
    def failed_parsing(
        cls, event_type: FeedEventType, text: str
    ) -> FeedEventParseError:
        return cls(ParseFailure.FAILED_PARSING_TEXT, event_type=event_type, text=text)

    @property
    def message(self) -> str:
        if self.reason == ParseFailure.EVENT_TYPE_NOT_RECOGNIZED:
            return f"feed event type {self.token} not recognized"
        return f'failed parsing {self.event_type} feed event "{self.text}"'

    def __str__(self) -> str:
        return self.message


class ParsedFeedEventText:
    """Base of all parse result variants."""

    __slots__ = ()

    @property
    def is_error(self) -> bool:
        return isinstance(self, ParseError)


@dataclass(frozen=True, slots=True)
class ParseError(ParsedFeedEventText):
    error: FeedEventParseError
    text: str


@dataclass(frozen=True, slots=True)
class GameResult(ParsedFeedEventText):
    """Final score line; the first team in the sentence is the away team."""

    away_team: EmojiTeam
    home_team: EmojiTeam
    away_score: int
    home_score: int


@dataclass(frozen=True, slots=True)
class Delivery(ParsedFeedEventText):
    delivery: FeedDelivery


@dataclass(frozen=True, slots=True)
class Shipment(ParsedFeedEventText):
    delivery: FeedDelivery


@dataclass(frozen=True, slots=True)
class SpecialDelivery(ParsedFeedEventText):
    delivery: FeedDelivery


@dataclass(frozen=True, slots=True)
class AttributeChanges(ParsedFeedEventText):
    changes: tuple[AttributeChange, ...]


@dataclass(frozen=True, slots=True)
class AttributeEquals(ParsedFeedEventText):
    equals: tuple[AttributeEqual, ...]


@dataclass(frozen=True, slots=True)
class S1Enchantment(ParsedFeedEventText):
    player_name: str
    item: EmojilessItem
    amount: int
    attribute: Attribute


@dataclass(frozen=True, slots=True)
class S2Enchantment(ParsedFeedEventText):
    player_name: str
    item: EmojilessItem
    amount: int
    attribute: Attribute
    enchant_two: tuple[int, Attribute] | None
    compensatory: bool


@dataclass(frozen=True, slots=True)
class ROBO(ParsedFeedEventText):
    player_name: str


@dataclass(frozen=True, slots=True)
class TakeTheMound(ParsedFeedEventText):
    to_mound_player: str
    to_lineup_player: str


@dataclass(frozen=True, slots=True)
class TakeThePlate(ParsedFeedEventText):
    to_plate_player: str
    from_lineup_player: str


@dataclass(frozen=True, slots=True)
class SwapPlaces(ParsedFeedEventText):
    player_one: str
    player_two: str


@dataclass(frozen=True, slots=True)
class HitByFallingStar(ParsedFeedEventText):
    player: str
