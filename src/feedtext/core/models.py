"""Immutable value objects shared by the parser and the unparser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from feedtext.core.enums import (
    Attribute,
    FeedEventSource,
    FeedEventType,
    ItemPrefix,
    ItemSuffix,
    ItemType,
)
from feedtext.core.types import Day, Season


@dataclass(frozen=True, slots=True)
class EmojiTeam:
    """A team as written in game results: glyph followed by name."""

    emoji: str
    name: str

    def __str__(self) -> str:
        return f"{self.emoji} {self.name}"


@dataclass(frozen=True, slots=True)
class EmojilessItem:
    """Item descriptor: optional prefix, item type, optional suffix."""

    item: ItemType
    prefix: ItemPrefix | None = None
    suffix: ItemSuffix | None = None

    def __str__(self) -> str:
        parts: list[str] = []
        if self.prefix is not None:
            parts.append(self.prefix.value)
        parts.append(self.item.value)
        if self.suffix is not None:
            parts.append(self.suffix.value)
        return " ".join(parts)


@dataclass(frozen=True, slots=True)
class Item:
    """An item with its display glyph, as written in deliveries."""

    emoji: str
    descriptor: EmojilessItem

    def __str__(self) -> str:
        return f"{self.emoji} {self.descriptor}"


@dataclass(frozen=True, slots=True)
class FeedDelivery:
    """A received item and, optionally, the item it replaced."""

    player: str
    item: Item
    discarded: Item | None = None


@dataclass(frozen=True, slots=True)
class AttributeChange:
    player_name: str
    amount: int
    attribute: Attribute


@dataclass(frozen=True, slots=True)
class AttributeEqual:
    player_name: str
    changing_attribute: Attribute
    value_attribute: Attribute


@dataclass(frozen=True, slots=True)
class NotRecognized:
    """Classifier token that maps to no known :class:`FeedEventType`."""

    token: str

    def __str__(self) -> str:
        return self.token


EventClassification: TypeAlias = FeedEventType | NotRecognized


def classify_event_type(token: str) -> EventClassification:
    """Wrap a raw classifier token, e.g. ``"Game"`` → ``FeedEventType.GAME``."""
    try:
        return FeedEventType(token)
    except ValueError:
        return NotRecognized(token)


@dataclass(frozen=True, slots=True)
class FeedEvent:
    """One feed event as supplied by the ingestion pipeline.

    ``day`` is ``None`` when the event's day is unknown. ``source`` only
    affects the wording chosen when rendering attribute-equal events.
    """

    text: str
    event_type: EventClassification
    season: Season
    day: Day | None = None
    source: FeedEventSource = FeedEventSource.UMPIRE
