"""Core domain layer — feed event text logic with zero external dependencies.

Quick start::

    from feedtext.core import (
        FeedEvent,
        FeedEventType,
        parse_feed_event,
        unparse_feed_event_text,
    )

    event = FeedEvent("Nancy Bright gained +50 Awareness.", FeedEventType.AUGMENT, 1)
    parsed = parse_feed_event(event)
    assert unparse_feed_event_text(parsed, event) == event.text
"""

from feedtext.core.breakpoints import (
    DEFAULT_BREAKPOINTS,
    Breakpoint,
    BreakpointTable,
    EraThreshold,
    UnknownBreakpointError,
)
from feedtext.core.enums import (
    Attribute,
    FeedEventSource,
    FeedEventType,
    ItemPrefix,
    ItemSuffix,
    ItemType,
    ParseFailure,
)
from feedtext.core.models import (
    AttributeChange,
    AttributeEqual,
    EmojilessItem,
    EmojiTeam,
    EventClassification,
    FeedDelivery,
    FeedEvent,
    Item,
    NotRecognized,
    classify_event_type,
)
from feedtext.core.notation import (
    parse_feed_event,
    parse_feed_event_text,
    unparse_feed_event_text,
)
from feedtext.core.parsed import (
    ROBO,
    AttributeChanges,
    AttributeEquals,
    Delivery,
    FeedEventParseError,
    GameResult,
    HitByFallingStar,
    ParsedFeedEventText,
    ParseError,
    S1Enchantment,
    S2Enchantment,
    Shipment,
    SpecialDelivery,
    SwapPlaces,
    TakeThePlate,
    TakeTheMound,
)

__all__ = [
    # Enums
    "Attribute",
    "FeedEventSource",
    "FeedEventType",
    "ItemPrefix",
    "ItemSuffix",
    "ItemType",
    "ParseFailure",
    # Eras
    "Breakpoint",
    "BreakpointTable",
    "DEFAULT_BREAKPOINTS",
    "EraThreshold",
    "UnknownBreakpointError",
    # Value objects
    "AttributeChange",
    "AttributeEqual",
    "EmojiTeam",
    "EmojilessItem",
    "EventClassification",
    "FeedDelivery",
    "FeedEvent",
    "Item",
    "NotRecognized",
    "classify_event_type",
    # Parsed variants
    "ParsedFeedEventText",
    "ParseError",
    "FeedEventParseError",
    "GameResult",
    "Delivery",
    "Shipment",
    "SpecialDelivery",
    "AttributeChanges",
    "AttributeEquals",
    "S1Enchantment",
    "S2Enchantment",
    "ROBO",
    "TakeTheMound",
    "TakeThePlate",
    "SwapPlaces",
    "HitByFallingStar",
    # Notation
    "parse_feed_event",
    "parse_feed_event_text",
    "unparse_feed_event_text",
]
