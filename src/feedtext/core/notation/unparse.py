"""Render parsed feed events back to canonical text."""

from __future__ import annotations

from feedtext.core.breakpoints import DEFAULT_BREAKPOINTS, Breakpoint, BreakpointTable
from feedtext.core.enums import FeedEventSource
from feedtext.core.models import AttributeEqual, FeedDelivery, FeedEvent
from feedtext.core.notation.grammars import (
    COMPENSATORY_ENCHANTMENT,
    DELIVERY_LABEL,
    EQUAL_TO_BASE,
    EQUAL_TO_CURRENT_BASE,
    ITEM_ENCHANTMENT,
    SET_TO,
    SHIPMENT_LABEL,
    SPECIAL_DELIVERY_LABEL,
)
from feedtext.core.parsed import (
    ROBO,
    AttributeChanges,
    AttributeEquals,
    Delivery,
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


def unparse_delivery(delivery: FeedDelivery, label: str) -> str:
    """``<player> received a <item> <label>.`` plus the optional discard."""
    text = f"{delivery.player} received a {delivery.item} {label}."
    if delivery.discarded is not None:
        text += f" They discarded their {delivery.discarded}."
    return text


def attribute_equal_phrase(
    event: FeedEvent, breakpoints: BreakpointTable = DEFAULT_BREAKPOINTS
) -> str:
    """Wording for attribute-equal sentences at the event's time and narrator."""
    if breakpoints.before(
        Breakpoint.SEASON1_ATTRIBUTE_EQUAL_CHANGE, event.season, event.day
    ):
        return EQUAL_TO_BASE
    if event.source == FeedEventSource.PLAYER:
        return SET_TO
    return EQUAL_TO_CURRENT_BASE


def _attribute_equal(equal: AttributeEqual, phrase: str) -> str:
    return (
        f"{equal.player_name}'s {equal.changing_attribute} {phrase} "
        f"{equal.value_attribute}."
    )


def _s1_enchantment(
    parsed: S1Enchantment, event: FeedEvent, breakpoints: BreakpointTable
) -> str:
    if breakpoints.before(
        Breakpoint.SEASON1_ENCHANTMENT_CHANGE, event.season, event.day
    ):
        return (
            f"{parsed.player_name}'s {parsed.item} was enchanted with "
            f"+{parsed.amount} to {parsed.attribute}."
        )
    return (
        f"{ITEM_ENCHANTMENT}{parsed.player_name}'s {parsed.item} gained a "
        f"+{parsed.amount} {parsed.attribute} bonus."
    )


def _s2_enchantment(parsed: S2Enchantment) -> str:
    opening = COMPENSATORY_ENCHANTMENT if parsed.compensatory else ITEM_ENCHANTMENT
    subject = f"{opening}{parsed.player_name}'s {parsed.item}"
    if parsed.enchant_two is None:
        return f"{subject} gained a +{parsed.amount} {parsed.attribute} bonus."
    amount_two, attribute_two = parsed.enchant_two
    return (
        f"{subject} was enchanted with +{parsed.amount} {parsed.attribute} "
        f"and +{amount_two} {attribute_two}."
    )


def unparse_feed_event_text(
    parsed: ParsedFeedEventText,
    event: FeedEvent,
    *,
    delivery_label: str | None = None,
    breakpoints: BreakpointTable = DEFAULT_BREAKPOINTS,
) -> str:
    """Render *parsed* as the sentence the game would have emitted for *event*.

    ``delivery_label`` overrides the label used by delivery variants.
    A :class:`ParseError` renders as its stored original text.
    """
    if isinstance(parsed, ParseError):
        return parsed.text
    if isinstance(parsed, GameResult):
        return (
            f"{parsed.away_team} vs. {parsed.home_team} - "
            f"FINAL {parsed.away_score}-{parsed.home_score}"
        )
    if isinstance(parsed, Delivery):
        return unparse_delivery(parsed.delivery, delivery_label or DELIVERY_LABEL)
    if isinstance(parsed, Shipment):
        return unparse_delivery(parsed.delivery, delivery_label or SHIPMENT_LABEL)
    if isinstance(parsed, SpecialDelivery):
        return unparse_delivery(
            parsed.delivery, delivery_label or SPECIAL_DELIVERY_LABEL
        )
    if isinstance(parsed, AttributeChanges):
        return " ".join(
            f"{change.player_name} gained +{change.amount} {change.attribute}."
            for change in parsed.changes
        )
    if isinstance(parsed, AttributeEquals):
        phrase = attribute_equal_phrase(event, breakpoints)
        return " ".join(_attribute_equal(equal, phrase) for equal in parsed.equals)
    if isinstance(parsed, S1Enchantment):
        return _s1_enchantment(parsed, event, breakpoints)
    if isinstance(parsed, S2Enchantment):
        return _s2_enchantment(parsed)
    if isinstance(parsed, ROBO):
        return f"{parsed.player_name} gained the ROBO Modification."
    if isinstance(parsed, TakeTheMound):
        return (
            f"{parsed.to_mound_player} was moved to the mound. "
            f"{parsed.to_lineup_player} was sent to the lineup."
        )
    if isinstance(parsed, TakeThePlate):
        return (
            f"{parsed.to_plate_player} was sent to the plate. "
            f"{parsed.from_lineup_player} was pulled from the lineup."
        )
    if isinstance(parsed, SwapPlaces):
        return f"{parsed.player_one} swapped places with {parsed.player_two}."
    if isinstance(parsed, HitByFallingStar):
        return f"{parsed.player} was hit by a Falling Star!"
    raise TypeError(f"Cannot unparse {type(parsed).__name__}")
