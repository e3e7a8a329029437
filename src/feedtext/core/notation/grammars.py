"""One grammar per feed event sentence shape, and the ordered candidate lists.

Each grammar reads from a :class:`TextCursor` positioned at the start of
the text and returns a parsed variant, raising :class:`NoMatch` when the
text does not have its shape. Grammars never check for end of input;
the dispatcher decides between a full and a partial match.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from feedtext.core.breakpoints import Breakpoint, BreakpointTable
from feedtext.core.enums import Attribute, FeedEventType
from feedtext.core.models import AttributeChange, AttributeEqual, FeedDelivery, Item
from feedtext.core.notation.tokens import NoMatch, TextCursor
from feedtext.core.parsed import (
    ROBO,
    AttributeChanges,
    AttributeEquals,
    Delivery,
    GameResult,
    HitByFallingStar,
    ParsedFeedEventText,
    S1Enchantment,
    S2Enchantment,
    Shipment,
    SpecialDelivery,
    SwapPlaces,
    TakeThePlate,
    TakeTheMound,
)
from feedtext.core.types import MAX_I16, MAX_U8, MIN_I16, Day, Season

Grammar = Callable[[TextCursor], ParsedFeedEventText]

ITEM_ENCHANTMENT = "The Item Enchantment was a success! "
COMPENSATORY_ENCHANTMENT = "The Compensatory Enchantment was a success! "

# Attribute-equal wordings, oldest first.
EQUAL_TO_BASE = "became equal to their base"
EQUAL_TO_CURRENT_BASE = "became equal to their current base"
SET_TO = "was set to their"

DELIVERY_LABEL = "Delivery"
SHIPMENT_LABEL = "Shipment"
SPECIAL_DELIVERY_LABEL = "Special Delivery"


@dataclass(frozen=True, slots=True)
class EraGuard:
    """Restricts a wording grammar to one side of a breakpoint."""

    breakpoint: Breakpoint
    after: bool

    def allows(self, table: BreakpointTable, season: Season, day: Day | None) -> bool:
        return table.after(self.breakpoint, season, day) == self.after


@dataclass(frozen=True, slots=True)
class GrammarRule:
    """A named candidate grammar with an optional era guard."""

    name: str
    parse: Grammar
    guard: EraGuard | None = None

    def applies(self, table: BreakpointTable, season: Season, day: Day | None) -> bool:
        return self.guard is None or self.guard.allows(table, season, day)


# ── Game bucket ──────────────────────────────────────────────────────────────


def game_result(cur: TextCursor) -> GameResult:
    away_team = cur.emoji_team(" vs. ")
    home_team = cur.emoji_team(" - ")
    cur.literal("FINAL ")
    away_score = cur.unsigned(MAX_U8)
    cur.literal("-")
    home_score = cur.unsigned(MAX_U8)
    return GameResult(
        away_team=away_team,
        home_team=home_team,
        away_score=away_score,
        home_score=home_score,
    )


def _discard_clause(cur: TextCursor) -> Item:
    cur.literal(" They discarded their ")
    item = cur.item()
    cur.literal(".")
    return item


def feed_delivery(cur: TextCursor, label: str) -> FeedDelivery:
    """``<player> received a <item> <label>.[ They discarded their <item>.]``"""
    player = cur.until(" received a ")
    item = cur.item()
    cur.literal(f" {label}.")
    discarded = cur.attempt(_discard_clause)
    return FeedDelivery(player=player, item=item, discarded=discarded)


def delivery(cur: TextCursor) -> Delivery:
    return Delivery(feed_delivery(cur, DELIVERY_LABEL))


def shipment(cur: TextCursor) -> Shipment:
    return Shipment(feed_delivery(cur, SHIPMENT_LABEL))


def special_delivery(cur: TextCursor) -> SpecialDelivery:
    return SpecialDelivery(feed_delivery(cur, SPECIAL_DELIVERY_LABEL))


def hit_by_falling_star(cur: TextCursor) -> HitByFallingStar:
    return HitByFallingStar(player=cur.until(" was hit by a Falling Star!"))


# ── Augment bucket ───────────────────────────────────────────────────────────


def _attribute_change(cur: TextCursor) -> AttributeChange:
    cur.optional_literal(" ")
    player_name = cur.until(" gained +")
    amount = cur.signed(MIN_I16, MAX_I16)
    cur.literal(" ")
    attribute = cur.vocab(Attribute)
    cur.literal(".")
    return AttributeChange(player_name=player_name, amount=amount, attribute=attribute)


def attribute_gain(cur: TextCursor) -> AttributeChanges:
    return AttributeChanges(changes=tuple(cur.many1(_attribute_change)))


def _attribute_equal_grammar(phrase: str) -> Grammar:
    """Repeated ``<player>'s <attr> <phrase> <attr>.`` with one wording."""

    def attribute_equal(cur: TextCursor) -> AttributeEqual:
        cur.optional_literal(" ")
        player_name = cur.until("'s ")
        changing_attribute = cur.vocab(Attribute)
        cur.literal(f" {phrase} ")
        value_attribute = cur.vocab(Attribute)
        cur.literal(".")
        return AttributeEqual(
            player_name=player_name,
            changing_attribute=changing_attribute,
            value_attribute=value_attribute,
        )

    def attribute_equals(cur: TextCursor) -> AttributeEquals:
        return AttributeEquals(equals=tuple(cur.many1(attribute_equal)))

    return attribute_equals


def enchantment_s1a(cur: TextCursor) -> S1Enchantment:
    """``<player>'s <item> was enchanted with +<n> to <attr>.``"""
    player_name = cur.until("'s ")
    item = cur.emojiless_item()
    cur.literal(" was enchanted with +")
    amount = cur.unsigned(MAX_U8)
    cur.literal(" to ")
    attribute = cur.vocab(Attribute)
    cur.literal(".")
    return S1Enchantment(
        player_name=player_name, item=item, amount=amount, attribute=attribute
    )


def enchantment_s1b(cur: TextCursor) -> S1Enchantment:
    cur.literal(ITEM_ENCHANTMENT)
    player_name = cur.until("'s ")
    item = cur.emojiless_item()
    cur.literal(" gained a +")
    amount = cur.unsigned(MAX_U8)
    cur.literal(" ")
    attribute = cur.vocab(Attribute)
    cur.literal(" bonus.")
    return S1Enchantment(
        player_name=player_name, item=item, amount=amount, attribute=attribute
    )


def _amount_and_attribute(cur: TextCursor) -> tuple[int, Attribute]:
    amount = cur.unsigned(MAX_U8)
    cur.literal(" ")
    return amount, cur.vocab(Attribute)


def _two_enchants(
    cur: TextCursor,
) -> tuple[tuple[int, Attribute], tuple[int, Attribute] | None]:
    cur.literal(" was enchanted with ")
    cur.optional_literal("a ")
    cur.literal("+")
    first = _amount_and_attribute(cur)
    cur.literal(" and +")
    second = _amount_and_attribute(cur)
    cur.literal(".")
    return first, second


def _single_bonus(
    cur: TextCursor,
) -> tuple[tuple[int, Attribute], tuple[int, Attribute] | None]:
    cur.literal(" gained a +")
    first = _amount_and_attribute(cur)
    cur.literal(" bonus.")
    return first, None


def enchantment_s2(cur: TextCursor) -> S2Enchantment:
    cur.literal(ITEM_ENCHANTMENT)
    player_name = cur.until("'s ")
    item = cur.emojiless_item()
    (amount, attribute), enchant_two = _two_enchants(cur)
    return S2Enchantment(
        player_name=player_name,
        item=item,
        amount=amount,
        attribute=attribute,
        enchant_two=enchant_two,
        compensatory=False,
    )


def enchantment_compensatory(cur: TextCursor) -> S2Enchantment:
    cur.literal(COMPENSATORY_ENCHANTMENT)
    player_name = cur.until("'s ")
    item = cur.emojiless_item()
    enchants = cur.attempt(_two_enchants) or cur.attempt(_single_bonus)
    if enchants is None:
        raise NoMatch(f"Expected compensatory enchantment bonus at {cur.pos}")
    (amount, attribute), enchant_two = enchants
    return S2Enchantment(
        player_name=player_name,
        item=item,
        amount=amount,
        attribute=attribute,
        enchant_two=enchant_two,
        compensatory=True,
    )


def robo(cur: TextCursor) -> ROBO:
    return ROBO(player_name=cur.until(" gained the ROBO Modification."))


def take_the_mound(cur: TextCursor) -> TakeTheMound:
    to_mound_player = cur.until(" was moved to the mound. ")
    to_lineup_player = cur.until(" was sent to the lineup.")
    return TakeTheMound(
        to_mound_player=to_mound_player, to_lineup_player=to_lineup_player
    )


def take_the_plate(cur: TextCursor) -> TakeThePlate:
    to_plate_player = cur.until(" was sent to the plate. ")
    from_lineup_player = cur.until(" was pulled from the lineup.")
    return TakeThePlate(
        to_plate_player=to_plate_player, from_lineup_player=from_lineup_player
    )


def swap_places(cur: TextCursor) -> SwapPlaces:
    player_one = cur.until(" swapped places with ")
    player_two = cur.until_final(".")
    if ". " in player_two:
        raise NoMatch(f"Second player runs into another sentence: {player_two!r}")
    return SwapPlaces(player_one=player_one, player_two=player_two)


# ── Ordered candidates ───────────────────────────────────────────────────────

_ENCHANTMENT_ERA = Breakpoint.SEASON1_ENCHANTMENT_CHANGE
_ATTRIBUTE_EQUAL_ERA = Breakpoint.SEASON1_ATTRIBUTE_EQUAL_CHANGE

GAME_GRAMMARS: tuple[GrammarRule, ...] = (
    GrammarRule("game_result", game_result),
    GrammarRule("delivery", delivery),
    GrammarRule("shipment", shipment),
    GrammarRule("special_delivery", special_delivery),
    GrammarRule("hit_by_falling_star", hit_by_falling_star),
)

AUGMENT_GRAMMARS: tuple[GrammarRule, ...] = (
    GrammarRule("attribute_gain", attribute_gain),
    GrammarRule(
        "enchantment_s1a", enchantment_s1a, EraGuard(_ENCHANTMENT_ERA, after=False)
    ),
    GrammarRule(
        "enchantment_s1b", enchantment_s1b, EraGuard(_ENCHANTMENT_ERA, after=True)
    ),
    GrammarRule("enchantment_s2", enchantment_s2),
    GrammarRule("enchantment_compensatory", enchantment_compensatory),
    GrammarRule("robo", robo),
    GrammarRule("take_the_mound", take_the_mound),
    GrammarRule("take_the_plate", take_the_plate),
    GrammarRule(
        "attribute_equal_base",
        _attribute_equal_grammar(EQUAL_TO_BASE),
        EraGuard(_ATTRIBUTE_EQUAL_ERA, after=False),
    ),
    GrammarRule(
        "attribute_equal_current_base",
        _attribute_equal_grammar(EQUAL_TO_CURRENT_BASE),
        EraGuard(_ATTRIBUTE_EQUAL_ERA, after=True),
    ),
    GrammarRule(
        "attribute_equal_set_to",
        _attribute_equal_grammar(SET_TO),
        EraGuard(_ATTRIBUTE_EQUAL_ERA, after=True),
    ),
    GrammarRule("swap_places", swap_places),
)

GRAMMARS: dict[FeedEventType, tuple[GrammarRule, ...]] = {
    FeedEventType.GAME: GAME_GRAMMARS,
    FeedEventType.AUGMENT: AUGMENT_GRAMMARS,
}
