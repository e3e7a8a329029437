"""Tests for leaf tokenizers."""

import pytest

from feedtext.core.enums import Attribute, ItemPrefix, ItemSuffix, ItemType
from feedtext.core.models import EmojilessItem, EmojiTeam, Item
from feedtext.core.notation.tokens import NoMatch, TextCursor


class TestLiteral:
    def test_consumes_on_match(self) -> None:
        cur = TextCursor("FINAL 2-4")
        cur.literal("FINAL ")
        assert cur.rest == "2-4"

    def test_no_match_leaves_position(self) -> None:
        cur = TextCursor("FINAL 2-4")
        with pytest.raises(NoMatch):
            cur.literal("final")
        assert cur.pos == 0

    def test_optional_literal(self) -> None:
        cur = TextCursor(" Bob")
        assert cur.optional_literal(" ")
        assert not cur.optional_literal(" ")
        assert cur.rest == "Bob"


class TestUntil:
    def test_captures_before_first_marker(self) -> None:
        cur = TextCursor("Nancy Bright gained +50 Awareness.")
        assert cur.until(" gained +") == "Nancy Bright"
        assert cur.rest == "50 Awareness."

    def test_missing_marker(self) -> None:
        cur = TextCursor("Nancy Bright")
        with pytest.raises(NoMatch):
            cur.until(" gained +")

    def test_empty_capture_is_no_match(self) -> None:
        cur = TextCursor(" gained +5 Luck.")
        with pytest.raises(NoMatch):
            cur.until(" gained +")

    def test_until_final(self) -> None:
        cur = TextCursor("Ann swapped places with Bo B. Jones.")
        cur.until(" swapped places with ")
        assert cur.until_final(".") == "Bo B. Jones"
        assert cur.at_end

    def test_until_final_requires_terminator(self) -> None:
        cur = TextCursor("Ann swapped places with Bo")
        cur.until(" swapped places with ")
        with pytest.raises(NoMatch):
            cur.until_final(".")


class TestIntegers:
    def test_unsigned(self) -> None:
        cur = TextCursor("255-0")
        assert cur.unsigned(255) == 255
        assert cur.rest == "-0"

    def test_unsigned_overflow(self) -> None:
        with pytest.raises(NoMatch):
            TextCursor("256").unsigned(255)

    def test_unsigned_rejects_non_digits(self) -> None:
        with pytest.raises(NoMatch):
            TextCursor("two").unsigned(255)

    @pytest.mark.parametrize("text", ["٢", "٤٢", "５"])
    def test_unsigned_rejects_non_ascii_digits(self, text: str) -> None:
        cur = TextCursor(text)
        with pytest.raises(NoMatch):
            cur.unsigned(255)
        assert cur.pos == 0

    def test_signed_rejects_non_ascii_digits(self) -> None:
        with pytest.raises(NoMatch):
            TextCursor("+٥٠").signed(-100, 100)

    def test_signed_accepts_sign(self) -> None:
        assert TextCursor("-7 Luck").signed(-100, 100) == -7
        assert TextCursor("+7 Luck").signed(-100, 100) == 7

    def test_signed_range(self) -> None:
        with pytest.raises(NoMatch):
            TextCursor("40000").signed(-32768, 32767)


class TestVocab:
    def test_known_word(self) -> None:
        cur = TextCursor("Awareness.")
        assert cur.vocab(Attribute) == Attribute.AWARENESS
        assert cur.rest == "."

    def test_unknown_word(self) -> None:
        cur = TextCursor("Sneakiness.")
        with pytest.raises(NoMatch, match="not a recognized Attribute"):
            cur.vocab(Attribute)
        assert cur.pos == 0

    def test_case_sensitive(self) -> None:
        with pytest.raises(NoMatch):
            TextCursor("awareness").vocab(Attribute)


class TestEmoji:
    def test_emoji_token(self) -> None:
        cur = TextCursor("🦖 Peoria")
        assert cur.emoji() == "🦖"
        assert cur.rest == " Peoria"

    def test_word_is_not_emoji(self) -> None:
        with pytest.raises(NoMatch):
            TextCursor("Peoria Monsters").emoji()

    def test_emoji_team(self) -> None:
        cur = TextCursor("📮 Akron Anteaters Pace Stick - FINAL")
        team = cur.emoji_team(" - ")
        assert team == EmojiTeam("📮", "Akron Anteaters Pace Stick")
        assert cur.rest == "FINAL"


class TestItems:
    def test_bare_item(self) -> None:
        assert TextCursor("Cap").emojiless_item() == EmojilessItem(ItemType.CAP)

    def test_full_item(self) -> None:
        cur = TextCursor("Fiery Gloves of the Cheetah was")
        item = cur.emojiless_item()
        assert item == EmojilessItem(
            ItemType.GLOVES, ItemPrefix.FIERY, ItemSuffix.OF_THE_CHEETAH
        )
        assert cur.rest == " was"

    def test_suffix_absent_rewinds_space(self) -> None:
        cur = TextCursor("Sharp Bat gained")
        assert cur.emojiless_item() == EmojilessItem(ItemType.BAT, ItemPrefix.SHARP)
        assert cur.rest == " gained"

    def test_unknown_type(self) -> None:
        with pytest.raises(NoMatch):
            TextCursor("Sharp Sword").emojiless_item()

    def test_item_with_emoji(self) -> None:
        cur = TextCursor("🧢 Lucky Cap Delivery.")
        assert cur.item() == Item("🧢", EmojilessItem(ItemType.CAP, ItemPrefix.LUCKY))
        assert cur.rest == " Delivery."


class TestRepetition:
    def test_many1_collects_in_order(self) -> None:
        cur = TextCursor("a;b;c;")

        def letter(c: TextCursor) -> str:
            return c.until(";")

        assert cur.many1(letter) == ["a", "b", "c"]
        assert cur.at_end

    def test_many1_requires_one(self) -> None:
        cur = TextCursor("abc")

        def never(c: TextCursor) -> str:
            return c.until(";")

        with pytest.raises(NoMatch):
            cur.many1(never)

    def test_attempt_rewinds(self) -> None:
        cur = TextCursor("Lucky Sword")

        def prefixed_type(c: TextCursor) -> ItemType:
            c.vocab(ItemPrefix)
            c.literal(" ")
            return c.vocab(ItemType)

        assert cur.attempt(prefixed_type) is None
        assert cur.pos == 0
