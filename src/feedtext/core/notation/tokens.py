"""Leaf tokenizers over a single feed event string.

A :class:`TextCursor` walks the text left to right. Every tokenizer
either consumes input and returns a value, or raises :class:`NoMatch`
leaving the position where it was. Grammars compose these calls; the
dispatcher turns ``NoMatch`` into a "no match" attempt outcome.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from enum import StrEnum
from typing import TypeVar

from feedtext.core.enums import ItemPrefix, ItemSuffix, ItemType
from feedtext.core.models import EmojilessItem, EmojiTeam, Item

T = TypeVar("T")
E = TypeVar("E", bound=StrEnum)

_UNSIGNED_RE = re.compile(r"[0-9]+")
_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_WORD_RE = re.compile(r"[A-Za-z]+")

# Longest first so "of the X" is never shadowed by a shorter phrase.
_SUFFIXES = sorted(ItemSuffix, key=lambda s: len(s.value), reverse=True)


class NoMatch(ValueError):
    """Raised by a tokenizer when the input does not fit at the cursor."""


class TextCursor:
    """Read position inside one feed event string.

    Usage:
        cur = TextCursor("Nancy Bright gained +50 Awareness.")
        name = cur.until(" gained +")
    """

    __slots__ = ("text", "pos")

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    def __repr__(self) -> str:
        return f"TextCursor({self.text!r}, pos={self.pos})"

    @property
    def rest(self) -> str:
        return self.text[self.pos :]

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    # ── Backtracking ─────────────────────────────────────────────────────

    def attempt(self, parse: Callable[[TextCursor], T]) -> T | None:
        """Run *parse*; on :class:`NoMatch` rewind and return ``None``."""
        start = self.pos
        try:
            return parse(self)
        except NoMatch:
            self.pos = start
            return None

    def many1(self, parse: Callable[[TextCursor], T]) -> list[T]:
        """Apply *parse* repeatedly, collecting every success in order."""
        results: list[T] = []
        while not self.at_end:
            value = self.attempt(parse)
            if value is None:
                break
            results.append(value)
        if not results:
            raise NoMatch(f"Expected at least one repetition at {self.pos}")
        return results

    # ── Literals ─────────────────────────────────────────────────────────

    def literal(self, expected: str) -> None:
        if not self.text.startswith(expected, self.pos):
            raise NoMatch(f"Expected {expected!r} at {self.pos}")
        self.pos += len(expected)

    def optional_literal(self, expected: str) -> bool:
        if self.text.startswith(expected, self.pos):
            self.pos += len(expected)
            return True
        return False

    # ── Captures ─────────────────────────────────────────────────────────

    def until(self, marker: str) -> str:
        """Capture everything before the next *marker* and consume both.

        The capture must be non-empty.
        """
        end = self.text.find(marker, self.pos)
        if end <= self.pos:
            raise NoMatch(f"Marker {marker!r} not found after {self.pos}")
        value = self.text[self.pos : end]
        self.pos = end + len(marker)
        return value

    def until_final(self, terminator: str) -> str:
        """Capture the remainder of the text up to a closing *terminator*."""
        if not self.text.endswith(terminator):
            raise NoMatch(f"Text does not end with {terminator!r}")
        end = len(self.text) - len(terminator)
        if end <= self.pos:
            raise NoMatch(f"Nothing to capture before final {terminator!r}")
        value = self.text[self.pos : end]
        self.pos = len(self.text)
        return value

    def unsigned(self, maximum: int) -> int:
        match = _UNSIGNED_RE.match(self.text, self.pos)
        if match is None:
            raise NoMatch(f"Expected digits at {self.pos}")
        value = int(match.group())
        if value > maximum:
            raise NoMatch(f"Integer {value} exceeds {maximum}")
        self.pos = match.end()
        return value

    def signed(self, minimum: int, maximum: int) -> int:
        match = _SIGNED_RE.match(self.text, self.pos)
        if match is None:
            raise NoMatch(f"Expected signed integer at {self.pos}")
        value = int(match.group())
        if not (minimum <= value <= maximum):
            raise NoMatch(f"Integer {value} outside {minimum}..{maximum}")
        self.pos = match.end()
        return value

    def vocab(self, vocabulary: type[E]) -> E:
        """Read one word and look it up in *vocabulary*."""
        match = _WORD_RE.match(self.text, self.pos)
        if match is None:
            raise NoMatch(f"Expected a {vocabulary.__name__} word at {self.pos}")
        try:
            value = vocabulary(match.group())
        except ValueError:
            raise NoMatch(
                f"{match.group()!r} is not a recognized {vocabulary.__name__}"
            ) from None
        self.pos = match.end()
        return value

    def emoji(self) -> str:
        """Read one glyph token, up to (not including) the next space."""
        end = self.text.find(" ", self.pos)
        if end < 0:
            end = len(self.text)
        glyph = self.text[self.pos : end]
        if not glyph or any(ch.isalnum() for ch in glyph):
            raise NoMatch(f"Expected an emoji at {self.pos}")
        self.pos = end
        return glyph

    # ── Composites ───────────────────────────────────────────────────────

    def emoji_team(self, terminator: str) -> EmojiTeam:
        """``<emoji> <name>`` with the name read until *terminator*."""
        glyph = self.emoji()
        self.literal(" ")
        return EmojiTeam(emoji=glyph, name=self.until(terminator))

    def emojiless_item(self) -> EmojilessItem:
        """``[<prefix> ]<type>[ <suffix>]``."""
        prefix = self.attempt(_prefix_then_space)
        item_type = self.vocab(ItemType)
        suffix = self.attempt(_space_then_suffix)
        return EmojilessItem(item=item_type, prefix=prefix, suffix=suffix)

    def item(self) -> Item:
        glyph = self.emoji()
        self.literal(" ")
        return Item(emoji=glyph, descriptor=self.emojiless_item())


def _prefix_then_space(cur: TextCursor) -> ItemPrefix:
    prefix = cur.vocab(ItemPrefix)
    cur.literal(" ")
    return prefix


def _space_then_suffix(cur: TextCursor) -> ItemSuffix:
    cur.literal(" ")
    for suffix in _SUFFIXES:
        if cur.optional_literal(suffix.value):
            return suffix
    raise NoMatch(f"Expected an item suffix at {cur.pos}")
