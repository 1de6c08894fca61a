"""Alphabets: the ordered character sets encodings draw from.

An alphabet is a bijection between indices ``0 .. size()-1`` and characters.
Two shapes exist, and callers never need to know which one they hold:

  Enumerated: an explicit string, "01" or "あいうえお…". Index i is the
              i-th character.
  Intervals:  disjoint inclusive codepoint ranges, e.g. CJK blocks with
              tens of thousands of characters. Indices run through the
              first range, then continue at the start of the next one.

Order is declaration order, never codepoint order: the kanji alphabet
lists U+4E00..U+9FFF before U+3400..U+3DB5.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property


class CharacterNotFound(ValueError):
    """A character is not a member of the alphabet."""

    def __init__(self, character: str):
        super().__init__(f"character not in alphabet: {character!r}")
        self.character = character


@dataclass(frozen=True)
class Enumerated:
    chars: str

    def __post_init__(self):
        if not self.chars:
            raise ValueError("alphabet is empty")
        if len(set(self.chars)) != len(self.chars):
            raise ValueError(f"alphabet has duplicate characters: {self.chars!r}")

    @cached_property
    def _positions(self) -> dict[str, int]:
        return {c: i for i, c in enumerate(self.chars)}

    def size(self) -> int:
        return len(self.chars)

    def index_to_char(self, i: int) -> str:
        if not 0 <= i < len(self.chars):
            raise IndexError(f"alphabet index out of range: {i}")
        return self.chars[i]

    def char_to_index(self, c: str) -> int:
        try:
            return self._positions[c]
        except KeyError:
            raise CharacterNotFound(c) from None

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, c: object) -> bool:
        if not isinstance(c, str):
            return False
        return c in self._positions


@dataclass(frozen=True)
class Intervals:
    """Union of inclusive ``(first, last)`` character ranges."""

    ranges: tuple[tuple[str, str], ...]

    def __post_init__(self):
        # Accept lists from callers; store a hashable tuple.
        object.__setattr__(self, "ranges", tuple((lo, hi) for lo, hi in self.ranges))
        if not self.ranges:
            raise ValueError("alphabet is empty")
        for lo, hi in self.ranges:
            if len(lo) != 1 or len(hi) != 1:
                raise ValueError(f"range bounds must be single characters: {lo!r}..{hi!r}")
            if lo > hi:
                raise ValueError(f"reversed range: {lo!r}..{hi!r}")
        spans = sorted((ord(lo), ord(hi)) for lo, hi in self.ranges)
        for (_, prev_hi), (lo, _) in zip(spans, spans[1:]):
            if lo <= prev_hi:
                raise ValueError(f"overlapping ranges at U+{lo:04X}")

    @cached_property
    def _total(self) -> int:
        return sum(ord(hi) - ord(lo) + 1 for lo, hi in self.ranges)

    def size(self) -> int:
        return self._total

    def index_to_char(self, i: int) -> str:
        if i < 0:
            raise IndexError(f"alphabet index out of range: {i}")
        rest = i
        for lo, hi in self.ranges:
            length = ord(hi) - ord(lo) + 1
            if rest < length:
                return chr(ord(lo) + rest)
            rest -= length
        raise IndexError(f"alphabet index out of range: {i}")

    def char_to_index(self, c: str) -> int:
        code = ord(c) if len(c) == 1 else -1
        offset = 0
        for lo, hi in self.ranges:
            if ord(lo) <= code <= ord(hi):
                return offset + code - ord(lo)
            offset += ord(hi) - ord(lo) + 1
        raise CharacterNotFound(c)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, c: object) -> bool:
        if not isinstance(c, str) or len(c) != 1:
            return False
        return any(lo <= c <= hi for lo, hi in self.ranges)


Alphabet = Enumerated | Intervals
