"""Encoding definitions: an alphabet plus a padding discipline.

    encode:  bytes → repack 8→k (zero-extended tail) → alphabet → + padding
    decode:  text  → chunks → per chunk: strip padding → alphabet
                   → repack k→8 (short tail dropped) → cut over-read bytes

k (``bitcount``) is the largest width whose every value has a character:
floor(log2(size)). Alphabets are usually a little larger than 2**k (71 kana
would still give k=6, the Hangul block gives 11,088 for k=13); the extra
characters are never produced by encode, but decode accepts them and uses
their low k bits.
"""

from __future__ import annotations

from dataclasses import dataclass

from basehanja import padding as pad
from basehanja.alphabet import Alphabet, CharacterNotFound
from basehanja.repack import Tail, repack


class DecodeError(ValueError):
    pass


class InvalidCharacter(DecodeError):
    """Decode met a character outside the alphabet.

    ``position`` is the zero-based index within the (unpadded) chunk the
    character was found in, ``chunk`` the zero-based index of that chunk.
    """

    def __init__(self, position: int, character: str, chunk: int = 0):
        super().__init__(f"unknown character {character!r} at position {position}")
        self.position = position
        self.character = character
        self.chunk = chunk


@dataclass(frozen=True)
class Encoding:
    name: str
    long_name: str
    alphabet: Alphabet
    padding: pad.Padding

    def __post_init__(self):
        if self.bitcount() < 1:
            raise ValueError(f"{self.name}: alphabet of {self.alphabet.size()} characters is too small")
        if self.padding.char in self.alphabet:
            raise ValueError(f"{self.name}: padding character {self.padding.char!r} is in the alphabet")
        if isinstance(self.padding, pad.BlockPad) and self.bitcount() > 8:
            raise ValueError(f"{self.name}: block padding needs symbols of at most 8 bits")

    def bitcount(self) -> int:
        """Bits carried by one symbol: the largest k with 2**k <= size."""
        return self.alphabet.size().bit_length() - 1

    def encode(self, data: bytes) -> str:
        data = bytes(data)
        k = self.bitcount()
        out = "".join(self.alphabet.index_to_char(i) for i in repack(data, 8, k, Tail.EMIT))
        return out + self.padding.char * pad.pad_length(self.padding, len(data), k)

    def decode(self, text: str) -> bytes:
        """Decode ``text``, which may be several padded encodings back to back.

        Raises InvalidCharacter for the first character (in text order) that
        is not in the alphabet; nothing is returned in that case.
        """
        k = self.bitcount()
        result = bytearray()
        for n, chunk in enumerate(pad.deconcat(text, self.padding.char)):
            unpadded, npads = pad.strip(chunk, self.padding.char)
            indices = []
            for position, c in enumerate(unpadded):
                try:
                    indices.append(self.alphabet.char_to_index(c))
                except CharacterNotFound as exc:
                    raise InvalidCharacter(position, c, n) from exc
            decoded = bytes(repack(indices, k, 8, Tail.DISCARD))
            drop = pad.drop_count(self.padding, len(indices), npads, k)
            result += decoded[:max(len(decoded) - drop, 0)]
        return bytes(result)

    def __str__(self) -> str:
        return self.name
