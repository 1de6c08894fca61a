"""Bit repacking between fixed-width integer streams.

Every encoding is the same transform run in two directions:

    encode:  bytes (8-bit)      → symbol indices (k-bit)
    decode:  symbol indices     → bytes

The input is read as one continuous big-endian bitstream and re-sliced
into groups of the output width. With 8 → 6 (Base64):

    11111100 00001111        → 111111 000000 1111__
                                                 ^^ tail

A single input value may straddle two output groups. What happens to the
short final group is the only thing that differs between directions:
the encoder zero-extends it into one more symbol (those low bits are
padding, not data), the decoder throws it away (it is that same padding,
coming back).
"""

from __future__ import annotations

import enum
from typing import Iterable, Iterator


class Tail(enum.Enum):
    """What to do with an incomplete final output group."""

    EMIT = "emit"        # shift left, zero-fill the low bits, yield it
    DISCARD = "discard"  # drop it


def repack(
    values: Iterable[int],
    isize: int,
    osize: int,
    tail: Tail = Tail.DISCARD,
) -> Iterator[int]:
    """Lazily re-slice ``isize``-bit values into ``osize``-bit values.

    Bits above ``isize`` in an input value are ignored. The accumulator
    never holds more than ``isize + osize`` bits, whatever the input length.
    """
    if isize <= 0 or osize <= 0:
        raise ValueError(f"bit widths must be positive, got {isize} -> {osize}")

    mask = (1 << isize) - 1
    acc = 0    # pending bits, right-aligned
    nbits = 0  # how many of them are pending
    for value in values:
        acc = (acc << isize) | (value & mask)
        nbits += isize
        while nbits >= osize:
            nbits -= osize
            yield acc >> nbits
            acc &= (1 << nbits) - 1

    if nbits and tail is Tail.EMIT:
        yield acc << (osize - nbits)
