"""Padding and segmentation.

Byte counts and symbol counts rarely line up: n bytes are 8n bits, which
become ceil(8n/k) symbols of k bits, and the last symbol usually carries
some zero bits that are not data. Padding tells the decoder how many of
those bits to throw away, and also marks where one encoded string ends
so several can be concatenated and still decoded.

Two disciplines, each carrying a padding character that is never in the
alphabet:

  BlockPad: Base64 style. Pad the output to a multiple of a block, the
            smallest symbol count that holds a whole number of bytes:
            lcm(k, 8) / k symbols (4 for k=6, 8 for k=1, 2 for k=4).
            Only usable for k <= 8.

  DropPad:  For wide alphabets (k > 8) where a block would be huge. Each
            trailing pad character stands for one byte of over-read to
            drop: ceil(excess_bits / 8) of them.

Both disciplines count over-read against a zero-extended tail group. The
decoder instead discards a short tail group outright (see repack.Tail),
which already accounts for one of those bytes, so drop_count() subtracts
it back out. For Base64 this nets to zero; for 16-bit kanji the tail is
never short and the pad count is used as is; for 13-bit Hangul the two
cases alternate.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class BlockPad:
    char: str


@dataclass(frozen=True)
class DropPad:
    char: str


Padding = BlockPad | DropPad


def block_chars(bitcount: int) -> int:
    """Smallest symbol count whose bits are a whole number of bytes."""
    return math.lcm(bitcount, 8) // bitcount


def symbol_count(nbytes: int, bitcount: int) -> int:
    """How many symbols the encoder emits for ``nbytes`` bytes."""
    return -(-nbytes * 8 // bitcount)


def pad_length(padding: Padding, nbytes: int, bitcount: int) -> int:
    """Number of padding characters to append after encoding ``nbytes``."""
    nsymbols = symbol_count(nbytes, bitcount)
    if isinstance(padding, BlockPad):
        return -nsymbols % block_chars(bitcount)
    elif isinstance(padding, DropPad):
        excess = nsymbols * bitcount - nbytes * 8
        return (excess + 7) // 8
    raise TypeError(f"unknown padding discipline: {padding!r}")


def drop_count(padding: Padding, nsymbols: int, npads: int, bitcount: int) -> int:
    """Number of trailing bytes to cut from one decoded chunk.

    ``nsymbols`` is the chunk's length without its padding, ``npads`` the
    number of padding characters stripped from it.
    """
    if isinstance(padding, BlockPad):
        nominal = 1 if nsymbols % block_chars(bitcount) else 0
    elif isinstance(padding, DropPad):
        nominal = npads
    else:
        raise TypeError(f"unknown padding discipline: {padding!r}")
    tail_discarded = (nsymbols * bitcount) % 8 != 0
    return max(nominal - tail_discarded, 0)


def deconcat(text: str, pad_char: str) -> list[str]:
    """Split ``text`` into independently decodable chunks.

    A chunk ends right after each maximal run of ``pad_char``:

        "YQ==YWE=YWFh" → ["YQ==", "YWE=", "YWFh"]
    """
    chunks = []
    start = 0
    i = 0
    n = len(text)
    while i < n:
        if text[i] != pad_char:
            i += 1
            continue
        while i < n and text[i] == pad_char:
            i += 1
        chunks.append(text[start:i])
        start = i
    if start < n:
        chunks.append(text[start:])
    return chunks


def strip(chunk: str, pad_char: str) -> tuple[str, int]:
    """Remove trailing padding. Returns (unpadded, number removed)."""
    unpadded = chunk.rstrip(pad_char)
    return unpadded, len(chunk) - len(unpadded)
