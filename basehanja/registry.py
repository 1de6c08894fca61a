"""The fixed table of named encodings.

Built once at import and never changed afterwards; Encoding objects are
frozen, so the table is safe to share between threads.
"""

import logging
from types import MappingProxyType

from basehanja.alphabet import Enumerated, Intervals
from basehanja.encoding import Encoding
from basehanja.padding import BlockPad, DropPad

log = logging.getLogger(__name__)

# Ordering mostly follows the gojūon table, voiced kana last.
HIRAGANA = (
    "あいうえおかきくけこさしすせそたちつてとなにぬねのはひふへほまみ"
    "むめもやゆよらりるれろわをんがぎぐげござじずぜぞだぢづでどばびぶ"
)
KATAKANA = (
    "アイウエオカキクケコサシスセソタチツテトナニヌネノハヒフヘホマミ"
    "ムメモヤユヨラリルレロワヲンガギグゲゴザジズゼゾダヂヅデドバビブ"
)

ENCODINGS = (
    # binary and hex are always block-aligned, their padding never shows up
    Encoding("binary", "Binary", Enumerated("01"), BlockPad("?")),
    Encoding("hex", "Hexadecimal", Intervals((("0", "9"), ("A", "F"))), BlockPad("?")),
    Encoding(
        "base64",
        "Base64",
        Intervals((("A", "Z"), ("a", "z"), ("0", "9"), ("+", "+"), ("/", "/"))),
        BlockPad("="),
    ),
    Encoding("hiragana", "Hiragana (ひらがな)", Enumerated(HIRAGANA), BlockPad("ゐ")),
    Encoding("katakana", "Katakana (かたかな)", Enumerated(KATAKANA), BlockPad("ヰ")),
    Encoding(
        "hangul",
        "Hangul (한글) (13-bit)",
        Intervals((("가", "흏"),)),  # 11,088 syllables
        DropPad("흐"),  # U+D750, just past the range
    ),
    Encoding(
        "kanji",
        "Hanzi+Kanji+Hanja (漢字)",
        Intervals((
            ("一", "鿿"),          # CJK Unified Ideographs, 20,992
            ("㐀", "㶵"),          # Extension A, 2,486
            ("\U00020000", "\U0002a6df"),  # Extension B, 42,720
        )),
        DropPad("々"),  # U+3005
    ),
)

BY_NAME = MappingProxyType({e.name: e for e in ENCODINGS})


class UnknownEncodingName(ValueError):
    def __init__(self, name: str):
        super().__init__(f"unknown encoding: {name!r} (known: {', '.join(BY_NAME)})")
        self.name = name


def parse(name: str) -> Encoding:
    """Look up an encoding by name, ignoring case and surrounding whitespace."""
    key = name.strip().lower()
    try:
        return BY_NAME[key]
    except KeyError:
        log.debug("lookup failed for %r", name)
        raise UnknownEncodingName(name) from None


def names() -> list[str]:
    return list(BY_NAME)
