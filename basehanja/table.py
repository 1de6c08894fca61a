"""Size report: how much each encoding grows a few sample texts.

Growth is given both in characters (what a person counts, or what a
character-limited field counts) and in UTF-8 bytes (what goes over the
wire), and relative to Base64 on the same input. A kanji string is far
longer than Base64 in bytes but much shorter in characters.
"""

from __future__ import annotations

from dataclasses import dataclass

from basehanja.encoding import Encoding
from basehanja.registry import ENCODINGS, parse

SAMPLES = (
    ("hello_world_012345", "ASCII"),
    ("俺の日本語は下手", "3 byte"),
    ("𠜎𠜱𠝹𠱓𠱸𠲖𠳏", "4 byte"),
    ("🐵🙈🙉🙊", "emoji"),
)

HEADER = (
    "|encoding|chars_kind|%c_incr|%b_incr|Δc|Δb|example_text|char_change|byte_change|\n"
    "|--------|----------|------:|------:|-:|-:|:-----------|:---------:|:---------:|"
)


@dataclass(frozen=True)
class Row:
    encoding: str
    kind: str
    text: str
    chars: int
    bytes: int
    encoded_chars: int
    encoded_bytes: int
    char_increase: float  # percent
    byte_increase: float  # percent
    char_delta: float     # percentage points over base64
    byte_delta: float

    def markdown(self) -> str:
        return (
            f"|{self.encoding}|{self.kind}"
            f"|{self.char_increase:.2f}|{self.byte_increase:.2f}"
            f"|{self.char_delta:.2f}|{self.byte_delta:.2f}"
            f"|{self.text}"
            f"|{self.chars} -> {self.encoded_chars}"
            f"|{self.bytes} -> {self.encoded_bytes}|"
        )


def _increase(before: int, after: int) -> float:
    return 100.0 * after / before - 100.0


def measure(encoding: Encoding, text: str, kind: str) -> Row:
    raw = text.encode("utf-8")
    encoded = encoding.encode(raw)
    reference = parse("base64").encode(raw)

    c_incr = _increase(len(text), len(encoded))
    b_incr = _increase(len(raw), len(encoded.encode("utf-8")))
    return Row(
        encoding=encoding.name,
        kind=kind,
        text=text,
        chars=len(text),
        bytes=len(raw),
        encoded_chars=len(encoded),
        encoded_bytes=len(encoded.encode("utf-8")),
        char_increase=c_incr,
        byte_increase=b_incr,
        char_delta=c_incr - _increase(len(text), len(reference)),
        byte_delta=b_incr - _increase(len(raw), len(reference.encode("utf-8"))),
    )


def rows(encodings=ENCODINGS, samples=SAMPLES) -> list[Row]:
    return [measure(e, text, kind) for e in encodings for text, kind in samples]


def render(table: list[Row]) -> str:
    return "\n".join([HEADER] + [r.markdown() for r in table])
