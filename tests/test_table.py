"""Tests for the size comparison report."""

import pytest

from basehanja.registry import ENCODINGS, parse
from basehanja.table import SAMPLES, measure, render, rows


def test_one_row_per_encoding_and_sample():
    table = rows()
    assert len(table) == len(ENCODINGS) * len(SAMPLES)
    assert {r.encoding for r in table} == {e.name for e in ENCODINGS}


def test_base64_rows_have_zero_delta():
    for r in rows([parse("base64")]):
        assert r.char_delta == 0
        assert r.byte_delta == 0


def test_kanji_halves_ascii():
    # 18 bytes = 144 bits = 9 kanji; base64 needs 24 characters
    row = measure(parse("kanji"), "hello_world_012345", "ASCII")
    assert row.chars == row.bytes == 18
    assert row.encoded_chars == 9
    assert row.char_increase == pytest.approx(-50.0)
    assert row.char_delta == pytest.approx(-50.0 - 100.0 / 3)


def test_hex_doubles():
    row = measure(parse("hex"), "hello_world_012345", "ASCII")
    assert row.encoded_chars == row.encoded_bytes == 36
    assert row.byte_increase == pytest.approx(100.0)


def test_render():
    table = rows([parse("hex")], [("ab", "ASCII")])
    lines = render(table).splitlines()
    assert lines[0].startswith("|encoding|chars_kind|")
    assert len(lines) == 3
    assert lines[2] == "|hex|ASCII|100.00|100.00|0.00|0.00|ab|2 -> 4|2 -> 4|"
