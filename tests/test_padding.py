"""Tests for padding lengths, drop counts and chunk splitting."""

import pytest

from basehanja.padding import (
    BlockPad,
    DropPad,
    block_chars,
    deconcat,
    drop_count,
    pad_length,
    strip,
)


@pytest.mark.parametrize("bitcount,expected", [(1, 8), (4, 2), (5, 8), (6, 4), (7, 8), (8, 1)])
def test_block_chars(bitcount, expected):
    assert block_chars(bitcount) == expected


def test_block_pad_matches_base64():
    p = BlockPad("=")
    assert [pad_length(p, n, 6) for n in range(7)] == [0, 2, 1, 0, 2, 1, 0]


def test_block_pad_never_needed_for_hex_or_binary():
    for n in range(10):
        assert pad_length(BlockPad("?"), n, 4) == 0
        assert pad_length(BlockPad("?"), n, 1) == 0


def test_drop_pad_16_bit():
    p = DropPad("々")
    # one byte = 8 data bits in a 16-bit symbol: one byte too many
    assert pad_length(p, 1, 16) == 1
    assert pad_length(p, 2, 16) == 0
    assert pad_length(p, 0, 16) == 0


def test_drop_pad_13_bit():
    p = DropPad("흐")
    assert pad_length(p, 1, 13) == 1   # 13 - 8 = 5 excess bits
    assert pad_length(p, 2, 13) == 2   # 26 - 16 = 10
    assert pad_length(p, 3, 13) == 1   # 26 - 24 = 2
    assert pad_length(p, 13, 13) == 0  # 104 bits, exact


def test_block_drop_count():
    p = BlockPad("=")
    # "YQ" -> 12 bits; the repacker already dropped the short tail
    assert drop_count(p, 2, 2, 6) == 0
    assert drop_count(p, 4, 0, 6) == 0
    assert drop_count(p, 0, 0, 6) == 0


def test_drop_pad_drop_count():
    p = DropPad("々")
    assert drop_count(p, 1, 1, 16) == 1
    assert drop_count(p, 1, 0, 16) == 0
    q = DropPad("흐")
    assert drop_count(q, 1, 1, 13) == 0  # 13 bits -> 1 byte, already exact
    assert drop_count(q, 2, 2, 13) == 1  # 26 bits -> 3 bytes, 2 real
    assert drop_count(q, 8, 0, 13) == 0


def test_drop_count_never_negative():
    assert drop_count(DropPad("흐"), 1, 0, 13) == 0


def test_deconcat():
    assert deconcat("YQ==YWE=YWFh", "=") == ["YQ==", "YWE=", "YWFh"]
    assert deconcat("YWFh", "=") == ["YWFh"]
    assert deconcat("a=b", "=") == ["a=", "b"]
    assert deconcat("==YQ", "=") == ["==", "YQ"]
    assert deconcat("YQ==", "=") == ["YQ=="]
    assert deconcat("", "=") == []


def test_strip():
    assert strip("YQ==", "=") == ("YQ", 2)
    assert strip("YWFh", "=") == ("YWFh", 0)
    assert strip("==", "=") == ("", 2)
