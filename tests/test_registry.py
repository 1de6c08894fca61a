"""Tests for the encoding registry."""

import pytest

from basehanja.registry import BY_NAME, ENCODINGS, UnknownEncodingName, names, parse


def test_names_in_declaration_order():
    assert names() == ["binary", "hex", "base64", "hiragana", "katakana", "hangul", "kanji"]


def test_parse_is_case_insensitive_and_trimmed():
    assert parse("base64") is parse("  BASE64\n") is parse("Base64")


def test_parse_unknown():
    with pytest.raises(UnknownEncodingName, match="unknown encoding: 'base65'") as info:
        parse("base65")
    assert info.value.name == "base65"
    assert isinstance(info.value, ValueError)


def test_table_is_read_only():
    with pytest.raises(TypeError):
        BY_NAME["rot13"] = ENCODINGS[0]


def test_alphabet_sizes():
    assert parse("hiragana").alphabet.size() == 64
    assert parse("katakana").alphabet.size() == 64
    assert parse("hangul").alphabet.size() == 11088
    assert parse("kanji").alphabet.size() == 20992 + 2486 + 42720


def test_padding_outside_alphabets():
    for enc in ENCODINGS:
        assert enc.padding.char not in enc.alphabet


def test_long_names():
    assert parse("hex").long_name == "Hexadecimal"
    assert parse("kanji").long_name == "Hanzi+Kanji+Hanja (漢字)"
