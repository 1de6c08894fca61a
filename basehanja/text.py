"""Text in, text out.

The codec works on bytes. These helpers encode a string's bytes and, on
the way back, insist the decoded bytes form valid text again. A string
can decode to perfectly good bytes that are not UTF-8 (any random kanji
sequence will); that is reported as InvalidText, not as a DecodeError.
"""

from basehanja.encoding import Encoding
from basehanja.registry import parse


class InvalidText(ValueError):
    pass


def _resolve(encoding: Encoding | str) -> Encoding:
    return encoding if isinstance(encoding, Encoding) else parse(encoding)


def encode_text(text: str, encoding: Encoding | str, charset: str = "utf-8") -> str:
    return _resolve(encoding).encode(text.encode(charset))


def decode_text(text: str, encoding: Encoding | str, charset: str = "utf-8") -> str:
    data = _resolve(encoding).decode(text)
    try:
        return data.decode(charset)
    except UnicodeDecodeError as exc:
        raise InvalidText(f"decoded bytes are not valid {charset}: {exc.reason} at byte {exc.start}") from exc
