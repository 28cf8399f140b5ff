from __future__ import annotations

from .exceptions import InvalidCharacter


def is_digit(c: str) -> bool:
    return len(c) == 1 and '0' <= c <= '9'


def is_upper(c: str) -> bool:
    return len(c) == 1 and 'A' <= c <= 'Z'


def to_upper(c: str) -> str:
    # ASCII only, str.upper() may expand a character ('ß' -> 'SS')
    if len(c) == 1 and 'a' <= c <= 'z':
        return chr(ord(c) - 32)
    return c


def code(ch: str) -> int:
    """Map a call-sign character to the 37-symbol field alphabet.

    '0'..'9' -> 0..9, 'A'..'Z' -> 10..35, ' ' -> 36.
    """
    if is_digit(ch):
        return ord(ch) - ord('0')
    if ch == ' ':
        return 36
    if is_upper(ch):
        return ord(ch) - ord('A') + 10
    raise InvalidCharacter(f"character {ch!r} is not allowed in a WSPR field")


def encode_char(ch: str) -> int:
    """Prefix alphabet used by type-2 messages, same values as code()."""
    if ch == ' ':
        return 36
    if is_digit(ch):
        return ord(ch) - ord('0')
    if is_upper(ch):
        return 10 + (ord(ch) - ord('A'))
    raise InvalidCharacter(f"character {ch!r} is not allowed in a prefix")
