from __future__ import annotations

import logging
import struct
from typing import Optional, TYPE_CHECKING

from .chars import to_upper
from .constants import HASH_SEED, HASH_INITVAL, HASH_MIN_LEN, HASH_MAX_LEN, MAX_SUFFIX_CODE
from .exceptions import InvalidCallSign, InvalidCharacter, InvalidMessage

if TYPE_CHECKING:
    from .message import Type3Extra

logger = logging.getLogger(__name__)

_MASK32 = 0xFFFFFFFF

# Tail handling per string length: (mask for k0, k1, k2); None leaves the word out
_TAIL_MASKS = {
    10: (_MASK32, _MASK32, 0xFFFF),
    9: (_MASK32, _MASK32, 0xFF),
    8: (_MASK32, _MASK32, None),
    7: (_MASK32, 0xFFFFFF, None),
    6: (_MASK32, 0xFFFF, None),
    5: (_MASK32, 0xFF, None),
    4: (_MASK32, None, None),
    3: (0xFFFFFF, None, None),
}


def _rot(x: int, k: int) -> int:
    return ((x << k) | (x >> (32 - k))) & _MASK32


def suffix_text(suffix: int) -> str:
    """Render a suffix code: 0..9 and A..Z for codes below 36, else two digits of code-36."""
    if not 0 <= suffix <= MAX_SUFFIX_CODE:
        raise InvalidMessage(f"suffix code {suffix} outside 0..{MAX_SUFFIX_CODE}")
    if suffix < 10:
        return chr(ord('0') + suffix)
    if suffix < 36:
        return chr(ord('A') + suffix - 10)
    return f"{suffix - 36:02d}"


def composite_callsign(callsign: str, prefix: str = "", suffix: int = 0, use_suffix: bool = False) -> str:
    """Build the compound call sign that type-3 receivers look up, e.g. "K1ABC/P" or "PJ4/K1ABC".

    Both parts are ASCII-uppercased and a space-padded prefix is trimmed, so the
    text matches what a decoder hashes from its call-sign list.
    """
    call = "".join(to_upper(ch) for ch in callsign)
    if use_suffix:
        return f"{call}/{suffix_text(suffix)}"
    pfx = "".join(to_upper(ch) for ch in prefix.strip())
    if not pfx:
        raise InvalidMessage("a prefix or a suffix is required for a hashed call sign")
    return f"{pfx}/{call}"


def hash_string(text: str) -> int:
    """
    16-bit call-sign hash (Jenkins lookup3 final mix, initval 146).

    The string is read as little-endian 32-bit words into accumulators a, b, c;
    partial trailing words are masked by length. Only lengths 3..10 are defined.
    """
    length = len(text)
    if not HASH_MIN_LEN <= length <= HASH_MAX_LEN:
        raise InvalidCallSign(f"hash input {text!r} must be {HASH_MIN_LEN}..{HASH_MAX_LEN} characters")
    try:
        raw = text.encode("ascii")
    except UnicodeEncodeError as exc:
        raise InvalidCharacter(f"hash input {text!r} is not ASCII") from exc

    k = struct.unpack("<3I", raw.ljust(12, b"\0"))
    a = b = c = (HASH_SEED + length + HASH_INITVAL) & _MASK32
    m0, m1, m2 = _TAIL_MASKS[length]
    a = (a + (k[0] & m0)) & _MASK32
    if m1 is not None:
        b = (b + (k[1] & m1)) & _MASK32
    if m2 is not None:
        c = (c + (k[2] & m2)) & _MASK32

    c ^= b
    c = (c - _rot(b, 14)) & _MASK32
    a ^= c
    a = (a - _rot(c, 11)) & _MASK32
    b ^= a
    b = (b - _rot(a, 25)) & _MASK32
    c ^= b
    c = (c - _rot(b, 16)) & _MASK32
    a ^= c
    a = (a - _rot(c, 4)) & _MASK32
    b ^= a
    b = (b - _rot(a, 14)) & _MASK32
    c ^= b
    c = (c - _rot(b, 24)) & _MASK32
    return c & 0xFFFF


def call_sign_hash(callsign: str, extra: Optional["Type3Extra"] = None, *,
                   prefix: str = "", suffix: int = 0, use_suffix: bool = False) -> int:
    if extra is not None:
        prefix, suffix, use_suffix = extra.prefix, extra.suffix, extra.use_suffix
    text = composite_callsign(callsign, prefix, suffix, use_suffix)
    h = hash_string(text)
    logger.debug("hash(%r) = %d", text, h)
    return h
