from __future__ import annotations

from typing import Tuple

from .constants import POWER_OFFSET
from .exceptions import InvalidMessage

_ALNUM = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ "
_LETTERS_SPACE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ "


def unpack_payload(data: bytes) -> Tuple[int, int]:
    """Recover (n, m) from the 11-byte source-encoded payload."""
    if len(data) < 7:
        raise ValueError(f"payload must hold at least 7 bytes, got {len(data)}")
    c = data
    n = (c[0] << 20) | (c[1] << 12) | (c[2] << 4) | (c[3] >> 4)
    m = ((c[3] & 0x0F) << 18) | (c[4] << 10) | (c[5] << 2) | (c[6] >> 6)
    return n, m


def unpack_callsign(n: int) -> str:
    """Inverse of pack_callsign; returns the 6-character field including padding."""
    c = [' '] * 6
    for i in (5, 4, 3):
        n, r = divmod(n, 27)
        c[i] = _LETTERS_SPACE[r]
    n, r = divmod(n, 10)
    c[2] = _ALNUM[r]
    n, r = divmod(n, 36)
    c[1] = _ALNUM[r]
    if n > 36:
        raise InvalidMessage("n field out of range for a standard call sign")
    c[0] = _ALNUM[n]
    return ''.join(c)


def unpack_locator_power(m: int) -> Tuple[str, int]:
    """Decode a type-1 m field into (locator4, power_dbm)."""
    power = (m & 0x7F) - POWER_OFFSET
    ngrid = m >> 7
    if ngrid >= 180 * 180:
        raise InvalidMessage(f"m field {m} does not carry a 4-character locator")
    x, y = divmod(ngrid, 180)
    a, c = divmod(179 - x, 10)
    b, d = divmod(y, 10)
    locator = f"{chr(ord('A') + a)}{chr(ord('A') + b)}{c}{d}"
    return locator, power
