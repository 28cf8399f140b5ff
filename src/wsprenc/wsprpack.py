from __future__ import annotations

import logging
from typing import Sequence, Type

from .callhash import call_sign_hash
from .chars import code, encode_char
from .constants import (
    LOCPOW_FIELD_MASK,
    MAX_PREFIX_LEN,
    MAX_SUFFIX_CODE,
    POWER_OFFSET,
    PREFIX_SPLIT,
    SUFFIX_BASE,
    WSPR_MESSAGE_BYTES,
)
from .exceptions import InvalidCallSign, InvalidCharacter, InvalidMessage, WSPRException
from .message import (
    HashedLocatorMessage,
    PackedPayload,
    PrefixSuffixMessage,
    StandardMessage,
    Type3Extra,
    WSPRMessage,
)
from .normalize import prepare_message

logger = logging.getLogger(__name__)


def _pack_field(c6: Sequence[str], error: Type[WSPRException]) -> int:
    """Mixed-radix 36*36*10*27*27*27 over six field characters."""
    i0 = code(c6[0])
    i1 = code(c6[1])
    i2 = code(c6[2])
    i3 = code(c6[3]) - 10
    i4 = code(c6[4]) - 10
    i5 = code(c6[5]) - 10
    if i1 > 35 or i2 > 9 or min(i3, i4, i5) < 0:
        raise error(f"{''.join(c6)!r} does not fit the call-sign field")
    n = i0
    n = n * 36 + i1
    n = n * 10 + i2
    n = n * 27 + i3
    n = n * 27 + i4
    n = n * 27 + i5
    return n


def pack_callsign(callsign6: str) -> int:
    """Pack a normalized 6-character call sign into the 28-bit n field.

    Position 2 must be a digit and positions 3..5 letters or spaces.
    """
    if len(callsign6) != 6:
        raise InvalidCallSign(f"call-sign field must be 6 characters, got {callsign6!r}")
    return _pack_field(callsign6, InvalidCallSign)


def pack_locator6(locator6: str) -> int:
    """Type 3 carries the 6-character locator in the n field, rotated left by one
    ("FN42MP" -> "N42MPF") so letters and digits land in the call-sign slots."""
    if len(locator6) != 6:
        raise InvalidCharacter(f"6-character locator expected, got {locator6!r}")
    reordered = [locator6[i] for i in (1, 2, 3, 4, 5, 0)]
    return _pack_field(reordered, InvalidCharacter)


def pack_locator_power(locator4: str, power: int) -> int:
    l0, l1, l2, l3 = (ord(ch) for ch in locator4)
    m = ((179 - 10 * (l0 - ord('A')) - (l2 - ord('0'))) * 180) + (10 * (l1 - ord('A'))) + (l3 - ord('0'))
    return m * 128 + power + POWER_OFFSET


def pack_suffix_power(suffix: int, power: int) -> int:
    if not 0 <= suffix <= MAX_SUFFIX_CODE:
        raise InvalidMessage(f"suffix code {suffix} outside 0..{MAX_SUFFIX_CODE}")
    m = SUFFIX_BASE + suffix
    return m * 128 + power + 2 + POWER_OFFSET


def pack_prefix_power(prefix: str, power: int) -> int:
    """Base-37 prefix packing. Values above 32767 fold into the upper range (+66),
    the rest use +65, which keeps prefixes apart from suffix codes."""
    if len(prefix) > MAX_PREFIX_LEN:
        raise InvalidMessage(f"prefix {prefix!r} longer than {MAX_PREFIX_LEN} characters")
    if not prefix.strip():
        raise InvalidMessage("a prefix or a suffix is required for a type-2 message")
    p3 = prefix.rjust(MAX_PREFIX_LEN)
    m = encode_char(p3[0])
    m = 37 * m + encode_char(p3[1])
    m = 37 * m + encode_char(p3[2])
    if m > PREFIX_SPLIT - 1:
        return (m - PREFIX_SPLIT) * 128 + power + 66
    return m * 128 + power + 65


def pack_hashed_power(callsign: str, extra: Type3Extra, power: int) -> int:
    return 128 * call_sign_hash(callsign, extra) - power - 1 + POWER_OFFSET


def payload_bytes(n: int, m: int) -> bytes:
    """Serialize n (28 bits) and m (22 bits) MSB-first into 11 bytes; bytes 7..10 stay zero."""
    m &= LOCPOW_FIELD_MASK
    c = bytearray(WSPR_MESSAGE_BYTES)
    c[0] = (n >> 20) & 0xFF
    c[1] = (n >> 12) & 0xFF
    c[2] = (n >> 4) & 0xFF
    c[3] = ((n & 0x0F) << 4) | ((m >> 18) & 0x0F)
    c[4] = (m >> 10) & 0xFF
    c[5] = (m >> 2) & 0xFF
    c[6] = (m & 0x03) << 6
    return bytes(c)


def _affix(message: PrefixSuffixMessage | HashedLocatorMessage) -> Type3Extra:
    return Type3Extra(
        locator6=getattr(message, "locator6", ""),
        prefix=message.prefix,
        suffix=message.suffix,
        use_suffix=message.use_suffix,
    )


def pack_message(message: WSPRMessage) -> PackedPayload:
    """Source-encode a message into its n/m fields and the 11-byte payload."""
    if isinstance(message, StandardMessage):
        norm = prepare_message(message.callsign, message.locator, message.power_dbm)
        n = pack_callsign(norm.callsign6)
        m = pack_locator_power(norm.locator4, norm.power)
    elif isinstance(message, PrefixSuffixMessage):
        norm = prepare_message(message.callsign, "", message.power_dbm)
        n = pack_callsign(norm.callsign6)
        if message.use_suffix:
            m = pack_suffix_power(message.suffix, norm.power)
        else:
            m = pack_prefix_power(message.prefix, norm.power)
    elif isinstance(message, HashedLocatorMessage):
        # The hash covers the full call sign, not the 6-character field
        n = pack_locator6(message.locator6)
        m = pack_hashed_power(message.callsign, _affix(message), message.power_dbm)
    else:
        raise InvalidMessage(f"unsupported message {message!r}")
    m &= LOCPOW_FIELD_MASK
    logger.debug("type %d packed n=%d m=%d", message.message_type, n, m)
    return PackedPayload(n=n, m=m, data=payload_bytes(n, m))
