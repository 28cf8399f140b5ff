from __future__ import annotations

import logging

from .chars import is_digit, is_upper, to_upper
from .constants import LOCATOR_FALLBACK, MAX_RAW_CALLSIGN
from .exceptions import InvalidCallSign
from .message import NormalizedMessage

logger = logging.getLogger(__name__)


def normalize_callsign(callsign: str) -> str:
    """Return the fixed 6-character call-sign field.

    A call with a single-letter prefix (digit in position 1, letter in position 2)
    is shifted right behind a space so the digit lands in position 2:
    "W1ABC" -> " W1ABC". Anything that is not a letter or digit becomes a space.
    """
    if len(callsign) > MAX_RAW_CALLSIGN:
        raise InvalidCallSign(f"call sign {callsign!r} longer than {MAX_RAW_CALLSIGN} characters")
    c = [to_upper(ch) for ch in callsign.ljust(6)]
    if is_digit(c[1]) and is_upper(c[2]):
        c = [' '] + c[:5]
    for i in range(6):
        if not (is_digit(c[i]) or is_upper(c[i])):
            c[i] = ' '
            if i == 4:
                c[5] = ' '
    call6 = ''.join(c[:6])
    if call6 != callsign:
        logger.debug("call sign %r normalized to %r", callsign, call6)
    return call6


def _is_locator_char(ch: str) -> bool:
    return is_digit(ch) or ('A' <= ch <= 'R' and len(ch) == 1)


def normalize_locator(locator: str) -> str:
    # A single bad character discards the whole locator
    loc = ''.join(to_upper(ch) for ch in locator[:4])
    if len(loc) < 4 or not all(_is_locator_char(ch) for ch in loc):
        logger.debug("locator %r invalid, using %s", locator, LOCATOR_FALLBACK)
        return LOCATOR_FALLBACK
    return loc


def prepare_message(callsign: str, locator: str, power: int) -> NormalizedMessage:
    return NormalizedMessage(
        callsign6=normalize_callsign(callsign),
        locator4=normalize_locator(locator),
        power=power,
    )
