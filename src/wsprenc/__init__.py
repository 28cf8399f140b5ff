"""WSPR beacon encoder.

Public API:
- encode(callsign, locator, power_dbm, message_type=1, extra=None) -> 162 symbols
- encode_message(message) for an explicit StandardMessage / PrefixSuffixMessage / HashedLocatorMessage
- unpack_payload(data) -> (n, m), with unpack_callsign / unpack_locator_power for type-1 fields
"""
from .api import build_message, encode, encode_message, encode_station
from .callhash import call_sign_hash
from .constants import WSPR_SYMBOL_COUNT
from .exceptions import InvalidCallSign, InvalidCharacter, InvalidMessage, WSPRException
from .message import (
    HashedLocatorMessage,
    NormalizedMessage,
    PackedPayload,
    PrefixSuffixMessage,
    StandardMessage,
    StationIdentity,
    Type3Extra,
)
from .normalize import prepare_message
from .wsprpack import pack_message
from .wsprunpack import unpack_callsign, unpack_locator_power, unpack_payload

__all__ = [
    "build_message",
    "encode",
    "encode_message",
    "encode_station",
    "call_sign_hash",
    "prepare_message",
    "pack_message",
    "unpack_payload",
    "unpack_callsign",
    "unpack_locator_power",
    "WSPR_SYMBOL_COUNT",
    "StationIdentity",
    "Type3Extra",
    "StandardMessage",
    "PrefixSuffixMessage",
    "HashedLocatorMessage",
    "NormalizedMessage",
    "PackedPayload",
    "WSPRException",
    "InvalidCharacter",
    "InvalidCallSign",
    "InvalidMessage",
]
