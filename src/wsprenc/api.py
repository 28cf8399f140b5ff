from __future__ import annotations

import logging
from typing import Optional

from .convolve import convolve
from .exceptions import InvalidMessage
from .interleave import interleave
from .message import (
    HashedLocatorMessage,
    PrefixSuffixMessage,
    StandardMessage,
    StationIdentity,
    SymbolStream,
    Type3Extra,
    WSPRMessage,
)
from .tones import merge_sync_vector
from .wsprpack import pack_message

logger = logging.getLogger(__name__)


def build_message(
    callsign: str,
    locator: str,
    power_dbm: int,
    message_type: int = 1,
    extra: Optional[Type3Extra] = None,
) -> WSPRMessage:
    """Select the message variant for an explicit WSPR message type (1, 2 or 3)."""
    if message_type == 1:
        return StandardMessage(callsign=callsign, locator=locator, power_dbm=power_dbm)
    if message_type not in (2, 3):
        raise InvalidMessage(f"unknown WSPR message type {message_type!r}")
    if extra is None:
        raise InvalidMessage(f"message type {message_type} needs prefix/suffix data")
    if message_type == 2:
        return PrefixSuffixMessage(
            callsign=callsign,
            power_dbm=power_dbm,
            prefix=extra.prefix,
            suffix=extra.suffix,
            use_suffix=extra.use_suffix,
        )
    return HashedLocatorMessage(
        callsign=callsign,
        locator6=extra.locator6,
        power_dbm=power_dbm,
        prefix=extra.prefix,
        suffix=extra.suffix,
        use_suffix=extra.use_suffix,
    )


def encode_message(message: WSPRMessage) -> SymbolStream:
    """
    Encode one WSPR message into 162 channel symbols (tone indices 0..3).

    Pipeline: source encoding -> convolutional FEC -> interleaving -> sync merge.
    """
    payload = pack_message(message)
    fec = convolve(payload.data)
    symbols = merge_sync_vector(interleave(fec))
    logger.debug("encoded %r: payload %s", message, payload.data.hex())
    return symbols


def encode(
    callsign: str,
    locator: str,
    power_dbm: int,
    message_type: int = 1,
    extra: Optional[Type3Extra] = None,
) -> SymbolStream:
    return encode_message(build_message(callsign, locator, power_dbm, message_type, extra))


def encode_station(station: StationIdentity, message_type: int = 1, extra: Optional[Type3Extra] = None) -> SymbolStream:
    return encode(station.callsign, station.locator, station.power_dbm, message_type, extra)
