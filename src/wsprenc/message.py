from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union
import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class StationIdentity:
    callsign: str
    locator: str
    power_dbm: int


@dataclass(frozen=True)
class Type3Extra:
    """Fields shared by type-2 and type-3 messages.

    use_suffix selects `suffix` (numeric code) over `prefix` (up to 3 chars).
    """
    locator6: str = ""
    prefix: str = ""
    suffix: int = 0
    use_suffix: bool = False


@dataclass(frozen=True)
class StandardMessage:
    message_type: ClassVar[int] = 1
    callsign: str
    locator: str
    power_dbm: int


@dataclass(frozen=True)
class PrefixSuffixMessage:
    message_type: ClassVar[int] = 2
    callsign: str
    power_dbm: int
    prefix: str = ""
    suffix: int = 0
    use_suffix: bool = False


@dataclass(frozen=True)
class HashedLocatorMessage:
    message_type: ClassVar[int] = 3
    callsign: str
    locator6: str
    power_dbm: int
    prefix: str = ""
    suffix: int = 0
    use_suffix: bool = False


WSPRMessage = Union[StandardMessage, PrefixSuffixMessage, HashedLocatorMessage]


@dataclass(frozen=True)
class NormalizedMessage:
    callsign6: str
    locator4: str
    power: int


@dataclass(frozen=True)
class PackedPayload:
    n: int       # 28-bit call-sign field
    m: int       # 22-bit locator/power field
    data: bytes  # 11 bytes, MSB-first


SymbolStream = NDArray[np.uint8]
