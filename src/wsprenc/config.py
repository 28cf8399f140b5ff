from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple
import json

from .message import StationIdentity, Type3Extra


def get_default_station() -> dict:
    return {
        "callsign": "K1ABC",
        "locator": "FN42",
        "power_dbm": 37,
        "message_type": 1,
        "locator6": "",
        "prefix": "",
        "suffix": 0,
        "use_suffix": False,
    }


def load_station_config(path: str | Path) -> dict:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(p))
    with p.open("r", encoding="utf-8") as f:
        data = json.load(f)
    cfg = get_default_station()
    cfg.update(data)
    return cfg


def station_from_config(cfg: dict) -> Tuple[StationIdentity, int, Optional[Type3Extra]]:
    """Split a station config dict into (identity, message type, extra fields for types 2/3)."""
    station = StationIdentity(
        callsign=str(cfg["callsign"]),
        locator=str(cfg.get("locator", "")),
        power_dbm=int(cfg["power_dbm"]),
    )
    message_type = int(cfg.get("message_type", 1))
    extra = None
    if message_type != 1:
        extra = Type3Extra(
            locator6=str(cfg.get("locator6", "")),
            prefix=str(cfg.get("prefix", "")),
            suffix=int(cfg.get("suffix", 0)),
            use_suffix=bool(cfg.get("use_suffix", False)),
        )
    return station, message_type, extra
