from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .api import build_message, encode_station
from .config import get_default_station, load_station_config, station_from_config
from .exceptions import WSPRException
from .wsprpack import pack_message
from .wsprunpack import unpack_callsign, unpack_locator_power, unpack_payload


def format_symbols(symbols, fmt: str = "list") -> str:
    vals = [str(int(s)) for s in symbols]
    if fmt == "rows":
        return "\n".join(" ".join(vals[i:i + 27]) for i in range(0, len(vals), 27))
    return ",".join(vals)


def describe_payload(data: bytes, message_type: int) -> str:
    """Hex payload and its n/m fields; type-1 fields are decoded back to call, locator and power."""
    n, m = unpack_payload(data)
    lines = [f"payload {data.hex()}", f"n {n}", f"m {m}"]
    if message_type == 1:
        locator, power = unpack_locator_power(m)
        lines.append(f"decoded {unpack_callsign(n).strip()} {locator} {power}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wsprenc", description="Encode a WSPR message into 162 channel symbols")
    parser.add_argument("callsign", nargs="?", default=None, help="Station call sign")
    parser.add_argument("locator", nargs="?", default=None, help="4-character Maidenhead locator")
    parser.add_argument("power", nargs="?", type=int, default=None, help="Transmit power in dBm")
    parser.add_argument("--type", dest="message_type", type=int, choices=(1, 2, 3), default=None, help="WSPR message type")
    parser.add_argument("--prefix", default=None, help="Call-sign prefix (types 2 and 3)")
    parser.add_argument("--suffix", type=int, default=None, help="Numeric suffix code; selects suffix over prefix")
    parser.add_argument("--locator6", default=None, help="6-character locator (type 3)")
    parser.add_argument("--config", default=None, help="Path to JSON station config")
    parser.add_argument("--format", dest="fmt", choices=("list", "rows"), default="list", help="Output layout")
    parser.add_argument("--payload", action="store_true", help="Print the packed payload instead of symbols")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log encoder steps")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    cfg = get_default_station() if args.config is None else load_station_config(args.config)
    overrides = {
        "callsign": args.callsign,
        "locator": args.locator,
        "power_dbm": args.power,
        "message_type": args.message_type,
        "prefix": args.prefix,
        "locator6": args.locator6,
    }
    cfg.update({k: v for k, v in overrides.items() if v is not None})
    if args.suffix is not None:
        cfg["suffix"] = args.suffix
        cfg["use_suffix"] = True
    elif args.prefix is not None:
        cfg["use_suffix"] = False

    station, message_type, extra = station_from_config(cfg)
    try:
        if args.payload:
            message = build_message(station.callsign, station.locator, station.power_dbm, message_type, extra)
            print(describe_payload(pack_message(message).data, message_type))
            return
        symbols = encode_station(station, message_type, extra)
    except WSPRException as exc:
        raise SystemExit(f"wsprenc: {exc}")
    print(format_symbols(symbols, args.fmt))


if __name__ == "__main__":
    main()
