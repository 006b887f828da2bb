"""Command-line interface for read-only Alpaca queries."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict, is_dataclass
from typing import Any

from alpaca_trade.client import Client
from alpaca_trade.errors import AlpacaError
from alpaca_trade.logging_utils import setup_logger


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(description="Query the Alpaca trading API")
    parser.add_argument("--endpoint", type=str, help="Trading API base URL")
    parser.add_argument("--data-endpoint", type=str, help="Market data API base URL")
    parser.add_argument("--key-id", type=str, help="API key id")
    parser.add_argument("--key-secret", type=str, help="API secret key")
    parser.add_argument("--log-level", type=str, default="WARNING", help="Logging level")
    parser.add_argument("--log-file", type=str, help="Also write logs to this file")
    parser.add_argument(
        "--http-debug", action="store_true", help="Log connection-level transport records"
    )

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("account", help="Show account state")
    commands.add_parser("clock", help="Show the market clock")
    commands.add_parser("positions", help="List open positions")

    asset = commands.add_parser("asset", help="Show one asset")
    asset.add_argument("symbol")

    assets = commands.add_parser("assets", help="List assets")
    assets.add_argument("--status", type=str)
    assets.add_argument("--asset-class", type=str)

    position = commands.add_parser("position", help="Show the position in one symbol")
    position.add_argument("symbol")

    order = commands.add_parser("order", help="Show one order")
    order.add_argument("order_id")

    orders = commands.add_parser("orders", help="List orders")
    orders.add_argument("--status", type=str)
    orders.add_argument("--limit", type=int)

    calendar = commands.add_parser("calendar", help="List trading days in a date range")
    calendar.add_argument("--start", type=str)
    calendar.add_argument("--end", type=str)

    bars = commands.add_parser("bars", help="Show historical bars")
    bars.add_argument("timeframe")
    bars.add_argument("symbols", nargs="+")
    bars.add_argument("--limit", type=int)
    return parser


def run_command(client: Client, args: argparse.Namespace) -> Any:
    """Dispatch a parsed sub-command to the matching client call."""
    if args.command == "account":
        return client.account()
    if args.command == "clock":
        return client.clock()
    if args.command == "positions":
        return client.positions()
    if args.command == "asset":
        return client.asset(args.symbol.upper())
    if args.command == "assets":
        return client.assets(status=args.status, asset_class=args.asset_class)
    if args.command == "position":
        return client.position(args.symbol.upper())
    if args.command == "order":
        return client.order(args.order_id)
    if args.command == "orders":
        return client.orders(status=args.status, limit=args.limit)
    if args.command == "calendar":
        return client.calendar(start_date=args.start, end_date=args.end)
    if args.command == "bars":
        symbols = [symbol.upper() for symbol in args.symbols]
        return client.bars(args.timeframe, symbols, limit=args.limit)
    raise ValueError(f"Unknown command '{args.command}'")


def to_jsonable(value: Any) -> Any:
    """Convert decoded resources into JSON-friendly structures."""
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, list):
        return [to_jsonable(item) for item in value]
    if isinstance(value, dict):
        return {key: to_jsonable(item) for key, item in value.items()}
    return value


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logger(args.log_level, log_file=args.log_file, http_debug=args.http_debug)
    logger = logging.getLogger("alpaca_trade.cli")

    client = Client(
        endpoint=args.endpoint,
        key_id=args.key_id,
        key_secret=args.key_secret,
        data_endpoint=args.data_endpoint,
    )
    try:
        result = run_command(client, args)
    except AlpacaError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return 1

    print(json.dumps(to_jsonable(result), indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
