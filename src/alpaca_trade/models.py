"""Typed records decoded from Alpaca responses."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from datetime import UTC, date, datetime, time
from decimal import Decimal, InvalidOperation
from enum import StrEnum
from typing import Any, Self, TypeVar

from alpaca_trade.errors import DecodeError

T = TypeVar("T")

_MISSING = object()


class OrderSide(StrEnum):
    """Supported order directions."""

    BUY = "buy"
    SELL = "sell"


class OrderType(StrEnum):
    """Supported order types."""

    MARKET = "market"
    LIMIT = "limit"
    STOP = "stop"
    STOP_LIMIT = "stop_limit"


class TimeInForce(StrEnum):
    """Supported order durations."""

    DAY = "day"
    GTC = "gtc"
    OPG = "opg"
    CLS = "cls"
    IOC = "ioc"
    FOK = "fok"


def _field(payload: Mapping[str, Any], name: str, required: bool) -> Any:
    value = payload.get(name, _MISSING)
    if value is _MISSING or value is None:
        if required:
            raise DecodeError(f"missing required field '{name}'", field=name)
        return None
    return value


def _str(payload: Mapping[str, Any], name: str, required: bool = True) -> str | None:
    value = _field(payload, name, required)
    if value is None:
        return None
    if not isinstance(value, str):
        raise DecodeError(f"field '{name}' must be a string, got {type(value).__name__}", field=name)
    return value


def _bool(payload: Mapping[str, Any], name: str, required: bool = True) -> bool | None:
    value = _field(payload, name, required)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise DecodeError(f"field '{name}' must be true or false, got {value!r}", field=name)
    return value


def _decimal(payload: Mapping[str, Any], name: str, required: bool = True) -> Decimal | None:
    value = _field(payload, name, required)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal, str)):
        raise DecodeError(f"field '{name}' must be numeric, got {value!r}", field=name)
    try:
        parsed = Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise DecodeError(f"field '{name}' must be numeric, got {value!r}", field=name) from exc
    if not parsed.is_finite():
        raise DecodeError(f"field '{name}' must be a finite number, got {value!r}", field=name)
    return parsed


def _int(payload: Mapping[str, Any], name: str, required: bool = True) -> int | None:
    parsed = _decimal(payload, name, required)
    if parsed is None:
        return None
    if parsed != parsed.to_integral_value():
        raise DecodeError(f"field '{name}' must be an integer, got {parsed}", field=name)
    return int(parsed)


def parse_timestamp(value: Any) -> datetime:
    """Parse an RFC 3339 string or epoch seconds into an aware datetime."""
    if isinstance(value, bool):
        raise ValueError(f"not a timestamp: {value!r}")
    if isinstance(value, (int, float, Decimal)):
        return datetime.fromtimestamp(float(value), tz=UTC)
    if not isinstance(value, str):
        raise ValueError(f"not a timestamp: {value!r}")
    parsed = datetime.fromisoformat(value.strip())
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def _datetime(payload: Mapping[str, Any], name: str, required: bool = True) -> datetime | None:
    value = _field(payload, name, required)
    if value is None:
        return None
    try:
        return parse_timestamp(value)
    except (ValueError, OverflowError, OSError) as exc:
        raise DecodeError(f"field '{name}' is not a valid timestamp: {value!r}", field=name) from exc


def _date(payload: Mapping[str, Any], name: str) -> date:
    value = _str(payload, name)
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise DecodeError(f"field '{name}' is not a valid date: {value!r}", field=name) from exc


def _time(payload: Mapping[str, Any], name: str) -> time:
    value = _str(payload, name)
    try:
        return time.fromisoformat(value)
    except ValueError as exc:
        raise DecodeError(f"field '{name}' is not a valid time: {value!r}", field=name) from exc


def _object(payload: Any, model: str) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise DecodeError(f"{model} payload must be a JSON object, got {type(payload).__name__}")
    return payload


@dataclass(frozen=True)
class Account:
    """Brokerage account state for the authenticated credentials."""

    status: str
    currency: str
    pattern_day_trader: bool
    buying_power: Decimal
    id: str | None = None
    account_number: str | None = None
    cash: Decimal | None = None
    portfolio_value: Decimal | None = None
    equity: Decimal | None = None
    last_equity: Decimal | None = None
    long_market_value: Decimal | None = None
    short_market_value: Decimal | None = None
    initial_margin: Decimal | None = None
    maintenance_margin: Decimal | None = None
    daytrade_count: int | None = None
    trading_blocked: bool | None = None
    transfers_blocked: bool | None = None
    account_blocked: bool | None = None
    shorting_enabled: bool | None = None
    created_at: datetime | None = None

    @classmethod
    def from_json(cls, payload: Any) -> Self:
        data = _object(payload, "account")
        return cls(
            status=_str(data, "status"),
            currency=_str(data, "currency"),
            pattern_day_trader=_bool(data, "pattern_day_trader"),
            buying_power=_decimal(data, "buying_power"),
            id=_str(data, "id", required=False),
            account_number=_str(data, "account_number", required=False),
            cash=_decimal(data, "cash", required=False),
            portfolio_value=_decimal(data, "portfolio_value", required=False),
            equity=_decimal(data, "equity", required=False),
            last_equity=_decimal(data, "last_equity", required=False),
            long_market_value=_decimal(data, "long_market_value", required=False),
            short_market_value=_decimal(data, "short_market_value", required=False),
            initial_margin=_decimal(data, "initial_margin", required=False),
            maintenance_margin=_decimal(data, "maintenance_margin", required=False),
            daytrade_count=_int(data, "daytrade_count", required=False),
            trading_blocked=_bool(data, "trading_blocked", required=False),
            transfers_blocked=_bool(data, "transfers_blocked", required=False),
            account_blocked=_bool(data, "account_blocked", required=False),
            shorting_enabled=_bool(data, "shorting_enabled", required=False),
            created_at=_datetime(data, "created_at", required=False),
        )


@dataclass(frozen=True)
class Asset:
    """Tradable instrument metadata."""

    symbol: str
    asset_class: str
    tradable: bool
    status: str
    id: str | None = None
    exchange: str | None = None
    marginable: bool | None = None
    shortable: bool | None = None
    easy_to_borrow: bool | None = None

    @classmethod
    def from_json(cls, payload: Any) -> Self:
        data = _object(payload, "asset")
        return cls(
            symbol=_str(data, "symbol"),
            asset_class=_str(data, "class"),
            tradable=_bool(data, "tradable"),
            status=_str(data, "status"),
            id=_str(data, "id", required=False),
            exchange=_str(data, "exchange", required=False),
            marginable=_bool(data, "marginable", required=False),
            shortable=_bool(data, "shortable", required=False),
            easy_to_borrow=_bool(data, "easy_to_borrow", required=False),
        )


@dataclass(frozen=True)
class Bar:
    """One OHLCV bar."""

    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: int
    timestamp: datetime

    @classmethod
    def from_json(cls, payload: Any) -> Self:
        data = _object(payload, "bar")
        return cls(
            open=_decimal(data, "o"),
            high=_decimal(data, "h"),
            low=_decimal(data, "l"),
            close=_decimal(data, "c"),
            volume=_int(data, "v"),
            timestamp=_datetime(data, "t"),
        )


@dataclass(frozen=True)
class Calendar:
    """Market session for one trading day."""

    date: date
    open: time
    close: time

    @classmethod
    def from_json(cls, payload: Any) -> Self:
        data = _object(payload, "calendar")
        return cls(date=_date(data, "date"), open=_time(data, "open"), close=_time(data, "close"))


@dataclass(frozen=True)
class Clock:
    """Market clock snapshot."""

    timestamp: datetime
    is_open: bool
    next_open: datetime
    next_close: datetime

    @classmethod
    def from_json(cls, payload: Any) -> Self:
        data = _object(payload, "clock")
        return cls(
            timestamp=_datetime(data, "timestamp"),
            is_open=_bool(data, "is_open"),
            next_open=_datetime(data, "next_open"),
            next_close=_datetime(data, "next_close"),
        )


@dataclass(frozen=True)
class Order:
    """Order snapshot as returned by the server."""

    id: str
    symbol: str
    qty: Decimal
    side: str
    type: str
    time_in_force: str
    status: str
    client_order_id: str
    limit_price: Decimal | None = None
    stop_price: Decimal | None = None
    filled_qty: Decimal | None = None
    filled_avg_price: Decimal | None = None
    asset_id: str | None = None
    asset_class: str | None = None
    extended_hours: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    submitted_at: datetime | None = None
    filled_at: datetime | None = None
    expired_at: datetime | None = None
    canceled_at: datetime | None = None
    failed_at: datetime | None = None

    @classmethod
    def from_json(cls, payload: Any) -> Self:
        data = _object(payload, "order")
        return cls(
            id=_str(data, "id"),
            symbol=_str(data, "symbol"),
            qty=_decimal(data, "qty"),
            side=_str(data, "side"),
            type=_str(data, "type"),
            time_in_force=_str(data, "time_in_force"),
            status=_str(data, "status"),
            client_order_id=_str(data, "client_order_id"),
            limit_price=_decimal(data, "limit_price", required=False),
            stop_price=_decimal(data, "stop_price", required=False),
            filled_qty=_decimal(data, "filled_qty", required=False),
            filled_avg_price=_decimal(data, "filled_avg_price", required=False),
            asset_id=_str(data, "asset_id", required=False),
            asset_class=_str(data, "asset_class", required=False),
            extended_hours=_bool(data, "extended_hours", required=False),
            created_at=_datetime(data, "created_at", required=False),
            updated_at=_datetime(data, "updated_at", required=False),
            submitted_at=_datetime(data, "submitted_at", required=False),
            filled_at=_datetime(data, "filled_at", required=False),
            expired_at=_datetime(data, "expired_at", required=False),
            canceled_at=_datetime(data, "canceled_at", required=False),
            failed_at=_datetime(data, "failed_at", required=False),
        )


@dataclass(frozen=True)
class Position:
    """Open position in one symbol."""

    symbol: str
    qty: Decimal
    market_value: Decimal
    unrealized_pl: Decimal
    asset_id: str | None = None
    exchange: str | None = None
    asset_class: str | None = None
    side: str | None = None
    avg_entry_price: Decimal | None = None
    cost_basis: Decimal | None = None
    unrealized_plpc: Decimal | None = None
    unrealized_intraday_pl: Decimal | None = None
    unrealized_intraday_plpc: Decimal | None = None
    current_price: Decimal | None = None
    lastday_price: Decimal | None = None
    change_today: Decimal | None = None

    @classmethod
    def from_json(cls, payload: Any) -> Self:
        data = _object(payload, "position")
        return cls(
            symbol=_str(data, "symbol"),
            qty=_decimal(data, "qty"),
            market_value=_decimal(data, "market_value"),
            unrealized_pl=_decimal(data, "unrealized_pl"),
            asset_id=_str(data, "asset_id", required=False),
            exchange=_str(data, "exchange", required=False),
            asset_class=_str(data, "asset_class", required=False),
            side=_str(data, "side", required=False),
            avg_entry_price=_decimal(data, "avg_entry_price", required=False),
            cost_basis=_decimal(data, "cost_basis", required=False),
            unrealized_plpc=_decimal(data, "unrealized_plpc", required=False),
            unrealized_intraday_pl=_decimal(data, "unrealized_intraday_pl", required=False),
            unrealized_intraday_plpc=_decimal(data, "unrealized_intraday_plpc", required=False),
            current_price=_decimal(data, "current_price", required=False),
            lastday_price=_decimal(data, "lastday_price", required=False),
            change_today=_decimal(data, "change_today", required=False),
        )


def decode_list(decode: Callable[[Any], T], payload: Any) -> list[T]:
    """Decode a JSON array with one decode rule per element."""
    if not isinstance(payload, list):
        raise DecodeError(f"expected a JSON array, got {type(payload).__name__}")
    return [decode(item) for item in payload]


def decode_bars(payload: Any, symbols: Sequence[str]) -> dict[str, list[Bar]]:
    """Decode a bars response into per-symbol sequences.

    A bare array belongs to the first requested symbol. An object keyed by
    symbol is decoded value by value; keys that were not requested are kept.
    """
    if isinstance(payload, list):
        if not symbols:
            raise DecodeError("bars array returned without a requested symbol")
        return {symbols[0]: decode_list(Bar.from_json, payload)}
    if isinstance(payload, Mapping):
        bars: dict[str, list[Bar]] = {}
        for symbol, items in payload.items():
            if not isinstance(items, list):
                raise DecodeError(f"bars for '{symbol}' must be a JSON array", field=str(symbol))
            bars[str(symbol)] = decode_list(Bar.from_json, items)
        return bars
    raise DecodeError(f"unexpected bars payload of type {type(payload).__name__}")
