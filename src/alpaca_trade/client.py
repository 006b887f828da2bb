"""Alpaca trading client: one method per API operation."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime
from decimal import Decimal
from functools import partial
from urllib.parse import quote

from alpaca_trade.config import resolve
from alpaca_trade.dispatcher import RequestDispatcher
from alpaca_trade.models import (
    Account,
    Asset,
    Bar,
    Calendar,
    Clock,
    Order,
    Position,
    decode_bars,
    decode_list,
)

Number = int | float | Decimal | str


def _segment(value: str) -> str:
    """Escape one path segment so symbols like BTC/USD stay a single segment."""
    return quote(str(value), safe="")


class Client:
    """Thin facade over the Alpaca REST API.

    Endpoint and credentials not passed here come from the process-wide
    default configuration at construction time.
    """

    def __init__(
        self,
        endpoint: str | None = None,
        key_id: str | None = None,
        key_secret: str | None = None,
        data_endpoint: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.config = resolve(
            endpoint=endpoint,
            key_id=key_id,
            key_secret=key_secret,
            data_endpoint=data_endpoint,
        )
        self.dispatcher = RequestDispatcher(self.config, timeout=timeout)

    @property
    def endpoint(self) -> str:
        return self.config.endpoint

    @property
    def key_id(self) -> str:
        return self.config.key_id

    @property
    def key_secret(self) -> str:
        return self.config.key_secret

    @property
    def data_endpoint(self) -> str:
        return self.config.data_endpoint

    def account(self) -> Account:
        """Return the account tied to these credentials."""
        return self.dispatcher.send("GET", "/v2/account", decoder=Account.from_json)

    def asset(self, symbol: str) -> Asset:
        """Return one asset. An unknown symbol surfaces as a plain ApiError."""
        return self.dispatcher.send(
            "GET", f"/v2/assets/{_segment(symbol)}", decoder=Asset.from_json
        )

    def assets(self, status: str | None = None, asset_class: str | None = None) -> list[Asset]:
        """List assets, optionally filtered by status and asset class."""
        return self.dispatcher.send(
            "GET",
            "/v2/assets",
            params={"status": status, "asset_class": asset_class},
            decoder=partial(decode_list, Asset.from_json),
        )

    def bars(
        self,
        timeframe: str,
        symbols: str | Sequence[str],
        limit: int | None = None,
        start: date | datetime | str | None = None,
        end: date | datetime | str | None = None,
        after: date | datetime | str | None = None,
        until: date | datetime | str | None = None,
    ) -> dict[str, list[Bar]]:
        """Return historical bars keyed by symbol, oldest first. A bare string is one symbol."""
        symbols = [symbols] if isinstance(symbols, str) else list(symbols)
        return self.dispatcher.send(
            "GET",
            f"/v1/bars/{timeframe}",
            params={
                "symbols": symbols,
                "limit": limit,
                "start": start,
                "end": end,
                "after": after,
                "until": until,
            },
            decoder=lambda payload: decode_bars(payload, symbols),
            endpoint=self.config.data_endpoint,
        )

    def calendar(
        self,
        start_date: date | str | None = None,
        end_date: date | str | None = None,
    ) -> list[Calendar]:
        """Return one entry per trading day in the range, ascending by date."""
        return self.dispatcher.send(
            "GET",
            "/v1/calendar",
            params={"start": start_date, "end": end_date},
            decoder=partial(decode_list, Calendar.from_json),
        )

    def clock(self) -> Clock:
        return self.dispatcher.send("GET", "/v1/clock", decoder=Clock.from_json)

    def new_order(
        self,
        symbol: str | None = None,
        qty: Number | None = None,
        side: str | None = None,
        order_type: str | None = None,
        time_in_force: str | None = None,
        limit_price: Number | None = None,
        stop_price: Number | None = None,
        extended_hours: bool | None = None,
        client_order_id: str | None = None,
    ) -> Order:
        """Submit an order.

        Nothing is validated locally: omitted fields are left out of the body
        and the server's MissingParameters response is raised instead.
        """
        body = {
            "symbol": symbol,
            "qty": qty,
            "side": side,
            "type": order_type,
            "time_in_force": time_in_force,
            "limit_price": limit_price,
            "stop_price": stop_price,
            "extended_hours": extended_hours,
            "client_order_id": client_order_id,
        }
        return self.dispatcher.send("POST", "/v2/orders", body=body, decoder=Order.from_json)

    def replace_order(
        self,
        order_id: str,
        qty: Number | None = None,
        time_in_force: str | None = None,
        limit_price: Number | None = None,
        stop_price: Number | None = None,
        client_order_id: str | None = None,
    ) -> Order:
        """Replace an open order and return the new order."""
        body = {
            "qty": qty,
            "time_in_force": time_in_force,
            "limit_price": limit_price,
            "stop_price": stop_price,
            "client_order_id": client_order_id,
        }
        return self.dispatcher.send(
            "PATCH", f"/v2/orders/{_segment(order_id)}", body=body, decoder=Order.from_json
        )

    def cancel_order(self, order_id: str) -> None:
        """Cancel one order by id."""
        self.dispatcher.send("DELETE", f"/v2/orders/{_segment(order_id)}")

    def cancel_orders(self) -> None:
        """Cancel every open order."""
        self.dispatcher.send("DELETE", "/v2/orders")

    def order(self, order_id: str) -> Order:
        return self.dispatcher.send(
            "GET", f"/v2/orders/{_segment(order_id)}", decoder=Order.from_json
        )

    def orders(
        self,
        status: str | None = None,
        limit: int | None = None,
        after: datetime | str | None = None,
        until: datetime | str | None = None,
        direction: str | None = None,
    ) -> list[Order]:
        """List orders in server order (most recent first unless `direction` says otherwise)."""
        return self.dispatcher.send(
            "GET",
            "/v2/orders",
            params={
                "status": status,
                "limit": limit,
                "after": after,
                "until": until,
                "direction": direction,
            },
            decoder=partial(decode_list, Order.from_json),
        )

    def position(self, symbol: str) -> Position:
        return self.dispatcher.send(
            "GET", f"/v2/positions/{_segment(symbol)}", decoder=Position.from_json
        )

    def positions(self) -> list[Position]:
        """List open positions."""
        return self.dispatcher.send(
            "GET", "/v2/positions", decoder=partial(decode_list, Position.from_json)
        )

    def close_position(self, symbol: str) -> Order:
        """Liquidate one position and return the closing order."""
        return self.dispatcher.send(
            "DELETE", f"/v2/positions/{_segment(symbol)}", decoder=Order.from_json
        )

    def close_positions(self) -> None:
        """Liquidate every open position."""
        self.dispatcher.send("DELETE", "/v2/positions")
