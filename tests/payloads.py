"""Sample Alpaca response bodies shared by the tests."""

from __future__ import annotations

ACCOUNT = {
    "id": "904837e3-3b76-47ec-b432-046db621571b",
    "account_number": "PA2JS0UX0XYR",
    "status": "ACTIVE",
    "currency": "USD",
    "buying_power": "262113.632",
    "cash": "-23140.2",
    "portfolio_value": "103820.56",
    "equity": "103820.56",
    "last_equity": "103529.24",
    "pattern_day_trader": False,
    "trading_blocked": False,
    "transfers_blocked": False,
    "account_blocked": False,
    "shorting_enabled": True,
    "daytrade_count": 0,
    "created_at": "2019-06-12T22:47:07.99658Z",
}

ASSET = {
    "id": "83e2b5e5-87d5-4fa7-b59f-7b0ae4ad4fe7",
    "class": "us_equity",
    "exchange": "NYSE",
    "symbol": "CRM",
    "status": "active",
    "tradable": True,
    "marginable": True,
    "shortable": True,
    "easy_to_borrow": True,
}

ASSET_FB = {
    "id": "fc6a5dcd-4a70-4b8d-b64f-d83a6dae9ba4",
    "class": "us_equity",
    "exchange": "NASDAQ",
    "symbol": "FB",
    "status": "active",
    "tradable": True,
}

CLOCK = {
    "timestamp": "2019-06-14T10:51:02.493582378-04:00",
    "is_open": True,
    "next_open": "2019-06-17T09:30:00-04:00",
    "next_close": "2019-06-14T16:00:00-04:00",
}

CALENDAR = [
    {"date": "2019-06-03", "open": "09:30", "close": "16:00"},
    {"date": "2019-06-04", "open": "09:30", "close": "16:00"},
]

ORDER = {
    "id": "f08bfc92-c922-41f9-8166-3657e5bedef0",
    "client_order_id": "MY_ORDER_ID",
    "created_at": "2019-06-14T14:51:02.495566Z",
    "updated_at": "2019-06-14T14:51:02.504476Z",
    "submitted_at": "2019-06-14T14:51:02.495566Z",
    "filled_at": None,
    "expired_at": None,
    "canceled_at": None,
    "failed_at": None,
    "asset_id": "b0b6dd9d-8b9b-48a9-ba46-b9d54906e415",
    "symbol": "AAPL",
    "asset_class": "us_equity",
    "qty": "5",
    "filled_qty": "0",
    "filled_avg_price": None,
    "type": "limit",
    "side": "buy",
    "time_in_force": "day",
    "limit_price": "200",
    "stop_price": None,
    "status": "new",
    "extended_hours": True,
}

MARKET_ORDER = dict(
    ORDER,
    id="7c1d3d0b-8f29-4b5e-9f55-0f1c4b9a1f2e",
    client_order_id="c3b4f8d6-0a1e-4a5b-8e2d-1f7e9a6b5c4d",
    type="market",
    limit_price=None,
    status="filled",
)

POSITION = {
    "asset_id": "fc6a5dcd-4a70-4b8d-b64f-d83a6dae9ba4",
    "symbol": "FB",
    "exchange": "NASDAQ",
    "asset_class": "us_equity",
    "avg_entry_price": "181.03",
    "qty": "10",
    "side": "long",
    "market_value": "1820.6",
    "cost_basis": "1810.3",
    "unrealized_pl": "10.3",
    "unrealized_plpc": "0.0056896647",
    "current_price": "182.06",
    "lastday_price": "180.58",
    "change_today": "0.0081958135",
}

BAR_CRM = [
    {"t": 1560312000, "o": 152.57, "h": 153.6, "l": 151.93, "c": 152.98, "v": 4137618},
    {"t": 1560398400, "o": 153.01, "h": 154.1, "l": 152.5, "c": 153.85, "v": 3524061},
]

BAR_FB = [
    {"t": 1560312000, "o": 178.29, "h": 178.93, "l": 176.23, "c": 177.47, "v": 15116209},
]

BAR_AMZN = [
    {"t": 1560312000, "o": 1863.6, "h": 1869.95, "l": 1855.06, "c": 1855.32, "v": 2698361},
    {"t": 1560398400, "o": 1862.91, "h": 1875.0, "l": 1857.0, "c": 1870.3, "v": 2769618},
]
