from __future__ import annotations

from datetime import UTC, date, datetime, time, timedelta, timezone
from decimal import Decimal

import pytest
from payloads import ACCOUNT, ASSET, BAR_CRM, CALENDAR, CLOCK, ORDER, POSITION

from alpaca_trade.errors import DecodeError
from alpaca_trade.models import (
    Account,
    Asset,
    Bar,
    Calendar,
    Clock,
    Order,
    OrderSide,
    OrderType,
    Position,
    TimeInForce,
    decode_bars,
    decode_list,
    parse_timestamp,
)


def test_account_decodes_every_field() -> None:
    account = Account.from_json(ACCOUNT)

    assert account.status == "ACTIVE"
    assert account.currency == "USD"
    assert account.pattern_day_trader is False
    assert account.buying_power == Decimal("262113.632")
    assert account.cash == Decimal("-23140.2")
    assert account.daytrade_count == 0
    assert account.shorting_enabled is True
    assert account.created_at == datetime(2019, 6, 12, 22, 47, 7, 996580, tzinfo=UTC)


def test_account_optional_fields_default_to_none() -> None:
    account = Account.from_json(
        {"status": "ACTIVE", "currency": "USD", "pattern_day_trader": True, "buying_power": 10}
    )

    assert account.buying_power == Decimal("10")
    assert account.cash is None
    assert account.created_at is None


@pytest.mark.parametrize("field", ["status", "currency", "pattern_day_trader", "buying_power"])
def test_account_rejects_missing_required_field(field: str) -> None:
    payload = {key: value for key, value in ACCOUNT.items() if key != field}

    with pytest.raises(DecodeError) as excinfo:
        Account.from_json(payload)

    assert excinfo.value.field == field


@pytest.mark.parametrize("value", ["false", 0, 1, None])
def test_boolean_fields_accept_only_json_booleans(value: object) -> None:
    with pytest.raises(DecodeError):
        Account.from_json(dict(ACCOUNT, pattern_day_trader=value))


@pytest.mark.parametrize("value", ["abc", True, {"amount": 1}, [1], "NaN"])
def test_numeric_fields_reject_non_numeric_values(value: object) -> None:
    with pytest.raises(DecodeError) as excinfo:
        Account.from_json(dict(ACCOUNT, buying_power=value))

    assert excinfo.value.field == "buying_power"


def test_numeric_fields_never_use_binary_floats() -> None:
    position = Position.from_json(dict(POSITION, market_value=Decimal("0.1"), qty=3))

    assert isinstance(position.market_value, Decimal)
    assert position.market_value * 3 == Decimal("0.3")
    assert position.qty == Decimal("3")


def test_string_fields_reject_other_types() -> None:
    with pytest.raises(DecodeError):
        Account.from_json(dict(ACCOUNT, currency=840))


def test_decoding_non_object_payload_fails() -> None:
    with pytest.raises(DecodeError):
        Account.from_json([ACCOUNT])


def test_asset_reads_class_key() -> None:
    asset = Asset.from_json(ASSET)

    assert asset.symbol == "CRM"
    assert asset.asset_class == "us_equity"
    assert asset.tradable is True
    assert asset.status == "active"
    assert asset.exchange == "NYSE"


def test_bar_decodes_epoch_seconds() -> None:
    bar = Bar.from_json(BAR_CRM[0])

    assert bar.open == Decimal("152.57")
    assert bar.close == Decimal("152.98")
    assert bar.volume == 4137618
    assert bar.timestamp == datetime(2019, 6, 12, 4, 0, tzinfo=UTC)


def test_bar_decodes_rfc3339_timestamps() -> None:
    bar = Bar.from_json(
        {"t": "2021-02-01T16:01:00Z", "o": "133.32", "h": 133.74, "l": 133.31, "c": 133.5, "v": 9876}
    )

    assert bar.timestamp == datetime(2021, 2, 1, 16, 1, tzinfo=UTC)
    assert bar.open == Decimal("133.32")


def test_bar_rejects_fractional_volume() -> None:
    with pytest.raises(DecodeError) as excinfo:
        Bar.from_json(dict(BAR_CRM[0], v=Decimal("10.5")))

    assert excinfo.value.field == "v"


def test_calendar_decodes_date_and_times() -> None:
    entry = Calendar.from_json(CALENDAR[0])

    assert entry.date == date(2019, 6, 3)
    assert entry.open == time(9, 30)
    assert entry.close == time(16, 0)


def test_calendar_rejects_bad_date() -> None:
    with pytest.raises(DecodeError):
        Calendar.from_json({"date": "June 3", "open": "09:30", "close": "16:00"})


def test_clock_truncates_nanosecond_timestamps() -> None:
    clock = Clock.from_json(CLOCK)

    eastern = timezone(timedelta(hours=-4))
    assert clock.is_open is True
    assert clock.timestamp == datetime(2019, 6, 14, 10, 51, 2, 493582, tzinfo=eastern)
    assert clock.next_open == datetime(2019, 6, 17, 9, 30, tzinfo=eastern)


def test_clock_rejects_invalid_timestamp() -> None:
    with pytest.raises(DecodeError):
        Clock.from_json(dict(CLOCK, next_close="tomorrow"))


def test_order_decodes_nullable_fields() -> None:
    order = Order.from_json(dict(ORDER, limit_price=None, type="market"))

    assert order.id == "f08bfc92-c922-41f9-8166-3657e5bedef0"
    assert order.qty == Decimal("5")
    assert order.limit_price is None
    assert order.filled_at is None
    assert order.extended_hours is True


def test_order_requires_client_order_id() -> None:
    with pytest.raises(DecodeError):
        Order.from_json(dict(ORDER, client_order_id=None))


def test_position_decodes_money_fields() -> None:
    position = Position.from_json(POSITION)

    assert position.symbol == "FB"
    assert position.qty == Decimal("10")
    assert position.market_value == Decimal("1820.6")
    assert position.unrealized_pl == Decimal("10.3")
    assert position.side == "long"


def test_records_are_immutable() -> None:
    asset = Asset.from_json(ASSET)

    with pytest.raises(AttributeError):
        asset.symbol = "AAPL"  # type: ignore[misc]


def test_decode_list_requires_array() -> None:
    assert decode_list(Asset.from_json, []) == []
    with pytest.raises(DecodeError):
        decode_list(Asset.from_json, ASSET)


def test_decode_list_fails_whole_list_on_one_bad_item() -> None:
    with pytest.raises(DecodeError):
        decode_list(Asset.from_json, [ASSET, {"symbol": "X"}])


def test_decode_bars_assigns_array_to_single_symbol() -> None:
    bars = decode_bars(BAR_CRM, ["CRM"])

    assert list(bars) == ["CRM"]
    assert [bar.close for bar in bars["CRM"]] == [Decimal("152.98"), Decimal("153.85")]


def test_decode_bars_keeps_every_key_and_order() -> None:
    bars = decode_bars({"CRM": BAR_CRM, "FB": [], "SPY": BAR_CRM[:1]}, ["CRM", "FB"])

    assert list(bars) == ["CRM", "FB", "SPY"]
    assert bars["FB"] == []
    assert bars["CRM"][0].timestamp < bars["CRM"][1].timestamp


@pytest.mark.parametrize("payload", ["CRM", 42, {"CRM": {"t": 1}}])
def test_decode_bars_rejects_unexpected_shapes(payload: object) -> None:
    with pytest.raises(DecodeError):
        decode_bars(payload, ["CRM"])


def test_decode_bars_array_needs_a_symbol() -> None:
    with pytest.raises(DecodeError):
        decode_bars(BAR_CRM, [])


def test_parse_timestamp_assumes_utc_for_naive_values() -> None:
    assert parse_timestamp("2019-06-14T14:51:02") == datetime(2019, 6, 14, 14, 51, 2, tzinfo=UTC)


def test_enums_are_plain_strings() -> None:
    assert OrderSide.BUY == "buy"
    assert OrderType.STOP_LIMIT == "stop_limit"
    assert TimeInForce.GTC == "gtc"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2019-06-14T14:51:02.493582378Z", datetime(2019, 6, 14, 14, 51, 2, 493582, tzinfo=UTC)),
        ("2019-06-12T22:47:07.99658Z", datetime(2019, 6, 12, 22, 47, 7, 996580, tzinfo=UTC)),
    ],
)
def test_parse_timestamp_handles_zulu_and_long_fractions(value: str, expected: datetime) -> None:
    assert parse_timestamp(value) == expected
