"""pandas helpers for decoded bars."""

from __future__ import annotations

import pandas as pd

from alpaca_trade.models import Bar

COLUMNS = ["open", "high", "low", "close", "volume"]


def bars_to_frame(bars: list[Bar]) -> pd.DataFrame:
    """Return OHLCV bars as float columns on a UTC datetime index.

    Prices are converted from Decimal to float, so use the Bar records
    themselves for exact arithmetic.
    """
    if not bars:
        empty = pd.DataFrame(columns=COLUMNS, dtype="float64")
        empty.index = pd.DatetimeIndex([], tz="UTC", name="time")
        return empty

    frame = pd.DataFrame(
        {
            "open": [bar.open for bar in bars],
            "high": [bar.high for bar in bars],
            "low": [bar.low for bar in bars],
            "close": [bar.close for bar in bars],
            "volume": [bar.volume for bar in bars],
        },
        index=pd.to_datetime([bar.timestamp for bar in bars], utc=True),
    )
    frame.index.name = "time"
    frame = frame.sort_index()
    return frame.astype("float64")
