from __future__ import annotations

import logging

import pytest

from alpaca_trade.config import configure, reset_configuration

ENDPOINT = "https://paper-api.test"
DATA_ENDPOINT = "https://data.test"
KEY_ID = "PKTEST"
KEY_SECRET = "secret-test"


@pytest.fixture(autouse=True)
def default_configuration(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr("alpaca_trade.config.load_dotenv", lambda *args, **kwargs: None)
    reset_configuration()
    configure(
        endpoint=ENDPOINT,
        key_id=KEY_ID,
        key_secret=KEY_SECRET,
        data_endpoint=DATA_ENDPOINT,
    )
    yield
    reset_configuration()


@pytest.fixture(autouse=True)
def package_logger():
    logger = logging.getLogger("alpaca_trade")
    yield logger
    for name in ("alpaca_trade", "urllib3"):
        restored = logging.getLogger(name)
        for handler in list(restored.handlers):
            restored.removeHandler(handler)
            handler.close()
        restored.setLevel(logging.NOTSET)
        restored.propagate = True
