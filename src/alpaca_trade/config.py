"""Endpoint and credential configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Self

from dotenv import find_dotenv, load_dotenv

DEFAULT_ENDPOINT = "https://api.alpaca.markets"
DEFAULT_DATA_ENDPOINT = "https://data.alpaca.markets"


def _env(*names: str, default: str = "") -> str:
    """Return the first non-empty environment value among `names`."""
    for name in names:
        value = os.getenv(name)
        if value is not None and value.strip():
            return value.strip()
    return default


@dataclass(frozen=True)
class Configuration:
    """Immutable connection settings used for every request."""

    endpoint: str = DEFAULT_ENDPOINT
    key_id: str = ""
    key_secret: str = ""
    data_endpoint: str = DEFAULT_DATA_ENDPOINT

    @classmethod
    def from_env(cls) -> Self:
        """Build configuration from environment variables and a `.env` in the working tree."""
        load_dotenv(find_dotenv(usecwd=True))
        return cls(
            endpoint=_env("ALPACA_API_ENDPOINT", "APCA_API_BASE_URL", default=DEFAULT_ENDPOINT),
            key_id=_env("ALPACA_API_KEY_ID", "APCA_API_KEY_ID"),
            key_secret=_env("ALPACA_API_SECRET_KEY", "APCA_API_SECRET_KEY"),
            data_endpoint=_env(
                "ALPACA_API_DATA_ENDPOINT",
                "APCA_API_DATA_URL",
                default=DEFAULT_DATA_ENDPOINT,
            ),
        )

    def with_overrides(self, **kwargs: str | None) -> Self:
        """Return a copy where every non-None keyword replaces the matching field."""
        overrides = {key: value for key, value in kwargs.items() if value is not None}
        return replace(self, **overrides)


_default: Configuration | None = None


def configuration() -> Configuration:
    """Return the process-wide default configuration, loading it from the environment once."""
    global _default
    if _default is None:
        _default = Configuration.from_env()
    return _default


def configure(**kwargs: str | None) -> Configuration:
    """Replace fields of the process-wide default. Call at startup, not while requests run."""
    global _default
    _default = configuration().with_overrides(**kwargs)
    return _default


def reset_configuration() -> None:
    """Drop the process-wide default so the next read reloads it from the environment."""
    global _default
    _default = None


def resolve(
    endpoint: str | None = None,
    key_id: str | None = None,
    key_secret: str | None = None,
    data_endpoint: str | None = None,
) -> Configuration:
    """Merge explicit overrides onto the process-wide default."""
    return configuration().with_overrides(
        endpoint=endpoint,
        key_id=key_id,
        key_secret=key_secret,
        data_endpoint=data_endpoint,
    )
