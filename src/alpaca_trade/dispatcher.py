"""Request construction, authentication, dispatch and response decoding."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from datetime import date, datetime
from decimal import Decimal
from typing import Any

import requests

from alpaca_trade.config import Configuration
from alpaca_trade.errors import DecodeError, NetworkError, error_for_response

KEY_ID_HEADER = "APCA-API-KEY-ID"
KEY_SECRET_HEADER = "APCA-API-SECRET-KEY"


def encode_params(params: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """Render query parameters as sorted key/value pairs, dropping None values."""
    if not params:
        return []
    pairs: list[tuple[str, str]] = []
    for key, value in sorted(params.items()):
        if value is None:
            continue
        pairs.append((key, _param_value(value)))
    return pairs


def encode_body(body: Mapping[str, Any]) -> str:
    """Serialize a request body as a JSON object of its non-None fields."""
    payload = {key: value for key, value in body.items() if value is not None}
    return json.dumps(payload, default=_json_default)


def _param_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value)
    return str(value)


def _json_default(value: Any) -> str:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class RequestDispatcher:
    """Send one authenticated request and return its decoded payload.

    Holds only the configuration snapshot it was built with; nothing is
    shared or cached between calls.
    """

    def __init__(self, config: Configuration, timeout: float | None = None) -> None:
        self.config = config
        self.timeout = timeout
        self.logger = logging.getLogger("alpaca_trade.dispatcher")

    def send(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
        decoder: Callable[[Any], Any] | None = None,
        endpoint: str | None = None,
    ) -> Any:
        base_url = (endpoint or self.config.endpoint).rstrip("/")
        url = f"{base_url}{path}"
        headers = {
            KEY_ID_HEADER: self.config.key_id,
            KEY_SECRET_HEADER: self.config.key_secret,
        }
        data = None
        if body is not None:
            headers["Content-Type"] = "application/json"
            data = encode_body(body)

        self.logger.debug("%s %s", method, path)
        try:
            response = requests.request(
                method=method,
                url=url,
                params=encode_params(params),
                data=data,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            self.logger.warning("%s %s failed: %s", method, path, exc)
            raise NetworkError(f"Alpaca request failed for {path}: {exc}") from exc

        if not 200 <= response.status_code <= 299:
            error = error_for_response(method, path, response.status_code, response.text)
            self.logger.warning(
                "%s %s -> %s (%s)", method, path, type(error).__name__, error.message
            )
            raise error

        if response.status_code == 204 or not response.text.strip():
            return None

        try:
            payload = json.loads(response.text, parse_float=Decimal)
        except ValueError as exc:
            raise DecodeError(f"Invalid JSON response from Alpaca for {path}.") from exc

        if decoder is None:
            return payload
        return decoder(payload)
