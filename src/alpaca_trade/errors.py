"""Error kinds raised by the client and the status-code mapping that selects them."""

from __future__ import annotations

import json
import re
from http import HTTPStatus
from typing import Any

_ORDER_ID_PATH = re.compile(r"^/v2/orders/[^/:]+$")
_POSITION_PATH = re.compile(r"^/v2/positions/[^/]+$")
_REQUIRED_FIELD = re.compile(r"([A-Za-z_][A-Za-z0-9_]*) (?:is|are) required")
_MISSING_FIELDS = re.compile(
    r"missing(?: required)?(?: (?:fields?|parameters?))?:?\s+"
    r"(?!(?:required\s+)?(?:fields?|parameters?)\b)(.+)",
    re.IGNORECASE,
)


class AlpacaError(Exception):
    """Base exception for every failure surfaced by the client."""


class NetworkError(AlpacaError):
    """Raised when the endpoint is unreachable or the connection breaks."""


class DecodeError(AlpacaError):
    """Raised when a response body does not have the expected shape."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class ApiError(AlpacaError):
    """Non-2xx response that matched no more specific kind."""

    def __init__(self, status_code: int, body: str, message: str | None = None) -> None:
        self.status_code = status_code
        self.body = body
        self.message = message or _message_from_body(body) or _status_phrase(status_code)
        super().__init__(f"{self.status_code}: {self.message}")


class UnauthorizedError(ApiError):
    """Bad or missing credentials (401)."""


class RateLimitedError(ApiError):
    """Too many requests (429). Retrying is left to the caller."""


class InternalServerError(ApiError):
    """Server-side failure (5xx)."""


class InsufficientFunds(ApiError):
    """Order rejected for insufficient buying power."""


class MissingParameters(ApiError):
    """Order rejected because required fields were absent."""

    def __init__(
        self,
        status_code: int,
        body: str,
        message: str | None = None,
        fields: list[str] | None = None,
    ) -> None:
        super().__init__(status_code, body, message)
        self.fields = list(fields or [])


class InvalidOrderId(ApiError):
    """No order exists for the requested id (404)."""


class NoPositionForSymbol(ApiError):
    """No open position exists for the requested symbol (404)."""


class OrderNotCancelable(ApiError):
    """Order exists but is in a state that cannot be canceled (422)."""


ERROR_KINDS: tuple[type[AlpacaError], ...] = (
    UnauthorizedError,
    RateLimitedError,
    InternalServerError,
    InsufficientFunds,
    MissingParameters,
    InvalidOrderId,
    NoPositionForSymbol,
    OrderNotCancelable,
    ApiError,
    DecodeError,
    NetworkError,
)


def error_for_response(method: str, path: str, status_code: int, body: str) -> ApiError:
    """Map a non-2xx response to its error kind. First matching rule wins."""
    message = _message_from_body(body)
    lowered = (message or body).lower()

    if status_code == 401:
        return UnauthorizedError(status_code, body, message)
    if status_code == 429:
        return RateLimitedError(status_code, body, message)
    if 500 <= status_code <= 599:
        return InternalServerError(status_code, body, message)
    if status_code in {403, 422} and "insufficient buying power" in lowered:
        return InsufficientFunds(status_code, body, message)
    if status_code == 422 and ("required" in lowered or "missing" in lowered):
        return MissingParameters(status_code, body, message, fields=missing_fields(body))
    if status_code == 404 and _ORDER_ID_PATH.match(path):
        return InvalidOrderId(status_code, body, message)
    if status_code == 404 and _POSITION_PATH.match(path):
        return NoPositionForSymbol(status_code, body, message)
    if status_code == 422 and method.upper() == "DELETE" and _ORDER_ID_PATH.match(path):
        return OrderNotCancelable(status_code, body, message)
    return ApiError(status_code, body, message)


def missing_fields(body: str) -> list[str]:
    """Extract field names from a missing-parameters response body."""
    payload = _parse_body(body)
    if isinstance(payload, dict) and isinstance(payload.get("fields"), list):
        return [str(item) for item in payload["fields"]]

    text = _message_from_body(body) or body
    names = _REQUIRED_FIELD.findall(text)
    if names:
        return names
    match = _MISSING_FIELDS.search(text)
    if match is None:
        return []
    parts = re.split(r",|\band\b", match.group(1))
    return [part.strip(" .'\"") for part in parts if part.strip(" .'\"")]


def _parse_body(body: str) -> Any:
    if not body or not body.strip():
        return None
    try:
        return json.loads(body)
    except ValueError:
        return None


def _message_from_body(body: str) -> str | None:
    payload = _parse_body(body)
    if isinstance(payload, dict):
        message = payload.get("message")
        if isinstance(message, str) and message.strip():
            return message.strip()
        return None
    text = (body or "").strip()
    return text or None


def _status_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Request rejected"
