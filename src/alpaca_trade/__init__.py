"""Client library for the Alpaca brokerage trading API."""

from .client import Client
from .config import Configuration, configuration, configure, reset_configuration, resolve
from .errors import (
    ERROR_KINDS,
    AlpacaError,
    ApiError,
    DecodeError,
    InsufficientFunds,
    InternalServerError,
    InvalidOrderId,
    MissingParameters,
    NetworkError,
    NoPositionForSymbol,
    OrderNotCancelable,
    RateLimitedError,
    UnauthorizedError,
)
from .models import (
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
)

__all__ = [
    "Client",
    "Configuration",
    "configuration",
    "configure",
    "reset_configuration",
    "resolve",
    "ERROR_KINDS",
    "AlpacaError",
    "ApiError",
    "DecodeError",
    "InsufficientFunds",
    "InternalServerError",
    "InvalidOrderId",
    "MissingParameters",
    "NetworkError",
    "NoPositionForSymbol",
    "OrderNotCancelable",
    "RateLimitedError",
    "UnauthorizedError",
    "Account",
    "Asset",
    "Bar",
    "Calendar",
    "Clock",
    "Order",
    "OrderSide",
    "OrderType",
    "Position",
    "TimeInForce",
]
