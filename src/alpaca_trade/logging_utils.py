"""Logging setup for the client, its transport and the CLI."""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "alpaca_trade"
TRANSPORT_LOGGER = "urllib3"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def _handlers(log_file: str | None) -> list[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logger(
    log_level: str = "INFO",
    log_file: str | None = None,
    http_debug: bool = False,
) -> logging.Logger:
    """Configure and return the `alpaca_trade` logger.

    Request lines from the dispatcher go to stderr, and to `log_file` when set.
    With `http_debug`, connection-level records from urllib3 (the transport
    under requests) share the same handlers at DEBUG. Handlers are attached
    once; later calls only change levels.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(_level(log_level))
    logger.propagate = False
    if not logger.handlers:
        for handler in _handlers(log_file):
            logger.addHandler(handler)

    if http_debug:
        transport = logging.getLogger(TRANSPORT_LOGGER)
        transport.setLevel(logging.DEBUG)
        transport.propagate = False
        for handler in logger.handlers:
            if handler not in transport.handlers:
                transport.addHandler(handler)

    return logger
