"""Listener factory helpers."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from parse_listeners.config import ListenerConfig
from parse_listeners.exceptions import ListenerConfigError
from parse_listeners.listeners import (
    CollectingErrorListener,
    ConsoleErrorListener,
    ErrorListener,
    LoggingErrorListener,
    ProxyErrorListener,
)


def build_listener(config: ListenerConfig | dict[str, Any]) -> ProxyErrorListener:
    """Build a dispatcher from config.

    Listeners are registered in a fixed order: console, logging, collecting.
    Use ``find_collector`` to get at the collecting listener afterwards.
    """
    if isinstance(config, dict):
        try:
            config = ListenerConfig(**config)
        except ValidationError as exc:
            raise ListenerConfigError(f"Invalid listener config: {exc}") from exc

    delegates: list[ErrorListener] = []
    if config.console:
        delegates.append(ConsoleErrorListener.INSTANCE)
    if config.log is not None:
        delegates.append(
            LoggingErrorListener(
                logging.getLogger(config.log.logger),
                syntax_level=config.log.syntax_levelno,
                report_level=config.log.report_levelno,
            )
        )
    if config.collect:
        delegates.append(CollectingErrorListener())

    return ProxyErrorListener(delegates, isolate_failures=config.isolate_failures)


def find_collector(listener: ProxyErrorListener) -> CollectingErrorListener | None:
    """Return the first collecting delegate of a dispatcher, if any."""
    for delegate in listener.delegates:
        if isinstance(delegate, CollectingErrorListener):
            return delegate
    return None
