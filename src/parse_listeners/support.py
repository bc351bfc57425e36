"""Listener bookkeeping for recognizers."""

from __future__ import annotations

import logging

from parse_listeners.exceptions import ListenerConstructionError
from parse_listeners.listeners.console import ConsoleErrorListener
from parse_listeners.listeners.protocol import ErrorListener
from parse_listeners.listeners.proxy import ProxyErrorListener

logger = logging.getLogger(__name__)


class ErrorListenerSupport:
    """Owns the listener list of a recognizer.

    A recognizer embeds (or inherits) this and calls
    ``get_error_listener_dispatch()`` whenever it has something to report.
    Without configuration the list holds the shared console listener, so
    syntax errors show up on stderr.
    """

    def __init__(
        self,
        listeners: list[ErrorListener] | None = None,
        *,
        isolate_failures: bool = False,
    ) -> None:
        if listeners is None:
            listeners = [ConsoleErrorListener.INSTANCE]
        self._listeners: list[ErrorListener] = []
        self.isolate_failures = isolate_failures
        for listener in listeners:
            self._check_listener(listener)
            self._listeners.append(listener)

    @staticmethod
    def _check_listener(listener: ErrorListener | None) -> None:
        if listener is None:
            raise ListenerConstructionError(
                "listener must not be None", argument="listener"
            )

    @property
    def error_listeners(self) -> tuple[ErrorListener, ...]:
        return tuple(self._listeners)

    def add_error_listener(self, listener: ErrorListener) -> None:
        """Append a listener. It is notified after the existing ones."""
        self._check_listener(listener)
        self._listeners.append(listener)
        logger.debug("Added error listener %s", type(listener).__name__)

    def remove_error_listener(self, listener: ErrorListener) -> None:
        """Remove a listener if present."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            return
        logger.debug("Removed error listener %s", type(listener).__name__)

    def remove_error_listeners(self) -> None:
        self._listeners.clear()
        logger.debug("Removed all error listeners")

    def get_error_listener_dispatch(self) -> ProxyErrorListener:
        """Dispatcher over a snapshot of the current listeners."""
        return ProxyErrorListener(
            self._listeners, isolate_failures=self.isolate_failures
        )
