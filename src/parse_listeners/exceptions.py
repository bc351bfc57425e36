"""Exception hierarchy for parse-listeners."""

from __future__ import annotations


class ParseListenersError(Exception):
    """Base exception for all parse-listeners errors."""


class ListenerConstructionError(ParseListenersError, ValueError):
    """A listener or dispatcher was built from an absent argument."""

    def __init__(self, message: str, argument: str | None = None) -> None:
        super().__init__(message)
        self.argument = argument


class ListenerConfigError(ParseListenersError):
    """Error loading or validating a listener configuration."""
