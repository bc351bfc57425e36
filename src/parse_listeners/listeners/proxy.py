"""Fan-out listener that forwards every notification to its delegates."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from parse_listeners.exceptions import ListenerConstructionError
from parse_listeners.listeners.protocol import ErrorListener
from parse_listeners.types import (
    AltSet,
    ConfigSet,
    DecisionState,
    RecognitionCause,
    Recognizer,
)

logger = logging.getLogger(__name__)


class ProxyErrorListener:
    """Dispatches each notification to a fixed sequence of delegates, in order.

    By default a delegate that raises stops the dispatch: the exception
    reaches the caller and later delegates are not notified for that call.
    With ``isolate_failures=True`` the exception is logged and dispatch moves
    on to the next delegate.
    """

    def __init__(
        self,
        delegates: Iterable[ErrorListener] | None,
        *,
        isolate_failures: bool = False,
    ) -> None:
        if delegates is None:
            raise ListenerConstructionError(
                "delegates must not be None", argument="delegates"
            )
        self._delegates: tuple[ErrorListener, ...] = tuple(delegates)
        self._isolate_failures = isolate_failures

    @property
    def delegates(self) -> tuple[ErrorListener, ...]:
        return self._delegates

    @property
    def isolate_failures(self) -> bool:
        return self._isolate_failures

    def __len__(self) -> int:
        return len(self._delegates)

    def __repr__(self) -> str:
        names = ", ".join(type(d).__name__ for d in self._delegates)
        return f"{type(self).__name__}([{names}])"

    def _dispatch(self, method_name: str, *args: Any) -> None:
        """Call a method on every delegate with the same arguments."""
        for delegate in self._delegates:
            method = getattr(delegate, method_name)
            if not self._isolate_failures:
                method(*args)
                continue
            try:
                method(*args)
            except Exception as exc:
                logger.warning(
                    "Listener %s.%s raised %s: %s",
                    type(delegate).__name__,
                    method_name,
                    type(exc).__name__,
                    exc,
                )

    def syntax_error(
        self,
        recognizer: Recognizer,
        offending_symbol: Any,
        line: int,
        column: int,
        message: str,
        cause: RecognitionCause | None,
    ) -> None:
        self._dispatch(
            "syntax_error", recognizer, offending_symbol, line, column, message, cause
        )

    def report_ambiguity(
        self,
        recognizer: Recognizer,
        decision_state: DecisionState,
        start_index: int,
        stop_index: int,
        exact: bool,
        ambiguous_alts: AltSet | None,
        configs: ConfigSet,
    ) -> None:
        self._dispatch(
            "report_ambiguity",
            recognizer,
            decision_state,
            start_index,
            stop_index,
            exact,
            ambiguous_alts,
            configs,
        )

    def report_attempting_full_context(
        self,
        recognizer: Recognizer,
        decision_state: DecisionState,
        start_index: int,
        stop_index: int,
        conflicting_alts: AltSet | None,
        configs: ConfigSet,
    ) -> None:
        self._dispatch(
            "report_attempting_full_context",
            recognizer,
            decision_state,
            start_index,
            stop_index,
            conflicting_alts,
            configs,
        )

    def report_context_sensitivity(
        self,
        recognizer: Recognizer,
        decision_state: DecisionState,
        start_index: int,
        stop_index: int,
        prediction: int,
        configs: ConfigSet,
    ) -> None:
        self._dispatch(
            "report_context_sensitivity",
            recognizer,
            decision_state,
            start_index,
            stop_index,
            prediction,
            configs,
        )
