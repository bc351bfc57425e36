"""Error listener protocol definition."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from parse_listeners.types import (
    AltSet,
    ConfigSet,
    DecisionState,
    RecognitionCause,
    Recognizer,
)


@runtime_checkable
class ErrorListener(Protocol):
    """Protocol for receiving syntax error and prediction notifications.

    A recognizer calls these synchronously, on its own call stack, at the
    moment it detects a reportable condition. Listeners only observe: they do
    not recover from errors or build messages, and their return values are
    ignored.
    """

    def syntax_error(
        self,
        recognizer: Recognizer,
        offending_symbol: Any,
        line: int,
        column: int,
        message: str,
        cause: RecognitionCause | None,
    ) -> None:
        """Called once per detected syntax error.

        Args:
            recognizer: The parser or lexer that hit the error.
            offending_symbol: The offending token, or None for lexers.
            line: Line of the error (1-based).
            column: Character position within the line (0-based).
            message: The message computed by the recovery strategy.
            cause: The recognition exception behind the error. None when the
                recognizer recovered in-line by single-token insertion or
                deletion without leaving the enclosing rule.
        """
        ...

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
        """Called when a full-context prediction ends in an ambiguity.

        Every full-context prediction that does not end in a syntax error
        produces either this call or ``report_context_sensitivity``. Never
        called for lexers.

        Args:
            recognizer: The parser instance.
            decision_state: Prediction state for the current decision.
            start_index: Input index where the decision started.
            stop_index: Input index where the ambiguity was identified.
            exact: True if every alternative in ``ambiguous_alts`` is truly
                viable. False if at least two are viable and prediction
                stopped once the minimum alternative was confirmed.
            ambiguous_alts: The potentially ambiguous alternatives, or None
                for every alternative represented in ``configs``.
            configs: Configuration set where the ambiguity was identified.
        """
        ...

    def report_attempting_full_context(
        self,
        recognizer: Recognizer,
        decision_state: DecisionState,
        start_index: int,
        stop_index: int,
        conflicting_alts: AltSet | None,
        configs: ConfigSet,
    ) -> None:
        """Called when a fast prediction conflicts and full context is next.

        Args:
            recognizer: The parser instance.
            decision_state: Prediction state for the current decision.
            start_index: Input index where the decision started.
            stop_index: Input index where the conflict occurred.
            conflicting_alts: Alternatives still viable after predicate
                evaluation, or None for every alternative in ``configs``.
            configs: Configuration set where the conflict was detected.
        """
        ...

    def report_context_sensitivity(
        self,
        recognizer: Recognizer,
        decision_state: DecisionState,
        start_index: int,
        stop_index: int,
        prediction: int,
        configs: ConfigSet,
    ) -> None:
        """Called when full-context prediction resolves a conflict uniquely.

        This is informational and may appear for unambiguous grammars.

        Args:
            recognizer: The parser instance.
            decision_state: Prediction state for the current decision.
            start_index: Input index where the decision started.
            stop_index: Input index where the unique result was determined.
            prediction: The resolved alternative.
            configs: Configuration set where the prediction was determined.
        """
        ...
