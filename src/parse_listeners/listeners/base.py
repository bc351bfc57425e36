"""Silent error listener (no-op)."""

from __future__ import annotations

from typing import Any

from parse_listeners.types import (
    AltSet,
    ConfigSet,
    DecisionState,
    RecognitionCause,
    Recognizer,
)


class BaseErrorListener:
    """Listener that does nothing. Subclass and override what you need."""

    def syntax_error(
        self,
        recognizer: Recognizer,
        offending_symbol: Any,
        line: int,
        column: int,
        message: str,
        cause: RecognitionCause | None,
    ) -> None:
        pass

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
        pass

    def report_attempting_full_context(
        self,
        recognizer: Recognizer,
        decision_state: DecisionState,
        start_index: int,
        stop_index: int,
        conflicting_alts: AltSet | None,
        configs: ConfigSet,
    ) -> None:
        pass

    def report_context_sensitivity(
        self,
        recognizer: Recognizer,
        decision_state: DecisionState,
        start_index: int,
        stop_index: int,
        prediction: int,
        configs: ConfigSet,
    ) -> None:
        pass
