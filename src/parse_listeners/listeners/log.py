"""Listener that forwards notifications to the logging module."""

from __future__ import annotations

import logging
from typing import Any

from parse_listeners.formatting import describe_alts, format_syntax_error
from parse_listeners.listeners.base import BaseErrorListener
from parse_listeners.types import (
    AltSet,
    ConfigSet,
    DecisionState,
    RecognitionCause,
    Recognizer,
)

DEFAULT_LOGGER_NAME = "parse_listeners.report"


class LoggingErrorListener(BaseErrorListener):
    """Logs syntax errors and prediction reports.

    Syntax errors are logged in the console format at ``syntax_level``. The
    prediction reports go out at ``report_level``, which defaults to DEBUG
    since they are frequent and rarely point at a grammar defect.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        *,
        syntax_level: int = logging.ERROR,
        report_level: int = logging.DEBUG,
    ) -> None:
        self.logger = logger or logging.getLogger(DEFAULT_LOGGER_NAME)
        self.syntax_level = syntax_level
        self.report_level = report_level

    def syntax_error(
        self,
        recognizer: Recognizer,
        offending_symbol: Any,
        line: int,
        column: int,
        message: str,
        cause: RecognitionCause | None,
    ) -> None:
        self.logger.log(self.syntax_level, format_syntax_error(line, column, message))

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
        if not self.logger.isEnabledFor(self.report_level):
            return
        self.logger.log(
            self.report_level,
            "ambiguity at %d..%d: alts=%s exact=%s",
            start_index,
            stop_index,
            describe_alts(ambiguous_alts),
            exact,
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
        if not self.logger.isEnabledFor(self.report_level):
            return
        self.logger.log(
            self.report_level,
            "attempting full context at %d..%d: conflicting alts=%s",
            start_index,
            stop_index,
            describe_alts(conflicting_alts),
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
        if not self.logger.isEnabledFor(self.report_level):
            return
        self.logger.log(
            self.report_level,
            "context sensitivity at %d..%d: prediction=%d",
            start_index,
            stop_index,
            prediction,
        )
