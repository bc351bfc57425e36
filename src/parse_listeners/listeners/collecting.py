"""Listener that records notifications for later inspection."""

from __future__ import annotations

from typing import Any

from parse_listeners.listeners.base import BaseErrorListener
from parse_listeners.types import (
    AltSet,
    ConfigSet,
    DecisionReport,
    DecisionState,
    RecognitionCause,
    Recognizer,
    ReportKind,
    SyntaxIssue,
)


class CollectingErrorListener(BaseErrorListener):
    """Keeps every syntax error and prediction report it receives, in order."""

    def __init__(self) -> None:
        self.syntax_issues: list[SyntaxIssue] = []
        self.decision_reports: list[DecisionReport] = []

    @property
    def has_errors(self) -> bool:
        return bool(self.syntax_issues)

    @property
    def errors(self) -> list[str]:
        """Syntax errors rendered in the console format."""
        return [issue.format() for issue in self.syntax_issues]

    def reports_of(self, kind: ReportKind) -> list[DecisionReport]:
        return [report for report in self.decision_reports if report.kind == kind]

    def clear(self) -> None:
        self.syntax_issues.clear()
        self.decision_reports.clear()

    def syntax_error(
        self,
        recognizer: Recognizer,
        offending_symbol: Any,
        line: int,
        column: int,
        message: str,
        cause: RecognitionCause | None,
    ) -> None:
        self.syntax_issues.append(
            SyntaxIssue(
                line=line,
                column=column,
                message=message,
                offending_symbol=offending_symbol,
                cause=cause,
            )
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
        self.decision_reports.append(
            DecisionReport(
                kind="ambiguity",
                decision_state=decision_state,
                start_index=start_index,
                stop_index=stop_index,
                alts=ambiguous_alts,
                exact=exact,
                configs=configs,
            )
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
        self.decision_reports.append(
            DecisionReport(
                kind="attempting_full_context",
                decision_state=decision_state,
                start_index=start_index,
                stop_index=stop_index,
                alts=conflicting_alts,
                configs=configs,
            )
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
        self.decision_reports.append(
            DecisionReport(
                kind="context_sensitivity",
                decision_state=decision_state,
                start_index=start_index,
                stop_index=stop_index,
                prediction=prediction,
                configs=configs,
            )
        )
