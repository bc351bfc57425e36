"""Tests for the logging listener."""

import logging

from parse_listeners import LoggingErrorListener

LOGGER_NAME = "parse_listeners.report"


class TestLoggingErrorListener:
    def test_syntax_error_logged_at_error(self, recognizer, caplog) -> None:
        listener = LoggingErrorListener()

        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            listener.syntax_error(recognizer, None, 3, 5, "mismatched input", None)

        assert [(r.name, r.levelno, r.getMessage()) for r in caplog.records] == [
            (LOGGER_NAME, logging.ERROR, "line 3:5 mismatched input")
        ]

    def test_prediction_reports_logged_at_debug(
        self, recognizer, decision_state, configs, caplog
    ) -> None:
        listener = LoggingErrorListener()

        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            listener.report_attempting_full_context(
                recognizer, decision_state, 0, 4, {2, 1}, configs
            )
            listener.report_ambiguity(
                recognizer, decision_state, 0, 6, False, None, configs
            )
            listener.report_context_sensitivity(
                recognizer, decision_state, 0, 5, 2, configs
            )

        assert [r.levelno for r in caplog.records] == [logging.DEBUG] * 3
        assert [r.getMessage() for r in caplog.records] == [
            "attempting full context at 0..4: conflicting alts={1, 2}",
            "ambiguity at 0..6: alts={all} exact=False",
            "context sensitivity at 0..5: prediction=2",
        ]

    def test_custom_logger_and_levels(self, recognizer, decision_state, configs, caplog) -> None:
        logger = logging.getLogger("grammar.diagnostics")
        listener = LoggingErrorListener(
            logger, syntax_level=logging.WARNING, report_level=logging.INFO
        )

        with caplog.at_level(logging.INFO, logger="grammar.diagnostics"):
            listener.syntax_error(recognizer, None, 1, 2, "token recognition error", None)
            listener.report_ambiguity(
                recognizer, decision_state, 1, 2, True, {1, 2}, configs
            )

        assert [(r.name, r.levelno) for r in caplog.records] == [
            ("grammar.diagnostics", logging.WARNING),
            ("grammar.diagnostics", logging.INFO),
        ]

    def test_reports_filtered_below_level(
        self, recognizer, decision_state, configs, caplog
    ) -> None:
        listener = LoggingErrorListener()

        with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
            listener.report_context_sensitivity(
                recognizer, decision_state, 0, 1, 1, configs
            )

        assert caplog.records == []
