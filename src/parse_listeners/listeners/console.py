"""Listener that prints syntax errors to standard error."""

from __future__ import annotations

import sys
from typing import Any, ClassVar

from parse_listeners.formatting import format_syntax_error
from parse_listeners.listeners.base import BaseErrorListener
from parse_listeners.types import RecognitionCause, Recognizer


class ConsoleErrorListener(BaseErrorListener):
    """Prints ``line <line>:<column> <message>`` to stderr for each syntax error.

    The prediction notifications stay silent. Use the shared ``INSTANCE``
    rather than building new ones; the listener holds no state.
    """

    INSTANCE: ClassVar[ConsoleErrorListener]

    def syntax_error(
        self,
        recognizer: Recognizer,
        offending_symbol: Any,
        line: int,
        column: int,
        message: str,
        cause: RecognitionCause | None,
    ) -> None:
        print(format_syntax_error(line, column, message), file=sys.stderr)


ConsoleErrorListener.INSTANCE = ConsoleErrorListener()
