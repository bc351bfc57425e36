"""Core data types for parse-listeners."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from parse_listeners.formatting import format_syntax_error


# =============================================================================
# Opaque handles
# =============================================================================

# These belong to the recognizer. Listeners pass them along by identity and
# never look inside.
Recognizer = Any
DecisionState = Any
ConfigSet = Any
AltSet = Any
RecognitionCause = Any


# =============================================================================
# Recorded notifications
# =============================================================================

ReportKind = Literal["ambiguity", "attempting_full_context", "context_sensitivity"]


@dataclass(frozen=True, slots=True)
class SyntaxIssue:
    """A syntax error as delivered to ``syntax_error``."""

    line: int
    column: int
    message: str
    offending_symbol: Any = None
    cause: RecognitionCause = None

    @property
    def recovered_inline(self) -> bool:
        """True when the recognizer recovered without unwinding the rule."""
        return self.cause is None

    def format(self) -> str:
        return format_syntax_error(self.line, self.column, self.message)


@dataclass(frozen=True, slots=True)
class DecisionReport:
    """One of the three prediction notifications.

    ``alts`` holds the ambiguous or conflicting alternatives (``None`` meaning
    every alternative in ``configs``), ``exact`` is only set for ambiguities
    and ``prediction`` only for context sensitivities.
    """

    kind: ReportKind
    decision_state: DecisionState
    start_index: int
    stop_index: int
    alts: AltSet = None
    exact: bool | None = None
    prediction: int | None = None
    configs: ConfigSet = None
