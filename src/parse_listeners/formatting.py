"""Text rendering for syntax errors and alternative sets."""

from __future__ import annotations

from collections.abc import Collection
from typing import Any


def format_syntax_error(line: int, column: int, message: str) -> str:
    """Render the console line for a syntax error, without a terminator."""
    return f"line {line}:{column} {message}"


def describe_alts(alts: Any) -> str:
    """Render an alternative set for log output.

    ``None`` stands for every alternative in the configuration set. Collections
    of integers are shown sorted. Anything else, one-shot iterators included,
    falls back to ``repr`` so the value is never consumed.
    """
    if alts is None:
        return "{all}"
    if isinstance(alts, Collection) and not isinstance(alts, (str, bytes)):
        try:
            members = sorted(alts)
        except TypeError:
            return repr(alts)
        if all(isinstance(alt, int) for alt in members):
            return "{" + ", ".join(str(alt) for alt in members) + "}"
    return repr(alts)
