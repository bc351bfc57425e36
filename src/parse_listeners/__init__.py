"""parse-listeners: Syntax error and ambiguity notification for recognizers."""

from parse_listeners.config import (
    ListenerConfig,
    LoggingSettings,
    load_listener_config,
)
from parse_listeners.exceptions import (
    ListenerConfigError,
    ListenerConstructionError,
    ParseListenersError,
)
from parse_listeners.factory import build_listener, find_collector
from parse_listeners.formatting import describe_alts, format_syntax_error
from parse_listeners.listeners import (
    BaseErrorListener,
    CollectingErrorListener,
    ConsoleErrorListener,
    ErrorListener,
    LoggingErrorListener,
    ProxyErrorListener,
)
from parse_listeners.support import ErrorListenerSupport
from parse_listeners.types import DecisionReport, ReportKind, SyntaxIssue

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ErrorListener",
    "BaseErrorListener",
    "ConsoleErrorListener",
    "ProxyErrorListener",
    "CollectingErrorListener",
    "LoggingErrorListener",
    "ErrorListenerSupport",
    "SyntaxIssue",
    "DecisionReport",
    "ReportKind",
    "ListenerConfig",
    "LoggingSettings",
    "load_listener_config",
    "build_listener",
    "find_collector",
    "format_syntax_error",
    "describe_alts",
    "ParseListenersError",
    "ListenerConstructionError",
    "ListenerConfigError",
]
