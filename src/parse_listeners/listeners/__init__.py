"""Error listeners: the contract, the silent default and the stock implementations."""

from parse_listeners.listeners.base import BaseErrorListener
from parse_listeners.listeners.collecting import CollectingErrorListener
from parse_listeners.listeners.console import ConsoleErrorListener
from parse_listeners.listeners.log import LoggingErrorListener
from parse_listeners.listeners.protocol import ErrorListener
from parse_listeners.listeners.proxy import ProxyErrorListener

__all__ = [
    "ErrorListener",
    "BaseErrorListener",
    "ConsoleErrorListener",
    "ProxyErrorListener",
    "CollectingErrorListener",
    "LoggingErrorListener",
]
