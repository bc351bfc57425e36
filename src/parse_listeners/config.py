"""Listener configuration models and YAML loading."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from parse_listeners.exceptions import ListenerConfigError
from parse_listeners.listeners.log import DEFAULT_LOGGER_NAME

_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingSettings(BaseModel):
    """Settings for the logging listener."""

    logger: str = Field(
        default=DEFAULT_LOGGER_NAME, description="Name of the logger to write to"
    )
    syntax_level: str = Field(
        default="ERROR", description="Level for syntax error records"
    )
    report_level: str = Field(
        default="DEBUG", description="Level for prediction report records"
    )

    @field_validator("syntax_level", "report_level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(
                f"Unknown log level {value!r}; expected one of {', '.join(_LEVEL_NAMES)}"
            )
        return level

    @property
    def syntax_levelno(self) -> int:
        return logging.getLevelName(self.syntax_level)

    @property
    def report_levelno(self) -> int:
        return logging.getLevelName(self.report_level)


class ListenerConfig(BaseModel):
    """Which listeners a recognizer should report to."""

    console: bool = Field(
        default=True, description="Print syntax errors to stderr"
    )
    collect: bool = Field(
        default=False, description="Record notifications for later inspection"
    )
    log: LoggingSettings | None = Field(
        default=None, description="Forward notifications to a logger"
    )
    isolate_failures: bool = Field(
        default=False,
        description="Log and skip a listener that raises instead of propagating",
    )


def load_listener_config(path: str | Path) -> ListenerConfig:
    """Load a listener configuration from a YAML file.

    Args:
        path: Path to the YAML file. An empty file yields the defaults.

    Returns:
        Validated ListenerConfig

    Raises:
        ListenerConfigError: If the file is missing, unreadable or invalid
    """
    config_path = Path(path)

    if not config_path.is_file():
        raise ListenerConfigError(f"Listener config not found: {config_path}")

    try:
        with config_path.open("r", encoding="utf-8") as file_handle:
            data = yaml.safe_load(file_handle)
    except Exception as exc:
        raise ListenerConfigError(f"Failed to read listener config: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ListenerConfigError(
            f"Listener config must be a mapping, got {type(data).__name__}"
        )

    try:
        return ListenerConfig(**data)
    except Exception as exc:
        raise ListenerConfigError(f"Invalid listener config: {exc}") from exc
