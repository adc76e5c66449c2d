"""Reporter implementations for console, logging and in-memory capture."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import typer


class ConsoleReporter:
    """Echo info to stdout and warnings/errors to stderr."""

    def info(self, message: str) -> None:
        typer.echo(message)

    def warn(self, message: str) -> None:
        typer.echo(message, err=True)

    def error(self, message: str) -> None:
        typer.echo(message, err=True)


class LoggingReporter:
    """Forward messages to a stdlib logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger("tojson")

    def info(self, message: str) -> None:
        self.logger.info(message)

    def warn(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.logger.error(message)


@dataclass
class RecordingReporter:
    """Keep reported messages in memory as ``(level, message)`` pairs."""

    messages: list[tuple[str, str]] = field(default_factory=list)

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def warn(self, message: str) -> None:
        self.messages.append(("warn", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def of_level(self, level: str) -> list[str]:
        """Return messages reported at ``level``."""
        return [message for lvl, message in self.messages if lvl == level]
