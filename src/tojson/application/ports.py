"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class DataSource(Protocol):
    """Evaluate a source file and return the value it exports."""

    def evaluate(self, source_path: Path, destination: Path) -> object:
        """Evaluate source and return its exported value.

        ``destination`` is only used to label raised errors.
        """


class OutputWriter(Protocol):
    """Persist an encoded document at a destination path."""

    def write(self, destination: Path, payload: bytes, mode: int) -> int:
        """Write payload and return the number of bytes written."""


class Reporter(Protocol):
    """Receive per-run and per-file status messages."""

    def info(self, message: str) -> None:
        """Report progress or success."""

    def warn(self, message: str) -> None:
        """Report a non-fatal notice."""

    def error(self, message: str) -> None:
        """Report a failure."""
