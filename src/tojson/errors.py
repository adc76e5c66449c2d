"""Exception hierarchy for directory-to-JSON conversion."""

from __future__ import annotations

from pathlib import Path


class ToJsonError(Exception):
    """Base error for all conversion failures."""

    exit_code: int = 1


class MissingArgumentError(ToJsonError):
    """Raised when no input path was supplied."""

    exit_code = 2


class InvalidPathError(ToJsonError):
    """Raised when an input or output path is not an existing directory."""

    exit_code = 2


class InvalidOptionError(ToJsonError):
    """Raised when extension, suffix, export name or mode is invalid."""

    exit_code = 2


class NoFilesFoundError(ToJsonError):
    """Raised when the input directory holds no eligible source files."""

    exit_code = 1


class ConversionError(ToJsonError):
    """Per-file conversion failure.

    Parameters
    ----------
    destination : Path | str
        Destination JSON path the failure refers to.
    reason : str
        Human-readable failure reason.
    """

    def __init__(self, destination: Path | str, reason: str) -> None:
        self.destination = str(destination)
        self.reason = reason
        super().__init__(f"{self.destination}: {reason}")


class ModuleLoadError(ConversionError):
    """Source module could not be compiled or raised while executing."""


class NotAnObjectError(ConversionError):
    """Exported value is not a mapping or sequence."""


class NullOrPrimitiveError(ConversionError):
    """Exported value is missing, ``None`` or a scalar."""


class EmptyObjectError(ConversionError):
    """Exported value has no keys or items."""


class SerializationError(ConversionError):
    """Exported value cannot be encoded as JSON."""


class WriteError(ConversionError):
    """Destination file could not be written."""
