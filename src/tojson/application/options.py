"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass

from tojson.config import (
    DEFAULT_EXPORT_NAME,
    DEFAULT_FILE_MODE,
    DEFAULT_SOURCE_EXTENSION,
    DEFAULT_TARGET_SUFFIX,
)


@dataclass(frozen=True)
class ConversionOptions:
    """Options passed through the batch and single-file use-cases."""

    source_extension: str = DEFAULT_SOURCE_EXTENSION
    target_suffix: str = DEFAULT_TARGET_SUFFIX
    export_name: str = DEFAULT_EXPORT_NAME
    file_mode: int = DEFAULT_FILE_MODE
