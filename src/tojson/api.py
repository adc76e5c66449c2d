"""Public file-based conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from tojson.adapters.reporters import RecordingReporter
from tojson.application.ports import Reporter
from tojson.application.results import BatchResult, ConversionResult
from tojson.application.use_cases import (
    build_conversion_options,
    convert_directory,
    convert_file,
)
from tojson.paths import resolve_invocation


def convert_directory_to_json(
    input_path: str | Path,
    output_path: Optional[str | Path] = None,
    *,
    source_extension: Optional[str] = None,
    target_suffix: Optional[str] = None,
    export_name: Optional[str] = None,
    file_mode: Optional[int] = None,
    reporter: Optional[Reporter] = None,
) -> BatchResult:
    """Convert every eligible source module in ``input_path``."""
    reporter = reporter or RecordingReporter()
    options = build_conversion_options(
        source_extension=source_extension,
        target_suffix=target_suffix,
        export_name=export_name,
        file_mode=file_mode,
    )
    config = resolve_invocation(input_path, output_path, reporter=reporter)
    return convert_directory(config=config, options=options, reporter=reporter)


def convert_file_to_json(
    source_path: str | Path,
    destination: str | Path,
    *,
    export_name: Optional[str] = None,
    file_mode: Optional[int] = None,
) -> ConversionResult:
    """Convert a single source module, raising on failure."""
    options = build_conversion_options(export_name=export_name, file_mode=file_mode)
    return convert_file(
        source_path=Path(source_path),
        destination=Path(destination),
        options=options,
    )
