"""Convert directories of Python data modules into JSON documents."""

from __future__ import annotations

from pathlib import Path

from tojson.application.ports import Reporter
from tojson.application.results import BatchResult, ConversionResult

__version__ = "0.1.0"


def convert_directory(
    input_path: str | Path,
    output_path: str | Path | None = None,
    *,
    source_extension: str | None = None,
    target_suffix: str | None = None,
    export_name: str | None = None,
    file_mode: int | None = None,
    reporter: Reporter | None = None,
) -> BatchResult:
    """Convert every source module directly inside ``input_path``.

    Parameters
    ----------
    input_path : str | Path
        Directory holding source modules.
    output_path : str | Path | None, default=None
        Destination directory. Defaults to ``input_path``.
    source_extension : str | None, default=None
        Extension of eligible files, ``py`` unless configured otherwise.
    target_suffix : str | None, default=None
        Text appended to each source filename to form its destination.
    export_name : str | None, default=None
        Module attribute holding the exported value.
    file_mode : int | None, default=None
        Permission bits of written files.
    reporter : Reporter | None, default=None
        Receives progress and per-file messages.

    Returns
    -------
    BatchResult
        Per-file outcomes in processing order.
    """
    from .api import convert_directory_to_json as _impl

    return _impl(
        input_path,
        output_path,
        source_extension=source_extension,
        target_suffix=target_suffix,
        export_name=export_name,
        file_mode=file_mode,
        reporter=reporter,
    )


def convert_file(
    source_path: str | Path,
    destination: str | Path,
    *,
    export_name: str | None = None,
    file_mode: int | None = None,
) -> ConversionResult:
    """Convert one source module to a JSON file.

    Raises
    ------
    tojson.errors.ConversionError
        If any conversion step fails.
    """
    from .api import convert_file_to_json as _impl

    return _impl(
        source_path,
        destination,
        export_name=export_name,
        file_mode=file_mode,
    )


__all__ = ["convert_directory", "convert_file", "BatchResult", "ConversionResult"]
