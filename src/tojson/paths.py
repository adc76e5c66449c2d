"""Input/output directory resolution."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from tojson.application.ports import Reporter
from tojson.errors import InvalidPathError, MissingArgumentError
from tojson.schemas import InvocationConfig

logger = logging.getLogger(__name__)

NO_OUTPUT_WARNING = "Note: No output path defined. Using input path."


def ensure_trailing_separator(path: str) -> str:
    """Append ``os.sep`` to ``path`` unless it already ends with one."""
    if path.endswith(os.sep):
        return path
    return path + os.sep


def _require_directory(path: str) -> None:
    if not os.path.exists(path):
        raise InvalidPathError(f"{path} is not a valid path.")
    if not os.path.isdir(path):
        raise InvalidPathError(f"{path} is not a directory.")


def resolve_invocation(
    input_path: str | Path | None,
    output_path: str | Path | None = None,
    reporter: Reporter | None = None,
) -> InvocationConfig:
    """Validate and normalize the run's directories.

    Parameters
    ----------
    input_path : str | Path | None
        Directory holding source modules. Required.
    output_path : str | Path | None, default=None
        Destination directory. Defaults to ``input_path`` with a warning.
    reporter : Reporter | None, default=None
        Receives the default-output warning.

    Returns
    -------
    InvocationConfig
        Paths normalized to end with a separator.

    Raises
    ------
    MissingArgumentError
        If no input path was supplied.
    InvalidPathError
        If either path does not exist or is not a directory.
    """
    if input_path is None or not str(input_path):
        raise MissingArgumentError("No input path submitted.")

    resolved_input = str(input_path)
    _require_directory(resolved_input)

    if output_path is not None and str(output_path):
        resolved_output = str(output_path)
        _require_directory(resolved_output)
    else:
        resolved_output = resolved_input
        if reporter is not None:
            reporter.warn(NO_OUTPUT_WARNING)
        logger.debug("no output path given, writing next to sources")

    return InvocationConfig(
        input_path=ensure_trailing_separator(resolved_input),
        output_path=ensure_trailing_separator(resolved_output),
    )
