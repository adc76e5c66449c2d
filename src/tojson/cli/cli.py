#!/usr/bin/env python3
"""
tojson.cli.cli

Typer-based CLI converting a directory of Python data modules to JSON.

Examples
--------
Convert next to the sources:

    tojson ./data

Write into another directory, keeping legacy executable permissions:

    tojson ./data ./build --mode 775
"""

from __future__ import annotations

import logging
import traceback

import typer

from tojson.errors import InvalidOptionError, ToJsonError

app = typer.Typer(
    name="tojson",
    help="Convert a directory of data modules into JSON documents.",
    add_completion=False,
)


def _print_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly startup error.

    Parameters
    ----------
    exc : Exception
        Exception raised before or while listing the batch.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _parse_mode(raw: str | None) -> int | None:
    """Parse ``--mode`` as octal permission bits."""
    if raw is None:
        return None
    from tojson.config import parse_file_mode

    try:
        return parse_file_mode(raw)
    except ValueError as exc:
        raise typer.BadParameter(
            f"Invalid mode '{raw}'. Use octal digits, e.g. 644 or 0o775."
        ) from exc


@app.command()
def convert_cmd(
    input_path: str | None = typer.Argument(
        None, metavar="INPUT_PATH", help="Directory containing source modules."
    ),
    output_path: str | None = typer.Argument(
        None, metavar="OUTPUT_PATH", help="Destination directory. Defaults to INPUT_PATH."
    ),
    extension: str | None = typer.Option(
        None,
        "--extension",
        "-e",
        help="Source file extension (default: py). Use -e js for foo.js -> foo.json.",
    ),
    suffix: str | None = typer.Option(
        None, "--suffix", help="Text appended to source filenames (default: on)."
    ),
    export_name: str | None = typer.Option(
        None, "--export-name", help="Module attribute holding the data (default: exports)."
    ),
    mode: str | None = typer.Option(
        None, "--mode", help="Octal permissions for written files (default: 644)."
    ),
    debug: bool = typer.Option(False, "--debug", help="Show debug logs and full tracebacks."),
) -> None:
    """Convert every source module in INPUT_PATH to a JSON file.

    Each FILE.EXT is written as FILE.EXT + suffix, so a.py becomes a.pyon
    and, with --extension js, a.js becomes a.json. Per-file failures are
    reported and skipped; the exit code is 1 only when no eligible file
    exists.
    """
    from tojson.adapters.reporters import ConsoleReporter
    from tojson.application.use_cases import build_conversion_options, convert_directory
    from tojson.logging_utils import configure_logging
    from tojson.paths import resolve_invocation

    configure_logging(logging.DEBUG if debug else logging.WARNING)
    file_mode = _parse_mode(mode)
    reporter = ConsoleReporter()

    try:
        options = build_conversion_options(
            source_extension=extension,
            target_suffix=suffix,
            export_name=export_name,
            file_mode=file_mode,
        )
        config = resolve_invocation(input_path, output_path, reporter=reporter)
        convert_directory(config=config, options=options, reporter=reporter)
    except InvalidOptionError as exc:
        raise typer.BadParameter(str(exc)) from exc
    except ToJsonError as exc:
        raise typer.Exit(code=_print_error(exc, debug))


if __name__ == "__main__":
    app()
