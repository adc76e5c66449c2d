"""Application use-cases orchestrating directory conversion."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import ValidationError

from tojson.adapters.sources import PythonModuleSource
from tojson.application.options import ConversionOptions
from tojson.application.ports import DataSource, OutputWriter, Reporter
from tojson.application.results import BatchResult, ConversionResult
from tojson.config import ConverterSettings, load_settings
from tojson.encode import check_exported_object, encode_json
from tojson.errors import ConversionError, InvalidOptionError, NoFilesFoundError
from tojson.infrastructure.writers import AtomicFileWriter
from tojson.schemas import InvocationConfig

logger = logging.getLogger(__name__)


def has_source_extension(filename: str, extension: str) -> bool:
    """Return whether the text after the last ``.`` matches ``extension``.

    The comparison is case-insensitive; names without a dot never match.
    """
    _, dot, suffix = filename.rpartition(".")
    return bool(dot) and suffix.lower() == extension.lower()


def destination_name(filename: str, suffix: str) -> str:
    """Append ``suffix`` to ``filename`` (``foo.js`` + ``on`` -> ``foo.json``)."""
    return filename + suffix


def find_candidates(input_path: str, extension: str) -> list[str]:
    """List regular files directly inside ``input_path`` with ``extension``.

    Entries keep directory-listing order. Subdirectories are skipped.
    """
    candidates: list[str] = []
    with os.scandir(input_path) as entries:
        for entry in entries:
            if not has_source_extension(entry.name, extension):
                continue
            if not entry.is_file():
                logger.debug("skipping non-file entry %s", entry.path)
                continue
            candidates.append(entry.name)
    return candidates


def convert_file(
    *,
    source_path: Path,
    destination: Path,
    options: ConversionOptions,
    source: DataSource | None = None,
    writer: OutputWriter | None = None,
) -> ConversionResult:
    """Use-case: evaluate one source module and write its JSON document.

    Raises
    ------
    ConversionError
        One of its subclasses, naming the failed step and ``destination``.
    """
    source = source or PythonModuleSource(export_name=options.export_name)
    writer = writer or AtomicFileWriter()

    exported = source.evaluate(source_path, destination)
    value = check_exported_object(exported, destination)
    payload = encode_json(value, destination)
    byte_length = writer.write(destination, payload, options.file_mode)
    return ConversionResult(
        output_file=destination,
        success=True,
        message=f"Successfully wrote {destination}. ({byte_length} bytes)",
        byte_length=byte_length,
        source_file=source_path,
    )


def convert_directory(
    *,
    config: InvocationConfig,
    options: ConversionOptions,
    reporter: Reporter,
    source: DataSource | None = None,
    writer: OutputWriter | None = None,
) -> BatchResult:
    """Use-case: convert every eligible file in a directory, one at a time.

    A failing file is reported and skipped; the batch always attempts
    every candidate.

    Raises
    ------
    NoFilesFoundError
        If the input directory has no eligible files.
    """
    source = source or PythonModuleSource(export_name=options.export_name)
    writer = writer or AtomicFileWriter()

    reporter.info(f"Finding files in directory: {config.input_path}")
    filenames = find_candidates(config.input_path, options.source_extension)
    if not filenames:
        raise NoFilesFoundError(
            f"There are no .{options.source_extension} files to compile."
        )
    reporter.info(
        f"Found {len(filenames)} .{options.source_extension} files: {', '.join(filenames)}"
    )

    batch = BatchResult()
    for filename in filenames:
        source_path = config.input_dir / filename
        destination = config.output_dir / destination_name(filename, options.target_suffix)
        try:
            result = convert_file(
                source_path=source_path,
                destination=destination,
                options=options,
                source=source,
                writer=writer,
            )
        except ConversionError as exc:
            logger.debug("conversion of %s failed", source_path, exc_info=True)
            result = ConversionResult(
                output_file=destination,
                success=False,
                message=f"Error: {exc}",
                source_file=source_path,
            )
            reporter.error(result.message)
        else:
            reporter.info(result.message)
        batch.results.append(result)
    return batch


def build_conversion_options(
    *,
    source_extension: str | None = None,
    target_suffix: str | None = None,
    export_name: str | None = None,
    file_mode: int | None = None,
    settings: ConverterSettings | None = None,
) -> ConversionOptions:
    """Build typed options from settings, preferring explicit values."""
    explicit = {
        "source_extension": source_extension,
        "target_suffix": target_suffix,
        "export_name": export_name,
        "file_mode": file_mode,
    }
    base = settings.model_dump() if settings is not None else {}
    for key, value in explicit.items():
        if value is not None:
            base[key] = value
    try:
        overrides = load_settings(**base)
    except ValidationError as exc:
        raise InvalidOptionError(f"Invalid conversion options: {exc}") from exc
    return ConversionOptions(
        source_extension=overrides.source_extension,
        target_suffix=overrides.target_suffix,
        export_name=overrides.export_name,
        file_mode=overrides.file_mode,
    )
