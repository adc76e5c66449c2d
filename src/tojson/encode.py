"""Shape checks and JSON encoding for exported values."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

from tojson.errors import (
    EmptyObjectError,
    NotAnObjectError,
    NullOrPrimitiveError,
    SerializationError,
)
from tojson.types import ExportedObject

_PRIMITIVES = (str, bytes, int, float, bool)


def check_exported_object(value: object, destination: Path) -> ExportedObject:
    """Ensure the exported value is a non-empty mapping or list.

    Parameters
    ----------
    value : object
        Value exported by the source module.
    destination : Path
        Destination path used in error messages.

    Returns
    -------
    ExportedObject
        ``value``, narrowed to a mapping or sequence.

    Raises
    ------
    NullOrPrimitiveError
        If ``value`` is ``None`` or a scalar.
    NotAnObjectError
        If ``value`` is any other non-composite object.
    EmptyObjectError
        If ``value`` has no keys or items.
    """
    if value is None or isinstance(value, _PRIMITIVES):
        raise NullOrPrimitiveError(
            destination,
            f"didn't return an object (got {type(value).__name__}). Skipping it.",
        )
    if not isinstance(value, (Mapping, list, tuple)):
        raise NotAnObjectError(
            destination,
            f"exports a {type(value).__name__}, not an object. Skipping it.",
        )
    if len(value) == 0:
        raise EmptyObjectError(destination, "returns an empty object. Skipping it.")
    return value


def encode_json(value: ExportedObject, destination: Path) -> bytes:
    """Encode ``value`` as compact UTF-8 JSON.

    Raises
    ------
    SerializationError
        If a member is not JSON-serializable, the structure is circular
        or it holds a non-finite float.
    """
    try:
        document = json.dumps(
            value,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError, RecursionError) as exc:
        raise SerializationError(
            destination, f"Unable to stringify: {exc}. Skipping it."
        ) from exc
    return document.encode("utf-8")
