"""Unit tests for export shape checks and JSON encoding."""

from __future__ import annotations

import json
import math
from collections import OrderedDict
from pathlib import Path

import pytest

from tojson.encode import check_exported_object, encode_json
from tojson.errors import (
    EmptyObjectError,
    NotAnObjectError,
    NullOrPrimitiveError,
    SerializationError,
)

DEST = Path("/out/data.json")


@pytest.mark.parametrize("value", [None, "text", b"raw", 3, 2.5, True, False])
def test_scalars_are_rejected(value: object) -> None:
    """Reject missing and scalar exports."""
    with pytest.raises(NullOrPrimitiveError, match="didn't return an object"):
        check_exported_object(value, DEST)


@pytest.mark.parametrize("value", [{1, 2}, object(), len])
def test_non_composites_are_rejected(value: object) -> None:
    """Reject exports that are neither mappings nor lists."""
    with pytest.raises(NotAnObjectError):
        check_exported_object(value, DEST)


@pytest.mark.parametrize("value", [{}, [], ()])
def test_empty_objects_are_rejected(value: object) -> None:
    """Reject exports without keys or items."""
    with pytest.raises(EmptyObjectError, match="empty object"):
        check_exported_object(value, DEST)


def test_error_message_names_destination() -> None:
    """Embed the destination path in the failure message."""
    with pytest.raises(EmptyObjectError) as info:
        check_exported_object({}, DEST)
    assert str(DEST) in str(info.value)
    assert info.value.destination == str(DEST)


@pytest.mark.parametrize("value", [{"x": 1}, [1, 2], OrderedDict(a=1)])
def test_composites_pass_through(value: object) -> None:
    """Return accepted exports unchanged."""
    assert check_exported_object(value, DEST) is value


def test_encode_is_compact_utf8() -> None:
    """Encode without whitespace and keep non-ASCII characters."""
    payload = encode_json({"x": 1, "name": "café", "items": [1, None, True]}, DEST)
    assert payload == '{"x":1,"name":"café","items":[1,null,true]}'.encode("utf-8")
    assert json.loads(payload) == {"x": 1, "name": "café", "items": [1, None, True]}


def test_encode_rejects_unserializable_member() -> None:
    """Fail on members the JSON encoder cannot represent."""
    with pytest.raises(SerializationError, match="Unable to stringify"):
        encode_json({"callback": print}, DEST)


def test_encode_rejects_circular_reference() -> None:
    """Fail on self-referencing structures."""
    data: dict[str, object] = {"a": 1}
    data["self"] = data
    with pytest.raises(SerializationError) as info:
        encode_json(data, DEST)
    assert isinstance(info.value.__cause__, ValueError)


def test_encode_rejects_nan() -> None:
    """Refuse to emit NaN, which is not valid JSON."""
    with pytest.raises(SerializationError):
        encode_json({"value": math.nan}, DEST)
