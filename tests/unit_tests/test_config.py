"""Unit tests for converter settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tojson.config import ConverterSettings, load_settings, parse_file_mode


def test_defaults() -> None:
    """Use py sources, the ``on`` suffix and non-executable files."""
    settings = ConverterSettings()
    assert settings.source_extension == "py"
    assert settings.target_suffix == "on"
    assert settings.export_name == "exports"
    assert settings.file_mode == 0o644


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read ``TOJSON_*`` variables, parsing the mode as octal."""
    monkeypatch.setenv("TOJSON_SOURCE_EXTENSION", ".JS")
    monkeypatch.setenv("TOJSON_FILE_MODE", "775")
    settings = ConverterSettings()
    assert settings.source_extension == "js"
    assert settings.file_mode == 0o775


def test_load_settings_ignores_none_overrides() -> None:
    """Keep defaults for overrides that were not given."""
    settings = load_settings(export_name=None, target_suffix=".json")
    assert settings.export_name == "exports"
    assert settings.target_suffix == ".json"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"source_extension": " . "},
        {"export_name": "not-an-identifier"},
        {"target_suffix": "on/evil"},
        {"file_mode": 0o1000},
    ],
)
def test_invalid_settings_rejected(kwargs: dict[str, object]) -> None:
    """Reject unusable settings values."""
    with pytest.raises(ValidationError):
        ConverterSettings(**kwargs)


@pytest.mark.parametrize(("raw", "expected"), [("644", 0o644), ("0o775", 0o775), ("600", 0o600)])
def test_parse_file_mode(raw: str, expected: int) -> None:
    """Parse octal permission strings."""
    assert parse_file_mode(raw) == expected


@pytest.mark.parametrize("raw", ["9", "rw-r--r--", "1777"])
def test_parse_file_mode_rejects_bad_values(raw: str) -> None:
    """Reject non-octal or out-of-range modes."""
    with pytest.raises(ValueError):
        parse_file_mode(raw)
