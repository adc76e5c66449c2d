"""Environment-driven converter settings."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SOURCE_EXTENSION = "py"
DEFAULT_TARGET_SUFFIX = "on"
DEFAULT_EXPORT_NAME = "exports"
DEFAULT_FILE_MODE = 0o644


class ConverterSettings(BaseSettings):
    """Converter defaults, overridable through ``TOJSON_*`` variables."""

    source_extension: str = DEFAULT_SOURCE_EXTENSION
    target_suffix: str = DEFAULT_TARGET_SUFFIX
    export_name: str = DEFAULT_EXPORT_NAME
    file_mode: int = Field(default=DEFAULT_FILE_MODE, ge=0, le=0o777)

    model_config = SettingsConfigDict(
        env_prefix="TOJSON_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("source_extension")
    @classmethod
    def _normalize_extension(cls, value: str) -> str:
        normalized = value.strip().lstrip(".").lower()
        if not normalized:
            raise ValueError("source_extension cannot be empty.")
        return normalized

    @field_validator("target_suffix")
    @classmethod
    def _validate_suffix(cls, value: str) -> str:
        if not value or "/" in value or "\\" in value:
            raise ValueError("target_suffix must be a non-empty filename fragment.")
        return value

    @field_validator("export_name")
    @classmethod
    def _validate_export_name(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError(f"export_name '{value}' is not a valid identifier.")
        return value

    @field_validator("file_mode", mode="before")
    @classmethod
    def _parse_mode(cls, value: object) -> object:
        if isinstance(value, str):
            return parse_file_mode(value)
        return value


def parse_file_mode(raw: str) -> int:
    """Parse an octal permission string such as ``644`` or ``0o775``.

    Raises
    ------
    ValueError
        If the value is not octal or falls outside ``0..0o777``.
    """
    text = raw.strip().lower()
    if text.startswith("0o"):
        text = text[2:]
    mode = int(text, 8)
    if not 0 <= mode <= 0o777:
        raise ValueError(f"file mode {raw!r} is outside 0..777.")
    return mode


def load_settings(**overrides: object) -> ConverterSettings:
    """Load settings from the environment, applying non-``None`` overrides."""
    return ConverterSettings(
        **{key: value for key, value in overrides.items() if value is not None}
    )
