"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator


class InvocationConfig(BaseModel):
    """Validated input/output directories for one run.

    Both paths are kept as strings ending in a path separator, so
    destination names can be formed by plain concatenation.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    input_path: str
    output_path: str

    @field_validator("input_path", "output_path")
    @classmethod
    def _require_trailing_separator(cls, value: str) -> str:
        if not value:
            raise ValueError("paths cannot be empty.")
        if not value.endswith(os.sep):
            raise ValueError(f"path '{value}' must end with '{os.sep}'.")
        return value

    @property
    def input_dir(self) -> Path:
        return Path(self.input_path)

    @property
    def output_dir(self) -> Path:
        return Path(self.output_path)
