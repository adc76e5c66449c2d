"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of converting one source file."""

    output_file: Path
    success: bool
    message: str
    byte_length: int | None = None
    source_file: Path | None = None


@dataclass
class BatchResult:
    """Ordered per-file outcomes of a directory run."""

    results: list[ConversionResult] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return sum(1 for result in self.results if result.success)

    @property
    def failed(self) -> int:
        return sum(1 for result in self.results if not result.success)
