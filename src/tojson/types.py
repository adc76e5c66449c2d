"""Shared type aliases for exported data."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

type ExportedObject = Mapping[str, object] | Sequence[object]
