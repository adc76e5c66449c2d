"""Shared pytest configuration, markers and source-module fixtures."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

WriteModule = Callable[..., Path]


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        parts = set(Path(str(item.fspath)).parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ``TOJSON_*`` variables from the host out of tests."""
    for name in (
        "TOJSON_SOURCE_EXTENSION",
        "TOJSON_TARGET_SUFFIX",
        "TOJSON_EXPORT_NAME",
        "TOJSON_FILE_MODE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_module(tmp_path: Path) -> WriteModule:
    """Return a factory writing a source module into ``tmp_path``.

    ``write_module("a.py", "exports = {'x': 1}")`` returns the file path.
    A ``directory`` keyword writes elsewhere.
    """

    def _write(name: str, body: str, directory: Path | None = None) -> Path:
        target = (directory or tmp_path) / name
        target.write_text(body + "\n", encoding="utf-8")
        return target

    return _write


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop handlers the CLI attached to the ``tojson`` logger."""
    yield
    logger = logging.getLogger("tojson")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
