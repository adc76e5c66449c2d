"""Data sources evaluating source modules into exported values."""

from __future__ import annotations

import importlib.machinery
import importlib.util
import itertools
import logging
import sys
from pathlib import Path
from types import CodeType

from tojson.config import DEFAULT_EXPORT_NAME
from tojson.errors import ModuleLoadError, NullOrPrimitiveError

logger = logging.getLogger(__name__)

_module_ids = itertools.count()


class _UncachedSourceLoader(importlib.machinery.SourceFileLoader):
    """Source loader that neither reads nor writes ``__pycache__`` entries.

    Accepts any file extension, not only ``.py``.
    """

    def get_code(self, fullname: str) -> CodeType:
        del fullname
        return self.source_to_code(self.get_data(self.path), self.path)


class PythonModuleSource:
    """Execute a Python source file and read one of its globals.

    .. warning::
        Evaluating a source module runs arbitrary code. Only convert
        directories whose contents are trusted.

    Parameters
    ----------
    export_name : str, default="exports"
        Module attribute holding the exported value.
    """

    def __init__(self, export_name: str = DEFAULT_EXPORT_NAME) -> None:
        self.export_name = export_name

    def evaluate(self, source_path: Path, destination: Path) -> object:
        """Load ``source_path`` in a fresh module and return its export.

        Every call re-executes the file under a unique module name, which
        is only registered in ``sys.modules`` while the body runs. The
        file's directory is importable during that time, so helper
        modules next to it can be imported. A module calling
        ``sys.exit`` fails like any other raising module.

        Raises
        ------
        ModuleLoadError
            If the file cannot be read, compiled or executed.
        NullOrPrimitiveError
            If the module does not define the export attribute.
        """
        module_name = f"_tojson_source_{next(_module_ids)}"
        loader = _UncachedSourceLoader(module_name, str(source_path))
        spec = importlib.util.spec_from_file_location(
            module_name, source_path, loader=loader
        )
        if spec is None or spec.loader is None:
            raise ModuleLoadError(
                destination, f"Unable to load source module {source_path}."
            )
        module = importlib.util.module_from_spec(spec)
        search_dir = str(source_path.parent)
        sys.modules[module_name] = module
        sys.path.insert(0, search_dir)
        try:
            spec.loader.exec_module(module)
        except (Exception, SystemExit) as exc:
            raise ModuleLoadError(
                destination, f"{type(exc).__name__}: {exc}"
            ) from exc
        finally:
            sys.modules.pop(module_name, None)
            if search_dir in sys.path:
                sys.path.remove(search_dir)

        logger.debug("evaluated %s as module %s", source_path, module_name)
        if not hasattr(module, self.export_name):
            raise NullOrPrimitiveError(
                destination,
                f"{source_path.name} doesn't define '{self.export_name}'. Skipping it.",
            )
        return getattr(module, self.export_name)
