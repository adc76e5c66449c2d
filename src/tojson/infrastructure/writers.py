"""Atomic destination file writer."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from tojson.errors import WriteError

logger = logging.getLogger(__name__)


class AtomicFileWriter:
    """Write to a sibling temp file, then ``os.replace`` it into place.

    An existing destination stays intact until the new content is
    complete, and is left untouched if any step fails.
    """

    def write(self, destination: Path, payload: bytes, mode: int) -> int:
        """Write ``payload`` to ``destination`` with permission ``mode``.

        Returns
        -------
        int
            Number of bytes written.

        Raises
        ------
        WriteError
            If the temp file cannot be created, written, chmod-ed or moved.
        """
        temp_path: Path | None = None
        try:
            fd, temp_name = tempfile.mkstemp(
                prefix=f".{destination.name}.", suffix=".tmp", dir=destination.parent
            )
            temp_path = Path(temp_name)
            with os.fdopen(fd, "wb") as handle:
                handle.write(payload)
            os.chmod(temp_path, mode)
            os.replace(temp_path, destination)
        except OSError as exc:
            raise WriteError(
                destination, f"Unable to write to output file: {exc}. Skipping it."
            ) from exc
        finally:
            if temp_path is not None and temp_path.exists():
                temp_path.unlink()

        logger.debug("wrote %d bytes to %s (mode %o)", len(payload), destination, mode)
        return len(payload)
