"""
Unit file persistence — atomic write of a generated unit.

The unit is written to a temp file in the target directory, then
renamed over the final name. A reader (or a failed run) never sees a
half-written unit, and rerunning over the same input rewrites the same
bytes.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from sslhgen.core.models.template import GeneratedFile

logger = logging.getLogger(__name__)

UNIT_FILE_MODE = 0o644


class OutputError(Exception):
    """Raised when the generated unit cannot be written."""


def write_unit_file(directory: Path, generated: GeneratedFile) -> Path:
    """Write a GeneratedFile into the unit directory.

    The directory is not created: the service manager hands the
    generator existing directories, anything else is a caller error.

    Args:
        directory: Output directory.
        generated: File to write (``path`` is a bare file name).

    Returns:
        Path of the written unit.

    Raises:
        OutputError: If the directory is missing or the write fails.
    """
    target = directory / generated.path

    if not directory.is_dir():
        raise OutputError(f"Cannot write {target}: {directory} is not a directory")

    try:
        fd, tmp_path = tempfile.mkstemp(
            dir=directory,
            prefix=f".{generated.path}_",
            suffix=".tmp",
        )
        tmp = Path(tmp_path)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(generated.content)
            tmp.chmod(UNIT_FILE_MODE)
            tmp.replace(target)
        except Exception:
            tmp.unlink(missing_ok=True)
            raise
    except OSError as e:
        logger.debug("Failed to write unit %s: %s", target, e)
        raise OutputError(f"Cannot write {target}: {e}") from e

    logger.info("Wrote %s (%s)", target, generated.reason)
    return target
