"""Byte-for-byte copy of a note into the posts directory."""

import logging
import os
import shutil
from pathlib import Path

from notepub.core.errors import CopyError

logger = logging.getLogger(__name__)


def copy_file(src: Path, dst: Path) -> None:
    """Copy ``src`` to ``dst`` and force the data to disk.

    ``dst`` is created or truncated. Its parent directory must exist.
    A failed copy may leave a partial ``dst`` behind.

    Raises:
        CopyError: If opening, reading, writing or syncing fails.
    """
    try:
        with open(src, "rb") as fin, open(dst, "wb") as fout:
            shutil.copyfileobj(fin, fout)
            fout.flush()
            os.fsync(fout.fileno())
    except OSError as exc:
        raise CopyError(f"failed to copy file: {exc}") from exc
    logger.debug("Copied %s -> %s", Path(src), Path(dst))
