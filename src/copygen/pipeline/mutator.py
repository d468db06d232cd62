# topmark:header:start
#
#   project      : Copygen
#   file         : mutator.py
#   file_relpath : src/copygen/pipeline/mutator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Mutator: prepend the header to a file by atomic replacement.

The new content is assembled in a temporary file next to the target and then
renamed over it:

1. open the original for reading;
2. create a temporary file in the target's directory (same filesystem, so the
   rename below is atomic);
3. write the header bytes, then stream the original bytes after them;
4. copy the original permission bits (best effort);
5. close the temporary file;
6. ``os.replace()`` it onto the original path.

Until step 6 succeeds the original file is untouched. Any failure before that
removes the temporary file and re-raises, so readers never observe a partially
written target and no stray temporary files are left behind.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import stat
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO

from copygen.config.logging import get_logger
from copygen.constants import TEMP_FILE_SUFFIX
from copygen.pipeline.builder import render_header_bytes
from copygen.pipeline.exclusion import normalize_path

if TYPE_CHECKING:
    from collections.abc import Callable

    from copygen.config.logging import CopygenLogger
    from copygen.pipeline.cache import HeaderCache

logger: CopygenLogger = get_logger(__name__)


def _discard(tmp_path: Path) -> None:
    """Remove a temporary file left over by a failed replacement."""
    with contextlib.suppress(OSError):
        tmp_path.unlink()
        logger.debug("Removed temporary file %s", tmp_path)


def _copy_permissions(src: BinaryIO, tmp_path: Path) -> None:
    """Apply the permission bits of ``src`` to ``tmp_path``, ignoring failures."""
    try:
        mode: int = stat.S_IMODE(os.fstat(src.fileno()).st_mode)
        os.chmod(tmp_path, mode)
    except OSError as exc:
        logger.debug("Could not preserve permissions on %s: %s", tmp_path, exc)


class FileMutator:
    """Insert headers into files that lack one.

    Args:
        cache (HeaderCache): Source of the header lines per prefix.
        notify (Callable[[str], None] | None): Receives ``"added header to <path>"``
            after each successful replacement.
    """

    def __init__(
        self,
        cache: HeaderCache,
        notify: Callable[[str], None] | None = None,
    ) -> None:
        self._cache = cache
        self._notify = notify

    def add_header(self, path: Path | str, prefix: str) -> None:
        """Rewrite ``path`` with the header for ``prefix`` prepended.

        Args:
            path (Path | str): File to modify.
            prefix (str): Comment prefix registered for the file's extension.

        Raises:
            OSError: If any step before or including the rename fails. The original
                file is unmodified in that case.
        """
        target = Path(path)
        header_bytes: bytes = render_header_bytes(self._cache.get(prefix))

        with open(target, "rb") as src:
            fd, tmp_name = tempfile.mkstemp(
                dir=target.parent,
                prefix=f".{target.name}.",
                suffix=TEMP_FILE_SUFFIX,
            )
            tmp_path = Path(tmp_name)
            try:
                with os.fdopen(fd, "wb") as tmp:
                    tmp.write(header_bytes)
                    shutil.copyfileobj(src, tmp)
                # The temporary file is closed before the rename.
                _copy_permissions(src, tmp_path)
            except BaseException:
                _discard(tmp_path)
                raise

        try:
            os.replace(tmp_path, target)
        except BaseException:
            _discard(tmp_path)
            raise

        logger.debug("Added %d header byte(s) to %s", len(header_bytes), target)
        if self._notify is not None:
            self._notify(f"added header to {normalize_path(target)}")
