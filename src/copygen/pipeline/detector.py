# topmark:header:start
#
#   project      : Copygen
#   file         : detector.py
#   file_relpath : src/copygen/pipeline/detector.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Detector: does a file already start with the expected header?

The comparison is literal and line based. The file is read lazily; reading stops
at the first line that differs from the expected header, so only the leading
lines of large files are ever touched.

Lines are compared as bytes so that files in any encoding can be checked. A file
line is compared without its terminator: the trailing ``\\n`` and then a single
``\\r`` are removed, so CRLF files match a header built with LF.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from copygen.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from copygen.config.logging import CopygenLogger
    from copygen.pipeline.cache import HeaderCache

logger: CopygenLogger = get_logger(__name__)


def _strip_terminator(raw: bytes) -> bytes:
    if raw.endswith(b"\n"):
        raw = raw[:-1]
    if raw.endswith(b"\r"):
        raw = raw[:-1]
    return raw


class HeaderDetector:
    """Compare the leading lines of files with the header built for their prefix.

    Args:
        cache (HeaderCache): Source of the expected header lines.
    """

    def __init__(self, cache: HeaderCache) -> None:
        self._cache = cache

    def has_header(self, path: Path | str, prefix: str) -> bool:
        """Return True when ``path`` already starts with the header for ``prefix``.

        An empty template, or a template that builds to no lines, counts as present
        for every file.

        Args:
            path (Path | str): File to inspect.
            prefix (str): Comment prefix registered for the file's extension.

        Returns:
            bool: True if every header line matches the file's leading lines in order.

        Raises:
            OSError: If the file cannot be opened or read.
        """
        if self._cache.template == "":
            return True

        expected: tuple[str, ...] = self._cache.get(prefix)
        if not expected:
            return True

        with open(path, "rb") as fh:
            for index, header_line in enumerate(expected):
                raw: bytes = fh.readline()
                if not raw:
                    logger.trace(
                        "%s: EOF after %d of %d header line(s)", path, index, len(expected)
                    )
                    return False
                if _strip_terminator(raw) != header_line.encode("utf-8"):
                    logger.trace("%s: header line %d differs", path, index + 1)
                    return False

        return True
