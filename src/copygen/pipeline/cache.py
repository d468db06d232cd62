# topmark:header:start
#
#   project      : Copygen
#   file         : cache.py
#   file_relpath : src/copygen/pipeline/cache.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Memoized header lines, keyed by comment prefix.

Many files share a comment prefix, so the header for a prefix is built once and
reused for the rest of the run. Keys are prefixes rather than extensions: ``.c``,
``.go`` and ``.ts`` all share the ``//`` entry.

Concurrency:
    Lookups take no lock; a dict ``get`` never observes a half-written entry.
    A miss takes the exclusive lock and checks again before building, so concurrent
    misses for the same prefix run the builder once and all callers receive the
    same tuple. Entries are never replaced once stored.
"""

from __future__ import annotations

from threading import RLock
from typing import TYPE_CHECKING

from copygen.config.logging import get_logger
from copygen.pipeline.builder import build_header

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from copygen.config.logging import CopygenLogger

    HeaderBuilder = Callable[[str, str], tuple[str, ...]]

logger: CopygenLogger = get_logger(__name__)


class HeaderCache:
    """Per-run cache of built headers.

    Args:
        template (str): Raw header template shared by every entry.
        builder (HeaderBuilder | None): Callable ``(template, prefix) -> lines``.
            Defaults to [`build_header`][copygen.pipeline.builder.build_header].
    """

    def __init__(self, template: str, builder: HeaderBuilder | None = None) -> None:
        self._template: str = template
        self._builder: HeaderBuilder = builder or build_header
        self._entries: dict[str, tuple[str, ...]] = {}
        self._lock = RLock()

    @property
    def template(self) -> str:
        """The raw header template this cache builds from."""
        return self._template

    def get(self, prefix: str) -> tuple[str, ...]:
        """Return the header lines for ``prefix``, building them on first use.

        Args:
            prefix (str): Comment prefix.

        Returns:
            tuple[str, ...]: The built header lines.
        """
        lines: tuple[str, ...] | None = self._entries.get(prefix)
        if lines is not None:
            return lines

        with self._lock:
            # Another thread may have filled the entry while we waited for the lock.
            lines = self._entries.get(prefix)
            if lines is None:
                lines = tuple(self._builder(self._template, prefix))
                self._entries[prefix] = lines
                logger.debug("Cached header for prefix %r (%d line(s))", prefix, len(lines))
            return lines

    def warm(self, prefixes: Iterable[str]) -> None:
        """Build the header for every prefix in ``prefixes`` ahead of time.

        Args:
            prefixes (Iterable[str]): Comment prefixes to populate.
        """
        with self._lock:
            for prefix in prefixes:
                self.get(prefix)
        logger.debug("Warmed header cache: %d prefix(es)", len(self._entries))

    def __contains__(self, prefix: object) -> bool:
        return prefix in self._entries

    def __len__(self) -> int:
        return len(self._entries)
