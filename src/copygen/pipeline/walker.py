# topmark:header:start
#
#   project      : Copygen
#   file         : walker.py
#   file_relpath : src/copygen/pipeline/walker.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Walk a directory tree and add the configured header where it is missing.

[`Processor`][copygen.pipeline.walker.Processor] is the orchestrator of the
engine. For every regular file below the root it:

1. looks up the comment prefix for the file's extension and skips unknown types;
2. skips excluded paths;
3. checks the leading lines for the expected header;
4. reports the file (dry-run) or prepends the header (apply).

The walk is sequential and fail-fast: the first traversal, detection or mutation
error aborts the run with a [`CopygenError`][copygen.pipeline.errors.CopygenError]
subclass that wraps the underlying ``OSError``. Skipped and already-compliant
files produce no report.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from copygen.config.logging import get_logger
from copygen.constants import WARM_CACHE_MAX_TEMPLATE_SIZE
from copygen.pipeline.cache import HeaderCache
from copygen.pipeline.detector import HeaderDetector
from copygen.pipeline.errors import (
    AddHeaderError,
    CheckHeaderError,
    ReportingError,
    TraversalError,
)
from copygen.pipeline.exclusion import ExclusionMatcher, normalize_path
from copygen.pipeline.mutator import FileMutator
from copygen.registry.comment_styles import (
    COMMENT_PREFIXES,
    comment_prefix_for,
    distinct_prefixes,
)

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from copygen.config.logging import CopygenLogger
    from copygen.config.model import Config
    from copygen.rendering.api import Reporter

logger: CopygenLogger = get_logger(__name__)


@dataclass
class ProcessSummary:
    """Counts collected during one run.

    Attributes:
        checked (int): Candidate files whose header was checked.
        present (int): Files that already carried the header.
        would_add (int): Files reported in dry-run mode.
        added (int): Files that received the header.
    """

    checked: int = 0
    present: int = 0
    would_add: int = 0
    added: int = 0


class Processor:
    """Add the configured header to every eligible file below ``root``.

    Args:
        config (Config): Header template and exclusion patterns.
        root (Path | str): Directory (or single file) to process.
        reporter (Reporter): Sink for "would add" / "added" notifications.
        dry_run (bool): Report files lacking the header instead of modifying them.
        comment_prefixes (Mapping[str, str]): Extension to comment prefix table.
        base_dir (Path | None): Directory exclusion patterns are relative to.
            Defaults to ``root`` (or its parent when ``root`` is a file).
        strict_reporting (bool): Abort the run when the reporter fails instead of
            logging the failure and continuing.
    """

    def __init__(
        self,
        config: Config,
        root: Path | str,
        reporter: Reporter,
        *,
        dry_run: bool = False,
        comment_prefixes: Mapping[str, str] = COMMENT_PREFIXES,
        base_dir: Path | None = None,
        strict_reporting: bool = False,
    ) -> None:
        self.config = config
        self.root = Path(root)
        self.dry_run = dry_run
        self.strict_reporting = strict_reporting
        self._reporter = reporter
        self._prefixes: Mapping[str, str] = comment_prefixes

        if base_dir is None:
            base_dir = self.root if not self.root.is_file() else self.root.parent
        self.cache = HeaderCache(config.header)
        self.exclusions = ExclusionMatcher(config.exclude, base=base_dir)
        self.detector = HeaderDetector(self.cache)
        self.mutator = FileMutator(self.cache, notify=self._notify)

    def process(self) -> ProcessSummary:
        """Process every eligible file below the root.

        Returns:
            ProcessSummary: Counts for the completed run.

        Raises:
            TraversalError: If an entry of the tree cannot be listed.
            CheckHeaderError: If a candidate file cannot be read.
            AddHeaderError: If inserting a header fails.
            ReportingError: If the reporter fails while ``strict_reporting`` is set.
        """
        if len(self.config.header) < WARM_CACHE_MAX_TEMPLATE_SIZE:
            self.cache.warm(distinct_prefixes(self._prefixes))

        summary = ProcessSummary()
        for path in self._iter_files():
            self._process_file(path, summary)

        logger.info(
            "Processed %s: checked=%d present=%d would_add=%d added=%d",
            self.root,
            summary.checked,
            summary.present,
            summary.would_add,
            summary.added,
        )
        return summary

    def _process_file(self, path: Path, summary: ProcessSummary) -> None:
        prefix: str | None = comment_prefix_for(path, self._prefixes)
        if prefix is None or self.exclusions.is_excluded(path):
            logger.trace("Skipping %s", path)
            return

        summary.checked += 1
        try:
            has_header: bool = self.detector.has_header(path, prefix)
        except OSError as exc:
            raise CheckHeaderError(path, exc) from exc

        if has_header:
            summary.present += 1
            return

        if self.dry_run:
            summary.would_add += 1
            self._notify(f"would add header to {normalize_path(path)}")
            return

        try:
            self.mutator.add_header(path, prefix)
        except OSError as exc:
            raise AddHeaderError(path, exc) from exc
        summary.added += 1

    def _iter_files(self) -> Iterator[Path]:
        """Yield regular files below the root in sorted order."""
        if self.root.is_file():
            yield self.root
            return

        def _raise(exc: OSError) -> None:
            raise TraversalError(exc.filename or self.root, exc) from exc

        # Walk errors are raised through onerror; os.walk would otherwise skip them.
        for dirpath, dirnames, filenames in os.walk(self.root, onerror=_raise):
            dirnames.sort()
            for name in sorted(filenames):
                path = Path(dirpath) / name
                if path.is_symlink() or not path.is_file():
                    logger.debug("Skipping non-regular file %s", path)
                    continue
                yield path

    def _notify(self, message: str) -> None:
        """Send one notification to the reporter; failures are not fatal by default."""
        try:
            self._reporter.render(message)
        except OSError as exc:
            if self.strict_reporting:
                raise ReportingError(f"report: {exc}") from exc
            logger.warning("Could not report %r: %s", message, exc)
