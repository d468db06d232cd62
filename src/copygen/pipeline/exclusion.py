# topmark:header:start
#
#   project      : Copygen
#   file         : exclusion.py
#   file_relpath : src/copygen/pipeline/exclusion.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exclusion matching for walked paths.

A path is excluded when any configured pattern matches it. Two kinds of match
are tried per pattern, in order:

1. **Glob match**: the pattern is compiled as a git wildmatch pattern (the
   `.gitignore` dialect, via `pathspec`) anchored at the base directory, so it
   must match the whole normalized path. ``*`` does not cross ``/`` and a bare
   ``main.go`` only matches at the top level. A pattern that fails to compile
   is skipped, never raised, and does not take part in the prefix test either.
2. **Directory prefix**: a pattern that contains ``**`` or ends with ``/`` also
   names a directory. Its directory form drops trailing ``/`` and ``/**``
   segments and ends with exactly one ``/``; the path (with a ``/`` appended)
   must start with it. ``vendor/**`` excludes ``vendor/lib/file.go`` but not
   ``src/vendor_utils.go``.

Paths are matched in POSIX form, relative to the matcher's base directory when
they lie below it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from threading import RLock
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from copygen.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from copygen.config.logging import CopygenLogger

logger: CopygenLogger = get_logger(__name__)


@dataclass(frozen=True)
class CompiledPattern:
    """A configured exclusion pattern and its compiled forms.

    Attributes:
        raw (str): The pattern as configured.
        spec (PathSpec | None): Compiled glob, or None when the pattern is malformed.
        dir_prefix (str | None): Directory form (``"vendor/"``) for directory patterns.
    """

    raw: str
    spec: PathSpec | None
    dir_prefix: str | None

    def matches(self, norm_path: str) -> bool:
        """Return True when the normalized path satisfies this pattern."""
        if self.spec is not None and self.spec.match_file(norm_path):
            return True
        if self.dir_prefix is not None:
            return (norm_path + "/").startswith(self.dir_prefix)
        return False


def directory_form(pattern: str) -> str | None:
    """Return the directory prefix named by ``pattern``, if it names one.

    Args:
        pattern (str): Raw exclusion pattern.

    Returns:
        str | None: ``"<dir>/"`` for patterns containing ``**`` or ending in ``/``;
            None for plain globs and for patterns whose directory part is itself a
            wildcard (``"**"``, ``"**/gen/"``).
    """
    if "**" not in pattern and not pattern.endswith("/"):
        return None
    base: str = pattern.strip("/")
    while base.endswith("/**"):
        base = base[: -len("/**")].rstrip("/")
    # The prefix test is literal; wildcards left in the base are handled by the glob.
    if not base or "*" in base:
        return None
    return base + "/"


def _malformed_reason(pattern: str) -> str | None:
    """Return why ``pattern`` is not a valid glob, or None when it is."""
    index = 0
    while index < len(pattern):
        char = pattern[index]
        if char == "\\":
            if index == len(pattern) - 1:
                return "trailing escape"
            index += 2
            continue
        if char == "[" and "]" not in pattern[index + 1 :]:
            return "unterminated [ class"
        index += 1
    return None


def compile_pattern(pattern: str) -> CompiledPattern:
    """Compile one exclusion pattern.

    The glob is anchored at the base directory, so it has to match the whole
    normalized path: ``main.go`` excludes ``main.go`` but not ``cmd/main.go``, and
    ``*`` never crosses a ``/``.

    Args:
        pattern (str): Raw exclusion pattern.

    Returns:
        CompiledPattern: The compiled pattern. A malformed pattern has neither a
            glob nor a directory prefix, so it never matches.
    """
    reason: str | None = _malformed_reason(pattern)
    if reason is not None:
        logger.debug("Ignoring invalid exclude pattern %r: %s", pattern, reason)
        return CompiledPattern(raw=pattern, spec=None, dir_prefix=None)

    anchored: str = pattern if pattern.startswith("/") else "/" + pattern
    try:
        spec: PathSpec = PathSpec.from_lines(GitWildMatchPattern, [anchored])
    except ValueError as exc:
        # Malformed patterns never match; they do not abort the run.
        logger.debug("Ignoring invalid exclude pattern %r: %s", pattern, exc)
        return CompiledPattern(raw=pattern, spec=None, dir_prefix=None)
    return CompiledPattern(raw=pattern, spec=spec, dir_prefix=directory_form(pattern))


def normalize_path(path: Path | str, base: Path | None = None) -> str:
    """Return the canonical forward-slash form of ``path`` used for matching.

    Args:
        path (Path | str): Path to normalize.
        base (Path | None): When given and ``path`` lies below it, the result is
            relative to ``base``.

    Returns:
        str: Normalized POSIX path without ``./`` segments.
    """
    if base is not None:
        try:
            rel = Path(os.path.abspath(path)).relative_to(os.path.abspath(base))
            return rel.as_posix()
        except ValueError:
            pass
    return Path(os.path.normpath(path)).as_posix()


class ExclusionMatcher:
    """Decide whether a path is excluded from processing.

    The pattern list is compiled once and never changes afterwards; the lock only
    serializes readers against a (theoretical) concurrent reconfiguration.

    Args:
        patterns (Iterable[str]): Exclusion patterns in configuration order.
        base (Path | None): Directory that relative patterns are anchored to.
    """

    def __init__(self, patterns: Iterable[str], base: Path | None = None) -> None:
        self._lock = RLock()
        self._base: Path | None = base
        self._patterns: tuple[CompiledPattern, ...] = tuple(
            compile_pattern(p) for p in patterns
        )
        logger.debug("ExclusionMatcher: %d pattern(s), base=%s", len(self._patterns), base)

    @property
    def patterns(self) -> tuple[str, ...]:
        """The configured patterns, in order."""
        return tuple(cp.raw for cp in self._patterns)

    def is_excluded(self, path: Path | str) -> bool:
        """Return True when ``path`` matches any exclusion pattern.

        Args:
            path (Path | str): Path encountered during the walk.

        Returns:
            bool: True on the first matching pattern; False when none matches.
        """
        norm_path: str = normalize_path(path, self._base)
        with self._lock:
            for compiled in self._patterns:
                if compiled.matches(norm_path):
                    logger.trace("Excluded %s by pattern %r", norm_path, compiled.raw)
                    return True
        return False
