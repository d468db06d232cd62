# topmark:header:start
#
#   project      : Copygen
#   file         : comment_styles.py
#   file_relpath : src/copygen/registry/comment_styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Static file extension to line-comment prefix table.

Copygen only emits line comments: each header line is prefixed with the comment
token registered for the file's extension. Files whose extension is not listed are
never touched.

Notes:
    * The built-in table is exposed as a `MappingProxyType` and never changes
      during a run.
    * Callers that need a different set of file types (plugins, tests) pass their
      own mapping to [`Processor`][copygen.pipeline.walker.Processor] instead of
      mutating this one.
    * Extensions are matched case-sensitively and include the leading dot.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

_BUILTIN_COMMENT_PREFIXES: dict[str, str] = {
    # C family
    ".go": "//",
    ".c": "//",
    ".h": "//",
    ".cc": "//",
    ".cpp": "//",
    ".hpp": "//",
    ".cs": "//",
    ".java": "//",
    ".kt": "//",
    ".rs": "//",
    ".swift": "//",
    ".scala": "//",
    ".dart": "//",
    ".proto": "//",
    # Web
    ".js": "//",
    ".jsx": "//",
    ".mjs": "//",
    ".ts": "//",
    ".tsx": "//",
    ".scss": "//",
    # Pound-style
    ".py": "#",
    ".pyi": "#",
    ".rb": "#",
    ".pl": "#",
    ".sh": "#",
    ".bash": "#",
    ".zsh": "#",
    ".r": "#",
    ".R": "#",
    ".jl": "#",
    ".tf": "#",
    ".toml": "#",
    ".yaml": "#",
    ".yml": "#",
    # Double-dash
    ".sql": "--",
    ".lua": "--",
    ".hs": "--",
    # Others
    ".erl": "%",
    ".tex": "%",
    ".el": ";;",
    ".clj": ";;",
    ".vim": '"',
}

COMMENT_PREFIXES: Mapping[str, str] = MappingProxyType(_BUILTIN_COMMENT_PREFIXES)


def comment_prefix_for(
    path: Path | str,
    prefixes: Mapping[str, str] = COMMENT_PREFIXES,
) -> str | None:
    """Return the comment prefix registered for the extension of ``path``.

    Args:
        path (Path | str): File path; only its final suffix is considered.
        prefixes (Mapping[str, str]): Extension to prefix table to consult.

    Returns:
        str | None: The registered prefix, or None when the extension is unknown.
    """
    suffix: str = Path(path).suffix
    if not suffix:
        return None
    return prefixes.get(suffix)


def distinct_prefixes(prefixes: Mapping[str, str] = COMMENT_PREFIXES) -> tuple[str, ...]:
    """Return the distinct comment prefixes of a table, sorted.

    Several extensions share a prefix; the header cache is keyed by prefix, so this
    is the set of entries a fully warmed cache holds.

    Args:
        prefixes (Mapping[str, str]): Extension to prefix table.

    Returns:
        tuple[str, ...]: Sorted unique prefixes.
    """
    return tuple(sorted(set(prefixes.values())))
