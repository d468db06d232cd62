# topmark:header:start
#
#   project      : Copygen
#   file         : builder.py
#   file_relpath : src/copygen/pipeline/builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Builder: turn the raw header template into commented header lines.

The template is the configured text without comment markers. For a given comment
prefix, every template line becomes one header line:

- an empty template line becomes the bare prefix (``"//"``);
- any other line becomes ``prefix + " " + line`` (``"// Copyright ..."``).

Trailing bare-prefix lines are trimmed so a template ending in blank lines does
not leave dangling empty comments. The builder is pure: the same
(template, prefix) pair always yields the same tuple.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from copygen.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from copygen.config.logging import CopygenLogger

logger: CopygenLogger = get_logger(__name__)

# Header block separator: the header ends with a newline and is followed by one blank line.
HEADER_TERMINATOR: str = "\n\n"


def build_header(template: str, prefix: str) -> tuple[str, ...]:
    """Build the commented header lines for ``prefix``.

    Args:
        template (str): Raw multi-line header template.
        prefix (str): Line-comment token, e.g. ``"//"`` or ``"#"``.

    Returns:
        tuple[str, ...]: One entry per header line, without line terminators.
            Empty when the template only produces bare-prefix lines.
    """
    header: list[str] = [
        prefix if line == "" else f"{prefix} {line}" for line in template.split("\n")
    ]

    # Trim trailing empty comments
    while header and header[-1] == prefix:
        header.pop()

    logger.trace("build_header(prefix=%r): %d line(s)", prefix, len(header))
    return tuple(header)


def render_header_bytes(lines: Sequence[str]) -> bytes:
    """Return the bytes inserted at the top of a file for the given header lines.

    Args:
        lines (Sequence[str]): Header lines as returned by `build_header`.

    Returns:
        bytes: UTF-8 encoded header followed by a blank separator line.
    """
    return ("\n".join(lines) + HEADER_TERMINATOR).encode("utf-8")
