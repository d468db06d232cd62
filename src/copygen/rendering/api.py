# topmark:header:start
#
#   project      : Copygen
#   file         : api.py
#   file_relpath : src/copygen/rendering/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic reporting interface.

The engine emits one plain message per file that lacks the header: "would add
header to X" in dry-run mode, "added header to X" after a successful insertion.
It never styles these messages; styling belongs to the reporter.
"""

from __future__ import annotations

from typing import Protocol

from copygen.pipeline.errors import CopygenError


class Reporter(Protocol):
    """Sink for user-facing notifications.

    Implementations may raise ``OSError`` when the underlying stream fails; the
    engine decides whether that ends the run.
    """

    def render(self, message: str) -> None:
        """Emit a single notification."""
        ...


class UnknownViewTypeError(CopygenError, ValueError):
    """Raised when a reporter is requested for a view type that does not exist."""
