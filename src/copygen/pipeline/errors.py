# topmark:header:start
#
#   project      : Copygen
#   file         : errors.py
#   file_relpath : src/copygen/pipeline/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Errors raised by the header-processing engine.

Every failure that ends a run derives from [`CopygenError`][copygen.pipeline.errors.CopygenError].
The stage-specific subclasses prefix their message with the stage name so that the
single error the caller receives identifies where the run stopped. The underlying
``OSError`` is chained as ``__cause__``.

The CLI maps these errors onto exit codes in `copygen.cli.errors`.
"""

from __future__ import annotations

from pathlib import Path


class CopygenError(Exception):
    """Base class for all errors raised while processing a tree."""


class StageError(CopygenError):
    """Failure of one processing stage for one path.

    Args:
        path (Path | str): The path being processed when the stage failed.
        reason (BaseException | str): The underlying exception or a description.

    Attributes:
        stage (str): Stage label used as message prefix.
        path (Path): The path being processed when the stage failed.
    """

    stage: str = "process"

    def __init__(self, path: Path | str, reason: BaseException | str) -> None:
        self.path = Path(path)
        super().__init__(f"{self.stage}: {reason}")


class TraversalError(StageError):
    """An entry of the tree could not be listed or entered."""

    stage = "walk"


class CheckHeaderError(StageError):
    """A candidate file could not be opened or read while looking for its header."""

    stage = "check header"


class AddHeaderError(StageError):
    """Inserting the header failed; the original file is left unmodified."""

    stage = "add header"


class ReportingError(CopygenError):
    """The reporter failed to emit a notification while strict reporting is enabled."""
