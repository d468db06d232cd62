# topmark:header:start
#
#   project      : Copygen
#   file         : errors.py
#   file_relpath : src/copygen/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Copygen CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Engine errors are translated with
    [`from_engine_error`][copygen.cli.errors.from_engine_error].

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from copygen.cli.exit_codes import ExitCode
from copygen.config.model import ConfigError
from copygen.pipeline.errors import CopygenError, ReportingError, StageError
from copygen.rendering.api import UnknownViewTypeError


class CopygenCliError(click.ClickException):
    """Base class for all Copygen CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            - Unlike Click's default, this method does not add color.
            - Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class CopygenUsageError(CopygenCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class CopygenConfigError(CopygenCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class CopygenFileNotFoundError(CopygenCliError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class CopygenIOError(CopygenCliError):
    """Error for failures while walking, reading or rewriting files."""

    exit_code = ExitCode.IO_ERROR


def from_engine_error(exc: CopygenError) -> CopygenCliError:
    """Translate an engine error into the CLI error carrying its exit code.

    Args:
        exc (CopygenError): Error raised by configuration loading or processing.

    Returns:
        CopygenCliError: The CLI error to raise.
    """
    if isinstance(exc, ConfigError):
        return CopygenConfigError(str(exc))
    if isinstance(exc, UnknownViewTypeError):
        return CopygenUsageError(str(exc))
    if isinstance(exc, (StageError, ReportingError)):
        return CopygenIOError(str(exc))
    return CopygenCliError(str(exc))
