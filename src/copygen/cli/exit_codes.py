# topmark:header:start
#
#   project      : Copygen
#   file         : exit_codes.py
#   file_relpath : src/copygen/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the Copygen CLI.

Copygen aligns with the BSD `sysexits` convention where practical, so that other tooling
can interpret failures consistently. The one deliberate divergence is `WOULD_CHANGE=2`,
which signals a dry run that found files lacking the header; this lets CI jobs fail
on missing headers. Tests must assert `result.exception is None` to disambiguate it
from Click's own usage errors (which also exit with 2).
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Copygen CLI.

    Attributes:
        SUCCESS: Successful execution; every eligible file has the header.
        FAILURE: Generic failure (non-specific error).
        WOULD_CHANGE: Dry run: headers would be added if ``--dry-run`` were dropped.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: Walking, reading or rewriting a file failed. Mirrors BSD
            ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration missing or malformed. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see class docstring

    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
