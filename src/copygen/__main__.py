# topmark:header:start
#
#   project      : Copygen
#   file         : __main__.py
#   file_relpath : src/copygen/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Copygen via ``python -m copygen``.

It delegates directly to :func:`copygen.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how Copygen is launched.

Examples:
    Run Copygen using the module interface::

        python -m copygen --dry-run .
"""

from __future__ import annotations

from copygen.cli.main import cli

if __name__ == "__main__":
    cli()
