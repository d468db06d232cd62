# topmark:header:start
#
#   project      : Copygen
#   file         : main.py
#   file_relpath : src/copygen/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Copygen command line entry point.

Adds the configured header to every eligible file below PATH:

    $ copygen .

Preview which files would change, without writing anything (exits with
``WOULD_CHANGE`` when some files lack the header):

    $ copygen --dry-run src

Emit one NDJSON object per notification:

    $ copygen --dry-run --format json .
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from copygen.cli.console import ClickConsole
from copygen.cli.errors import CopygenFileNotFoundError, from_engine_error
from copygen.cli.exit_codes import ExitCode
from copygen.cli.options import (
    CONTEXT_SETTINGS,
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_log_level,
    resolve_verbosity,
)
from copygen.config import load_config
from copygen.config.logging import get_logger, setup_logging
from copygen.constants import COPYGEN_VERSION
from copygen.pipeline.errors import CopygenError
from copygen.pipeline.walker import Processor
from copygen.rendering import ViewType, make_reporter

if TYPE_CHECKING:
    from copygen.config import Config
    from copygen.config.logging import CopygenLogger
    from copygen.pipeline.walker import ProcessSummary
    from copygen.rendering import Reporter

logger: CopygenLogger = get_logger(__name__)


@click.command(
    name="copygen",
    context_settings=CONTEXT_SETTINGS,
    help="Add the configured copyright header to source files below PATH.",
    epilog="""\
Configuration is read from --config, .copygen.toml, .copygen.yaml, or
[tool.copygen] in pyproject.toml.

Examples:

  # Preview which files would change (dry-run)
  copygen --dry-run .

  # Add missing headers in-place
  copygen src
""",
)
@click.argument("path", type=click.Path(path_type=Path))
@click.option("--dry-run", is_flag=True, help="Report files lacking the header; write nothing.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Configuration file (defaults to .copygen.toml, .copygen.yaml or pyproject.toml).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([v.value for v in ViewType]),
    default=ViewType.HUMAN.value,
    show_default=True,
    help="Reporting view.",
)
@click.option(
    "--strict-reporting",
    is_flag=True,
    help="Abort the run when a notification cannot be written.",
)
@common_verbose_options
@common_color_options
@click.version_option(COPYGEN_VERSION, "--version", prog_name="copygen")
@click.pass_context
def cli(
    ctx: click.Context,
    path: Path,
    dry_run: bool,
    config_path: Path | None,
    output_format: str,
    strict_reporting: bool,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the Copygen CLI."""
    ctx.obj = ctx.obj or {}

    verbosity: int = resolve_verbosity(verbose, quiet)
    setup_logging(level=resolve_log_level(verbosity))

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(
        cli_mode=effective_color_mode, output_format=output_format
    )
    ctx.color = enable_color

    # Banners would corrupt the NDJSON stream; mute them in the JSON view.
    console = ClickConsole(
        enable_color=enable_color,
        verbosity=verbosity if output_format == ViewType.HUMAN.value else -1,
    )
    ctx.obj["console"] = console

    if not path.exists():
        raise CopygenFileNotFoundError(f"path {path} does not exist")

    try:
        config: Config = load_config(config_path)
        reporter: Reporter = make_reporter(output_format, enable_color=enable_color)
    except CopygenError as exc:
        raise from_engine_error(exc) from exc

    console.print(console.styled(f'Using "{config.source}"', fg="blue"))
    console.print()
    console.print(console.styled(f'Processing "{path}"', fg="blue"))

    processor = Processor(
        config,
        path,
        reporter,
        dry_run=dry_run,
        base_dir=config.source.parent if config.source else None,
        strict_reporting=strict_reporting,
    )
    try:
        summary: ProcessSummary = processor.process()
    except CopygenError as exc:
        logger.debug("Run aborted: %r", exc)
        raise from_engine_error(exc) from exc

    if verbosity > 0:
        console.print(
            f"{summary.checked} file(s) checked, {summary.present} already headered, "
            f"{summary.added} updated, {summary.would_add} would be updated."
        )

    if dry_run and summary.would_add:
        ctx.exit(ExitCode.WOULD_CHANGE)


if __name__ == "__main__":
    cli()
