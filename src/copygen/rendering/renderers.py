# topmark:header:start
#
#   project      : Copygen
#   file         : renderers.py
#   file_relpath : src/copygen/rendering/renderers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Concrete reporters for the human and JSON views.

- [`HumanReporter`][copygen.rendering.renderers.HumanReporter] prints each
  notification as a styled text line (blue when color is enabled).
- [`JsonReporter`][copygen.rendering.renderers.JsonReporter] prints one NDJSON
  object per notification, suitable for piping into other tools.

Use [`make_reporter`][copygen.rendering.renderers.make_reporter] to obtain the
reporter for a view type.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

import click

from copygen.rendering.api import Reporter, UnknownViewTypeError
from copygen.rendering.formats import ViewType

if TYPE_CHECKING:
    from collections.abc import Callable


class HumanReporter:
    """Write notifications as human-readable lines.

    Args:
        out (TextIO | None): Output stream. Defaults to `sys.stdout`.
        enable_color (bool): Emit ANSI styling.
    """

    def __init__(self, out: TextIO | None = None, *, enable_color: bool = True) -> None:
        self.out: TextIO = out or sys.stdout
        self.enable_color = enable_color

    def render(self, message: str) -> None:
        """Print ``message`` on its own line, styled blue."""
        click.echo(click.style(message, fg="blue"), file=self.out, color=self.enable_color)


class JsonReporter:
    """Write notifications as newline-delimited JSON objects.

    Args:
        out (TextIO | None): Output stream. Defaults to `sys.stdout`.
    """

    def __init__(self, out: TextIO | None = None) -> None:
        self.out: TextIO = out or sys.stdout

    def render(self, message: str) -> None:
        """Print ``{"message": ...}`` followed by a newline."""
        self.out.write(json.dumps({"message": message}) + "\n")
        self.out.flush()


def make_reporter(
    view_type: ViewType | str,
    *,
    out: TextIO | None = None,
    enable_color: bool = True,
) -> Reporter:
    """Return the reporter for ``view_type``.

    Args:
        view_type (ViewType | str): View to render, as enum member or its value.
        out (TextIO | None): Output stream shared by all reporters.
        enable_color (bool): Emit ANSI styling (human view only).

    Returns:
        Reporter: The reporter bound to ``out``.

    Raises:
        UnknownViewTypeError: If ``view_type`` does not name a known view.
    """
    try:
        view = ViewType(view_type)
    except ValueError as exc:
        raise UnknownViewTypeError(f"unknown view type: {view_type!r}") from exc

    factories: dict[ViewType, Callable[[], Reporter]] = {
        ViewType.HUMAN: lambda: HumanReporter(out, enable_color=enable_color),
        ViewType.JSON: lambda: JsonReporter(out),
    }
    return factories[view]()
