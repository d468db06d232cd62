# topmark:header:start
#
#   project      : Copygen
#   file         : test_renderers.py
#   file_relpath : tests/rendering/test_renderers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the human and JSON reporters and the reporter factory."""

from __future__ import annotations

import io
import json

import pytest

from copygen.pipeline.errors import CopygenError
from copygen.rendering import (
    HumanReporter,
    JsonReporter,
    UnknownViewTypeError,
    ViewType,
    make_reporter,
)


def test_human_reporter_plain_line_without_color() -> None:
    """Without color the message is printed verbatim on its own line."""
    out = io.StringIO()

    HumanReporter(out, enable_color=False).render("added header to a.go")

    assert out.getvalue() == "added header to a.go\n"


def test_human_reporter_styles_blue_with_color() -> None:
    """With color the line is wrapped in blue ANSI styling."""
    out = io.StringIO()

    HumanReporter(out, enable_color=True).render("would add header to a.go")

    value: str = out.getvalue()
    assert "\x1b[34m" in value
    assert "would add header to a.go" in value


def test_json_reporter_writes_ndjson() -> None:
    """Each notification becomes one JSON object per line."""
    out = io.StringIO()
    reporter = JsonReporter(out)

    reporter.render("would add header to a.go")
    reporter.render('added header to "quoted".go')

    lines: list[str] = out.getvalue().splitlines()
    assert [json.loads(line) for line in lines] == [
        {"message": "would add header to a.go"},
        {"message": 'added header to "quoted".go'},
    ]


@pytest.mark.parametrize(
    "view, expected",
    [
        (ViewType.HUMAN, HumanReporter),
        ("human", HumanReporter),
        (ViewType.JSON, JsonReporter),
        ("json", JsonReporter),
    ],
)
def test_make_reporter_selects_by_view(view: ViewType | str, expected: type) -> None:
    """Views may be given as enum members or their string values."""
    assert isinstance(make_reporter(view, out=io.StringIO()), expected)


@pytest.mark.parametrize("view", ["xml", "", "HUMAN"])
def test_make_reporter_rejects_unknown_view(view: str) -> None:
    """Unknown views fail loudly instead of silently rendering nothing."""
    with pytest.raises(UnknownViewTypeError, match="unknown view type") as excinfo:
        make_reporter(view)

    assert isinstance(excinfo.value, CopygenError)
    assert isinstance(excinfo.value, ValueError)
