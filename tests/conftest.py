# topmark:header:start
#
#   project      : Copygen
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Copygen test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
and provides small helpers shared by the engine and CLI tests:

- `write()` creates a file (and its parents) with the given content;
- `make_config()` returns a frozen `Config`;
- `RecordingReporter` collects notifications instead of printing them.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, cast

import pytest

from copygen.config import Config
from copygen.config import logging as copygen_logging
from copygen.constants import LOG_LEVEL_ENV_VAR

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]

HEADER_TEMPLATE: str = "Copyright (c) 2025 Example Corp.\nSPDX-License-Identifier: MIT"


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_copygen_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure Copygen's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so detailed output is captured on failures.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    copygen_logging.setup_logging(level=copygen_logging.TRACE_LEVEL)


class RecordingReporter:
    """Reporter double that records every notification."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def render(self, message: str) -> None:
        self.messages.append(message)


class FailingReporter:
    """Reporter double whose stream is broken."""

    def render(self, message: str) -> None:
        raise BrokenPipeError(32, "Broken pipe")


@pytest.fixture
def reporter() -> RecordingReporter:
    """Return a fresh `RecordingReporter`."""
    return RecordingReporter()


def write(p: Path, text: str = "") -> Path:
    """Write text to a file, creating parent directories if needed.

    Args:
        p (Path): Path of the file to create.
        text (str): Content to write.

    Returns:
        Path: The created file path.
    """
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(text.encode("utf-8"))
    return p


def make_config(header: str = HEADER_TEMPLATE, exclude: tuple[str, ...] = ()) -> Config:
    """Return a frozen `Config` for tests.

    Args:
        header (str): Raw header template.
        exclude (tuple[str, ...]): Exclusion patterns.

    Returns:
        Config: An immutable configuration snapshot.
    """
    return Config(header=header, exclude=exclude)
