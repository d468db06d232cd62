# topmark:header:start
#
#   project      : Copygen
#   file         : __init__.py
#   file_relpath : src/copygen/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reporting views for Copygen notifications."""

from __future__ import annotations

from copygen.rendering.api import Reporter, UnknownViewTypeError
from copygen.rendering.formats import ViewType
from copygen.rendering.renderers import HumanReporter, JsonReporter, make_reporter

__all__ = [
    "HumanReporter",
    "JsonReporter",
    "Reporter",
    "UnknownViewTypeError",
    "ViewType",
    "make_reporter",
]
