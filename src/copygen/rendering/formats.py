# topmark:header:start
#
#   project      : Copygen
#   file         : formats.py
#   file_relpath : src/copygen/rendering/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Defines the reporting views available to Copygen.

This module provides an enumeration of the views that can render the
notifications emitted while processing a tree.
"""

from enum import Enum


class ViewType(Enum):
    """Copygen reporting views."""

    HUMAN = "human"
    JSON = "json"
