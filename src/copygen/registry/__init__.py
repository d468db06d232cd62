# topmark:header:start
#
#   project      : Copygen
#   file         : __init__.py
#   file_relpath : src/copygen/registry/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registries of file types known to Copygen."""

from __future__ import annotations

from copygen.registry.comment_styles import (
    COMMENT_PREFIXES,
    comment_prefix_for,
    distinct_prefixes,
)

__all__ = [
    "COMMENT_PREFIXES",
    "comment_prefix_for",
    "distinct_prefixes",
]
