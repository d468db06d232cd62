# topmark:header:start
#
#   project      : Copygen
#   file         : __init__.py
#   file_relpath : src/copygen/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header-processing engine.

Leaves first: exclusion matching, header building and caching, header detection,
atomic file mutation, and the tree walker that ties them together.
"""

from __future__ import annotations

from copygen.pipeline.builder import build_header, render_header_bytes
from copygen.pipeline.cache import HeaderCache
from copygen.pipeline.detector import HeaderDetector
from copygen.pipeline.errors import (
    AddHeaderError,
    CheckHeaderError,
    CopygenError,
    ReportingError,
    TraversalError,
)
from copygen.pipeline.exclusion import ExclusionMatcher
from copygen.pipeline.mutator import FileMutator
from copygen.pipeline.walker import Processor, ProcessSummary

__all__ = [
    "AddHeaderError",
    "CheckHeaderError",
    "CopygenError",
    "ExclusionMatcher",
    "FileMutator",
    "HeaderCache",
    "HeaderDetector",
    "ProcessSummary",
    "Processor",
    "ReportingError",
    "TraversalError",
    "build_header",
    "render_header_bytes",
]
