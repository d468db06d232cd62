# topmark:header:start
#
#   project      : Copygen
#   file         : test_header_cache.py
#   file_relpath : tests/pipeline/test_header_cache.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the per-prefix header cache.

A counting builder stub makes the number of builds observable, including under
concurrent misses for the same prefix.
"""

from __future__ import annotations

import threading
import time

from copygen.pipeline.builder import build_header
from copygen.pipeline.cache import HeaderCache


class CountingBuilder:
    """Builder stub that counts calls per prefix and can be slowed down."""

    def __init__(self, delay: float = 0.0) -> None:
        self.delay = delay
        self.calls: dict[str, int] = {}
        self._lock = threading.Lock()

    def __call__(self, template: str, prefix: str) -> tuple[str, ...]:
        with self._lock:
            self.calls[prefix] = self.calls.get(prefix, 0) + 1
        if self.delay:
            time.sleep(self.delay)
        return build_header(template, prefix)


def test_get_builds_once_per_prefix() -> None:
    """Repeated lookups for a prefix reuse the first build."""
    builder = CountingBuilder()
    cache = HeaderCache("Copyright", builder=builder)

    first: tuple[str, ...] = cache.get("//")
    second: tuple[str, ...] = cache.get("//")

    assert first == ("// Copyright",)
    assert first is second
    assert builder.calls == {"//": 1}


def test_get_keys_entries_by_prefix() -> None:
    """Distinct prefixes get distinct entries."""
    builder = CountingBuilder()
    cache = HeaderCache("Copyright", builder=builder)

    assert cache.get("//") == ("// Copyright",)
    assert cache.get("#") == ("# Copyright",)
    assert len(cache) == 2
    assert builder.calls == {"//": 1, "#": 1}


def test_warm_populates_every_prefix() -> None:
    """Warming builds each given prefix; later lookups do not rebuild."""
    builder = CountingBuilder()
    cache = HeaderCache("Copyright", builder=builder)

    cache.warm(["//", "#", "--"])
    cache.get("#")

    assert "//" in cache and "#" in cache and "--" in cache
    assert builder.calls == {"//": 1, "#": 1, "--": 1}


def test_concurrent_misses_build_once_and_agree() -> None:
    """Concurrent first lookups for one prefix all see the same lines, built once."""
    builder = CountingBuilder(delay=0.01)
    cache = HeaderCache("Copyright\nAll rights reserved.", builder=builder)
    results: list[tuple[str, ...]] = []
    results_lock = threading.Lock()
    start = threading.Barrier(16)

    def worker() -> None:
        start.wait()
        lines = cache.get("//")
        with results_lock:
            results.append(lines)

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 16
    assert all(r == ("// Copyright", "// All rights reserved.") for r in results)
    assert len({id(r) for r in results}) == 1
    assert builder.calls == {"//": 1}


def test_template_property_exposes_raw_template() -> None:
    """The raw template is available to collaborators (e.g. the detector)."""
    assert HeaderCache("").template == ""
    assert HeaderCache("X\n").template == "X\n"
