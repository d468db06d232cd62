# topmark:header:start
#
#   project      : Copygen
#   file         : test_exclusion.py
#   file_relpath : tests/pipeline/test_exclusion.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for exclusion matching (glob and directory-prefix patterns)."""

from __future__ import annotations

import threading
from pathlib import Path

from tests.conftest import parametrize
from copygen.pipeline.exclusion import ExclusionMatcher, directory_form, normalize_path


@parametrize(
    "pattern, path, expected",
    [
        ("vendor/**", "vendor/lib/file.go", True),
        ("vendor/**", "vendor/file.go", True),
        ("vendor/**", "src/vendor_utils.go", False),
        ("vendor/**", "vendor_utils.go", False),
        ("build/", "build/out/main.go", True),
        ("build/", "build.go", False),
        ("docs/*.go", "docs/a.go", True),
        ("docs/*.go", "docs/sub/a.go", False),
        ("*.pb.go", "service.pb.go", True),
        ("*.pb.go", "api/v1/service.pb.go", False),
        ("*.pb.go", "api/v1/service.go", False),
        ("**/*.pb.go", "api/v1/service.pb.go", True),
        ("cmd/main.go", "cmd/main.go", True),
        ("cmd/main.go", "cmd/other.go", False),
        ("main.go", "main.go", True),
        ("main.go", "cmd/tool/main.go", False),
        ("*.go", "main.go", True),
        ("*.go", "internal/x/y.go", False),
        ("/vendor/**", "vendor/lib/file.go", True),
    ],
)
def test_is_excluded(pattern: str, path: str, expected: bool) -> None:
    """Glob and directory-prefix patterns match as documented."""
    matcher = ExclusionMatcher([pattern])

    assert matcher.is_excluded(path) is expected


def test_no_patterns_excludes_nothing() -> None:
    """An empty pattern list never excludes."""
    assert ExclusionMatcher([]).is_excluded("anything/at/all.go") is False


def test_first_matching_pattern_wins() -> None:
    """Any satisfied pattern excludes the path, regardless of position."""
    matcher = ExclusionMatcher(["*.txt", "third_party/**", "*.md"])

    assert matcher.is_excluded("third_party/x/y.go")
    assert matcher.is_excluded("README.md")
    assert not matcher.is_excluded("src/main.go")


def test_paths_are_normalized_before_matching() -> None:
    """``./`` and redundant separators do not defeat a pattern."""
    matcher = ExclusionMatcher(["vendor/**"])

    assert matcher.is_excluded("./vendor/lib/file.go")
    assert matcher.is_excluded("vendor//lib/./file.go")


def test_paths_are_matched_relative_to_base(tmp_path: Path) -> None:
    """Absolute walked paths below the base match relative patterns."""
    matcher = ExclusionMatcher(["vendor/**"], base=tmp_path)

    assert matcher.is_excluded(tmp_path / "vendor" / "lib" / "file.go")
    assert not matcher.is_excluded(tmp_path / "src" / "vendor_utils.go")


@parametrize("bad", ["\\", "[broken", "src/[a-z"])
def test_malformed_pattern_is_skipped(bad: str) -> None:
    """A pattern that fails to compile never matches and does not disable the others."""
    matcher = ExclusionMatcher([bad, "gen/**"])

    assert matcher.patterns == (bad, "gen/**")
    assert not matcher.is_excluded(bad)
    assert not matcher.is_excluded("src/a.go")
    assert matcher.is_excluded("gen/code.go")


def test_malformed_directory_pattern_has_no_prefix() -> None:
    """A malformed pattern that looks like a directory does not exclude its subtree."""
    matcher = ExclusionMatcher(["gen/[**"])

    assert not matcher.is_excluded("gen/x.go")
    assert not matcher.is_excluded("gen/[/x.go")


@parametrize(
    "pattern, expected",
    [
        ("vendor/**", "vendor/"),
        ("vendor/", "vendor/"),
        ("vendor//", "vendor/"),
        ("/vendor/**", "vendor/"),
        ("a/b/**/**", "a/b/"),
        ("**", None),
        ("**/gen/", None),
        ("*.go", None),
        ("vendor", None),
    ],
)
def test_directory_form(pattern: str, expected: str | None) -> None:
    """Directory patterns reduce to a literal ``<dir>/`` prefix."""
    assert directory_form(pattern) == expected


def test_normalize_path_outside_base_stays_unchanged(tmp_path: Path) -> None:
    """Paths outside the base fall back to their own normalized form."""
    outside = "other/place/file.go"

    assert normalize_path(outside, base=tmp_path / "nested") == outside


def test_concurrent_reads_agree() -> None:
    """Many threads may query the matcher at once."""
    matcher = ExclusionMatcher(["vendor/**", "*.pb.go"])
    results: list[bool] = []
    lock = threading.Lock()

    def worker(path: str) -> None:
        excluded = matcher.is_excluded(path)
        with lock:
            results.append(excluded)

    paths = ["vendor/a.go", "src/b.go"] * 20
    threads = [threading.Thread(target=worker, args=(p,)) for p in paths]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results.count(True) == 20
    assert results.count(False) == 20
