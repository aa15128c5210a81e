"""Tests for structured version parsing and comparison."""

from __future__ import annotations

import pytest

from scriptdeps.utils import PackageVersion, is_pinned_version


@pytest.mark.parametrize(
    ("lower", "higher"),
    [
        ("9.0", "10.0"),
        ("1.0.0.0", "2.0.0.0"),
        ("1.0.0-beta", "1.0.0"),
        ("1.0.0-alpha", "1.0.0-beta"),
        ("1.0.0-beta.2", "1.0.0-beta.10"),
        ("1.0.0-1", "1.0.0-alpha"),
    ],
    ids=["numeric_segments", "four_part", "release_over_prerelease", "label_order", "numeric_label", "numeric_first"],
)
def test_version_ordering(lower: str, higher: str) -> None:
    assert PackageVersion.parse(lower) < PackageVersion.parse(higher)


def test_missing_segments_count_as_zero() -> None:
    assert PackageVersion.parse("1.2") == PackageVersion.parse("1.2.0.0")


def test_parse_rejects_garbage() -> None:
    with pytest.raises(ValueError, match="Invalid version"):
        PackageVersion.parse("not-a-version")


def test_try_parse_returns_none_for_empty_or_invalid() -> None:
    assert PackageVersion.try_parse("") is None
    assert PackageVersion.try_parse(None) is None
    assert PackageVersion.try_parse("x.y") is None


def test_str_keeps_original_text() -> None:
    assert str(PackageVersion.parse("8.0.4")) == "8.0.4"


@pytest.mark.parametrize(
    ("version", "pinned"),
    [("1.2.3", True), ("1.2.3.4", True), ("[2.0.0]", True), ("", False), ("3.2", False), ("[1.0,2.0)", False)],
    ids=["three_part", "four_part", "exact_range", "empty", "two_segment", "open_range"],
)
def test_is_pinned_version(version: str, pinned: bool) -> None:
    assert is_pinned_version(version) is pinned
