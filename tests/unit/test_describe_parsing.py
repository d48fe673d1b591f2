"""
Unit tests for describe output parsing helpers.
"""

import pytest

from repodesc.services.resolution.describe import (
    extract_short_hash,
    has_semver_prefix,
    semver_from_describe,
    strip_dirty_marker,
    synthesize_describe,
)


class TestStripDirtyMarker:
    def test_trailing_marker_removed(self):
        assert strip_dirty_marker("abc1234-dirty", "-dirty") == "abc1234"

    def test_marker_elsewhere_kept(self):
        assert strip_dirty_marker("1.0.0-dirty-1-gabc1234", "-dirty") == "1.0.0-dirty-1-gabc1234"

    def test_no_marker(self):
        assert strip_dirty_marker("abc1234", "-dirty") == "abc1234"


class TestExtractShortHash:
    """Abbreviated hash extraction."""

    @pytest.mark.parametrize(
        ("describe", "expected"),
        [
            ("abc1234", "abc1234"),
            ("1.2.3-4-gabc1234", "abc1234"),
            ("1.2.3-4-gabc1234-dirty", "abc1234"),
            ("0.1.0-rc1-0-g0123456", "0123456"),
            ("abc12345", "abc1234"),
            ("1.2.3-2-gabc12345", "abc1234"),
            ("1.2.3-2-gabc1234567890-dirty", "abc1234"),
        ],
    )
    def test_found(self, describe, expected):
        assert extract_short_hash(describe, "-dirty") == expected

    @pytest.mark.parametrize("describe", ["1.2.3", "abc123", "1.2.3-2-abc1234", "abc1234-x", ""])
    def test_not_found(self, describe):
        """Only a trailing run of at least seven hex digits is a hash."""
        assert extract_short_hash(describe, "-dirty") is None

    def test_hex_dirty_marker_not_absorbed(self):
        """A marker made of hex digits must not be mistaken for part of the hash."""
        assert extract_short_hash("abc1234fade", "fade") == "abc1234"


class TestSemverParsing:
    @pytest.mark.parametrize(
        "describe", ["1.2.3-0-gabc1234", "10.20.30", "1.2.3rc1-1-gabc1234", "0.0.1-dirty"]
    )
    def test_has_semver_prefix(self, describe):
        assert has_semver_prefix(describe)

    @pytest.mark.parametrize("describe", ["v1.2.3-0-gabc1234", "1.2-3-gabc1234", "abc1234", ""])
    def test_no_semver_prefix(self, describe):
        assert not has_semver_prefix(describe)

    @pytest.mark.parametrize(
        ("describe", "expected"),
        [
            ("1.2.3-4-gabc1234", "1.2.3"),
            ("1.2.3", "1.2.3"),
            ("1.2.3rc1-4-gabc1234", "1.2.3rc1"),
        ],
    )
    def test_semver_from_describe(self, describe, expected):
        assert semver_from_describe(describe) == expected


class TestSynthesizeDescribe:
    def test_clean(self):
        assert synthesize_describe("no_tag", "3", "abc1234") == "no_tag-3-gabc1234"

    def test_dirty(self):
        assert synthesize_describe("no_tag", "3", "abc1234", "-dirty") == "no_tag-3-gabc1234-dirty"
