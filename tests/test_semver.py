"""Tests for build-aware version comparison."""

import pytest

from versioning.models import Candidate
from versioning.semver import (
    compare_build,
    convert_version_to_semver,
    encode_version_for_url,
    find_best_candidate,
    get_major,
    is_valid_range,
    satisfies,
    sort_candidates_descending,
)


class TestSatisfies:
    """Range satisfaction with the build metadata extension."""

    @pytest.mark.parametrize("version_range,version,expected", [
        ("11.0.0", "11.0.0", True),
        ("11.0", "11.0.0", True),
        ("11.0.1", "11.0.0", False),
        ("11.0", "11.0.2", True),
        ("11", "11.0.2+7", True),
        ("2.5", "2.5.0", True),
        ("2.5", "2.6.1", False),
        ("11.x", "11.0.10+9", True),
        ("x", "8.0.292+10", True),
        ("", "17.0.1", True),
        ("15.0.0+14", "15.0.0+14", True),
        ("15.0.0+14", "15.0.0+14.1.202003190635", False),
        ("15.0.0+14.1.202003190635", "15.0.0+14.1.202003190635", True),
        ("11.0.3+2", "11.0.3+3", False),
    ])
    def test_satisfies_table(self, version_range, version, expected):
        """Test plain ranges and exact build ranges."""
        assert satisfies(version_range, version) is expected

    def test_invalid_inputs_do_not_match(self):
        """Test that garbage on either side never raises."""
        assert satisfies("11", "not-a-version") is False
        assert satisfies("abc", "11.0.0") is False
        assert satisfies("11", "11.0") is False


class TestCompareBuild:
    """Ordering including build identifiers."""

    def test_main_version_wins(self):
        assert compare_build("12.0.3+1", "12.0.2+10") == 1

    def test_build_numeric_order(self):
        assert compare_build("12.0.2+10.3", "12.0.2+10.10") == -1
        assert compare_build("1.0.0+2", "1.0.0+10") == -1

    def test_missing_build_is_lowest(self):
        assert compare_build("12.0.2", "12.0.2+1") == -1
        assert compare_build("12.0.2+1", "12.0.2") == 1

    def test_shorter_build_prefix_is_lower(self):
        assert compare_build("15.0.0+14", "15.0.0+14.1") == -1

    def test_numeric_lower_than_alphanumeric(self):
        assert compare_build("1.0.0+1", "1.0.0+abc") == -1

    def test_release_above_prerelease(self):
        assert compare_build("17.0.0", "17.0.0-beta") == 1

    def test_equal(self):
        assert compare_build("11.0.10+9", "11.0.10+9") == 0


class TestConversions:
    """Version folding and formatting helpers."""

    @pytest.mark.parametrize("raw,expected", [
        ("12", "12"),
        ("12.0.2", "12.0.2"),
        ("12.0.2.1", "12.0.2+1"),
        ("12.0.2.1.0", "12.0.2+1.0"),
        ("11.0.3.2.1231421", "11.0.3+2.1231421"),
        ("8.312.07.1", "8.312.7+1"),
        ([11, 0, 2, 1], "11.0.2+1"),
    ])
    def test_convert_version_to_semver(self, raw, expected):
        assert convert_version_to_semver(raw) == expected

    def test_encode_version_for_url(self):
        assert encode_version_for_url("17.0.2+8") == "17.0.2%2B8"
        assert encode_version_for_url("17.0.2") == "17.0.2"

    def test_get_major(self):
        assert get_major("17.0.2") == 17
        assert get_major("21") == 21
        with pytest.raises(ValueError):
            get_major("x")

    def test_is_valid_range(self):
        assert is_valid_range("11")
        assert is_valid_range("11.0.x")
        assert is_valid_range("11.0.3+2")
        assert is_valid_range("")
        assert not is_valid_range("11..0")


class TestCandidateSelection:
    """Picking the best candidate from a catalog."""

    def test_highest_build_wins(self):
        catalog = [
            Candidate("12.0.2+10.1", "a"),
            Candidate("12.0.2+10.3", "c"),
            Candidate("12.0.2+10.2", "b"),
        ]
        best = find_best_candidate("12", catalog)
        assert best == Candidate("12.0.2+10.3", "c")

    def test_range_filters_catalog(self):
        catalog = [
            Candidate("17.0.1+12", "x"),
            Candidate("11.0.10+9", "y"),
            Candidate("8.0.282+8", "z"),
        ]
        assert find_best_candidate("11.x", catalog).version == "11.0.10+9"

    def test_any_version_picks_newest(self):
        catalog = [Candidate("11.0.10+9", "a"), Candidate("17.0.1+12", "b")]
        assert find_best_candidate("x", catalog).version == "17.0.1+12"
        assert find_best_candidate("", catalog).version == "17.0.1+12"

    def test_empty_catalog(self):
        assert find_best_candidate("11", []) is None

    def test_sort_keeps_catalog_order_on_ties(self):
        first, second = Candidate("11.0.2+7", "first"), Candidate("11.0.2+7", "second")
        ordered = sort_candidates_descending([first, Candidate("11.0.1", "old"), second])
        assert [c.url for c in ordered] == ["first", "second", "old"]
