"""Tests for edit distance and similarity."""

import pytest

from jirafields.suggestions.similarity import levenshtein_distance, similarity


class TestLevenshteinDistance:
    """Test raw edit distance."""

    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            ("", "", 0),
            ("", "abc", 3),
            ("abc", "", 3),
            ("status", "status", 0),
            ("stat", "status", 2),
            ("kitten", "sitting", 3),
            ("flaw", "lawn", 2),
        ],
    )
    def test_known_distances(self, a: str, b: str, expected: int) -> None:
        assert levenshtein_distance(a, b) == expected

    def test_distance_is_symmetric(self) -> None:
        assert levenshtein_distance("assignee", "asignee") == levenshtein_distance(
            "asignee", "assignee"
        )


class TestSimilarity:
    """Test normalized similarity."""

    def test_identity(self) -> None:
        for value in ["", "a", "status", "customfield_10001"]:
            assert similarity(value, value) == 1.0

    def test_empty_against_non_empty(self) -> None:
        assert similarity("", "status") == 0.0
        assert similarity("status", "") == 0.0

    def test_symmetry(self) -> None:
        pairs = [("stat", "status"), ("summry", "summary"), ("a", "xyz")]
        for a, b in pairs:
            assert similarity(a, b) == similarity(b, a)

    def test_case_insensitive(self) -> None:
        assert similarity("STATUS", "status") == 1.0
        assert similarity("DisplayName", "displayname") == 1.0

    def test_normalized_by_longer_string(self) -> None:
        # one deletion over seven characters
        assert similarity("summry", "summary") == pytest.approx(1 - 1 / 7)

    def test_range(self) -> None:
        for a, b in [("abc", "xyz"), ("a", "abcdef"), ("status", "state")]:
            assert 0.0 <= similarity(a, b) <= 1.0

    def test_completely_different(self) -> None:
        assert similarity("abc", "xyz") == 0.0
