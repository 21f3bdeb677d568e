"""Tests for exact literal pattern matching."""

import random

import pytest

from termgap.errors import ResourceExhaustedError
from termgap.matching import (
    MatcherStrategy,
    PatternMatcher,
    SkipTables,
    find_all,
    find_all_naive,
    find_all_single_char,
    find_all_skip,
    fold_case,
)
from termgap.matching import pattern as pattern_module


def _reference(text: str, pattern: str) -> list[int]:
    return [
        i
        for i in range(len(text) - len(pattern) + 1)
        if pattern and text[i : i + len(pattern)] == pattern
    ]


def _random_pairs(seed: int, count: int) -> list[tuple[str, str]]:
    rng = random.Random(seed)
    pairs = []
    for _ in range(count):
        alphabet = rng.choice(["ab", "abc", "ab ", "abcd"])
        text = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 120)))
        if text and rng.random() < 0.6:
            # Pattern taken from the text so most cases have hits
            start = rng.randrange(len(text))
            pattern = text[start : start + rng.randint(1, 12)]
        else:
            pattern = "".join(rng.choice(alphabet) for _ in range(rng.randint(1, 12)))
        pairs.append((text, pattern))
    return pairs


class TestFindAll:
    """Test the default pattern matcher."""

    def test_finds_every_occurrence(self) -> None:
        """All occurrences are reported in ascending order."""
        assert list(find_all("abracadabra", "abra")) == [0, 7]

    def test_reports_self_overlapping_occurrences(self) -> None:
        """Scanning resumes one character after a hit."""
        assert list(find_all("aaaa", "aa")) == [0, 1, 2]
        assert list(find_all("abababa", "aba")) == [0, 2, 4]

    def test_empty_pattern_has_no_matches(self) -> None:
        """An empty pattern never matches."""
        assert list(find_all("some text", "")) == []

    def test_pattern_longer_than_text_has_no_matches(self) -> None:
        """A pattern longer than the haystack never matches."""
        assert list(find_all("abc", "abcd")) == []

    def test_case_insensitive_folds_both_sides(self) -> None:
        """Case-insensitive search ignores case in text and pattern."""
        assert list(find_all("Cat cat CAT", "cat", case_insensitive=True)) == [0, 4, 8]
        assert list(find_all("Cat cat CAT", "CAT", case_insensitive=True)) == [0, 4, 8]
        assert list(find_all("Cat cat CAT", "cat")) == [4]

    def test_case_insensitive_offsets_stay_aligned(self) -> None:
        """Characters with expanding case folds do not shift later offsets."""
        text = "STRASSE straße Straße"
        assert list(find_all(text, "straße", case_insensitive=True)) == [8, 15]

    def test_bounds_restrict_search_span(self) -> None:
        """start and end limit where matches may begin and end."""
        text = "abcabcabc"
        assert list(find_all(text, "abc", start=1)) == [3, 6]
        assert list(find_all(text, "abc", end=6)) == [0, 3]
        assert list(find_all(text, "abc", start=1, end=8)) == [3]

    def test_returns_lazy_iterator(self) -> None:
        """Offsets are produced on demand."""
        positions = find_all("a" * 1000, "a")
        assert next(positions) == 0
        assert next(positions) == 1


class TestStrategies:
    """Test that every strategy reports the same positions."""

    @pytest.mark.parametrize("seed", range(5))
    def test_naive_and_skip_agree_with_reference(self, seed: int) -> None:
        """Naive and skip scans produce identical, identically ordered offsets."""
        for text, pattern in _random_pairs(seed, 200):
            expected = _reference(text, pattern)
            assert list(find_all_naive(text, pattern)) == expected, (text, pattern)
            assert list(find_all_skip(text, pattern)) == expected, (text, pattern)

    @pytest.mark.parametrize("strategy", list(MatcherStrategy))
    def test_matcher_strategies_agree(self, strategy: MatcherStrategy) -> None:
        """PatternMatcher gives the same offsets under every strategy."""
        for text, pattern in _random_pairs(42, 200):
            matcher = PatternMatcher(pattern, strategy=strategy)
            assert list(matcher.find_all(text)) == _reference(text, pattern)

    @pytest.mark.parametrize("strategy", list(MatcherStrategy))
    def test_case_insensitive_strategies_agree(self, strategy: MatcherStrategy) -> None:
        """Case folding does not change agreement between strategies."""
        for text, pattern in _random_pairs(7, 100):
            upper_text = text.upper()
            matcher = PatternMatcher(pattern, case_insensitive=True, strategy=strategy)
            assert list(matcher.find_all(upper_text)) == _reference(text, pattern)

    def test_skip_scan_with_long_pattern(self) -> None:
        """Long patterns found by the skip scan match a direct search."""
        text = "the quick brown fox jumps over the quick brown dog " * 50
        pattern = "quick brown"
        assert list(find_all_skip(text, pattern)) == _reference(text, pattern)
        assert list(find_all(text, pattern)) == _reference(text, pattern)

    def test_skip_scan_reuses_prebuilt_tables(self) -> None:
        """Precomputed tables give the same result as on-demand tables."""
        tables = SkipTables.build("abcab")
        text = "abcabcabcab"
        assert list(find_all_skip(text, "abcab", tables)) == [0, 3, 6]


class TestSingleCharacterPath:
    """Test the fast path for one-character patterns."""

    def test_finds_every_character(self) -> None:
        """Every offset of the character is reported."""
        assert list(find_all_single_char("banana", "a")) == [1, 3, 5]

    @pytest.mark.parametrize("strategy", list(MatcherStrategy))
    def test_single_char_pattern_bypasses_general_algorithms(
        self, strategy: MatcherStrategy, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """One-character patterns never reach the naive or skip scans."""

        def fail(*args: object, **kwargs: object) -> None:
            raise AssertionError("general algorithm used for a single character")

        text = "a b a " * 5000
        expected = _reference(text, "a")

        monkeypatch.setattr(pattern_module, "find_all_naive", fail)
        monkeypatch.setattr(pattern_module, "find_all_skip", fail)

        matcher = PatternMatcher("a", strategy=strategy)
        assert list(matcher.find_all(text)) == expected

    def test_single_char_path_matches_general_algorithms(self) -> None:
        """The fast path and the general algorithms agree on a large text."""
        rng = random.Random(3)
        text = "".join(rng.choice("ab ") for _ in range(20_000))
        fast = list(find_all(text, "a"))
        assert fast == list(find_all_naive(text, "a"))
        assert fast == list(find_all_skip(text, "a"))


class TestSkipTables:
    """Test Boyer-Moore table construction."""

    def test_last_index_holds_rightmost_position(self) -> None:
        """Bad-character table records each character's last index."""
        tables = SkipTables.build("abcab")
        assert tables.last_index == {"a": 3, "b": 4, "c": 2}

    def test_full_match_shift_is_pattern_period(self) -> None:
        """After a full match the scan shifts by the pattern's period."""
        assert SkipTables.build("abcab").good_suffix[0] == 3
        assert SkipTables.build("aaaa").good_suffix[0] == 1
        assert SkipTables.build("abcd").good_suffix[0] == 4


class TestFoldCase:
    """Test length-preserving case folding."""

    def test_folds_ascii(self) -> None:
        """ASCII letters fold to lower case."""
        assert fold_case("HeLLo") == "hello"

    def test_preserves_length_for_expanding_characters(self) -> None:
        """Characters whose fold would expand keep the text length."""
        assert len(fold_case("Straße")) == len("Straße")
        assert len(fold_case("İstanbul")) == len("İstanbul")


class TestResourceExhaustion:
    """Test allocation failures while preparing a scan window."""

    def test_memory_error_becomes_resource_exhausted(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A failed window allocation is reported as ResourceExhaustedError."""

        def exhausted(text: str) -> str:
            raise MemoryError

        matcher = PatternMatcher("cat", case_insensitive=True)
        monkeypatch.setattr(pattern_module, "fold_case", exhausted)

        with pytest.raises(ResourceExhaustedError):
            list(matcher.find_all("the cat sat"))
