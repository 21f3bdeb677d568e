"""Tests for word character classification and boundary checks."""

import pytest

from termgap.matching import is_boundary_match, is_word_char


class TestIsWordChar:
    """Test which characters belong to words."""

    @pytest.mark.parametrize("char", ["a", "Z", "5", "é", "'", "-", "_"])
    def test_word_characters(self, char: str) -> None:
        """Alphanumerics, apostrophe, hyphen and underscore are word characters."""
        assert is_word_char(char)

    @pytest.mark.parametrize("char", [" ", ".", ",", "!", "\n", "\t", '"', "/"])
    def test_non_word_characters(self, char: str) -> None:
        """Whitespace and other punctuation separate words."""
        assert not is_word_char(char)


class TestIsBoundaryMatch:
    """Test whole-word span validation."""

    def test_span_surrounded_by_spaces(self) -> None:
        """A span between spaces is a whole word."""
        assert is_boundary_match("the cat sat", 4, 3)

    def test_span_at_start_and_end_of_text(self) -> None:
        """Text edges count as boundaries."""
        assert is_boundary_match("cat", 0, 3)
        assert is_boundary_match("a cat", 2, 3)

    def test_span_followed_by_punctuation(self) -> None:
        """Punctuation outside the word set is a boundary."""
        assert is_boundary_match("cat. dog", 0, 3)
        assert is_boundary_match('"cat"', 1, 3)

    def test_fragment_of_larger_word_rejected(self) -> None:
        """A span inside a longer word is not a match."""
        assert not is_boundary_match("concatenate", 3, 3)
        assert not is_boundary_match("cats", 0, 3)
        assert not is_boundary_match("bobcat", 3, 3)

    def test_word_punctuation_joins_words(self) -> None:
        """Hyphens, underscores and apostrophes extend the surrounding word."""
        assert not is_boundary_match("cat-like", 0, 3)
        assert not is_boundary_match("big_cat", 4, 3)
        assert not is_boundary_match("cat's", 0, 3)

    def test_out_of_range_span_rejected(self) -> None:
        """Spans that leave the text are never matches."""
        assert not is_boundary_match("cat", 1, 3)
        assert not is_boundary_match("cat", -1, 1)
        assert not is_boundary_match("", 0, 1)
