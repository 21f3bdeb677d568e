"""Exact literal pattern matching.

Three interchangeable strategies locate every occurrence of a literal pattern
in a text span, including occurrences that overlap each other:

- single character scan, used for every one-character pattern
- naive scan, comparing the pattern at each candidate position
- skip scan, Boyer-Moore with bad-character and good-suffix tables

All strategies report the same offsets in the same ascending order.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from termgap.errors import ResourceExhaustedError

# Patterns at least this long use the skip scan under MatcherStrategy.AUTO
SKIP_THRESHOLD = 8


class MatcherStrategy(str, Enum):
    """Algorithm used to scan for a pattern.

    AUTO: Single character scan for one-character patterns, naive scan for
        short patterns, skip scan for patterns of SKIP_THRESHOLD or more.

    NAIVE: Compare the pattern at every candidate position.

    SKIP: Boyer-Moore scan driven by precomputed skip tables.
    """

    AUTO = "auto"
    NAIVE = "naive"
    SKIP = "skip"


def _fold_char(char: str) -> str:
    folded = char.casefold()
    if len(folded) == 1:
        return folded
    lowered = char.lower()
    return lowered if len(lowered) == 1 else char


def fold_case(text: str) -> str:
    """Fold text to a canonical case without changing its length.

    Characters whose case fold expands (for example "ß" to "ss") are lowered
    instead, or kept as they are, so offsets into the folded text are valid
    offsets into the original.
    """
    folded = text.casefold()
    if len(folded) == len(text):
        return folded
    return "".join(_fold_char(char) for char in text)


@dataclass(frozen=True, slots=True)
class SkipTables:
    """Boyer-Moore shift tables for a single pattern.

    Attributes:
        pattern: The pattern the tables were built from
        last_index: Rightmost index of each character in the pattern
        good_suffix: Shift to apply after a mismatch at index j, stored at j + 1;
            index 0 holds the shift after a full match

    """

    pattern: str
    last_index: dict[str, int]
    good_suffix: tuple[int, ...]

    @classmethod
    def build(cls, pattern: str) -> SkipTables:
        """Precompute the skip tables for a non-empty pattern."""
        last_index = {char: index for index, char in enumerate(pattern)}
        return cls(
            pattern=pattern,
            last_index=last_index,
            good_suffix=_good_suffix_shifts(pattern),
        )


def _good_suffix_shifts(pattern: str) -> tuple[int, ...]:
    m = len(pattern)
    shift = [0] * (m + 1)
    border = [0] * (m + 1)

    # Case 1: the matched suffix occurs elsewhere in the pattern
    i, j = m, m + 1
    border[i] = j
    while i > 0:
        while j <= m and pattern[i - 1] != pattern[j - 1]:
            if shift[j] == 0:
                shift[j] = j - i
            j = border[j]
        i -= 1
        j -= 1
        border[i] = j

    # Case 2: only a prefix of the pattern matches part of the suffix
    j = border[0]
    for i in range(m + 1):
        if shift[i] == 0:
            shift[i] = j
        if i == j:
            j = border[j]

    return tuple(shift)


def find_all_single_char(text: str, char: str) -> Iterator[int]:
    """Yield every offset of a single character in text."""
    index = text.find(char)
    while index != -1:
        yield index
        index = text.find(char, index + 1)


def find_all_naive(text: str, pattern: str) -> Iterator[int]:
    """Yield every offset of pattern in text by direct comparison.

    Worst case O(n * m). Candidate positions are those holding the first
    pattern character; the rest of the pattern is compared at each one.
    """
    m = len(pattern)
    if m == 0 or m > len(text):
        return
    last_start = len(text) - m
    first = pattern[0]
    index = text.find(first, 0, last_start + 1)
    while index != -1:
        if text.startswith(pattern, index):
            yield index
        index = text.find(first, index + 1, last_start + 1)


def find_all_skip(
    text: str, pattern: str, tables: SkipTables | None = None
) -> Iterator[int]:
    """Yield every offset of pattern in text using the Boyer-Moore skip scan.

    Args:
        text: Text to scan
        pattern: Pattern to find
        tables: Precomputed tables for pattern; built on demand when omitted

    """
    m = len(pattern)
    n = len(text)
    if m == 0 or m > n:
        return
    if tables is None or tables.pattern != pattern:
        tables = SkipTables.build(pattern)

    last_index = tables.last_index
    good_suffix = tables.good_suffix
    shift = 0
    while shift <= n - m:
        j = m - 1
        while j >= 0 and pattern[j] == text[shift + j]:
            j -= 1
        if j < 0:
            yield shift
            shift += good_suffix[0]
        else:
            bad_char = j - last_index.get(text[shift + j], -1)
            shift += max(good_suffix[j + 1], bad_char)


class PatternMatcher:
    """Finds a fixed pattern in any number of text spans.

    The folded pattern and its skip tables are computed once at construction,
    so a matcher can be reused across chunks of the same text.
    """

    def __init__(
        self,
        pattern: str,
        case_insensitive: bool = False,
        strategy: MatcherStrategy = MatcherStrategy.AUTO,
    ) -> None:
        """Initialise matcher for a pattern.

        Args:
            pattern: Literal pattern to find; an empty pattern never matches
            case_insensitive: Fold case of pattern and text before comparing
            strategy: Scanning algorithm to use

        """
        self.pattern = pattern
        self.case_insensitive = case_insensitive
        self.strategy = strategy
        self._needle = fold_case(pattern) if case_insensitive else pattern
        self._tables: SkipTables | None = None
        if self._resolved_strategy() is MatcherStrategy.SKIP:
            self._tables = SkipTables.build(self._needle)

    def __len__(self) -> int:
        return len(self.pattern)

    def _resolved_strategy(self) -> MatcherStrategy:
        if self.strategy is not MatcherStrategy.AUTO:
            return self.strategy
        if len(self._needle) >= SKIP_THRESHOLD:
            return MatcherStrategy.SKIP
        return MatcherStrategy.NAIVE

    def find_all(
        self, haystack: str, start: int = 0, end: int | None = None
    ) -> Iterator[int]:
        """Yield offsets of the pattern within ``haystack[start:end]``.

        Offsets are reported in haystack coordinates, ascending.

        Args:
            haystack: Text to search
            start: First offset a match may begin at
            end: Offset a match may not extend past (defaults to len(haystack))

        """
        if not self._needle:
            return
        length = len(haystack)
        start = max(0, start)
        end = length if end is None else min(end, length)
        if end - start < len(self._needle):
            return

        try:
            window = haystack[start:end]
            if self.case_insensitive:
                window = fold_case(window)
        except MemoryError as e:
            raise ResourceExhaustedError(
                f"Cannot allocate a {end - start} character scan window"
            ) from e

        if len(self._needle) == 1:
            positions = find_all_single_char(window, self._needle)
        elif self._resolved_strategy() is MatcherStrategy.SKIP:
            positions = find_all_skip(window, self._needle, self._tables)
        else:
            positions = find_all_naive(window, self._needle)

        for offset in positions:
            yield start + offset


def find_all(
    haystack: str,
    pattern: str,
    case_insensitive: bool = False,
    start: int = 0,
    end: int | None = None,
    strategy: MatcherStrategy = MatcherStrategy.AUTO,
) -> Iterator[int]:
    """Yield every offset of pattern in ``haystack[start:end]``.

    An empty pattern, or one longer than the span, produces no offsets.
    Self-overlapping occurrences are all reported.

    Args:
        haystack: Text to search
        pattern: Literal pattern to find
        case_insensitive: Fold case of pattern and text before comparing
        start: First offset a match may begin at
        end: Offset a match may not extend past
        strategy: Scanning algorithm to use

    Returns:
        Lazy iterator of offsets in haystack coordinates, ascending

    """
    matcher = PatternMatcher(pattern, case_insensitive, strategy)
    return matcher.find_all(haystack, start, end)
