"""Pairing of term A occurrences with their nearest term B."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from termgap.matching.boundary import is_boundary_match, is_word_char
from termgap.matching.pattern import MatcherStrategy, PatternMatcher
from termgap.matching.windowed import DEFAULT_CHUNK_SIZE, scan_with_matcher
from termgap.observers import NullObserver, SearchObserver
from termgap.types import GapMetric, Match, Occurrence


def words_between(text: str, start: int, end: int) -> int:
    """Count maximal runs of word characters inside ``text[start:end]``.

    A leading run of non-word characters is skipped before counting.
    """
    end = min(end, len(text))
    index = max(start, 0)
    while index < end and not is_word_char(text[index]):
        index += 1

    count = 0
    in_word = False
    for char in text[index:end]:
        if is_word_char(char):
            if not in_word:
                count += 1
                in_word = True
        else:
            in_word = False
    return count


def word_gap(text: str, start: int, end: int) -> int:
    """Return the number of gaps between whole words inside ``text[start:end]``.

    One word between the terms and no words at all both count as a gap of 0.
    """
    return max(0, words_between(text, start, end) - 1)


def _bounded_word_gap(text: str, start: int, end: int, limit: int) -> int:
    """Like word_gap, but stops counting once the gap exceeds limit."""
    count = 0
    in_word = False
    for index in range(max(start, 0), min(end, len(text))):
        if is_word_char(text[index]):
            if not in_word:
                count += 1
                if count - 1 > limit:
                    break
                in_word = True
        else:
            in_word = False
    return max(0, count - 1)


def boundary_occurrences(
    text: str,
    matcher: PatternMatcher,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    start: int = 0,
    end: int | None = None,
    observer: SearchObserver | None = None,
) -> Iterator[Occurrence]:
    """Yield whole-word occurrences of a matcher's pattern, ascending.

    Raw hits come from the windowed scanner; hits that are fragments of a
    larger word are dropped.
    """
    observer = observer or NullObserver()
    length = len(matcher)
    for offset in scan_with_matcher(text, matcher, chunk_size, start, end):
        occurrence = Occurrence(start=offset, length=length)
        accepted = is_boundary_match(text, offset, length)
        observer.on_boundary_check(matcher.pattern, occurrence, accepted)
        if accepted:
            yield occurrence


class ProximityLinker:
    """Finds the nearest qualifying term B after each term A occurrence.

    The policy is greedy: the first whole-word term B after term A is the
    only one considered. It pairs when its gap is within the limit; farther
    occurrences are never tried, since their gap can only be larger.

    A linker remembers the last term B it found so that ascending term A
    occurrences never rescan the same text. Use one linker per thread.
    """

    def __init__(  # noqa: PLR0913 - mirrors the search request fields
        self,
        term_b: str,
        gap_limit: int,
        gap_metric: GapMetric = GapMetric.CHARACTERS,
        case_insensitive: bool = False,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        observer: SearchObserver | None = None,
        strategy: MatcherStrategy = MatcherStrategy.AUTO,
    ) -> None:
        """Initialise linker for a term B query.

        Args:
            term_b: Trailing term to pair with
            gap_limit: Largest gap that still pairs, in gap_metric units
            gap_metric: How the gap is measured
            case_insensitive: Fold case before comparing
            chunk_size: Window size used when scanning for term B
            observer: Receives candidate and match events
            strategy: Scanning algorithm for term B

        """
        self.gap_limit = gap_limit
        self.gap_metric = gap_metric
        self.chunk_size = chunk_size
        self._matcher = PatternMatcher(term_b, case_insensitive, strategy)
        self._observer = observer or NullObserver()
        self._cursor: tuple[str, int, Occurrence | None] | None = None

    def link(self, text: str, term_a: Occurrence) -> Match | None:
        """Pair one term A occurrence with its nearest term B.

        Args:
            text: The full text
            term_a: A whole-word term A occurrence

        Returns:
            The match, or None if no term B qualifies

        """
        if self.gap_metric is GapMetric.WORDS:
            return self._link_by_words(text, term_a)
        return self._link_by_characters(text, term_a)

    def link_all(
        self, text: str, occurrences: Iterable[Occurrence]
    ) -> Iterator[Match]:
        """Yield matches for term A occurrences, in the order given."""
        for term_a in occurrences:
            match = self.link(text, term_a)
            if match is not None:
                yield match

    def _link_by_characters(self, text: str, term_a: Occurrence) -> Match | None:
        after_a = term_a.end
        # Any term B starting at most gap_limit characters after term A fits
        window_end = min(after_a + self.gap_limit + len(self._matcher), len(text))
        candidate = next(self._candidates(text, after_a, window_end), None)
        if candidate is None:
            return None
        self._observer.on_candidate(term_a, candidate)
        return self._accept(term_a, candidate, candidate.start - after_a)

    def _link_by_words(self, text: str, term_a: Occurrence) -> Match | None:
        after_a = term_a.end
        candidate = self._first_candidate_from(text, after_a)
        if candidate is None:
            return None
        self._observer.on_candidate(term_a, candidate)
        gap_value = _bounded_word_gap(text, after_a, candidate.start, self.gap_limit)
        if gap_value > self.gap_limit:
            self._observer.on_match_rejected(term_a, candidate, gap_value)
            return None
        return self._accept(term_a, candidate, gap_value)

    def _first_candidate_from(self, text: str, start: int) -> Occurrence | None:
        """Return the first whole-word term B starting at or after start.

        The word metric has no a priori window, so the remaining text is
        scanned lazily. The previous answer is reused while it still lies
        ahead of start.
        """
        if self._cursor is not None:
            cursor_text, cursor_start, hit = self._cursor
            if cursor_text is text and cursor_start <= start:
                if hit is None:
                    return None
                if hit.start >= start:
                    return hit

        hit = next(self._candidates(text, start, len(text)), None)
        self._cursor = (text, start, hit)
        return hit

    def _candidates(self, text: str, start: int, end: int) -> Iterator[Occurrence]:
        return boundary_occurrences(
            text, self._matcher, self.chunk_size, start, end, self._observer
        )

    def _accept(
        self, term_a: Occurrence, candidate: Occurrence, gap_value: int
    ) -> Match:
        match = Match(
            start=term_a.start,
            span=candidate.end - term_a.start,
            gap_value=gap_value,
        )
        self._observer.on_match_accepted(match)
        return match
