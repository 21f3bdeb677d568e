"""Chunked scanning of large texts.

Splits a text span into windows of ``chunk_size`` characters, each extended by
``len(pattern) - 1`` characters of overlap so a match straddling a chunk
boundary is still seen. A match is kept only when it starts in the primary
(non-overlap) part of its window, so each occurrence is reported exactly once:

    text:     |-------- chunk 0 --------|-------- chunk 1 --------|-- 2 --|
    window 0: |-------- primary --------|ovl|
    window 1:                           |-------- primary --------|ovl|
    window 2:                                                     |-prim-|

Peak working memory is O(chunk_size + len(pattern)) whatever the text size.
"""

from __future__ import annotations

from collections.abc import Iterator

from termgap.errors import InvalidArgumentError
from termgap.matching.pattern import MatcherStrategy, PatternMatcher

DEFAULT_CHUNK_SIZE = 65_536


def scan_with_matcher(
    text: str,
    matcher: PatternMatcher,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    start: int = 0,
    end: int | None = None,
) -> Iterator[int]:
    """Yield offsets of a prepared matcher's pattern in ``text[start:end]``.

    Args:
        text: Text to scan
        matcher: Matcher holding the pattern and its precomputed tables
        chunk_size: Primary characters per window
        start: First offset a match may begin at
        end: Offset a match may not extend past

    Returns:
        Lazy iterator of global offsets, ascending

    Raises:
        InvalidArgumentError: If chunk_size is less than 1

    """
    if chunk_size < 1:
        raise InvalidArgumentError(f"chunk_size must be at least 1, got {chunk_size}")
    return _scan(text, matcher, chunk_size, start, end)


def _scan(
    text: str,
    matcher: PatternMatcher,
    chunk_size: int,
    start: int,
    end: int | None,
) -> Iterator[int]:
    end = len(text) if end is None else min(end, len(text))
    overlap = max(len(matcher) - 1, 0)

    primary_start = max(0, start)
    while primary_start < end:
        primary_end = min(primary_start + chunk_size, end)
        window_end = min(primary_end + overlap, end)
        for offset in matcher.find_all(text, primary_start, window_end):
            if offset >= primary_end:
                # Starts in the overlap; the next window owns it
                break
            yield offset
        primary_start = primary_end


def scan_in_chunks(
    text: str,
    pattern: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    case_insensitive: bool = False,
    start: int = 0,
    end: int | None = None,
    strategy: MatcherStrategy = MatcherStrategy.AUTO,
) -> Iterator[int]:
    """Yield every offset of pattern in ``text[start:end]``, one chunk at a time.

    Produces the same offsets as a single-pass scan for any valid chunk size.

    Args:
        text: Text to scan
        pattern: Literal pattern to find
        chunk_size: Primary characters per window
        case_insensitive: Fold case of pattern and text before comparing
        start: First offset a match may begin at
        end: Offset a match may not extend past
        strategy: Scanning algorithm to use within each window

    Returns:
        Lazy iterator of global offsets, ascending

    Raises:
        InvalidArgumentError: If chunk_size is less than 1

    """
    matcher = PatternMatcher(pattern, case_insensitive, strategy)
    return scan_with_matcher(text, matcher, chunk_size, start, end)
