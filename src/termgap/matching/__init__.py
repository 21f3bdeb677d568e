"""Proximity search components.

This package provides the building blocks of a two-term search:
- is_word_char / is_boundary_match: Word boundary classification
- PatternMatcher / find_all: Exact literal matching (naive, skip, single char)
- scan_in_chunks: Chunked scanning with bounded memory
- ProximityLinker: Pairs term A occurrences with their nearest term B
- ResultCollector: Capped, ordered accumulation of matches
"""

from termgap.matching.boundary import (
    WORD_PUNCTUATION,
    is_boundary_match,
    is_word_char,
)
from termgap.matching.collector import ResultCollector
from termgap.matching.linker import (
    ProximityLinker,
    boundary_occurrences,
    word_gap,
    words_between,
)
from termgap.matching.pattern import (
    SKIP_THRESHOLD,
    MatcherStrategy,
    PatternMatcher,
    SkipTables,
    find_all,
    find_all_naive,
    find_all_single_char,
    find_all_skip,
    fold_case,
)
from termgap.matching.windowed import (
    DEFAULT_CHUNK_SIZE,
    scan_in_chunks,
    scan_with_matcher,
)

__all__ = [
    # Boundary classification
    "WORD_PUNCTUATION",
    "is_boundary_match",
    "is_word_char",
    # Pattern matching
    "SKIP_THRESHOLD",
    "MatcherStrategy",
    "PatternMatcher",
    "SkipTables",
    "find_all",
    "find_all_naive",
    "find_all_single_char",
    "find_all_skip",
    "fold_case",
    # Windowed scanning
    "DEFAULT_CHUNK_SIZE",
    "scan_in_chunks",
    "scan_with_matcher",
    # Linking and collection
    "ProximityLinker",
    "ResultCollector",
    "boundary_occurrences",
    "word_gap",
    "words_between",
]
