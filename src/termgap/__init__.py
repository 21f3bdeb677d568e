"""Bounded two-term proximity search.

Finds every whole-word occurrence of one term followed, within a character
or word gap, by a whole-word occurrence of another.
"""

from termgap.config import SearchConfiguration
from termgap.engine import SearchEngine, build_request, search, search_request
from termgap.errors import (
    ConfigurationError,
    InvalidArgumentError,
    ResourceExhaustedError,
    TermGapError,
    WireFormatError,
)
from termgap.observers import LoggingObserver, NullObserver, SearchObserver
from termgap.types import (
    MAX_GAP,
    GapMetric,
    Match,
    MatchSequence,
    Occurrence,
    SearchRequest,
    SearchStatus,
)

__all__ = [
    # Search
    "SearchEngine",
    "build_request",
    "search",
    "search_request",
    # Configuration
    "SearchConfiguration",
    # Types
    "MAX_GAP",
    "GapMetric",
    "Match",
    "MatchSequence",
    "Occurrence",
    "SearchRequest",
    "SearchStatus",
    # Observers
    "LoggingObserver",
    "NullObserver",
    "SearchObserver",
    # Errors
    "ConfigurationError",
    "InvalidArgumentError",
    "ResourceExhaustedError",
    "TermGapError",
    "WireFormatError",
]
