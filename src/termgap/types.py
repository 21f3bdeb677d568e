"""Types for proximity search requests and results."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import overload, override

from pydantic import BaseModel, ConfigDict, Field

MAX_GAP = 1_000_000


class GapMetric(str, Enum):
    """How the distance between term A and term B is measured.

    CHARACTERS: Raw character distance from the end of term A to the start
        of term B.

    WORDS: Number of gaps between whole words separating the two terms.
    """

    CHARACTERS = "characters"
    WORDS = "words"


class SearchStatus(str, Enum):
    """Completion state of a search.

    COMPLETE: Every term A occurrence was processed.

    CAPPED: Processing stopped because the match cap was reached. This is a
        normal truncation, not an error.

    RESOURCE_EXHAUSTED: Processing stopped because an allocation failed. The
        matches collected so far are returned, ordered and well formed.
    """

    COMPLETE = "complete"
    CAPPED = "capped"
    RESOURCE_EXHAUSTED = "resource_exhausted"


class SearchRequest(BaseModel):
    """A validated two-term proximity query.

    Immutable. Construction fails with a pydantic ValidationError when a
    field is out of range; the search engine reports that as an
    InvalidArgumentError.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    text: str = Field(min_length=1, description="Text body to search")
    term_a: str = Field(min_length=1, description="Leading term")
    term_b: str = Field(min_length=1, description="Trailing term")
    gap_limit: int = Field(
        ge=0,
        le=MAX_GAP,
        description="Maximum gap between the terms, in the units of gap_metric",
    )
    case_insensitive: bool = Field(
        default=False, description="Fold case before comparing"
    )
    gap_metric: GapMetric = Field(
        default=GapMetric.CHARACTERS, description="Unit used for the gap"
    )


@dataclass(frozen=True, slots=True)
class Occurrence:
    """A position where a term's characters appear in the text.

    Attributes:
        start: Zero-based start offset (inclusive)
        length: Length of the matched term

    """

    start: int
    length: int

    @property
    def end(self) -> int:
        """Offset one past the last matched character."""
        return self.start + self.length


@dataclass(frozen=True, slots=True)
class Match:
    """A term A occurrence paired with its nearest qualifying term B.

    Attributes:
        start: Offset of the term A occurrence
        span: Length from the start of term A to the end of term B
        gap_value: Measured proximity in the request's gap metric

    """

    start: int
    span: int
    gap_value: int

    @property
    def end(self) -> int:
        """Offset one past the end of the paired term B."""
        return self.start + self.span

    def as_tuple(self) -> tuple[int, int, int]:
        """Return the match as a ``(start, span, gap_value)`` triple."""
        return (self.start, self.span, self.gap_value)


@dataclass(frozen=True, slots=True)
class MatchSequence(Sequence[Match]):
    """Matches of a single search, ordered by ascending start.

    Attributes:
        matches: The matches found
        status: Whether the search ran to completion or was truncated

    """

    matches: tuple[Match, ...] = ()
    status: SearchStatus = SearchStatus.COMPLETE

    @property
    def truncated(self) -> bool:
        """True when the search stopped before processing every candidate."""
        return self.status is not SearchStatus.COMPLETE

    @overload
    def __getitem__(self, index: int) -> Match: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Match, ...]: ...

    @override
    def __getitem__(self, index: int | slice) -> Match | tuple[Match, ...]:
        return self.matches[index]

    @override
    def __len__(self) -> int:
        return len(self.matches)

    @override
    def __iter__(self) -> Iterator[Match]:
        return iter(self.matches)
