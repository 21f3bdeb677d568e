"""Accumulation of matches into a capped result."""

from __future__ import annotations

from termgap.errors import ResourceExhaustedError
from termgap.types import Match, MatchSequence, SearchStatus


class ResultCollector:
    """Collects matches in discovery order up to a fixed cap.

    A collector belongs to a single search call and is discarded when the
    call returns.
    """

    def __init__(self, max_matches: int) -> None:
        """Initialise an empty collector.

        Args:
            max_matches: Largest number of matches to keep (at least 1)

        """
        if max_matches < 1:
            raise ValueError(f"max_matches must be at least 1, got {max_matches}")
        self.max_matches = max_matches
        self._matches: list[Match] = []
        self._status = SearchStatus.COMPLETE

    @property
    def is_full(self) -> bool:
        """True once the cap has been reached."""
        return len(self._matches) >= self.max_matches

    def add(self, match: Match) -> bool:
        """Append a match unless the cap has been reached.

        Returns:
            True if the match was kept, False if the collector was full

        """
        if self.is_full:
            self._status = SearchStatus.CAPPED
            return False
        if self._matches and match.start <= self._matches[-1].start:
            raise ValueError(
                f"Matches must arrive in ascending start order: "
                f"{match.start} after {self._matches[-1].start}"
            )
        try:
            self._matches.append(match)
        except MemoryError as e:
            raise ResourceExhaustedError("Cannot grow the match list") from e
        if self.is_full:
            self._status = SearchStatus.CAPPED
        return True

    def mark_exhausted(self) -> None:
        """Record that processing stopped because an allocation failed."""
        self._status = SearchStatus.RESOURCE_EXHAUSTED

    def __len__(self) -> int:
        return len(self._matches)

    def build(self) -> MatchSequence:
        """Return the collected matches as an immutable sequence."""
        return MatchSequence(matches=tuple(self._matches), status=self._status)
