"""Observation hooks for the search pipeline.

Observers are notified at fixed points while a search runs. They never
influence control flow or results; a search with any observer returns exactly
what it returns with NullObserver.
"""

from __future__ import annotations

import logging
from typing import Protocol

from termgap.types import Match, Occurrence

logger = logging.getLogger(__name__)


class SearchObserver(Protocol):
    """Receives events from a running search."""

    def on_boundary_check(
        self, term: str, occurrence: Occurrence, accepted: bool
    ) -> None:
        """Report the word boundary verdict for a raw occurrence."""
        ...

    def on_candidate(self, term_a: Occurrence, candidate: Occurrence) -> None:
        """Report a boundary-valid term B candidate for a term A occurrence."""
        ...

    def on_match_accepted(self, match: Match) -> None:
        """Report a pairing that was added to the result."""
        ...

    def on_match_rejected(
        self, term_a: Occurrence, candidate: Occurrence, gap_value: int
    ) -> None:
        """Report a candidate whose gap exceeded the limit."""
        ...


class NullObserver:
    """Observer that ignores every event."""

    def on_boundary_check(
        self, term: str, occurrence: Occurrence, accepted: bool
    ) -> None:
        pass

    def on_candidate(self, term_a: Occurrence, candidate: Occurrence) -> None:
        pass

    def on_match_accepted(self, match: Match) -> None:
        pass

    def on_match_rejected(
        self, term_a: Occurrence, candidate: Occurrence, gap_value: int
    ) -> None:
        pass


class LoggingObserver:
    """Observer that writes every event to the debug log."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def on_boundary_check(
        self, term: str, occurrence: Occurrence, accepted: bool
    ) -> None:
        self._log.debug(
            "Boundary check for %r at %d: %s",
            term,
            occurrence.start,
            "accepted" if accepted else "rejected",
        )

    def on_candidate(self, term_a: Occurrence, candidate: Occurrence) -> None:
        self._log.debug(
            "Candidate at %d for term A at %d", candidate.start, term_a.start
        )

    def on_match_accepted(self, match: Match) -> None:
        self._log.debug(
            "Match accepted: start=%d span=%d gap=%d",
            match.start,
            match.span,
            match.gap_value,
        )

    def on_match_rejected(
        self, term_a: Occurrence, candidate: Occurrence, gap_value: int
    ) -> None:
        self._log.debug(
            "Match rejected: term A at %d, candidate at %d, gap %d over limit",
            term_a.start,
            candidate.start,
            gap_value,
        )
