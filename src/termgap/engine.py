"""Two-term proximity search.

The engine runs one request through the pipeline:

    term A scan (chunked) -> boundary filter -> term B linking -> collector

Term A occurrences are processed in ascending order and processing stops at
the match cap, so a capped result is always the first ``max_matches``
matches by term A position. With more than one worker, batches of term A
occurrences are linked on a thread pool and merged back in order; the result
is identical to sequential processing.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from itertools import islice

from pydantic import ValidationError

from termgap.config import SearchConfiguration
from termgap.errors import InvalidArgumentError, ResourceExhaustedError
from termgap.matching import (
    PatternMatcher,
    ProximityLinker,
    ResultCollector,
    boundary_occurrences,
)
from termgap.observers import NullObserver, SearchObserver
from termgap.types import GapMetric, Match, MatchSequence, Occurrence, SearchRequest

logger = logging.getLogger(__name__)

# Term A occurrences handed to a worker at a time
_BATCH_SIZE = 256


def build_request(  # noqa: PLR0913 - one argument per request field
    text: str,
    term_a: str,
    term_b: str,
    gap_limit: int,
    case_insensitive: bool = False,
    gap_metric: GapMetric | str = GapMetric.CHARACTERS,
) -> SearchRequest:
    """Validate search arguments into a SearchRequest.

    Raises:
        InvalidArgumentError: If text or a term is empty, or the gap limit is
            outside [0, MAX_GAP]

    """
    try:
        return SearchRequest(
            text=text,
            term_a=term_a,
            term_b=term_b,
            gap_limit=gap_limit,
            case_insensitive=case_insensitive,
            gap_metric=GapMetric(gap_metric),
        )
    except (ValidationError, ValueError) as e:
        raise InvalidArgumentError(f"Invalid search request: {e}") from e


class SearchEngine:
    """Runs proximity searches under a fixed configuration.

    The engine holds only its configuration and observer; every call builds
    its own matchers, linker and collector, so one engine can serve any
    number of calls, including concurrent ones.
    """

    def __init__(
        self,
        config: SearchConfiguration | None = None,
        observer: SearchObserver | None = None,
    ) -> None:
        """Initialise engine.

        Args:
            config: Limits and tuning; defaults to SearchConfiguration()
            observer: Receives pipeline events; defaults to NullObserver

        """
        self.config = config or SearchConfiguration()
        self._observer = observer or NullObserver()

    def run(self, request: SearchRequest) -> MatchSequence:
        """Run a validated request.

        Args:
            request: The search to run

        Returns:
            Matches ordered by ascending start, at most config.max_matches

        Raises:
            InvalidArgumentError: If the gap limit exceeds config.max_gap

        """
        if request.gap_limit > self.config.max_gap:
            raise InvalidArgumentError(
                f"gap_limit {request.gap_limit} exceeds the maximum of "
                f"{self.config.max_gap}"
            )

        logger.debug(
            "Searching %d characters for %r then %r within %d %s",
            len(request.text),
            request.term_a,
            request.term_b,
            request.gap_limit,
            request.gap_metric.value,
        )

        collector = ResultCollector(self.config.max_matches)
        try:
            if self.config.workers > 1:
                self._run_parallel(request, collector)
            else:
                self._run_sequential(request, collector)
        except ResourceExhaustedError as e:
            logger.warning(
                "Search stopped early after %d matches: %s", len(collector), e
            )
            collector.mark_exhausted()

        result = collector.build()
        logger.debug(
            "Search finished with %d matches (%s)", len(result), result.status.value
        )
        return result

    def _term_a_occurrences(self, request: SearchRequest) -> Iterator[Occurrence]:
        matcher = PatternMatcher(request.term_a, request.case_insensitive)
        return boundary_occurrences(
            request.text,
            matcher,
            self.config.chunk_size,
            observer=self._observer,
        )

    def _linker(self, request: SearchRequest) -> ProximityLinker:
        return ProximityLinker(
            term_b=request.term_b,
            gap_limit=request.gap_limit,
            gap_metric=request.gap_metric,
            case_insensitive=request.case_insensitive,
            chunk_size=self.config.chunk_size,
            observer=self._observer,
        )

    def _run_sequential(
        self, request: SearchRequest, collector: ResultCollector
    ) -> None:
        linker = self._linker(request)
        for match in linker.link_all(request.text, self._term_a_occurrences(request)):
            collector.add(match)
            if collector.is_full:
                return

    def _link_batch(
        self, request: SearchRequest, batch: list[Occurrence]
    ) -> list[Match]:
        linker = self._linker(request)
        return list(linker.link_all(request.text, batch))

    def _run_parallel(
        self, request: SearchRequest, collector: ResultCollector
    ) -> None:
        workers = self.config.workers
        occurrences = self._term_a_occurrences(request)
        link_batch = partial(self._link_batch, request)

        with ThreadPoolExecutor(max_workers=workers) as pool:
            while True:
                batches = [
                    batch
                    for batch in (
                        list(islice(occurrences, _BATCH_SIZE)) for _ in range(workers)
                    )
                    if batch
                ]
                if not batches:
                    return
                # map() yields batch results in submission order
                for matches in pool.map(link_batch, batches):
                    for match in matches:
                        collector.add(match)
                        if collector.is_full:
                            return


def search_request(
    request: SearchRequest,
    *,
    config: SearchConfiguration | None = None,
    observer: SearchObserver | None = None,
) -> MatchSequence:
    """Run a prebuilt SearchRequest with a fresh engine."""
    return SearchEngine(config, observer).run(request)


def search(  # noqa: PLR0913 - public call contract
    text: str,
    term_a: str,
    term_b: str,
    gap_limit: int,
    case_insensitive: bool = False,
    gap_metric: GapMetric | str = GapMetric.CHARACTERS,
    *,
    config: SearchConfiguration | None = None,
    observer: SearchObserver | None = None,
) -> MatchSequence:
    """Find term A occurrences followed closely by term B.

    Each whole-word occurrence of term A is paired with the first whole-word
    occurrence of term B after it, provided the gap between them is at most
    gap_limit in the chosen metric.

    Args:
        text: Text body to search
        term_a: Leading term
        term_b: Trailing term
        gap_limit: Largest gap that still pairs (0 to config.max_gap)
        case_insensitive: Fold case before comparing
        gap_metric: "characters" or "words"
        config: Limits and tuning; defaults to SearchConfiguration()
        observer: Receives pipeline events

    Returns:
        Matches ordered by ascending start. Reaching the match cap or running
        out of memory truncates the result and is reported in its status.

    Raises:
        InvalidArgumentError: If text or a term is empty, or gap_limit is out
            of range

    Example:
        ```python
        result = search("the quick brown fox", "quick", "fox", 1, gap_metric="words")
        result[0].as_tuple()  # (4, 15, 0)
        ```

    """
    request = build_request(
        text, term_a, term_b, gap_limit, case_insensitive, gap_metric
    )
    return search_request(request, config=config, observer=observer)
