"""Tests for capped match collection."""

import pytest

from termgap.errors import ResourceExhaustedError
from termgap.matching import ResultCollector
from termgap.types import Match, SearchStatus


class TestResultCollector:
    """Test match accumulation and status tracking."""

    def test_collects_in_order(self) -> None:
        """Matches are kept in the order they were added."""
        collector = ResultCollector(10)
        assert collector.add(Match(0, 5, 0))
        assert collector.add(Match(7, 5, 1))

        result = collector.build()

        assert [m.start for m in result] == [0, 7]
        assert result.status is SearchStatus.COMPLETE
        assert not result.truncated

    def test_reaching_cap_marks_capped(self) -> None:
        """Filling the collector marks the result as capped."""
        collector = ResultCollector(2)
        collector.add(Match(0, 5, 0))
        collector.add(Match(7, 5, 0))

        assert collector.is_full
        assert collector.build().status is SearchStatus.CAPPED

    def test_add_when_full_is_refused(self) -> None:
        """Matches past the cap are dropped."""
        collector = ResultCollector(1)
        collector.add(Match(0, 5, 0))

        assert not collector.add(Match(7, 5, 0))
        assert len(collector) == 1

    def test_rejects_out_of_order_match(self) -> None:
        """Matches must arrive with strictly ascending starts."""
        collector = ResultCollector(5)
        collector.add(Match(7, 5, 0))

        with pytest.raises(ValueError, match="ascending"):
            collector.add(Match(3, 5, 0))

    @pytest.mark.parametrize("max_matches", [0, -1])
    def test_requires_positive_cap(self, max_matches: int) -> None:
        """A cap below 1 is rejected."""
        with pytest.raises(ValueError, match="at least 1"):
            ResultCollector(max_matches)

    def test_mark_exhausted_keeps_partial_matches(self) -> None:
        """An exhausted collector still returns what it holds."""
        collector = ResultCollector(5)
        collector.add(Match(0, 5, 0))
        collector.mark_exhausted()

        result = collector.build()

        assert len(result) == 1
        assert result.status is SearchStatus.RESOURCE_EXHAUSTED
        assert result.truncated

    def test_memory_error_on_append_becomes_resource_exhausted(self) -> None:
        """A failed append is reported as ResourceExhaustedError."""

        class ExhaustedList(list):
            def append(self, item: object) -> None:
                raise MemoryError

        collector = ResultCollector(5)
        collector._matches = ExhaustedList()

        with pytest.raises(ResourceExhaustedError):
            collector.add(Match(0, 5, 0))
