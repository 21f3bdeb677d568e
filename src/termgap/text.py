"""Text preparation and match display helpers."""

from __future__ import annotations

import re
from enum import Enum

from termgap.types import Match

_WHITESPACE_RUN = re.compile(r"\s+")
_ZERO_WIDTH = re.compile(r"[\u200b-\u200d\ufeff]")
_ELLIPSIS = "..."


def normalise_text(text: str) -> str:
    """Collapse whitespace runs to one space, drop zero-width characters, trim.

    Offsets reported by a search over the normalised text refer to the
    normalised text, not the original.
    """
    collapsed = _WHITESPACE_RUN.sub(" ", text)
    return _ZERO_WIDTH.sub("", collapsed).strip()


class ContextSize(str, Enum):
    """Characters of context shown either side of a match."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    FULL = "full"

    @property
    def char_count(self) -> int | None:
        """Characters to include on each side of a match (None = full text)."""
        match self:
            case ContextSize.SMALL:
                return 20
            case ContextSize.MEDIUM:
                return 40
            case ContextSize.LARGE:
                return 80
            case ContextSize.FULL:
                return None


def matched_text(text: str, match: Match) -> str:
    """Return the text covered by a match, term A through term B."""
    return text[match.start : match.end]


def extract_snippet(text: str, match: Match, context_size: ContextSize) -> str:
    """Extract the matched span with surrounding context.

    Args:
        text: The text that was searched
        match: A match within text
        context_size: How much context to include on each side

    Returns:
        Snippet with ellipsis markers where it was cut short

    """
    context_chars = context_size.char_count

    if context_chars is None:
        return text.strip()

    #   text:  "a quick brown fox jumps"
    #   match:    |quick brown fox|  (start=2, span=15)
    #   context_chars: 2
    #
    #   start = max(0, 2 - 2) = 0
    #   end   = min(23, 17 + 2) = 19
    #   snippet = "a quick brown fox j" + "..."
    start = max(0, match.start - context_chars)
    end = min(len(text), match.end + context_chars)

    snippet = text[start:end].strip()

    if start > 0:
        snippet = _ELLIPSIS + snippet
    if end < len(text):
        snippet = snippet + _ELLIPSIS

    return snippet
