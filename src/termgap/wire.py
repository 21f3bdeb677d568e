"""Legacy flat-integer result format.

Older hosts read results as a flat run of signed 32-bit integers, three per
match, closed by a single ``-1``:

    [start, span, gap, start, span, gap, ..., -1]

Only use this at a serialisation boundary; everywhere else results are
MatchSequence values.
"""

from __future__ import annotations

import struct
from collections.abc import Iterable, Sequence

from termgap.errors import WireFormatError
from termgap.types import Match

SENTINEL = -1
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_FIELDS_PER_MATCH = 3
_INT32_SIZE = 4


def encode_matches(matches: Iterable[Match]) -> list[int]:
    """Flatten matches into the sentinel-terminated integer list.

    Raises:
        WireFormatError: If a field does not fit in a signed 32-bit integer

    """
    values: list[int] = []
    for match in matches:
        for value in match.as_tuple():
            if not _INT32_MIN <= value <= _INT32_MAX:
                raise WireFormatError(f"Value {value} does not fit in int32")
            values.append(value)
    values.append(SENTINEL)
    return values


def decode_matches(values: Iterable[int]) -> tuple[Match, ...]:
    """Rebuild matches from a flat integer run.

    Reading stops at the first sentinel in a start position; anything after
    it is ignored.

    Raises:
        WireFormatError: If the run ends without a sentinel or mid-triple

    """
    matches: list[Match] = []
    pending: list[int] = []
    for value in values:
        if not pending and value == SENTINEL:
            return tuple(matches)
        pending.append(value)
        if len(pending) == _FIELDS_PER_MATCH:
            start, span, gap_value = pending
            matches.append(Match(start=start, span=span, gap_value=gap_value))
            pending = []

    if pending:
        raise WireFormatError(
            f"Truncated match record: {len(pending)} of {_FIELDS_PER_MATCH} fields"
        )
    raise WireFormatError("Missing -1 terminator")


def to_bytes(values: Sequence[int]) -> bytes:
    """Pack integers as little-endian signed 32-bit values."""
    try:
        return struct.pack(f"<{len(values)}i", *values)
    except struct.error as e:
        raise WireFormatError(f"Cannot pack wire values: {e}") from e


def from_bytes(data: bytes) -> list[int]:
    """Unpack little-endian signed 32-bit values."""
    if len(data) % _INT32_SIZE:
        raise WireFormatError(
            f"Wire data length {len(data)} is not a multiple of {_INT32_SIZE}"
        )
    return list(struct.unpack(f"<{len(data) // _INT32_SIZE}i", data))
