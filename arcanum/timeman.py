"""Time allocation for a single search."""

from __future__ import annotations

_SHARE_OF_REMAINING = 30
_MAX_SHARE = 2
_MIN_TIME = 1


def _div(numerator: int, denominator: int) -> int:
    """Integer division rounding towards zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def allocated_time(
    time: int, inc: int, moves_to_go: int, move_time: int, move_overhead: int
) -> int:
    """Milliseconds to spend on the next move.

    ``move_time`` (already reduced by the overhead) caps the result when positive;
    the result is never below 1 ms.
    """
    time_limit = time - move_overhead

    if moves_to_go > 0:
        allocated = _div(time_limit, moves_to_go) + inc
    else:
        allocated = min(
            _div(time_limit, _SHARE_OF_REMAINING) + inc, _div(time_limit, _MAX_SHARE)
        )

    if move_time > 0:
        time_limit = min(time_limit, move_time)

    return max(min(time_limit, allocated), _MIN_TIME)