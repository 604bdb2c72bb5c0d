"""Shift conditions for a rolling window of filters.

Each condition is consulted once per insertion via
should_shift_after_increment() and reset via do_shift() when the window
rotates.
"""

from __future__ import annotations

import math
import time
from datetime import timedelta
from typing import Callable

from ..core.config import DEFAULT_SHIFT_DURATION, DEFAULT_SHIFT_INSERTIONS
from ..core.errors import InvalidShiftParameterError
from ..interfaces.shift import ShiftCondition


class ShiftByDuration(ShiftCondition):
    """Shift once a fixed amount of time has elapsed since the last shift.

    Args:
        duration: Window length in seconds, or a timedelta
        clock: Monotonic clock returning seconds
    """

    def __init__(
        self,
        duration: float | timedelta = DEFAULT_SHIFT_DURATION,
        clock: Callable[[], float] = time.monotonic,
    ):
        if isinstance(duration, timedelta):
            duration = duration.total_seconds()
        if (
            isinstance(duration, bool)
            or not isinstance(duration, (int, float))
            or not math.isfinite(duration)
            or duration <= 0
        ):
            raise InvalidShiftParameterError(f"Shift duration must be a positive finite number, got {duration!r}")
        self.duration = float(duration)
        self._clock = clock
        self._last_shift = clock()

    @property
    def last_shift(self) -> float:
        return self._last_shift

    def elapsed(self) -> float:
        """Seconds since the last shift."""
        return self._clock() - self._last_shift

    def should_shift(self) -> bool:
        return self.elapsed() >= self.duration

    def do_shift(self) -> None:
        self._last_shift = self._clock()

    def increment(self) -> None:
        # Time-based; insertions are not counted.
        pass

    def __repr__(self) -> str:
        return f"ShiftByDuration(duration={self.duration})"


class ShiftByInsertions(ShiftCondition):
    """Shift after a fixed number of insertions.

    Args:
        limit: Insertions per window
    """

    def __init__(self, limit: int = DEFAULT_SHIFT_INSERTIONS):
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise InvalidShiftParameterError(f"Insertion limit must be a positive integer, got {limit!r}")
        self.limit = limit
        self.insertion_count = 0

    def should_shift(self) -> bool:
        # Incremented before checking, so the limit-th insertion trips it.
        return self.insertion_count >= self.limit

    def do_shift(self) -> None:
        self.insertion_count = 0

    def increment(self) -> None:
        self.insertion_count += 1

    def __repr__(self) -> str:
        return f"ShiftByInsertions(limit={self.limit}, insertion_count={self.insertion_count})"


class ShiftByAny(ShiftCondition):
    """Shift when any of the wrapped conditions would.

    Every wrapped condition sees every insertion and every shift, so e.g.
    ShiftByAny(ShiftByDuration(60), ShiftByInsertions(1000)) rotates after a
    minute or after 1000 insertions, whichever comes first.
    """

    def __init__(self, *conditions: ShiftCondition):
        if not conditions:
            raise InvalidShiftParameterError("ShiftByAny needs at least one condition")
        self.conditions = conditions

    def should_shift(self) -> bool:
        return any(c.should_shift() for c in self.conditions)

    def do_shift(self) -> None:
        for c in self.conditions:
            c.do_shift()

    def increment(self) -> None:
        for c in self.conditions:
            c.increment()

    def __repr__(self) -> str:
        return f"ShiftByAny({', '.join(repr(c) for c in self.conditions)})"


class ShiftManually(ShiftCondition):
    """Never shift on its own; the owner calls shift() explicitly."""

    def should_shift(self) -> bool:
        return False

    def do_shift(self) -> None:
        pass

    def increment(self) -> None:
        pass

    def __repr__(self) -> str:
        return "ShiftManually()"
