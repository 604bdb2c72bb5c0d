"""Protocol definition for shift conditions."""

from __future__ import annotations

from typing import Protocol


class ShiftCondition(Protocol):
    """Decides when a rolling window of filters should rotate.

    Strategies may subclass this protocol explicitly to inherit
    should_shift_after_increment().
    """

    def should_shift(self) -> bool:
        """Return whether the window should rotate now. Must not mutate."""
        ...

    def do_shift(self) -> None:
        """Mark the start of a new window."""
        ...

    def increment(self) -> None:
        """Record one insertion."""
        ...

    def should_shift_after_increment(self) -> bool:
        """Record one insertion, then return whether the window should rotate."""
        self.increment()
        return self.should_shift()
