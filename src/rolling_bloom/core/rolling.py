"""Rolling Bloom filter - main public API.

Keeps a window of two filters so that old values are eventually forgotten.
"""

from __future__ import annotations

import logging

from ..components.bloom import FixedBloomFilter
from ..components.shift import ShiftByDuration, ShiftByInsertions
from ..interfaces.shift import ShiftCondition
from .config import (
    DEFAULT_SHIFT_DURATION,
    DEFAULT_SHIFT_INSERTIONS,
    SHIFT_BY_DURATION,
    SHIFT_BY_INSERTIONS,
    RollingBloomConfig,
)
from .errors import InvalidShiftParameterError
from .types import HashCount, Value, validate_seed

logger = logging.getLogger(__name__)


class RollingBloomFilter:
    """Rolling window of two Bloom filters.

    Args:
        hash_count: Indexes derived per value, 4 or 8
        shift_condition: When to rotate; defaults to ShiftByDuration()
        seed: Salt for the hash space

    Public API:
        - add(value): Insert into both filters, rotate if the condition trips
        - contains(value): Membership test against the oldest filter
        - shift(): Drop the oldest filter and start a new window

    Invariants:
        - Slot 0 is the oldest filter, slot 1 the newest
        - Every insertion is written to both filters
        - Only the oldest filter is read
        - A value stays visible for at least one full window and is
          forgotten after two rotations without re-insertion
    """

    def __init__(
        self,
        hash_count: int = 4,
        shift_condition: ShiftCondition | None = None,
        seed: int = 0,
    ):
        self.hash_count = HashCount.validate(hash_count)
        self.seed = validate_seed(seed)
        self._shift_condition = shift_condition if shift_condition is not None else ShiftByDuration()
        self._filters = [self._new_filter(), self._new_filter()]
        self._shift_count = 0

        logger.info(
            f"Initialized rolling bloom filter (hash_count={int(self.hash_count)}, "
            f"seed={self.seed}, shift_condition={self._shift_condition!r})"
        )

    @classmethod
    def by_duration(
        cls, duration: float = DEFAULT_SHIFT_DURATION, hash_count: int = 4, seed: int = 0
    ) -> RollingBloomFilter:
        """Create a filter that rotates every duration seconds."""
        return cls(hash_count, ShiftByDuration(duration), seed)

    @classmethod
    def by_insertions(
        cls, limit: int = DEFAULT_SHIFT_INSERTIONS, hash_count: int = 4, seed: int = 0
    ) -> RollingBloomFilter:
        """Create a filter that rotates every limit insertions."""
        return cls(hash_count, ShiftByInsertions(limit), seed)

    @classmethod
    def from_config(cls, config: RollingBloomConfig) -> RollingBloomFilter:
        """Create a filter and its shift condition from configuration."""
        if config.shift_strategy == SHIFT_BY_DURATION:
            condition: ShiftCondition = ShiftByDuration(config.shift_duration_seconds)
        elif config.shift_strategy == SHIFT_BY_INSERTIONS:
            condition = ShiftByInsertions(config.shift_insertions)
        else:
            raise InvalidShiftParameterError(
                f"Unknown shift strategy {config.shift_strategy!r}; "
                f"expected {SHIFT_BY_DURATION!r} or {SHIFT_BY_INSERTIONS!r}"
            )
        return cls(config.hash_count, condition, config.seed)

    def _new_filter(self) -> FixedBloomFilter:
        return FixedBloomFilter(self.hash_count, self.seed)

    def add(self, value: Value) -> None:
        """Add value to the rolling window."""
        record = self._filters[0].hash(value)

        self._filters[0].add_hash(record)
        self._filters[1].add_hash(record)

        if self._shift_condition.should_shift_after_increment():
            self.shift()

    def shift(self) -> None:
        """Replace the oldest filter with an empty one and make it the newest."""
        self._shift_condition.do_shift()

        self._filters[0] = self._new_filter()
        self._filters[0], self._filters[1] = self._filters[1], self._filters[0]

        self._shift_count += 1
        logger.debug(f"Rolled bloom filter window (shift #{self._shift_count})")

    def contains(self, value: Value) -> bool:
        """Return True if value may have been added within the window."""
        # The oldest filter holds everything the newest one does.
        return self._filters[0].contains(value)

    def __contains__(self, value: Value) -> bool:
        return self.contains(value)

    @property
    def oldest(self) -> FixedBloomFilter:
        return self._filters[0]

    @property
    def newest(self) -> FixedBloomFilter:
        return self._filters[1]

    @property
    def filters(self) -> tuple[FixedBloomFilter, FixedBloomFilter]:
        """Both filters, oldest first."""
        return self._filters[0], self._filters[1]

    @property
    def shift_condition(self) -> ShiftCondition:
        return self._shift_condition

    @property
    def shift_count(self) -> int:
        """Number of rotations performed so far."""
        return self._shift_count

    def estimated_false_positive_rate(self) -> float:
        """False positive estimate for contains(), from the oldest filter's load."""
        return self._filters[0].estimated_false_positive_rate()

    def __repr__(self) -> str:
        return (
            f"RollingBloomFilter(hash_count={int(self.hash_count)}, seed={self.seed}, "
            f"shift_condition={self._shift_condition!r}, shift_count={self._shift_count})"
        )
