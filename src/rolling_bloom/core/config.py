"""Configuration for rolling Bloom filters.

Defines all tunable parameters for a rolling window of Bloom filters.
"""

from __future__ import annotations

from dataclasses import dataclass

# Default duration before shifting the filter: 1 hour.
DEFAULT_SHIFT_DURATION: float = 3600.0

# Default number of insertions before shifting the filter.
# Valid for both 4 and 8 hash counts.
DEFAULT_SHIFT_INSERTIONS: int = 1 << 12

SHIFT_BY_DURATION = "duration"
SHIFT_BY_INSERTIONS = "insertions"


@dataclass
class RollingBloomConfig:
    """Configuration parameters for a rolling Bloom filter.

    Attributes:
        hash_count: Indexes derived per value (4 or 8)
        seed: Salt for the hash space, unsigned 32-bit
        shift_strategy: "duration" or "insertions"
        shift_duration_seconds: Window length for the duration strategy
        shift_insertions: Window length for the insertion-count strategy
    """

    hash_count: int = 4
    seed: int = 0
    shift_strategy: str = SHIFT_BY_DURATION
    shift_duration_seconds: float = DEFAULT_SHIFT_DURATION
    shift_insertions: int = DEFAULT_SHIFT_INSERTIONS
