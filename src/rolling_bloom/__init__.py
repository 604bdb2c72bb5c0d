"""Rolling Bloom - time-windowed approximate set membership in Python."""

from .core.config import DEFAULT_SHIFT_DURATION, DEFAULT_SHIFT_INSERTIONS, RollingBloomConfig
from .core.errors import (
    BloomError,
    UnsupportedHashCountError,
    InvalidSeedError,
    InvalidShiftParameterError,
    IncompatibleHashError,
)
from .core.rolling import RollingBloomFilter
from .core.types import HashCount, Value
from .components.bloom import FixedBloomFilter
from .components.hashing import BloomHash
from .components.shift import ShiftByAny, ShiftByDuration, ShiftByInsertions, ShiftManually
from .interfaces.shift import ShiftCondition

__all__ = [
    "RollingBloomFilter",
    "RollingBloomConfig",
    "FixedBloomFilter",
    "BloomHash",
    "HashCount",
    "Value",
    "ShiftCondition",
    "ShiftByDuration",
    "ShiftByInsertions",
    "ShiftByAny",
    "ShiftManually",
    "DEFAULT_SHIFT_DURATION",
    "DEFAULT_SHIFT_INSERTIONS",
    "BloomError",
    "UnsupportedHashCountError",
    "InvalidSeedError",
    "InvalidShiftParameterError",
    "IncompatibleHashError",
]
