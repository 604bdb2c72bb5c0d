"""Common type definitions for rolling Bloom filters.

Defines fundamental types used across all components.
"""

from __future__ import annotations

from enum import IntEnum

from .errors import InvalidSeedError, UnsupportedHashCountError

# Core primitive types
Value = bytes | bytearray | memoryview | str
Index = int
Seed = int

HASH_BITS = 128
MAX_SEED = (1 << 32) - 1


class HashCount(IntEnum):
    """Supported numbers of indexes derived from one 128-bit hash.

    Each count must split 128 bits into equal segments whose width keeps the
    bit array addressable. Two would need 2^64 bits, so it is not offered.
    """

    FOUR = 4
    EIGHT = 8

    @classmethod
    def validate(cls, hash_count: int) -> HashCount:
        """Return the enum member for hash_count or raise."""
        try:
            return cls(hash_count)
        except ValueError:
            supported = ", ".join(str(int(m)) for m in cls)
            raise UnsupportedHashCountError(
                f"Unsupported hash count {hash_count!r}; expected one of {supported}"
            ) from None

    @property
    def segment_bits(self) -> int:
        """Width in bits of each index segment."""
        return HASH_BITS // self.value

    @property
    def filter_bits(self) -> int:
        """Length of the bit array addressed by the segments."""
        return 1 << self.segment_bits


def validate_seed(seed: int) -> Seed:
    """Return seed if it fits the hash function's seed range."""
    if isinstance(seed, bool) or not isinstance(seed, int) or not 0 <= seed <= MAX_SEED:
        raise InvalidSeedError(f"Seed must be an integer in [0, {MAX_SEED}], got {seed!r}")
    return seed
