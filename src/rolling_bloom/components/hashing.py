"""Hash splitting for Bloom filters.

One seeded 128-bit MurmurHash3 digest is cut into N equal, non-overlapping
segments, least-significant segment first. Each segment is an index into a
bit array of 2^(128/N) bits, so no modulo reduction is needed.

MurmurHash3 is fast and well distributed but not collision resistant; do not
rely on it against adversarial input.
"""

from __future__ import annotations

from dataclasses import dataclass

import mmh3

from ..core.types import HashCount, Index, Value, validate_seed


def to_bytes(value: Value) -> bytes:
    """Return the byte sequence that is hashed for value."""
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    raise TypeError(f"Bloom filter values must be bytes-like or str, got {type(value).__name__}")


def hash128(value: Value, seed: int = 0) -> int:
    """Return the unsigned 128-bit hash of value."""
    return mmh3.hash128(to_bytes(value), seed=seed, x64arch=True, signed=False)


def split_hash(hashed: int, hash_count: HashCount) -> tuple[Index, ...]:
    """Split a 128-bit integer into hash_count equal-width indexes."""
    width = hash_count.segment_bits
    mask = (1 << width) - 1
    return tuple((hashed >> (i * width)) & mask for i in range(hash_count))


@dataclass(frozen=True)
class BloomHash:
    """Indexes derived from one value for a given hash count and seed.

    Attributes:
        indexes: hash_count positions, each in [0, 2^(128/hash_count))
        hash_count: Number of indexes
        seed: Seed the digest was computed with
    """

    indexes: tuple[Index, ...]
    hash_count: HashCount
    seed: int = 0

    @classmethod
    def from_value(cls, value: Value, hash_count: int, seed: int = 0) -> BloomHash:
        """Hash value and split the digest into indexes."""
        count = HashCount.validate(hash_count)
        seed = validate_seed(seed)
        return cls(split_hash(hash128(value, seed), count), count, seed)

    def __iter__(self):
        return iter(self.indexes)

    def __len__(self) -> int:
        return len(self.indexes)
