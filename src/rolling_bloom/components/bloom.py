"""Bloom filter implementation.

Fixed-size bloom filter whose bit array is addressed directly by the
segments of one 128-bit hash.
"""

from __future__ import annotations

from ..core.errors import IncompatibleHashError
from ..core.types import HashCount, Value, validate_seed
from .bitarray import PagedBitArray
from .hashing import BloomHash


class FixedBloomFilter:
    """Probabilistic set membership test using a bit array.

    Args:
        hash_count: Indexes derived per value, 4 or 8
        seed: Salt for the hash space

    Invariants:
        - False positives are possible
        - False negatives are not possible
        - Bit array size is 2^(128/hash_count) and never changes
        - Bits are never cleared; the filter is replaced instead
    """

    def __init__(self, hash_count: int = 4, seed: int = 0):
        self.hash_count = HashCount.validate(hash_count)
        self.seed = validate_seed(seed)
        self.bits = PagedBitArray(self.hash_count.filter_bits)

    @property
    def size(self) -> int:
        """Length of the bit array."""
        return len(self.bits)

    def hash(self, value: Value) -> BloomHash:
        """Return the hash record this filter uses for value."""
        return BloomHash.from_value(value, self.hash_count, self.seed)

    def _check(self, record: BloomHash) -> None:
        if record.hash_count != self.hash_count or record.seed != self.seed:
            raise IncompatibleHashError(
                f"Hash record (hash_count={record.hash_count}, seed={record.seed}) does not match "
                f"filter (hash_count={self.hash_count}, seed={self.seed})"
            )

    def add_hash(self, record: BloomHash) -> None:
        """Set every bit named by record."""
        self._check(record)
        for idx in record.indexes:
            self.bits.set(idx)

    def add(self, value: Value) -> None:
        """Add value to the filter."""
        self.add_hash(self.hash(value))

    def contains_hash(self, record: BloomHash) -> bool:
        """Return True if every bit named by record is set."""
        self._check(record)
        return all(self.bits.get(idx) for idx in record.indexes)

    def contains(self, value: Value) -> bool:
        """Return True if value may be present; False if definitely absent."""
        return self.contains_hash(self.hash(value))

    def __contains__(self, value: Value) -> bool:
        return self.contains(value)

    def bit_count(self) -> int:
        """Number of bits set."""
        return self.bits.count()

    def fill_ratio(self) -> float:
        """Fraction of bits set."""
        return self.bit_count() / self.size

    def estimated_false_positive_rate(self) -> float:
        """Probability that an absent value tests positive at the current load."""
        return self.fill_ratio() ** int(self.hash_count)

    def __repr__(self) -> str:
        return f"FixedBloomFilter(hash_count={int(self.hash_count)}, seed={self.seed}, bits_set={self.bit_count()})"
