"""Unit tests for hash splitting."""

import mmh3
import pytest

from rolling_bloom.components.hashing import BloomHash, hash128, split_hash, to_bytes
from rolling_bloom.core.errors import InvalidSeedError, UnsupportedHashCountError
from rolling_bloom.core.types import HashCount


@pytest.mark.parametrize("hash_count", [4, 8])
def test_hash_record_has_hash_count_indexes(hash_count):
    """Test that one index is produced per hash."""
    record = BloomHash.from_value(b"hello", hash_count)

    assert len(record) == hash_count
    assert record.hash_count == hash_count
    assert record.seed == 0


@pytest.mark.parametrize("hash_count", [4, 8])
def test_indexes_fit_segment_width(hash_count):
    """Test that every index addresses the filter's bit array."""
    limit = 1 << (128 // hash_count)
    for i in range(200):
        record = BloomHash.from_value(f"key{i}".encode(), hash_count)
        assert all(0 <= idx < limit for idx in record)


def test_hashing_is_deterministic():
    """Test that the same bytes always give the same indexes."""
    first = BloomHash.from_value(b"request-42", 4)
    second = BloomHash.from_value(b"request-42", 4)

    assert first == second
    assert first.indexes == second.indexes


def test_segments_reassemble_to_digest():
    """Test that segments are contiguous and least-significant first."""
    digest = hash128(b"reassemble")
    for count in HashCount:
        width = count.segment_bits
        indexes = split_hash(digest, count)
        rebuilt = sum(idx << (i * width) for i, idx in enumerate(indexes))
        assert rebuilt == digest


def test_split_hash_known_value():
    """Test splitting a hand-built 128-bit value."""
    value = (0x4444 << 48) | (0x3333 << 32) | (0x2222 << 16) | 0x1111
    indexes = split_hash(value, HashCount.EIGHT)

    assert indexes == (0x1111, 0x2222, 0x3333, 0x4444, 0, 0, 0, 0)


def test_hash128_uses_unsigned_murmur3():
    """Test that the digest is the unsigned x64 MurmurHash3."""
    assert hash128(b"hello", 7) == mmh3.hash128(b"hello", seed=7, x64arch=True, signed=False)
    assert 0 <= hash128(b"hello") < 1 << 128


def test_seed_changes_indexes():
    """Test that different seeds give different hash spaces."""
    unseeded = BloomHash.from_value(b"hello", 4)
    seeded = BloomHash.from_value(b"hello", 4, seed=127)

    assert unseeded.indexes != seeded.indexes
    assert seeded.seed == 127


def test_bytes_like_and_str_values_agree():
    """Test that equivalent inputs hash identically."""
    expected = BloomHash.from_value(b"caf\xc3\xa9", 8)

    assert BloomHash.from_value(bytearray(b"caf\xc3\xa9"), 8) == expected
    assert BloomHash.from_value(memoryview(b"caf\xc3\xa9"), 8) == expected
    assert BloomHash.from_value("café", 8) == expected


def test_empty_value():
    """Test that the empty byte string hashes like any other value."""
    record = BloomHash.from_value(b"", 4)
    assert len(record) == 4


def test_unsupported_value_type():
    """Test that non bytes-like values are rejected."""
    with pytest.raises(TypeError, match="bytes-like or str"):
        to_bytes(42)


@pytest.mark.parametrize("hash_count", [0, 1, 2, 3, 16, 128])
def test_unsupported_hash_count(hash_count):
    """Test that only 4 and 8 hashes are accepted."""
    with pytest.raises(UnsupportedHashCountError, match="Unsupported hash count"):
        BloomHash.from_value(b"hello", hash_count)


def test_unsupported_hash_count_is_value_error():
    """Test that configuration errors can be caught as ValueError."""
    with pytest.raises(ValueError):
        HashCount.validate(2)


@pytest.mark.parametrize("seed", [-1, 1 << 32, True, 1.5])
def test_invalid_seed(seed):
    """Test that seeds outside the unsigned 32-bit range are rejected."""
    with pytest.raises(InvalidSeedError):
        BloomHash.from_value(b"hello", 4, seed=seed)


def test_hash_count_geometry():
    """Test segment width and bit array size per hash count."""
    assert HashCount.FOUR.segment_bits == 32
    assert HashCount.FOUR.filter_bits == 1 << 32
    assert HashCount.EIGHT.segment_bits == 16
    assert HashCount.EIGHT.filter_bits == 1 << 16
