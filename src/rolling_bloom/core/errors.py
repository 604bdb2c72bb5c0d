"""Exception hierarchy for rolling Bloom filters.

Defines all custom exceptions used throughout the implementation.
"""

from __future__ import annotations


class BloomError(Exception):
    """Base exception for all rolling Bloom filter errors."""
    pass


class UnsupportedHashCountError(BloomError, ValueError):
    """Raised when a filter is configured with an unsupported hash count."""
    pass


class InvalidSeedError(BloomError, ValueError):
    """Raised when a hash seed does not fit in an unsigned 32-bit integer."""
    pass


class InvalidShiftParameterError(BloomError, ValueError):
    """Raised when a shift condition is configured with an unusable value."""
    pass


class IncompatibleHashError(BloomError, ValueError):
    """Raised when a hash record is applied to a differently configured filter."""
    pass
