"""Rolling Bloom filter core."""

from .config import RollingBloomConfig
from .rolling import RollingBloomFilter

__all__ = ["RollingBloomFilter", "RollingBloomConfig"]
