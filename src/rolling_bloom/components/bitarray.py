"""Paged bit array.

A 4-hash filter addresses 2^32 bits, which is 512 MiB when stored densely.
Pages are allocated on first write, so a sparsely populated filter only pays
for the pages it touches. Unallocated pages read as all-false.
"""

from __future__ import annotations

from ..core.types import Index

DEFAULT_PAGE_BYTES = 4096


class PagedBitArray:
    """Fixed-length bit array with lazily allocated pages.

    Args:
        size: Number of bits
        page_bytes: Bytes per page, a power of two

    Invariants:
        - Length never changes after creation
        - Bits are only ever set, never cleared
    """

    def __init__(self, size: int, page_bytes: int = DEFAULT_PAGE_BYTES):
        if size <= 0:
            raise ValueError(f"size must be positive, got {size}")
        if page_bytes <= 0 or page_bytes & (page_bytes - 1):
            raise ValueError(f"page_bytes must be a power of two, got {page_bytes}")
        self._size = size
        # Small arrays fit in a single page
        self._page_bits = min(page_bytes * 8, max(8, 1 << (size - 1).bit_length()))
        self._page_shift = self._page_bits.bit_length() - 1
        self._pages: dict[int, bytearray] = {}

    def _locate(self, idx: Index) -> tuple[int, int]:
        if not 0 <= idx < self._size:
            raise IndexError(f"bit index {idx} out of range for {self._size} bits")
        return idx >> self._page_shift, idx & (self._page_bits - 1)

    def set(self, idx: Index) -> None:
        """Set bit idx to True."""
        page_no, bit_pos = self._locate(idx)
        page = self._pages.get(page_no)
        if page is None:
            page = bytearray(self._page_bits // 8)
            self._pages[page_no] = page
        page[bit_pos >> 3] |= 1 << (bit_pos & 7)

    def get(self, idx: Index) -> bool:
        """Return bit idx."""
        page_no, bit_pos = self._locate(idx)
        page = self._pages.get(page_no)
        if page is None:
            return False
        return bool(page[bit_pos >> 3] & (1 << (bit_pos & 7)))

    def __getitem__(self, idx: Index) -> bool:
        return self.get(idx)

    def __len__(self) -> int:
        return self._size

    def count(self) -> int:
        """Return the number of set bits."""
        return sum(int.from_bytes(page, "little").bit_count() for page in self._pages.values())

    @property
    def allocated_pages(self) -> int:
        """Number of pages that have been written to."""
        return len(self._pages)

    @property
    def page_bits(self) -> int:
        return self._page_bits
