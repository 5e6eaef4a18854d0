"""Binary indexed (Fenwick) tree for prefix sums."""

from __future__ import annotations


class FenwickTree:
    """Prefix sums over positions ``1..size`` with point updates."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._tree = [0] * (size + 1)

    def __len__(self) -> int:
        return self._size

    def update(self, index: int, delta: int) -> None:
        """Add ``delta`` to the value at 1-based ``index``."""
        if not 1 <= index <= self._size:
            raise IndexError(f"index {index} is outside 1..{self._size}")
        while index <= self._size:
            self._tree[index] += delta
            index += index & -index

    def query(self, index: int) -> int:
        """Sum of the values at positions ``1..index``."""
        if not 0 <= index <= self._size:
            raise IndexError(f"index {index} is outside 0..{self._size}")
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total