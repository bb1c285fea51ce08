"""
Forward-only cursors over one row or one column of a FullMatrix.

A LineIterator is handed the matrix's backing array when the matrix
creates it, and walks that array with a cursor; it copies nothing. Rows
are contiguous (step 1); columns stride by ncol through the row-major
storage.

Borrow discipline: an iterator observes the matrix as it is when each
element is read. Writing to the matrix while iterating it is the caller's
responsibility; nothing is locked.
"""

from __future__ import annotations

from typing import Any

from numpy.typing import NDArray


class LineIterator:
    """
    Iterator over count elements of a flat array, step apart from start.

    Yields each element exactly once, in index order, then stays
    exhausted. Restart by asking the matrix for a new iterator.
    """

    def __init__(self, storage: NDArray, start: int, step: int, count: int):
        self._storage = storage
        self._offset = start
        self._step = step
        self._remaining = count

    def __iter__(self) -> LineIterator:
        return self

    def __next__(self) -> Any:
        if self._remaining == 0:
            raise StopIteration
        value = self._storage[self._offset]
        self._offset += self._step
        self._remaining -= 1
        return value

    def __len__(self) -> int:
        """Number of elements not yet produced."""
        return self._remaining
