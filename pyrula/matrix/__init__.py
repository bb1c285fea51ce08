"""
Dense matrix module.

Public API:
    FullMatrix.zero(nrow, ncol)  - Zero-filled row-major matrix
    FullMatrix.get / set         - Element access with bounds checking
    FullMatrix.iter_row / iter_column - Forward-only cursors
    FullMatrix.row / column      - Writable 1-D views usable as vectors
    LineIterator                 - Cursor type returned by iter_row/iter_column
"""

from pyrula.matrix.full import FullMatrix
from pyrula.matrix.iterators import LineIterator

__all__ = [
    "FullMatrix",
    "LineIterator",
]
