"""
FullMatrix: dense row-major matrix.

Stores an nrow x ncol grid of scalars in one flat, contiguous numpy array;
element (i, j) lives at offset i * ncol + j. Dimensions are fixed at
construction and the only constructor is FullMatrix.zero().

Primitive scalar types use their native numpy dtype (Python int, float and
complex map to int64, float64 and complex128). Any other Numerical type
(Fraction, Decimal, user classes) is stored in an object array.
"""

from __future__ import annotations

import copy
from typing import Any, Generic

import numpy as np
from numpy.typing import NDArray

from pyrula.core.exceptions import ValidationError
from pyrula.core.protocols import N
from pyrula.core.validation import check_dimension, check_index
from pyrula.matrix.iterators import LineIterator
from pyrula.traits.conversion import check_value_convertible, convert
from pyrula.traits.numerical import check_numerical
from pyrula.traits.zero import PRIMITIVE_TYPES, zero_of


class FullMatrix(Generic[N]):
    """
    Dense matrix with row-major storage.

    Construction:
        FullMatrix.zero(nrow, ncol)
        FullMatrix.zero(nrow, ncol, scalar_type=np.int32)

    Access:
        m.get(i, j) / m[i, j]          - element read
        m.set(i, j, x) / m[i, j] = x   - element write
        m.iter_row(i), m.iter_column(j) - forward-only cursors
        m.row(i), m.column(j)          - writable 1-D views, usable as vectors

    Examples:
        >>> m = FullMatrix.zero(1, 2)
        >>> m.get(0, 1)
        np.float64(0.0)
    """

    def __init__(self, data: NDArray, nrow: int, ncol: int, scalar_type: type):
        """Internal. Use FullMatrix.zero()."""
        if data.ndim != 1 or data.shape[0] != nrow * ncol:
            raise ValidationError(
                f"data: expected flat array of length {nrow * ncol}, got shape {data.shape}"
            )
        self._data = data
        self._nrow = nrow
        self._ncol = ncol
        self._scalar_type = scalar_type

    @classmethod
    def zero(
        cls,
        nrow: int,
        ncol: int,
        scalar_type: type = np.float64,
    ) -> FullMatrix:
        """
        Create an nrow x ncol matrix with every element set to zero.

        Args:
            nrow: Number of rows (may be 0)
            ncol: Number of columns (may be 0)
            scalar_type: Element type (or numpy dtype); must be Numerical

        Raises:
            ValidationError: If a dimension is negative or not an integer
            CapabilityError: If scalar_type is not Numerical
        """
        nrow = check_dimension(nrow, 'nrow')
        ncol = check_dimension(ncol, 'ncol')
        size = nrow * ncol

        if isinstance(scalar_type, np.dtype):
            scalar_type = scalar_type.type
        if scalar_type in PRIMITIVE_TYPES:
            dtype = np.dtype(scalar_type)
            check_numerical(dtype.type)
            return cls(np.zeros(size, dtype=dtype), nrow, ncol, dtype.type)

        check_numerical(scalar_type)
        z = zero_of(scalar_type)
        data = np.empty(size, dtype=object)
        for k in range(size):
            data[k] = copy.copy(z)
        return cls(data, nrow, ncol, scalar_type)

    @property
    def nrow(self) -> int:
        """Number of rows."""
        return self._nrow

    @property
    def ncol(self) -> int:
        """Number of columns."""
        return self._ncol

    @property
    def shape(self) -> tuple[int, int]:
        return (self._nrow, self._ncol)

    @property
    def size(self) -> int:
        return self._nrow * self._ncol

    @property
    def scalar_type(self) -> type:
        """Element type of the matrix."""
        return self._scalar_type

    def _offset(self, i: Any, j: Any) -> int:
        i = check_index(i, self._nrow, 'row')
        j = check_index(j, self._ncol, 'column')
        return i * self._ncol + j

    def get(self, i: int, j: int) -> N:
        """
        Element at row i, column j.

        Raises:
            IndexOutOfBoundsError: If i >= nrow or j >= ncol
        """
        return self._data[self._offset(i, j)]

    def set(self, i: int, j: int, value: Any) -> None:
        """
        Overwrite the element at row i, column j.

        Raises:
            IndexOutOfBoundsError: If i >= nrow or j >= ncol
            ConversionError: If value does not convert into, or does not fit,
                the scalar type
        """
        k = self._offset(i, j)
        check_value_convertible(value, self._scalar_type, 'value')
        self._data[k] = convert(value, self._scalar_type)

    def __getitem__(self, key: tuple[int, int]) -> N:
        i, j = self._unpack(key)
        return self.get(i, j)

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        i, j = self._unpack(key)
        self.set(i, j, value)

    @staticmethod
    def _unpack(key: Any) -> tuple[Any, Any]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise ValidationError(f"matrix index must be a pair (i, j), got {key!r}")
        return key

    def iter_row(self, i: int) -> LineIterator:
        """
        Iterate over the ncol elements of row i, in column order.

        Raises:
            IndexOutOfBoundsError: If i >= nrow
        """
        i = check_index(i, self._nrow, 'row')
        return LineIterator(self._data, i * self._ncol, 1, self._ncol)

    def iter_column(self, j: int) -> LineIterator:
        """
        Iterate over the nrow elements of column j, in row order.

        Successive elements are ncol apart in storage.

        Raises:
            IndexOutOfBoundsError: If j >= ncol
        """
        j = check_index(j, self._ncol, 'column')
        return LineIterator(self._data, j, self._ncol, self._nrow)

    def row(self, i: int) -> NDArray:
        """
        Writable view of row i (contiguous, no copy).

        The view aliases the matrix storage: vector operations applied to
        it (scale, zero, mlt_add) modify the matrix. Do not keep it beyond
        the matrix's lifetime.
        """
        i = check_index(i, self._nrow, 'row')
        start = i * self._ncol
        return self._data[start:start + self._ncol]

    def column(self, j: int) -> NDArray:
        """
        Writable view of column j (strided by ncol, no copy).

        Same aliasing rules as row().
        """
        j = check_index(j, self._ncol, 'column')
        return self._data[j::self._ncol]

    def __repr__(self) -> str:
        return (
            f"FullMatrix(nrow={self._nrow}, ncol={self._ncol}, "
            f"scalar_type={self._scalar_type.__name__})"
        )
