"""
Vector operations module.

Free functions over vectors (lists, tuples, 1-D numpy arrays, matrix
row/column views), parameterized by the capability traits.

Public API:
    dot(u, v)               - Dot product, same scalar type
    dot_in(dest, u, v)      - Dot product accumulated in dest's type
    square_norm(u)          - dot(u, u)
    norm(u)                 - Euclidean norm as float
    lin_com(a, u, b, v)     - New vector a*u + b*v
    mlt_add(u, a, v)        - In place u += a*v
    scale(u, a)             - In place u *= a
    zero(u)                 - In place u *= 0
    copy(u)                 - Independent copy
    filtered_copy(u, pred)  - Copy of elements satisfying pred
"""

from pyrula.vector.operations import (
    dot,
    dot_in,
    square_norm,
    norm,
    lin_com,
    mlt_add,
    scale,
    zero,
    copy,
    filtered_copy,
)

__all__ = [
    "dot",
    "dot_in",
    "square_norm",
    "norm",
    "lin_com",
    "mlt_add",
    "scale",
    "zero",
    "copy",
    "filtered_copy",
]
