"""
PyRula: generic linear-algebra building blocks for Python.

A minimal numeric-algebra layer that other numeric code composes on:
capability traits for scalar types, vector arithmetic written against
those traits, and a dense row-major matrix.

Submodules:
    traits: Zero, Numerical and Field-like capabilities, conversions
    vector: dot, norm, linear combination, scaled accumulation, copies
    matrix: FullMatrix with row/column iteration
"""

__version__ = "0.1.0"

from pyrula import traits
from pyrula import vector
from pyrula import matrix
from pyrula.matrix import FullMatrix

__all__ = [
    "__version__",
    "traits",
    "vector",
    "matrix",
    "FullMatrix",
]
