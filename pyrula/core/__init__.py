"""
Core infrastructure for PyRula.

This module provides shared abstractions and utilities used by the
capability traits, the vector operations, and the dense matrix.

Key components:
    protocols: SupportsZero, Numerical, FieldLike structural contracts
    capabilities: Capability name constants
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Tolerance tiers
"""

from pyrula.core.protocols import SupportsZero, Numerical, FieldLike
from pyrula.core.exceptions import (
    PyRulaError,
    ValidationError,
    DimensionError,
    CapabilityError,
    ConversionError,
    IndexOutOfBoundsError,
)

__all__ = [
    # Protocols
    "SupportsZero",
    "Numerical",
    "FieldLike",
    # Exceptions
    "PyRulaError",
    "ValidationError",
    "DimensionError",
    "CapabilityError",
    "ConversionError",
    "IndexOutOfBoundsError",
]
