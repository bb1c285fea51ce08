"""
Tolerance tiers for numerical comparison.

Defines precision expectations for each family of scalar types:
- Exact types (integers, Fraction, Decimal): results compare equal
- Double precision (float, float64, complex128): machine precision
- Single precision (float32, complex64): relaxed

Used by the test suite and by callers comparing floating-point results
such as norm().
"""

from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Integer and rational arithmetic is exact
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact arithmetic (integers, rationals, decimals)',
)

# Double precision
FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='fp64',
    description='Double precision, machine-precision agreement',
)

# Single precision
FP32 = ToleranceTier(
    rtol=1e-5,
    atol=1e-6,
    name='fp32',
    description='Single precision, relaxed agreement',
)

_SINGLE_PRECISION = (np.float32, np.complex64)
_EXACT_TYPES = (int, Fraction, Decimal)


def select_tolerance(scalar_type: type) -> ToleranceTier:
    """Select the tolerance tier for results of the given scalar type."""
    if issubclass(scalar_type, _SINGLE_PRECISION):
        return FP32
    if issubclass(scalar_type, _EXACT_TYPES) or issubclass(scalar_type, np.integer):
        return EXACT
    return FP64
