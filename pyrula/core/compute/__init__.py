"""
Shared numeric infrastructure for PyRula.

IMPORTANT: This is NOT where vector or matrix operations live. Those go in
pyrula.vector and pyrula.matrix. This module contains shared NUMERIC
configuration.

Submodules:
    tolerances: Comparison tolerance tiers per scalar precision
"""

from pyrula.core.compute.tolerances import (
    EXACT,
    FP32,
    FP64,
    ToleranceTier,
    select_tolerance,
)

__all__ = [
    "EXACT",
    "FP32",
    "FP64",
    "ToleranceTier",
    "select_tolerance",
]
