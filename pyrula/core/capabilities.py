"""
Capability string constants for PyRula.

This module is the SINGLE SOURCE OF TRUTH for scalar capability names.
Import from here, never use raw strings.

Usage:
    from pyrula.core.capabilities import (
        CAPABILITY_MUL_ASSIGN,
        FIELD_CAPABILITIES,
    )

    if CAPABILITY_MUL_ASSIGN in numerical_capabilities(np.float32):
        ...
"""

# Additive identity is available (zero_of)
CAPABILITY_ZERO = 'zero'

# a + b returns the same type
CAPABILITY_ADD = 'add'

# a += b keeps the same type
CAPABILITY_ADD_ASSIGN = 'add_assign'

# a * b returns the same type
CAPABILITY_MUL = 'mul'

# a *= b keeps the same type
CAPABILITY_MUL_ASSIGN = 'mul_assign'

# Values can be copied and compare equal to the original
CAPABILITY_COPY = 'copy'

# Minimal contract for dot products, linear combinations, accumulation
NUMERICAL_CAPABILITIES = frozenset({
    CAPABILITY_ZERO,
    CAPABILITY_ADD,
    CAPABILITY_ADD_ASSIGN,
    CAPABILITY_MUL,
    CAPABILITY_COPY,
})

# Numerical plus compound multiplication, for in-place scaling.
# Division is deliberately not part of this set.
FIELD_CAPABILITIES = NUMERICAL_CAPABILITIES | {CAPABILITY_MUL_ASSIGN}

__all__ = [
    'CAPABILITY_ZERO',
    'CAPABILITY_ADD',
    'CAPABILITY_ADD_ASSIGN',
    'CAPABILITY_MUL',
    'CAPABILITY_MUL_ASSIGN',
    'CAPABILITY_COPY',
    'NUMERICAL_CAPABILITIES',
    'FIELD_CAPABILITIES',
]
