"""
Core protocols for PyRula.

These define the structural interfaces a user-defined scalar type must
satisfy to take part in vector and matrix arithmetic. We use Protocol
(structural typing) rather than ABC (nominal typing) so that a scalar
class does not have to inherit from anything in this package.

Built-in and numpy scalars satisfy the arithmetic part of these protocols
directly; their additive identities live in the zero registry
(pyrula.traits.zero) because they cannot grow a zero() classmethod.

Design Principles:
    - Minimal contracts: Numerical is what dot products need, nothing more
    - FieldLike extends Numerical by exactly one operation (compound
      multiplication); division is NOT part of the contract
    - Runtime verdicts come from pyrula.traits.numerical, which probes the
      actual behaviour of a type; these protocols are for static typing
      and quick isinstance checks
"""

from typing import Protocol, TypeVar, runtime_checkable

S = TypeVar('S')  # Scalar type


@runtime_checkable
class SupportsZero(Protocol):
    """
    A scalar type that knows its additive identity.

    Example:
        class Mod7:
            @classmethod
            def zero(cls) -> 'Mod7':
                return cls(0)
    """

    @classmethod
    def zero(cls):
        """Return the additive identity of the type."""
        ...


@runtime_checkable
class Numerical(Protocol):
    """
    Minimal arithmetic surface for vector arithmetic.

    A Numerical type provides a zero value, addition and multiplication
    that stay within the type, compound addition, and is freely copyable.
    Compound addition falls back to __add__ in Python, so only the binary
    operators appear here.
    """

    def __add__(self: S, other: S) -> S:
        ...

    def __mul__(self: S, other: S) -> S:
        ...


@runtime_checkable
class FieldLike(Numerical, Protocol):
    """
    Numerical plus compound multiplication.

    Enables in-place scaling (u[i] *= a) of elements held in a container.
    """

    def __imul__(self: S, other: S) -> S:
        ...


N = TypeVar('N', bound=Numerical)  # Numerical scalar
