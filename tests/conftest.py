"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


class Mod7:
    """Integers modulo 7: a user-defined Field-like scalar."""

    def __init__(self, value):
        self.value = value % 7

    @classmethod
    def zero(cls):
        return cls(0)

    def __add__(self, other):
        return Mod7(self.value + other.value)

    def __mul__(self, other):
        return Mod7(self.value * other.value)

    def __eq__(self, other):
        return isinstance(other, Mod7) and self.value == other.value

    def __hash__(self):
        return hash(('Mod7', self.value))

    def __repr__(self):
        return f"Mod7({self.value})"


class AddOnly:
    """Has a zero and addition, but no multiplication."""

    def __init__(self, value):
        self.value = value

    @classmethod
    def zero(cls):
        return cls(0)

    def __add__(self, other):
        return AddOnly(self.value + other.value)

    def __eq__(self, other):
        return isinstance(other, AddOnly) and self.value == other.value


class Tally:
    """Numerical scalar with no equality: only identity comparison."""

    def __init__(self, value):
        self.value = value

    @classmethod
    def zero(cls):
        return cls(0)

    def __add__(self, other):
        return Tally(self.value + other.value)

    def __mul__(self, other):
        return Tally(self.value * other.value)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def mod7():
    """Field-like scalar class defined outside the library."""
    return Mod7


@pytest.fixture
def add_only():
    """Scalar class that is not Numerical (no multiplication)."""
    return AddOnly


@pytest.fixture
def tally():
    """Numerical scalar class that does not define __eq__."""
    return Tally


@pytest.fixture
def random_pair(rng):
    """Two float64 vectors of different lengths."""
    return rng.standard_normal(7), rng.standard_normal(4)
