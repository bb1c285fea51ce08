"""
Exception hierarchy for PyRula.

All exceptions inherit from PyRulaError to allow catching any
library-specific error. Module-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyRulaError(Exception):
    """Base exception for all PyRula errors."""
    pass


class ValidationError(PyRulaError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when an array passed as a vector is not one-dimensional.
    """
    pass


class CapabilityError(PyRulaError):
    """
    Scalar type lacks an arithmetic capability.

    Raised when a generic operation or container is instantiated for a
    scalar type that does not provide every capability the operation
    requires. Raised before any arithmetic is performed.

    Attributes:
        scalar_type: The rejected scalar type
        missing: Names of the missing capabilities (see core.capabilities)
    """

    def __init__(
        self,
        message: str,
        scalar_type: type | None = None,
        missing: tuple[str, ...] = (),
    ):
        super().__init__(message)
        self.scalar_type = scalar_type
        self.missing = tuple(missing)


class ConversionError(CapabilityError):
    """
    No accepted conversion between two scalar types.

    Raised when a mixed-type operation (dot_in, mlt_add, scaling by a
    coefficient) needs to convert values of one scalar type into another
    and the pair has no lossless-or-accepted conversion.

    Attributes:
        source_type: Type of the values that would be converted
        target_type: Type the values would be converted into
    """

    def __init__(
        self,
        message: str,
        source_type: type | None = None,
        target_type: type | None = None,
    ):
        super().__init__(message, scalar_type=source_type, missing=('conversion',))
        self.source_type = source_type
        self.target_type = target_type


class IndexOutOfBoundsError(PyRulaError):
    """
    Matrix element requested outside the matrix.

    Raised immediately when a row index is not below nrow or a column
    index is not below ncol. Indices are never clamped or wrapped.

    Attributes:
        axis: 'row' or 'column'
        index: The offending index
        bound: The exclusive upper bound for that axis
    """

    def __init__(
        self,
        message: str,
        axis: str | None = None,
        index: int | None = None,
        bound: int | None = None,
    ):
        super().__init__(message)
        self.axis = axis
        self.index = index
        self.bound = bound
