"""Exceptions raised by rigid-body superposition routines."""


class RigidMapError(Exception):
    """Base class for all rigidmap errors."""


class DimensionMismatchError(RigidMapError, ValueError):
    """Raised when paired point sets differ in length or are malformed."""


class DegenerateGeometryError(RigidMapError, ArithmeticError):
    """Raised when a fit is requested in strict mode on rank-deficient input."""
