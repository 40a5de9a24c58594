"""
Error handling for spmat.

Every contract violation maps to a stable integer code. All errors are
programmer errors: raised synchronously at the offending call and never
retried.
"""

from __future__ import annotations

from typing import Optional


# =============================================================================
# Error Codes
# =============================================================================

# Success
SPMAT_OK = 0

# General errors (1-9)
SPMAT_ERROR_UNKNOWN = 1
SPMAT_ERROR_INTERNAL = 2

# Argument errors (10-19)
SPMAT_ERROR_INVALID_ARGUMENT = 10
SPMAT_ERROR_DIMENSION_MISMATCH = 11
SPMAT_ERROR_INVALID_DIMENSION = 12

# Feature errors (40-49)
SPMAT_ERROR_NOT_IMPLEMENTED = 40
SPMAT_ERROR_UNSUPPORTED_NORM = 41


# Error code to message mapping
_ERROR_MESSAGES = {
    SPMAT_OK: "Success",
    SPMAT_ERROR_UNKNOWN: "Unknown error",
    SPMAT_ERROR_INTERNAL: "Internal error",
    SPMAT_ERROR_INVALID_ARGUMENT: "Invalid argument",
    SPMAT_ERROR_DIMENSION_MISMATCH: "Dimension mismatch",
    SPMAT_ERROR_INVALID_DIMENSION: "Matrix dimensions must be non-negative",
    SPMAT_ERROR_NOT_IMPLEMENTED: "Not implemented",
    SPMAT_ERROR_UNSUPPORTED_NORM: "Unsupported norm",
}


# =============================================================================
# Exception Classes
# =============================================================================

class SpmatError(Exception):
    """
    Base exception for all spmat errors.

    Attributes:
        code: Integer error code (one of the SPMAT_ERROR_* constants)
        message: Human-readable message
    """

    # Re-export error codes as class attributes for convenience
    OK = SPMAT_OK
    ERROR_UNKNOWN = SPMAT_ERROR_UNKNOWN
    ERROR_INTERNAL = SPMAT_ERROR_INTERNAL
    ERROR_INVALID_ARGUMENT = SPMAT_ERROR_INVALID_ARGUMENT
    ERROR_DIMENSION_MISMATCH = SPMAT_ERROR_DIMENSION_MISMATCH
    ERROR_INVALID_DIMENSION = SPMAT_ERROR_INVALID_DIMENSION
    ERROR_NOT_IMPLEMENTED = SPMAT_ERROR_NOT_IMPLEMENTED
    ERROR_UNSUPPORTED_NORM = SPMAT_ERROR_UNSUPPORTED_NORM

    def __init__(self, code: int, message: Optional[str] = None):
        self.code = code
        if message is None:
            message = _ERROR_MESSAGES.get(code, f"Unknown error (code={code})")
        self.message = message
        super().__init__(f"spmat error {code}: {message}")

    @classmethod
    def from_code(cls, code: int, context: str = "") -> "SpmatError":
        """Create exception from error code with optional context."""
        base_msg = _ERROR_MESSAGES.get(code, "Unknown error")
        msg = f"{context}: {base_msg}" if context else base_msg
        return cls(code, msg)


class InvalidDimensionError(SpmatError, ValueError):
    """Raised when a matrix is constructed with a negative row or column count."""

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        super().__init__(
            SPMAT_ERROR_INVALID_DIMENSION,
            f"{_ERROR_MESSAGES[SPMAT_ERROR_INVALID_DIMENSION]}, got ({rows}, {cols})",
        )


class DimensionMismatchError(SpmatError, ValueError):
    """Raised when a vector length disagrees with the matrix shape."""

    def __init__(self, name: str, expected: int, actual: int):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            SPMAT_ERROR_DIMENSION_MISMATCH,
            f"Dimension mismatch: {name} has length {actual}, expected {expected}",
        )


class UnsupportedNormError(SpmatError, ValueError):
    """Raised for an unrecognized norm discriminator."""

    def __init__(self, which):
        self.which = which
        super().__init__(
            SPMAT_ERROR_UNSUPPORTED_NORM,
            f"Unsupported norm: {which!r} (expected 0=inf, 1=one, 2=frobenius)",
        )


def check_dimension(name: str, expected: int, actual: int) -> None:
    """
    Check a vector length against the expected dimension.

    Raises:
        DimensionMismatchError: If the lengths differ
    """
    if actual != expected:
        raise DimensionMismatchError(name, expected, actual)
