"""
Element Type Definitions

Provides the numeric element types a sparse matrix may hold, together with
their zero/one values. The constants are created once per type and shared by
every matrix instance.
"""

from typing import Union
from enum import Enum

import numpy as np

__all__ = [
    'DType',
    'float32',
    'float64',
    'complex64',
    'complex128',
    'normalize_dtype',
    'validate_dtype',
    'is_complex_dtype',
]


class DType(Enum):
    """
    spmat Element Type Enumeration.

    Example:
        >>> from spmat import DType
        >>> DType.float64.zero
        0.0
        >>> DType.complex128.one
        (1+0j)
    """

    float32 = 'float32'
    float64 = 'float64'
    complex64 = 'complex64'
    complex128 = 'complex128'

    @property
    def numpy_dtype(self) -> np.dtype:
        return np.dtype(self.value)

    @property
    def zero(self):
        """Zero value of this element type."""
        return _ZERO[self]

    @property
    def one(self):
        """One value of this element type."""
        return _ONE[self]

    @property
    def is_complex(self) -> bool:
        return self in (DType.complex64, DType.complex128)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"DType.{self.name}"


_ZERO = {t: t.numpy_dtype.type(0) for t in DType}
_ONE = {t: t.numpy_dtype.type(1) for t in DType}


# =============================================================================
# Module-Level Constants (For Clean Syntax)
# =============================================================================

float32 = DType.float32
float64 = DType.float64
complex64 = DType.complex64
complex128 = DType.complex128


# =============================================================================
# Type Utilities
# =============================================================================

def normalize_dtype(dtype: Union[str, DType, np.dtype, type]) -> DType:
    """
    Normalize a dtype specification to a DType member.

    Args:
        dtype: DType enum, dtype name, numpy dtype or numpy scalar type

    Returns:
        DType member

    Raises:
        TypeError: If dtype is not a recognizable dtype specification
        ValueError: If dtype is not a supported element type

    Example:
        >>> normalize_dtype('float64')
        DType.float64
        >>> normalize_dtype(np.complex64)
        DType.complex64
    """
    if isinstance(dtype, DType):
        return dtype
    if isinstance(dtype, str):
        validate_dtype(dtype)
        return DType(dtype)
    if isinstance(dtype, np.dtype) or (isinstance(dtype, type) and issubclass(dtype, np.generic)):
        name = np.dtype(dtype).name
        validate_dtype(name)
        return DType(name)
    raise TypeError(f"dtype must be str, DType or numpy dtype, got {type(dtype)}")


def validate_dtype(dtype: str) -> None:
    """
    Validate dtype string.

    Args:
        dtype: Data type string

    Raises:
        TypeError: If dtype is not a string
        ValueError: If dtype is not supported
    """
    if not isinstance(dtype, str):
        raise TypeError(f"dtype must be str, got {type(dtype)}")
    valid = {e.value for e in DType}
    if dtype not in valid:
        raise ValueError(f"Invalid dtype: {dtype}. Valid: {sorted(valid)}")


def is_complex_dtype(dtype: Union[str, DType]) -> bool:
    """Check if dtype is complex."""
    return normalize_dtype(dtype).is_complex
