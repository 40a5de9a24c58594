"""
spmat core: error taxonomy and library-wide configuration.
"""

from .error import (
    SPMAT_OK,
    SPMAT_ERROR_UNKNOWN,
    SPMAT_ERROR_INTERNAL,
    SPMAT_ERROR_INVALID_ARGUMENT,
    SPMAT_ERROR_DIMENSION_MISMATCH,
    SPMAT_ERROR_INVALID_DIMENSION,
    SPMAT_ERROR_NOT_IMPLEMENTED,
    SPMAT_ERROR_UNSUPPORTED_NORM,
    SpmatError,
    InvalidDimensionError,
    DimensionMismatchError,
    UnsupportedNormError,
    check_dimension,
)

from .config import (
    DEFAULT_EQUALS_TOLERANCE,
    DEFAULT_HASH_SAMPLE_SIZE,
    get_config,
    set_equals_tolerance,
    get_equals_tolerance,
    set_default_dtype,
    get_default_dtype,
    reset_config,
)

__all__ = [
    # Error codes
    'SPMAT_OK',
    'SPMAT_ERROR_UNKNOWN',
    'SPMAT_ERROR_INTERNAL',
    'SPMAT_ERROR_INVALID_ARGUMENT',
    'SPMAT_ERROR_DIMENSION_MISMATCH',
    'SPMAT_ERROR_INVALID_DIMENSION',
    'SPMAT_ERROR_NOT_IMPLEMENTED',
    'SPMAT_ERROR_UNSUPPORTED_NORM',
    # Exceptions
    'SpmatError',
    'InvalidDimensionError',
    'DimensionMismatchError',
    'UnsupportedNormError',
    'check_dimension',
    # Configuration
    'DEFAULT_EQUALS_TOLERANCE',
    'DEFAULT_HASH_SAMPLE_SIZE',
    'get_config',
    'set_equals_tolerance',
    'get_equals_tolerance',
    'set_default_dtype',
    'get_default_dtype',
    'reset_config',
]
