"""
spmat - Sparse Matrix Contract

The shared contract every sparse-matrix storage layout satisfies:

- Fixed, validated shape
- Scaled products y := alpha * A @ x + beta * y (and the transpose)
- Tolerance-driven structural pruning
- Layout-independent equality and bounded-sample hashing

Modules:
- sparse: LinearOperator / SparseMatrix abstract base classes
- core: error codes and library-wide configuration

Example:
    >>> from spmat import SparseMatrix, set_equals_tolerance
    >>> set_equals_tolerance(1e-9)
    >>> csr == coo  # different layouts, same values
    True
"""

__version__ = '0.1.0'

from . import sparse
from . import core

from ._dtypes import (
    DType,
    float32,
    float64,
    complex64,
    complex128,
    normalize_dtype,
    validate_dtype,
    is_complex_dtype,
)

from .core import (
    SpmatError,
    InvalidDimensionError,
    DimensionMismatchError,
    UnsupportedNormError,
    get_config,
    set_equals_tolerance,
    get_equals_tolerance,
    set_default_dtype,
    get_default_dtype,
    reset_config,
)

from .sparse import (
    LinearOperator,
    SparseMatrix,
    NormKind,
    is_sparse_like,
)

__all__ = [
    # Version
    '__version__',
    # Modules
    'sparse',
    'core',
    # Element types
    'DType',
    'float32',
    'float64',
    'complex64',
    'complex128',
    'normalize_dtype',
    'validate_dtype',
    'is_complex_dtype',
    # Errors
    'SpmatError',
    'InvalidDimensionError',
    'DimensionMismatchError',
    'UnsupportedNormError',
    # Configuration
    'get_config',
    'set_equals_tolerance',
    'get_equals_tolerance',
    'set_default_dtype',
    'get_default_dtype',
    'reset_config',
    # Contract
    'LinearOperator',
    'SparseMatrix',
    'NormKind',
    'is_sparse_like',
]
