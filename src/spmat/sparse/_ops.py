"""
Sparse Matrix Operations

Shared helpers used by the SparseMatrix contract:

- Vector validation for the scaled products
- Norm discriminators and the generic norm kernel
- The bounded sampling walk used for hashing

These helpers only see shapes, vectors and (row, col, value) triples; they
never touch format-specific storage.
"""

from enum import IntEnum
from typing import Iterable, Iterator, Tuple, Any
import math

import numpy as np

from ..core.error import UnsupportedNormError, check_dimension

__all__ = [
    'NormKind',
    'as_norm_kind',
    'norm_from_entries',
    'as_input_vector',
    'as_output_vector',
    'sample_coordinates',
    'hash_value',
]


# =============================================================================
# Norms
# =============================================================================

class NormKind(IntEnum):
    """Integer discriminators accepted by ``SparseMatrix.norm``."""
    INFINITY = 0   # max absolute row sum
    ONE = 1        # max absolute column sum
    FROBENIUS = 2  # sqrt of sum of squared magnitudes


def as_norm_kind(which: Any) -> NormKind:
    """
    Resolve a norm discriminator.

    Raises:
        UnsupportedNormError: If which is not one of the NormKind values
    """
    if isinstance(which, bool) or not isinstance(which, (int, np.integer)):
        raise UnsupportedNormError(which)
    try:
        return NormKind(int(which))
    except ValueError:
        raise UnsupportedNormError(which) from None


def norm_from_entries(
    which: Any,
    shape: Tuple[int, int],
    entries: Iterable[Tuple[int, int, Any]],
) -> float:
    """
    Compute a matrix norm from explicit (row, col, value) triples.

    Args:
        which: Norm discriminator (see NormKind)
        shape: Matrix dimensions (rows, cols)
        entries: Explicit entries, each position at most once

    Returns:
        Non-negative norm value (0.0 for a matrix without entries)
    """
    kind = as_norm_kind(which)
    rows, cols = shape

    triples = list(entries)
    if not triples:
        return 0.0

    row_idx = np.fromiter((t[0] for t in triples), dtype=np.int64, count=len(triples))
    col_idx = np.fromiter((t[1] for t in triples), dtype=np.int64, count=len(triples))
    mags = np.abs(np.asarray([t[2] for t in triples])).astype(np.float64)

    if kind == NormKind.FROBENIUS:
        # Scale first so large magnitudes do not overflow when squared
        scale = mags.max()
        if scale == 0.0 or not np.isfinite(scale):
            return float(scale)
        return float(scale * np.sqrt(np.sum((mags / scale) ** 2)))

    if kind == NormKind.ONE:
        sums = np.bincount(col_idx, weights=mags, minlength=cols)
    else:
        sums = np.bincount(row_idx, weights=mags, minlength=rows)
    return float(sums.max())


# =============================================================================
# Vector Validation
# =============================================================================

def as_input_vector(x: Any, length: int, name: str = 'x') -> np.ndarray:
    """
    View x as a 1-D array of the given length.

    Raises:
        ValueError: If x is not one-dimensional
        DimensionMismatchError: If len(x) != length
    """
    arr = np.asarray(x)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional, got shape {arr.shape}")
    check_dimension(name, length, arr.shape[0])
    return arr


def as_output_vector(y: Any, length: int, name: str = 'y') -> np.ndarray:
    """
    Validate an in-place output buffer.

    Raises:
        TypeError: If y is not a numpy array
        ValueError: If y is not one-dimensional or not writable
        DimensionMismatchError: If len(y) != length
    """
    if not isinstance(y, np.ndarray):
        raise TypeError(f"{name} must be a writable numpy.ndarray, got {type(y).__name__}")
    if y.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional, got shape {y.shape}")
    if not y.flags.writeable:
        raise ValueError(f"{name} must be writable")
    check_dimension(name, length, y.shape[0])
    return y


# =============================================================================
# Hash Sampling
# =============================================================================

# Stand-in for NaN samples; hash(float('nan')) is identity-based.
_NAN_HASH = 0x7FF8


def sample_coordinates(rows: int, cols: int, limit: int) -> Iterator[Tuple[int, int]]:
    """
    Yield up to ``limit`` in-bounds coordinates spread evenly over the matrix.

    The walk is a pure function of the shape: flat positions
    ``i * total // count`` for ``i < count`` are mapped row-major to
    ``(flat // cols, flat % cols)``. When the matrix has at most ``limit``
    cells every cell is visited.

    Example:
        >>> list(sample_coordinates(2, 2, 25))
        [(0, 0), (0, 1), (1, 0), (1, 1)]
    """
    total = rows * cols
    count = min(total, limit)
    for i in range(count):
        flat = i * total // count
        yield flat // cols, flat % cols


def hash_value(value: Any) -> int:
    """Deterministic hash of a single element value.

    Agrees with hash() for every non-NaN value, so a real value and the
    complex value with zero imaginary part hash alike.
    """
    if isinstance(value, (complex, np.complexfloating)):
        if math.isnan(value.real) or math.isnan(value.imag):
            return hash((hash_value(value.real), hash_value(value.imag)))
        return hash(value)
    if math.isnan(value):
        return _NAN_HASH
    return hash(value)
