"""spmat Sparse Matrix Contract.

This module provides the abstract interface shared by every sparse-matrix
storage layout, so solvers and factorizations can work with any layout.

Type Hierarchy:

    LinearOperator (ABC)              # shape + scaled products
    └── SparseMatrix (ABC)            # access, pruning, equality, hashing

Quick Start:
    >>> from spmat.sparse import SparseMatrix
    >>>
    >>> class MyLayout(SparseMatrix):
    ...     ...  # nnz, at, clear, keep, enumerate_indexed, _accumulate*
    >>>
    >>> y = np.full(A.rows, np.nan)
    >>> A.multiply(2.0, x, 0.0, y)  # y = 2 * A @ x, stale NaN ignored
    >>> A.equals(B, 1e-9)           # works across layouts
"""

from ._base import (
    LinearOperator,
    SparseMatrix,
    KeepPredicate,
)

from ._ops import (
    NormKind,
    as_norm_kind,
    norm_from_entries,
    as_input_vector,
    as_output_vector,
    sample_coordinates,
    hash_value,
)


def is_sparse_like(obj) -> bool:
    """Check if object satisfies the SparseMatrix contract."""
    return isinstance(obj, SparseMatrix)


__all__ = [
    # ---- Base Classes (Abstract) ----
    'LinearOperator',
    'SparseMatrix',
    'KeepPredicate',

    # ---- Norms ----
    'NormKind',
    'as_norm_kind',
    'norm_from_entries',

    # ---- Helpers ----
    'as_input_vector',
    'as_output_vector',
    'sample_coordinates',
    'hash_value',
    'is_sparse_like',
]
