"""
Sparse Matrix Base Classes

This module defines the abstract contract every spmat sparse matrix must
satisfy. Solvers and factorizations consume matrices exclusively through this
interface, so any storage layout that implements it can be used with them.

Type Hierarchy:

    LinearOperator (ABC)        - shape + scaled products
    └── SparseMatrix (ABC)      - element access, pruning, equality, hashing
        ├── <compressed-row>    - provided by storage collaborators
        ├── <compressed-column>
        └── <coordinate-list>

Design Philosophy:

1. Template products: ``multiply`` and ``transpose_multiply`` enforce the
   shape checks and the ``alpha``/``beta`` rules once, here. Concrete layouts
   only implement the accumulation ``y += alpha * A @ x``.

2. Layout-independent equality: ``equals`` and ``__hash__`` only read
   matrices through ``at`` and ``enumerate_indexed``, so two different
   layouts holding the same values compare and hash equal.

3. Generic element type: zero/one values come from the matrix's DType, never
   from literals.

Example:

    class CoordinateMatrix(SparseMatrix):
        def __init__(self, rows, cols, entries=()):
            super().__init__(rows, cols)
            self._entries = dict(entries)

        @property
        def nnz(self):
            return len(self._entries)

        def at(self, row, col):
            return self._entries.get((row, col), self.zero)

        # ... clear, keep, enumerate_indexed, _accumulate, _accumulate_transpose
"""

from abc import ABC, abstractmethod
from numbers import Integral
from typing import Tuple, Optional, Union, Callable, Iterator, Any, TYPE_CHECKING
import logging

import numpy as np

from .._dtypes import DType, normalize_dtype
from ..core.config import get_config
from ..core.error import InvalidDimensionError
from ._ops import (
    norm_from_entries,
    as_input_vector,
    as_output_vector,
    sample_coordinates,
    hash_value,
)

if TYPE_CHECKING:
    from scipy.sparse import coo_matrix

__all__ = [
    'LinearOperator',
    'SparseMatrix',
    'KeepPredicate',
]

logger = logging.getLogger("spmat.sparse")

# predicate(row, col, value, tolerance) -> keep?
KeepPredicate = Callable[[int, int, Any, float], bool]


class LinearOperator(ABC):
    """
    Abstract linear operator A of shape (rows, cols).

    Anything that can apply A and its transpose to a vector. Iterative
    solvers only need this much.

    Required Properties:
        rows, cols: Operator dimensions

    Required Methods:
        multiply(alpha, x, beta, y): y := alpha * A @ x + beta * y
        transpose_multiply(alpha, x, beta, y): y := alpha * A.T @ x + beta * y
    """

    __slots__ = ()

    @property
    @abstractmethod
    def rows(self) -> int:
        """Number of rows."""
        ...

    @property
    @abstractmethod
    def cols(self) -> int:
        """Number of columns."""
        ...

    @property
    def shape(self) -> Tuple[int, int]:
        """Operator dimensions (rows, cols)."""
        return self.rows, self.cols

    @abstractmethod
    def multiply(self, alpha, x, beta, y: np.ndarray) -> None:
        """Compute y := alpha * A @ x + beta * y in place."""
        ...

    @abstractmethod
    def transpose_multiply(self, alpha, x, beta, y: np.ndarray) -> None:
        """Compute y := alpha * A.T @ x + beta * y in place."""
        ...


class SparseMatrix(LinearOperator):
    """
    Abstract base class for all sparse matrices.

    Required Properties (subclasses must implement):
        nnz: Number of explicitly stored entries

    Required Methods (subclasses must implement):
        at(row, col): Element value, zero where nothing is stored
        clear(): Set every stored value to zero
        keep(predicate, tolerance): Structural pruning
        enumerate_indexed(): Iterate explicit (row, col, value) triples
        _accumulate(alpha, x, y): y += alpha * A @ x
        _accumulate_transpose(alpha, x, y): y += alpha * A.T @ x

    Optional Methods (subclasses may override for speed):
        norm(which): Defaults to a scan of enumerate_indexed()
        equals(other, tolerance): Defaults to a scan of both patterns

    Shape is fixed at construction and never changes. Instances are not
    internally synchronized; concurrent mutation and reads of the same
    instance must be guarded by the caller.
    """

    __slots__ = ('_rows', '_cols', '_dtype')

    def __init__(self, rows: int, cols: int, dtype: Union[DType, str, None] = None):
        """Validate and fix the matrix dimensions.

        Args:
            rows: Number of rows (>= 0)
            cols: Number of columns (>= 0)
            dtype: Element type; defaults to the configured default dtype

        Raises:
            TypeError: If rows or cols is not an integer
            InvalidDimensionError: If rows or cols is negative
        """
        if not isinstance(rows, Integral) or isinstance(rows, bool):
            raise TypeError(f"rows must be an integer, got {type(rows).__name__}")
        if not isinstance(cols, Integral) or isinstance(cols, bool):
            raise TypeError(f"cols must be an integer, got {type(cols).__name__}")
        if rows < 0 or cols < 0:
            raise InvalidDimensionError(rows, cols)

        self._rows = int(rows)
        self._cols = int(cols)
        self._dtype = get_config().default_dtype if dtype is None else normalize_dtype(dtype)

    # =========================================================================
    # Shape
    # =========================================================================

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def dtype(self) -> DType:
        """Element type."""
        return self._dtype

    @property
    def zero(self):
        """Zero value of the element type."""
        return self._dtype.zero

    @property
    def one(self):
        """One value of the element type."""
        return self._dtype.one

    @property
    def ndim(self) -> int:
        """Number of dimensions (always 2 for sparse matrices)."""
        return 2

    @property
    def size(self) -> int:
        """Total number of elements (rows * cols)."""
        return self._rows * self._cols

    @property
    def density(self) -> float:
        """Fraction of explicitly stored elements."""
        total = self.size
        return self.nnz / total if total > 0 else 0.0

    # =========================================================================
    # Abstract Contract
    # =========================================================================

    @property
    @abstractmethod
    def nnz(self) -> int:
        """Number of explicitly stored entries."""
        ...

    @abstractmethod
    def at(self, row: int, col: int):
        """Return the value at (row, col), or zero if nothing is stored there.

        Must not have side effects. Out-of-range rejection is up to the
        implementation.
        """
        ...

    @abstractmethod
    def clear(self) -> None:
        """Set every stored value to zero.

        Whether the sparsity pattern survives is up to the implementation,
        which must document its choice.
        """
        ...

    @abstractmethod
    def keep(self, predicate: KeepPredicate, tolerance: float) -> int:
        """Prune explicit entries.

        Calls ``predicate(row, col, value, tolerance)`` exactly once per
        explicit entry and drops every entry for which it returns False.

        Returns:
            Number of retained entries
        """
        ...

    @abstractmethod
    def enumerate_indexed(self) -> Iterator[Tuple[int, int, Any]]:
        """Iterate over every explicit (row, col, value) triple exactly once.

        Each call starts a fresh traversal. The order is stable for an
        unmodified matrix.
        """
        ...

    @abstractmethod
    def _accumulate(self, alpha, x: np.ndarray, y: np.ndarray) -> None:
        """y += alpha * A @ x. Inputs are already validated."""
        ...

    @abstractmethod
    def _accumulate_transpose(self, alpha, x: np.ndarray, y: np.ndarray) -> None:
        """y += alpha * A.T @ x. Inputs are already validated."""
        ...

    # =========================================================================
    # Products
    # =========================================================================

    def multiply(self, alpha, x, beta, y: np.ndarray) -> None:
        """Compute y := alpha * A @ x + beta * y in place.

        Args:
            alpha: Scale of the product term
            x: Input vector of length cols
            beta: Scale of the prior y contents
            y: Output vector of length rows, updated in place

        If beta is zero the prior contents of y are ignored, including NaN or
        Inf. If alpha is zero, y is only scaled by beta. When x shares memory
        with y it is copied first.

        Raises:
            DimensionMismatchError: If len(x) != cols or len(y) != rows
        """
        x = as_input_vector(x, self._cols, 'x')
        y = as_output_vector(y, self._rows, 'y')
        self._scaled_product(alpha, x, beta, y, self._accumulate)

    def transpose_multiply(self, alpha, x, beta, y: np.ndarray) -> None:
        """Compute y := alpha * A.T @ x + beta * y in place.

        Same rules as multiply(), with x of length rows and y of length cols.

        Raises:
            DimensionMismatchError: If len(x) != rows or len(y) != cols
        """
        x = as_input_vector(x, self._rows, 'x')
        y = as_output_vector(y, self._cols, 'y')
        self._scaled_product(alpha, x, beta, y, self._accumulate_transpose)

    def _scaled_product(self, alpha, x, beta, y, accumulate) -> None:
        if np.may_share_memory(x, y):
            x = x.copy()

        if beta == self.zero:
            y.fill(0)
        elif beta != self.one:
            y *= beta

        if alpha != self.zero:
            accumulate(alpha, x, y)

    def dot(self, x) -> np.ndarray:
        """Return A @ x as a new vector."""
        y = np.zeros(self._rows, dtype=np.result_type(self._dtype.numpy_dtype, np.asarray(x).dtype))
        self.multiply(self.one, x, self.zero, y)
        return y

    def transpose_dot(self, x) -> np.ndarray:
        """Return A.T @ x as a new vector."""
        y = np.zeros(self._cols, dtype=np.result_type(self._dtype.numpy_dtype, np.asarray(x).dtype))
        self.transpose_multiply(self.one, x, self.zero, y)
        return y

    # =========================================================================
    # Norms and Pruning
    # =========================================================================

    def norm(self, which: int) -> float:
        """Compute a matrix norm.

        Args:
            which: 0 = infinity norm (max row sum), 1 = one norm
                (max column sum), 2 = Frobenius norm

        Raises:
            UnsupportedNormError: For any other discriminator
        """
        return norm_from_entries(which, self.shape, self.enumerate_indexed())

    def drop_zeros(self, tolerance: float = 0.0) -> int:
        """Drop explicit entries with magnitude <= tolerance.

        Returns:
            Number of retained entries
        """
        retained = self.keep(lambda i, j, value, tol: abs(value) > tol, tolerance)
        logger.debug(f"drop_zeros(tolerance={tolerance}) retained {retained} entries")
        return retained

    # =========================================================================
    # Equality and Hashing
    # =========================================================================

    def equals(self, other: Any, tolerance: Optional[float] = None) -> bool:
        """Compare with another matrix element by element.

        Args:
            other: Matrix to compare with (anything else compares unequal)
            tolerance: Maximum allowed absolute difference per element;
                defaults to the configured equals_tolerance

        Returns:
            True if shapes match and every |self[i, j] - other[i, j]| <= tolerance

        Raises:
            ValueError: If tolerance is negative and other is a distinct
                matrix of the same shape
        """
        if other is None or not isinstance(other, SparseMatrix):
            return False
        if self.shape != other.shape:
            return False
        if other is self:
            return True

        if tolerance is None:
            tolerance = get_config().equals_tolerance
        elif tolerance < 0:
            raise ValueError(f"tolerance must be non-negative, got {tolerance}")

        # Positions explicit in neither operand are zero on both sides.
        for i, j, value in self.enumerate_indexed():
            if not abs(value - other.at(i, j)) <= tolerance:
                return False
        for i, j, value in other.enumerate_indexed():
            if not abs(self.at(i, j) - value) <= tolerance:
                return False
        return True

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, SparseMatrix):
            return False
        return self.equals(other)

    def __ne__(self, other: Any) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        """Hash from the shape and a bounded sample of cell values.

        At most ``hash_sample_size`` (default 25) cells are read, through
        ``at`` only, at coordinates that depend on the shape alone.
        """
        limit = get_config().hash_sample_size
        samples = tuple(
            hash_value(self.at(i, j))
            for i, j in sample_coordinates(self._rows, self._cols, limit)
        )
        return hash((self._rows, self._cols) + samples)

    # =========================================================================
    # Conversion
    # =========================================================================

    def to_dense(self) -> np.ndarray:
        """Convert to a dense numpy array."""
        out = np.zeros(self.shape, dtype=self._dtype.numpy_dtype)
        for i, j, value in self.enumerate_indexed():
            out[i, j] = value
        return out

    def to_scipy(self) -> 'coo_matrix':
        """Convert to a scipy.sparse.coo_matrix.

        Raises:
            ImportError: If scipy is not installed
        """
        try:
            from scipy.sparse import coo_matrix
        except ImportError as e:
            raise ImportError("to_scipy() requires scipy: pip install scipy") from e

        triples = list(self.enumerate_indexed())
        data = np.array([t[2] for t in triples], dtype=self._dtype.numpy_dtype)
        row = np.array([t[0] for t in triples], dtype=np.int64)
        col = np.array([t[1] for t in triples], dtype=np.int64)
        return coo_matrix((data, (row, col)), shape=self.shape)

    # =========================================================================
    # Magic Methods
    # =========================================================================

    def __matmul__(self, x) -> np.ndarray:
        return self.dot(x)

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}("
                f"shape={self.shape}, nnz={self.nnz}, dtype={self._dtype})")

    def __len__(self) -> int:
        """Return number of rows."""
        return self._rows
