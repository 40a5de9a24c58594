"""
Pytest configuration and shared fixtures for spmat tests.
"""

import pytest
import numpy as np
from pathlib import Path
import sys

# Add src to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root / "src"))

from spmat.core import reset_config

from _formats import CoordinateMatrix, CompressedRowMatrix


# Try to import scipy
try:
    import scipy.sparse as sp
    HAS_SCIPY = True
except ImportError:
    HAS_SCIPY = False


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def clean_config():
    """Every test starts from the built-in configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture(scope="session")
def requires_scipy():
    """Skip test if scipy is not available."""
    if not HAS_SCIPY:
        pytest.skip("scipy not available")


@pytest.fixture
def dense_matrix_small():
    """Dense reference for the small test matrices."""
    return np.array([
        [1, 0, 2, 0],
        [0, 3, 0, 4],
        [5, 0, 0, 6]
    ], dtype=np.float64)


@pytest.fixture
def small_coo_matrix():
    """Create a small coordinate-list matrix (3x4).

    Matrix:
    [[1, 0, 2, 0],
     [0, 3, 0, 4],
     [5, 0, 0, 6]]
    """
    return CoordinateMatrix(3, 4, [
        (0, 0, 1.0), (0, 2, 2.0),
        (1, 1, 3.0), (1, 3, 4.0),
        (2, 0, 5.0), (2, 3, 6.0),
    ])


@pytest.fixture
def small_csr_matrix():
    """Create a small CSR matrix (3x4).

    Same matrix as small_coo_matrix.
    """
    return CompressedRowMatrix(
        3, 4,
        data=[1.0, 2.0, 3.0, 4.0, 5.0, 6.0],
        indices=[0, 2, 1, 3, 0, 3],
        indptr=[0, 2, 4, 6],
    )


@pytest.fixture
def identity_2x2():
    """2x2 identity stored sparsely as (0,0,1), (1,1,1)."""
    return CoordinateMatrix(2, 2, [(0, 0, 1.0), (1, 1, 1.0)])


@pytest.fixture(params=['coo', 'csr'])
def small_matrix(request, small_coo_matrix, small_csr_matrix):
    """The small test matrix in each layout."""
    return small_coo_matrix if request.param == 'coo' else small_csr_matrix


@pytest.fixture
def random_dense():
    """Random 7x5 dense matrix with roughly 40% non-zeros."""
    rng = np.random.default_rng(42)
    dense = rng.standard_normal((7, 5))
    dense[rng.random((7, 5)) > 0.4] = 0.0
    return dense

