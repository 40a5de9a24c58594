"""
Global configuration for spmat.

Provides:
- Default equality tolerance shared by every matrix comparison
- Hash sample size
- Default element type for new matrices

Initial values may be overridden from the environment:

    SPMAT_EQUALS_TOLERANCE=1e-10
    SPMAT_DEFAULT_DTYPE=float32
"""

from __future__ import annotations

import os
import logging
from typing import Union

import numpy as np

from .._dtypes import DType, normalize_dtype

logger = logging.getLogger("spmat.config")

DEFAULT_EQUALS_TOLERANCE = 1e-12
DEFAULT_HASH_SAMPLE_SIZE = 25


# =============================================================================
# Global Configuration State
# =============================================================================

class _Config:
    """
    Global configuration singleton.

    Holds library-wide defaults. Values are read on every comparison and
    hash, so changes take effect immediately for all instances.
    """

    def __init__(self):
        self._equals_tolerance = DEFAULT_EQUALS_TOLERANCE
        self._hash_sample_size = DEFAULT_HASH_SAMPLE_SIZE
        self._default_dtype = DType.float64

    @property
    def equals_tolerance(self) -> float:
        """Tolerance used by ``==`` and ``equals()`` without explicit tolerance."""
        return self._equals_tolerance

    @equals_tolerance.setter
    def equals_tolerance(self, value: float):
        value = float(value)
        if not value >= 0.0:
            raise ValueError(f"equals_tolerance must be non-negative, got {value}")
        self._equals_tolerance = value

    @property
    def hash_sample_size(self) -> int:
        """Maximum number of cells sampled by ``hash()``."""
        return self._hash_sample_size

    @hash_sample_size.setter
    def hash_sample_size(self, value: int):
        value = int(value)
        if value < 1:
            raise ValueError(f"hash_sample_size must be at least 1, got {value}")
        self._hash_sample_size = value

    @property
    def default_dtype(self) -> DType:
        """Element type used when a matrix is created without one."""
        return self._default_dtype

    @default_dtype.setter
    def default_dtype(self, value: Union[DType, str, np.dtype]):
        self._default_dtype = normalize_dtype(value)

    def load_environment(self) -> None:
        """Apply overrides from SPMAT_* environment variables.

        Invalid values are logged and ignored.
        """
        tol = os.environ.get('SPMAT_EQUALS_TOLERANCE')
        if tol:
            try:
                self.equals_tolerance = tol
            except ValueError as e:
                logger.warning(f"Ignoring SPMAT_EQUALS_TOLERANCE={tol!r}: {e}")

        dtype = os.environ.get('SPMAT_DEFAULT_DTYPE')
        if dtype:
            try:
                self.default_dtype = dtype
            except (TypeError, ValueError) as e:
                logger.warning(f"Ignoring SPMAT_DEFAULT_DTYPE={dtype!r}: {e}")


# Global config instance
_config = _Config()
_config.load_environment()


# =============================================================================
# Public API
# =============================================================================

def get_config() -> _Config:
    """Get global configuration instance."""
    return _config


def set_equals_tolerance(tolerance: float) -> None:
    """
    Set the default tolerance used by matrix equality.

    Args:
        tolerance: Non-negative threshold

    Raises:
        ValueError: If tolerance is negative or NaN
    """
    _config.equals_tolerance = tolerance
    logger.debug(f"equals_tolerance set to {_config.equals_tolerance}")


def get_equals_tolerance() -> float:
    """Get the default tolerance used by matrix equality."""
    return _config.equals_tolerance


def set_default_dtype(dtype: Union[DType, str, np.dtype]) -> None:
    """
    Set the element type used for new matrices.

    Args:
        dtype: 'float32', 'float64', 'complex64', 'complex128' or a DType
    """
    _config.default_dtype = dtype
    logger.debug(f"default_dtype set to {_config.default_dtype}")


def get_default_dtype() -> DType:
    """Get the element type used for new matrices."""
    return _config.default_dtype


def reset_config() -> None:
    """Restore built-in defaults, ignoring the environment."""
    _config.equals_tolerance = DEFAULT_EQUALS_TOLERANCE
    _config.hash_sample_size = DEFAULT_HASH_SAMPLE_SIZE
    _config.default_dtype = DType.float64
