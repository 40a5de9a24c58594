"""
Tests for library-wide configuration.
"""

import logging

import pytest
from spmat import DType
from spmat.core import config as config_module
from spmat.core.config import (
    DEFAULT_EQUALS_TOLERANCE,
    DEFAULT_HASH_SAMPLE_SIZE,
    get_config,
    set_equals_tolerance,
    get_equals_tolerance,
    set_default_dtype,
    get_default_dtype,
    reset_config,
)

from _formats import CoordinateMatrix


class TestDefaults:
    """Test built-in defaults."""

    def test_default_values(self):
        cfg = get_config()
        assert cfg.equals_tolerance == DEFAULT_EQUALS_TOLERANCE == 1e-12
        assert cfg.hash_sample_size == DEFAULT_HASH_SAMPLE_SIZE == 25
        assert cfg.default_dtype is DType.float64

    def test_singleton(self):
        assert get_config() is get_config()


class TestEqualsTolerance:
    """Test equals tolerance setting."""

    def test_set_and_get(self):
        set_equals_tolerance(1e-6)
        assert get_equals_tolerance() == 1e-6

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            set_equals_tolerance(-1.0)

    def test_nan_rejected(self):
        with pytest.raises(ValueError):
            set_equals_tolerance(float('nan'))

    def test_used_by_eq(self):
        a = CoordinateMatrix(1, 1, [(0, 0, 1.0)])
        b = CoordinateMatrix(1, 1, [(0, 0, 1.0 + 1e-8)])
        assert a != b
        set_equals_tolerance(1e-6)
        assert a == b


class TestDefaultDType:
    """Test default dtype setting."""

    def test_set_string(self):
        set_default_dtype('float32')
        assert get_default_dtype() is DType.float32

    def test_new_matrices_pick_up_default(self):
        set_default_dtype('complex128')
        assert CoordinateMatrix(2, 2).dtype is DType.complex128

    def test_invalid_rejected(self):
        with pytest.raises(ValueError):
            set_default_dtype('int8')


class TestHashSampleSize:
    """Test hash sample size setting."""

    def test_must_be_positive(self):
        with pytest.raises(ValueError):
            get_config().hash_sample_size = 0


class TestEnvironment:
    """Test environment overrides."""

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv('SPMAT_EQUALS_TOLERANCE', '1e-9')
        monkeypatch.setenv('SPMAT_DEFAULT_DTYPE', 'float32')
        get_config().load_environment()
        assert get_equals_tolerance() == 1e-9
        assert get_default_dtype() is DType.float32

    def test_invalid_env_ignored(self, monkeypatch, caplog):
        monkeypatch.setenv('SPMAT_EQUALS_TOLERANCE', 'not-a-number')
        monkeypatch.setenv('SPMAT_DEFAULT_DTYPE', 'int8')
        with caplog.at_level(logging.WARNING, logger=config_module.logger.name):
            get_config().load_environment()
        assert get_equals_tolerance() == DEFAULT_EQUALS_TOLERANCE
        assert get_default_dtype() is DType.float64
        assert "SPMAT_EQUALS_TOLERANCE" in caplog.text
        assert "SPMAT_DEFAULT_DTYPE" in caplog.text

    def test_reset(self):
        set_equals_tolerance(0.5)
        set_default_dtype('float32')
        reset_config()
        assert get_equals_tolerance() == DEFAULT_EQUALS_TOLERANCE
        assert get_default_dtype() is DType.float64
