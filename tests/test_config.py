"""Unit tests for polykit.config."""

import pytest

from polykit import ExtremaConfig


def test_defaults():
    """Tests the default extrema configuration."""
    config = ExtremaConfig()
    assert config.imag_tol == 1e-10
    assert config.root_method == "companion"
    assert config.include_endpoints is True


def test_custom_values_and_repr():
    """Tests that keyword values are stored and shown in repr."""
    config = ExtremaConfig(imag_tol=0, root_method="eigen", include_endpoints=False)
    assert config.imag_tol == 0.0
    assert config.root_method == "eigen"
    assert config.include_endpoints is False
    assert repr(config) == (
        "ExtremaConfig(imag_tol=0.0, root_method='eigen', include_endpoints=False)"
    )


def test_negative_imag_tol_raises():
    """Tests that a negative tolerance is rejected."""
    with pytest.raises(ValueError):
        ExtremaConfig(imag_tol=-1e-9)
