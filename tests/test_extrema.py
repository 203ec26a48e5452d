"""Unit tests for polykit.extrema."""

from __future__ import annotations

import logging

import numpy as np
import pytest
from numpy.testing import assert_allclose

from polykit import ExtremaConfig, Polynomial
from polykit.extrema import (
    MinMax,
    find_min_max,
    find_min_max_with_roots,
    select_candidates,
)


def _brute_force_min_max(p: Polynomial, t1: float, t2: float, d: int) -> tuple[float, float]:
    """Dense-sampling reference for the min and max of derivative d."""
    ts = np.linspace(t1, t2, 20001)
    values = np.array([p.evaluate_derivative(t, d) for t in ts])
    return float(values.min()), float(values.max())


def test_quadratic_regression(quadratic):
    """Tests p(t) = t**2 - 4 t + 3 on [0, 5]: min -1 at t=2, max 8 at t=5."""
    result = find_min_max(quadratic, 0.0, 5.0, 0)
    assert result is not None
    assert result.t_min == pytest.approx(2.0)
    assert result.min == pytest.approx(-1.0)
    assert result.t_max == pytest.approx(5.0)
    assert result.max == pytest.approx(8.0)


def test_quadratic_regression_via_method_and_unpacking(quadratic):
    """Tests the Polynomial convenience method and tuple unpacking."""
    t_min, t_max, lo, hi = quadratic.find_min_max(0.0, 5.0)
    assert (t_min, t_max, lo, hi) == pytest.approx((2.0, 5.0, -1.0, 8.0))


def test_degenerate_interval_fails(quadratic):
    """Tests that t1 > t2 reports failure."""
    assert find_min_max(quadratic, 5.0, 0.0, 0) is None
    result, roots = find_min_max_with_roots(quadratic, 5.0, 0.0, 0)
    assert result is None
    assert_allclose(roots.real, [2.0])


def test_single_point_interval(quadratic):
    """Tests that t1 == t2 is a valid (zero-length) interval."""
    result = find_min_max(quadratic, 1.0, 1.0, 0)
    assert result == MinMax(1.0, 1.0, 0.0, 0.0)


def test_vertex_outside_interval_uses_endpoints(quadratic):
    """Tests that a critical point outside [t1, t2] is ignored."""
    result = find_min_max(quadratic, 3.0, 4.0, 0)
    assert result == MinMax(t_min=3.0, t_max=4.0, min=0.0, max=3.0)


def test_first_derivative_extrema_of_cubic():
    """Tests velocity bounds of p(t) = t**3 - 3 t on [-2, 2].

    p'(t) = 3 t**2 - 3 attains -3 at t = 0 (root of p'') and 9 at both ends.
    """
    p = Polynomial([0.0, -3.0, 0.0, 1.0])
    result = find_min_max(p, -2.0, 2.0, 1)
    assert result is not None
    assert result.t_min == pytest.approx(0.0, abs=1e-12)
    assert result.min == pytest.approx(-3.0)
    assert result.max == pytest.approx(9.0)
    # endpoints come first, so the first maximal endpoint wins the tie
    assert result.t_max == -2.0


def test_supplied_roots_are_reused(quintic):
    """Tests that roots from one query can be passed to later queries."""
    first, roots = find_min_max_with_roots(quintic, -1.0, 1.0, 0)
    assert first is not None

    for t1, t2 in [(-1.0, 1.0), (-0.5, 0.2), (0.1, 0.9)]:
        reused = find_min_max(quintic, t1, t2, 0, roots_of_derivative=roots)
        fresh = find_min_max(quintic, t1, t2, 0)
        assert reused == fresh


def test_supplied_roots_are_used_verbatim(quadratic):
    """Tests that the supplied roots replace internal root finding."""
    # Pretend the derivative vanishes at 4 only; the true vertex at 2 is missed.
    result = find_min_max(quadratic, 0.0, 5.0, 0, roots_of_derivative=np.array([4.0 + 0j]))
    assert result is not None
    assert result.min == pytest.approx(3.0)  # p(4) = 3 = p(0)
    assert result.t_min == 0.0


def test_complex_roots_are_discarded():
    """Tests that roots with a non-negligible imaginary part are not candidates."""
    candidates = select_candidates(0.0, 2.0, [1.0 + 1e-3j, 0.5 + 0j, 1.5 + 1e-12j, 3.0 + 0j])
    assert candidates == [0.0, 2.0, 0.5, 1.5]


def test_imag_tol_is_configurable():
    """Tests that imag_tol controls which roots count as real."""
    roots = [1.0 + 1e-6j]
    assert select_candidates(0.0, 2.0, roots) == [0.0, 2.0]
    assert select_candidates(0.0, 2.0, roots, ExtremaConfig(imag_tol=1e-5)) == [0.0, 2.0, 1.0]


def test_no_candidates_without_endpoints_fails(caplog):
    """Tests failure when endpoints are excluded and no critical point exists."""
    p = Polynomial([0.0, 1.0])  # monotone, no critical points
    config = ExtremaConfig(include_endpoints=False)
    with caplog.at_level(logging.DEBUG, logger="polykit"):
        assert find_min_max(p, 0.0, 1.0, 0, config=config) is None
    assert any("no real candidates" in r.getMessage() for r in caplog.records)


def test_interior_only_search(quadratic):
    """Tests that include_endpoints=False returns the interior extremum only."""
    result = find_min_max(quadratic, 0.0, 5.0, 0, config=ExtremaConfig(include_endpoints=False))
    assert result == MinMax(2.0, 2.0, -1.0, -1.0)


@pytest.mark.parametrize("method", ["companion", "eigen"])
def test_matches_dense_sampling(method, quintic):
    """Tests the extrema of every derivative against dense sampling."""
    config = ExtremaConfig(root_method=method)
    for d in range(quintic.N):
        result = find_min_max(quintic, -1.2, 0.8, d, config=config)
        assert result is not None
        lo, hi = _brute_force_min_max(quintic, -1.2, 0.8, d)
        # Analytic extrema are never worse than sampled ones.
        assert result.min <= lo + 1e-9
        assert result.max >= hi - 1e-9
        assert result.min == pytest.approx(lo, abs=1e-4)
        assert result.max == pytest.approx(hi, abs=1e-4)
        assert result.min == pytest.approx(quintic.evaluate_derivative(result.t_min, d))
        assert result.max == pytest.approx(quintic.evaluate_derivative(result.t_max, d))


def test_derivative_at_or_beyond_order(quadratic):
    """Tests that identically zero derivatives still yield a result."""
    result = find_min_max(quadratic, 0.0, 1.0, 2)
    assert result == MinMax(0.0, 0.0, 2.0, 2.0)
    result = find_min_max(quadratic, 0.0, 1.0, 5)
    assert result == MinMax(0.0, 0.0, 0.0, 0.0)


def test_negative_derivative_order_raises(quadratic):
    """Tests that a negative derivative order is a contract violation."""
    with pytest.raises(ValueError):
        find_min_max(quadratic, 0.0, 1.0, -1)
    with pytest.raises(ValueError):
        find_min_max_with_roots(quadratic, 0.0, 1.0, -1)
