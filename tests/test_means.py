"""Tests for thickness_event.means module."""

from __future__ import annotations

import numpy as np
import pytest

from thickness_event.means import (
    TINY,
    generalized_mean,
    geometric_mean,
    negative_pmean,
    positive_pmean,
    select_generalized_mean,
)

EXPONENTS = [-5.0, -1.0, -0.3, 0.0, 1e-14, 0.5, 1.0, 2.0, 7.0]


class TestIdenticalInputs:
    @pytest.mark.parametrize("p", EXPONENTS)
    @pytest.mark.parametrize("a", [1e-3, 0.4, 1.0, 23.5])
    def test_mean_of_equal_values_is_the_value(self, p: float, a: float) -> None:
        assert generalized_mean(p, a, a) == pytest.approx(a, rel=1e-12)

    @pytest.mark.parametrize("p", [0.0, 0.5, 2.0])
    def test_zero_with_zero_is_zero(self, p: float) -> None:
        assert generalized_mean(p, 0.0, 0.0) == 0.0


class TestKnownValues:
    def test_arithmetic(self) -> None:
        assert generalized_mean(1.0, 2.0, 4.0) == pytest.approx(3.0)

    def test_geometric(self) -> None:
        assert generalized_mean(0.0, 2.0, 8.0) == pytest.approx(4.0)

    def test_harmonic(self) -> None:
        assert generalized_mean(-1.0, 2.0, 4.0) == pytest.approx(8.0 / 3.0)

    def test_quadratic(self) -> None:
        assert positive_pmean(2.0, 3.0, 4.0) == pytest.approx(np.sqrt(12.5))

    def test_large_p_approaches_max(self) -> None:
        assert generalized_mean(200.0, 1.0, 2.0) == pytest.approx(2.0, rel=1e-2)

    def test_large_negative_p_approaches_min(self) -> None:
        assert generalized_mean(-200.0, 1.0, 2.0) == pytest.approx(1.0, rel=1e-2)

    def test_ordered_in_p(self) -> None:
        values = [generalized_mean(p, 0.5, 3.0) for p in (-2.0, -1.0, 0.0, 1.0, 2.0)]
        assert values == sorted(values)


class TestNegativeGuard:
    @pytest.mark.parametrize("p", [-0.1, -1.0, -4.0])
    @pytest.mark.parametrize("a,b", [(0.0, 1.0), (1.0, 0.0), (TINY / 2, 5.0), (0.0, 0.0)])
    def test_vanishes_when_either_input_is_tiny(self, p: float, a: float, b: float) -> None:
        assert negative_pmean(p, a, b) == 0.0

    def test_no_warnings_or_nan_on_arrays(self) -> None:
        a = np.array([0.0, 1.0, 2.0, 0.0])
        b = np.array([1.0, 0.0, 2.0, 0.0])
        with np.errstate(all="raise"):
            out = negative_pmean(-1.0, a, b)
        np.testing.assert_allclose(out, [0.0, 0.0, 2.0, 0.0])
        assert np.all(np.isfinite(out))

    def test_positive_p_does_not_vanish_on_one_sided_input(self) -> None:
        assert positive_pmean(1.0, 0.0, 2.0) == pytest.approx(1.0)


class TestSelection:
    def test_zero_selects_geometric(self) -> None:
        assert select_generalized_mean(0.0) is geometric_mean
        assert select_generalized_mean(1e-13) is geometric_mean

    def test_selected_function_works_on_grids(self) -> None:
        rng = np.random.default_rng(3)
        a = rng.random((5, 5))
        b = rng.random((5, 5))
        f = select_generalized_mean(1.0)
        out = f(a, b)
        assert out.shape == (5, 5)
        np.testing.assert_allclose(out, 0.5 * (a + b))

    def test_negative_selection_applies_guard(self) -> None:
        f = select_generalized_mean(-0.5)
        np.testing.assert_array_equal(f(np.array([0.0, 1.0]), np.array([1.0, 1.0])), [0.0, 1.0])
