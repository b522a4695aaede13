"""Tests for thickness_event.observables module."""

from __future__ import annotations

import math

import numpy as np
import pytest

from thickness_event.means import TINY
from thickness_event.observables import (
    LEGACY_SIZE,
    Harmonic,
    Observables,
    compute_observables,
    harmonic_sums,
    harmonic_terms,
)

# r^n exp(i n phi) in the (re, im) convention of harmonic_terms
TRIG_CONVENTION = {
    2: lambda r, phi: (-r**2 * np.cos(2 * phi), r**2 * np.sin(2 * phi)),
    3: lambda r, phi: (-r**3 * np.sin(3 * phi), -r**3 * np.cos(3 * phi)),
    4: lambda r, phi: (r**4 * np.cos(4 * phi), -r**4 * np.sin(4 * phi)),
    5: lambda r, phi: (r**5 * np.sin(5 * phi), r**5 * np.cos(5 * phi)),
}


def _profile_grid(n: int = 30, seed: int = 4) -> np.ndarray:
    """Lumpy, elongated nonnegative profile with some empty cells."""
    rng = np.random.default_rng(seed)
    iy, ix = np.mgrid[0:n, 0:n].astype(float)
    grid = np.zeros((n, n))
    for _ in range(6):
        cx, cy = rng.uniform(8, n - 8, size=2)
        grid += rng.gamma(1.0) * np.exp(-((ix - cx) ** 2 / 12.0 + (iy - cy) ** 2 / 5.0))
    grid[grid < 1e-3] = 0.0
    return grid


def _center_of_mass(grid: np.ndarray) -> tuple[float, float]:
    iy, ix = np.mgrid[0:grid.shape[0], 0:grid.shape[1]]
    return float((grid * ix).sum() / grid.sum()), float((grid * iy).sum() / grid.sum())


class TestPolynomialIdentities:
    def test_terms_match_trig_evaluation(self) -> None:
        rng = np.random.default_rng(0)
        x = rng.normal(size=200)
        y = rng.normal(size=200)
        r = np.hypot(x, y)
        phi = np.arctan2(y, x)
        for n, (re, im, rn) in harmonic_terms(x, y).items():
            re_trig, im_trig = TRIG_CONVENTION[n](r, phi)
            np.testing.assert_allclose(re, re_trig, atol=1e-10)
            np.testing.assert_allclose(im, im_trig, atol=1e-10)
            np.testing.assert_allclose(rn, r**n, rtol=1e-12)

    def test_modulus_is_r_to_the_n(self) -> None:
        x = np.array([1.0, -2.0, 0.5, 3.0])
        y = np.array([0.0, 1.5, -0.25, -3.0])
        for n, (re, im, rn) in harmonic_terms(x, y).items():
            np.testing.assert_allclose(np.hypot(re, im), rn, rtol=1e-12)

    def test_observables_match_trig_evaluation(self) -> None:
        grid = _profile_grid()
        ixcm, iycm = _center_of_mass(grid)
        dxy = 0.2
        obs = compute_observables(grid, ixcm, iycm, dxy)

        iy, ix = np.nonzero(grid >= TINY)
        t = grid[iy, ix]
        x = ix - ixcm
        y = iy - iycm
        r = np.hypot(x, y)
        phi = np.arctan2(y, x)
        for n in (2, 3, 4, 5):
            weight = (t * r**n).sum()
            eps = np.abs((t * r**n * np.exp(1j * n * phi)).sum()) / weight
            assert obs[n].magnitude == pytest.approx(eps, rel=1e-9)

            re, im = (np.sum(t * c) for c in TRIG_CONVENTION[n](r, phi))
            assert obs[n].angle == pytest.approx((math.atan2(im, re) + math.pi) / n, rel=1e-9)
            assert obs[n].radius == pytest.approx(dxy**2 * weight / t.sum(), rel=1e-9)

        assert obs.entropy == pytest.approx(dxy**2 * np.sum(t ** (4.0 / 3.0)))


class TestScenarios:
    def test_point_source_at_center_of_mass(self) -> None:
        grid = np.zeros((9, 9))
        grid[4, 4] = 3.0
        obs = compute_observables(grid, 4.0, 4.0, 0.5)
        vec = obs.legacy_vector()
        np.testing.assert_array_equal(vec[3:6], 0.0)
        # zero weight: radius is clamped to TINY
        assert vec[9] == pytest.approx(0.25 * TINY / 3.0)

    def test_single_off_center_cell_radii(self) -> None:
        grid = np.zeros((8, 8))
        grid[2, 3] = 1.7
        dxy = 0.5
        obs = compute_observables(grid, 0.0, 0.0, dxy)
        r = math.hypot(3.0, 2.0)
        vec = obs.legacy_vector()
        for i, n in zip((9, 10, 11), (2, 3, 4)):
            assert vec[i] == pytest.approx(dxy**2 * r**n)
        # single cell is maximally anisotropic
        for i in (3, 4, 5):
            assert vec[i] == pytest.approx(1.0)

    def test_angles_of_single_cell_on_x_axis(self) -> None:
        grid = np.zeros((5, 5))
        grid[2, 4] = 1.0
        obs = compute_observables(grid, 2.0, 2.0, 1.0)
        # n=2: re = -4, im = 0 -> atan2 = pi -> (2 pi) / 2
        assert obs[2].angle == pytest.approx(math.pi)
        # n=4: re = 16, im = 0 -> atan2 = 0 -> pi / 4
        assert obs[4].angle == pytest.approx(math.pi / 4)
        # n=3: re = 0, im = -8 -> atan2 = -pi/2 -> (pi/2) / 3
        assert obs[3].angle == pytest.approx(math.pi / 6)

    def test_angles_within_range(self) -> None:
        obs = compute_observables(_profile_grid(seed=9), 14.2, 15.1, 0.1)
        for n in (2, 3, 4, 5):
            assert 0.0 <= obs[n].angle <= 2.0 * math.pi / n + 1e-12

    def test_sub_threshold_cells_ignored(self) -> None:
        grid = np.zeros((6, 6))
        grid[1, 1] = 1.0
        grid[4, 5] = TINY / 10.0
        a = compute_observables(grid, 1.0, 1.0, 1.0)
        grid[4, 5] = 0.0
        b = compute_observables(grid, 1.0, 1.0, 1.0)
        assert a == b

    def test_empty_grid_is_degenerate(self) -> None:
        obs = compute_observables(np.zeros((4, 4)), float("nan"), float("nan"), 1.0)
        assert obs.entropy == 0.0
        for n in (2, 3, 4, 5):
            assert obs[n].magnitude == 0.0
            assert obs[n].angle == 0.0
            assert not math.isfinite(obs[n].radius)


class TestLegacyLayout:
    def test_vector_slots(self) -> None:
        harmonics = {
            n: Harmonic(order=n, magnitude=0.1 * n, angle=1.0 * n, radius=10.0 * n) for n in (2, 3, 4, 5)
        }
        vec = Observables(entropy=42.0, harmonics=harmonics).legacy_vector()
        assert vec.shape == (LEGACY_SIZE,)
        np.testing.assert_allclose(
            vec, [0.0, 0.0, 42.0, 0.2, 0.3, 0.4, 2.0, 3.0, 4.0, 20.0, 30.0, 40.0]
        )

    def test_eccentricity_accessor(self) -> None:
        obs = compute_observables(_profile_grid(), 15.0, 15.0, 0.2)
        assert obs.eccentricity(2) == obs[2].magnitude == obs.harmonics[2].magnitude


class TestHarmonicSums:
    def test_totals(self) -> None:
        grid = np.array([[0.0, 2.0], [1.0, 0.0]])
        sums, total, entropy_sum, retained = harmonic_sums(grid, 0.0, 0.0)
        assert total == 3.0
        assert retained == 2
        assert entropy_sum == pytest.approx(2.0 ** (4.0 / 3.0) + 1.0)
        # cells at (x, y) = (1, 0) with t=2 and (0, 1) with t=1
        assert sums[2].re == pytest.approx(2.0 * -1.0 + 1.0 * 1.0)
        assert sums[2].im == 0.0
        assert sums[2].wt == pytest.approx(3.0)
