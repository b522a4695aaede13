"""thickness_event/observables.py
Author: Sabin Thapa <sthapa3@kent.edu>

Shape observables of the reduced-thickness profile T_R.

The eccentricity harmonics are weighted averages of r^n exp(i n φ) over T_R,
taken about its center of mass. The naive way to get exp(i n φ) is

    φ = arctan2(y, x);  re = cos(n φ);  im = sin(n φ)

which costs three trig calls per cell. Instead cos and sin of n φ are written
directly in terms of x and y via the multiple-angle formulas, e.g.

    sin(2 arctan2(y, x)) = 2 x y / r^2,

which also cancels the r^n weight. The resulting polynomials (with the sign
and real/imaginary convention used by downstream consumers) are

    n   re                      im
    2   y²-x²                   2xy
    3   y³-3yx²                 3xy²-x³
    4   x⁴+y⁴-6x²y²             4xy(y²-x²)
    5   y(5x⁴-10x²y²+y⁴)        x(x⁴-10x²y²+5y⁴)

and |re + i im| = r^n for every n. The tests check these against the trig
evaluation.

Coordinates are grid-index offsets from the center of mass; only the radii
are converted back to physical units (fm^n).
"""

from __future__ import annotations

import math
import numpy as np
from dataclasses import dataclass

from .means import TINY

# Layout of the flat observable vector read by existing output code.
LEGACY_SIZE = 12
LEGACY_ENTROPY = 2
LEGACY_MAGNITUDE = {2: 3, 3: 4, 4: 5}
LEGACY_ANGLE = {2: 6, 3: 7, 4: 8}
LEGACY_RADIUS = {2: 9, 3: 10, 4: 11}


@dataclass(frozen=True)
class Harmonic:
    """Order-n eccentricity magnitude, participant-plane angle and <r^n> [fm^n]."""
    order: int
    magnitude: float
    angle: float
    radius: float


@dataclass(frozen=True)
class Observables:
    """Named shape observables of one event.

    entropy is dxy² Σ T_R^(4/3), a total-entropy proxy.
    """
    entropy: float
    harmonics: dict

    def __getitem__(self, order: int) -> Harmonic:
        return self.harmonics[order]

    def eccentricity(self, order: int) -> float:
        return self.harmonics[order].magnitude

    def legacy_vector(self) -> np.ndarray:
        """Flat 12-slot vector.

        [2] entropy, [3..5] magnitudes n=2..4, [6..8] angles n=2..4,
        [9..11] radii n=2..4. Slots 0 and 1 are unused and left at zero;
        order 5 is not part of the vector.
        """
        out = np.zeros(LEGACY_SIZE, dtype=float)
        out[LEGACY_ENTROPY] = self.entropy
        for n, i in LEGACY_MAGNITUDE.items():
            out[i] = self.harmonics[n].magnitude
        for n, i in LEGACY_ANGLE.items():
            out[i] = self.harmonics[n].angle
        for n, i in LEGACY_RADIUS.items():
            out[i] = self.harmonics[n].radius
        return out


@dataclass
class HarmonicSums:
    """Running sums Σ t re_n, Σ t im_n and Σ t r^n for one order."""
    order: int
    re: float = 0.0
    im: float = 0.0
    wt: float = 0.0

    def magnitude(self) -> float:
        return math.sqrt(self.re * self.re + self.im * self.im) / max(self.wt, TINY)

    def angle(self, retained: bool) -> float:
        # weight is the constant 1/n once any cell contributed, else zero
        weight = 1.0 / self.order if retained else 0.0
        return weight * (math.atan2(self.im, self.re) + math.pi)

    def radius(self, total: float, area: float) -> float:
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(area * max(self.wt, TINY)) / np.float64(total))


def harmonic_terms(x: np.ndarray, y: np.ndarray) -> dict:
    """Per-cell (re, im, r^n) polynomials for n = 2..5."""
    x2 = x * x
    x3 = x2 * x
    x4 = x2 * x2

    y2 = y * y
    y3 = y2 * y
    y4 = y2 * y2

    r2 = x2 + y2
    r = np.sqrt(r2)
    r4 = r2 * r2

    xy = x * y
    x2y2 = x2 * y2

    return {
        2: (y2 - x2, 2.0 * xy, r2),
        3: (y3 - 3.0 * y * x2, 3.0 * x * y2 - x3, r2 * r),
        4: (x4 + y4 - 6.0 * x2y2, 4.0 * xy * (y2 - x2), r4),
        5: (y * (5.0 * x4 - 10.0 * x2y2 + y4), x * (x4 - 10.0 * x2y2 + 5.0 * y4), r4 * r),
    }


def harmonic_sums(TR: np.ndarray, ixcm: float, iycm: float) -> tuple[dict, float, float, int]:
    """Accumulate T_R-weighted harmonic sums about (ixcm, iycm).

    Cells with T_R < TINY are skipped. Returns (sums by order, Σ t,
    Σ t^(4/3), number of retained cells).
    """
    iy, ix = np.nonzero(TR >= TINY)
    t = TR[iy, ix]
    x = ix.astype(float) - ixcm
    y = iy.astype(float) - iycm

    sums = {}
    for n, (re, im, rn) in harmonic_terms(x, y).items():
        sums[n] = HarmonicSums(
            order=n,
            re=float(np.dot(t, re)),
            im=float(np.dot(t, im)),
            wt=float(np.dot(t, rn)),
        )
    return sums, float(t.sum()), float(np.power(t, 4.0 / 3.0).sum()), int(t.size)


def compute_observables(TR: np.ndarray, ixcm: float, iycm: float, dxy: float) -> Observables:
    """Entropy proxy and n = 2..5 harmonics of a reduced-thickness grid.

    ixcm, iycm are the center of mass in grid-index units. A degenerate
    (all-zero) grid yields non-finite radii rather than an exception.
    """
    sums, total, entropy_sum, retained = harmonic_sums(TR, ixcm, iycm)
    area = dxy * dxy

    harmonics = {
        n: Harmonic(
            order=n,
            magnitude=s.magnitude(),
            angle=s.angle(retained > 0),
            radius=s.radius(total, area),
        )
        for n, s in sums.items()
    }
    return Observables(entropy=area * entropy_sum, harmonics=harmonics)
