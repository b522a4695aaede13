"""thickness_event/means.py
Author: Sabin Thapa <sthapa3@kent.edu>

Generalized (power) mean of two nonnegative thicknesses,

    M_p(a, b) = (1/2 (a^p + b^p))^(1/p),

which interpolates between min (p -> -inf), harmonic (p = -1),
geometric (p = 0), arithmetic (p = 1) and max (p -> +inf).

All functions accept scalars or numpy arrays. The variant is chosen once via
`select_generalized_mean(p)`; the returned callable is then applied to whole
grids without re-dispatching on p.
"""

from __future__ import annotations

import numpy as np
from typing import Callable

TINY = 1e-12

MeanFunction = Callable[[np.ndarray, np.ndarray], np.ndarray]


def positive_pmean(p: float, a, b):
    """Generalized mean for p > 0."""
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    out = np.power(0.5 * (np.power(a, p) + np.power(b, p)), 1.0 / p)
    return out[()]


def negative_pmean(p: float, a, b):
    """Generalized mean for p < 0.

    Vanishes wherever either input is below TINY, instead of running into
    0^p = inf.
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        out = np.power(0.5 * (np.power(a, p) + np.power(b, p)), 1.0 / p)
    out = np.where((a < TINY) | (b < TINY), 0.0, out)
    return out[()]


def geometric_mean(a, b):
    """Generalized mean for p == 0."""
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    return np.sqrt(a * b)[()]


def select_generalized_mean(p: float) -> MeanFunction:
    """Return M_p as a binary function of (a, b)."""
    p = float(p)
    if abs(p) < TINY:
        return geometric_mean
    if p > 0.0:
        return lambda a, b: positive_pmean(p, a, b)
    return lambda a, b: negative_pmean(p, a, b)


def generalized_mean(p: float, a, b):
    """One-shot M_p(a, b)."""
    return select_generalized_mean(p)(a, b)


def describe_mean(p: float) -> str:
    if abs(p) < TINY:
        return "geometric"
    return f"{'positive' if p > 0 else 'negative'} power mean (p={p:g})"
