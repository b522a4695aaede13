"""thickness_event/nucleon.py
Author: Sabin Thapa <sthapa3@kent.edu>

Nucleons and their transverse thickness profile.

The profile is a generalized Gaussian
    T(b) = w * n/(2π r^2 Γ(2/n)) exp[-(b/r)^n],
normalized so ∫ d^2b T = w, where w is the nucleon's fluctuation weight.
n = 2 is an ordinary Gaussian of width r/sqrt(2).
"""

from __future__ import annotations

import numpy as np
from dataclasses import dataclass
from scipy.special import gamma
from typing import Protocol


@dataclass
class Nucleon:
    """Transverse position, participant flag and fluctuation weight.

    Read-only for the event; only the collider marks participants.
    """
    x: float
    y: float
    participant: bool = False
    weight: float = 1.0

    @property
    def is_participant(self) -> bool:
        return self.participant


@dataclass(frozen=True)
class NucleonProfileParams:
    rp: float = 0.5  # fm
    n: float = 2.0
    truncate: float = 5.0  # in units of rp


class NucleonProfile:
    """Thickness of a single nucleon and the box it is confined to.

    Stateless apart from its parameters; shared by all nucleons of an event.
    """

    def __init__(self, params: NucleonProfileParams = NucleonProfileParams(), *, max_impact: float = 0.0):
        self.p = params
        self._norm = self.p.n / (2.0 * np.pi * self.p.rp ** 2 * gamma(2.0 / self.p.n))
        self.radius = self.p.truncate * self.p.rp
        self.max_impact = float(max_impact)

    def thickness(self, nucleon: Nucleon, x, y):
        """T at (x, y) [fm^-2]; x and y broadcast against each other."""
        dx = np.asarray(x, dtype=float) - nucleon.x
        dy = np.asarray(y, dtype=float) - nucleon.y
        b = np.sqrt(dx * dx + dy * dy)
        return nucleon.weight * self._norm * np.exp(-(b / self.p.rp) ** self.p.n)

    def boundary(self, nucleon: Nucleon) -> tuple[float, float, float, float]:
        """(xmin, xmax, ymin, ymax) outside which the thickness is negligible."""
        r = self.radius
        return (nucleon.x - r, nucleon.x + r, nucleon.y - r, nucleon.y + r)


class NucleonCommon(Protocol):
    """What an Event needs from a nucleon profile.

    thickness(nucleon, x, y) must accept numpy arrays for x and y and
    broadcast them: the event evaluates a whole subgrid at once with x of shape
    (1, nx) and y of shape (ny, 1), expecting a nonnegative (ny, nx) result.
    boundary(nucleon) returns (xmin, xmax, ymin, ymax); bounds may be
    infinite, the event clips them to the grid.
    """

    def thickness(self, nucleon: Nucleon, x, y): ...

    def boundary(self, nucleon: Nucleon) -> tuple[float, float, float, float]: ...


class PointwiseThickness:
    """Adapt a profile whose thickness() only takes scalar x, y.

    Evaluation goes through np.vectorize, one call per cell, so this is for
    prototyping profiles rather than production runs.
    """

    def __init__(self, common):
        self.common = common
        self._thickness = np.vectorize(common.thickness, excluded={0}, otypes=[float])

    def thickness(self, nucleon: Nucleon, x, y):
        return self._thickness(nucleon, x, y)

    def boundary(self, nucleon: Nucleon) -> tuple[float, float, float, float]:
        return self.common.boundary(nucleon)
