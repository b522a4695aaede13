"""thickness_event/nucleus.py
Author: Sabin Thapa <sthapa3@kent.edu>

Nuclei as ordered collections of nucleons in the transverse plane:
- spherical Woods–Saxon nuclei (rejection-sampled radii, random orientation)
- proton: a single nucleon at the origin
- deuteron: Hulthén pn separation with random 3D orientation

Sampling is deterministic given the numpy Generator passed in.
"""

from __future__ import annotations

import numpy as np
from dataclasses import dataclass
from collections.abc import Iterable, Iterator, Sequence
from functools import lru_cache

from .nucleon import Nucleon


class Nucleus(Sequence):
    """Ordered, sized collection of nucleons."""

    def __init__(self, nucleons: Iterable[Nucleon] = ()):
        self._nucleons = list(nucleons)

    @classmethod
    def from_positions(cls, xy) -> "Nucleus":
        xy = np.asarray(xy, dtype=float).reshape(-1, 2)
        return cls(Nucleon(float(x), float(y)) for x, y in xy)

    def __getitem__(self, i):
        return self._nucleons[i]

    def __len__(self) -> int:
        return len(self._nucleons)

    def __iter__(self) -> Iterator[Nucleon]:
        return iter(self._nucleons)

    def __repr__(self) -> str:
        return f"Nucleus(A={len(self)}, npart={self.npart})"

    def participants(self) -> list[Nucleon]:
        return [n for n in self._nucleons if n.participant]

    @property
    def npart(self) -> int:
        return sum(1 for n in self._nucleons if n.participant)

    def positions(self) -> np.ndarray:
        """(A, 2) array of transverse positions."""
        return np.array([(n.x, n.y) for n in self._nucleons], dtype=float).reshape(-1, 2)

    def shift(self, dx: float, dy: float = 0.0) -> "Nucleus":
        for n in self._nucleons:
            n.x += dx
            n.y += dy
        return self


# -------------------------
# Woods–Saxon nuclei
# -------------------------

@dataclass(frozen=True)
class WoodsSaxonParams:
    """Spherical Woods–Saxon parameters.

    rho(r) = rho0 / (1 + exp((r - R)/a))
    """
    A: int
    R: float
    a: float
    rho0: float = 0.17


def default_radius(A: int) -> float:
    """Empirical radius R = 1.12 A^{1/3} - 0.86 A^{-1/3} [fm]."""
    A = float(A)
    return 1.12 * A ** (1.0 / 3.0) - 0.86 * A ** (-1.0 / 3.0)


# (A, surface diffuseness a [fm])
_WOODS_SAXON_SPECIES = {
    "cu": (63, 0.596),
    "au": (197, 0.535),
    "pb": (208, 0.549),
}


def woods_saxon_params(name: str) -> WoodsSaxonParams:
    key = name.strip().lower()
    if key not in _WOODS_SAXON_SPECIES:
        raise ValueError(f"Unknown nucleus '{name}'. Add it to _WOODS_SAXON_SPECIES.")
    A, a = _WOODS_SAXON_SPECIES[key]
    return WoodsSaxonParams(A=A, R=default_radius(A), a=a)


def _sample_ws_radii(rng: np.random.Generator, n: int, R: float, a: float, rmax: float) -> np.ndarray:
    """Rejection sample n radii with PDF ∝ r^2 / (1 + exp((r-R)/a))."""
    out = np.empty(0, dtype=float)
    while out.size < n:
        # acceptance is only a few percent for heavy nuclei
        m = 50 * (n - out.size)
        r = rng.uniform(0.0, rmax, size=m)
        u = rng.random(m)
        f = 1.0 / (1.0 + np.exp((r - R) / a))
        out = np.concatenate([out, r[u < (r / rmax) ** 2 * f]])
    return out[:n]


def sample_woods_saxon(
    params: WoodsSaxonParams,
    *,
    rng: np.random.Generator,
    rmax: float = 20.0,
) -> Nucleus:
    """Sample A nucleons of a spherical Woods–Saxon nucleus."""
    A = int(params.A)
    r = _sample_ws_radii(rng, A, float(params.R), float(params.a), rmax)
    cos_th = rng.uniform(-1.0, 1.0, size=A)
    phi = rng.uniform(0.0, 2.0 * np.pi, size=A)
    sin_th = np.sqrt(1.0 - cos_th * cos_th)

    x = r * sin_th * np.cos(phi)
    y = r * sin_th * np.sin(phi)
    return Nucleus.from_positions(np.stack([x, y], axis=1))


# -------------------------
# Light projectiles
# -------------------------

def proton() -> Nucleus:
    return Nucleus([Nucleon(0.0, 0.0)])


@dataclass(frozen=True)
class HulthenParams:
    """Hulthén parameters (fm^-1)."""
    a: float = 0.228
    b: float = 1.18


class HulthenSampler:
    """Sample the pn separation in a deuteron, ψ(r) ∝ (e^{-ar} - e^{-br})/r.

    The radial PDF is ∝ (e^{-ar} - e^{-br})^2; it is tabulated once as a CDF
    and inverted by interpolation.
    """

    def __init__(self, params: HulthenParams = HulthenParams(), *, rmax: float = 30.0, Nr: int = 20000):
        self.p = params
        r = np.linspace(1e-5, rmax, Nr)
        u = np.exp(-self.p.a * r) - np.exp(-self.p.b * r)
        cdf = np.cumsum(u * u)
        cdf /= cdf[-1]
        self._r = r
        self._cdf = cdf

    def sample(self, *, rng: np.random.Generator) -> Nucleus:
        """Proton at +(dx,dy)/2 and neutron at -(dx,dy)/2 in the deuteron CM frame."""
        r = np.interp(rng.random(), self._cdf, self._r)
        cos_th = rng.uniform(-1.0, 1.0)
        phi = rng.uniform(0.0, 2.0 * np.pi)
        rT = r * np.sqrt(1.0 - cos_th * cos_th)
        dx = 0.5 * rT * np.cos(phi)
        dy = 0.5 * rT * np.sin(phi)
        return Nucleus([Nucleon(float(dx), float(dy)), Nucleon(float(-dx), float(-dy))])


@lru_cache(maxsize=1)
def _hulthen_sampler() -> HulthenSampler:
    return HulthenSampler()


def deuteron(*, rng: np.random.Generator) -> Nucleus:
    return _hulthen_sampler().sample(rng=rng)


def nucleus_from_name(name: str, *, rng: np.random.Generator) -> Nucleus:
    """Sample a fresh nucleus of the named species ("p", "d", "Cu", "Au", "Pb")."""
    key = name.strip().lower()
    if key == "p":
        return proton()
    if key == "d":
        return deuteron(rng=rng)
    return sample_woods_saxon(woods_saxon_params(name), rng=rng)
