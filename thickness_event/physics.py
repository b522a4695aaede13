"""thickness_event/physics.py
Author: Sabin Thapa <sthapa3@kent.edu>

Unit conversions and the nucleon-nucleon cross section entering the
black-disk participant criterion.

Conventions:
- length: fm
- σ_NN inelastic: mb (input) and fm^2 (internal)
"""

from __future__ import annotations

import numpy as np

MB_TO_FM2 = 0.1  # 1 mb = 0.1 fm^2

# σ_NN^inel(√s) anchors [GeV, mb]: RHIC energies, then LHC
SIGMA_NN_ANCHORS = np.array([
    [19.6, 32.0],
    [62.4, 36.0],
    [200.0, 42.0],
    [2760.0, 62.0],
    [5020.0, 67.6],
    [8160.0, 71.0],
])


def mb_to_fm2(sigma_mb: float) -> float:
    """Convert millibarn to fm^2."""
    return MB_TO_FM2 * float(sigma_mb)


def sigma_nn_mb(sNN_GeV: float, anchors: np.ndarray = SIGMA_NN_ANCHORS) -> float:
    """Inelastic σ_NN [mb], linear in log √s between anchors.

    Energies outside the anchors are refused rather than extrapolated; pass
    sigmaNN_mb explicitly for those.
    """
    sqrt_s, sigma = anchors[:, 0], anchors[:, 1]
    if not sqrt_s[0] <= sNN_GeV <= sqrt_s[-1]:
        raise ValueError(
            f"sNN={sNN_GeV} GeV outside the sigma_NN anchors [{sqrt_s[0]}, {sqrt_s[-1]}] GeV; "
            "set sigmaNN_mb explicitly"
        )
    return float(np.interp(np.log(sNN_GeV), np.log(sqrt_s), sigma))


def black_disk_distance(sigma_mb: float) -> float:
    """Maximum transverse nucleon-nucleon distance for a collision, sqrt(σ/π) [fm]."""
    return float(np.sqrt(mb_to_fm2(sigma_mb) / np.pi))
