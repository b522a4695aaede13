"""thickness_event/collider.py
Author: Sabin Thapa <sthapa3@kent.edu>

Minimal MC Glauber driver for the event core.

This module provides:
- impact-parameter sampling, p(b) ∝ b on [bmin, bmax]
- black-disk participant criterion using σ_NN
- Gamma-distributed participant weights (mean 1, variance 1/k)
- a batch loop that reuses one Event and collects event-level observables

The nuclear model is deliberately simple; it only has to produce realistic
enough inputs for the thickness / reduced-thickness machinery.
"""

from __future__ import annotations

import logging
import numpy as np
from typing import Any, Dict

from .config import CollisionConfig, EventConfig
from .errors import SamplingError
from .event import Event
from .nucleon import NucleonProfile, NucleonProfileParams
from .nucleus import Nucleus, nucleus_from_name
from .physics import black_disk_distance, sigma_nn_mb

logger = logging.getLogger(__name__)


def mark_participants(nucleusA: Nucleus, nucleusB: Nucleus, d_max: float) -> int:
    """Flag nucleons with at least one partner within d_max; return Ncoll."""
    XY_a = nucleusA.positions()
    XY_b = nucleusB.positions()

    # Pairwise distance check (broadcast)
    dx = XY_a[:, None, 0] - XY_b[None, :, 0]
    dy = XY_a[:, None, 1] - XY_b[None, :, 1]
    coll = dx * dx + dy * dy < d_max * d_max

    for nucleon, hit in zip(nucleusA, coll.any(axis=1)):
        nucleon.participant = bool(hit)
    for nucleon, hit in zip(nucleusB, coll.any(axis=0)):
        nucleon.participant = bool(hit)
    return int(coll.sum())


def _gamma_weights(rng: np.random.Generator, n: int, k: float) -> np.ndarray:
    # shape=k, scale=1/k -> mean=1
    k = float(k)
    return rng.gamma(shape=k, scale=1.0 / k, size=n)


class Collider:
    """Samples nucleus pairs with participants for a given collision system."""

    def __init__(self, config: CollisionConfig, *, max_attempts: int = 10000):
        self.config = config
        self.max_attempts = int(max_attempts)

        sigma_mb = config.sigmaNN_mb
        if sigma_mb is None:
            sigma_mb = sigma_nn_mb(config.sNN_GeV)
        self.sigmaNN_mb = float(sigma_mb)
        self.d_max = black_disk_distance(self.sigmaNN_mb)

        self.nucleon_common = NucleonProfile(
            NucleonProfileParams(rp=config.width, n=config.shape, truncate=config.truncate),
            max_impact=self.d_max,
        )

    def sample_impact_parameter(self, rng: np.random.Generator) -> float:
        bmin, bmax = self.config.bmin, self.config.bmax
        return float(np.sqrt(bmin * bmin + (bmax * bmax - bmin * bmin) * rng.random()))

    def sample(self, rng: np.random.Generator) -> tuple[Nucleus, Nucleus, float, int]:
        """Return (A, B, b, Ncoll) for an event with at least one collision."""
        cfg = self.config
        for attempt in range(1, self.max_attempts + 1):
            b = self.sample_impact_parameter(rng)
            # projectile at +b/2, target at -b/2 along x
            A = nucleus_from_name(cfg.projectile, rng=rng).shift(+0.5 * b)
            B = nucleus_from_name(cfg.target, rng=rng).shift(-0.5 * b)

            ncoll = mark_participants(A, B, self.d_max)
            if ncoll == 0:
                continue

            if cfg.fluctuation_k > 0.0:
                for nuc in (A, B):
                    parts = nuc.participants()
                    for nucleon, w in zip(parts, _gamma_weights(rng, len(parts), cfg.fluctuation_k)):
                        nucleon.weight = float(w)

            if attempt > 1:
                logger.debug("sampled collision after %d attempts (b=%.3f fm)", attempt, b)
            return A, B, b, ncoll

        raise SamplingError(
            f"no collision in {self.max_attempts} attempts for "
            f"{cfg.projectile}+{cfg.target}, b in [{cfg.bmin}, {cfg.bmax}] fm"
        )


def run_events(
    event_config: EventConfig,
    collision_config: CollisionConfig,
    *,
    n_events: int = 1000,
    seed: int = 123,
) -> Dict[str, Any]:
    """Generate events and return event-level observables.

    Returns dict with arrays:
      b, npart, ncoll, multiplicity, entropy   shape (n_events,)
      ecc, psi, rn                             shape (n_events, 3), orders 2..4
    """
    rng = np.random.default_rng(int(seed))
    collider = Collider(collision_config)
    event = Event(event_config)

    b = np.zeros(n_events, dtype=float)
    npart = np.zeros(n_events, dtype=int)
    ncoll = np.zeros(n_events, dtype=int)
    mult = np.zeros(n_events, dtype=float)
    entropy = np.zeros(n_events, dtype=float)
    ecc = np.zeros((n_events, 3), dtype=float)
    psi = np.zeros((n_events, 3), dtype=float)
    rn = np.zeros((n_events, 3), dtype=float)

    logger.info(
        "Generating %d %s+%s events at sqrt(sNN)=%g GeV (sigmaNN=%g mb)",
        n_events, collision_config.projectile, collision_config.target,
        collision_config.sNN_GeV, collider.sigmaNN_mb,
    )

    for ievt in range(n_events):
        A, B, b[ievt], ncoll[ievt] = collider.sample(rng)
        event.compute(A, B, collider.nucleon_common)

        obs = event.observables
        npart[ievt] = event.npart
        mult[ievt] = event.multiplicity
        entropy[ievt] = obs.entropy
        for j, n in enumerate((2, 3, 4)):
            ecc[ievt, j] = obs[n].magnitude
            psi[ievt, j] = obs[n].angle
            rn[ievt, j] = obs[n].radius

    return {
        "b": b,
        "npart": npart,
        "ncoll": ncoll,
        "multiplicity": mult,
        "entropy": entropy,
        "ecc": ecc,
        "psi": psi,
        "rn": rn,
        "cfg": (event_config, collision_config),
    }
