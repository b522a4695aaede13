"""thickness_event/event.py
Author: Sabin Thapa <sthapa3@kent.edu>

One collision event on a fixed transverse grid:

    T_A, T_B  nuclear thickness, summed over participant nucleons
    T_R       reduced thickness, norm * M_p(T_A, T_B)

plus participant number, multiplicity, center of mass and shape
observables of T_R.

An Event owns its grids and overwrites them on every `compute()` call, so one
instance can be reused for many events. It is not thread safe: concurrent
events need their own instances.
"""

from __future__ import annotations

import logging
import numpy as np

from .config import EventConfig
from .grid import GridSpec
from .means import describe_mean, select_generalized_mean
from .nucleon import NucleonCommon
from .nucleus import Nucleus
from .observables import Observables, compute_observables

logger = logging.getLogger(__name__)


class Event:
    """Reduced-thickness event built from two nuclei."""

    def __init__(self, config: EventConfig):
        self.config = config
        self.norm = float(config.normalization)
        self.grid = GridSpec.from_extent(config.grid_step, config.grid_max)
        self.dxy = self.grid.dxy
        self.nsteps = self.grid.nsteps
        self.xymax = self.grid.xymax

        self.TA = self.grid.allocate()
        self.TB = self.grid.allocate()
        self.TR = self.grid.allocate()
        # Reserved for a deterministic-thickness mode; never written here.
        self.TA_det = self.grid.allocate()
        self.TB_det = self.grid.allocate()

        # Chosen once; applied to whole grids per event.
        self._gen_mean = select_generalized_mean(config.reduced_thickness)

        # cell-center coordinates and index weights, shared by every event
        self._centers = self.grid.cell_centers()
        self._index = np.arange(self.nsteps, dtype=float)

        self.npart = 0
        self.multiplicity = 0.0
        self.ixcm = 0.0
        self.iycm = 0.0
        self._observables: Observables | None = None

        if config.ncoll:
            logger.warning("ncoll accumulation is not implemented; the flag is ignored")
        logger.debug(
            "Event grid: nsteps=%d dxy=%g xymax=%g (requested %g), mean=%s",
            self.nsteps, self.dxy, self.xymax, config.grid_max,
            describe_mean(config.reduced_thickness),
        )

    # ---- per-event pipeline ----

    def compute(self, nucleusA: Nucleus, nucleusB: Nucleus, nucleon_common: NucleonCommon) -> "Event":
        """Fill T_A, T_B, T_R and the observables for one pair of nuclei."""
        # compute_nuclear_thickness() increments npart
        self.npart = 0
        self.compute_nuclear_thickness(nucleusA, nucleon_common, self.TA)
        self.compute_nuclear_thickness(nucleusB, nucleon_common, self.TB)
        self.compute_reduced_thickness()
        self.compute_observables()
        logger.debug(
            "event: npart=%d mult=%.4g cm=(%.3f, %.3f)",
            self.npart, self.multiplicity, self.ixcm, self.iycm,
        )
        return self

    def compute_nuclear_thickness(self, nucleus: Nucleus, nucleon_common: NucleonCommon, TX: np.ndarray) -> None:
        """Deposit each participant's profile onto TX (zeroed first).

        nucleon_common.thickness is called once per nucleon with broadcasting
        coordinate arrays; wrap scalar-only profiles in PointwiseThickness.

        Each nucleon only touches the subgrid inside its boundary box, clipped
        to the grid, rather than every cell of the grid. The tests check this
        against the full-grid evaluation.
        """
        TX.fill(0.0)
        centers = self._centers

        for nucleon in nucleus:
            if not nucleon.is_participant:
                continue

            self.npart += 1

            xmin, xmax, ymin, ymax = nucleon_common.boundary(nucleon)
            ixmin, ixmax = self.grid.index_range(xmin, xmax)
            iymin, iymax = self.grid.index_range(ymin, ymax)

            TX[iymin:iymax + 1, ixmin:ixmax + 1] += nucleon_common.thickness(
                nucleon,
                centers[None, ixmin:ixmax + 1],
                centers[iymin:iymax + 1, None],
            )

    def compute_reduced_thickness(self) -> None:
        """T_R = norm * M_p(T_A, T_B); multiplicity and center of mass."""
        np.multiply(self.norm, self._gen_mean(self.TA, self.TB), out=self.TR)

        total = self.TR.sum()
        # Center of mass in grid indices; dxy cancels in the ratio.
        ixsum = self.TR.sum(axis=0) @ self._index
        iysum = self.TR.sum(axis=1) @ self._index

        self.multiplicity = float(self.grid.area * total)
        with np.errstate(divide="ignore", invalid="ignore"):
            self.ixcm = float(np.float64(ixsum) / total)
            self.iycm = float(np.float64(iysum) / total)

    def compute_observables(self) -> Observables:
        self._observables = compute_observables(self.TR, self.ixcm, self.iycm, self.dxy)
        return self._observables

    # ---- results ----

    @property
    def observables(self) -> Observables:
        if self._observables is None:
            raise RuntimeError("Event.compute() has not been called")
        return self._observables

    @property
    def eccentricity(self) -> np.ndarray:
        """Flat observable vector, see Observables.legacy_vector()."""
        return self.observables.legacy_vector()

    @property
    def reduced_thickness(self) -> np.ndarray:
        return self.TR

    def center_of_mass(self) -> tuple[float, float]:
        """Center of mass in physical coordinates [fm]."""
        return (
            (self.ixcm + 0.5) * self.dxy - self.xymax,
            (self.iycm + 0.5) * self.dxy - self.xymax,
        )
