"""thickness_event/grid.py
Author: Sabin Thapa <sthapa3@kent.edu>

Square transverse grid shared by all thickness fields of an event.

Grid parameters are determined like so:
  1. the step size dxy is taken from the configuration,
  2. nsteps = ceil(2*max/dxy) from the configured max,
  3. the actual max is xymax = nsteps*dxy/2.
If dxy does not evenly divide the configured max, the grid is marginally
larger than requested (by less than one step).

Arrays are indexed [iy, ix]; cell (iy, ix) has its center at
x = (ix + 1/2) dxy - xymax, y = (iy + 1/2) dxy - xymax.
"""

from __future__ import annotations

import math
import numpy as np
from dataclasses import dataclass

from .errors import ConfigurationError


@dataclass(frozen=True)
class GridSpec:
    dxy: float
    nsteps: int

    def __post_init__(self):
        if not self.dxy > 0.0:
            raise ConfigurationError(f"grid step must be positive, got {self.dxy!r}")
        if self.nsteps <= 0:
            raise ConfigurationError(f"grid must have at least one cell, got {self.nsteps!r}")

    @classmethod
    def from_extent(cls, grid_step: float, grid_max: float) -> "GridSpec":
        if not grid_step > 0.0:
            raise ConfigurationError(f"grid step must be positive, got {grid_step!r}")
        if not grid_max > 0.0:
            raise ConfigurationError(f"grid max must be positive, got {grid_max!r}")
        return cls(dxy=float(grid_step), nsteps=int(math.ceil(2.0 * grid_max / grid_step)))

    @property
    def xymax(self) -> float:
        return 0.5 * self.nsteps * self.dxy

    @property
    def shape(self) -> tuple[int, int]:
        return (self.nsteps, self.nsteps)

    @property
    def area(self) -> float:
        """Cell area dxy^2."""
        return self.dxy * self.dxy

    def allocate(self) -> np.ndarray:
        return np.zeros(self.shape, dtype=float)

    def cell_centers(self) -> np.ndarray:
        """Physical cell-center coordinates, identical along x and y."""
        return (np.arange(self.nsteps, dtype=float) + 0.5) * self.dxy - self.xymax

    def index(self, coord: float) -> int:
        """Cell index containing a physical coordinate, clipped to [0, nsteps-1]."""
        f = (coord + self.xymax) / self.dxy
        # clip before int(): infinite (unbounded) corners are allowed, NaN maps to 0
        if not f > 0.0:
            return 0
        return int(min(f, self.nsteps - 1))

    def index_range(self, lo: float, hi: float) -> tuple[int, int]:
        """Inclusive, clipped index range covering [lo, hi]."""
        return self.index(lo), self.index(hi)

    def extent(self) -> tuple[float, float, float, float]:
        """(xmin, xmax, ymin, ymax) of the grid edges, for imshow."""
        return (-self.xymax, self.xymax, -self.xymax, self.xymax)
