"""Reduced-thickness event profiles for heavy-ion initial conditions.

Author: Sabin Thapa <sthapa3@kent.edu>

Per-event numerical core of a nucleus-nucleus initial-condition generator:

- nuclear thickness T_A, T_B deposited nucleon-by-nucleon on a fixed grid
- reduced thickness T_R = norm * M_p(T_A, T_B) (generalized mean)
- multiplicity, center of mass and eccentricity harmonics of T_R

Plus the small collaborators needed to drive it (Woods–Saxon / p / d nuclei,
black-disk participants, generalized Gaussian nucleon profile).

All distances are in fm unless stated otherwise.
"""

from .config import EventConfig, CollisionConfig
from .errors import ConfigurationError, SamplingError
from .event import Event
from .grid import GridSpec
from .logging_config import setup_logging
from .means import TINY, generalized_mean, select_generalized_mean
from .nucleon import Nucleon, NucleonCommon, NucleonProfile, NucleonProfileParams, PointwiseThickness
from .nucleus import Nucleus, nucleus_from_name
from .observables import Harmonic, Observables, compute_observables

__version__ = "0.2.0"

__all__ = [
    "CollisionConfig",
    "ConfigurationError",
    "Event",
    "EventConfig",
    "GridSpec",
    "Harmonic",
    "Nucleon",
    "NucleonCommon",
    "NucleonProfile",
    "NucleonProfileParams",
    "PointwiseThickness",
    "Nucleus",
    "Observables",
    "SamplingError",
    "TINY",
    "compute_observables",
    "generalized_mean",
    "nucleus_from_name",
    "select_generalized_mean",
    "setup_logging",
]
