"""thickness_event/errors.py
Author: Sabin Thapa <sthapa3@kent.edu>

Exceptions raised by the package.

Numerical degeneracies (an event with zero total reduced thickness) are not
errors: they show up as non-finite center of mass / harmonics.
"""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Invalid configuration; raised at construction, never mid-event."""


class SamplingError(RuntimeError):
    """The collider could not produce an event with participants."""
