"""Force evaluation utilities."""

from .nbody_gravity import pair_kick, pair_potential, velocity_delta  # noqa: F401
