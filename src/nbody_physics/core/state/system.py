"""Immutable N-body system state."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

import numpy as np
from numpy.typing import NDArray

from ..diagnostics.bodies import kinetic_energy, potential_energy
from ..forces.nbody_gravity import velocity_delta
from ..math.vector import Vector3, add, scale
from .body import PLANETS, SOLAR_MASS, SUN, Body


ArrayF = NDArray[np.float64]

logger = logging.getLogger(__name__)


def offset_momentum(
    bodies: Sequence[Body], index: int = 0, reference_mass: float | None = None
) -> tuple[Body, ...]:
    """Return bodies with ``bodies[index]`` moving so total momentum is zero.

    Momentum of the other bodies is summed in sequence order and divided by
    ``reference_mass`` (the corrected body's own mass by default).
    """
    if not 0 <= index < len(bodies):
        raise ValueError(f"body index out of range: {index}")
    px = py = pz = 0.0
    for j, b in enumerate(bodies):
        if j == index:
            continue
        px += b.vel.x * b.mass
        py += b.vel.y * b.mass
        pz += b.vel.z * b.mass
    m = bodies[index].mass if reference_mass is None else reference_mass
    vel = Vector3(-px / m, -py / m, -pz / m)
    out = list(bodies)
    out[index] = bodies[index].update(vel=vel)
    return tuple(out)


@dataclass(frozen=True, slots=True)
class NBodySystem:
    bodies: tuple[Body, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "bodies", tuple(self.bodies))

    @classmethod
    def create(cls) -> "NBodySystem":
        """Build the sun and four outer planets in the barycentric frame."""
        bodies = offset_momentum((SUN, *PLANETS), 0, SOLAR_MASS)
        logger.debug("sun velocity corrected to %s", bodies[0].vel)
        return cls(bodies)

    @classmethod
    def from_bodies(cls, bodies: Iterable[Body]) -> "NBodySystem":
        return cls(tuple(bodies))

    def __len__(self) -> int:
        return len(self.bodies)

    def __iter__(self) -> Iterator[Body]:
        return iter(self.bodies)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(b.name for b in self.bodies)

    def body(self, name: str) -> Body:
        for b in self.bodies:
            if b.name == name:
                return b
        raise ValueError(f"unknown body: {name}")

    def advance(self, dt: float) -> "NBodySystem":
        """Return the system one semi-implicit Euler step later.

        Every kick is computed from this snapshot; no body sees another
        body's updated state within the same step.
        """
        updated = []
        for i, b in enumerate(self.bodies):
            vel = add(b.vel, velocity_delta(self.bodies, i, dt))
            pos = add(b.pos, scale(vel, dt))
            updated.append(b.update(vel=vel, pos=pos))
        return NBodySystem(tuple(updated))

    def energy(self) -> float:
        """Return kinetic minus potential energy.

        The potential runs over every ordered pair of distinct bodies, so
        each pair is counted twice and the sum is halved once.
        """
        return kinetic_energy(self.bodies) - potential_energy(self.bodies)

    def to_arrays(self) -> tuple[ArrayF, ArrayF, ArrayF]:
        """Return ``(pos, vel, mass)`` shaped (N, 3), (N, 3), (N,)."""
        n = len(self.bodies)
        pos = np.zeros((n, 3), dtype=np.float64)
        vel = np.zeros((n, 3), dtype=np.float64)
        mass = np.zeros(n, dtype=np.float64)
        for i, b in enumerate(self.bodies):
            pos[i] = b.pos.as_array()
            vel[i] = b.vel.as_array()
            mass[i] = b.mass
        return pos, vel, mass

    def validate(self) -> None:
        """Raise ``ValueError`` on duplicate names or non-finite data.

        Opt-in debug check; ``advance`` and ``energy`` never call it.
        """
        seen: set[str] = set()
        for b in self.bodies:
            if b.name in seen:
                raise ValueError(f"duplicate body name: {b.name}")
            seen.add(b.name)
            if not math.isfinite(b.mass) or b.mass <= 0.0:
                raise ValueError(f"mass of {b.name} must be finite and > 0")
            for label, v in (("pos", b.pos), ("vel", b.vel)):
                if not all(math.isfinite(c) for c in (v.x, v.y, v.z)):
                    raise ValueError(f"{label} of {b.name} must be finite")
