"""Conserved-quantity diagnostics over a sequence of bodies.

Everything is reduced in sequence order so results match
``NBodySystem.energy`` bit for bit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Sequence

import numpy as np

from ..forces.nbody_gravity import pair_potential
from ..math.vector import Vector3, scale, vsum

if TYPE_CHECKING:
    from ..state.body import Body


def total_mass(bodies: Iterable[Body]) -> float:
    total = 0.0
    for b in bodies:
        total += b.mass
    return total


def linear_momentum(bodies: Iterable[Body]) -> Vector3:
    return vsum(scale(b.vel, b.mass) for b in bodies)


def center_of_mass(bodies: Sequence[Body]) -> Vector3:
    if len(bodies) == 0:
        raise ValueError("cannot compute center of mass for empty body set")
    m = total_mass(bodies)
    if m == 0.0:
        raise ValueError("cannot compute center of mass with zero total mass")
    return scale(vsum(scale(b.pos, b.mass) for b in bodies), 1.0 / m)


def kinetic_energy(bodies: Iterable[Body]) -> float:
    """Sum of ``0.5 m |v|^2``, squaring components rather than the norm."""
    kinetic = 0.0
    for b in bodies:
        v = b.vel
        kinetic += 0.5 * b.mass * (v.x * v.x + v.y * v.y + v.z * v.z)
    return kinetic


def potential_energy(bodies: Sequence[Body]) -> float:
    """Gravitational binding energy, returned as a positive number.

    Every ordered pair of distinct bodies is visited, so each pair appears
    twice and the sum is halved once. Distinct means a different index.
    """
    potential = 0.0
    with np.errstate(divide="ignore", invalid="ignore"):
        for i, b1 in enumerate(bodies):
            for j, b2 in enumerate(bodies):
                if i != j:
                    potential += pair_potential(b1, b2)
    return 0.5 * potential


def total_energy(bodies: Sequence[Body]) -> float:
    return kinetic_energy(bodies) - potential_energy(bodies)
