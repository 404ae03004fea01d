"""Newtonian pairwise gravity in units where G = 1."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import numpy as np

from ..math.vector import Vector3, distance, scale, sub, vsum

if TYPE_CHECKING:
    from ..state.body import Body


def pair_kick(body: Body, other: Body, dt: float) -> Vector3:
    """Velocity change of ``body`` due to ``other`` over ``dt``.

    Coincident positions give Inf/NaN components instead of raising.
    """
    dist = distance(body.pos, other.pos)
    mag = float(np.float64(dt) / np.float64(dist * dist * dist))
    return scale(sub(other.pos, body.pos), other.mass * mag)


def velocity_delta(bodies: Sequence[Body], index: int, dt: float) -> Vector3:
    """Summed kick on ``bodies[index]`` from every other body, in order."""
    body = bodies[index]
    with np.errstate(divide="ignore", invalid="ignore"):
        return vsum(
            pair_kick(body, other, dt)
            for j, other in enumerate(bodies)
            if j != index
        )


def pair_potential(body: Body, other: Body) -> float:
    dist = distance(body.pos, other.pos)
    return float(np.float64(body.mass * other.mass) / np.float64(dist))
