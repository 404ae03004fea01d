"""Point-mass bodies and the outer planets initial conditions.

Units are AU, years and solar masses scaled so that G = 1.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from ..math.vector import Vector3


PI = math.pi
SOLAR_MASS = 4.0 * PI * PI
DAYS_PER_YEAR = 365.24


@dataclass(frozen=True, slots=True)
class Body:
    name: str
    mass: float
    pos: Vector3
    vel: Vector3

    def update(
        self,
        *,
        vel: Vector3 | None = None,
        pos: Vector3 | None = None,
    ) -> "Body":
        """Return a copy with ``vel`` and/or ``pos`` replaced."""
        changes: dict[str, Vector3] = {}
        if vel is not None:
            changes["vel"] = vel
        if pos is not None:
            changes["pos"] = pos
        return replace(self, **changes)


SUN = Body(
    name="sun",
    mass=SOLAR_MASS,
    pos=Vector3(0.0, 0.0, 0.0),
    vel=Vector3(0.0, 0.0, 0.0),
)

JUPITER = Body(
    name="jupiter",
    mass=9.54791938424326609e-04 * SOLAR_MASS,
    pos=Vector3(
        4.84143144246472090e00,
        -1.16032004402742839e00,
        -1.03622044471123109e-01,
    ),
    vel=Vector3(
        1.66007664274403694e-03 * DAYS_PER_YEAR,
        7.69901118419740425e-03 * DAYS_PER_YEAR,
        -6.90460016972063023e-05 * DAYS_PER_YEAR,
    ),
)

SATURN = Body(
    name="saturn",
    mass=2.85885980666130812e-04 * SOLAR_MASS,
    pos=Vector3(
        8.34336671824457987e00,
        4.12479856412430479e00,
        -4.03523417114321381e-01,
    ),
    vel=Vector3(
        -2.76742510726862411e-03 * DAYS_PER_YEAR,
        4.99852801234917238e-03 * DAYS_PER_YEAR,
        2.30417297573763929e-05 * DAYS_PER_YEAR,
    ),
)

URANUS = Body(
    name="uranus",
    mass=4.36624404335156298e-05 * SOLAR_MASS,
    pos=Vector3(
        1.28943695621391310e01,
        -1.51111514016986312e01,
        -2.23307578892655734e-01,
    ),
    vel=Vector3(
        2.96460137564761618e-03 * DAYS_PER_YEAR,
        2.37847173959480950e-03 * DAYS_PER_YEAR,
        -2.96589568540237556e-05 * DAYS_PER_YEAR,
    ),
)

NEPTUNE = Body(
    name="neptune",
    mass=5.15138902046611451e-05 * SOLAR_MASS,
    pos=Vector3(
        1.53796971148509165e01,
        -2.59193146099879641e01,
        1.79258772950371181e-01,
    ),
    vel=Vector3(
        2.68067772490389322e-03 * DAYS_PER_YEAR,
        1.62824170038242295e-03 * DAYS_PER_YEAR,
        -9.51592254519715870e-05 * DAYS_PER_YEAR,
    ),
)

PLANETS: tuple[Body, ...] = (JUPITER, SATURN, URANUS, NEPTUNE)
