"""State namespace."""

from .body import (  # noqa: F401
    DAYS_PER_YEAR,
    JUPITER,
    NEPTUNE,
    PLANETS,
    SATURN,
    SOLAR_MASS,
    SUN,
    URANUS,
    Body,
)
from .system import NBodySystem, offset_momentum  # noqa: F401
