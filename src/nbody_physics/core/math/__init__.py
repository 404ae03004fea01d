"""Math utilities namespace."""

from .vector import (  # noqa: F401
    ZERO,
    Vector3,
    add,
    distance,
    magnitude,
    scale,
    sub,
    vsum,
)
