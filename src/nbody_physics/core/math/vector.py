"""Immutable 3D vector value type.

Every operation returns a new ``Vector3``; nothing is modified in place.
Degenerate inputs follow IEEE-754 semantics and are not guarded against.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

import numpy as np
from numpy.typing import NDArray


ArrayF = NDArray[np.float64]


@dataclass(frozen=True, slots=True)
class Vector3:
    x: float
    y: float
    z: float

    @classmethod
    def from_array(cls, a: ArrayF) -> "Vector3":
        a = np.asarray(a, dtype=np.float64)
        if a.shape != (3,):
            raise ValueError("vector must have shape (3,)")
        return cls(float(a[0]), float(a[1]), float(a[2]))

    def as_array(self) -> ArrayF:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __add__(self, other: "Vector3") -> "Vector3":
        return add(self, other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return sub(self, other)

    def __mul__(self, s: float) -> "Vector3":
        return scale(self, s)

    __rmul__ = __mul__


ZERO = Vector3(0.0, 0.0, 0.0)


def add(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(a.x + b.x, a.y + b.y, a.z + b.z)


def sub(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(a.x - b.x, a.y - b.y, a.z - b.z)


def scale(v: Vector3, s: float) -> Vector3:
    return Vector3(v.x * s, v.y * s, v.z * s)


def magnitude(v: Vector3) -> float:
    """Return the Euclidean norm."""
    return math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)


def distance(a: Vector3, b: Vector3) -> float:
    return magnitude(sub(a, b))


def vsum(vectors: Iterable[Vector3]) -> Vector3:
    """Sum vectors left to right, starting from ``ZERO``.

    Floating-point addition is not associative, so the input order is kept
    to make results reproducible bit for bit.
    """
    total = ZERO
    for v in vectors:
        total = add(total, v)
    return total
