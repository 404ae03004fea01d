from __future__ import annotations

import math

import numpy as np
import pytest

from nbody_physics.core.math import (
    ZERO,
    Vector3,
    add,
    distance,
    magnitude,
    scale,
    sub,
    vsum,
)


A = Vector3(1.5, -2.0, 0.25)
B = Vector3(-0.75, 3.0, 4.0)
C = Vector3(1e-3, 7.0, -5.5)


def test_componentwise_ops() -> None:
    assert add(A, B) == Vector3(0.75, 1.0, 4.25)
    assert sub(A, B) == Vector3(2.25, -5.0, -3.75)
    assert scale(A, 2.0) == Vector3(3.0, -4.0, 0.5)
    assert A + B == add(A, B)
    assert A - B == sub(A, B)
    assert A * 2.0 == 2.0 * A == scale(A, 2.0)


def test_algebra_laws() -> None:
    for a, b in [(A, B), (B, C), (A, C)]:
        assert add(a, b) == add(b, a)
        back = sub(add(a, b), b)
        assert np.allclose(back.as_array(), a.as_array(), atol=1e-12)
        assert distance(a, b) == distance(b, a)
    assert magnitude(ZERO) == 0.0


def test_magnitude_and_distance() -> None:
    assert magnitude(Vector3(3.0, 4.0, 12.0)) == 13.0
    assert distance(Vector3(1.0, 1.0, 1.0), Vector3(4.0, 5.0, 1.0)) == 5.0


def test_vsum_is_left_fold_in_order() -> None:
    vs = [A, B, C]
    expected = add(add(add(ZERO, A), B), C)
    assert vsum(vs) == expected
    assert vsum(iter(vs)) == expected
    assert vsum([]) == ZERO


def test_vector_is_immutable() -> None:
    with pytest.raises(AttributeError):
        A.x = 0.0  # type: ignore[misc]


def test_array_interop() -> None:
    arr = A.as_array()
    assert arr.dtype == np.float64
    assert np.array_equal(arr, np.array([1.5, -2.0, 0.25]))
    assert Vector3.from_array(arr) == A
    with pytest.raises(ValueError, match="shape"):
        Vector3.from_array(np.zeros(2))


def test_nan_propagates_without_error() -> None:
    v = Vector3(math.nan, 0.0, 0.0)
    assert math.isnan(magnitude(add(v, A)))
