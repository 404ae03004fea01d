from __future__ import annotations

import numpy as np
import pytest

from nbody_physics.core.run import run
from nbody_physics.core.state import NBodySystem


def test_run_matches_manual_loop() -> None:
    system = NBodySystem.create()
    manual = system
    for _ in range(20):
        manual = manual.advance(0.01)
    result = run(system, 0.01, 20)
    assert result.final_system == manual
    assert result.time is None and result.energy is None


def test_run_sampling_shapes() -> None:
    calls: list[int] = []
    result = run(
        NBodySystem.create(),
        dt=0.01,
        steps=10,
        sample_every=5,
        callback=lambda step, _: calls.append(step),
    )
    assert calls == list(range(1, 11))
    assert np.allclose(result.time, [0.0, 0.05, 0.1])
    assert result.pos.shape == (3, 5, 3)
    assert result.vel.shape == (3, 5, 3)
    assert result.energy.shape == (3,)
    assert result.energy[-1] == result.final_system.energy()
    expected = np.array(
        [-0.1690751638285245, -0.16907410488299285, -0.16907302171470004]
    )
    assert np.allclose(result.energy, expected, rtol=1e-9, atol=0.0)


def test_run_zero_steps() -> None:
    system = NBodySystem.create()
    assert run(system, 0.01, 0).final_system is system


def test_run_rejects_bad_arguments() -> None:
    system = NBodySystem.create()
    with pytest.raises(ValueError, match="sample_every must be > 0"):
        run(system, 0.01, 5, sample_every=0)
    with pytest.raises(ValueError, match="steps must be >= 0"):
        run(system, 0.01, -1)
    with pytest.raises(ValueError, match="dt must be finite"):
        run(system, float("nan"), 1)
