"""Outer planets benchmark with sampled energy drift."""

from __future__ import annotations

import numpy as np

from nbody_physics.core.diagnostics import linear_momentum
from nbody_physics.core.run import run
from nbody_physics.core.state import NBodySystem


if __name__ == "__main__":
    system = NBodySystem.create()
    result = run(system, dt=0.01, steps=10_000, sample_every=100)

    drift = result.energy - result.energy[0]
    print("initial energy:", f"{result.energy[0]:.9f}")
    print("final energy:", f"{result.final_system.energy():.9f}")
    print("max |energy drift|:", float(np.max(np.abs(drift))))
    print("total momentum:", linear_momentum(result.final_system))
