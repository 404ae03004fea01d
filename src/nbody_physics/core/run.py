"""Simulation run loop with optional sampling."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable

import numpy as np

from .state.system import NBodySystem


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RunResult:
    final_system: NBodySystem
    time: np.ndarray | None = None
    pos: np.ndarray | None = None
    vel: np.ndarray | None = None
    energy: np.ndarray | None = None


def run(
    system: NBodySystem,
    dt: float,
    steps: int,
    sample_every: int | None = None,
    callback: Callable[[int, NBodySystem], None] | None = None,
) -> RunResult:
    if not math.isfinite(dt):
        raise ValueError("dt must be finite")
    if steps < 0:
        raise ValueError("steps must be >= 0")
    if sample_every is not None and sample_every <= 0:
        raise ValueError("sample_every must be > 0")

    times: list[float] = []
    s_pos: list[np.ndarray] = []
    s_vel: list[np.ndarray] = []
    s_energy: list[float] = []

    def sample(step: int) -> None:
        pos, vel, _ = system.to_arrays()
        times.append(step * dt)
        s_pos.append(pos)
        s_vel.append(vel)
        s_energy.append(system.energy())
        logger.debug("sampled step %d", step)

    logger.info("running %d steps with dt=%g over %d bodies", steps, dt, len(system))
    if sample_every is not None:
        sample(0)

    for step in range(1, steps + 1):
        system = system.advance(dt)
        if callback is not None:
            callback(step, system)
        if sample_every is not None and step % sample_every == 0:
            sample(step)

    logger.info("finished %d steps", steps)
    if sample_every is None:
        return RunResult(final_system=system)

    return RunResult(
        final_system=system,
        time=np.asarray(times, dtype=np.float64),
        pos=np.asarray(s_pos, dtype=np.float64),
        vel=np.asarray(s_vel, dtype=np.float64),
        energy=np.asarray(s_energy, dtype=np.float64),
    )
