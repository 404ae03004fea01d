"""Run configuration and its JSON form."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True, slots=True)
class RunConfig:
    dt: float = 0.01
    steps: int = 1000
    sample_every: int | None = None

    def __post_init__(self) -> None:
        if not math.isfinite(self.dt):
            raise ValueError("dt must be finite")
        if self.steps < 0:
            raise ValueError("steps must be >= 0")
        if self.sample_every is not None and self.sample_every <= 0:
            raise ValueError("sample_every must be > 0")


def default_config() -> RunConfig:
    return RunConfig()


def config_from_defn(defn: dict[str, Any]) -> RunConfig:
    sim = defn.get("simulation", {})
    if not isinstance(sim, dict):
        raise ValueError("simulation must be an object")
    default = default_config()
    sample_every = sim.get("sample_every", default.sample_every)
    return RunConfig(
        dt=_number(sim, "dt", default.dt, float, "a number"),
        steps=_number(sim, "steps", default.steps, int, "an integer"),
        sample_every=(
            _number(sim, "sample_every", None, int, "an integer")
            if sample_every is not None
            else None
        ),
    )


def _number(
    sim: dict[str, Any], key: str, default: Any, kind: type, label: str
) -> Any:
    try:
        return kind(sim.get(key, default))
    except (TypeError, ValueError):
        raise ValueError(f"{key} must be {label}") from None


def config_to_defn(cfg: RunConfig) -> dict[str, Any]:
    sim: dict[str, Any] = {"dt": cfg.dt, "steps": cfg.steps}
    if cfg.sample_every is not None:
        sim["sample_every"] = cfg.sample_every
    return {"simulation": sim}


def load_config(path: str | Path) -> RunConfig:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("config must be a JSON object")
    return config_from_defn(data)


def save_config(path: str | Path, cfg: RunConfig) -> None:
    Path(path).write_text(
        json.dumps(config_to_defn(cfg), indent=2, sort_keys=True),
        encoding="utf-8",
    )
