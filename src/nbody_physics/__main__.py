"""Command-line driver: advance the outer planets and print energies."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

import numpy as np

from . import __version__
from .core.run import run
from .core.state import NBodySystem
from .io import default_config, load_config


logger = logging.getLogger("nbody_physics")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nbody_physics")
    parser.add_argument("--config", type=Path, default=None)
    parser.add_argument("--steps", type=int, default=None)
    parser.add_argument("--dt", type=float, default=None)
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    try:
        cfg = load_config(args.config) if args.config is not None else default_config()
        if args.steps is not None:
            cfg = replace(cfg, steps=args.steps)
        if args.dt is not None:
            cfg = replace(cfg, dt=args.dt)
        logger.info("using dt=%g steps=%d", cfg.dt, cfg.steps)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    system = NBodySystem.create()
    print(f"{system.energy():.9f}")
    result = run(system, cfg.dt, cfg.steps, sample_every=cfg.sample_every)
    print(f"{result.final_system.energy():.9f}")
    if result.energy is not None:
        drift = float(np.max(np.abs(result.energy - result.energy[0])))
        print(f"max energy drift: {drift:.3e}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
