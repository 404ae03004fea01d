"""Configuration I/O."""

from .config import (  # noqa: F401
    RunConfig,
    config_from_defn,
    config_to_defn,
    default_config,
    load_config,
    save_config,
)
