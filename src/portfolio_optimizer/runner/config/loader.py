from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import yaml
from pydantic import ValidationError

from portfolio_optimizer.runner.config.models import OptimizerConfig

# Config file the dashboard loads when no file is uploaded
CONFIG_ENV_VAR = "PORTFOLIO_OPTIMIZER_CONFIG"


def load_config(path: str | Path) -> OptimizerConfig:
    """
    Load an OptimizerConfig from YAML or JSON.

    Automatically validates using Pydantic v2.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    text = path.read_text()

    try:
        if path.suffix.lower() in {".yaml", ".yml"}:
            raw = yaml.safe_load(text)
        elif path.suffix.lower() == ".json":
            raw = json.loads(text)
        else:
            raise ValueError("Config path must be YAML or JSON.")
    except Exception as e:
        raise ValueError(f"Failed to parse config: {e}") from e

    # Empty YAML file -> all defaults
    if raw is None:
        raw = {}

    try:
        return OptimizerConfig.model_validate(raw)
    except ValidationError as e:
        raise ValueError(f"Invalid OptimizerConfig: {e}") from e


def make_rng(cfg: OptimizerConfig) -> np.random.Generator:
    """NumPy generator for the simulated delay, seeded from `cfg.seeds.numpy` if set."""
    return np.random.default_rng(cfg.seeds.numpy)
