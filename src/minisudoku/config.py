"""
Puzzle generator configuration.

Values come from the dataclass defaults, then environment variables, then an
optional YAML file and explicit overrides.
"""

import logging
import os
from dataclasses import dataclass, fields
from typing import Optional

import yaml

from .constants import DEFAULT_MAX_PLACEMENT_ATTEMPTS


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _to_int(name: str, value) -> int:
    """Coerce a config value to int; bools and fractional floats are rejected."""
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


@dataclass
class GeneratorConfig:
    """Configuration for puzzle generation."""

    # RNG seed; None draws a fresh seed from the OS
    seed: Optional[int] = None

    # Retry bound for a single mask placement
    max_placement_attempts: int = DEFAULT_MAX_PLACEMENT_ATTEMPTS

    log_level: str = ""

    def __post_init__(self):
        if self.seed is None:
            env_seed = os.getenv("MINI_SUDOKU_SEED", "")
            if env_seed:
                self.seed = env_seed
        if self.seed is not None:
            self.seed = _to_int("seed", self.seed)
        self.max_placement_attempts = _to_int(
            "max_placement_attempts", self.max_placement_attempts
        )
        if not self.log_level:
            self.log_level = os.getenv("MINI_SUDOKU_LOG_LEVEL", "WARNING")
        self.log_level = str(self.log_level).upper()
        self.validate()

    def validate(self):
        if self.max_placement_attempts < 1:
            raise ValueError(
                f"max_placement_attempts must be >= 1, got {self.max_placement_attempts}"
            )
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


def load_config(yaml_path: str) -> dict:
    """Load generator config from YAML file."""
    with open(yaml_path, "r") as f:
        return yaml.safe_load(f) or {}


def make_generator_config(yaml_path: str = None, **overrides) -> GeneratorConfig:
    """Create GeneratorConfig from an optional YAML file plus keyword overrides."""
    values = load_config(yaml_path) if yaml_path else {}
    values.update(overrides)

    names = {f.name for f in fields(GeneratorConfig)}
    return GeneratorConfig(**{k: v for k, v in values.items() if k in names})
