"""Simulation settings."""

from __future__ import annotations

import argparse
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional

from .core.grid import check_dimension


@dataclass
class SimulationConfig:
    width: int = 25
    height: int = 25
    generations: int = 1000
    delay: float = 5.0  # seconds between generations
    pattern: str = 'glider'
    density: float = 0.3  # only used by the random pattern
    seed: Optional[int] = None
    max_workers: Optional[int] = None
    alive_char: str = '*'
    dead_char: str = ' '

    def validate(self) -> 'SimulationConfig':
        """Check every setting, returning self.

        Raises:
            InvalidDimensionError: If width or height is not positive
            ValueError: For any other out-of-range setting
        """
        check_dimension("width", self.width)
        check_dimension("height", self.height)

        if self.generations < 0:
            raise ValueError(f"generations cannot be negative, got {self.generations}")
        if self.delay < 0:
            raise ValueError(f"delay cannot be negative, got {self.delay}")
        if not 0.0 <= self.density <= 1.0:
            raise ValueError(f"density must be between 0 and 1, got {self.density}")
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be positive, got {self.max_workers}")
        for name in ('alive_char', 'dead_char'):
            if len(getattr(self, name)) != 1:
                raise ValueError(f"{name} must be a single character, got {getattr(self, name)!r}")
        return self

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'SimulationConfig':
        """Build a config from parsed CLI arguments, ignoring unknown names."""
        names = {f.name for f in fields(cls)}
        values = {k: v for k, v in vars(args).items() if k in names and v is not None}
        return cls(**values).validate()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
