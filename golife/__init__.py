"""
golife: Conway's Game of Life on a fixed-size toroidal grid.

Each generation is computed concurrently from a frozen snapshot of the
previous one and rendered as a bordered block of text.
"""

from .core import (
    ComputationFailure,
    FrozenGridError,
    GenerationEngine,
    GolifeError,
    InvalidDimensionError,
    RuleEvaluator,
    ToroidalGrid,
)
from .config import SimulationConfig
from .render import render

__version__ = "0.1.0"

__all__ = [
    'ToroidalGrid',
    'RuleEvaluator',
    'GenerationEngine',
    'SimulationConfig',
    'render',
    'GolifeError',
    'InvalidDimensionError',
    'FrozenGridError',
    'ComputationFailure',
]
