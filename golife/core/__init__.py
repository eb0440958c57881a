"""
Core of the toroidal Game of Life: grid, rules and generation engine.
"""

from .errors import ComputationFailure, FrozenGridError, GolifeError, InvalidDimensionError
from .grid import ToroidalGrid
from .conway_rules import BIRTH_SET, SURVIVAL_SET, RuleEvaluator, default_rules, next_state, update_cell
from .engine import GenerationEngine

__all__ = [
    'ToroidalGrid',
    'RuleEvaluator',
    'GenerationEngine',
    'default_rules',
    'next_state',
    'update_cell',
    'BIRTH_SET',
    'SURVIVAL_SET',
    'GolifeError',
    'InvalidDimensionError',
    'FrozenGridError',
    'ComputationFailure',
]
