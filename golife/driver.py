"""
Timed console loop for the Game of Life.

Builds the starting pattern, then alternates sleep and advance for a fixed
number of generations, printing every generation to the output stream.
"""

import logging
import sys
import time
from typing import Callable, Optional, TextIO

from .config import SimulationConfig
from .core.engine import GenerationEngine
from .core.grid import ToroidalGrid
from .patterns.library import build_pattern
from .render import render

logger = logging.getLogger(__name__)

CLEAR_SCREEN = '\x0c'  # form feed


def run_simulation(config: SimulationConfig,
                   engine: Optional[GenerationEngine] = None,
                   out: Optional[TextIO] = None,
                   sleep: Callable[[float], None] = time.sleep,
                   initial: Optional[ToroidalGrid] = None) -> ToroidalGrid:
    """Run the simulation and return the last generation.

    Args:
        config: Simulation settings (validated here)
        engine: Engine to advance with; a private one is created and closed if None
        out: Stream generations are printed to (sys.stdout if None)
        sleep: Blocking delay function, called with ``config.delay`` before each advance
        initial: Starting grid; built from ``config.pattern`` if None

    Raises:
        GolifeError: If a generation cannot be computed; nothing further is printed
    """
    config.validate()
    if out is None:
        out = sys.stdout
    grid = initial if initial is not None else build_pattern(
        config.pattern, config.width, config.height,
        density=config.density, seed=config.seed,
    )

    owns_engine = engine is None
    if owns_engine:
        engine = GenerationEngine(max_workers=config.max_workers)

    pattern_name = "custom" if initial is not None else config.pattern
    logger.info(f"Starting {grid.width}x{grid.height} {pattern_name} run: "
                f"{config.generations} generations, {config.delay}s apart")

    def show(generation: ToroidalGrid) -> None:
        out.write(CLEAR_SCREEN + render(generation, config.alive_char, config.dead_char))
        out.flush()

    try:
        show(grid)
        for generation in range(1, config.generations + 1):
            out.write(f"Generating next generation in {config.delay:g} seconds\n")
            out.flush()
            sleep(config.delay)
            grid = engine.advance(grid)
            show(grid)
            logger.debug(f"Generation {generation}: alive={grid.count_alive()}")
    finally:
        if owns_engine:
            engine.close()

    logger.info(f"Finished after {config.generations} generations, alive={grid.count_alive()}")
    return grid
