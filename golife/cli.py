#!/usr/bin/env python3
"""
Command-line entry point: run the toroidal Game of Life in the terminal.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import SimulationConfig
from .core.errors import GolifeError
from .driver import run_simulation
from .patterns.library import PATTERNS

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    defaults = SimulationConfig()
    parser = argparse.ArgumentParser(prog="golife", description="Conway's Game of Life on a toroidal grid")
    parser.add_argument("--width", type=int, default=defaults.width, help="Grid width in cells")
    parser.add_argument("--height", type=int, default=defaults.height, help="Grid height in cells")
    parser.add_argument("--generations", type=int, default=defaults.generations, help="Generations to run")
    parser.add_argument("--delay", type=float, default=defaults.delay, help="Seconds between generations")
    parser.add_argument("--workers", dest="max_workers", type=int, default=None, help="Worker threads per generation")
    parser.add_argument("--pattern", choices=sorted(PATTERNS), default=defaults.pattern, help="Starting pattern")
    parser.add_argument("--density", type=float, default=defaults.density, help="Alive probability for --pattern random")
    parser.add_argument("--seed", type=int, default=None, help="Seed for --pattern random")
    parser.add_argument("--alive-char", default=defaults.alive_char, help="Glyph for alive cells")
    parser.add_argument("--dead-char", default=defaults.dead_char, help="Glyph for dead cells")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        config = SimulationConfig.from_args(args)
        run_simulation(config)
    except GolifeError as e:
        logger.error(f"Simulation failed: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Invalid settings: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
