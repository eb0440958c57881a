"""Generation-advance engine for Conway's Game of Life.

Computes an entire new generation from a frozen previous one. Each cell is one
unit of work submitted to a thread pool; every unit reads only the previous
grid and writes only its own cell of the new grid, so no locking is needed.
``advance`` waits for every unit before it looks at the result, and the new
grid is frozen and handed back only when all of them succeeded.
"""

import logging
import time
from concurrent.futures import ALL_COMPLETED, Future, ThreadPoolExecutor, wait
from typing import Dict, Iterator, Optional, Tuple

from .conway_rules import RuleEvaluator, default_rules
from .errors import ComputationFailure
from .grid import ToroidalGrid

logger = logging.getLogger(__name__)


class GenerationEngine:
    """Fan-out/fan-in engine advancing a grid one generation at a time.

    The engine owns a thread pool. Use it as a context manager, or call
    ``close()`` when done; a closed engine can no longer advance grids.
    """

    def __init__(self, max_workers: Optional[int] = None, rules: Optional[RuleEvaluator] = None):
        """Initialize the engine.

        Args:
            max_workers: Thread pool size (ThreadPoolExecutor default if None)
            rules: Rule evaluator used per cell (standard Conway rules if None)
        """
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be positive, got {max_workers}")

        self.max_workers = max_workers
        self.rules = rules or default_rules
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="golife")
        self._closed = False

        logger.debug(f"Created generation engine with {self._workers_label()} workers")

    def _workers_label(self) -> str:
        return "default" if self.max_workers is None else str(self.max_workers)

    def _compute_cell(self, previous: ToroidalGrid, target: ToroidalGrid, x: int, y: int) -> None:
        target.set(x, y, self.rules.next_state(previous, x, y))

    def advance(self, grid: ToroidalGrid) -> ToroidalGrid:
        """Compute the next generation of ``grid``.

        The input is frozen (its cell values are left untouched) and every
        cell of the result is evaluated against it, never against partial
        results.

        Args:
            grid: Current generation

        Returns:
            New frozen grid of the same dimensions holding the next generation

        Raises:
            ComputationFailure: If any unit of work could not be dispatched or
                failed; no partial grid is returned
        """
        previous = grid.freeze()
        target = ToroidalGrid.empty(previous.width, previous.height)
        expected = previous.width * previous.height
        started = time.perf_counter()

        futures: Dict[Future, Tuple[int, int]] = {}
        try:
            for y in range(previous.height):
                for x in range(previous.width):
                    future = self._executor.submit(self._compute_cell, previous, target, x, y)
                    futures[future] = (x, y)
        except BaseException as exc:
            for future in futures:
                future.cancel()
            wait(futures)
            # KeyboardInterrupt and SystemExit propagate unchanged
            if not isinstance(exc, Exception):
                raise
            logger.error(f"Dispatched {len(futures)} of {expected} cells before failure: {exc}")
            raise ComputationFailure(
                f"Could not dispatch cell {len(futures)} of {expected}: {exc}",
                failures=expected - len(futures),
            ) from exc

        # Barrier: nothing below runs until every unit has finished
        done, _ = wait(futures, return_when=ALL_COMPLETED)

        first_error = None
        first_cell = None
        failures = 0
        for future in done:
            exc = future.exception()
            if exc is not None:
                failures += 1
                cell = futures[future]
                # Row-major order so the reported cell doesn't depend on scheduling
                if first_cell is None or (cell[1], cell[0]) < (first_cell[1], first_cell[0]):
                    first_error, first_cell = exc, cell

        if failures:
            logger.error(f"{failures} of {expected} cells failed; first at {first_cell}: {first_error}")
            raise ComputationFailure(
                f"Generation aborted: {failures} of {expected} cells failed (first at {first_cell}: {first_error})",
                cell=first_cell,
                failures=failures,
            ) from first_error

        target.freeze()
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.debug(f"Advanced {previous.width}x{previous.height} grid in {elapsed_ms:.2f}ms, alive={target.count_alive()}")
        return target

    def run(self, grid: ToroidalGrid, generations: int) -> Iterator[ToroidalGrid]:
        """Yield the next ``generations`` generations of ``grid`` in order."""
        current = grid
        for _ in range(generations):
            current = self.advance(current)
            yield current

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Shut down the worker pool, waiting for in-flight units."""
        if not self._closed:
            self._executor.shutdown(wait=True)
            self._closed = True
            logger.debug("Generation engine closed")

    def __enter__(self) -> 'GenerationEngine':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"GenerationEngine(workers={self._workers_label()}, {state})"
