"""Run loop driving a grid at a fixed frame rate.

Each frame renders the current generation, advances the grid one step and
sleeps out the rest of the frame period. The loop ends when no live cells
remain (or a generation limit is hit) and shows the last generation once more.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..core.grid import Grid
from .clock import FrameClock
from .terminal import TerminalDisplay

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    """Outcome of a finished run."""
    generations: int     # Update steps performed by this run
    final_alive: int     # Live cells in the last generation shown
    hit_limit: bool = False  # Stopped by max_generations rather than extinction


class LifeRunner:
    """Drives a grid through render, update and pause until it dies out."""

    def __init__(self, grid: Grid, display: TerminalDisplay, clock: FrameClock,
                 max_generations: Optional[int] = None, debug_neighbors: bool = False):
        """Initialize the runner.

        Args:
            grid: Grid to simulate (advanced in place)
            display: Where frames are written
            clock: Frame pacing
            max_generations: Optional cap on update steps; None runs until extinction
            debug_neighbors: Show live neighbor counts instead of cell glyphs
        """
        self.grid = grid
        self.display = display
        self.clock = clock
        self.max_generations = max_generations
        self.debug_neighbors = debug_neighbors

    def render(self) -> str:
        if self.debug_neighbors:
            return self.grid.render_neighbor_counts()
        return self.grid.render()

    def _limit_reached(self, generations: int) -> bool:
        return self.max_generations is not None and generations >= self.max_generations

    def run(self) -> RunSummary:
        """Run until the grid has no live cells or the limit is reached."""
        logger.info(f"Starting run: {self.grid!r}, {self.clock.frame_rate:g} fps")

        generations = 0
        while self.grid.has_live_cells() and not self._limit_reached(generations):
            self.clock.start_frame()
            self.display.show(self.render())
            self.grid.step()
            generations += 1
            self.clock.wait()

        self.display.show(self.render())

        summary = RunSummary(
            generations=generations,
            final_alive=self.grid.count_alive(),
            hit_limit=self.grid.has_live_cells(),
        )
        logger.info(f"Run finished after {summary.generations} generations, {summary.final_alive} alive")
        return summary
