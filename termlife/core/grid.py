"""Grid state and generation update for Conway's Game of Life.

The grid stores its cells as a flat, row-major numpy boolean array
(index = y * width + x). Every change replaces the whole array, so a
generation is never observed half written.
"""

import numpy as np
from typing import Callable, List, Optional, Tuple
import logging

from .boundary import BoundaryPolicy, NEIGHBOR_OFFSETS
from .cell import Cell
from .rules import apply_rule
from .seeding import CellSource, CoinFlipSource, ConstantSource

logger = logging.getLogger(__name__)


class InvalidGridError(ValueError):
    """Raised for grid dimensions or initial states that cannot be used."""


def _check_dimension(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidGridError(f"Grid {name} must be an integer, got {value!r}")
    if value < 1:
        raise InvalidGridError(f"Grid {name} must be positive, got {value}")
    return int(value)


class Grid:
    """Rectangular Game of Life grid with a fixed boundary policy.

    Attributes:
        width: Grid width in cells
        height: Grid height in cells
        boundary: Policy used for every neighbor lookup
        generation: Number of update steps performed so far
    """

    def __init__(self, width: int, height: int,
                 boundary: BoundaryPolicy = BoundaryPolicy.WRAP,
                 source: Optional[CellSource] = None,
                 initial_state: Optional[np.ndarray] = None):
        """Initialize grid with given dimensions.

        Args:
            width: Grid width (cells)
            height: Grid height (cells)
            boundary: WRAP or CLIP
            source: Supplies the initial cells when no initial_state is given;
                defaults to an unbiased coin flip per cell
            initial_state: Optional boolean array, shaped (height, width) or flat

        Raises:
            InvalidGridError: If dimensions are not positive integers or
                initial_state has the wrong shape or dtype
        """
        self.width = _check_dimension('width', width)
        self.height = _check_dimension('height', height)
        self.boundary = BoundaryPolicy(boundary)
        self.generation = 0

        size = self.width * self.height
        if initial_state is not None:
            state = np.asarray(initial_state)
            if state.shape not in ((self.height, self.width), (size,)):
                raise InvalidGridError(
                    f"Initial state shape {state.shape} doesn't match grid size {(self.height, self.width)}")
            if state.dtype != bool:
                raise InvalidGridError("Initial state must be boolean array")
            cells = state.ravel().copy()
        else:
            if source is None:
                source = CoinFlipSource()
            cells = np.asarray(source(size), dtype=bool).ravel()
            if cells.size != size:
                raise InvalidGridError(f"Cell source returned {cells.size} cells, expected {size}")

        self._cells = cells

        logger.debug(f"Created {self.width}x{self.height} grid ({self.boundary.value}), "
                     f"{self.count_alive()} cells alive")

    @classmethod
    def dead(cls, width: int, height: int,
             boundary: BoundaryPolicy = BoundaryPolicy.WRAP) -> 'Grid':
        """Create a grid with every cell dead."""
        return cls(width, height, boundary, source=ConstantSource(False))

    @classmethod
    def from_pattern(cls, pattern: np.ndarray,
                     boundary: BoundaryPolicy = BoundaryPolicy.WRAP,
                     pad: int = 4) -> 'Grid':
        """Create grid from pattern array with padding.

        Args:
            pattern: 2D boolean array representing pattern
            boundary: Boundary policy of the new grid
            pad: Dead cells added on every side of the pattern

        Returns:
            Grid: New grid containing the pattern
        """
        pattern = np.asarray(pattern, dtype=bool)
        height, width = pattern.shape
        state = np.zeros((height + 2 * pad, width + 2 * pad), dtype=bool)
        state[pad:pad + height, pad:pad + width] = pattern
        return cls(width + 2 * pad, height + 2 * pad, boundary, initial_state=state)

    @property
    def cells(self) -> np.ndarray:
        """Read-only row-major view of the current generation."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    # Coordinates

    def index(self, x: int, y: int) -> int:
        """Row-major index of in-bounds coordinates.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds for {self.width}x{self.height} grid")
        return y * self.width + x

    def coords(self, index: int) -> Tuple[int, int]:
        """(x, y) coordinates of a row-major index.

        Raises:
            IndexError: If index is outside the grid
        """
        if not 0 <= index < self._cells.size:
            raise IndexError(f"Index {index} out of range for {self.width}x{self.height} grid")
        return index % self.width, index // self.width

    def resolve(self, x: int, y: int) -> Optional[int]:
        """Resolve signed coordinates through the boundary policy."""
        return self.boundary.resolve(x, y, self.width, self.height)

    # Cell access

    def cell(self, index: int) -> Cell:
        """Cell at a row-major index."""
        return Cell.of(self._cells[index])

    def is_alive(self, x: int, y: int) -> bool:
        """Liveness at signed coordinates; cells clipped off the grid are dead."""
        index = self.resolve(x, y)
        return index is not None and bool(self._cells[index])

    def get(self, x: int, y: int) -> bool:
        """Get cell state at in-bounds coordinates.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        return bool(self._cells[self.index(x, y)])

    def __getitem__(self, key: Tuple[int, int]) -> bool:
        """Access cell state using grid[x, y] syntax."""
        x, y = key
        return self.get(x, y)

    # Neighbors and update

    def count_neighbors(self, index: int) -> int:
        """Count live neighbors of the cell at a row-major index.

        Returns:
            Number of living neighbors (0-8)
        """
        x, y = self.coords(index)
        count = 0
        for dx, dy in NEIGHBOR_OFFSETS:
            neighbor = self.resolve(x + dx, y + dy)
            if neighbor is not None and self._cells[neighbor]:
                count += 1
        return count

    def neighbor_counts(self) -> np.ndarray:
        """Live neighbor count of every cell, flat and row-major."""
        state = self._cells.reshape(self.height, self.width)
        return self.boundary.neighbor_counts(state).ravel()

    def step(self) -> int:
        """Advance one generation.

        All counts are taken from the current generation before the new one
        is assigned.

        Returns:
            Number of live cells after evolution
        """
        counts = self.neighbor_counts()
        self._cells = apply_rule(self._cells, counts)
        self.generation += 1

        alive = self.count_alive()
        logger.debug(f"Generation {self.generation}: {alive} alive")
        return alive

    def run(self, steps: int) -> List[int]:
        """Advance several generations.

        Returns:
            Live cell count after each step
        """
        return [self.step() for _ in range(steps)]

    # Rendering

    def _render_rows(self, format_cell: Callable[[int], str]) -> str:
        rows = []
        for y in range(self.height):
            start = y * self.width
            rows.append(''.join(format_cell(i) for i in range(start, start + self.width)))
        return '\n'.join(rows)

    def render(self) -> str:
        """Current generation, '#' for alive and ' ' for dead, one line per row."""
        return self._render_rows(lambda i: str(self.cell(i)))

    def render_neighbor_counts(self) -> str:
        """Live neighbor count of each cell as a digit grid (debugging aid)."""
        counts = self.neighbor_counts()
        return self._render_rows(lambda i: str(int(counts[i])))

    # Whole-grid queries and replacement

    def count_alive(self) -> int:
        """Count total number of alive cells."""
        return int(np.count_nonzero(self._cells))

    def density(self) -> float:
        """Get fraction of cells that are alive."""
        return self.count_alive() / self._cells.size

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not self._cells.any()

    def has_live_cells(self) -> bool:
        return not self.is_empty()

    def clear(self) -> None:
        """Reset all cells to dead state."""
        self._cells = np.zeros_like(self._cells)

    def load_pattern(self, pattern: np.ndarray, x: int, y: int) -> None:
        """Place a pattern with its top-left corner at (x, y).

        Live pattern cells are resolved through the boundary policy: they
        wrap on a WRAP grid and are dropped when they fall off a CLIP grid.
        Dead pattern cells leave the grid untouched.
        """
        pattern = np.asarray(pattern, dtype=bool)
        cells = self._cells.copy()
        for py, px in zip(*np.nonzero(pattern)):
            index = self.resolve(x + int(px), y + int(py))
            if index is not None:
                cells[index] = True
        self._cells = cells

    def copy(self) -> 'Grid':
        """Create a deep copy of the grid."""
        duplicate = Grid(self.width, self.height, self.boundary, initial_state=self._cells)
        duplicate.generation = self.generation
        return duplicate

    def to_array(self) -> np.ndarray:
        """Get grid as a (height, width) numpy array copy."""
        return self._cells.reshape(self.height, self.width).copy()

    def __eq__(self, other: object) -> bool:
        """Check equality with another grid."""
        if not isinstance(other, Grid):
            return False
        return (self.width == other.width and
                self.height == other.height and
                self.boundary is other.boundary and
                np.array_equal(self._cells, other._cells))

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        density_pct = self.density() * 100
        return (f"Grid({self.width}x{self.height}, boundary={self.boundary.value}, "
                f"generation={self.generation}, alive={self.count_alive()}, density={density_pct:.1f}%)")
