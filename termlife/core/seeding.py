"""Initial state sources for new grids.

A source is any callable taking a cell count and returning a flat boolean
array of that length. Grids take one at construction so tests can swap the
random coin flip for a fixed starting state.
"""

import numpy as np
from typing import Optional, Protocol, Sequence


class CellSource(Protocol):
    """Supplies the initial states of a grid."""

    def __call__(self, count: int) -> np.ndarray:
        ...


class CoinFlipSource:
    """Each cell independently alive with probability 0.5."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None):
        """Initialize the source.

        Args:
            seed: Seed for a fresh numpy Generator (ignored if rng is given)
            rng: Existing numpy Generator to draw from
        """
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def __call__(self, count: int) -> np.ndarray:
        return self.rng.integers(0, 2, size=count).astype(bool)


class ConstantSource:
    """Every cell starts in the same state."""

    def __init__(self, alive: bool = False):
        self.alive = bool(alive)

    def __call__(self, count: int) -> np.ndarray:
        return np.full(count, self.alive, dtype=bool)


class FixedSource:
    """Replays a fixed row-major sequence of states."""

    def __init__(self, states: Sequence[bool]):
        self.states = np.asarray(states, dtype=bool).ravel()

    def __call__(self, count: int) -> np.ndarray:
        if count != self.states.size:
            raise ValueError(f"Fixed source holds {self.states.size} cells, {count} requested")
        return self.states.copy()
