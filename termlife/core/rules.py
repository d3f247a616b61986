"""
Conway's Game of Life state transition (B3/S23).

The rule is written as a three-way branch on the live neighbor count:
exactly 2 keeps the current state, exactly 3 makes the cell alive, and any
other count kills it. For a dead cell "keep" means "stay dead", which makes
this identical to the usual birth/survival formulation.
"""

import numpy as np
from typing import Dict, Tuple

KEEP_COUNT = 2
ALIVE_COUNT = 3


def next_state(alive: bool, live_neighbors: int) -> bool:
    """Apply the transition rule to a single cell.

    Args:
        alive: Current cell state
        live_neighbors: Number of live neighbors (0-8)

    Returns:
        Next cell state
    """
    if live_neighbors == KEEP_COUNT:
        return alive
    elif live_neighbors == ALIVE_COUNT:
        return True
    else:
        return False


def apply_rule(cells: np.ndarray, counts: np.ndarray) -> np.ndarray:
    """Vectorized `next_state` over whole arrays.

    Builds a fresh array; neither input is modified.

    Args:
        cells: Boolean array of current states
        counts: Array of live neighbor counts, same shape as cells

    Returns:
        New boolean array of next states
    """
    return np.where(counts == KEEP_COUNT, cells, counts == ALIVE_COUNT)


def rule_table() -> Dict[Tuple[bool, int], bool]:
    """Tabulate the rule for every (alive, live_neighbors) input."""
    return {
        (alive, neighbors): next_state(alive, neighbors)
        for alive in (False, True)
        for neighbors in range(9)
    }
