"""Classic Conway patterns used by tests and the glider demo."""

import numpy as np


def glider() -> np.ndarray:
    """Classic 5-cell glider.

    Travels one cell right and one cell down every 4 generations.
    """
    return np.array([
        [False, True, False],
        [False, False, True],
        [True, True, True]
    ], dtype=bool)


def blinker() -> np.ndarray:
    """Create horizontal blinker pattern (3 cells, period 2)."""
    return np.array([[True, True, True]], dtype=bool)


def block() -> np.ndarray:
    """Create stable 2x2 block still life."""
    return np.array([
        [True, True],
        [True, True]
    ], dtype=bool)


GLIDER_PERIOD = 4         # generations per translation
GLIDER_VELOCITY = (1, 1)  # (dx, dy) per period
