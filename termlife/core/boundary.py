"""Boundary policies for neighbor lookup at the grid edges.

A policy decides what a coordinate outside the grid refers to. WRAP joins
opposite edges (toroidal topology); CLIP treats everything outside the grid
as dead. The policy is picked once per grid and applied to every lookup.
"""

import numpy as np
from enum import Enum
from typing import Optional, Tuple

# Moore neighborhood, row by row, center excluded
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy)
    for dy in (-1, 0, 1)
    for dx in (-1, 0, 1)
    if not (dx == 0 and dy == 0)
)


class BoundaryPolicy(Enum):
    """How out-of-bounds coordinates are resolved."""
    WRAP = 'wrap'
    CLIP = 'clip'

    @classmethod
    def parse(cls, name: str) -> 'BoundaryPolicy':
        """Look up a policy by its name ("wrap" or "clip", any case).

        Raises:
            ValueError: If the name is not a known policy
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ', '.join(policy.value for policy in cls)
            raise ValueError(f"Unknown boundary policy {name!r} (expected one of: {choices})") from None

    def resolve(self, x: int, y: int, width: int, height: int) -> Optional[int]:
        """Resolve signed coordinates to a row-major cell index.

        Args:
            x: Column, may lie outside [0, width)
            y: Row, may lie outside [0, height)
            width: Grid width in cells
            height: Grid height in cells

        Returns:
            Linear index of the referenced cell, or None when the
            coordinates fall off a clipped grid
        """
        if self is BoundaryPolicy.WRAP:
            x = ((x % width) + width) % width
            y = ((y % height) + height) % height
            return y * width + x

        if 0 <= x < width and 0 <= y < height:
            return y * width + x
        return None

    def neighbor_counts(self, state: np.ndarray) -> np.ndarray:
        """Count live neighbors of every cell in a 2D boolean state.

        Pads the state by one cell on each side according to the policy and
        sums the eight shifted views, so the result agrees with resolving
        every neighbor through `resolve`.

        Args:
            state: (height, width) boolean array

        Returns:
            (height, width) uint8 array of counts in [0, 8]
        """
        height, width = state.shape
        cells = state.astype(np.uint8)

        if self is BoundaryPolicy.WRAP:
            padded = np.pad(cells, 1, mode='wrap')
        else:
            padded = np.pad(cells, 1, mode='constant', constant_values=0)

        counts = np.zeros((height, width), dtype=np.uint8)
        for dx, dy in NEIGHBOR_OFFSETS:
            counts += padded[1 + dy:1 + dy + height, 1 + dx:1 + dx + width]

        return counts
