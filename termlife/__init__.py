"""
termlife: Conway's Game of Life in the terminal

Grid engine with wrap-around or clipped boundaries, plus a small driver
that renders each generation to the terminal at a fixed frame rate.
"""

from .core.boundary import BoundaryPolicy
from .core.cell import Cell
from .core.grid import Grid, InvalidGridError
from .core.seeding import CoinFlipSource, ConstantSource, FixedSource

__version__ = "0.1.0"

__all__ = [
    'BoundaryPolicy',
    'Cell',
    'Grid',
    'InvalidGridError',
    'CoinFlipSource',
    'ConstantSource',
    'FixedSource',
]
