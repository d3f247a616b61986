"""Single cell state for the Game of Life grid."""

from enum import Enum

ALIVE_GLYPH = '#'
DEAD_GLYPH = ' '


class Cell(Enum):
    """Alive/dead state of one grid cell."""
    DEAD = False
    ALIVE = True

    @classmethod
    def of(cls, alive) -> 'Cell':
        """Convert any truthy/falsy value (including numpy bools) to a Cell."""
        return cls.ALIVE if alive else cls.DEAD

    def is_alive(self) -> bool:
        return self.value

    def __str__(self) -> str:
        return ALIVE_GLYPH if self.value else DEAD_GLYPH
