"""Screen size, movement directions and object symbols shared across the game."""

from enum import IntEnum

MAX_X = 80
MAX_Y = 25

BARREL_SYMBOL = "O"
GHOST_SYMBOL = "x"
SPECIAL_GHOST_SYMBOL = "X"
MARIO_SYMBOL = "@"
HAMMER_SYMBOL = "p"
PLUS_SYMBOL = "+"


class Direction(IntEnum):
    """Movement directions; the value doubles as the index of the matching movement key."""

    UP = 0
    LEFT = 1
    DOWN = 2
    RIGHT = 3
    STAY = 4

    def vector(self):
        """Return the (dx, dy) step for this direction."""
        return _VECTORS[self]


_VECTORS = {
    Direction.UP: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.DOWN: (0, 1),
    Direction.RIGHT: (1, 0),
    Direction.STAY: (0, 0),
}