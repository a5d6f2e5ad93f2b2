"""
Game constants for snakeloop.
"""

from enum import Enum
from typing import Tuple


class Direction(Enum):
    """Movement directions, each carrying its unit vector on the grid.

    (0, 0) is the top-left cell, so UP decreases y.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))

    def step(self, cell: Tuple[int, int]) -> Tuple[int, int]:
        """Return the cell one step away from `cell` in this direction."""
        x, y = cell
        return (x + self.dx, y + self.dy)


# Movement directions (kept as module constants for convenience)
UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Game settings
FOOD_REWARD = 10
INITIAL_LENGTH = 3
INITIAL_DIRECTION = RIGHT

# Death reasons
DEATH_SELF = "self"
DEATH_WALL = "wall"
DEATH_BOARD_FULL = "board_full"
