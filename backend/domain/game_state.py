"""
GameState entity - a read-only snapshot of the game at a point in time.
"""

from typing import Iterable, Optional, Tuple

from .constants import Direction

GAME_OVER_MESSAGE = "Game Over - Press R to Restart"


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick_number: how many ticks have run since the last (re)start
        snake: tuple of (x, y) from head to tail
        food: (x, y) of the food, or None once the board is full
        direction: the direction the snake moved on its last tick
        score: points collected so far
        running: False once the snake has died
        death_reason: None, 'self', 'wall' or 'board_full'
        width, height: board dimensions
    """

    __slots__ = (
        "tick_number", "snake", "food", "direction", "score",
        "running", "death_reason", "width", "height",
    )

    def __init__(
        self,
        tick_number: int,
        snake: Iterable[Tuple[int, int]],
        food: Optional[Tuple[int, int]],
        direction: Direction,
        score: int,
        running: bool,
        width: int,
        height: int,
        death_reason: Optional[str] = None,
    ):
        self.tick_number = tick_number
        self.snake = tuple(snake)
        self.food = food
        self.direction = direction
        self.score = score
        self.running = running
        self.width = width
        self.height = height
        self.death_reason = death_reason

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)

    def in_bounds(self, cell: Tuple[int, int]) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        o = snake body
        (0,0) is the top-left cell, rows are printed top to bottom, and the
        score line follows the grid.
        """
        # Create empty board
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'F'

        # Draw the body before the head so the head wins on overlap
        for pos_idx in range(len(self.snake) - 1, -1, -1):
            cell = self.snake[pos_idx]
            if not self.in_bounds(cell):
                continue  # head that ran into the wall
            x, y = cell
            board[y][x] = 'H' if pos_idx == 0 else 'o'

        result = [f"{y:2d} {' '.join(board[y])}" for y in range(self.height)]
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))
        result.append(f"Score: {self.score}")
        if not self.running:
            result.append(GAME_OVER_MESSAGE)

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, score={self.score}, "
            f"length={len(self.snake)}, food={self.food}, running={self.running}>"
        )
