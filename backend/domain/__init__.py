"""
Domain entities for the snakeloop game engine.

This module contains the core game entities that are independent of
infrastructure concerns (scheduling, rendering, input).
"""

from .constants import (
    Direction, UP, DOWN, LEFT, RIGHT, VALID_MOVES, FOOD_REWARD,
    DEATH_SELF, DEATH_WALL, DEATH_BOARD_FULL,
)
from .snake import Snake
from .game_state import GameState

__all__ = [
    'Direction', 'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'FOOD_REWARD',
    'DEATH_SELF', 'DEATH_WALL', 'DEATH_BOARD_FULL',
    'Snake',
    'GameState',
]
