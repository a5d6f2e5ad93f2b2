"""
Base player interface for the game engine.
"""

import random
from typing import Dict, Optional, Tuple

from domain.constants import Direction
from domain.game_state import GameState


class Player:
    """
    Base class/interface for autopilot logic.

    A player looks at a snapshot and returns the direction it wants the
    snake to take on the next tick, acting as the input collaborator of
    a GameLoop.
    """

    description = ""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            A Direction, or None to keep going straight
        """
        raise NotImplementedError

    @staticmethod
    def safe_moves(game_state: GameState) -> Dict[Direction, Tuple[int, int]]:
        """
        Map each direction that neither reverses, hits a wall, nor hits the
        body (the tail is excluded since it moves away) to its target cell.
        """
        body = game_state.snake
        moves = {}
        for move in Direction:
            if move is game_state.direction.opposite:
                continue
            target = move.step(game_state.head)

            # Check wall collisions
            if not game_state.in_bounds(target):
                continue

            # Check self collisions (excluding tail which will move)
            if target in body[:-1]:
                continue

            moves[move] = target
        return moves
