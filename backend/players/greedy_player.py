"""
Greedy player implementation - heads for the food along safe moves.
"""

from domain.constants import Direction
from domain.game_state import GameState
from .base import Player


class GreedyPlayer(Player):
    """
    Picks the safe move that brings the head closest (Manhattan distance)
    to the food. Ties are broken randomly; with no food on the board it
    behaves like RandomPlayer.
    """

    description = "Safe move closest to the food"

    def get_move(self, game_state: GameState) -> Direction:
        moves = self.safe_moves(game_state)
        if not moves:
            return game_state.direction

        if game_state.food is None:
            return self.rng.choice(list(moves))

        fx, fy = game_state.food
        distances = {
            move: abs(x - fx) + abs(y - fy)
            for move, (x, y) in moves.items()
        }
        best = min(distances.values())
        return self.rng.choice([move for move, dist in distances.items() if dist == best])
