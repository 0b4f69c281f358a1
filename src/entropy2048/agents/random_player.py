import random
from typing import Optional

from ..environment.game2048 import GameManager, Move


class RandomPlayer:
    """Plays a uniformly random legal move. Baseline for the harness."""

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def get_action(self, game: GameManager) -> Move:
        legal_moves = game.get_legal_moves()
        if not game.is_alive() or not legal_moves:
            raise ValueError("Cannot choose an action for a finished game")
        return self.rng.choice(legal_moves)
