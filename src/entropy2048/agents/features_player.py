"""
Artificial player that maximizes a weighted sum of board features, looking
ahead with an expectimax search whose depth adapts to the free space left.
"""

import logging
from typing import Optional, Sequence

from ..environment.game2048 import GameManager, Move
from .evaluator import Evaluator
from .expectimax import DepthPolicy, ExpectimaxSearch, Layer
from .features import free_cells
from .weights import WeightVector

logger = logging.getLogger(__name__)


class FeaturesPlayer:
    def __init__(self, weights: Optional[Sequence[float]] = None,
                 depth_policy: Optional[DepthPolicy] = None,
                 leaf: str = "plain", verbose: bool = False, trace: bool = False):
        self.weights = WeightVector(weights)
        self.evaluator = Evaluator(self.weights, verbose=verbose or trace)
        self.search = ExpectimaxSearch(self.evaluator, leaf=leaf, trace=trace)
        self.depth_policy = depth_policy if depth_policy is not None else DepthPolicy()
        self.verbose = verbose

    def get_action(self, game: GameManager) -> Move:
        """Returns the move with the best expected evaluation."""
        if not game.is_alive():
            raise ValueError("Cannot choose an action for a finished game")

        num_free_cells = free_cells(game.get_board(), game.get_num_columns())
        depth = self.depth_policy.depth_for(num_free_cells)

        best_value, best_move = self.search.search(game, depth, Layer.MAX)
        if best_move is None:
            raise ValueError("No legal move on this board")
        if self.verbose:
            logger.debug(f"Best move: {best_move.name} (val = {best_value:f}, depth = {depth})")
        return best_move

    def get_weights(self):
        return self.weights.get()

    def set_weights(self, weights: Sequence[float]) -> None:
        self.weights.set(weights)
