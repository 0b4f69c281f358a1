import logging
from typing import Optional

from ..config import SPAWN_PROBABILITIES
from .features import FEATURES, FEATURE_NAMES, Board
from .weights import WeightVector

logger = logging.getLogger(__name__)


class Evaluator:
    """Scores a board as the weighted sum of its features."""

    def __init__(self, weights: Optional[WeightVector] = None, verbose: bool = False):
        self.weights = weights if weights is not None else WeightVector()
        self.verbose = verbose

    def evaluate(self, board: Board, num_columns: int) -> float:
        """Returns the evaluation of a board."""
        weights = self.weights.get()
        value = 0
        for feature, weight in zip(FEATURES, weights):
            value += feature(board, num_columns) * weight

        if self.verbose:
            self._log_features(board, num_columns, value)

        return value

    def evaluate_with_spawns(self, board: Board, num_columns: int) -> float:
        """
        Returns the evaluation of a board, taking into account all possible
        spawning positions for the new tile.
        """
        cells = list(board)
        mean_value = 0.0
        num_empty_cells = 0
        for index, tile in enumerate(board):
            if tile:
                continue
            num_empty_cells += 1
            for spawned, probability in SPAWN_PROBABILITIES.items():
                cells[index] = spawned
                mean_value += self.evaluate(cells, num_columns) * probability
            cells[index] = None

        if num_empty_cells == 0:
            raise ValueError("Cannot evaluate spawns on a board without empty cells")

        return mean_value / num_empty_cells

    def _log_features(self, board: Board, num_columns: int, value: float) -> None:
        logger.debug(f"Board: {list(board)}")
        for name, feature in zip(FEATURE_NAMES, FEATURES):
            logger.debug(f"{name}: {feature(board, num_columns)}")
        logger.debug(f"Evaluation: {value}")
