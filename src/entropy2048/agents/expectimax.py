import logging
from enum import Enum
from typing import NamedTuple, Optional, Sequence, Tuple

import numpy as np

from ..config import (ABS_MAX, ABS_MIN, DEFAULT_DEPTH, DEPTH_THRESHOLDS,
                      SPAWN_PROBABILITIES)
from ..environment.game2048 import GameManager, Move
from .evaluator import Evaluator

logger = logging.getLogger(__name__)

LEAF_EVALUATIONS = ("plain", "spawns")


class Layer(Enum):
    MAX = "max"
    CHANCE = "chance"


class SearchResult(NamedTuple):
    value: float
    move: Optional[Move]


class DepthPolicy:
    """
    Chooses the search depth from the number of free cells: the fuller the
    board, the deeper the search.
    """

    def __init__(self, thresholds: Sequence[Tuple[int, int]] = DEPTH_THRESHOLDS,
                 default_depth: int = DEFAULT_DEPTH):
        self.thresholds = tuple(thresholds)
        self.default_depth = default_depth

    def depth_for(self, num_free_cells: int) -> int:
        for limit, depth in self.thresholds:
            if num_free_cells < limit:
                return depth
        return self.default_depth


class ExpectimaxSearch:
    """
    Expectimax over game clones: a max layer where the player picks one of the
    four moves, and a chance layer where a 2 or a 4 spawns in an empty cell.

    The state passed to search() is never modified; every call works on its
    own scratch copy, reloaded from the parent state for each branch.
    """

    def __init__(self, evaluator: Evaluator, leaf: str = "plain", trace: bool = False):
        if leaf not in LEAF_EVALUATIONS:
            raise ValueError(f"Unknown leaf evaluation {leaf!r}, expected one of {LEAF_EVALUATIONS}")
        self.evaluator = evaluator
        self.leaf = leaf
        self.trace = trace

    def search(self, state: GameManager, depth: int, layer: Layer = Layer.MAX) -> SearchResult:
        if self.trace:
            logger.debug(f"EI entering depth={depth} layer={layer.value}")

        if depth == 0:
            value = self._evaluate_leaf(state)
            if self.trace:
                logger.debug(f"EI returning depth={depth} val={value}")
            return SearchResult(value, None)

        if layer is Layer.MAX:
            return self._max_layer(state, depth)
        return self._chance_layer(state, depth)

    def _evaluate_leaf(self, state: GameManager) -> float:
        board = state.get_board()
        num_columns = state.get_num_columns()
        if self.leaf == "spawns" and None in board:
            return self.evaluator.evaluate_with_spawns(board, num_columns)
        return self.evaluator.evaluate(board, num_columns)

    def _max_layer(self, state: GameManager, depth: int) -> SearchResult:
        scratch = state.clone()
        best_value = ABS_MIN
        best_move = None
        for direction in Move:
            scratch.load_from(state)
            if not scratch.move(direction, spawn=False):
                continue
            if best_move is None:
                best_move = direction  # use first possible move
            value = self.search(scratch, depth - 1, Layer.CHANCE).value
            if self.trace:
                logger.debug(f"- MAX returning from move {direction.name} at depth {depth}: {value}")
            if value > best_value:
                best_value = value
                best_move = direction

        if self.trace:
            logger.debug(f"EI returning after MAX depth={depth} val={best_value}")
        return SearchResult(best_value, best_move)

    def _chance_layer(self, state: GameManager, depth: int) -> SearchResult:
        scratch = state.clone()
        values = {tile: [] for tile in SPAWN_PROBABILITIES}
        for index in range(state.get_num_cells()):
            if state.get_tile(index) is not None:
                continue
            scratch.load_from(state)
            for tile in SPAWN_PROBABILITIES:
                scratch.set_tile(index, tile)
                value = self.search(scratch, depth - 1, Layer.MAX).value
                if self.trace:
                    logger.debug(f"EXPECT returning from set_tile({index}, {tile}) at depth {depth}: {value}")
                values[tile].append(value)

        if not values[2]:
            return SearchResult(ABS_MAX, None)

        # Probabilities are applied to the means over all cells.
        m = SPAWN_PROBABILITIES[2] * np.mean(values[2]) + SPAWN_PROBABILITIES[4] * np.mean(values[4])
        if self.trace:
            logger.debug(f"EI returning after EXPECT depth={depth} avg={m} #val={len(values[2])}")
        return SearchResult(float(m), None)
