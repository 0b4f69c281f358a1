import random

import pytest

from entropy2048.environment import GameManager

_ = None

# Position from a real game: score 1548, best tile 128.
SCENARIO_BOARD = [
    _, _, _, _,
    8, 2, 2, _,
    2, 8, _, _,
    128, 128, 8, _,
]
SCENARIO_SCORE = 1548

# Full board without any pair: no move is possible.
TERMINAL_BOARD = [
    2, 4, 2, 4,
    4, 2, 4, 2,
    2, 4, 2, 4,
    4, 2, 4, 2,
]

# Symmetric under transposition: UP and LEFT give mirrored boards, made of 2s
# and 4s only so that both evaluations are exactly equal.
SYMMETRIC_BOARD = [
    _, _, _, _,
    _, _, _, _,
    _, _, _, 4,
    _, _, 4, 2,
]


@pytest.fixture
def make_game():
    def _make_game(board, score=0, rows=4, columns=4):
        game = GameManager(rows=rows, columns=columns, seed=0)
        game.load(board, score)
        return game
    return _make_game


@pytest.fixture
def scenario_game(make_game):
    return make_game(SCENARIO_BOARD, SCENARIO_SCORE)


@pytest.fixture
def terminal_game(make_game):
    return make_game(TERMINAL_BOARD)


@pytest.fixture
def random_boards():
    """Reproducible random 4x4 boards, with about a third of empty cells."""
    rng = random.Random(2048)
    boards = []
    for _i in range(200):
        boards.append([None if rng.random() < 0.3 else rng.choice([2, 4, 8, 16])
                       for _j in range(16)])
    return boards
