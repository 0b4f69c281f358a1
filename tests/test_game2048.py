import numpy as np
import pytest

from entropy2048.environment import GameManager, Move, merge_row, simulate_move

_ = None


@pytest.mark.parametrize("row, expected, score, changed", [
    ([2, 2, 2, 2], [4, 4, 0, 0], 8, True),
    ([2, 2, 4, 4], [4, 8, 0, 0], 12, True),
    ([0, 0, 0, 0], [0, 0, 0, 0], 0, False),
    ([2, 0, 2, 4], [4, 4, 0, 0], 4, True),
    ([4, 2, 0, 0], [4, 2, 0, 0], 0, False),
])
def test_merge_row(row, expected, score, changed):
    new_row, gained, row_changed = merge_row(row)
    assert new_row == expected
    assert gained == score
    assert row_changed == changed


def test_new_game_has_two_tiles():
    game = GameManager(seed=3)
    assert game.get_score() == 0
    assert game.is_alive()
    assert game.get_free_cells() == 14
    assert all(tile in (None, 2, 4) for tile in game.get_board())


def test_seeded_games_are_reproducible():
    assert GameManager(seed=7).get_board() == GameManager(seed=7).get_board()


@pytest.mark.parametrize("direction, expected, changed, score", [
    (Move.LEFT, [4, _, _, _], True, 4),
    (Move.RIGHT, [_, _, _, 4], True, 4),
    (Move.UP, [2, _, _, 2], False, 0),
])
def test_move_top_row(make_game, direction, expected, changed, score):
    game = make_game([2, _, _, 2] + [_] * 12)
    assert game.move(direction, spawn=False) == changed
    assert game.get_board()[:4] == expected
    assert game.get_score() == score


def test_move_down(make_game):
    game = make_game([2, _, _, 2] + [_] * 12)
    assert game.move(Move.DOWN, spawn=False)
    assert game.get_board() == [_] * 12 + [2, _, _, 2]


def test_move_spawns_one_tile(make_game):
    game = make_game([2, _, _, 2] + [_] * 12)
    assert game.move(Move.LEFT)
    assert game.get_free_cells() == 14


def test_illegal_move_does_not_spawn(make_game):
    game = make_game([2, _, _, 2] + [_] * 12)
    assert not game.move(Move.UP)
    assert game.get_free_cells() == 14


def test_tile_merges_once_per_move(make_game):
    game = make_game([4, 2, 2, _] + [_] * 12)
    assert game.move(Move.LEFT, spawn=False)
    assert game.get_board()[:4] == [4, 4, _, _]
    assert game.get_score() == 4


def test_rectangular_board(make_game):
    game = make_game([2, 2, _,
                      _, 4, 4], rows=2, columns=3)
    assert game.move(Move.LEFT, spawn=False)
    assert game.get_board() == [4, _, _, 8, _, _]

    game = make_game([2, _, _,
                      2, 4, _], rows=2, columns=3)
    assert game.move(Move.UP, spawn=False)
    assert game.get_board() == [4, 4, _, _, _, _]


def test_terminal_board(terminal_game):
    assert not terminal_game.is_alive()
    assert terminal_game.get_legal_moves() == []
    for direction in Move:
        assert not terminal_game.move(direction, spawn=False)


def test_full_board_with_pair_is_alive(make_game):
    board = [2, 4, 2, 4,
             4, 2, 4, 2,
             2, 4, 2, 4,
             4, 2, 8, 8]
    game = make_game(board)
    assert game.is_alive()
    assert game.get_legal_moves() == [Move.LEFT, Move.RIGHT]


def test_legal_moves_order(scenario_game):
    assert scenario_game.get_legal_moves() == [Move.UP, Move.DOWN, Move.LEFT, Move.RIGHT]


def test_load_from_copies_state(scenario_game):
    copy = GameManager(seed=1)
    copy.load_from(scenario_game)
    assert copy.get_board() == scenario_game.get_board()
    assert copy.get_score() == scenario_game.get_score()

    copy.move(Move.LEFT, spawn=False)
    copy.set_tile(0, 4)
    assert copy.get_board() != scenario_game.get_board()
    assert scenario_game.get_tile(0) is None
    assert scenario_game.get_score() == 1548


def test_clone_is_independent(scenario_game):
    clone = scenario_game.clone()
    before = scenario_game.get_board()
    assert clone.move(Move.RIGHT, spawn=False)
    assert scenario_game.get_board() == before


def test_get_and_set_tile(scenario_game):
    assert scenario_game.get_tile(4) == 8
    assert scenario_game.get_tile(0) is None
    scenario_game.set_tile(0, 2)
    assert scenario_game.get_tile(0) == 2
    scenario_game.set_tile(0, None)
    assert scenario_game.get_tile(0) is None


def test_set_tile_updates_liveness(make_game):
    board = [2, 4, 2, 4,
             4, 2, 4, 2,
             2, 4, 2, 4,
             4, 2, 4, _]
    game = make_game(board)
    assert game.is_alive()
    game.set_tile(15, 8)
    assert not game.is_alive()


def test_scenario_accessors(scenario_game):
    assert scenario_game.get_num_cells() == 16
    assert scenario_game.get_num_columns() == 4
    assert scenario_game.get_num_rows() == 4
    assert scenario_game.get_best_tile() == 128
    assert scenario_game.get_free_cells() == 8


@pytest.mark.parametrize("board", [
    [2] * 15,
    [3] + [_] * 15,
    [1] + [_] * 15,
])
def test_load_rejects_invalid_boards(board):
    with pytest.raises(ValueError):
        GameManager(seed=0).load(board)


def test_simulate_move_leaves_grid_untouched():
    grid = np.array([[2, 2], [0, 4]], dtype=np.int64)
    new_grid, score, changed = simulate_move(grid, Move.LEFT)
    assert changed and score == 4
    assert new_grid.tolist() == [[4, 0], [4, 0]]
    assert grid.tolist() == [[2, 2], [0, 4]]


def test_empty_grid_is_not_alive(make_game):
    game = make_game([_] * 16)
    assert not game.is_alive()
    assert game.get_legal_moves() == []
    game.set_tile(5, 2)
    assert game.is_alive()
