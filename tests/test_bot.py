from __future__ import annotations

import numpy as np
import pytest

from tetrus.ai import TetrisBot
from tetrus.game import GameConfig, Move, ShapeKind, ShapePosition, TetrisGame


def spawn_on(grid, kind: ShapeKind) -> ShapePosition:
    shape = ShapePosition(kind, row=0, col=grid.width // 2, color=2)
    grid.place(shape.cells(), shape.color)
    return shape


def test_moves_sequence_is_stored_last_first():
    moves = TetrisBot.as_moves_sequence(is_left=True, n_horizontal_moves=3, n_rotations=2, n_drops=4)
    assert list(reversed(moves)) == (
        [Move.SOFT_DROP] * 4 + [Move.ROTATE] * 2 + [Move.LEFT] * 3 + [Move.HARD_DROP]
    )


def test_position_after_fall_rests_on_the_floor(grid):
    shape = ShapePosition(ShapeKind.O, row=3, col=0)
    resting = TetrisBot.position_after_fall(shape, grid)
    assert max(r for r, _ in resting.cells()) == 19


def test_position_after_fall_rests_on_the_stack(grid):
    grid.grid[15, 1] = 3
    shape = ShapePosition(ShapeKind.I, row=0, col=0)
    resting = TetrisBot.position_after_fall(shape, grid)
    assert resting.row == 14


def test_enumerate_options_covers_both_directions_and_rotations(grid):
    shape = ShapePosition(ShapeKind.T, row=0, col=5)
    options = TetrisBot.enumerate_options(grid, shape)
    assert options
    rotations = {pos.rotation for pos, _ in options}
    assert rotations == {0, 1, 2, 3}
    for pos, moves in options:
        # every candidate has fallen as far as it can
        assert not grid.can_place(pos.moved(Move.SOFT_DROP).cells())
        assert moves[0] == Move.HARD_DROP
        assert moves[-4:] == [Move.SOFT_DROP] * 4


@pytest.mark.parametrize("kind", list(ShapeKind))
def test_empty_board_gives_moves_ending_with_hard_drop(grid, kind):
    shape = spawn_on(grid, kind)
    before = grid.clone_state()
    moves = TetrisBot.decide_moves(grid, shape)
    assert moves
    # popped last, so the first stored move is executed last
    assert moves[0] == Move.HARD_DROP
    assert np.array_equal(grid.grid, before)


def test_full_board_gives_no_moves(grid):
    grid.grid[:] = 3
    shape = ShapePosition(ShapeKind.T, row=0, col=5, color=3)
    assert TetrisBot.decide_moves(grid, shape) == []


def test_blocked_below_spawn_gives_no_moves(grid):
    grid.grid[1:, :] = 3
    shape = ShapePosition(ShapeKind.I, row=0, col=5, color=0)
    grid.place(shape.cells(), shape.color)
    assert TetrisBot.decide_moves(grid, shape) == []


def test_bot_completes_the_open_row(grid):
    grid.grid[19, 4:] = 3
    shape = spawn_on(grid, ShapeKind.I)
    moves = TetrisBot.decide_moves(grid, shape)
    assert moves == TetrisBot.as_moves_sequence(True, 5, 0, TetrisBot.DROP_BIAS)


def test_pop_next_move_plays_in_execution_order(grid):
    shape = spawn_on(grid, ShapeKind.O)
    bot = TetrisBot()
    bot.update_policy(grid, shape)
    expected = list(reversed(bot.moves))
    popped = []
    while (move := bot.pop_next_move()) is not None:
        popped.append(move)
    assert popped == expected
    assert popped[-1] == Move.HARD_DROP
    assert bot.pop_next_move() is None


def test_played_moves_clear_the_row():
    game = TetrisGame(GameConfig(random_seed=3))
    game.grid.reset()
    game.grid.grid[19, 4:] = 3
    game.current_shape = spawn_on(game.grid, ShapeKind.I)
    game.bot = TetrisBot()
    game.bot.update_policy(game.grid, game.current_shape)

    settled = False
    while not settled:
        move = game.next_move()
        assert move is not None
        settled = game.apply_move(move)

    assert game.pieces_placed == 1
    assert game.score.total_lines_cleared == 1
    assert game.score.points == 40
    # only the freshly spawned piece is left
    assert np.sum(game.grid.grid != -1) == 4
