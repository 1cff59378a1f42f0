import pytest

from quoridor.board import Direction, Player, new_board
from quoridor.distance import distance_to_goal, heuristic


def _place_pawn(board, player, square):
    old_row, old_col = board.position(player)
    board.grid[old_row][old_col] = 0
    board.grid[square[0]][square[1]] = 1
    if player is Player.HUMAN:
        board.p1 = square
    else:
        board.p2 = square


def test_initial_human_distance():
    assert distance_to_goal(new_board(), Player.HUMAN) == 8


def test_initial_distances_are_symmetric():
    board = new_board()
    assert distance_to_goal(board, Player.HUMAN) == distance_to_goal(
        board, Player.MACHINE
    )


def test_initial_heuristic_is_balanced():
    assert heuristic(new_board()) == 0


def test_advancing_reduces_distance():
    board = new_board()
    before = distance_to_goal(board, Player.HUMAN)
    board.move_pawn(Player.HUMAN, Direction.UP)
    assert distance_to_goal(board, Player.HUMAN) == before - 1
    assert heuristic(board) < 0


def test_machine_advance_raises_heuristic():
    board = new_board()
    before = heuristic(board)
    board.move_pawn(Player.MACHINE, Direction.DOWN)
    assert heuristic(board) > before


def test_sideways_move_keeps_distance():
    board = new_board()
    before = distance_to_goal(board, Player.HUMAN)
    board.move_pawn(Player.HUMAN, Direction.LEFT)
    assert distance_to_goal(board, Player.HUMAN) == before


def test_wall_forces_detour():
    board = new_board()
    before = distance_to_goal(board, Player.HUMAN)
    assert board.place_wall(((16, 9), (16, 11))) is True
    assert distance_to_goal(board, Player.HUMAN) > before


def test_opponent_pawn_does_not_block_path():
    board = new_board()
    free = distance_to_goal(board, Player.HUMAN)
    _place_pawn(board, Player.MACHINE, (15, 9))
    assert distance_to_goal(board, Player.HUMAN) == free


def test_distance_on_goal_row_is_zero():
    board = new_board()
    _place_pawn(board, Player.HUMAN, (1, 3))
    assert distance_to_goal(board, Player.HUMAN) == 0


def test_unreachable_goal_raises():
    board = new_board()
    for col in range(1, 18, 2):
        board.grid[16][col] = 1
    with pytest.raises(ValueError):
        distance_to_goal(board, Player.HUMAN)
    with pytest.raises(ValueError):
        heuristic(board)


def test_distance_does_not_change_board():
    board = new_board()
    board.place_wall(((8, 9), (8, 11)))
    original = board.copy()
    distance_to_goal(board, Player.MACHINE)
    distance_to_goal(board, Player.HUMAN)
    assert board == original