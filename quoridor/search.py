"""Alpha-beta minimax search that chooses the machine's moves.

Successors are numbered from 1 to 132. Numbers 1 to 4 are pawn moves, 5 to 68
are horizontal walls and 69 to 132 are vertical walls.
"""

from __future__ import annotations

from quoridor.board import Board, Direction, Player, Wall
from quoridor.distance import heuristic

WIN = 100
LOSS = -100
PAWN_MOVES = 4
FIRST_HORIZONTAL = 5
FIRST_VERTICAL = 69
LAST_WALL = 132

_MACHINE_STEPS = (Direction.DOWN, Direction.UP, Direction.LEFT, Direction.RIGHT)
_HUMAN_STEPS = (Direction.UP, Direction.DOWN, Direction.RIGHT, Direction.LEFT)


def decode_wall(index: int) -> Wall:
    """Wall squares for a successor number between 5 and 132."""
    if not FIRST_HORIZONTAL <= index <= LAST_WALL:
        raise ValueError(f"successor {index} is not a wall")
    if index < FIRST_VERTICAL:
        offset = index - FIRST_HORIZONTAL
        row = (offset // 8 + 1) * 2
        col = (offset % 8) * 2 + 1
        return ((row, col), (row, col + 2))
    offset = index - FIRST_VERTICAL
    row = (offset % 8) * 2 + 3
    col = (offset // 8 + 1) * 2
    return ((row, col), (row - 2, col))


def successor(board: Board, player: Player, index: int) -> Board | None:
    """Board after the given player makes move number ``index``.

    Returns None when the move is illegal. The original board is unchanged.
    """
    if not 1 <= index <= LAST_WALL:
        raise ValueError(f"successor {index} is out of range")
    child = board.copy()
    if index <= PAWN_MOVES:
        steps = _MACHINE_STEPS if player is Player.MACHINE else _HUMAN_STEPS
        if not child.move_pawn(player, steps[index - 1]):
            return None
    else:
        if not child.place_wall(decode_wall(index)):
            return None
        if player is Player.MACHINE:
            child.walls2 -= 1
        else:
            child.walls1 -= 1
    child.last_move = index
    return child


class Search:
    """Minimax with alpha-beta pruning; remembers the best root reply."""

    def __init__(self, root_depth: int) -> None:
        if root_depth < 0:
            raise ValueError("search depth cannot be negative")
        self.root_depth = root_depth
        self.best: Board | None = None

    def run(
        self,
        board: Board,
        depth: int,
        maximizing: bool,
        alpha: int = LOSS,
        beta: int = WIN,
    ) -> int:
        """Score of the position; the machine maximizes, the human minimizes."""
        human_won = board.p1[0] == Player.HUMAN.goal_row
        machine_won = board.p2[0] == Player.MACHINE.goal_row
        if human_won or machine_won:
            # The side that just moved has won, unless the machine pawn
            # still stands on the top row, which flips the score.
            flipped = board.p2[0] == 1
            if maximizing:
                return WIN if flipped else LOSS
            return LOSS if flipped else WIN
        if depth == 0:
            return heuristic(board)

        mover = Player.MACHINE if maximizing else Player.HUMAN
        walls_left = board.walls2 if maximizing else board.walls1
        last = PAWN_MOVES if walls_left == 0 else LAST_WALL
        for index in range(1, last + 1):
            child = successor(board, mover, index)
            if child is None:
                continue
            value = self.run(child, depth - 1, not maximizing, alpha, beta)
            if maximizing:
                if depth == self.root_depth and value > alpha:
                    self.best = child
                alpha = max(alpha, value)
            else:
                beta = min(beta, value)
            if beta <= alpha:
                break
        return alpha if maximizing else beta


def _best_reply(board: Board, depth: int) -> Board:
    search = Search(depth)
    search.run(board, depth, True)
    return search.best if search.best is not None else board.copy()


def machine_reply(board: Board, depth: int, shallow: bool) -> Board:
    """Board after the machine answers the human's last move.

    ``shallow`` is the easiest level: it looks two moves ahead once the human
    pawn is one row from winning. Otherwise, when the deep search settles on a
    pawn move, a one-move search makes the final choice.
    """
    if depth < 0:
        raise ValueError("search depth cannot be negative")
    if shallow and board.p1[0] == Player.HUMAN.goal_row + 2:
        return _best_reply(board, 2)
    chosen = _best_reply(board, depth)
    if chosen.last_move <= PAWN_MOVES:
        chosen = _best_reply(board, 1)
    return chosen