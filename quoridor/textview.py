"""Plain-text picture of the board with a summary of the game state."""

from __future__ import annotations

from quoridor.board import BLOCKED, SIZE, Board, Player
from quoridor.distance import distance_to_goal

HUMAN_MARK = "o"
MACHINE_MARK = "x"
EMPTY_MARK = "□"


def _cell_row(board: Board, row: int) -> str:
    parts = [" |"]
    for col in range(1, SIZE - 1, 2):
        if (row, col) == board.p1:
            parts.append(HUMAN_MARK)
        elif (row, col) == board.p2:
            parts.append(MACHINE_MARK)
        else:
            parts.append(EMPTY_MARK)
        parts.append("|" if board.grid[row][col + 1] == BLOCKED else " ")
    return "".join(parts)


def _wall_row(board: Board, row: int) -> str:
    parts = [" |"]
    for col in range(1, SIZE - 1):
        if col % 2 and board.grid[row][col] == BLOCKED:
            parts.append("_")
        else:
            parts.append(" ")
    return "".join(parts)


def render_text(board: Board) -> str:
    """Board drawing followed by positions, walls left, distances and last move."""
    lines = [
        _cell_row(board, row) if row % 2 else _wall_row(board, row)
        for row in range(1, SIZE - 1)
    ]
    d1 = distance_to_goal(board, Player.HUMAN)
    d2 = distance_to_goal(board, Player.MACHINE)
    lines += [
        f"Position 1: ({board.p1[0]},{board.p1[1]}) ",
        f"Position 2: ({board.p2[0]},{board.p2[1]}) ",
        f"Walls left 1: {board.walls1}",
        f"Walls left 2: {board.walls2}",
        f"Distance 1: {d1}",
        f"Distance 2: {d2}",
        f"Heuristic Measure : {d1 - d2}",
        f"Last Machine Move: {board.last_move}",
    ]
    return "".join(line + "\n" for line in lines)