"""Shortest path lengths to the goal rows and the search heuristic."""

from __future__ import annotations

from collections import deque

from quoridor.board import SIZE, Board, Direction, Player


def _inside(row: int, col: int) -> bool:
    return 0 <= row < SIZE and 0 <= col < SIZE


def distance_to_goal(board: Board, player: Player) -> int:
    """Fewest single-cell moves the player's pawn needs to reach its goal row.

    Walls are respected; the other pawn does not block. Raises ValueError when
    the goal row cannot be reached.
    """
    labels = [row[:] for row in board.grid]
    start_row, start_col = board.position(player)
    labels[start_row][start_col] = 2
    queue = deque([(start_row, start_col)])
    while queue:
        row, col = queue.popleft()
        if row == player.goal_row:
            return labels[row][col] - 2
        for direction in Direction:
            d_row, d_col = direction.value
            slot_row, slot_col = row + d_row, col + d_col
            next_row, next_col = row + 2 * d_row, col + 2 * d_col
            if not (_inside(slot_row, slot_col) and _inside(next_row, next_col)):
                continue
            if labels[slot_row][slot_col] != 0:
                continue
            if labels[next_row][next_col] <= 1:
                labels[next_row][next_col] = labels[row][col] + 1
                queue.append((next_row, next_col))
    raise ValueError(f"{player.name.lower()} pawn cannot reach its goal row")


def heuristic(board: Board) -> int:
    """Human distance minus machine distance; higher favours the machine."""
    return distance_to_goal(board, Player.HUMAN) - distance_to_goal(
        board, Player.MACHINE
    )