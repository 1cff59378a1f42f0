"""Cursor that the human moves around the board to choose a wall."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from quoridor.board import SIZE, Board, Wall

PREVIEW = 2
_LOW = 1
_HIGH = SIZE - 2


class CursorAction(Enum):
    """Ways the wall cursor can be changed."""

    ROTATE = 1
    UP = 2
    DOWN = 3
    LEFT = 4
    RIGHT = 5


_SHIFTS = {
    CursorAction.UP: (-2, 0),
    CursorAction.DOWN: (2, 0),
    CursorAction.LEFT: (0, -2),
    CursorAction.RIGHT: (0, 2),
}


@dataclass
class WallCursor:
    """Position of the wall being chosen, starting in the middle of the board."""

    wall: Wall = ((8, 9), (8, 11))

    @property
    def horizontal(self) -> bool:
        """Whether the wall lies along a row."""
        return self.wall[0][0] == self.wall[1][0]

    def apply(self, action: CursorAction) -> Wall:
        """Rotate or shift the wall; a shift off the board is ignored."""
        (r0, c0), (r1, c1) = self.wall
        if action is CursorAction.ROTATE:
            if self.horizontal:
                self.wall = ((r0 + 1, c0 + 1), (r1 - 1, c1 - 1))
            else:
                self.wall = ((r0 - 1, c0 - 1), (r1 + 1, c1 + 1))
            return self.wall
        d_row, d_col = _SHIFTS[action]
        moved = ((r0 + d_row, c0 + d_col), (r1 + d_row, c1 + d_col))
        axis = 0 if d_row else 1
        if all(_LOW <= square[axis] <= _HIGH for square in moved):
            self.wall = moved
        return self.wall

    def preview(self, board: Board) -> Board:
        """Copy of the board with the cursor's squares marked for display."""
        shown = board.copy()
        for row, col in self.wall:
            shown.grid[row][col] = PREVIEW
        return shown