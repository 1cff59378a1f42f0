"""Board state of a two-player Quoridor game: pawns, walls and their rules.

The board is a 19x19 grid. Odd/odd squares are cells that pawns stand on.
Squares with one even coordinate are wall slots between two cells. The outer
ring is the border. A square holding 1 is blocked: a border, a placed wall
segment or a pawn. A square holding 0 is free.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum

SIZE = 19
FREE = 0
BLOCKED = 1

Square = tuple[int, int]
Wall = tuple[Square, Square]


class Player(Enum):
    """The two sides: the human starts at the bottom, the machine at the top."""

    HUMAN = 1
    MACHINE = 2

    @property
    def goal_row(self) -> int:
        """Row of cells this player must reach to win."""
        return 1 if self is Player.HUMAN else SIZE - 2


class Direction(Enum):
    """Pawn directions as (row, column) unit offsets, in search order."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


def _inside(square: Square) -> bool:
    row, col = square
    return 0 <= row < SIZE and 0 <= col < SIZE


def _at(grid: list[list[int]], square: Square) -> int:
    """Value of a square; anything off the grid counts as blocked."""
    if not _inside(square):
        return BLOCKED
    row, col = square
    return grid[row][col]


def _empty_grid() -> list[list[int]]:
    return [[FREE] * SIZE for _ in range(SIZE)]


@dataclass
class Board:
    """Full game state: grid, pawn positions, distances and walls left."""

    grid: list[list[int]] = field(default_factory=_empty_grid)
    p1: Square = (SIZE - 2, 9)
    p2: Square = (1, 9)
    d1: int = 8
    d2: int = 7
    walls1: int = 10
    walls2: int = 10
    last_move: int = 0

    def position(self, player: Player) -> Square:
        """Square on which the given player's pawn stands."""
        return self.p1 if player is Player.HUMAN else self.p2

    def _set_position(self, player: Player, square: Square) -> None:
        if player is Player.HUMAN:
            self.p1 = square
        else:
            self.p2 = square

    def copy(self) -> Board:
        """Independent copy of the board."""
        return Board(
            grid=[row[:] for row in self.grid],
            p1=self.p1,
            p2=self.p2,
            d1=self.d1,
            d2=self.d2,
            walls1=self.walls1,
            walls2=self.walls2,
            last_move=self.last_move,
        )

    def move_pawn(self, player: Player, direction: Direction) -> bool:
        """Move a pawn one cell, jumping an adjacent pawn when it is in the way.

        Returns False, leaving the board untouched, when a wall or the border
        blocks the move or the jump.
        """
        d_row, d_col = direction.value
        row, col = self.position(player)

        def ahead(steps: int) -> Square:
            return (row + steps * d_row, col + steps * d_col)

        if _at(self.grid, ahead(1)) == BLOCKED:
            return False
        if _at(self.grid, ahead(2)) == BLOCKED:
            if _at(self.grid, ahead(3)) == BLOCKED:
                return False
            target = ahead(4)
        else:
            target = ahead(2)
        self.grid[row][col] = FREE
        self.grid[target[0]][target[1]] = BLOCKED
        self._set_position(player, target)
        return True

    def place_wall(self, wall: Wall) -> bool:
        """Place a two-segment wall if it is legal; return whether it was placed.

        A wall is refused when a segment is taken, when it crosses another wall,
        or when it would cut either pawn off from its goal row.
        """
        for square in wall:
            if not _inside(square):
                raise ValueError(f"wall square {square} lies outside the board")
        (r0, c0), (r1, c1) = wall
        if self.grid[r0][c0] == BLOCKED or self.grid[r1][c1] == BLOCKED:
            return False
        if r0 == r1:
            crossing = ((r0 + 1, c0 + 1), (r1 - 1, c1 - 1))
        else:
            crossing = ((r0 - 1, c0 - 1), (r1 + 1, c1 + 1))
        if all(_at(self.grid, square) == BLOCKED for square in crossing):
            return False
        if not paths_remain_open(self, wall):
            return False
        self.grid[r0][c0] = BLOCKED
        self.grid[r1][c1] = BLOCKED
        return True


def new_board() -> Board:
    """Starting position: border set, pawns in the middle of opposite rows."""
    board = Board()
    last = SIZE - 1
    for i in range(SIZE):
        board.grid[0][i] = BLOCKED
        board.grid[i][0] = BLOCKED
        board.grid[i][last] = BLOCKED
        board.grid[last][i] = BLOCKED
    for row, col in (board.p1, board.p2):
        board.grid[row][col] = BLOCKED
    return board


def _reaches(grid: list[list[int]], start: Square, goal_row: int) -> bool:
    """Breadth-first search over free cells; marks visited cells in grid."""
    grid[start[0]][start[1]] = BLOCKED
    queue = deque([start])
    while queue:
        row, col = queue.popleft()
        if row == goal_row:
            return True
        for direction in Direction:
            d_row, d_col = direction.value
            slot = (row + d_row, col + d_col)
            target = (row + 2 * d_row, col + 2 * d_col)
            if _at(grid, slot) == FREE and _at(grid, target) == FREE:
                grid[target[0]][target[1]] = BLOCKED
                queue.append(target)
    return False


def paths_remain_open(board: Board, wall: Wall) -> bool:
    """Whether both pawns could still reach their goal rows with the wall added.

    Each pawn may pass through the other pawn's cell. The board is not changed.
    """
    walled = [row[:] for row in board.grid]
    for row, col in wall:
        walled[row][col] = BLOCKED

    human_grid = [row[:] for row in walled]
    human_grid[board.p2[0]][board.p2[1]] = FREE
    if not _reaches(human_grid, board.p1, Player.HUMAN.goal_row):
        return False

    machine_grid = [row[:] for row in walled]
    machine_grid[board.p1[0]][board.p1[1]] = FREE
    return _reaches(machine_grid, board.p2, Player.MACHINE.goal_row)