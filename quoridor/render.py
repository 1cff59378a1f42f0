"""Graphical view of the board drawn with pygame."""

from __future__ import annotations

import pygame

from quoridor.board import BLOCKED, SIZE, Board
from quoridor.cursor import PREVIEW

SCREEN_WIDTH = 1200
SCREEN_HEIGHT = 680
TITLE = "Quoridor"

BACKGROUND = (0xFF, 0xFF, 0xFF)
HUMAN_COLOR = (0xFF, 0xCC, 0x66)
MACHINE_COLOR = (0x6E, 0x2C, 0x67)
CELL_COLOR = (0x8B, 0x45, 0x13)
WALL_COLOR = (0x00, 0x00, 0x00)
PREVIEW_COLOR = (0x5B, 0x5B, 0x5B)

_STEP_X = SCREEN_WIDTH // 11
_STEP_Y = SCREEN_HEIGHT // 11
_ORIGIN_X = 50 + _STEP_X
_ORIGIN_Y = _STEP_Y
_CELL_W = SCREEN_WIDTH // 12
_CELL_H = SCREEN_HEIGHT // 12
_VERTICAL_WALL_W = 17
_HORIZONTAL_WALL_H = 6

_HUMAN_LEGEND = pygame.Rect(30, 170, 40, 30)
_MACHINE_LEGEND = pygame.Rect(90, 170, 40, 30)
_OUTLINE = pygame.Rect(192, 95, 973, 545)
_COUNTER_TOP = 200
_COUNTER_STEP = 34


def _check(row: int, col: int, row_odd: bool, col_odd: bool, what: str) -> None:
    if not (1 <= row <= SIZE - 2 and 1 <= col <= SIZE - 2):
        raise ValueError(f"square ({row},{col}) is not inside the playing area")
    if bool(row % 2) != row_odd or bool(col % 2) != col_odd:
        raise ValueError(f"square ({row},{col}) is not a {what}")


def cell_rect(row: int, col: int) -> pygame.Rect:
    """Screen rectangle of the cell at an odd row and odd column."""
    _check(row, col, True, True, "cell")
    return pygame.Rect(
        _ORIGIN_X + _STEP_X * (col - 1) // 2 + 34,
        _ORIGIN_Y + _STEP_Y * (row - 1) // 2 + 34,
        _CELL_W,
        _CELL_H,
    )


def vertical_wall_rect(row: int, col: int) -> pygame.Rect:
    """Screen rectangle of the wall slot between two cells of one row."""
    _check(row, col, True, False, "vertical wall slot")
    return pygame.Rect(
        _ORIGIN_X + _STEP_X * col // 2 + 25,
        _ORIGIN_Y + _STEP_Y * (row - 1) // 2 + 34,
        _VERTICAL_WALL_W,
        _CELL_H,
    )


def horizontal_wall_rect(row: int, col: int) -> pygame.Rect:
    """Screen rectangle of the wall slot between two cells of one column."""
    _check(row, col, False, True, "horizontal wall slot")
    return pygame.Rect(
        _ORIGIN_X + _STEP_X * (col - 1) // 2 + 34,
        _ORIGIN_Y + _STEP_Y * (row - 1) // 2 + 60,
        _CELL_W,
        _HORIZONTAL_WALL_H,
    )


def _draw_cells(surface: pygame.Surface, board: Board, row: int) -> None:
    for col in range(1, SIZE - 1, 2):
        if (row, col) == board.p1:
            color = HUMAN_COLOR
        elif (row, col) == board.p2:
            color = MACHINE_COLOR
        else:
            color = CELL_COLOR
        pygame.draw.rect(surface, color, cell_rect(row, col))


def _draw_panel(surface: pygame.Surface, board: Board) -> None:
    pygame.draw.rect(surface, HUMAN_COLOR, _HUMAN_LEGEND)
    pygame.draw.rect(surface, MACHINE_COLOR, _MACHINE_LEGEND)
    for left, count in ((30, board.walls1), (90, board.walls2)):
        for i in range(1, count + 1):
            rect = pygame.Rect(left, _COUNTER_TOP + _COUNTER_STEP * i, 40, 4)
            pygame.draw.rect(surface, WALL_COLOR, rect)
    pygame.draw.rect(surface, WALL_COLOR, _OUTLINE, 1)


def _slots(row: int):
    """Wall slots of a board row with the rectangle function that draws them."""
    if row % 2:
        return [(col, vertical_wall_rect) for col in range(2, SIZE - 1, 2)]
    return [(col, horizontal_wall_rect) for col in range(1, SIZE - 1, 2)]


def draw_board(surface: pygame.Surface, board: Board) -> None:
    """Draw pawns, cells, placed walls and the walls-left panel."""
    surface.fill(BACKGROUND)
    for row in range(1, SIZE - 1):
        for col, rect_of in _slots(row):
            placed = board.grid[row][col] == BLOCKED
            if placed:
                pygame.draw.rect(surface, WALL_COLOR, rect_of(row, col))
            elif row % 2:
                pygame.draw.rect(surface, BACKGROUND, rect_of(row, col))
        if row % 2:
            _draw_cells_in_order(surface, board, row)
    _draw_panel(surface, board)


def _draw_cells_in_order(surface: pygame.Surface, board: Board, row: int) -> None:
    # Cells and vertical slots alternate left to right, each drawn over the last.
    for col in range(1, SIZE - 1):
        if col % 2:
            if (row, col) == board.p1:
                color = HUMAN_COLOR
            elif (row, col) == board.p2:
                color = MACHINE_COLOR
            else:
                color = CELL_COLOR
            pygame.draw.rect(surface, color, cell_rect(row, col))
        else:
            color = WALL_COLOR if board.grid[row][col] == BLOCKED else BACKGROUND
            pygame.draw.rect(surface, color, vertical_wall_rect(row, col))


def draw_preview(surface: pygame.Surface, board: Board) -> None:
    """Draw the board with the squares of a wall being chosen shown in grey."""
    surface.fill(BACKGROUND)
    for row in range(1, SIZE - 1):
        if row % 2:
            for col in range(1, SIZE - 1):
                if col % 2:
                    _draw_cells_one(surface, board, row, col)
                else:
                    _draw_preview_slot(surface, board, row, col, vertical_wall_rect)
        else:
            for col in range(1, SIZE - 1, 2):
                _draw_preview_slot(surface, board, row, col, horizontal_wall_rect)
    _draw_panel(surface, board)


def _draw_cells_one(surface: pygame.Surface, board: Board, row: int, col: int) -> None:
    if (row, col) == board.p1:
        color = HUMAN_COLOR
    elif (row, col) == board.p2:
        color = MACHINE_COLOR
    else:
        color = CELL_COLOR
    pygame.draw.rect(surface, color, cell_rect(row, col))


def _draw_preview_slot(surface, board: Board, row: int, col: int, rect_of) -> None:
    value = board.grid[row][col]
    rect = rect_of(row, col)
    if value == PREVIEW:
        pygame.draw.rect(surface, PREVIEW_COLOR, rect)
        pygame.draw.rect(surface, WALL_COLOR, rect, 1)
    elif value == BLOCKED:
        pygame.draw.rect(surface, WALL_COLOR, rect)


class Window:
    """The game window; usable as a context manager that closes it on exit."""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> None:
        try:
            pygame.display.init()
            self.surface = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            pygame.display.quit()
            raise RuntimeError(f"window could not be created: {exc}") from exc
        pygame.display.set_caption(TITLE)
        self.surface.fill(BACKGROUND)

    def show(self, board: Board) -> None:
        """Draw the board and put it on screen."""
        draw_board(self.surface, board)
        pygame.display.flip()

    def show_preview(self, board: Board) -> None:
        """Draw the board with a wall preview and put it on screen."""
        draw_preview(self.surface, board)
        pygame.display.flip()

    def close(self) -> None:
        """Close the window and shut the display down."""
        pygame.display.quit()

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()