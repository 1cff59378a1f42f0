"""Game flow: human moves, machine replies, win detection and the window loop."""

from __future__ import annotations

import argparse
import sys
import time
from enum import Enum

import pygame

from quoridor.board import BLOCKED, Board, Direction, Player, Wall, new_board
from quoridor.cursor import CursorAction, WallCursor
from quoridor.render import Window
from quoridor.search import machine_reply
from quoridor.textview import render_text

PROMPT = (
    "Input difficulty level \n"
    " 1: Easy 2: Medium 3: Hard 4+: Harder (Experimental)"
    " 8+: Nightmare (UberExperimental) \n"
)

_PAWN_KEYS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}

_CURSOR_KEYS = {
    pygame.K_r: CursorAction.ROTATE,
    pygame.K_UP: CursorAction.UP,
    pygame.K_DOWN: CursorAction.DOWN,
    pygame.K_LEFT: CursorAction.LEFT,
    pygame.K_RIGHT: CursorAction.RIGHT,
}


class Outcome(Enum):
    """State of the game from the human's point of view."""

    ONGOING = "ongoing"
    HUMAN_WON = "won"
    MACHINE_WON = "lost"


def apply_machine_move(board: Board, move: Direction | Wall) -> bool:
    """Apply a machine pawn step or set a wall's squares without checking them.

    Returns whether a pawn step was possible; a wall is always set.
    """
    if isinstance(move, Direction):
        return board.move_pawn(Player.MACHINE, move)
    for row, col in move:
        board.grid[row][col] = BLOCKED
    return True


class Game:
    """A game between the human and the machine at a given search depth."""

    def __init__(self, depth: int) -> None:
        if depth < 0:
            raise ValueError("difficulty level cannot be negative")
        self.depth = depth
        self.shallow = depth == 1
        self.board = new_board()

    def outcome(self) -> Outcome:
        """Whether someone has reached their goal row."""
        if self.board.p1[0] == Player.HUMAN.goal_row:
            return Outcome.HUMAN_WON
        if self.board.p2[0] == Player.MACHINE.goal_row:
            return Outcome.MACHINE_WON
        return Outcome.ONGOING

    def _ensure_ongoing(self) -> None:
        if self.outcome() is not Outcome.ONGOING:
            raise RuntimeError("the game is over")

    def _respond(self) -> None:
        if self.outcome() is Outcome.ONGOING:
            self.board = machine_reply(self.board, self.depth, self.shallow)

    def human_move(self, direction: Direction) -> bool:
        """Move the human pawn and let the machine answer.

        Returns False, changing nothing, when the move is blocked.
        """
        self._ensure_ongoing()
        if not self.board.move_pawn(Player.HUMAN, direction):
            return False
        self._respond()
        return True

    def human_wall(self, wall: Wall) -> bool:
        """Place a wall for the human and let the machine answer.

        Returns False, changing nothing, when no walls are left or the wall
        is illegal.
        """
        self._ensure_ongoing()
        if self.board.walls1 <= 0:
            return False
        if not self.board.place_wall(wall):
            return False
        self.board.walls1 -= 1
        self._respond()
        return True


def _depth(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid difficulty level: {text!r}")
    if value < 0:
        raise argparse.ArgumentTypeError("difficulty level cannot be negative")
    return value


def _format_wall(wall: Wall) -> str:
    (r0, c0), (r1, c1) = wall
    return f"Wall: ({r0},{c0}):({r1},{c1}) "


def _report(window: Window, game: Game, started: int) -> None:
    print(f"T: {time.perf_counter_ns() - started}")
    print(render_text(game.board), end="")
    window.show(game.board)


def _play_key(window: Window, game: Game, key: int) -> WallCursor | None:
    if key == pygame.K_p:
        if game.board.walls1 <= 0:
            return None
        print("p ")
        cursor = WallCursor()
        window.show_preview(cursor.preview(game.board))
        print(_format_wall(cursor.wall))
        return cursor
    direction = _PAWN_KEYS.get(key)
    if direction is not None:
        started = time.perf_counter_ns()
        if game.human_move(direction):
            print(f"{direction.name.capitalize()} ")
            _report(window, game, started)
    elif key == pygame.K_F5:
        print("Display updated ")
        pygame.display.flip()
    return None


def _wall_key(
    window: Window, game: Game, cursor: WallCursor, key: int
) -> WallCursor | None:
    if key == pygame.K_ESCAPE:
        print("Wall cancelled. ")
        window.show(game.board)
        return None
    if key == pygame.K_RETURN:
        started = time.perf_counter_ns()
        if game.human_wall(cursor.wall):
            print("Placed. ")
            _report(window, game, started)
            return None
        return cursor
    action = _CURSOR_KEYS.get(key)
    if action is not None:
        cursor.apply(action)
        print(_format_wall(cursor.wall))
        window.show_preview(cursor.preview(game.board))
    elif key == pygame.K_u:
        print("Display updated ")
        pygame.display.flip()
    return cursor


def _play(window: Window, game: Game) -> None:
    window.show(game.board)
    cursor: WallCursor | None = None
    clock = pygame.time.Clock()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return
            if event.type != pygame.KEYDOWN:
                continue
            if cursor is None:
                cursor = _play_key(window, game, event.key)
            else:
                cursor = _wall_key(window, game, cursor, event.key)
            outcome = game.outcome()
            if outcome is Outcome.HUMAN_WON:
                print("\n \n \n You won! \n \n \n")
                return
            if outcome is Outcome.MACHINE_WON:
                print("\n \n \n You have been defeated. \n \n \n")
                return
        clock.tick(60)


def main(argv: list[str] | None = None) -> int:
    """Ask for a difficulty level, then play a game in a window."""
    parser = argparse.ArgumentParser(
        prog="quoridor", description="Play Quoridor against the machine."
    )
    parser.add_argument(
        "--depth", type=_depth, help="difficulty level (search depth)"
    )
    args = parser.parse_args(argv)
    depth = args.depth
    if depth is None:
        try:
            depth = _depth(input(PROMPT).strip())
        except (argparse.ArgumentTypeError, EOFError) as exc:
            print(f"quoridor: {exc or 'no difficulty level given'}", file=sys.stderr)
            return 2
    game = Game(depth)
    print(render_text(game.board), end="")
    try:
        window = Window()
    except RuntimeError as exc:
        print(f"Failed to initialize the display! {exc}", file=sys.stderr)
        return 1
    with window:
        _play(window, game)
    return 0