# quoridor

This is Quoridor for one person against the computer. You play the bottom pawn
and race to the top row. The machine plays the top pawn and races to the bottom
row. Each side has ten walls to block the other with. A wall is refused in
three cases:

- one of its squares is already taken;
- it crosses another wall;
- it would cut either pawn off from its goal row.

The machine picks its move with a depth-limited minimax search that uses
alpha-beta pruning. It scores a position as the human pawn's shortest distance
to goal minus the machine pawn's shortest distance to goal.

## Installing

```
pip install .
```

This also installs `pygame`, which draws the board.

## Playing

```
quoridor
```

The game asks for a difficulty level on the terminal. The level is the depth
of the search:

- 1: easy
- 2: medium
- 3: hard
- 4 and up: harder, and slower
- 8 and up: very slow

To skip the question, give the level on the command line:

```
quoridor --depth 2
```

If the level is not a whole number, or is negative, the command stops with
exit status 2. If the window cannot be opened, it stops with exit status 1.

Once the level is set, a window opens with the board. The text view of the
board is printed to the terminal at the start and again after each move, along
with the time the machine took to reply. The text view shows:

- both pawn positions;
- the walls each side has left;
- both distances to goal;
- the heuristic score;
- the number of the machine's last move.

### Keys

| Key | Action |
| --- | --- |
| Arrow keys | move your pawn; you jump over the machine's pawn when it is directly in the way |
| `P` | start placing a wall, if you have any left |
| `F5` | redraw the window |

While you are placing a wall:

| Key | Action |
| --- | --- |
| Arrow keys | move the wall preview; a move that would leave the board is ignored |
| `R` | rotate the wall between horizontal and vertical |
| `Enter` | place the wall if it is legal, otherwise keep placing |
| `Esc` | cancel |
| `U` | redraw the window |

You win when your pawn reaches the top row. You lose when the machine's pawn
reaches the bottom row. Closing the window ends the game.

## Using the library

The rules, the search and the text view work without a window:

```python
from quoridor.board import Direction, Player, new_board
from quoridor.distance import distance_to_goal, heuristic
from quoridor.textview import render_text
from quoridor.game import Game

board = new_board()
print(distance_to_goal(board, Player.HUMAN), heuristic(board))
print(render_text(board))

game = Game(depth=2)
game.human_move(Direction.UP)   # the machine answers straight away
print(game.outcome())
```

The modules:

- `quoridor.board` holds the 19x19 grid, the pawns and the walls. It provides
  `Board`, `Player`, `Direction`, `new_board()` and `paths_remain_open()`.
  - `Board.move_pawn()` and `Board.place_wall()` return `False` when a move or
    a wall is not allowed.
- `quoridor.distance` provides `distance_to_goal()` and `heuristic()`.
- `quoridor.search` provides:
  - `Search`, the alpha-beta minimax search;
  - `successor()` and `decode_wall()`, which turn the move numbers 1 to 132
    into boards and walls;
  - `machine_reply()`, which picks the machine's answer to a position.
- `quoridor.textview` provides `render_text()`.
- `quoridor.cursor` provides `WallCursor` and `CursorAction`, which move the
  wall being chosen.
- `quoridor.render` provides:
  - `draw_board()` and `draw_preview()`, which draw onto a pygame surface;
  - `cell_rect()`, `vertical_wall_rect()` and `horizontal_wall_rect()`;
  - `Window`, which can be used as a context manager.
- `quoridor.game` provides `Game`, `Outcome`, `apply_machine_move()` and the
  `main()` function behind the `quoridor` command.
  - `Game.human_move()` and `Game.human_wall()` raise `RuntimeError` once the
    game is over.

## Limits

The game is always one human against the machine, in a single window. It has
no two-player mode, no undo, and no way to save or load a game.

## Running the tests

```
pip install .[test]
pytest
```