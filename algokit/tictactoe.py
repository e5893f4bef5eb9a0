"""Two-player tic-tac-toe on a numbered 3x3 board."""

from __future__ import annotations

import sys
from enum import Enum

MARKS = ("X", "O")
_LINES = (
    (1, 2, 3), (4, 5, 6), (7, 8, 9),
    (1, 4, 7), (2, 5, 8), (3, 6, 9),
    (1, 5, 9), (3, 5, 7),
)


class GameStatus(Enum):
    """State of a game."""

    WIN = 1
    DRAW = 0
    IN_PROGRESS = -1


class Board:
    """A board whose cells 1-9 show their number until a mark is placed."""

    def __init__(self) -> None:
        self.cells: dict[int, str] = {cell: str(cell) for cell in range(1, 10)}

    def place(self, cell: int, mark: str) -> None:
        """Put ``mark`` on a free cell; raises ValueError for an invalid move."""
        if mark not in MARKS:
            raise ValueError(f"mark must be one of {', '.join(MARKS)}")
        if self.cells.get(cell) != str(cell):
            raise ValueError(f"cell {cell} is not free")
        self.cells[cell] = mark

    def status(self) -> GameStatus:
        """Return whether someone has won, the board is full, or play goes on."""
        c = self.cells
        if any(c[a] == c[b] == c[d] for a, b, d in _LINES):
            return GameStatus.WIN
        if all(mark != str(cell) for cell, mark in c.items()):
            return GameStatus.DRAW
        return GameStatus.IN_PROGRESS

    def render(self) -> str:
        """Return the board drawn as text."""
        c = self.cells

        def row(a: int) -> str:
            return f"  {c[a]}  |  {c[a + 1]}  |  {c[a + 2]}\n"

        spacer = "     |     |     \n"
        divider = "_____|_____|_____\n"
        return (
            "\n\n\tTic Tac Toe\n\n"
            "Player 1 (X)  -  Player 2 (O)\n\n\n"
            + spacer + row(1) + divider
            + spacer + row(4) + divider
            + spacer + row(7)
            + spacer + "\n"
        )


def _words(stream):
    for line in stream:
        yield from line.split()


def main(argv=None) -> int:
    """Play a game on standard input and output."""
    board = Board()
    words = _words(sys.stdin)
    player = 1
    while board.status() is GameStatus.IN_PROGRESS:
        print(board.render(), end="")
        print(f"Player {player}, enter a number:  ", end="")
        word = next(words, None)
        if word is None:
            print()
            return 1
        try:
            board.place(int(word), MARKS[player - 1])
        except ValueError:
            print("Invalid move ")
            continue
        if board.status() is GameStatus.IN_PROGRESS:
            player = 3 - player
    print(board.render(), end="")
    if board.status() is GameStatus.WIN:
        print(f"==>\aPlayer {player} win ")
    else:
        print("==>\aGame draw")
    return 0


if __name__ == "__main__":
    sys.exit(main())