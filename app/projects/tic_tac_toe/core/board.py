"""
3x3 board model for Tic-Tac-Toe.
"""
import enum

from app.projects.tic_tac_toe.core.errors import InvalidMoveError

SIZE = 3


class Cell(enum.Enum):
    Empty = " "
    X = "X"
    O = "O"

    def opponent(self):
        """The other player's mark. Only meaningful for X and O."""
        if self is Cell.X:
            return Cell.O
        if self is Cell.O:
            return Cell.X
        raise ValueError("Empty cell has no opponent")


class Board:
    """Fixed 3x3 grid of cells. Marks are only cleared by initialize()."""

    def __init__(self):
        self._cells = []
        self.initialize()

    def initialize(self):
        self._cells = [[Cell.Empty for _ in range(SIZE)] for _ in range(SIZE)]

    def get(self, row: int, col: int) -> Cell:
        return self._cells[row][col]

    def is_valid_move(self, row: int, col: int) -> bool:
        return (
            0 <= row < SIZE
            and 0 <= col < SIZE
            and self._cells[row][col] is Cell.Empty
        )

    def is_full(self) -> bool:
        return all(cell is not Cell.Empty for row in self._cells for cell in row)

    def place(self, row: int, col: int, mark: Cell):
        if mark is Cell.Empty or not self.is_valid_move(row, col):
            raise InvalidMoveError()
        self._cells[row][col] = mark

    def rows(self) -> list[list[str]]:
        """Board as nested lists of wire strings ("X", "O" or " ")."""
        return [[cell.value for cell in row] for row in self._cells]
