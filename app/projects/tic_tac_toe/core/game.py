"""
Tic-Tac-Toe game state machine.

One TicTacToeGame holds the board, whose turn it is, whether the game is
still accepting moves, and the running score for each player. Scores survive
reset(); everything else starts over.
"""
import enum
import logging

from app.projects.tic_tac_toe.core.board import Board, Cell
from app.projects.tic_tac_toe.core.errors import GameOverError, InvalidMoveError
from app.projects.tic_tac_toe.core.moves import has_winning_line

logger = logging.getLogger(__name__)

DRAW_MESSAGE = "It's a draw!"


class GameStatus(enum.Enum):
    InProgress = "InProgress"
    Won = "Won"
    Draw = "Draw"


class TicTacToeGame:
    def __init__(self):
        self.board = Board()
        self.current_player = Cell.X
        self.status = GameStatus.InProgress
        self.message = ""
        self.score_x = 0
        self.score_o = 0

    @property
    def active(self) -> bool:
        return self.status == GameStatus.InProgress

    def apply_move(self, row: int, col: int) -> dict:
        """
        Place the current player's mark at (row, col) and resolve the turn.

        Raises GameOverError if the game has finished and InvalidMoveError if
        the cell is off the board or taken. Neither changes any state.
        Returns the snapshot after the move.
        """
        if not self.active:
            raise GameOverError()
        if not self.board.is_valid_move(row, col):
            raise InvalidMoveError()

        mover = self.current_player
        self.board.place(row, col, mover)

        if has_winning_line(self.board, mover):
            self.status = GameStatus.Won
            self._add_win(mover)
            self.message = f"Player {mover.value} wins!"
            logger.info("Player %s won (X=%d, O=%d)", mover.value, self.score_x, self.score_o)
        elif self.board.is_full():
            self.status = GameStatus.Draw
            self.message = DRAW_MESSAGE
            logger.info("Game ended in a draw")
        else:
            self.current_player = mover.opponent()
            self.message = ""

        return self.snapshot()

    def reset(self) -> dict:
        """Start a new game. X moves first; scores are kept."""
        self.board.initialize()
        self.current_player = Cell.X
        self.status = GameStatus.InProgress
        self.message = ""
        return self.snapshot()

    def _add_win(self, mark: Cell):
        if mark is Cell.X:
            self.score_x += 1
        else:
            self.score_o += 1

    def snapshot(self) -> dict:
        return {
            "board": self.board.rows(),
            "currentPlayer": self.current_player.value,
            "message": self.message,
            "gameActive": self.active,
            "scoreX": self.score_x,
            "scoreO": self.score_o,
        }
