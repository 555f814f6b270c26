"""
Owner of the shared game. Every request that reads or changes the game goes
through a GameService so that moves and resets never interleave.
"""
import logging
import threading

from app.projects.tic_tac_toe.core.errors import GameOverError
from app.projects.tic_tac_toe.core.game import TicTacToeGame
from app.projects.tic_tac_toe.core.moves import parse_coordinate

logger = logging.getLogger(__name__)


class GameService:
    def __init__(self, strict_coordinates=False):
        self.strict_coordinates = strict_coordinates
        self._game = TicTacToeGame()
        self._lock = threading.Lock()

    def make_move(self, raw_row, raw_col):
        """
        Parse raw query values and apply the move atomically.
        Returns the snapshot; raises a GameError subclass on rejection.
        """
        with self._lock:
            # A finished game rejects before the coordinates are looked at
            if not self._game.active:
                raise GameOverError()
            row = parse_coordinate(raw_row, strict=self.strict_coordinates)
            col = parse_coordinate(raw_col, strict=self.strict_coordinates)
            return self._game.apply_move(row, col)

    def reset(self):
        with self._lock:
            return self._game.reset()

    def snapshot(self):
        with self._lock:
            return self._game.snapshot()
