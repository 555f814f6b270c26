"""
Errors raised by the Tic-Tac-Toe game core.
Each one rejects a single request and leaves the game untouched.
"""


class GameError(Exception):
    """Base class for rejected moves. Routes turn these into 400 responses."""
    status_code = 400
    default_message = "Bad request"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class GameOverError(GameError):
    default_message = "Game over"


class MalformedRequestError(GameError):
    default_message = "Invalid request parameters"


class InvalidMoveError(GameError):
    default_message = "Invalid move"
