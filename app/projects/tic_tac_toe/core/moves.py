"""
Move helpers: coordinate parsing from query strings and the win check.
"""
import re

from app.projects.tic_tac_toe.core.board import SIZE, Board, Cell
from app.projects.tic_tac_toe.core.errors import MalformedRequestError

# Leading integer, as read by a scanf-style "%d"
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)", re.ASCII)
_WHOLE_INT = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)

# Values outside a signed 64-bit int don't scan and read as 0
_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1


def parse_coordinate(raw, strict: bool = False) -> int:
    """
    Turn a raw query value into a board coordinate.

    Missing or empty values are always rejected. In lenient mode a non-empty
    value is read up to its first non-digit, and anything without a leading
    integer becomes 0 (so "1abc" -> 1 and "abc" -> 0). Only ASCII digits
    count, and a number too large for a signed 64-bit int also reads as 0.
    In strict mode the whole value must be an ASCII integer.
    """
    if raw is None or raw == "":
        raise MalformedRequestError()

    if strict:
        if not _WHOLE_INT.fullmatch(raw):
            raise MalformedRequestError()
        return int(raw.strip())

    match = _LEADING_INT.match(raw)
    if not match:
        return 0
    value = int(match.group(1))
    if not _INT64_MIN <= value <= _INT64_MAX:
        return 0
    return value


def has_winning_line(board: Board, mark: Cell) -> bool:
    """True if `mark` fills any row, column or diagonal."""
    for i in range(SIZE):
        if all(board.get(i, j) is mark for j in range(SIZE)):
            return True
        if all(board.get(j, i) is mark for j in range(SIZE)):
            return True

    if all(board.get(i, i) is mark for i in range(SIZE)):
        return True
    if all(board.get(i, SIZE - 1 - i) is mark for i in range(SIZE)):
        return True

    return False
