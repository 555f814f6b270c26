import logging

from flask import Blueprint, current_app, jsonify, render_template, request

from app.projects.tic_tac_toe.core.errors import GameError
from app.utils.logging import log_game_event, log_move, log_project_visit

logger = logging.getLogger(__name__)

tic_tac_toe_bp = Blueprint('tic_tac_toe', __name__,
                          template_folder='templates')

EXTENSION_KEY = 'tic_tac_toe'


def _game_service():
    return current_app.extensions[EXTENSION_KEY]


@tic_tac_toe_bp.errorhandler(GameError)
def handle_game_error(e):
    logger.warning("Rejected %s: %s", request.full_path, e.message)
    return jsonify({"error": e.message}), e.status_code


@tic_tac_toe_bp.route('/')
def index():
    """Display the Tic-Tac-Toe game - self-contained HTML with inline CSS/JS"""
    log_project_visit('tic_tac_toe', 'Tic-Tac-Toe')
    return render_template('tic_tac_toe.html', game=_game_service().snapshot())


@tic_tac_toe_bp.route('/makeMove')
def make_move():
    """Play one move for whoever's turn it is. Returns the game snapshot."""
    row = request.args.get('row')
    col = request.args.get('col')
    snapshot = _game_service().make_move(row, col)
    log_move(snapshot, row, col)
    return jsonify(snapshot)


@tic_tac_toe_bp.route('/reset')
def reset():
    """Clear the board for a new game. Scores are kept."""
    snapshot = _game_service().reset()
    log_game_event('Reset', f"New game (X={snapshot['scoreX']}, O={snapshot['scoreO']})")
    return jsonify(snapshot)


@tic_tac_toe_bp.route('/state')
def state():
    return jsonify(_game_service().snapshot())
