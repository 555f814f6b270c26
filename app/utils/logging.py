"""
Logging utilities for tracking player activity on the game.
"""

import logging

from flask import has_request_context, request

logger = logging.getLogger("app.activity")


def _client_desc():
    return f"Client {request.remote_addr}" if has_request_context() else "Unknown client"


def log_game_event(category, description):
    """
    Record a game event.

    Args:
        category (str): Event category (e.g., 'Move', 'Result', 'Reset')
        description (str): What happened
    """
    logger.info("[%s] %s", category, description)


def log_project_visit(project_name, project_display_name=None):
    """
    Log a visit to a project/page.

    Args:
        project_name (str): The project identifier (e.g., 'tic_tac_toe')
        project_display_name (str, optional): Human-readable name for the description.
                                              Defaults to project_name if not provided.
    """
    display_name = project_display_name or project_name
    log_game_event('Visit', f"{_client_desc()} visited {display_name}")


def log_move(snapshot, row, col):
    """Log an accepted move, and the result if it ended the game."""
    log_game_event('Move', f"{_client_desc()} played row={row} col={col}")
    if not snapshot["gameActive"]:
        log_game_event(
            'Result',
            f"{snapshot['message']} (X={snapshot['scoreX']}, O={snapshot['scoreO']})"
        )
