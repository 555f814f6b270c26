from flask import Flask, jsonify
from dotenv import load_dotenv
import logging

load_dotenv()

logger = logging.getLogger(__name__)


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object('config')
    if test_config:
        app.config.update(test_config)

    # Validate the listening port
    try:
        port = int(app.config['PORT'])
    except (TypeError, ValueError):
        raise ValueError(f"PORT must be an integer, got {app.config['PORT']!r}")
    if not 1 <= port <= 65535:
        raise ValueError(f"PORT must be between 1 and 65535, got {port}")
    app.config['PORT'] = port

    # Configure logging
    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    app.jinja_env.trim_blocks = app.config['JINJA2_TRIM_BLOCKS']
    app.jinja_env.lstrip_blocks = app.config['JINJA2_LSTRIP_BLOCKS']

    # One shared game per application
    from app.projects.tic_tac_toe.core.service import GameService
    from app.projects.tic_tac_toe.routes import EXTENSION_KEY, tic_tac_toe_bp

    app.extensions[EXTENSION_KEY] = GameService(
        strict_coordinates=app.config['TIC_TAC_TOE_STRICT_COORDINATES']
    )

    # Register blueprints
    app.register_blueprint(tic_tac_toe_bp)

    @app.errorhandler(404)
    def page_not_found(e):
        return jsonify({"error": "Not found"}), 404

    @app.errorhandler(500)
    def internal_error(e):
        logger.error("Unhandled error: %s", getattr(e, 'original_exception', e))
        return jsonify({"error": "Internal server error"}), 500

    return app
