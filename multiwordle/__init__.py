"""
Multi-Wordle Server Application Package

A sentence-sized Wordle: the server holds a secret sequence of words and
evaluates attempts containing one guess per secret word.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config, parse_secret_sentence
from .services.game_service import GameService


def create_app(config_class=Config, game_service=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        game_service: Game to serve; built from ``SECRET_SENTENCE`` when omitted

    Returns:
        Tuple of the Flask application and its SocketIO extension

    Raises:
        ValueError: If no game is given and the configured secret is malformed
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    if game_service is None:
        secret_words = parse_secret_sentence(app.config.get('SECRET_SENTENCE'))
        game_service = GameService(secret_words, max_attempts=app.config['MAX_ATTEMPTS'])
    app.game_service = game_service

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.game_controller import game_bp
    from .controllers.board_controller import board_bp

    app.register_blueprint(game_bp, url_prefix='/api')
    app.register_blueprint(board_bp)

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
