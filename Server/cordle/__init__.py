"""
Cordle Game Server Application Package

Server for Cordle, a two-player turn-based Wordle variant. The server owns
all game state; clients send commands over Socket.IO or HTTP and receive
area snapshots back.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Tuple of the Flask application and its SocketIO instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    origins = app.config.get('CORS_ORIGINS', '*')
    CORS(app, origins=origins)
    socketio = SocketIO(app, cors_allowed_origins=origins, logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.game_controller import game_bp
    from .controllers.lobby_controller import lobby_bp

    app.register_blueprint(game_bp, url_prefix='/api')
    app.register_blueprint(lobby_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
