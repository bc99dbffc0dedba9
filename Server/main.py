"""
Cordle Game Server - Main Entry Point

This is the main entry point for the Cordle game server.
It initializes the lobby and starts the Flask-SocketIO application.
"""

from cordle import create_app
from cordle.config import Config
from cordle.models.game import Difficulty
from cordle.services.lobby_service import initialize_lobby_service
from cordle.services.word_provider import FileWordProvider
from cordle.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        word_provider = FileWordProvider(Config.WORD_LIST_DIR, Difficulty.parse(Config.DEFAULT_DIFFICULTY))
        lobby_service = initialize_lobby_service(Config.LOBBY_AREA_COUNT, word_provider)
        print(f"✓ Lobby service initialized with {len(lobby_service.areas)} areas")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Cordle Server Starting")

        print(f"\nStarting Cordle Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Cordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
