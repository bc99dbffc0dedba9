import os
import sys
import tempfile
import pytest

# Ensure the server root (containing the `cordle` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
SERVER_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if SERVER_ROOT not in sys.path:
    sys.path.insert(0, SERVER_ROOT)

# Keep test logs out of the working tree
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='cordle-logs-'))

from cordle import create_app
from cordle.config import TestingConfig
from cordle.models.player import Player
from cordle.services.cordle_game import CordleGame
from cordle.services.lobby_service import initialize_lobby_service
from cordle.services.word_provider import StaticWordProvider
from cordle.websocket import handlers

SECRET = 'CORDL'


@pytest.fixture()
def alice():
    return Player(id='alice', username='Alice')


@pytest.fixture()
def bob():
    return Player(id='bob', username='Bob')


@pytest.fixture()
def carol():
    return Player(id='carol', username='Carol')


@pytest.fixture()
def word_provider():
    return StaticWordProvider(SECRET)


@pytest.fixture()
def game(word_provider):
    return CordleGame(word_provider=word_provider)


@pytest.fixture()
def started_game(game, alice, bob):
    """A game in progress with alice as Player1 moving first."""
    game.join(alice)
    game.join(bob)
    game.start(alice)
    game.start(bob)
    return game


@pytest.fixture()
def lobby(word_provider):
    return initialize_lobby_service(TestingConfig.LOBBY_AREA_COUNT, word_provider)


@pytest.fixture()
def flask_app(lobby):
    application, _ = create_app(TestingConfig)
    handlers.connected_players.clear()
    handlers.socket_players.clear()
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def make_sio_client(flask_app):
    clients = []

    def _make():
        test_client = flask_app.socketio.test_client(
            flask_app,
            flask_test_client=flask_app.test_client()
        )
        clients.append(test_client)
        return test_client

    yield _make
    for test_client in clients:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except RuntimeError:
            pass
