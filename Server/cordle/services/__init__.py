"""
Services Package

Contains the game engine, the game area dispatcher and the lobby.
"""

from .game_base import TurnBasedGame
from .cordle_game import CordleGame, score_guess
from .word_provider import WordProvider, FileWordProvider, StaticWordProvider, validate_guess_word
from .game_area import CordleGameArea
from .lobby_service import LobbyService, get_lobby_service, initialize_lobby_service

__all__ = [
    'TurnBasedGame', 'CordleGame', 'score_guess',
    'WordProvider', 'FileWordProvider', 'StaticWordProvider', 'validate_guess_word',
    'CordleGameArea',
    'LobbyService', 'get_lobby_service', 'initialize_lobby_service'
]
