"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional

from ..models.player import Player
from ..services.word_provider import validate_guess_word


def get_player_identity(data: Optional[Dict]) -> Optional[Player]:
    """Build the calling player from a request payload, if it names one."""
    if not isinstance(data, dict):
        return None

    player_id = data.get('player_id')
    if not player_id or not isinstance(player_id, str):
        return None

    username = data.get('username')
    return Player(id=player_id.strip(), username=username if isinstance(username, str) else None)


def prepare_game_command(command, dictionary=None):
    """
    Gateway checks applied to a command before it reaches a game area.

    GameMove words are validated and normalized to uppercase; other commands
    pass through unchanged.

    Raises:
        InvalidGuessWordError: the guessed word is malformed or unknown
    """
    if not isinstance(command, dict) or command.get('type') != 'GameMove':
        return command

    move = command.get('move')
    if not isinstance(move, dict):
        return command

    word = validate_guess_word(move.get('word'), dictionary)
    return {**command, 'move': {**move, 'word': word}}
