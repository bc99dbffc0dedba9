"""
Game Errors

Typed failures raised by the game engine, the game area dispatcher and the
guess gateway. Every failure is an expected outcome of an out-of-order or
unauthorized command and is reported only to the player who issued it.
"""

GAME_FULL_MESSAGE = 'Game is full'
PLAYER_ALREADY_IN_GAME_MESSAGE = 'Player is already in this game'
PLAYER_NOT_IN_GAME_MESSAGE = 'Player is not in this game'
GAME_NOT_STARTABLE_MESSAGE = 'Game is not startable'
GAME_NOT_IN_PROGRESS_MESSAGE = 'Game is not in progress'
MOVE_NOT_YOUR_TURN_MESSAGE = 'Not your turn'
GAME_ID_MISMATCH_MESSAGE = 'Game ID mismatch'
DIFFICULTY_LOCKED_MESSAGE = 'Difficulty cannot change once the secret word is drawn'
GUESS_NUMBER_MISMATCH_MESSAGE = 'Guess number is out of sequence'
INVALID_COMMAND_MESSAGE = 'Invalid command'
INVALID_GUESS_WORD_MESSAGE = 'Invalid guess'
AREA_NOT_FOUND_MESSAGE = 'Game area not found'


class InvalidParametersError(Exception):
    """Base class for every rejected game command."""

    default_message = INVALID_COMMAND_MESSAGE

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def error_type(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict:
        return {'error': self.message, 'error_type': self.error_type}


class PlayerAlreadyInGameError(InvalidParametersError):
    default_message = PLAYER_ALREADY_IN_GAME_MESSAGE


class GameFullError(InvalidParametersError):
    default_message = GAME_FULL_MESSAGE


class PlayerNotInGameError(InvalidParametersError):
    default_message = PLAYER_NOT_IN_GAME_MESSAGE


class GameNotStartableError(InvalidParametersError):
    default_message = GAME_NOT_STARTABLE_MESSAGE


class GameNotInProgressError(InvalidParametersError):
    default_message = GAME_NOT_IN_PROGRESS_MESSAGE


class MoveNotYourTurnError(InvalidParametersError):
    default_message = MOVE_NOT_YOUR_TURN_MESSAGE


class GameIdMismatchError(InvalidParametersError):
    default_message = GAME_ID_MISMATCH_MESSAGE


class DifficultyLockedError(InvalidParametersError):
    default_message = DIFFICULTY_LOCKED_MESSAGE


class GuessNumberMismatchError(InvalidParametersError):
    default_message = GUESS_NUMBER_MISMATCH_MESSAGE


class InvalidCommandError(InvalidParametersError):
    default_message = INVALID_COMMAND_MESSAGE


class InvalidGuessWordError(InvalidParametersError):
    default_message = INVALID_GUESS_WORD_MESSAGE


class AreaNotFoundError(InvalidParametersError):
    default_message = AREA_NOT_FOUND_MESSAGE
