"""
Data Models Package

Contains all data models, enums and error types used throughout the application.
"""

from .game import (
    DRAW, GameStatus, PlayerSlot, Difficulty, CellColor, Guess, CordleGameState, GameResult
)
from .player import Player
from .errors import (
    InvalidParametersError, PlayerAlreadyInGameError, GameFullError, PlayerNotInGameError,
    GameNotStartableError, GameNotInProgressError, MoveNotYourTurnError, GameIdMismatchError,
    DifficultyLockedError, GuessNumberMismatchError, InvalidCommandError, InvalidGuessWordError,
    AreaNotFoundError
)

__all__ = [
    'DRAW', 'GameStatus', 'PlayerSlot', 'Difficulty', 'CellColor', 'Guess', 'CordleGameState',
    'GameResult', 'Player',
    'InvalidParametersError', 'PlayerAlreadyInGameError', 'GameFullError', 'PlayerNotInGameError',
    'GameNotStartableError', 'GameNotInProgressError', 'MoveNotYourTurnError', 'GameIdMismatchError',
    'DifficultyLockedError', 'GuessNumberMismatchError', 'InvalidCommandError', 'InvalidGuessWordError',
    'AreaNotFoundError'
]
