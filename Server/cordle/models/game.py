"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

DRAW = "DRAW"
"""Sentinel recorded as the winner when the guess limit runs out."""


class GameStatus(Enum):
    """Coarse lifecycle of one game instance."""
    WAITING_FOR_PLAYERS = "WAITING_FOR_PLAYERS"
    WAITING_TO_START = "WAITING_TO_START"
    IN_PROGRESS = "IN_PROGRESS"
    OVER = "OVER"


class PlayerSlot(Enum):
    """One of the two fixed seats in a game."""
    PLAYER1 = "Player1"
    PLAYER2 = "Player2"

    def other(self) -> "PlayerSlot":
        return PlayerSlot.PLAYER1 if self is PlayerSlot.PLAYER2 else PlayerSlot.PLAYER2


class Difficulty(Enum):
    """Secret word difficulty tier."""
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"

    @classmethod
    def parse(cls, value) -> "Difficulty":
        """Accept an enum member or a tier name in any case."""
        if isinstance(value, cls):
            return value
        for level in cls:
            if isinstance(value, str) and value.strip().lower() == level.value.lower():
                return level
        raise ValueError(f"Unknown difficulty: {value!r}")


class CellColor(Enum):
    """Letter evaluation for one cell of an evaluated row."""
    GREEN = "Green"
    YELLOW = "Yellow"
    GRAY = "Gray"


@dataclass(frozen=True)
class Guess:
    """A word submitted by a player; guess_number counts from 1."""
    player_id: str
    word: str
    guess_number: int

    def to_dict(self) -> Dict:
        return {
            'player_id': self.player_id,
            'word': self.word,
            'guess_number': self.guess_number,
        }


@dataclass
class CordleGameState:
    """Server-side state of one Cordle game instance."""
    status: GameStatus = GameStatus.WAITING_FOR_PLAYERS
    player1: Optional[str] = None
    player2: Optional[str] = None
    player1_ready: bool = False
    player2_ready: bool = False
    first_player: PlayerSlot = PlayerSlot.PLAYER1
    difficulty: Optional[Difficulty] = None
    secret_word: Optional[str] = None
    guesses: List[Guess] = field(default_factory=list)
    evaluated_rows: List[List[CellColor]] = field(default_factory=list)
    winner: Optional[str] = None

    def to_dict(self, include_secret: bool = False) -> Dict:
        """
        Public snapshot of the state, JSON serializable.

        The secret word is only rendered when include_secret is set; deciding
        who may see it is left to the caller.
        """
        return {
            'status': self.status.value,
            'player1': self.player1,
            'player2': self.player2,
            'player1_ready': self.player1_ready,
            'player2_ready': self.player2_ready,
            'first_player': self.first_player.value,
            'difficulty': self.difficulty.value if self.difficulty else None,
            'guesses': [guess.to_dict() for guess in self.guesses],
            'evaluated_rows': [[cell.value for cell in row] for row in self.evaluated_rows],
            'winner': self.winner,
            'secret_word': self.secret_word if include_secret else None,
        }


@dataclass
class GameResult:
    """Outcome of a finished game, kept in the area history."""
    game_id: str
    scores: Dict[str, int]

    def to_dict(self) -> Dict:
        return {'game_id': self.game_id, 'scores': dict(self.scores)}
