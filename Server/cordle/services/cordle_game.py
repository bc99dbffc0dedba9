"""
Cordle Game

The Cordle-specific game: two players take turns guessing one shared secret
word. Builds on TurnBasedGame with:
- preferred slots and alternating first player across rematches
- the ready/start protocol that draws the secret word
- turn derivation from the number of guesses
- Wordle-style scoring that accounts for repeated letters
"""

from typing import List, Optional

from ..config.game_settings import MAX_GUESSES
from ..models.errors import (
    DifficultyLockedError, GameNotInProgressError, GameNotStartableError,
    GuessNumberMismatchError, InvalidCommandError, MoveNotYourTurnError, PlayerNotInGameError
)
from ..models.game import CellColor, CordleGameState, Difficulty, DRAW, GameStatus, Guess, PlayerSlot
from ..models.player import Player
from .game_base import TurnBasedGame
from .word_provider import FileWordProvider, WordProvider


def score_guess(secret: str, word: str) -> List[CellColor]:
    """
    Evaluates a guess against the secret word, one cell per guessed letter.

    Each letter of the secret can be matched at most once. Exact position
    matches (GREEN) are resolved first; remaining letters are then matched
    left to right against the leftmost unused occurrence in the secret
    (YELLOW). Everything else is GRAY.

    Examples:
        score_guess("SATIN", "TOOTH") -> [YELLOW, GRAY, GRAY, GRAY, GRAY]
        score_guess("CORDL", "COLDX") -> [GREEN, GREEN, YELLOW, GREEN, GRAY]
    """
    # Working copy of the secret; consumed letters are set to None
    secret_chars: List[Optional[str]] = list(secret)
    result: List[CellColor] = []

    # First pass: exact position matches
    for i, letter in enumerate(word):
        if i < len(secret_chars) and letter == secret_chars[i]:
            result.append(CellColor.GREEN)
            secret_chars[i] = None
        else:
            result.append(CellColor.GRAY)

    # Second pass: letters present elsewhere in the secret
    for i, letter in enumerate(word):
        if result[i] is CellColor.GRAY and letter in secret_chars:
            result[i] = CellColor.YELLOW
            secret_chars[secret_chars.index(letter)] = None

    return result


class CordleGame(TurnBasedGame):
    """
    One game of Cordle between two players.

    Rematch information is passed as plain values: the slot assignment of the
    previous game (used as preferred slots) and the slot that moved first in
    it. The new game defaults to the other slot moving first.
    """

    def __init__(self,
                 word_provider: Optional[WordProvider] = None,
                 preferred_player1: Optional[str] = None,
                 preferred_player2: Optional[str] = None,
                 prior_first_player: Optional[PlayerSlot] = None):
        super().__init__(CordleGameState(
            first_player=(prior_first_player or PlayerSlot.PLAYER2).other()
        ))
        self.word_provider = word_provider or FileWordProvider()
        self._preferred_player1 = preferred_player1
        self._preferred_player2 = preferred_player2

    @classmethod
    def rematch(cls, prior: "CordleGame", word_provider: Optional[WordProvider] = None) -> "CordleGame":
        """New game seeded from a previous game's players and first mover."""
        return cls(
            word_provider=word_provider or prior.word_provider,
            preferred_player1=prior.state.player1,
            preferred_player2=prior.state.player2,
            prior_first_player=prior.state.first_player,
        )

    def _choose_slot(self, player: Player) -> Optional[PlayerSlot]:
        """Returning players get their previous slot back when it is free."""
        if self._preferred_player1 == player.id and not self.state.player1:
            return PlayerSlot.PLAYER1
        if self._preferred_player2 == player.id and not self.state.player2:
            return PlayerSlot.PLAYER2
        return super()._choose_slot(player)

    def start(self, player: Player) -> None:
        """
        Marks the player ready.

        The first player becomes PLAYER1 unless the pairing continues the
        previous game. When the player in the first-player slot reports
        ready, the secret word is drawn for the chosen difficulty. Once both
        players are ready the game is IN_PROGRESS. Reporting ready twice
        changes nothing.

        Raises:
            GameNotStartableError: the game is not WAITING_TO_START
            PlayerNotInGameError: the player occupies neither slot
        """
        if self.state.status is not GameStatus.WAITING_TO_START:
            raise GameNotStartableError()
        slot = self.slot_of(player.id)
        if slot is None:
            raise PlayerNotInGameError()

        first_player = self.state.first_player
        if not (self._preferred_player1 == self.state.player1
                or self._preferred_player2 == self.state.player2):
            first_player = PlayerSlot.PLAYER1

        player1_ready = self.state.player1_ready or slot is PlayerSlot.PLAYER1
        player2_ready = self.state.player2_ready or slot is PlayerSlot.PLAYER2
        both_seated = bool(self.state.player1 and self.state.player2)

        secret_word = self.state.secret_word
        if both_seated and secret_word is None and (
                slot is first_player or (player1_ready and player2_ready)):
            secret_word = self.word_provider.select_word(self.state.difficulty).upper()

        self.state.first_player = first_player
        self.state.player1_ready = player1_ready
        self.state.player2_ready = player2_ready
        self.state.secret_word = secret_word
        if both_seated:
            self.state.status = (GameStatus.IN_PROGRESS if player1_ready and player2_ready
                                 else GameStatus.WAITING_TO_START)

    def set_difficulty(self, level) -> None:
        """Records the difficulty; only allowed until the secret word is drawn."""
        if self.state.secret_word is not None:
            raise DifficultyLockedError()
        try:
            self.state.difficulty = Difficulty.parse(level)
        except ValueError as e:
            raise InvalidCommandError(str(e))

    def whose_turn(self) -> PlayerSlot:
        """
        Slot expected to guess next, alternating from the first player.

        Derived from the number of guesses, so it stays defined after the
        game is over.
        """
        if len(self.state.guesses) % 2 == 0:
            return self.state.first_player
        return self.state.first_player.other()

    def apply_guess(self, guess: Guess) -> List[CellColor]:
        """
        Scores a guess from the player whose turn it is.

        The word itself is not validated here; it is scored as submitted.

        Raises:
            GameNotInProgressError: the game is not IN_PROGRESS
            MoveNotYourTurnError: the guess comes from the other player
            GuessNumberMismatchError: guess_number is not the next one
        """
        if self.state.status is not GameStatus.IN_PROGRESS:
            raise GameNotInProgressError()
        if guess.player_id != self.occupant(self.whose_turn()):
            raise MoveNotYourTurnError()
        if guess.guess_number != len(self.state.guesses) + 1:
            raise GuessNumberMismatchError()
        return self._apply_guess(guess)

    def _apply_guess(self, guess: Guess) -> List[CellColor]:
        secret = self.state.secret_word or ''
        row = score_guess(secret, guess.word)

        self.state.guesses.append(guess)
        self.state.evaluated_rows.append(row)

        if row and len(row) == len(secret) and all(cell is CellColor.GREEN for cell in row):
            self.state.status = GameStatus.OVER
            self.state.winner = guess.player_id
        elif len(self.state.guesses) >= MAX_GUESSES and self.state.winner is None:
            self.state.status = GameStatus.OVER
            self.state.winner = DRAW

        return row
