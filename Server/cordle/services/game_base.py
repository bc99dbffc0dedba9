"""
Turn-Based Game Base

Generic two-slot player bookkeeping and the coarse status state machine
shared by two-player, turn-based games:

    WAITING_FOR_PLAYERS -> WAITING_TO_START -> IN_PROGRESS -> OVER

OVER is terminal for an instance; a rematch is a new instance. The only
backward transition (WAITING_TO_START -> WAITING_FOR_PLAYERS) happens
through leave().

Instances perform no locking. Callers must serialize every operation on a
given instance (see CordleGameArea).
"""

import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.errors import GameFullError, PlayerAlreadyInGameError, PlayerNotInGameError
from ..models.game import GameStatus, PlayerSlot
from ..models.player import Player


class TurnBasedGame(ABC):
    """
    Base class for a two-player game.

    The state object must expose status, player1, player2, player1_ready,
    player2_ready and winner attributes.
    """

    def __init__(self, initial_state):
        self.id = str(uuid.uuid4())
        self.state = initial_state
        self._players: List[Player] = []

    @property
    def players(self) -> List[Player]:
        """Players currently seated, in join order."""
        return list(self._players)

    def slot_of(self, player_id: str) -> Optional[PlayerSlot]:
        """Slot occupied by the given player id, if any."""
        if player_id is None:
            return None
        if self.state.player1 == player_id:
            return PlayerSlot.PLAYER1
        if self.state.player2 == player_id:
            return PlayerSlot.PLAYER2
        return None

    def occupant(self, slot: PlayerSlot) -> Optional[str]:
        """Player id seated in the given slot, if any."""
        return self.state.player1 if slot is PlayerSlot.PLAYER1 else self.state.player2

    def join(self, player: Player) -> PlayerSlot:
        """
        Seats a player in a free slot.

        Once both slots are filled a game waiting for players becomes
        WAITING_TO_START.

        Raises:
            PlayerAlreadyInGameError: the player already occupies a slot
            GameFullError: both slots are occupied
        """
        if self.slot_of(player.id) is not None:
            raise PlayerAlreadyInGameError()
        slot = self._choose_slot(player)
        if slot is None:
            raise GameFullError()

        self._seat(slot, player.id)
        self._players.append(player)
        if (self.state.player1 and self.state.player2
                and self.state.status is GameStatus.WAITING_FOR_PLAYERS):
            self.state.status = GameStatus.WAITING_TO_START
        return slot

    def leave(self, player: Player) -> None:
        """
        Removes a player from their slot.

        - OVER: nothing changes.
        - WAITING_TO_START / WAITING_FOR_PLAYERS: the slot is vacated and the
          game waits for players again.
        - IN_PROGRESS: the slot is vacated and the game ends with the remaining
          occupant, if any, as winner.

        Raises:
            PlayerNotInGameError: the player occupies neither slot
        """
        slot = self.slot_of(player.id)
        if slot is None:
            raise PlayerNotInGameError()
        if self.state.status is GameStatus.OVER:
            return

        was_in_progress = self.state.status is GameStatus.IN_PROGRESS
        self._vacate(slot)
        self._players = [p for p in self._players if p.id != player.id]

        if was_in_progress:
            self.state.status = GameStatus.OVER
            self.state.winner = self.occupant(slot.other())
        else:
            self.state.status = GameStatus.WAITING_FOR_PLAYERS

    def _choose_slot(self, player: Player) -> Optional[PlayerSlot]:
        """Slot policy: first empty slot, PLAYER1 before PLAYER2."""
        if not self.state.player1:
            return PlayerSlot.PLAYER1
        if not self.state.player2:
            return PlayerSlot.PLAYER2
        return None

    def _seat(self, slot: PlayerSlot, player_id: str) -> None:
        if slot is PlayerSlot.PLAYER1:
            self.state.player1 = player_id
        else:
            self.state.player2 = player_id

    def _vacate(self, slot: PlayerSlot) -> None:
        if slot is PlayerSlot.PLAYER1:
            self.state.player1 = None
            self.state.player1_ready = False
        else:
            self.state.player2 = None
            self.state.player2_ready = False

    @abstractmethod
    def start(self, player: Player) -> None:
        """Marks a seated player ready and starts the game when both are."""

    @abstractmethod
    def apply_guess(self, guess) -> None:
        """Applies a move by the player whose turn it is."""

    @abstractmethod
    def whose_turn(self) -> PlayerSlot:
        """Slot expected to make the next move."""
