"""
Game Area Service

A game area hosts successive Cordle games for the players present in it.
It routes player commands to the live game, creates rematches, keeps the
history of finished games and renders the public snapshot that transports
broadcast.

Every command and snapshot runs under the area lock, so at most one
command is applied to a game at any time even when players send commands
concurrently from different connections.
"""

import threading
from typing import Dict, List, Optional

from ..models.errors import GameIdMismatchError, GameNotInProgressError, InvalidCommandError
from ..models.game import DRAW, GameResult, GameStatus, Guess
from ..models.player import Player
from ..utils.game_logger import game_logger
from .cordle_game import CordleGame
from .word_provider import FileWordProvider, WordProvider

COMMAND_TYPES = ('JoinGame', 'LeaveGame', 'SetDifficulty', 'StartGame', 'GameMove')


class CordleGameArea:
    """
    Dispatcher for one play area.

    Commands are dicts with a 'type' (one of COMMAND_TYPES) and, for every
    type except JoinGame, the 'game_id' of the live game. Only occupants of
    the area may join its game.
    """

    def __init__(self, area_id: int, name: str, word_provider: Optional[WordProvider] = None):
        self.id = area_id
        self.name = name
        self.word_provider = word_provider or FileWordProvider()
        self.game: Optional[CordleGame] = None
        self.history: List[GameResult] = []
        self._occupants: Dict[str, Player] = {}
        self._participants: Dict[str, str] = {}  # player_id -> display name, set at game start
        self._lock = threading.Lock()

    @property
    def occupants(self) -> List[Player]:
        return list(self._occupants.values())

    def add_occupant(self, player: Player) -> None:
        with self._lock:
            self._occupants[player.id] = player

    def remove_occupant(self, player: Player) -> bool:
        """
        Removes a player from the area; a seated player also leaves the game.

        Returns:
            bool: True if the live game changed
        """
        with self._lock:
            self._occupants.pop(player.id, None)
            game = self.game
            if game is None or game.slot_of(player.id) is None:
                return False
            if game.state.status is GameStatus.OVER:
                return False

            was_in_progress = game.state.status is GameStatus.IN_PROGRESS
            game.leave(player)
            if was_in_progress:
                game_logger.log_game_event(
                    game.id, 'game_forfeited', player.id,
                    area_id=self.id, winner=game.state.winner
                )
            self._record_result_if_over()
            return True

    def handle_command(self, command: Dict, player: Player) -> Dict:
        """
        Applies one command for a player.

        Returns:
            Dict: Command result, e.g. {'game_id': ...} for JoinGame

        Raises:
            InvalidParametersError: any rejected command; the area and the
            game are left unchanged
        """
        if not isinstance(command, dict):
            raise InvalidCommandError('Command must be an object')
        command_type = command.get('type')
        if command_type not in COMMAND_TYPES:
            raise InvalidCommandError(f'Unknown command type: {command_type}')

        with self._lock:
            if command_type == 'JoinGame':
                return self._join_game(player)

            game = self._check_game(command.get('game_id'))

            if command_type == 'LeaveGame':
                game.leave(player)
                result = {}
            elif command_type == 'SetDifficulty':
                game.set_difficulty(command.get('difficulty'))
                result = {}
            elif command_type == 'StartGame':
                self._start_game(game, player, command.get('difficulty'))
                result = {}
            else:
                result = {'evaluated_row': self._apply_move(game, player, command.get('move'))}

            self._record_result_if_over()
            return result

    def _check_game(self, game_id) -> CordleGame:
        if self.game is None:
            raise GameNotInProgressError()
        if game_id != self.game.id:
            raise GameIdMismatchError()
        return self.game

    def _join_game(self, player: Player) -> Dict:
        if player.id not in self._occupants:
            raise InvalidCommandError('Enter the area before joining its game')

        game = self.game
        if game is None:
            game = CordleGame(word_provider=self.word_provider)
        elif game.state.status is GameStatus.OVER:
            game = CordleGame.rematch(game, word_provider=self.word_provider)

        game.join(player)
        if game is not self.game:
            self.game = game
            self._participants = {}
            game_logger.log_game_event(game.id, 'game_created', player.id, area_id=self.id)
        return {'game_id': game.id}

    def _start_game(self, game: CordleGame, player: Player, difficulty) -> None:
        previous_difficulty = game.state.difficulty
        if difficulty is not None and game.state.secret_word is None:
            game.set_difficulty(difficulty)
        try:
            game.start(player)
        except Exception:
            game.state.difficulty = previous_difficulty
            raise

        if game.state.status is GameStatus.IN_PROGRESS and not self._participants:
            self._participants = {
                p.id: p.display_name for p in game.players
            }
            game_logger.log_game_event(
                game.id, 'game_started', player.id,
                area_id=self.id,
                first_player=game.state.first_player.value,
                difficulty=game.state.difficulty.value if game.state.difficulty else None
            )

    def _apply_move(self, game: CordleGame, player: Player, move) -> List[str]:
        if not isinstance(move, dict) or not move.get('word'):
            raise InvalidCommandError('Move must include a word')
        guess_number = move.get('guess_number')
        if guess_number is None:
            guess_number = len(game.state.guesses) + 1
        try:
            guess_number = int(guess_number)
        except (TypeError, ValueError):
            raise InvalidCommandError('Guess number must be an integer')

        row = game.apply_guess(Guess(player_id=player.id, word=move['word'],
                                     guess_number=guess_number))
        return [cell.value for cell in row]

    def _record_result_if_over(self) -> None:
        game = self.game
        if game is None or game.state.status is not GameStatus.OVER:
            return
        if any(result.game_id == game.id for result in self.history):
            return

        winner = game.state.winner
        scores = {name: 1 if player_id == winner else 0
                  for player_id, name in self._participants.items()}
        self.history.append(GameResult(game_id=game.id, scores=scores))

        if winner == DRAW:
            event = 'game_drawn'
        elif winner:
            event = 'game_won'
        else:
            event = 'game_abandoned'
        game_logger.log_game_event(
            game.id, event, winner or 'system',
            area_id=self.id, guesses_used=len(game.state.guesses),
            target_word=game.state.secret_word
        )

    def secret_holder(self) -> Optional[str]:
        """Player allowed to see the secret before the game is over, if any."""
        with self._lock:
            game = self.game
            if game is None or game.state.secret_word is None:
                return None
            if game.state.status is GameStatus.OVER:
                return None
            return game.occupant(game.state.first_player)

    def to_model(self, viewer_id: Optional[str] = None) -> Dict:
        """
        Snapshot of the area for a viewer.

        The secret word is included once the game is over, or for the player
        seated in the first-player slot. viewer_id is taken as given: a caller
        that sends the first player's id sees the secret, since players are
        not authenticated.
        """
        with self._lock:
            return {
                'id': self.id,
                'name': self.name,
                'occupants': [p.to_dict() for p in self._occupants.values()],
                'history': [result.to_dict() for result in self.history],
                'game': self._game_model(viewer_id),
            }

    def _game_model(self, viewer_id: Optional[str]) -> Optional[Dict]:
        game = self.game
        if game is None:
            return None
        state = game.state
        reveal = state.status is GameStatus.OVER or (
            viewer_id is not None and viewer_id == game.occupant(state.first_player)
        )
        return {
            'id': game.id,
            'players': [p.id for p in game.players],
            'whose_turn': game.whose_turn().value,
            'state': state.to_dict(include_secret=reveal),
        }

    def summary(self) -> Dict:
        """Short description for lobby listings."""
        with self._lock:
            return {
                'id': self.id,
                'name': self.name,
                'occupants': [p.to_dict() for p in self._occupants.values()],
                'status': self.game.state.status.value if self.game else None,
                'max_players': 2,
            }
