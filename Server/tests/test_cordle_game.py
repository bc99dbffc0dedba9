import pytest

from cordle.config.game_settings import MAX_GUESSES
from cordle.models.errors import (
    DifficultyLockedError, GameNotInProgressError, GameNotStartableError,
    GuessNumberMismatchError, InvalidCommandError, MoveNotYourTurnError, PlayerNotInGameError
)
from cordle.models.game import CellColor, Difficulty, DRAW, GameStatus, Guess, PlayerSlot
from cordle.services.cordle_game import CordleGame


class RecordingProvider:
    def __init__(self, word='CORDL'):
        self.word = word
        self.calls = []

    def select_word(self, difficulty):
        self.calls.append(difficulty)
        return self.word


def guess(game, player_id, word):
    return game.apply_guess(Guess(player_id=player_id, word=word,
                                  guess_number=len(game.state.guesses) + 1))


def finish(game):
    """Ends a started game with a win for whoever moves first."""
    guess(game, game.occupant(game.whose_turn()), game.state.secret_word)
    assert game.state.status is GameStatus.OVER


class TestStart:
    def test_start_requires_two_players(self, game, alice):
        game.join(alice)
        with pytest.raises(GameNotStartableError):
            game.start(alice)

    def test_start_by_outsider_is_rejected(self, game, alice, bob, carol):
        game.join(alice)
        game.join(bob)
        with pytest.raises(PlayerNotInGameError):
            game.start(carol)

    def test_both_ready_starts_game(self, game, alice, bob):
        game.join(alice)
        game.join(bob)
        game.start(alice)
        assert game.state.status is GameStatus.WAITING_TO_START
        assert game.state.player1_ready is True
        game.start(bob)
        assert game.state.status is GameStatus.IN_PROGRESS
        assert game.state.first_player is PlayerSlot.PLAYER1
        assert game.state.secret_word == 'CORDL'

    def test_start_twice_is_idempotent(self, alice, bob):
        provider = RecordingProvider()
        game = CordleGame(word_provider=provider)
        game.join(alice)
        game.join(bob)
        game.start(alice)
        game.start(alice)
        assert game.state.status is GameStatus.WAITING_TO_START
        assert len(provider.calls) == 1

    def test_start_after_game_began_is_rejected(self, started_game, alice):
        with pytest.raises(GameNotStartableError):
            started_game.start(alice)

    def test_secret_drawn_when_first_player_is_ready(self, alice, bob):
        provider = RecordingProvider('crane')
        game = CordleGame(word_provider=provider)
        game.join(alice)
        game.join(bob)

        game.start(bob)
        assert game.state.secret_word is None
        game.start(alice)
        assert game.state.secret_word == 'CRANE'
        assert len(provider.calls) == 1

    def test_secret_uses_chosen_difficulty(self, alice, bob):
        provider = RecordingProvider()
        game = CordleGame(word_provider=provider)
        game.join(alice)
        game.join(bob)
        game.set_difficulty('hard')
        game.start(alice)
        assert provider.calls == [Difficulty.HARD]


class TestDifficulty:
    def test_parses_tier_names(self, game):
        game.set_difficulty('Easy')
        assert game.state.difficulty is Difficulty.EASY

    def test_unknown_tier_is_rejected(self, game):
        with pytest.raises(InvalidCommandError):
            game.set_difficulty('Impossible')
        assert game.state.difficulty is None

    def test_locked_once_secret_is_drawn(self, game, alice, bob):
        game.join(alice)
        game.join(bob)
        game.start(alice)
        with pytest.raises(DifficultyLockedError):
            game.set_difficulty('Easy')


class TestGuesses:
    def test_turns_alternate_from_first_player(self, started_game):
        assert started_game.whose_turn() is PlayerSlot.PLAYER1
        guess(started_game, 'alice', 'CRANE')
        assert started_game.whose_turn() is PlayerSlot.PLAYER2
        guess(started_game, 'bob', 'CLOUD')
        assert started_game.whose_turn() is PlayerSlot.PLAYER1

    def test_guess_out_of_turn_is_rejected(self, started_game):
        with pytest.raises(MoveNotYourTurnError):
            guess(started_game, 'bob', 'CRANE')
        assert started_game.state.guesses == []

    def test_guess_from_outsider_is_rejected(self, started_game):
        with pytest.raises(MoveNotYourTurnError):
            guess(started_game, 'carol', 'CRANE')

    def test_guess_number_must_be_next(self, started_game):
        with pytest.raises(GuessNumberMismatchError):
            started_game.apply_guess(Guess(player_id='alice', word='CRANE', guess_number=2))

    def test_guess_before_start_is_rejected(self, game, alice, bob):
        game.join(alice)
        game.join(bob)
        with pytest.raises(GameNotInProgressError):
            guess(game, 'alice', 'CRANE')

    def test_guess_returns_evaluated_row(self, started_game):
        row = guess(started_game, 'alice', 'COLDX')
        assert row == [CellColor.GREEN, CellColor.GREEN, CellColor.YELLOW,
                       CellColor.GREEN, CellColor.GRAY]
        assert started_game.state.evaluated_rows == [row]
        assert started_game.state.guesses[0].word == 'COLDX'

    def test_correct_guess_wins(self, started_game):
        guess(started_game, 'alice', 'CRANE')
        guess(started_game, 'bob', 'CORDL')
        assert started_game.state.status is GameStatus.OVER
        assert started_game.state.winner == 'bob'

    def test_guess_limit_ends_in_draw(self, started_game):
        players = ['alice', 'bob']
        for i in range(MAX_GUESSES):
            guess(started_game, players[i % 2], 'CRANE')

        assert started_game.state.status is GameStatus.OVER
        assert started_game.state.winner == DRAW
        with pytest.raises(GameNotInProgressError):
            guess(started_game, 'alice', 'CORDL')
        assert len(started_game.state.guesses) == MAX_GUESSES

    def test_win_on_last_guess_is_not_a_draw(self, started_game):
        players = ['alice', 'bob']
        for i in range(MAX_GUESSES - 1):
            guess(started_game, players[i % 2], 'CRANE')
        guess(started_game, 'bob', 'CORDL')
        assert started_game.state.winner == 'bob'

    def test_lowercase_guess_does_not_match(self, started_game):
        row = guess(started_game, 'alice', 'cordl')
        assert row == [CellColor.GRAY] * 5
        assert started_game.state.status is GameStatus.IN_PROGRESS


class TestRematch:
    def test_same_pairing_alternates_first_player(self, started_game, alice, bob, word_provider):
        finish(started_game)
        rematch = CordleGame.rematch(started_game, word_provider)
        assert rematch.state.first_player is PlayerSlot.PLAYER2

        # Join order does not matter, players get their old slots back
        assert rematch.join(bob) is PlayerSlot.PLAYER2
        assert rematch.join(alice) is PlayerSlot.PLAYER1
        rematch.start(bob)
        rematch.start(alice)

        assert rematch.state.status is GameStatus.IN_PROGRESS
        assert rematch.whose_turn() is PlayerSlot.PLAYER2
        assert rematch.occupant(rematch.whose_turn()) == 'bob'

    def test_third_rematch_alternates_back(self, started_game, alice, bob, word_provider):
        finish(started_game)
        second = CordleGame.rematch(started_game, word_provider)
        second.join(alice)
        second.join(bob)
        second.start(alice)
        second.start(bob)
        finish(second)

        third = CordleGame.rematch(second, word_provider)
        third.join(alice)
        third.join(bob)
        third.start(alice)
        third.start(bob)
        assert third.state.first_player is PlayerSlot.PLAYER1

    def test_new_pairing_resets_to_player1(self, started_game, alice, carol, word_provider):
        finish(started_game)
        rematch = CordleGame.rematch(started_game, word_provider)
        assert rematch.join(carol) is PlayerSlot.PLAYER1
        assert rematch.join(alice) is PlayerSlot.PLAYER2
        rematch.start(carol)
        rematch.start(alice)
        assert rematch.state.first_player is PlayerSlot.PLAYER1
        assert rematch.occupant(rematch.whose_turn()) == 'carol'

    def test_one_returning_player_in_same_slot_keeps_alternation(self, started_game, alice, carol,
                                                                 word_provider):
        finish(started_game)
        rematch = CordleGame.rematch(started_game, word_provider)
        rematch.join(alice)
        rematch.join(carol)
        rematch.start(alice)
        rematch.start(carol)
        assert rematch.state.first_player is PlayerSlot.PLAYER2
