"""
Word Provider

Secret word selection for new games, plus the gateway check applied to
guesses before they reach a game. The game engine only depends on the
WordProvider protocol; where the words come from is up to the provider.
"""

import random
from typing import Dict, FrozenSet, Iterable, List, Optional, Protocol

from ..config.game_settings import WORD_LENGTH, dictionary_words, load_word_list
from ..models.errors import InvalidGuessWordError
from ..models.game import Difficulty


class WordProvider(Protocol):
    """Anything that can hand out a secret word for a difficulty tier."""

    def select_word(self, difficulty: Optional[Difficulty]) -> str:
        ...

    def dictionary(self) -> FrozenSet[str]:
        """Uppercase words a guess may use when the dictionary check is on."""
        ...


class FileWordProvider:
    """
    Picks secret words uniformly at random from ``<tier>_words.txt`` files.

    Each tier's list is read once and cached. Games started without a
    difficulty draw from the default tier.
    """

    def __init__(self,
                 words_dir: Optional[str] = None,
                 default_difficulty: Difficulty = Difficulty.MEDIUM,
                 rng: Optional[random.Random] = None):
        self.words_dir = words_dir
        self.default_difficulty = default_difficulty
        self._rng = rng or random.Random()
        self._cache: Dict[Difficulty, List[str]] = {}
        self._dictionary: Optional[FrozenSet[str]] = None

    def words_for(self, difficulty: Difficulty) -> List[str]:
        if difficulty not in self._cache:
            self._cache[difficulty] = load_word_list(difficulty.value, self.words_dir)
        return self._cache[difficulty]

    def select_word(self, difficulty: Optional[Difficulty]) -> str:
        return self._rng.choice(self.words_for(difficulty or self.default_difficulty))

    def dictionary(self) -> FrozenSet[str]:
        """Every word across the tiers found in this provider's directory."""
        if self._dictionary is None:
            words = set()
            for level in Difficulty:
                try:
                    words.update(self.words_for(level))
                except FileNotFoundError:
                    continue
            self._dictionary = frozenset(words)
        return self._dictionary


class StaticWordProvider:
    """Always hands out the same word."""

    def __init__(self, word: str):
        self.word = word

    def select_word(self, difficulty: Optional[Difficulty]) -> str:
        return self.word

    def dictionary(self) -> FrozenSet[str]:
        return dictionary_words() | {self.word.upper()}


def validate_guess_word(word, dictionary: Optional[Iterable[str]] = None) -> str:
    """
    Gateway check for a submitted guess.

    Args:
        word: Raw word from the client
        dictionary: Uppercase words the guess must belong to, or None to
            skip the dictionary lookup

    Returns:
        str: The normalized (stripped, uppercase) word

    Raises:
        InvalidGuessWordError: If the word has the wrong shape or is unknown
    """
    if not word or not isinstance(word, str):
        raise InvalidGuessWordError('Guess must be a valid string')

    normalized_guess = word.strip().upper()

    if len(normalized_guess) != WORD_LENGTH:
        raise InvalidGuessWordError(f'Guess must be exactly {WORD_LENGTH} letters')

    if not normalized_guess.isalpha():
        raise InvalidGuessWordError('Guess must contain only letters')

    if dictionary is not None and normalized_guess not in dictionary:
        raise InvalidGuessWordError('Word not in word list')

    return normalized_guess
