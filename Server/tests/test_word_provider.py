import random

import pytest

from cordle.config.game_settings import (
    WORD_LISTS, dictionary_words, get_word_statistics, load_word_list, validate_word_list_integrity
)
from cordle.models.errors import InvalidGuessWordError
from cordle.models.game import Difficulty
from cordle.services.word_provider import FileWordProvider, StaticWordProvider, validate_guess_word
from cordle.utils.helpers import prepare_game_command


def test_packaged_word_lists_are_valid():
    assert validate_word_list_integrity() is True
    assert set(WORD_LISTS) == {'Easy', 'Medium', 'Hard'}
    assert get_word_statistics()['tiers']['Easy']['total_words'] == len(WORD_LISTS['Easy'])


def test_file_provider_picks_from_tier():
    provider = FileWordProvider(rng=random.Random(7))
    for level in Difficulty:
        assert provider.select_word(level) in WORD_LISTS[level.value]


def test_file_provider_uses_default_tier():
    provider = FileWordProvider(default_difficulty=Difficulty.HARD)
    assert provider.select_word(None) in WORD_LISTS['Hard']


def test_file_provider_reads_custom_directory(tmp_path):
    (tmp_path / 'easy_words.txt').write_text('otter\n\n', encoding='utf-8')
    provider = FileWordProvider(words_dir=str(tmp_path))
    assert provider.select_word(Difficulty.EASY) == 'OTTER'
    with pytest.raises(FileNotFoundError):
        provider.select_word(Difficulty.HARD)


def test_empty_word_list_is_rejected(tmp_path):
    (tmp_path / 'medium_words.txt').write_text('\n', encoding='utf-8')
    with pytest.raises(ValueError):
        load_word_list('Medium', str(tmp_path))


def test_static_provider():
    assert StaticWordProvider('CORDL').select_word(Difficulty.EASY) == 'CORDL'


def test_guess_is_normalized():
    assert validate_guess_word(' crane ') == 'CRANE'


@pytest.mark.parametrize('word', [None, '', 42, 'CRAN', 'CRANES', 'CR4NE'])
def test_malformed_guess_is_rejected(word):
    with pytest.raises(InvalidGuessWordError):
        validate_guess_word(word)


def test_dictionary_check():
    known = next(iter(dictionary_words()))
    assert validate_guess_word(known.lower(), dictionary_words()) == known
    with pytest.raises(InvalidGuessWordError, match='Word not in word list'):
        validate_guess_word('QQQQQ', dictionary_words())


def test_prepare_game_command_normalizes_moves_only():
    command = {'type': 'GameMove', 'game_id': 'g', 'move': {'word': 'crane'}}
    assert prepare_game_command(command)['move']['word'] == 'CRANE'
    assert command['move']['word'] == 'crane'

    join = {'type': 'JoinGame'}
    assert prepare_game_command(join) is join


def test_file_provider_dictionary_follows_its_directory(tmp_path):
    (tmp_path / 'easy_words.txt').write_text('otter\n', encoding='utf-8')
    (tmp_path / 'hard_words.txt').write_text('zesty\n', encoding='utf-8')
    provider = FileWordProvider(words_dir=str(tmp_path))

    assert provider.dictionary() == frozenset({'OTTER', 'ZESTY'})
    secret = provider.select_word(Difficulty.EASY)
    assert validate_guess_word(secret.lower(), provider.dictionary()) == 'OTTER'


def test_static_provider_dictionary_accepts_its_word():
    provider = StaticWordProvider('CORDL')
    assert 'CORDL' in provider.dictionary()
    assert dictionary_words() <= provider.dictionary()
