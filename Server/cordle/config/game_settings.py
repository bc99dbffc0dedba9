"""
Game Configuration Constants Module

This module defines the Cordle game constants and loads the packaged
word lists, one plain-text file per difficulty tier. All game parameters
are centralized here to enable easy modification.
"""

import os
from typing import Dict, Final, List, Optional

MAX_GUESSES: Final[int] = 6
"""
Maximum number of guesses shared by both players in one game.
Type: Final[int] - Immutable to prevent accidental modification
"""

WORD_LENGTH: Final[int] = 5
"""Length of every secret word and of every guess accepted by the gateway."""

DIFFICULTY_LEVELS: Final[List[str]] = ['Easy', 'Medium', 'Hard']

WORDS_DIR: Final[str] = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'words')


def word_list_path(difficulty: str, words_dir: Optional[str] = None) -> str:
    """Path of the word list file for a difficulty tier, e.g. ``easy_words.txt``."""
    return os.path.join(words_dir or WORDS_DIR, f"{difficulty.lower()}_words.txt")


def load_word_list(difficulty: str, words_dir: Optional[str] = None) -> List[str]:
    """
    Load the word list for one difficulty tier.

    Blank lines are ignored and words are uppercased.

    Args:
        difficulty: Tier name ('Easy', 'Medium' or 'Hard')
        words_dir: Directory holding the ``<tier>_words.txt`` files

    Returns:
        List[str]: Uppercase words

    Raises:
        FileNotFoundError: If the word list file is missing
        ValueError: If the word list is empty
    """
    file_path = word_list_path(difficulty, words_dir)

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            words = [line.strip().upper() for line in f if line.strip()]
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {file_path}")

    if not words:
        raise ValueError(f"Word list for {difficulty} cannot be empty")

    return words


# Curated word lists loaded from the packaged text files
WORD_LISTS: Final[Dict[str, List[str]]] = {
    level: load_word_list(level) for level in DIFFICULTY_LEVELS
}


def dictionary_words() -> frozenset:
    """Every word known to the server, across all tiers."""
    return frozenset(word for words in WORD_LISTS.values() for word in words)


def validate_word_list_integrity() -> bool:
    """
    Validates the integrity and consistency of the packaged word lists.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly WORD_LENGTH characters
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries within a tier

    Returns:
        bool: True if every word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    for level, words in WORD_LISTS.items():
        if not words:
            raise ValueError(f"Word list for {level} cannot be empty")

        for index, word in enumerate(words):
            if len(word) != WORD_LENGTH:
                raise ValueError(
                    f"{level} word at index {index} '{word}' is not {WORD_LENGTH} characters long"
                )
            if not word.isalpha():
                raise ValueError(
                    f"{level} word at index {index} '{word}' contains non-alphabetic characters"
                )

        if len(words) != len(set(words)):
            duplicates = sorted({word for word in words if words.count(word) > 1})
            raise ValueError(f"Duplicate words found in {level} word list: {duplicates}")

    return True


def get_word_statistics() -> dict:
    """
    Summarizes the word lists for game balancing.

    Returns:
        dict: Per-tier word counts, average vowel counts and the most
        common letters across all tiers
    """
    vowels = set('AEIOU')
    letter_frequency: Dict[str, int] = {}
    tiers = {}

    for level, words in WORD_LISTS.items():
        total_vowels = sum(len([char for char in word if char in vowels]) for word in words)
        tiers[level] = {
            'total_words': len(words),
            'avg_vowel_count': round(total_vowels / len(words), 2) if words else 0,
        }
        for word in words:
            for char in word:
                letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        'tiers': tiers,
        'most_common_letters': sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")

        stats = get_word_statistics()
        print(f" Word statistics: {stats}")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
