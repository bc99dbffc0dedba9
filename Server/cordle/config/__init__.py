"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game constants and word lists (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    MAX_GUESSES, WORD_LENGTH, DIFFICULTY_LEVELS, WORD_LISTS,
    load_word_list, dictionary_words, validate_word_list_integrity, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'MAX_GUESSES', 'WORD_LENGTH', 'DIFFICULTY_LEVELS', 'WORD_LISTS',
    'load_word_list', 'dictionary_words', 'validate_word_list_integrity', 'get_word_statistics'
]
