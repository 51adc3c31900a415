"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: ranking, hint and autocorrect constants (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    MAX_HINTS, MAX_RANK, GENERIC_RANK_RANGE, CROSS_TARGET_PENALTY,
    HINT_OPENING_RANGE, HINT_CLOSE_RANGE, CLOSE_RANK_THRESHOLD,
    DEFAULT_WORDS_FILE, KNOWN_VARIANTS
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'MAX_HINTS', 'MAX_RANK', 'GENERIC_RANK_RANGE', 'CROSS_TARGET_PENALTY',
    'HINT_OPENING_RANGE', 'HINT_CLOSE_RANGE', 'CLOSE_RANK_THRESHOLD',
    'DEFAULT_WORDS_FILE', 'KNOWN_VARIANTS'
]
