"""
Services Package

Contains all business logic and service classes.
"""

from .word_data import WordData, DatasetLoadFailure, load_word_data
from .normalizer import WordNormalizer
from .rank_resolver import RankResolver
from .hint_selector import HintSelector
from .game_session import GameSession
from .storage_service import KeyValueStore, MemoryKeyValueStore, MongoKeyValueStore, create_store
from .stats_service import StatsService, SettingsService
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'WordData', 'DatasetLoadFailure', 'load_word_data',
    'WordNormalizer', 'RankResolver', 'HintSelector', 'GameSession',
    'KeyValueStore', 'MemoryKeyValueStore', 'MongoKeyValueStore', 'create_store',
    'StatsService', 'SettingsService',
    'GameService', 'get_game_service', 'initialize_game_service'
]
