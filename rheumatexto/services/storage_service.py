"""
Storage Service

Flat key-value persistence for statistics and settings. MongoDB is used when
a connection string is configured; otherwise values live in memory for the
lifetime of the process.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from pymongo.errors import PyMongoError
from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..utils.game_logger import game_logger


class KeyValueStore(ABC):
    """Minimal persistence contract used by the statistics and settings services."""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """
        Return the stored value or None when the key was never written.

        A failed read raises; it is never reported as a missing key.
        """

    @abstractmethod
    def set(self, key: str, value: Any) -> bool:
        """Store value under key. Returns False if the write failed."""


class MemoryKeyValueStore(KeyValueStore):
    """Process-local store used in tests and when MongoDB is not configured."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = dict(initial or {})

    def get(self, key: str) -> Optional[Any]:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> bool:
        self._data[key] = value
        return True


class MongoKeyValueStore(KeyValueStore):
    """
    Key-value store backed by a MongoDB collection.

    Each key is one document: {"_id": key, "value": value}.
    """

    def __init__(self, collection):
        self.collection = collection

    @classmethod
    def connect(cls, mongo_uri: str, db_name: str, collection_name: str = 'kv_store') -> 'MongoKeyValueStore':
        """
        Connect to MongoDB and verify the connection with a ping.

        Raises:
            PyMongoError: If the server cannot be reached
        """
        client = MongoClient(mongo_uri, server_api=ServerApi('1'))
        client.admin.command('ping')
        game_logger.logger.info(f"Connected to MongoDB database '{db_name}'")
        return cls(client[db_name][collection_name])

    def get(self, key: str) -> Optional[Any]:
        try:
            document = self.collection.find_one({'_id': key})
        except PyMongoError as e:
            game_logger.logger.error(f"Failed to read '{key}' from MongoDB: {e}")
            raise
        if document is None:
            return None
        return document.get('value')

    def set(self, key: str, value: Any) -> bool:
        try:
            self.collection.replace_one({'_id': key}, {'_id': key, 'value': value}, upsert=True)
            return True
        except PyMongoError as e:
            game_logger.logger.error(f"Failed to write '{key}' to MongoDB: {e}")
            return False


def create_store(config_class) -> KeyValueStore:
    """Pick the store for the given configuration class."""
    if config_class.MONGO_URI:
        return MongoKeyValueStore.connect(config_class.MONGO_URI, config_class.MONGO_DB_NAME)
    return MemoryKeyValueStore()
