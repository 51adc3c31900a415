"""
Statistics and Settings Services

Read player statistics and preferences from the key-value store at startup
and write them back whenever they change.
"""

from ..models.stats import PlayerStats, Settings
from ..utils.helpers import parse_bool
from .storage_service import KeyValueStore


class StatsService:
    """Lifetime statistics stored as one flat record under '<namespace>_stats'."""

    def __init__(self, store: KeyValueStore, namespace: str = 'rheumatexto'):
        self.store = store
        self.key = f"{namespace}_stats"
        self.stats = PlayerStats.from_record(store.get(self.key))

    def _save(self) -> bool:
        return self.store.set(self.key, self.stats.to_record())

    def record_win(self, guess_count: int) -> PlayerStats:
        self.stats.record_win(guess_count)
        self._save()
        return self.stats

    def record_loss(self) -> PlayerStats:
        self.stats.record_loss()
        self._save()
        return self.stats

    def get_stats(self) -> PlayerStats:
        return self.stats


class SettingsService:
    """Light mode and hard mode flags, one key each."""

    def __init__(self, store: KeyValueStore, namespace: str = 'rheumatexto'):
        self.store = store
        self.light_mode_key = f"{namespace}_lightMode"
        self.hard_mode_key = f"{namespace}_hardMode"
        self.settings = Settings(
            light_mode=bool(parse_bool(store.get(self.light_mode_key))),
            hard_mode=bool(parse_bool(store.get(self.hard_mode_key))),
        )

    def get_settings(self) -> Settings:
        return self.settings

    def update(self, light_mode=None, hard_mode=None) -> Settings:
        """Change the given flags; None leaves a flag as it is."""
        if light_mode is not None:
            self.settings.light_mode = bool(light_mode)
            self.store.set(self.light_mode_key, self.settings.light_mode)
        if hard_mode is not None:
            self.settings.hard_mode = bool(hard_mode)
            self.store.set(self.hard_mode_key, self.settings.hard_mode)
        return self.settings
