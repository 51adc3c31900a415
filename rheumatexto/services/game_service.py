"""
Game Service

Owns the single active game session together with the statistics and
settings services, and keeps them in step when a game ends.
"""

import random
from typing import List, Optional

from ..config.game_settings import MAX_HINTS
from ..models.game import GameEvent, GameGivenUp, GameStateView, GameWon, GuessAccepted
from ..models.stats import PlayerStats, Settings
from ..utils.game_logger import game_logger
from ..utils.presentation import guess_visualization, share_text, sorted_history
from .game_session import GameSession
from .stats_service import SettingsService, StatsService
from .storage_service import KeyValueStore
from .word_data import WordData


class GameService:
    """
    Process-wide game service.

    This class handles:
    - Starting games and routing guesses, hints and give-ups to the session
    - Recording wins and losses in the persisted statistics
    - Applying the hard mode setting to new and running games
    - Building the client-facing state without leaking the answer
    """

    def __init__(self,
                 word_data: WordData,
                 store: KeyValueStore,
                 namespace: str = 'rheumatexto',
                 max_hints: int = MAX_HINTS,
                 rng: Optional[random.Random] = None,
                 share_url: Optional[str] = None):
        self.word_data = word_data
        self.stats_service = StatsService(store, namespace)
        self.settings_service = SettingsService(store, namespace)
        self.share_url = share_url
        self.session = GameSession(
            word_data,
            rng=rng,
            max_hints=max_hints,
            hard_mode=self.settings_service.get_settings().hard_mode,
        )

    @property
    def hard_mode(self) -> bool:
        return self.session.state.hard_mode

    def start_new_game(self, target: Optional[str] = None, source: str = 'system') -> GameStateView:
        state = self.session.start_new_game(target)
        game_logger.log_game_event('game_started', source, max_hints=state.max_hints)
        return self.get_game_state()

    def _apply(self, events: List[GameEvent], source: str) -> List[GameEvent]:
        """Persist statistics and log the outcome of an engine operation."""
        for event in events:
            if isinstance(event, GameWon):
                self.stats_service.record_win(event.guess_count)
                game_logger.log_game_event(
                    event.name, source, target_word=event.target, guess_count=event.guess_count,
                    hints_used=self.session.state.hints_used
                )
            elif isinstance(event, GameGivenUp):
                self.stats_service.record_loss()
                game_logger.log_game_event(
                    event.name, source, target_word=event.target,
                    guess_count=len(self.session.state.guesses)
                )
            elif isinstance(event, GuessAccepted) and event.is_hint:
                game_logger.log_game_event(
                    'hint_used', source, hint_word=event.word, rank=event.rank,
                    hints_used=self.session.state.hints_used
                )
        return events

    def submit_guess(self, raw: str, source: str = 'system') -> List[GameEvent]:
        return self._apply(self.session.submit_guess(raw), source)

    def use_hint(self, source: str = 'system') -> List[GameEvent]:
        return self._apply(self.session.use_hint(), source)

    def give_up(self, source: str = 'system') -> List[GameEvent]:
        return self._apply(self.session.give_up(), source)

    def get_game_state(self) -> GameStateView:
        """
        Returns the current game state (without revealing the answer
        until the game is over).
        """
        state = self.session.state
        return GameStateView(
            status=state.status.value,
            guess_count=len(state.guesses),
            best_rank=state.best_rank,
            hints_used=state.hints_used,
            max_hints=state.max_hints,
            hard_mode=state.hard_mode,
            game_over=state.over,
            won=state.won,
            guesses=sorted_history(state.guesses),
            answer=state.target if state.over else None,
            visualization=guess_visualization(state.guesses) if state.won else [],
        )

    def get_share_text(self) -> Optional[str]:
        """Share text for a won game, None otherwise."""
        state = self.session.state
        if not state.won:
            return None
        return share_text(state.target, state.guesses, self.share_url)

    def get_stats(self) -> PlayerStats:
        return self.stats_service.get_stats()

    def get_settings(self) -> Settings:
        return self.settings_service.get_settings()

    def update_settings(self, light_mode: Optional[bool] = None, hard_mode: Optional[bool] = None) -> Settings:
        settings = self.settings_service.update(light_mode=light_mode, hard_mode=hard_mode)
        self.session.set_hard_mode(settings.hard_mode)
        return settings


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_data: WordData, store: KeyValueStore, config_class=None,
                            rng: Optional[random.Random] = None) -> GameService:
    """Initialize the global game service instance and start the first game."""
    global _game_service
    if config_class is None:
        from ..config import Config
        config_class = Config
    _game_service = GameService(
        word_data,
        store,
        namespace=config_class.STORAGE_NAMESPACE,
        max_hints=config_class.MAX_HINTS,
        rng=rng,
        share_url=config_class.SHARE_URL,
    )
    _game_service.start_new_game()
    return _game_service
