"""
Player Data Models

Contains player statistics and settings data structures.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class PlayerStats:
    """Lifetime statistics. best_win is None until the first win."""
    played: int = 0
    won: int = 0
    total_guesses: int = 0
    best_win: Optional[int] = None
    current_streak: int = 0
    max_streak: int = 0

    @property
    def average_guesses(self) -> Optional[int]:
        if self.won == 0:
            return None
        return round(self.total_guesses / self.won)

    def record_win(self, guess_count: int) -> None:
        self.played += 1
        self.won += 1
        self.total_guesses += guess_count
        if self.best_win is None or guess_count < self.best_win:
            self.best_win = guess_count
        self.current_streak += 1
        if self.current_streak > self.max_streak:
            self.max_streak = self.current_streak

    def record_loss(self) -> None:
        self.played += 1
        self.current_streak = 0

    def to_record(self) -> Dict[str, Any]:
        """Flat record in the persisted key layout."""
        return {
            'played': self.played,
            'won': self.won,
            'totalGuesses': self.total_guesses,
            'bestWin': self.best_win,
            'currentStreak': self.current_streak,
            'maxStreak': self.max_streak,
        }

    @classmethod
    def from_record(cls, record: Optional[Dict[str, Any]]) -> 'PlayerStats':
        if not record:
            return cls()
        return cls(
            played=int(record.get('played', 0)),
            won=int(record.get('won', 0)),
            total_guesses=int(record.get('totalGuesses', 0)),
            best_win=record.get('bestWin'),
            current_streak=int(record.get('currentStreak', 0)),
            max_streak=int(record.get('maxStreak', 0)),
        )


@dataclass
class Settings:
    """Player preferences."""
    light_mode: bool = False
    hard_mode: bool = False
