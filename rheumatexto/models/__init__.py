"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    GameStatus, RejectionReason, Guess, NormalizedWord, SessionState,
    GameEvent, GuessAccepted, GuessRejected, HintExhausted, GameWon, GameGivenUp,
    GameStateView
)
from .stats import PlayerStats, Settings

__all__ = [
    'GameStatus', 'RejectionReason', 'Guess', 'NormalizedWord', 'SessionState',
    'GameEvent', 'GuessAccepted', 'GuessRejected', 'HintExhausted', 'GameWon', 'GameGivenUp',
    'GameStateView', 'PlayerStats', 'Settings'
]
