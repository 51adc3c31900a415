"""
Game Data Models

Contains all game-related data structures, enums and result events.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional


class GameStatus(Enum):
    """Lifecycle of a single game session."""
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    GIVEN_UP = "GIVEN_UP"


class RejectionReason(Enum):
    """Why a guess, hint or give-up request was refused."""
    DUPLICATE_GUESS = "duplicate_guess"
    UNKNOWN_WORD = "unknown_word"
    NO_HINT_AVAILABLE = "no_hint_available"
    GAME_OVER = "game_over"
    GAME_NOT_STARTED = "game_not_started"


@dataclass(frozen=True)
class Guess:
    """A single accepted entry in the guess history."""
    word: str
    rank: int
    is_hint: bool = False


@dataclass(frozen=True)
class NormalizedWord:
    """Result of mapping raw player input to a dictionary form."""
    canonical: str
    was_corrected: bool = False
    original: Optional[str] = None


@dataclass
class SessionState:
    """
    Mutable state of one game.

    best_rank stays None until the first guess is accepted; it only ever
    decreases afterwards.
    """
    target: str = ""
    guesses: List[Guess] = field(default_factory=list)
    best_rank: Optional[int] = None
    hints_used: int = 0
    max_hints: int = 3
    hard_mode: bool = False
    status: GameStatus = GameStatus.NOT_STARTED

    @property
    def over(self) -> bool:
        return self.status in (GameStatus.WON, GameStatus.GIVEN_UP)

    @property
    def won(self) -> bool:
        return self.status is GameStatus.WON

    @property
    def guessed_words(self) -> set:
        return {guess.word for guess in self.guesses}


@dataclass(frozen=True)
class GameEvent:
    """Base class for everything the engine reports to the presentation layer."""
    name: ClassVar[str] = "game_event"

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['event'] = self.name
        return data


@dataclass(frozen=True)
class GuessAccepted(GameEvent):
    name: ClassVar[str] = "guess_accepted"
    word: str
    rank: int
    is_hint: bool = False
    was_corrected: bool = False
    original: Optional[str] = None
    is_new_best: bool = False


@dataclass(frozen=True)
class GuessRejected(GameEvent):
    name: ClassVar[str] = "guess_rejected"
    reason: RejectionReason

    def to_dict(self) -> Dict[str, Any]:
        return {'event': self.name, 'reason': self.reason.value}


@dataclass(frozen=True)
class HintExhausted(GameEvent):
    name: ClassVar[str] = "hint_exhausted"
    hints_used: int
    max_hints: int


@dataclass(frozen=True)
class GameWon(GameEvent):
    name: ClassVar[str] = "game_won"
    target: str
    guess_count: int


@dataclass(frozen=True)
class GameGivenUp(GameEvent):
    name: ClassVar[str] = "game_given_up"
    target: str


@dataclass
class GameStateView:
    """Client-facing game state representation."""
    status: str
    guess_count: int
    best_rank: Optional[int]
    hints_used: int
    max_hints: int
    hard_mode: bool
    game_over: bool
    won: bool
    guesses: List[Dict[str, Any]]
    answer: Optional[str] = None  # Only included when game is over
    visualization: List[str] = field(default_factory=list)  # Only filled for a won game
