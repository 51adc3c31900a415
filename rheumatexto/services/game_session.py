"""
Game Session

Owns the state of one game and applies guesses, hints and give-ups to it.
Every operation returns the events it produced; rejected operations leave the
state untouched.
"""

import random
from typing import List, Optional

from ..config.game_settings import MAX_HINTS
from ..models.game import (
    GameEvent, GameGivenUp, GameStatus, GameWon, Guess, GuessAccepted, GuessRejected,
    HintExhausted, RejectionReason, SessionState
)
from .hint_selector import HintSelector
from .normalizer import WordNormalizer, clean_input
from .rank_resolver import RankResolver
from .word_data import WordData


class GameSession:
    """
    Single-game state machine: NOT_STARTED -> IN_PROGRESS -> WON | GIVEN_UP.

    The random source is shared by target selection, generic ranks and hint
    heuristics so a seeded Random makes a whole game reproducible.
    """

    def __init__(self,
                 word_data: WordData,
                 rng: Optional[random.Random] = None,
                 max_hints: int = MAX_HINTS,
                 hard_mode: bool = False):
        self.word_data = word_data
        self.rng = rng or random.Random()
        self.max_hints = max_hints
        self.normalizer = WordNormalizer(word_data)
        self.resolver = RankResolver(word_data, self.rng)
        self.hint_selector = HintSelector(word_data, self.rng)
        self.state = SessionState(max_hints=max_hints, hard_mode=hard_mode)

    @property
    def status(self) -> GameStatus:
        return self.state.status

    def start_new_game(self, target: Optional[str] = None) -> SessionState:
        """
        Replace the current state with a fresh game.

        Args:
            target: Force a target word (must be one of the target words);
                a random one is picked when omitted
        """
        if target is None:
            target = self.rng.choice(self.word_data.target_words)
        elif target not in self.word_data.word_rankings:
            raise ValueError(f"'{target}' is not a target word")

        self.state = SessionState(
            target=target,
            max_hints=self.max_hints,
            hard_mode=self.state.hard_mode,
            status=GameStatus.IN_PROGRESS,
        )
        return self.state

    def set_hard_mode(self, hard_mode: bool) -> None:
        self.state.hard_mode = hard_mode

    def _inactive_rejection(self) -> Optional[GuessRejected]:
        if self.state.status is GameStatus.NOT_STARTED:
            return GuessRejected(RejectionReason.GAME_NOT_STARTED)
        if self.state.over:
            return GuessRejected(RejectionReason.GAME_OVER)
        return None

    def _record(self, guess: Guess, **details) -> List[GameEvent]:
        state = self.state
        is_new_best = state.best_rank is None or guess.rank < state.best_rank

        state.guesses.append(guess)
        if is_new_best:
            state.best_rank = guess.rank

        events: List[GameEvent] = [GuessAccepted(
            word=guess.word,
            rank=guess.rank,
            is_hint=guess.is_hint,
            is_new_best=is_new_best,
            **details
        )]

        if guess.rank == 1:
            state.status = GameStatus.WON
            events.append(GameWon(target=state.target, guess_count=len(state.guesses)))

        return events

    def submit_guess(self, raw: str) -> List[GameEvent]:
        """Normalize, rank and record a player guess."""
        word = clean_input(raw or "")
        if not word:
            return []

        rejection = self._inactive_rejection()
        if rejection:
            return [rejection]

        normalized = self.normalizer.normalize(word, self.state.target)

        guessed = self.state.guessed_words
        if normalized.canonical in guessed or word in guessed:
            return [GuessRejected(RejectionReason.DUPLICATE_GUESS)]

        rank = self.resolver.resolve(normalized.canonical, self.state.target)
        if rank is None:
            return [GuessRejected(RejectionReason.UNKNOWN_WORD)]

        return self._record(
            Guess(word=normalized.canonical, rank=rank),
            was_corrected=normalized.was_corrected,
            original=normalized.original,
        )

    def use_hint(self) -> List[GameEvent]:
        """Reveal a hint word and record it as a guess."""
        if self.state.hints_used >= self.state.max_hints:
            return [HintExhausted(hints_used=self.state.hints_used, max_hints=self.state.max_hints)]

        rejection = self._inactive_rejection()
        if rejection:
            return [rejection]

        hint = self.hint_selector.select_hint(self.state)
        if hint is None:
            return [GuessRejected(RejectionReason.NO_HINT_AVAILABLE)]

        self.state.hints_used += 1
        return self._record(hint)

    def give_up(self) -> List[GameEvent]:
        rejection = self._inactive_rejection()
        if rejection:
            return [rejection]

        self.state.status = GameStatus.GIVEN_UP
        return [GameGivenUp(target=self.state.target)]
