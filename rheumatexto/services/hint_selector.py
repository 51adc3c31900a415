"""
Hint Selector

Picks a reveal word that moves the player roughly halfway from their best
guess toward the target without giving the target away.
"""

import random
from typing import List, Optional, Tuple

from ..config.game_settings import CLOSE_RANK_THRESHOLD, HINT_CLOSE_RANGE, HINT_OPENING_RANGE
from ..models.game import Guess, SessionState
from .word_data import WordData


class HintSelector:
    """Chooses hint words from the active target's ranking table."""

    def __init__(self, word_data: WordData, rng: Optional[random.Random] = None):
        self.word_data = word_data
        self.rng = rng or random.Random()

    def candidate_pool(self, state: SessionState) -> List[Tuple[str, int]]:
        """Unguessed, non-target words of the target's table, best rank first."""
        guessed = state.guessed_words
        pool = [
            (word, rank)
            for word, rank in self.word_data.rankings_for(state.target).items()
            if word != state.target and word not in guessed
        ]
        return sorted(pool, key=lambda entry: entry[1])

    def target_rank(self, best_rank: Optional[int]) -> int:
        if best_rank is None:
            return self.rng.randint(*HINT_OPENING_RANGE)
        if best_rank <= CLOSE_RANK_THRESHOLD:
            return self.rng.randint(*HINT_CLOSE_RANGE)
        return best_rank // 2

    def select_hint(self, state: SessionState) -> Optional[Guess]:
        if state.hints_used >= state.max_hints or state.over:
            return None

        pool = self.candidate_pool(state)
        if not pool:
            return None

        wanted = self.target_rank(state.best_rank)

        # min() keeps the first entry among equal distances
        word, rank = min(pool, key=lambda entry: abs(entry[1] - wanted))
        return Guess(word=word, rank=rank, is_hint=True)
