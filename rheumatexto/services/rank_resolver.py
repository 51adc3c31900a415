"""
Rank Resolver

Turns a canonical word into a proximity rank for the active target.
"""

import random
from typing import Optional

from ..config.game_settings import CROSS_TARGET_PENALTY, GENERIC_RANK_RANGE, MAX_RANK
from .word_data import WordData


class RankResolver:
    """
    Rank lookup with fallbacks, first match wins:

    1. the target's own table (1 = the target itself)
    2. common words get a random rank in GENERIC_RANK_RANGE
    3. words ranked under another target get that rank plus
       CROSS_TARGET_PENALTY, capped at MAX_RANK
    4. anything else is unrecognized (None)
    """

    def __init__(self, word_data: WordData, rng: Optional[random.Random] = None):
        self.word_data = word_data
        self.rng = rng or random.Random()

    def resolve(self, word: str, target: str) -> Optional[int]:
        rankings = self.word_data.rankings_for(target)
        if word in rankings:
            return rankings[word]

        if self.word_data.is_common(word):
            low, high = GENERIC_RANK_RANGE
            return self.rng.randint(low, high)

        for other in self.word_data.target_words:
            other_rankings = self.word_data.word_rankings[other]
            if word in other_rankings:
                return min(MAX_RANK, other_rankings[word] + CROSS_TARGET_PENALTY)

        return None
