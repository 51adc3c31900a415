"""
Word Normalizer

Maps raw player input to the dictionary form used as a ranking-table key:
plurals, verb endings and a table of known irregular variants are folded back
to their base word.
"""

from typing import Dict, List, Optional

from ..config.game_settings import KNOWN_VARIANTS
from ..models.game import NormalizedWord
from .word_data import WordData


def clean_input(raw: str) -> str:
    return raw.strip().lower()


def candidate_forms(word: str, variants: Optional[Dict[str, str]] = None) -> List[str]:
    """
    Possible base forms of word, best first.

    Every matching suffix rule contributes; a known variant is always tried
    before any of them.
    """
    variants = KNOWN_VARIANTS if variants is None else variants
    candidates: List[str] = []

    if word.endswith('ies') and len(word) > 3:
        candidates.append(word[:-3] + 'y')        # biopsies -> biopsy
    if word.endswith('es') and len(word) > 2:
        candidates.append(word[:-2])              # rashes -> rash
        candidates.append(word[:-1])              # flares -> flare
    if word.endswith('s') and len(word) > 1:
        candidates.append(word[:-1])              # joints -> joint
    if word.endswith('ing') and len(word) > 4:
        candidates.append(word[:-3])              # aching -> ach
        candidates.append(word[:-3] + 'e')        # aching -> ache
    if word.endswith('ed') and len(word) > 3:
        candidates.append(word[:-2])
        candidates.append(word[:-1])              # tired -> tire
        candidates.append(word[:-2] + 'e')        # diagnosed -> diagnose
    if word.endswith('tion') and len(word) > 4:
        candidates.append(word[:-4] + 'te')       # ulceration -> ulcerate

    if word in variants:
        candidates.insert(0, variants[word])

    return candidates


class WordNormalizer:
    """Resolves player input against the ranking tables and common words."""

    def __init__(self, word_data: WordData, variants: Optional[Dict[str, str]] = None):
        self.word_data = word_data
        self.variants = KNOWN_VARIANTS if variants is None else variants

    def normalize(self, raw: str, target: str) -> NormalizedWord:
        """
        Find the canonical form of raw for the given target.

        Ranked words win over common words, and the input as typed wins over
        any derived candidate at the same level. Input that matches nothing is
        returned unchanged so rank resolution can reject it.
        """
        word = clean_input(raw)

        if self.word_data.find_ranked(word, target) is not None:
            return NormalizedWord(canonical=word)

        candidates = candidate_forms(word, self.variants)

        for candidate in candidates:
            if self.word_data.find_ranked(candidate, target) is not None:
                return NormalizedWord(canonical=candidate, was_corrected=True, original=word)

        if self.word_data.is_common(word):
            return NormalizedWord(canonical=word)

        for candidate in candidates:
            if self.word_data.is_common(candidate):
                return NormalizedWord(canonical=candidate, was_corrected=True, original=word)

        return NormalizedWord(canonical=word)
