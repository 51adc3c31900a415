import random
import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from rheumatexto.models.game import GameStatus, Guess, SessionState
from rheumatexto.services.hint_selector import HintSelector
from word_fixtures import StubRandom, build_word_data

LADDER_DATA = {
    "targetWords": ["joint"],
    "wordRankings": {
        "joint": {"joint": 1, "alpha": 5, "beta": 50, "gamma": 90, "delta": 150, "epsilon": 110},
    },
    "commonWords": ["table"],
}


def in_progress(target="joint", guesses=None, hints_used=0, max_hints=3):
    guesses = list(guesses or [])
    return SessionState(
        target=target,
        guesses=guesses,
        best_rank=min((g.rank for g in guesses), default=None),
        hints_used=hints_used,
        max_hints=max_hints,
        status=GameStatus.IN_PROGRESS,
    )


class TestHintSelector(unittest.TestCase):
    def setUp(self):
        self.word_data = build_word_data()

    def test_halfway_to_best_rank(self):
        data = dict(LADDER_DATA)
        data["wordRankings"] = {"joint": {"joint": 1, "alpha": 5, "beta": 50, "gamma": 90, "delta": 150}}
        selector = HintSelector(build_word_data(data), random.Random(0))

        state = in_progress(guesses=[Guess("table", 200)])
        hint = selector.select_hint(state)

        self.assertEqual(selector.target_rank(200), 100)
        self.assertEqual(hint, Guess("gamma", 90, is_hint=True))

    def test_tie_goes_to_better_rank(self):
        # 90 and 110 are both 10 away from 100
        selector = HintSelector(build_word_data(LADDER_DATA), random.Random(0))
        hint = selector.select_hint(in_progress(guesses=[Guess("table", 200)]))
        self.assertEqual(hint.word, "gamma")

    def test_opening_hint_uses_opening_range(self):
        selector = HintSelector(self.word_data, StubRandom(60))
        hint = selector.select_hint(in_progress())
        self.assertEqual(hint, Guess("flare", 60, is_hint=True))

    def test_close_range_when_within_ten(self):
        selector = HintSelector(self.word_data, StubRandom(3))
        self.assertEqual(selector.target_rank(9), 3)

        hint = selector.select_hint(in_progress(guesses=[Guess("swollen", 9)]))
        self.assertEqual(hint.word, "pain")

    def test_heuristic_ranges(self):
        selector = HintSelector(self.word_data, random.Random(3))
        for _ in range(100):
            self.assertTrue(50 <= selector.target_rank(None) <= 99)
            self.assertTrue(2 <= selector.target_rank(10) <= 5)
        self.assertEqual(selector.target_rank(11), 5)

    def test_never_returns_target_or_guessed_word(self):
        selector = HintSelector(self.word_data, random.Random(1))
        state = in_progress(guesses=[Guess("pain", 5), Guess("swollen", 9)])
        for _ in range(50):
            hint = selector.select_hint(state)
            self.assertNotEqual(hint.word, "joint")
            self.assertNotIn(hint.word, {"pain", "swollen"})

    def test_none_when_hints_exhausted(self):
        selector = HintSelector(self.word_data, random.Random(1))
        self.assertIsNone(selector.select_hint(in_progress(hints_used=3, max_hints=3)))

    def test_none_when_game_over(self):
        selector = HintSelector(self.word_data, random.Random(1))
        state = in_progress()
        state.status = GameStatus.GIVEN_UP
        self.assertIsNone(selector.select_hint(state))

    def test_none_when_pool_empty(self):
        selector = HintSelector(self.word_data, random.Random(1))
        guesses = [
            Guess(word, rank) for word, rank in self.word_data.rankings_for("joint").items()
            if word != "joint"
        ]
        self.assertEqual(selector.candidate_pool(in_progress(guesses=guesses)), [])
        self.assertIsNone(selector.select_hint(in_progress(guesses=guesses)))


if __name__ == '__main__':
    unittest.main()
