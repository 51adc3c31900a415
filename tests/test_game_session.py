import copy
import random
import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from rheumatexto.models.game import (
    GameGivenUp, GameStatus, GameWon, Guess, GuessAccepted, GuessRejected, HintExhausted,
    RejectionReason
)
from rheumatexto.services.game_session import GameSession
from word_fixtures import StubRandom, build_word_data


class TestGameSession(unittest.TestCase):
    def setUp(self):
        self.word_data = build_word_data()
        self.session = GameSession(self.word_data, random.Random(11), max_hints=3)
        self.session.start_new_game("joint")

    def snapshot(self):
        return copy.deepcopy(self.session.state)

    def test_new_session_is_not_started(self):
        session = GameSession(self.word_data, random.Random(0))
        self.assertIs(session.status, GameStatus.NOT_STARTED)
        self.assertEqual(session.submit_guess("pain"), [GuessRejected(RejectionReason.GAME_NOT_STARTED)])
        self.assertEqual(session.give_up(), [GuessRejected(RejectionReason.GAME_NOT_STARTED)])

    def test_start_new_game_picks_a_target(self):
        session = GameSession(self.word_data, random.Random(5))
        for _ in range(20):
            state = session.start_new_game()
            self.assertIn(state.target, self.word_data.target_words)
            self.assertIs(state.status, GameStatus.IN_PROGRESS)
            self.assertEqual(state.guesses, [])
            self.assertIsNone(state.best_rank)
            self.assertEqual(state.hints_used, 0)

    def test_start_new_game_rejects_unknown_target(self):
        with self.assertRaises(ValueError):
            self.session.start_new_game("table")

    def test_start_new_game_resets_state(self):
        self.session.submit_guess("pain")
        self.session.use_hint()
        self.session.give_up()

        state = self.session.start_new_game("fatigue")
        self.assertEqual(state.guesses, [])
        self.assertEqual(state.hints_used, 0)
        self.assertIsNone(state.best_rank)
        self.assertIs(state.status, GameStatus.IN_PROGRESS)

    def test_plural_of_target_wins(self):
        events = self.session.submit_guess("joints")

        self.assertEqual(events, [
            GuessAccepted(word="joint", rank=1, was_corrected=True, original="joints", is_new_best=True),
            GameWon(target="joint", guess_count=1),
        ])
        self.assertIs(self.session.status, GameStatus.WON)
        self.assertTrue(self.session.state.won)
        self.assertTrue(self.session.state.over)

    def test_unknown_word_is_rejected(self):
        events = self.session.submit_guess("xyzzy")

        self.assertEqual(events, [GuessRejected(RejectionReason.UNKNOWN_WORD)])
        self.assertEqual(len(self.session.state.guesses), 0)

    def test_empty_input_is_ignored(self):
        before = self.snapshot()
        self.assertEqual(self.session.submit_guess("   "), [])
        self.assertEqual(self.session.state, before)

    def test_duplicate_by_canonical_or_raw_spelling(self):
        self.session.submit_guess("tendons")
        before = self.snapshot()

        self.assertEqual(self.session.submit_guess("tendon"), [GuessRejected(RejectionReason.DUPLICATE_GUESS)])
        self.assertEqual(self.session.submit_guess("TENDONS"), [GuessRejected(RejectionReason.DUPLICATE_GUESS)])
        self.assertEqual(self.session.state, before)

    def test_hint_word_counts_as_guessed(self):
        self.session.hint_selector.rng = StubRandom(60)
        self.session.use_hint()
        self.assertEqual(self.session.submit_guess("flare"), [GuessRejected(RejectionReason.DUPLICATE_GUESS)])

    def test_accepted_guess_reports_new_best(self):
        first = self.session.submit_guess("ache")[0]
        second = self.session.submit_guess("flare")[0]
        third = self.session.submit_guess("pain")[0]

        self.assertTrue(first.is_new_best)
        self.assertFalse(second.is_new_best)
        self.assertTrue(third.is_new_best)
        self.assertEqual(self.session.state.best_rank, 5)

    def test_cross_target_and_common_words_are_accepted(self):
        tired = self.session.submit_guess("tired")[0]
        self.assertEqual(tired.rank, 502)

        table = self.session.submit_guess("table")[0]
        self.assertTrue(1500 <= table.rank <= 1999)

    def test_best_rank_is_minimum_of_guesses(self):
        rng = random.Random(99)
        vocabulary = ["pain", "swollen", "tendon", "bone", "ache", "flare", "tired", "coffee",
                      "pager", "biopsy", "table", "chair", "house", "box"]
        for _ in range(25):
            self.session.start_new_game("joint")
            best = []
            for word in rng.sample(vocabulary, rng.randint(1, len(vocabulary))):
                self.session.submit_guess(word)
                best.append(self.session.state.best_rank)

            ranks = [guess.rank for guess in self.session.state.guesses]
            self.assertEqual(self.session.state.best_rank, min(ranks))
            self.assertEqual(best, sorted(best, reverse=True))

    def test_hint_is_recorded_as_guess(self):
        self.session.hint_selector.rng = StubRandom(60)
        events = self.session.use_hint()

        self.assertEqual(events, [GuessAccepted(word="flare", rank=60, is_hint=True, is_new_best=True)])
        self.assertEqual(self.session.state.guesses, [Guess("flare", 60, is_hint=True)])
        self.assertEqual(self.session.state.hints_used, 1)
        self.assertEqual(self.session.state.best_rank, 60)

    def test_hints_exhausted(self):
        for _ in range(3):
            self.assertIsInstance(self.session.use_hint()[0], GuessAccepted)
        before = self.snapshot()

        self.assertEqual(self.session.use_hint(), [HintExhausted(hints_used=3, max_hints=3)])
        self.assertEqual(self.session.state, before)

    def test_hints_exhausted_regardless_of_state(self):
        for _ in range(3):
            self.session.use_hint()
        self.session.give_up()
        self.assertEqual(self.session.use_hint(), [HintExhausted(hints_used=3, max_hints=3)])

    def test_no_hint_available(self):
        for word in ["pain", "swollen", "tendon", "bone", "ache", "flare"]:
            self.session.submit_guess(word)
        before = self.snapshot()

        self.assertEqual(self.session.use_hint(), [GuessRejected(RejectionReason.NO_HINT_AVAILABLE)])
        self.assertEqual(self.session.state, before)

    def test_give_up(self):
        self.session.submit_guess("pain")
        events = self.session.give_up()

        self.assertEqual(events, [GameGivenUp(target="joint")])
        self.assertIs(self.session.status, GameStatus.GIVEN_UP)
        self.assertFalse(self.session.state.won)

    def test_terminal_states_reject_operations(self):
        self.session.submit_guess("joint")
        before = self.snapshot()

        self.assertEqual(self.session.submit_guess("pain"), [GuessRejected(RejectionReason.GAME_OVER)])
        self.assertEqual(self.session.use_hint(), [GuessRejected(RejectionReason.GAME_OVER)])
        self.assertEqual(self.session.give_up(), [GuessRejected(RejectionReason.GAME_OVER)])
        self.assertEqual(self.session.state, before)

    def test_hard_mode_survives_new_game(self):
        self.session.set_hard_mode(True)
        state = self.session.start_new_game()
        self.assertTrue(state.hard_mode)


if __name__ == '__main__':
    unittest.main()
