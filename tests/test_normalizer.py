import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from rheumatexto.services.normalizer import WordNormalizer, candidate_forms
from word_fixtures import build_word_data


class TestCandidateForms(unittest.TestCase):
    def test_ies_plural(self):
        self.assertEqual(candidate_forms("studies", {}), ["study", "studi", "studie", "studie"])

    def test_ing_endings(self):
        self.assertEqual(candidate_forms("typing", {}), ["typ", "type"])

    def test_ed_endings(self):
        self.assertEqual(candidate_forms("diagnosed", {}), ["diagnos", "diagnose", "diagnose"])

    def test_tion_ending(self):
        self.assertEqual(candidate_forms("ulceration", {}), ["ulcerate"])

    def test_short_words_are_left_alone(self):
        self.assertEqual(candidate_forms("ies", {}), ["i", "ie", "ie"])
        self.assertEqual(candidate_forms("ring", {}), [])
        self.assertEqual(candidate_forms("bed", {}), [])

    def test_known_variant_comes_first(self):
        candidates = candidate_forms("swelling")
        self.assertEqual(candidates[0], "swollen")
        self.assertIn("swell", candidates)

    def test_variant_without_suffix_rule(self):
        self.assertEqual(candidate_forms("sleepy"), ["tired"])


class TestWordNormalizer(unittest.TestCase):
    def setUp(self):
        self.word_data = build_word_data()
        self.normalizer = WordNormalizer(self.word_data)

    def test_exact_key_is_unchanged(self):
        result = self.normalizer.normalize("  Pain ", "joint")
        self.assertEqual(result.canonical, "pain")
        self.assertFalse(result.was_corrected)
        self.assertIsNone(result.original)

    def test_key_of_other_target_is_unchanged(self):
        result = self.normalizer.normalize("tired", "joint")
        self.assertEqual(result.canonical, "tired")
        self.assertFalse(result.was_corrected)

    def test_plural_is_corrected(self):
        result = self.normalizer.normalize("joints", "joint")
        self.assertEqual(result.canonical, "joint")
        self.assertTrue(result.was_corrected)
        self.assertEqual(result.original, "joints")

    def test_suffix_rules_try_every_candidate(self):
        # "aches" -> "ach" (unranked) then "ache"
        result = self.normalizer.normalize("aches", "joint")
        self.assertEqual(result.canonical, "ache")
        self.assertTrue(result.was_corrected)

    def test_variant_ranked_under_other_target(self):
        result = self.normalizer.normalize("pagers", "joint")
        self.assertEqual(result.canonical, "pager")
        self.assertTrue(result.was_corrected)

    def test_common_word_is_unchanged(self):
        result = self.normalizer.normalize("table", "joint")
        self.assertEqual(result.canonical, "table")
        self.assertFalse(result.was_corrected)

    def test_candidate_in_common_words(self):
        result = self.normalizer.normalize("boxes", "joint")
        self.assertEqual(result.canonical, "box")
        self.assertTrue(result.was_corrected)
        self.assertEqual(result.original, "boxes")

    def test_unknown_word_passes_through(self):
        result = self.normalizer.normalize("Xyzzy", "joint")
        self.assertEqual(result.canonical, "xyzzy")
        self.assertFalse(result.was_corrected)

    def test_idempotent_on_ranked_words(self):
        for target, rankings in self.word_data.word_rankings.items():
            for word in rankings:
                first = self.normalizer.normalize(word, target)
                self.assertEqual(first.canonical, word)
                self.assertEqual(self.normalizer.normalize(first.canonical, target), first)


if __name__ == '__main__':
    unittest.main()
