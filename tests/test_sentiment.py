"""
Mood classification tests.

Covers:
- Neutral default for text with no keyword hits
- Score / confidence formulas and the confidence cap
- Distinct-keyword counting (repeats count once, substrings match)
- Priority tie-break (happy > sad > nostalgic > excited)
- Custom keyword tables
"""

import unittest

from memory_atlas.sentiment import (
    MOOD_LABELS,
    MOOD_PRIORITY,
    MoodAnalysis,
    SentimentClassifier,
)


class TestSentimentClassifier(unittest.TestCase):
    def setUp(self):
        self.classifier = SentimentClassifier()

    def test_empty_text_is_neutral_default(self):
        result = self.classifier.classify("")
        self.assertEqual(result, MoodAnalysis("neutral", 0.5, 0.3))

    def test_none_text_is_neutral_default(self):
        self.assertEqual(self.classifier.classify(None).label, "neutral")

    def test_no_hits_is_neutral_default(self):
        result = self.classifier.classify("Walked to the post office")
        self.assertEqual(result.label, "neutral")
        self.assertEqual(result.score, 0.5)
        self.assertEqual(result.confidence, 0.3)

    def test_nostalgic(self):
        result = self.classifier.classify("London I miss my childhood home")
        self.assertEqual(result.label, "nostalgic")
        self.assertAlmostEqual(result.score, 2 / 3)
        self.assertAlmostEqual(result.confidence, 2 / 3)

    def test_happy_beats_excited_on_shared_keyword(self):
        # "amazing" is in both lists; "happy" tips it further
        result = self.classifier.classify("Amazing happy trip")
        self.assertEqual(result.label, "happy")
        self.assertAlmostEqual(result.score, 2 / 3)

    def test_tie_resolves_to_priority_order(self):
        result = self.classifier.classify("happy but sad")
        self.assertEqual(result.label, "happy")
        self.assertAlmostEqual(result.score, 0.5)
        self.assertAlmostEqual(result.confidence, 1 / 3)

    def test_sad_beats_nostalgic_on_tie(self):
        result = self.classifier.classify("a sad thing to remember")
        self.assertEqual(result.label, "sad")

    def test_excited_keyword_alone_is_happy(self):
        self.assertEqual(self.classifier.classify("So excited!").label, "happy")

    def test_excited(self):
        result = self.classifier.classify("Thrilling adventure, simply incredible")
        self.assertEqual(result.label, "excited")
        self.assertAlmostEqual(result.score, 0.75)
        self.assertEqual(result.confidence, 1.0)

    def test_confidence_caps_at_one(self):
        result = self.classifier.classify("happy joy love fun")
        self.assertEqual(result.label, "happy")
        self.assertAlmostEqual(result.score, 0.8)
        self.assertEqual(result.confidence, 1.0)

    def test_repeated_keyword_counts_once(self):
        result = self.classifier.classify("sad sad sad sad")
        self.assertEqual(result.label, "sad")
        self.assertAlmostEqual(result.score, 0.5)

    def test_substring_membership(self):
        # "badge" contains "bad"
        self.assertEqual(self.classifier.classify("Got a badge").label, "sad")

    def test_multi_word_keyword(self):
        self.assertEqual(self.classifier.classify("We used to go there").label, "nostalgic")

    def test_case_insensitive(self):
        self.assertEqual(self.classifier.classify("HAPPY DAYS").label, "happy")

    def test_pure_and_repeatable(self):
        text = "Beautiful sunset, I remember it well"
        self.assertEqual(self.classifier.classify(text), self.classifier.classify(text))

    def test_outputs_stay_in_range(self):
        for text in ("", "x" * 1000, "amazing " * 50, "sad awful worst hate tragic bad"):
            result = self.classifier.classify(text)
            self.assertIn(result.label, MOOD_LABELS)
            self.assertGreaterEqual(result.score, 0.0)
            self.assertLess(result.score, 1.0)
            self.assertGreaterEqual(result.confidence, 0.0)
            self.assertLessEqual(result.confidence, 1.0)

    def test_hits_reports_every_priority_mood(self):
        hits = self.classifier.hits("amazing")
        self.assertEqual(list(hits), list(MOOD_PRIORITY))
        self.assertEqual(hits["happy"], 1)
        self.assertEqual(hits["excited"], 1)
        self.assertEqual(hits["sad"], 0)


class TestCustomTables(unittest.TestCase):
    def test_custom_keywords(self):
        classifier = SentimentClassifier(
            keywords={"happy": ["sunny"], "sad": ["rainy"]},
            priority=["sad", "happy"],
        )
        self.assertEqual(classifier.classify("sunny then rainy").label, "sad")

    def test_priority_without_keywords_rejected(self):
        with self.assertRaises(ValueError):
            SentimentClassifier(keywords={"happy": ["sunny"]})


class TestDescribe(unittest.TestCase):
    def test_known_labels(self):
        self.assertEqual(SentimentClassifier.describe("happy"), "A joyful memory")
        self.assertEqual(SentimentClassifier.describe("sad"), "A somber moment")

    def test_unknown_falls_back_to_neutral(self):
        self.assertEqual(SentimentClassifier.describe(None), "A neutral memory")
        self.assertEqual(SentimentClassifier.describe("grumpy"), "A neutral memory")


if __name__ == "__main__":
    unittest.main()
