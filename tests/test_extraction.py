import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from zudora.intent.extraction import (  # noqa: E402
    ChainedExtractor,
    FirstMatchExtractor,
    LabeledFieldExtractor,
    ScoreCategory,
    build_extractor,
)


class FirstMatchExtractorTests(unittest.TestCase):
    def setUp(self):
        self.extractor = FirstMatchExtractor()

    def test_score_and_category_are_extracted(self):
        self.assertEqual(
            self.extractor.extract("I scored 185 marks in BC category"),
            ScoreCategory(score=185.0, category="BC"),
        )

    def test_decimal_score_and_lower_case_category(self):
        self.assertEqual(
            self.extractor.extract("cutoff 178.75 mbc"),
            ScoreCategory(score=178.75, category="MBC"),
        )

    def test_longer_codes_are_not_cut_short(self):
        self.assertEqual(self.extractor.extract("190 BCM").category, "BCM")
        self.assertEqual(self.extractor.extract("150 sca").category, "SCA")

    def test_first_number_wins(self):
        # Known ambiguity: the age is picked up instead of the score.
        self.assertEqual(
            self.extractor.extract("I am 18 and scored 190 in OC"),
            ScoreCategory(score=18.0, category="OC"),
        )

    def test_missing_half_returns_none(self):
        self.assertIsNone(self.extractor.extract("I scored 185"))
        self.assertIsNone(self.extractor.extract("I am in BC category"))
        self.assertIsNone(self.extractor.extract("1850 BC"))
        self.assertIsNone(self.extractor.extract("scored 185 in obc"))
        self.assertIsNone(self.extractor.extract(""))


class LabeledFieldExtractorTests(unittest.TestCase):
    def test_labelled_fields(self):
        extractor = LabeledFieldExtractor()
        self.assertEqual(
            extractor.extract("I am 18. marks: 185, category: BC"),
            ScoreCategory(score=185.0, category="BC"),
        )
        self.assertEqual(
            extractor.extract("cutoff=170 community=MBC"),
            ScoreCategory(score=170.0, category="MBC"),
        )

    def test_unlabelled_text_is_ignored(self):
        self.assertIsNone(LabeledFieldExtractor().extract("I scored 185 in BC"))


class ChainedExtractorTests(unittest.TestCase):
    def test_labelled_then_first_match(self):
        extractor = build_extractor("labeled_then_first")
        self.assertIsInstance(extractor, ChainedExtractor)
        self.assertEqual(
            extractor.extract("age: 18, marks: 190, category: OC").score,
            190.0,
        )
        self.assertEqual(extractor.extract("I scored 185 in BC").score, 185.0)

    def test_unknown_strategy(self):
        self.assertIsInstance(build_extractor("first_match"), FirstMatchExtractor)
        self.assertIsInstance(build_extractor("labeled"), LabeledFieldExtractor)
        with self.assertRaises(ValueError):
            build_extractor("nearest_keyword")


if __name__ == "__main__":
    unittest.main()
