"""
Unit tests for quiz/config.py
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

import unittest
from quiz.config import (
    AVAILABILITY_RULE,
    AVERAGE_RULE,
    DEFAULT_VARIANT,
    PLAY_POTENTIAL_AXIS,
    Question,
    build_questions,
    create_catalog_dataframe,
    get_questions,
    get_variant,
    list_variants,
    validate_catalog,
)


class TestQuizCatalog(unittest.TestCase):
    """Test cases for the question catalogs."""

    def setUp(self):
        self.potential = get_variant("potential")
        self.classic = get_variant("classic")

    def test_registered_variants(self):
        """Both catalogs are registered and the 13-axis one is the default."""
        self.assertEqual(set(list_variants()), {"potential", "classic"})
        self.assertEqual(DEFAULT_VARIANT, "potential")

    def test_potential_shape(self):
        self.assertEqual(len(self.potential.axes), 13)
        self.assertEqual(self.potential.total_questions, 39)
        self.assertEqual(self.potential.axes[-1], PLAY_POTENTIAL_AXIS)

    def test_classic_shape(self):
        self.assertEqual(len(self.classic.axes), 11)
        self.assertEqual(self.classic.total_questions, 33)
        self.assertEqual(self.classic.axes[-1], "Play Frequency")

    def test_every_axis_has_three_questions_in_axis_order(self):
        """Questions are grouped by axis, in the axis list's order."""
        for variant in (self.potential, self.classic):
            asked_axes = [q.axis for q in variant.questions]
            expected = [axis for axis in variant.axes for _ in range(3)]
            self.assertEqual(asked_axes, expected)

    def test_question_ids(self):
        """Potential ids step by 10 per axis, classic ids by 3."""
        potential_ids = [q.id for q in self.potential.questions]
        self.assertEqual(potential_ids[:4], [1, 2, 3, 11])
        self.assertEqual(potential_ids[-1], 123)

        classic_ids = [q.id for q in self.classic.questions]
        self.assertEqual(classic_ids, list(range(1, 34)))

    def test_options_are_ordered_and_non_empty(self):
        for variant in (self.potential, self.classic):
            for q in variant.questions:
                self.assertEqual(len(q.options), 5)
                self.assertIsInstance(q.options, tuple)

        first = self.potential.questions[0]
        self.assertEqual(first.options[0], "Very rarely")
        self.assertEqual(first.options[-1], "Very often")

    def test_scoring_rules(self):
        """Only Play Potential uses the availability table."""
        self.assertEqual(self.potential.rule_for(PLAY_POTENTIAL_AXIS), AVAILABILITY_RULE)
        self.assertEqual(self.potential.rule_for("Storytelling"), AVERAGE_RULE)
        for axis in self.classic.axes:
            self.assertEqual(self.classic.rule_for(axis), AVERAGE_RULE)

    def test_play_potential_question_order(self):
        """Availability answers are positional: actual, desired, available."""
        texts = [q.text for q in self.potential.questions if q.axis == PLAY_POTENTIAL_AXIS]
        self.assertEqual(texts, [
            "How often do you currently play TTRPGs?",
            "How often would you ideally want to play?",
            "How available are you for long-term campaigns?",
        ])

    def test_get_variant_unknown(self):
        with self.assertRaises(ValueError):
            get_variant("nonexistent")

    def test_get_questions_returns_copy(self):
        questions = get_questions("classic")
        questions.clear()
        self.assertEqual(len(get_questions("classic")), 33)

    def test_build_questions_labels(self):
        questions = build_questions({"A": [("a1", ("x", "y"))], "B": [("b1", ("x",)), ("b2", ("x",))]}, id_stride=10)
        self.assertEqual([q.id for q in questions], [1, 11, 12])
        self.assertEqual(questions[2].label, "B #2")

    def test_validate_catalog_unknown_axis(self):
        with self.assertRaises(ValueError):
            validate_catalog(["A"], [Question(id=1, text="?", axis="B", options=("x",))])

    def test_validate_catalog_duplicate_axis(self):
        with self.assertRaises(ValueError):
            validate_catalog(["A", "A"], [])

    def test_validate_catalog_empty_options(self):
        with self.assertRaises(ValueError):
            validate_catalog(["A"], [Question(id=1, text="?", axis="A", options=())])

    def test_validate_catalog_duplicate_id(self):
        q = Question(id=1, text="?", axis="A", options=("x",))
        with self.assertRaises(ValueError):
            validate_catalog(["A"], [q, q])

    def test_catalog_dataframe(self):
        df = create_catalog_dataframe("potential")
        self.assertEqual(len(df), 39)
        self.assertEqual(df.index.name, "Id")
        self.assertEqual(set(df.loc[df["Axis"] == PLAY_POTENTIAL_AXIS, "Rule"]), {AVAILABILITY_RULE})


if __name__ == '__main__':
    unittest.main()
