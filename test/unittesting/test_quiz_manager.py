"""
Unit tests for quiz/scoring.py
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

import unittest
from quiz.config import AVAILABILITY_RULE, PLAY_POTENTIAL_AXIS
from quiz.scoring import (
    Answer,
    AxisScore,
    QuizManager,
    aggregate,
    availability_rule,
    average_rule,
    round_half_up,
)


def _answers(axis, *scores):
    return [Answer(axis=axis, score=s) for s in scores]


class TestRounding(unittest.TestCase):
    """Rounding matches round-half-up, not banker's rounding."""

    def test_halves_go_up(self):
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(3.5), 4)
        self.assertEqual(round_half_up(-2.5), -2)

    def test_non_halves(self):
        self.assertEqual(round_half_up(2.49), 2)
        self.assertEqual(round_half_up(3.0), 3)
        self.assertEqual(round_half_up(11 / 3), 4)


class TestScoringRules(unittest.TestCase):

    def test_average_rule(self):
        self.assertEqual(average_rule([2, 3, 4]), 3)
        self.assertEqual(average_rule([2, 3]), 3)
        self.assertEqual(average_rule([1, 1, 2]), 1)

    def test_average_rule_empty_axis(self):
        """Zero answers divide by 1 and score 0."""
        self.assertEqual(average_rule([]), 0)

    def test_availability_table(self):
        self.assertEqual(availability_rule([1, 5, 5]), 5)
        self.assertEqual(availability_rule([1, 5, 1]), 2)
        self.assertEqual(availability_rule([1, 1, 5]), 1)

    def test_availability_boundaries(self):
        """Threshold is strictly greater than 2."""
        self.assertEqual(availability_rule([5, 3, 3]), 5)
        self.assertEqual(availability_rule([5, 2, 5]), 1)
        self.assertEqual(availability_rule([5, 3, 2]), 2)

    def test_availability_ignores_actual_frequency(self):
        for actual in range(1, 6):
            self.assertEqual(availability_rule([actual, 4, 4]), 5)

    def test_availability_missing_positions(self):
        """Missing desired/available count as <= 2; no answers at all score 0."""
        self.assertEqual(availability_rule([]), 0)
        self.assertEqual(availability_rule([4]), 1)
        self.assertEqual(availability_rule([1, 5]), 2)


class TestAggregate(unittest.TestCase):

    def test_default_rule_mean(self):
        result = aggregate(_answers("Storytelling", 2, 3, 4), ["Storytelling"])
        self.assertEqual(result, [AxisScore(axis="Storytelling", value=3)])

    def test_output_follows_axis_order(self):
        """Answer order does not change output order."""
        answers = _answers("B", 5, 5) + _answers("A", 1) + _answers("C", 2)
        result = aggregate(answers, ["A", "B", "C"])
        self.assertEqual([r.axis for r in result], ["A", "B", "C"])
        self.assertEqual([r.value for r in result], [1, 5, 2])

    def test_empty_axis_scores_zero(self):
        result = aggregate(_answers("A", 4), ["A", "B"])
        self.assertEqual(result[1], AxisScore(axis="B", value=0))

    def test_unknown_axis_is_ignored(self):
        answers = _answers("A", 2) + _answers("Not An Axis", 5)
        result = aggregate(answers, ["A"])
        self.assertEqual(result, [AxisScore(axis="A", value=2)])

    def test_out_of_range_scores_pass_through(self):
        result = aggregate(_answers("A", 9, 9), ["A"])
        self.assertEqual(result[0].value, 9)

    def test_play_potential_selected_by_name_by_default(self):
        answers = _answers(PLAY_POTENTIAL_AXIS, 1, 5, 1)
        result = aggregate(answers, [PLAY_POTENTIAL_AXIS])
        self.assertEqual(result[0].value, 2)

    def test_explicit_rules_override_default(self):
        answers = _answers(PLAY_POTENTIAL_AXIS, 1, 5, 1)
        averaged = aggregate(answers, [PLAY_POTENTIAL_AXIS], rules={})
        self.assertEqual(averaged[0].value, round_half_up(7 / 3))

        answers = _answers("Play Frequency", 1, 5, 5)
        table = aggregate(answers, ["Play Frequency"], rules={"Play Frequency": AVAILABILITY_RULE})
        self.assertEqual(table[0].value, 5)

    def test_unknown_rule_raises(self):
        with self.assertRaises(ValueError):
            aggregate([], ["A"], rules={"A": "median"})

    def test_scores_within_one_to_five_stay_in_range(self):
        for scores in ([1, 1, 1], [5, 5, 5], [1, 5, 3], [2, 2, 5]):
            value = aggregate(_answers("A", *scores), ["A"])[0].value
            self.assertGreaterEqual(value, 1)
            self.assertLessEqual(value, 5)

    def test_axis_score_as_dict(self):
        self.assertEqual(AxisScore(axis="A", value=3).as_dict(), {"axis": "A", "value": 3})


class TestQuizManager(unittest.TestCase):
    """Test cases for QuizManager class."""

    def setUp(self):
        """Set up test fixtures."""
        self.manager = QuizManager()

    def test_get_total_questions(self):
        self.assertEqual(self.manager.get_total_questions(), 39)
        self.assertEqual(QuizManager("classic").get_total_questions(), 33)

    def test_unknown_variant(self):
        with self.assertRaises(ValueError):
            QuizManager("nonexistent")

    def test_get_question_by_index(self):
        question = self.manager.get_question(0)
        self.assertEqual(question.id, 1)
        self.assertEqual(question.axis, "Storytelling")

    def test_get_question_by_index_out_of_range(self):
        with self.assertRaises(IndexError):
            self.manager.get_question(100)
        with self.assertRaises(IndexError):
            self.manager.get_question(-1)

    def test_get_question_by_id(self):
        question = self.manager.get_question_by_id(11)
        self.assertEqual(question.axis, "Roleplay Immersion")

    def test_get_question_by_id_not_found(self):
        with self.assertRaises(ValueError):
            self.manager.get_question_by_id(999)

    def test_answer_for(self):
        """Picked option index i is recorded as score i + 1."""
        answer = self.manager.answer_for(0, 2)
        self.assertEqual(answer, Answer(axis="Storytelling", score=3))

    def test_answer_for_invalid_option(self):
        with self.assertRaises(ValueError):
            self.manager.answer_for(0, 5)
        with self.assertRaises(ValueError):
            self.manager.answer_for(0, -1)

    def test_calculate_profile_full_catalog(self):
        answers = [self.manager.answer_for(i, 2) for i in range(self.manager.get_total_questions())]
        profile = self.manager.calculate_profile(answers)

        self.assertEqual([p.axis for p in profile], self.manager.axes)
        values = {p.axis: p.value for p in profile}
        self.assertEqual(values[PLAY_POTENTIAL_AXIS], 5)
        self.assertTrue(all(v == 3 for axis, v in values.items() if axis != PLAY_POTENTIAL_AXIS))

    def test_classic_play_frequency_is_averaged(self):
        manager = QuizManager("classic")
        profile = manager.calculate_profile(_answers("Play Frequency", 1, 5, 5))
        values = {p.axis: p.value for p in profile}
        self.assertEqual(values["Play Frequency"], 4)
        self.assertEqual(values["Storytelling"], 0)


if __name__ == '__main__':
    unittest.main()
