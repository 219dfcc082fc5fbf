# quiz/scoring.py
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence
import math

from pydantic import BaseModel, ConfigDict

from quiz.config import (
    AVAILABILITY_RULE,
    AVERAGE_RULE,
    PLAY_POTENTIAL_AXIS,
    Question,
    get_variant,
    DEFAULT_VARIANT,
)
from operation.logging.logging_config import get_logger
from operation.monitoring.performance import track_performance

logger = get_logger(__name__)


class Answer(BaseModel):
    """One recorded answer: the axis it counts towards and the 1-based option rank."""
    model_config = ConfigDict(frozen=True, strict=True)

    axis: str
    score: int


@dataclass(frozen=True)
class AxisScore:
    axis: str
    value: int

    def as_dict(self) -> Dict[str, object]:
        return asdict(self)


# Name-based selector used when the caller does not pass one
DEFAULT_SCORING_RULES: Dict[str, str] = {PLAY_POTENTIAL_AXIS: AVAILABILITY_RULE}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def average_rule(scores: Sequence[int]) -> int:
    """Rounded mean of the scores; an empty axis scores 0."""
    return round_half_up(sum(scores) / (len(scores) or 1))


def availability_rule(scores: Sequence[int]) -> int:
    """
    Decision table over positional answers [actual, desired, available].

    desired > 2 and available > 2 -> 5
    desired > 2 and available <= 2 -> 2
    desired <= 2 -> 1

    A missing desired or available answer counts as <= 2.
    An axis with no answers at all scores 0.
    """
    if not scores:
        return 0
    desired = scores[1] if len(scores) > 1 else None
    available = scores[2] if len(scores) > 2 else None

    wants_to_play = desired is not None and desired > 2
    has_time = available is not None and available > 2

    if wants_to_play and has_time:
        return 5
    if wants_to_play:
        return 2
    return 1


SCORING_RULES: Dict[str, Callable[[Sequence[int]], int]] = {
    AVERAGE_RULE: average_rule,
    AVAILABILITY_RULE: availability_rule,
}


@track_performance
def aggregate(
    answers: Iterable[Answer],
    axes: Sequence[str],
    rules: Optional[Mapping[str, str]] = None,
) -> List[AxisScore]:
    """
    Aggregate raw answers into one value per axis.

    Args:
        answers: Answers in catalog order. Per-axis order is kept, which the
            availability rule depends on.
        axes: Output order. Answers for axes not listed here are ignored.
        rules: axis -> rule name. Axes not present use the average rule.
            Defaults to DEFAULT_SCORING_RULES.

    Returns:
        One AxisScore per axis, in the order of `axes`
    """
    selector = DEFAULT_SCORING_RULES if rules is None else rules

    grouped: Dict[str, List[int]] = {axis: [] for axis in axes}
    ignored = 0
    for answer in answers:
        bucket = grouped.get(answer.axis)
        if bucket is None:
            ignored += 1
            continue
        bucket.append(answer.score)

    if ignored:
        logger.debug(f"Ignored {ignored} answer(s) for axes outside {list(axes)}")

    profile = []
    for axis in axes:
        rule_name = selector.get(axis, AVERAGE_RULE)
        rule = SCORING_RULES.get(rule_name)
        if rule is None:
            raise ValueError(f"Unknown scoring rule '{rule_name}' for axis '{axis}'")
        profile.append(AxisScore(axis=axis, value=rule(grouped[axis])))
    return profile


class QuizManager:
    """
    Question lookup and profile calculation for one quiz variant.
    """

    def __init__(self, variant: str = DEFAULT_VARIANT):
        """Initialize the QuizManager with the variant's catalog."""
        self.variant = get_variant(variant)
        self.questions: List[Question] = list(self.variant.questions)

    @property
    def axes(self) -> List[str]:
        return list(self.variant.axes)

    def calculate_profile(self, answers: Iterable[Answer]) -> List[AxisScore]:
        """
        Calculate the per-axis profile for this variant.

        Args:
            answers: Recorded answers, in catalog order

        Returns:
            One AxisScore per axis, in catalog axis order
        """
        return aggregate(answers, self.variant.axes, self.variant.scoring_rules)

    def get_question(self, index: int) -> Question:
        """Get a question by index."""
        if 0 <= index < len(self.questions):
            return self.questions[index]
        raise IndexError(f"Question index {index} out of range")

    def get_question_by_id(self, question_id: int) -> Question:
        """Get a question by ID."""
        for q in self.questions:
            if q.id == question_id:
                return q
        raise ValueError(f"Question with ID '{question_id}' not found")

    def get_total_questions(self) -> int:
        """Get the total number of questions."""
        return len(self.questions)

    def answer_for(self, index: int, option_index: int) -> Answer:
        """Build the Answer recorded when option `option_index` is picked for question `index`."""
        question = self.get_question(index)
        if not 0 <= option_index < len(question.options):
            raise ValueError(
                f"Option index {option_index} out of range for question {question.id} "
                f"(0..{len(question.options) - 1})"
            )
        return Answer(axis=question.axis, score=option_index + 1)
