from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from quiz.config import DEFAULT_VARIANT
from quiz.scoring import Answer, AxisScore


class QuizPhase(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


@dataclass(frozen=True)
class QuizState:
    variant: str = DEFAULT_VARIANT
    phase: QuizPhase = QuizPhase.NOT_STARTED
    question_index: int = 0                     # meaningful while IN_PROGRESS
    answers: Tuple[Answer, ...] = ()            # position i = answer to question i
    profile: Optional[Tuple[AxisScore, ...]] = None
    imported: bool = False                      # profile came from a result code
    player_name: str = ""
