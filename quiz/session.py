"""
Quiz session flow.

A session moves NOT_STARTED -> IN_PROGRESS(0) -> ... -> COMPLETE, or straight
from NOT_STARTED to COMPLETE when a result code is loaded. Every transition
takes a QuizState and returns a new one; nothing here holds state between
calls.
"""

from dataclasses import replace
from functools import lru_cache
from typing import Optional, Tuple

from quiz.codec import decode_answers, encode_answers
from quiz.config import DEFAULT_VARIANT, Question
from quiz.scoring import AxisScore, QuizManager, round_half_up
from state import QuizPhase, QuizState
from operation.logging.logging_config import get_logger
from operation.monitoring.metrics import get_metrics_registry

logger = get_logger(__name__)


class QuizTransitionError(ValueError):
    """Raised when a transition is not allowed from the current phase."""


@lru_cache(maxsize=None)
def _manager(variant: str) -> QuizManager:
    return QuizManager(variant)


def _require(state: QuizState, phase: QuizPhase, action: str) -> None:
    if state.phase is not phase:
        raise QuizTransitionError(f"Cannot {action} while quiz is {state.phase.value}")


def new_session(variant: str = DEFAULT_VARIANT, player_name: str = "") -> QuizState:
    """Create a NOT_STARTED session for a variant (validates the variant name)."""
    _manager(variant)
    return QuizState(variant=variant, player_name=player_name)


def begin(state: QuizState) -> QuizState:
    """NOT_STARTED -> IN_PROGRESS(0)."""
    _require(state, QuizPhase.NOT_STARTED, "begin")
    get_metrics_registry().counter("quiz_started").inc()
    logger.info(f"Quiz started (variant={state.variant})")
    return replace(state, phase=QuizPhase.IN_PROGRESS, question_index=0, answers=())


def load_profile(state: QuizState, result_code: str) -> Optional[QuizState]:
    """
    NOT_STARTED -> COMPLETE from a result code.

    Returns:
        The completed state, or None if the code cannot be decoded
    """
    _require(state, QuizPhase.NOT_STARTED, "load a result code")
    answers = decode_answers(result_code)
    if answers is None:
        return None

    scores = _manager(state.variant).calculate_profile(answers)
    get_metrics_registry().counter("profile_imported").inc()
    logger.info(f"Loaded result code with {len(answers)} answer(s) (variant={state.variant})")
    return replace(
        state,
        phase=QuizPhase.COMPLETE,
        answers=tuple(answers),
        profile=tuple(scores),
        imported=True,
    )


def start(state: QuizState, result_code: str = "") -> QuizState:
    """Load the result code if it decodes, otherwise begin a fresh quiz."""
    if result_code and result_code.strip():
        loaded = load_profile(state, result_code)
        if loaded is not None:
            return loaded
        logger.info("Result code rejected, starting a fresh quiz")
    return begin(state)


def current_question(state: QuizState) -> Question:
    _require(state, QuizPhase.IN_PROGRESS, "show a question")
    return _manager(state.variant).get_question(state.question_index)


def total_questions(state: QuizState) -> int:
    return _manager(state.variant).get_total_questions()


def submit_answer(state: QuizState, option_index: int) -> QuizState:
    """
    Record the 0-based option picked for the current question and advance.

    Re-answering a question after go_back replaces that position instead of
    appending. Answering the last question completes the quiz.
    """
    _require(state, QuizPhase.IN_PROGRESS, "submit an answer")
    manager = _manager(state.variant)
    i = state.question_index
    answer = manager.answer_for(i, option_index)

    answers = list(state.answers)
    if i < len(answers):
        answers[i] = answer
    else:
        answers.append(answer)

    if i + 1 < manager.get_total_questions():
        logger.debug(f"Answered question {i + 1} ({answer.axis}={answer.score})")
        return replace(state, question_index=i + 1, answers=tuple(answers))

    scores = manager.calculate_profile(answers)
    get_metrics_registry().counter("quiz_completed").inc()
    logger.info(f"Quiz completed (variant={state.variant}, answers={len(answers)})")
    return replace(
        state,
        phase=QuizPhase.COMPLETE,
        answers=tuple(answers),
        profile=tuple(scores),
        imported=False,
    )


def go_back(state: QuizState) -> QuizState:
    """IN_PROGRESS(i) -> IN_PROGRESS(i - 1), for i > 0."""
    _require(state, QuizPhase.IN_PROGRESS, "go back")
    if state.question_index == 0:
        raise QuizTransitionError("Already at the first question")
    logger.debug(f"Back to question {state.question_index}")
    return replace(state, question_index=state.question_index - 1)


def profile(state: QuizState) -> Optional[Tuple[AxisScore, ...]]:
    return state.profile


def progress_percent(state: QuizState) -> int:
    """Share of questions already passed, 0..100."""
    if state.phase is QuizPhase.COMPLETE:
        return 100
    if state.phase is QuizPhase.NOT_STARTED:
        return 0
    return round_half_up(state.question_index / total_questions(state) * 100)


def result_code(state: QuizState) -> str:
    """Result code for a completed session."""
    _require(state, QuizPhase.COMPLETE, "export a result code")
    return encode_answers(state.answers)
