import streamlit as st
from typing import Dict, Any
import os
import uuid
from dotenv import load_dotenv

from quiz.config import AVAILABILITY_RULE, get_variant
from quiz.display import answers_to_dataframe, build_radar_figure, wave_profile
from quiz.session import (
    current_question,
    go_back,
    new_session,
    progress_percent,
    result_code,
    start,
    submit_answer,
    total_questions,
)
from state import QuizPhase, QuizState
from prompts.quiz_prompts import QuizMessages
from guards import get_guard
from operation.logging.logging_config import get_logger, setup_logging, set_correlation_id
from operation.monitoring.metrics import get_metrics_registry
from operation.monitoring.performance import performance_timer

# Load environment variables
load_dotenv()

logger = get_logger(__name__)


def get_config() -> Dict[str, Any]:
    """Get configuration from environment variables"""
    return {
        "variant": os.getenv("QUIZ_VARIANT", "potential"),
        "log_level": os.getenv("LOG_LEVEL", "INFO"),
        "log_file": os.getenv("LOG_FILE") or None,
        "wave_interval": float(os.getenv("WAVE_INTERVAL_SECONDS", "0.2")),
    }


CONFIG = get_config()

st.set_page_config(
    page_title="TTRPG Player Profile Quiz",
    page_icon="🎲",
    layout="wide",
    initial_sidebar_state="collapsed",
)

st.markdown("""
<style>
    #MainMenu {visibility: hidden;}
    footer {visibility: hidden;}

    .availability-note {
        background: #fef9c3;
        padding: 0.5rem 0.75rem;
        border-radius: 0.5rem;
        font-size: 0.85rem;
    }

    .stProgress > div > div > div {
        background: #2563eb;
    }
</style>
""", unsafe_allow_html=True)


def initialize_session_state():
    """Initialize session state variables"""
    setup_logging(level=CONFIG["log_level"], log_file=CONFIG["log_file"])

    if 'quiz' not in st.session_state:
        st.session_state.session_id = str(uuid.uuid4())
        set_correlation_id(st.session_state.session_id)
        st.session_state.quiz = new_session(CONFIG["variant"])
        logger.info(f"New browser session (variant={CONFIG['variant']})")
    else:
        set_correlation_id(st.session_state.session_id)

    # Display-only state for the result screen
    st.session_state.setdefault("wave_mode", False)
    st.session_state.setdefault("wave_frame", 0)
    st.session_state.setdefault("show_debug", False)


def reset_app():
    """Throw away the current quiz and return to the start screen"""
    st.session_state.quiz = new_session(st.session_state.quiz.variant)
    st.session_state.wave_mode = False
    st.session_state.wave_frame = 0
    st.session_state.show_debug = False
    st.session_state.pop("import_notice", None)


# ==================== Callbacks ====================

def _on_start():
    quiz: QuizState = st.session_state.quiz
    name = st.session_state.get("player_name_input", "")
    code = st.session_state.get("import_code_input", "")
    quiz = new_session(quiz.variant, player_name=name)
    st.session_state.pop("import_notice", None)

    if code.strip():
        is_valid, error_msg = get_guard().validate(code)
        if not is_valid:
            st.session_state.import_notice = QuizMessages.guard_rejected(error_msg)
            return

    quiz = start(quiz, code)
    if code.strip() and not quiz.imported:
        st.session_state.import_notice = QuizMessages.invalid_result_code()
    st.session_state.quiz = quiz


def _on_answer(option_index: int):
    st.session_state.quiz = submit_answer(st.session_state.quiz, option_index)


def _on_back():
    st.session_state.quiz = go_back(st.session_state.quiz)


def _toggle(key: str):
    st.session_state[key] = not st.session_state[key]


# ==================== Screens ====================

def render_start_screen(quiz: QuizState):
    """Name, Begin / Load and the result code import box"""
    variant = get_variant(quiz.variant)
    _, col, _ = st.columns([1, 2, 1])
    with col:
        st.markdown(QuizMessages.intro(variant.title))
        st.text_input("Name", placeholder="Enter your name (optional)", key="player_name_input")
        st.button("Begin / Load", type="primary", on_click=_on_start, width="stretch")
        st.markdown(QuizMessages.import_hint())
        st.text_input(
            "Profile string",
            placeholder="Paste profile string here",
            key="import_code_input",
            label_visibility="collapsed",
        )
        if "import_notice" in st.session_state:
            st.warning(st.session_state.import_notice)


def render_question_screen(quiz: QuizState):
    """One question with its options, progress and Back"""
    question = current_question(quiz)
    total = total_questions(quiz)
    percent = progress_percent(quiz)
    position = quiz.question_index + 1

    _, col, _ = st.columns([1, 2, 1])
    with col:
        if "import_notice" in st.session_state:
            st.info(st.session_state.import_notice)
        st.caption(QuizMessages.progress_label(percent, position, total))
        st.progress(percent / 100)
        st.markdown(f"#### {QuizMessages.question_heading(position, question.text)}")

        option_cols = st.columns(len(question.options))
        for idx, (option_col, option) in enumerate(zip(option_cols, question.options)):
            with option_col:
                st.button(
                    option,
                    key=f"q{question.id}_opt{idx}",
                    on_click=_on_answer,
                    args=(idx,),
                    width="stretch",
                )

        if quiz.question_index > 0:
            st.button("Back", key="back", on_click=_on_back)


def render_profile_chart(quiz: QuizState):
    """Radar chart; in wave mode a timer redraws it with animated values"""
    axes = get_variant(quiz.variant).axes
    run_every = CONFIG["wave_interval"] if st.session_state.wave_mode else None

    @st.fragment(run_every=run_every)
    def _chart():
        if st.session_state.wave_mode:
            # Only the frame counter changes; quiz state is never touched here
            st.session_state.wave_frame += 1
            data = wave_profile(axes, st.session_state.wave_frame)
        else:
            data = quiz.profile or ()
        with performance_timer("render_profile_chart"):
            fig = build_radar_figure(data)
        st.plotly_chart(fig, width="stretch", config={'displayModeBar': False})

    _chart()


def render_result_screen(quiz: QuizState):
    """Profile radar, result code and the extra toggles"""
    variant = get_variant(quiz.variant)
    st.markdown(f"### {QuizMessages.profile_heading(quiz.player_name)}")
    if quiz.imported:
        st.caption(QuizMessages.imported_notice())

    special_axes = [axis for axis in variant.axes if variant.rule_for(axis) == AVAILABILITY_RULE]
    col1, col2 = st.columns([1, 3])
    with col1:
        for axis in special_axes:
            st.markdown(
                f'<div class="availability-note">{QuizMessages.availability_note(axis)}</div>',
                unsafe_allow_html=True,
            )
    with col2:
        render_profile_chart(quiz)

    st.markdown(f"**{QuizMessages.result_code_heading()}**")
    st.code(result_code(quiz), language=None, wrap_lines=True)

    c1, c2, c3 = st.columns(3)
    c1.button("Waste Time", on_click=_toggle, args=("wave_mode",), width="stretch")
    c2.button("Debug", on_click=_toggle, args=("show_debug",), width="stretch")
    c3.button("Start over", on_click=reset_app, width="stretch")

    if st.session_state.show_debug:
        st.dataframe(answers_to_dataframe(quiz.answers), width="stretch", hide_index=True)


def render_monitoring():
    """Render usage metrics in sidebar"""
    st.markdown("### 📈 Quiz Metrics")
    all_metrics = get_metrics_registry().get_all_metrics()
    if not all_metrics:
        st.caption("No metrics yet")
        return

    counters = {k.replace("counter_", ""): v for k, v in all_metrics.items() if k.startswith("counter_")}
    for name, value in counters.items():
        st.write(f"**{name.replace('_', ' ').title()}:** {int(value)}")

    timers = {k.replace("timer_", ""): v for k, v in all_metrics.items() if k.startswith("timer_")}
    if timers:
        with st.expander("Performance", expanded=False):
            for name, stats in timers.items():
                st.write(f"**{name}:** {stats['mean'] * 1000:.2f}ms over {int(stats['count'])} call(s)")


def main():
    """Main Streamlit application"""
    initialize_session_state()

    with st.sidebar:
        render_monitoring()

    quiz: QuizState = st.session_state.quiz
    if quiz.phase is QuizPhase.NOT_STARTED:
        render_start_screen(quiz)
    elif quiz.phase is QuizPhase.IN_PROGRESS:
        render_question_screen(quiz)
    else:
        render_result_screen(quiz)


if __name__ == "__main__":
    main()
