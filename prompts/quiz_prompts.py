"""
Quiz Messages

All user-facing text for the quiz screens, kept here so the UI code only
deals with layout.
"""


class QuizMessages:
    """Quiz screen copy."""

    @staticmethod
    def intro(title: str) -> str:
        return f"""### {title}

Answer one question at a time; each answer feeds one axis of your player profile.
When you're done you get a radar chart and a result code you can share or paste back in later."""

    @staticmethod
    def import_hint() -> str:
        return "Or paste a profile string to load results:"

    @staticmethod
    def progress_label(percent: int, position: int, total: int) -> str:
        """Progress text above the bar, e.g. '33% complete (Q14 / 39)'."""
        return f"{percent}% complete (Q{position} / {total})"

    @staticmethod
    def question_heading(position: int, text: str) -> str:
        return f"Q{position}: {text}"

    @staticmethod
    def profile_heading(player_name: str) -> str:
        return f"Profile: {player_name or 'N/A'}"

    @staticmethod
    def availability_note(axis: str) -> str:
        """Explains why the availability axis is not an average."""
        return (
            f"{axis} is calculated by a different metric from the points assigning with other questions, "
            "where it instead looks at actual available time that is desired to be play time."
        )

    @staticmethod
    def result_code_heading() -> str:
        return "Your result code:"

    @staticmethod
    def imported_notice() -> str:
        return "Loaded from a result code."

    @staticmethod
    def invalid_result_code() -> str:
        return "That result code could not be read, so a new quiz was started instead."

    @staticmethod
    def guard_rejected(error_message: str) -> str:
        return f"⚠️ {error_message}"
