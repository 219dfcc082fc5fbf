"""
Input guard for pasted result codes.
Rejects text that cannot be a result code before it reaches the decoder, so the
start screen can show a specific message instead of silently starting a new quiz.
"""

from typing import Optional, Tuple
import re


class ImportGuard:
    """
    Lightweight pre-check for result codes pasted by the user.
    """

    # 39 answers encode to roughly 2KB; leave room for longer catalogs
    MAX_LENGTH = 20000

    def __init__(self, max_length: int = MAX_LENGTH):
        self.max_length = max_length
        self._base64_chars = re.compile(r'^[A-Za-z0-9+/_-]+={0,2}$')
        self._invisible_patterns = [
            re.compile(r'[\u200B-\u200F\u2060-\u2064\uFEFF]'),  # Zero-width characters
            re.compile(r'[\u00A0\u1680\u2000-\u200A\u2028\u2029\u202F\u205F\u3000]'),  # Unusual whitespace
        ]

    def validate(self, code: str) -> Tuple[bool, Optional[str]]:
        """
        Validate a pasted result code.

        Args:
            code: The text pasted into the import box

        Returns:
            Tuple of (is_valid, error_message)
            - is_valid: True if the text looks like a result code
            - error_message: Error message if validation failed, None otherwise
        """
        if not isinstance(code, str):
            return False, "Invalid input format"

        if len(code) > self.max_length:
            return False, f"Result code is too long (limit {self.max_length} characters)."

        compact = re.sub(r'\s+', '', code)
        if not compact:
            return False, "Input cannot be empty"

        if self._has_invisible_chars(code):
            return False, "Your result code contains invisible characters. Please copy it again."

        if not self._base64_chars.match(compact):
            return False, "That doesn't look like a result code. It should only contain letters, digits, '+', '/' and '='."

        return True, None

    def _has_invisible_chars(self, text: str) -> bool:
        """Check for zero-width or unusual whitespace characters."""
        return any(p.search(text) for p in self._invisible_patterns)

    def is_safe(self, code: str) -> bool:
        """Boolean form of validate()."""
        is_valid, _ = self.validate(code)
        return is_valid


# Global guard instance
_guard_instance = None

def get_guard() -> ImportGuard:
    """
    Get the global guard instance (singleton pattern).
    """
    global _guard_instance
    if _guard_instance is None:
        _guard_instance = ImportGuard()
    return _guard_instance
