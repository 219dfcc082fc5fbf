"""
Result code encoding.

A result code is the answer list as compact JSON, base64 encoded, so it can be
pasted into a text field or a URL and loaded in another session. Codes
exported by the earlier browser version of the quiz use the same format.
"""

import base64
import binascii
import json
import re
from typing import List, Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from quiz.scoring import Answer
from operation.logging.logging_config import get_logger
from operation.monitoring.metrics import get_metrics_registry

logger = get_logger(__name__)

_ANSWER_LIST = TypeAdapter(List[Answer])
_WHITESPACE = re.compile(r"\s+")


def encode_answers(answers: Sequence[Answer]) -> str:
    """
    Encode answers as a result code.

    Args:
        answers: Answers in the order they were recorded

    Returns:
        Base64 text of the JSON list [{"axis": ..., "score": ...}, ...]
    """
    payload = json.dumps(
        [{"axis": a.axis, "score": a.score} for a in answers],
        separators=(",", ":"),
    )
    return base64.b64encode(payload.encode("utf-8")).decode("ascii")


def _b64decode_lenient(text: str) -> bytes:
    """Decode standard or URL-safe base64, with or without padding."""
    normalized = text.replace("-", "+").replace("_", "/")
    normalized += "=" * (-len(normalized) % 4)
    return base64.b64decode(normalized, validate=True)


def decode_answers(text: str) -> Optional[List[Answer]]:
    """
    Decode a result code back into answers.

    Only the shape is checked: a JSON list of objects with a string axis and
    an integer score. Unknown axes and out-of-range scores are returned as-is.

    Returns:
        The answers, or None if the code cannot be decoded
    """
    if not isinstance(text, str):
        logger.warning(f"Result code must be a string, got {type(text).__name__}")
        get_metrics_registry().counter("profile_decode_failed").inc()
        return None

    try:
        raw = _b64decode_lenient(_WHITESPACE.sub("", text))
        answers = _ANSWER_LIST.validate_json(raw)
    except (binascii.Error, ValueError, ValidationError) as e:
        # ValidationError also covers invalid JSON and invalid UTF-8
        logger.warning(f"Could not decode result code ({len(text)} chars): {e.__class__.__name__}")
        get_metrics_registry().counter("profile_decode_failed").inc()
        return None

    logger.debug(f"Decoded result code with {len(answers)} answer(s)")
    return answers
