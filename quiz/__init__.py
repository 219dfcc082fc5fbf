# quiz package
from .config import Question, QuizVariant, get_variant, list_variants, DEFAULT_VARIANT
from .scoring import Answer, AxisScore, QuizManager, aggregate
from .codec import encode_answers, decode_answers

__all__ = [
    'Question',
    'QuizVariant',
    'get_variant',
    'list_variants',
    'DEFAULT_VARIANT',
    'Answer',
    'AxisScore',
    'QuizManager',
    'aggregate',
    'encode_answers',
    'decode_answers',
]
