"""
Guardrails module for input validation.
"""

from .input_guard import ImportGuard, get_guard

__all__ = ['ImportGuard', 'get_guard']
