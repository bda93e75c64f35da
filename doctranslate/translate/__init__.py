"""
Translation of long documents through a size-limited translation backend.
"""

from .pipeline import (
    ChunkedTranslator,
    TranslationResult,
    count_words,
    fallback_translation,
    translate_text,
)


__all__ = [
    "ChunkedTranslator",
    "TranslationResult",
    "translate_text",
    "fallback_translation",
    "count_words",
]
