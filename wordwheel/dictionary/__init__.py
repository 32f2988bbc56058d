"""Word lists and lookup for puzzle generation."""

from .index import DictionaryIndex, can_form_word
from .fallback import DEFAULT_BASE_WORD, FALLBACK_BASE_WORDS, FALLBACK_WORDS

__all__ = [
    "DictionaryIndex",
    "can_form_word",
    "DEFAULT_BASE_WORD",
    "FALLBACK_BASE_WORDS",
    "FALLBACK_WORDS",
]
