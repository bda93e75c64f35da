"""
Chunking module for splitting documents into translation-request-sized pieces.

This module provides boundary-aware splitters that keep chunks in document
order and never cut through a word.
"""

from .splitters import (
    chunk_by_words,
    chunk_text,
    process_documents,
    split_for_translation,
)
from .utils import analyze_chunks, oversized_chunks, preview_chunks, validate_chunks


__all__ = [
    # Core chunking functions
    "split_for_translation",
    "chunk_by_words",
    "chunk_text",
    # Utility functions
    "validate_chunks",
    "analyze_chunks",
    "oversized_chunks",
    "preview_chunks",
    # Collection processing
    "process_documents",
]
