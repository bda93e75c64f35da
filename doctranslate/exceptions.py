"""
Custom exceptions for the doctranslate package.

These exceptions provide more specific error handling and better debugging
information than generic Python exceptions.
"""


class DocTranslateError(Exception):
    """Base exception for all doctranslate package errors."""
    pass


class ChunkingError(DocTranslateError):
    """Chunking-related errors (invalid parameters, unknown strategies)."""
    pass


class ValidationError(DocTranslateError):
    """Data validation errors (content preservation, input limits, config values)."""
    pass


class ConfigurationError(DocTranslateError):
    """Configuration-related errors (invalid settings, missing required config)."""
    pass


class TranslationError(DocTranslateError):
    """Failure reported by the translation backend for a request."""
    pass


class ChunkTooLargeError(TranslationError):
    """The backend rejected a chunk as too large for a single request."""
    pass


class RateLimitError(TranslationError):
    """The backend is throttling requests."""
    pass
