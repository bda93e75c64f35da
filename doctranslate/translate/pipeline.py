"""
Chunked translation driver.

Feeds a document to a translation backend one chunk at a time, pacing the
requests and recovering from the backend's per-request failures:

- chunks the backend rejects as too large are re-split with the smaller
  fallback chunk size and sent again piece by piece
- a rate-limited chunk is retried once after a longer wait
- any other backend failure degrades to a labelled copy of the source text

The backend itself is injected as a plain callable
``translator(text, source_language, target_language) -> str`` that raises
TranslationError (or a subclass) on failure.
"""

import time
from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Optional

from tqdm import tqdm

from ..chunk import split_for_translation
from ..config import Config, get_config
from ..exceptions import (
    ChunkTooLargeError,
    ConfigurationError,
    RateLimitError,
    TranslationError,
    ValidationError,
)
from ..logging_config import get_logger


logger = get_logger(__name__)

Translator = Callable[[str, str, str], str]


def count_words(text: str) -> int:
    """Count whitespace-separated tokens that contain at least one letter."""
    return sum(1 for token in text.split() if any(ch.isalpha() for ch in token))


def fallback_translation(
    text: str, target_language: str, language_names: Optional[dict[str, str]] = None
) -> str:
    """Label untranslated text so callers can tell the service was down."""
    name = (language_names or {}).get(target_language, target_language)
    return f"[{name} Translation - Service Temporarily Unavailable] {text}"


@dataclass
class TranslationResult:
    """Outcome of translating one document."""

    translated_text: str
    source_language: str
    target_language: str
    chunks_processed: int = 0
    used_fallback: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class ChunkedTranslator:
    """Translate documents of any length through a size-limited backend."""

    def __init__(
        self,
        translator: Translator,
        config: Optional[Config] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Args:
            translator: Backend call, ``translator(text, source, target) -> str``
            config: Chunk sizes, pacing and language names (global config if None)
            sleep: Wait function, replaceable in tests
        """
        if not callable(translator):
            raise ConfigurationError(
                f"translator must be callable, got {type(translator).__name__}"
            )

        self.translator = translator
        self.config = config or get_config()
        self._sleep = sleep

    def translate(
        self, text: str, source_language: str, target_language: str
    ) -> TranslationResult:
        """
        Translate text chunk by chunk and join the pieces back together.

        Args:
            text: Document text
            source_language: Source language code (e.g. "en")
            target_language: Target language code (e.g. "ta")

        Returns:
            TranslationResult; ``used_fallback`` is set when the backend failed
            and the labelled source text was returned instead

        Raises:
            ValidationError: If the text is too long or a language code is empty
        """
        if not source_language or not target_language:
            raise ValidationError("source_language and target_language are required")

        if len(text) > self.config.max_text_length:
            raise ValidationError(
                f"Text length {len(text)} exceeds the maximum of {self.config.max_text_length} characters"
            )

        metadata = {
            "character_count": len(text),
            "word_count": count_words(text),
        }

        if source_language == target_language:
            metadata["translated_length"] = len(text)
            return TranslationResult(text, source_language, target_language, metadata=metadata)

        chunks = split_for_translation(text, self.config.max_chunk_size)

        try:
            translated_text = "".join(
                self._translate_chunks(chunks, source_language, target_language)
            )
        except TranslationError as e:
            logger.error(
                f"Translation request failed ({source_language} -> {target_language}, "
                f"{len(text)} chars): {e}"
            )
            translated_text = fallback_translation(
                text, target_language, self.config.language_names
            )
            metadata["translated_length"] = len(translated_text)
            return TranslationResult(
                translated_text,
                source_language,
                target_language,
                chunks_processed=len(chunks),
                used_fallback=True,
                metadata=metadata,
            )

        metadata["translated_length"] = len(translated_text)
        logger.info(
            f"Translation completed ({source_language} -> {target_language}): "
            f"{len(text)} -> {len(translated_text)} chars in {len(chunks)} chunks"
        )
        return TranslationResult(
            translated_text,
            source_language,
            target_language,
            chunks_processed=len(chunks),
            metadata=metadata,
        )

    def _translate_chunks(
        self, chunks: list[str], source_language: str, target_language: str
    ) -> list[str]:
        translated = []

        chunks_progress = tqdm(
            chunks,
            desc="Translating",
            unit="chunk",
            disable=len(chunks) < 10,
            leave=False,
        )

        for chunk in chunks_progress:
            if not chunk.strip():
                translated.append(chunk)
                continue

            if translated:
                self._sleep(self.config.request_delay)

            try:
                translated.append(self._request(chunk, source_language, target_language))

            except ChunkTooLargeError:
                logger.warning(f"Text chunk too large ({len(chunk)} chars), splitting further")
                for sub_chunk in split_for_translation(chunk, self.config.fallback_chunk_size):
                    if sub_chunk.strip():
                        self._sleep(self.config.request_delay)
                        translated.append(
                            self._request(sub_chunk, source_language, target_language)
                        )
                    else:
                        translated.append(sub_chunk)

            except RateLimitError:
                logger.warning(f"Rate limit hit, waiting {self.config.rate_limit_wait}s: {chunk[:100]!r}")
                self._sleep(self.config.rate_limit_wait)
                translated.append(self._request(chunk, source_language, target_language))

        return translated

    def _request(self, chunk: str, source_language: str, target_language: str) -> str:
        result = self.translator(chunk, source_language, target_language)
        logger.info(
            f"Translated chunk ({source_language} -> {target_language}): "
            f"{len(chunk)} -> {len(result)} chars"
        )
        return result


def translate_text(
    text: str,
    source_language: str,
    target_language: str,
    translator: Translator,
    config: Optional[Config] = None,
) -> TranslationResult:
    """Convenience wrapper around ChunkedTranslator.translate."""
    return ChunkedTranslator(translator, config=config).translate(
        text, source_language, target_language
    )
