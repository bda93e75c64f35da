"""
Splitters that break documents into pieces a translation API will accept.

The paragraph splitter prefers blank-line boundaries, falls back to sentence
boundaries inside paragraphs that are too long on their own, and never cuts a
sentence in half: a sentence longer than the limit is emitted as an oversized
chunk. The word splitter is a plain space-joined greedy accumulator.
"""

import re
from typing import Any

from tqdm import tqdm

from ..exceptions import ChunkingError, ValidationError
from ..logging_config import get_logger
from .utils import analyze_chunks, validate_chunks

# NLTK imports for sentence segmentation
try:
    import nltk
    from nltk.tokenize import sent_tokenize
    NLTK_AVAILABLE = True
except ImportError:
    NLTK_AVAILABLE = False


logger = get_logger(__name__)

PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
SENTENCE_BREAK = re.compile(r"(?<=[.!?])\s+")

PARAGRAPH_JOINER = "\n\n"
SENTENCE_JOINER = " "
WORD_JOINER = " "

STRATEGIES = ("paragraph", "words")


def _check_parameters(text: str, max_chunk_size: int) -> None:
    if not isinstance(text, str):
        raise ChunkingError(f"text must be a string, got {type(text).__name__}")

    # bool is an int subclass but never a meaningful size
    if not isinstance(max_chunk_size, int) or isinstance(max_chunk_size, bool):
        raise ChunkingError(
            f"max_chunk_size must be an integer, got {type(max_chunk_size).__name__}"
        )

    if max_chunk_size <= 0:
        raise ChunkingError(f"max_chunk_size must be positive, got {max_chunk_size}")


def _split_sentences(text: str, sentence_mode: bool = False) -> list[str]:
    """
    Split text into sentences, either on terminal punctuation or with NLTK.

    Raises:
        ChunkingError: If sentence mode is requested but NLTK is not available
    """
    if not sentence_mode:
        return SENTENCE_BREAK.split(text)

    if not NLTK_AVAILABLE:
        raise ChunkingError(
            "NLTK is required for sentence mode but is not installed. "
            "Please install it with: pip install nltk"
        )

    try:
        nltk.data.find('tokenizers/punkt_tab')
    except LookupError:
        logger.info("Downloading NLTK punkt tokenizer...")
        nltk.download('punkt_tab', quiet=True)

    return sent_tokenize(text)


def _accumulate(units: list[str], joiner: str, max_chunk_size: int) -> tuple[list[str], str]:
    """
    Greedily pack units into groups no longer than max_chunk_size.

    Returns the completed groups and the last, still open group.
    """
    groups = []
    current = ""

    for unit in units:
        candidate = current + joiner + unit if current else unit
        if len(candidate) > max_chunk_size and current:
            groups.append(current)
            current = unit
        else:
            current = candidate

    return groups, current


def split_for_translation(
    text: str, max_chunk_size: int = 4500, sentence_mode: bool = False
) -> list[str]:
    """
    Split text into ordered chunks for a size-limited translation request.

    Paragraphs (separated by one or more blank lines) are packed greedily into
    chunks joined by a blank line. When the open chunk grows past the limit
    because of one long paragraph, it is re-split on sentence boundaries
    (``.``, ``!`` or ``?`` followed by whitespace); the completed sentence groups
    are emitted and the last group stays open for the following paragraphs.

    Args:
        text: Text to split (any string, including the empty string)
        max_chunk_size: Upper bound on chunk length in characters
        sentence_mode: Use NLTK sentence segmentation for the sentence re-split

    Returns:
        At least one chunk. Text that already fits is returned as ``[text]``.
        A paragraph or sentence longer than the limit is kept whole, so such
        chunks may exceed ``max_chunk_size``.

    Raises:
        ChunkingError: If input parameters are invalid
        ValidationError: If the chunks lost non-whitespace content
    """
    _check_parameters(text, max_chunk_size)

    if len(text) <= max_chunk_size:
        return [text]

    paragraphs = PARAGRAPH_BREAK.split(text)

    chunks = []
    current = ""

    paragraphs_progress = tqdm(
        paragraphs,
        desc="Chunking text",
        unit="paragraph",
        disable=len(paragraphs) < 100,
        leave=False,
    )

    for paragraph in paragraphs_progress:
        candidate = current + PARAGRAPH_JOINER + paragraph if current else paragraph
        if len(candidate) > max_chunk_size and current:
            chunks.append(current)
            current = paragraph
        else:
            current = candidate

        if len(current) > max_chunk_size:
            sentences = _split_sentences(current, sentence_mode)
            completed, current = _accumulate(sentences, SENTENCE_JOINER, max_chunk_size)
            chunks.extend(completed)

    if current:
        chunks.append(current)

    # Only blank lines: nothing was accumulated
    if not chunks:
        return [text]

    if not validate_chunks(text, chunks, PARAGRAPH_JOINER, normalize_whitespace=True):
        raise ValidationError(
            "Content validation failed: chunks do not preserve original text"
        )

    logger.debug(
        f"Split {len(text)} chars into {len(chunks)} chunks (max {max_chunk_size})"
    )
    return chunks


def chunk_by_words(text: str, max_chunk_size: int) -> list[str]:
    """
    Split text on spaces into chunks of whole words.

    Words are accumulated until the next one would push the chunk past
    max_chunk_size. A word longer than the limit becomes a chunk of its own.
    Joining the result with a single space gives back the input exactly.

    Raises:
        ChunkingError: If input parameters are invalid
    """
    _check_parameters(text, max_chunk_size)

    if len(text) <= max_chunk_size:
        return [text]

    chunks = []
    current_words = []
    current_size = 0

    for word in text.split(WORD_JOINER):
        total_size = current_size + len(word) + (len(WORD_JOINER) if current_words else 0)

        if total_size <= max_chunk_size or not current_words:
            current_words.append(word)
            current_size = total_size
        else:
            chunks.append(WORD_JOINER.join(current_words))
            current_words = [word]
            current_size = len(word)

    if current_words:
        chunks.append(WORD_JOINER.join(current_words))

    return chunks


def chunk_text(
    text: str, strategy: str, max_chunk_size: int, sentence_mode: bool = False
) -> list[str]:
    """
    Apply the named chunking strategy to text.

    Args:
        text: Text to chunk
        strategy: "paragraph" (paragraph/sentence aware) or "words"
        max_chunk_size: Upper bound on chunk length in characters
        sentence_mode: Use NLTK sentences (paragraph strategy only)

    Raises:
        ChunkingError: If the strategy is unknown or parameters are invalid
    """
    if strategy == "paragraph":
        return split_for_translation(text, max_chunk_size, sentence_mode=sentence_mode)
    elif strategy == "words":
        return chunk_by_words(text, max_chunk_size)
    else:
        raise ChunkingError(
            f"Unknown chunking strategy: {strategy}. Available strategies: {', '.join(STRATEGIES)}"
        )


def joiner_for(strategy: str) -> str:
    """Delimiter that re-joins chunks produced by the given strategy."""
    return WORD_JOINER if strategy == "words" else PARAGRAPH_JOINER


def process_documents(
    documents: dict[str, str],
    strategy: str = "paragraph",
    max_chunk_size: int = 4500,
    sentence_mode: bool = False,
) -> dict[str, Any]:
    """
    Chunk every document in a collection.

    Args:
        documents: Dictionary of document_id -> text
        strategy: Chunking strategy ("paragraph" or "words")
        max_chunk_size: Upper bound on chunk length in characters
        sentence_mode: Use NLTK sentence segmentation (paragraph strategy only)

    Returns:
        {"results": {document_id: result}, "errors": {document_id: message}}

    Raises:
        ChunkingError: If the collection or strategy is invalid
    """
    results = {}
    errors = {}

    if not isinstance(documents, dict):
        raise ChunkingError(f"documents must be a dictionary, got {type(documents).__name__}")

    if strategy not in STRATEGIES:
        raise ChunkingError(
            f"Unknown chunking strategy: {strategy}. Available strategies: {', '.join(STRATEGIES)}"
        )

    joiner = joiner_for(strategy)

    documents_progress = tqdm(
        documents.items(),
        desc="Processing documents",
        unit="doc",
        disable=len(documents) < 2,
    )

    for document_id, text in documents_progress:
        try:
            chunks = chunk_text(text, strategy, max_chunk_size, sentence_mode=sentence_mode)
            stats = analyze_chunks(chunks, joiner)

            results[document_id] = {
                "document_id": document_id,
                "original_length": len(text),
                "chunks": chunks,
                "stats": stats,
                "validation_passed": validate_chunks(
                    text, chunks, joiner, normalize_whitespace=strategy == "paragraph"
                ),
                "strategy": strategy,
                "parameters": {
                    "max_chunk_size": max_chunk_size,
                    **({"sentence_mode": sentence_mode} if sentence_mode else {}),
                },
            }

        except (ChunkingError, ValidationError) as e:
            error_msg = f"Validation error: {str(e)}"
            logger.warning(f"Processing document '{document_id}' failed: {error_msg}")
            errors[document_id] = error_msg

    return {"results": results, "errors": errors}
