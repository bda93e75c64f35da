"""
Command-line interface for splitting documents into translation chunks.

Usage:
    python -m doctranslate chunk --input report.txt
    python -m doctranslate chunk --input a.txt b.txt --strategy words --size 2000
    python -m doctranslate chunk --input report.txt --sentence-mode --preview
"""

import argparse
import sys
import time
from pathlib import Path
from typing import Any

from doctranslate.chunk import oversized_chunks, process_documents
from doctranslate.config import get_config
from doctranslate.exceptions import ChunkingError, ValidationError
from doctranslate.logging_config import get_logger, setup_logging

from .common import print_summary_stats, read_text_files, save_json_output


logger = get_logger(__name__)


def chunk_documents(
    input_paths: list[str],
    strategy: str = "paragraph",
    max_chunk_size: int = 4500,
    sentence_mode: bool = False,
    output_path: str | None = None,
    preview: bool = False,
) -> dict[str, Any]:
    """
    CLI wrapper for chunking text files with progress logging and file I/O.

    Args:
        input_paths: Text files to chunk
        strategy: Chunking strategy ('paragraph' or 'words')
        max_chunk_size: Upper bound on chunk length in characters
        sentence_mode: Use NLTK sentence segmentation for long paragraphs
        output_path: Path to save the JSON report
        preview: Whether to log chunk previews

    Returns:
        Dictionary with chunking results and metadata, empty on failure
    """
    # Record the command for reproducibility
    argv_copy = sys.argv.copy()
    if argv_copy and argv_copy[0].endswith("__main__.py"):
        argv_copy[0] = "python -m doctranslate"
    command_run = " ".join(argv_copy)

    documents = _load_documents(input_paths)
    if not documents:
        return {}

    _print_strategy_info(strategy, max_chunk_size, sentence_mode)

    results, errors = _process_documents_with_chunking(
        documents, strategy, max_chunk_size, sentence_mode, preview
    )
    if results is None:
        return {}

    overall_stats = _calculate_overall_statistics(results, errors, max_chunk_size)
    print_summary_stats(overall_stats)

    output_data = {
        "inputs": list(input_paths),
        "strategy": strategy,
        "parameters": {"max_chunk_size": max_chunk_size, "sentence_mode": sentence_mode},
        "overall_stats": overall_stats,
        "documents": results,
        "errors": errors,
        "timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
        "command_run": command_run,
    }

    if output_path:
        save_json_output(output_data, output_path)

    return output_data


def _load_documents(input_paths: list[str]) -> dict[str, str] | None:
    """
    Read the input files with error handling.

    Returns:
        Mapping of document_id -> text, or None if loading failed
    """
    logger.info(f"Loading {len(input_paths)} input file(s)")

    try:
        documents = read_text_files(input_paths)
        logger.info(f"Loaded {sum(len(t) for t in documents.values()):,} characters")
        return documents

    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        logger.info("Check the --input paths")
        return None
    except PermissionError as e:
        logger.error(f"Permission denied: {e}")
        logger.info("Check file permissions for the input files")
        return None
    except UnicodeDecodeError as e:
        logger.error(f"Input is not valid UTF-8: {e}")
        logger.info("Convert the file to UTF-8 text before chunking")
        return None


def _print_strategy_info(strategy: str, max_chunk_size: int, sentence_mode: bool) -> None:
    """Log chunking strategy information."""
    logger.info(f"Chunking strategy: {strategy}")
    logger.info(f"Maximum chunk size: {max_chunk_size} characters")
    if sentence_mode:
        logger.info("Sentence segmentation: NLTK")


def _process_documents_with_chunking(
    documents: dict[str, str],
    strategy: str,
    max_chunk_size: int,
    sentence_mode: bool,
    preview: bool,
) -> tuple[dict, dict] | tuple[None, None]:
    """
    Chunk all documents and log per-document progress.

    Returns:
        (results, errors) tuple or (None, None) if processing failed
    """
    logger.info(f"Processing {len(documents)} documents...")

    try:
        processing_results = process_documents(
            documents,
            strategy=strategy,
            max_chunk_size=max_chunk_size,
            sentence_mode=sentence_mode,
        )
    except ChunkingError as e:
        logger.error(f"Chunking configuration error: {e}")
        logger.info("Check your chunking parameters (strategy, size)")
        return None, None
    except ValidationError as e:
        logger.error(f"Data validation error: {e}")
        return None, None

    results = processing_results["results"]
    errors = processing_results["errors"]

    for i, (document_id, result) in enumerate(results.items(), 1):
        logger.info(f"[{i}/{len(results)}] {document_id}")
        stats = result["stats"]
        logger.info(
            f"Created {stats['num_chunks']} chunks, avg size: {stats['avg_chunk_size']}"
        )

        oversized = oversized_chunks(result["chunks"], max_chunk_size)
        if oversized:
            logger.warning(
                f"{len(oversized)} chunk(s) exceed {max_chunk_size} chars "
                f"(single paragraph or sentence too long): {oversized}"
            )

        if preview:
            from doctranslate.chunk.utils import preview_chunks

            for prev in preview_chunks(result["chunks"][:3]):
                logger.info(f"Preview: {prev}")
            if len(result["chunks"]) > 3:
                logger.info(f"... and {len(result['chunks']) - 3} more chunks")

    for document_id, error in errors.items():
        logger.error(f"Error processing {document_id}: {error}")

    return results, errors


def _calculate_overall_statistics(
    results: dict, errors: dict, max_chunk_size: int
) -> dict[str, Any]:
    """
    Calculate overall statistics from chunking results.

    Args:
        results: Dictionary of successful chunking results
        errors: Dictionary of processing errors
        max_chunk_size: Limit used for chunking

    Returns:
        Dictionary with overall statistics
    """
    if not results:
        return {
            "total_documents": 0,
            "total_chunks": 0,
            "total_characters": 0,
            "avg_chunks_per_document": 0,
            "oversized_chunks": 0,
            "error_count": len(errors),
        }

    total_chunks = sum(r["stats"]["num_chunks"] for r in results.values())
    total_chars = sum(r["original_length"] for r in results.values())
    total_oversized = sum(
        len(oversized_chunks(r["chunks"], max_chunk_size)) for r in results.values()
    )

    return {
        "total_documents": len(results),
        "total_chunks": total_chunks,
        "total_characters": total_chars,
        "avg_chunks_per_document": round(total_chunks / len(results), 1),
        "oversized_chunks": total_oversized,
        "error_count": len(errors),
    }


def _default_output_path(outputs_dir: Path, input_paths: list[str], strategy: str, size: int) -> str:
    stem = Path(input_paths[0]).stem
    if len(input_paths) > 1:
        stem = f"{stem}_and_{len(input_paths) - 1}_more"
    return str(outputs_dir / "chunks" / f"{stem}_{strategy}_{size}.json")


def main() -> None:
    """Main entry point for chunking CLI."""
    setup_logging(verbose="--verbose" in sys.argv or "-v" in sys.argv)

    parser = argparse.ArgumentParser(
        description="Split documents into chunks that fit a translation API request",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Paragraph-aware chunking with the configured limit (default 4500)
  python -m doctranslate chunk --input report.txt

  # Word-based chunking at 2000 characters
  python -m doctranslate chunk --input report.txt --strategy words --size 2000

  # NLTK sentence segmentation for long paragraphs, with previews
  python -m doctranslate chunk --input report.txt --sentence-mode --preview -v

  # Show what would be processed without writing anything
  python -m doctranslate chunk --input a.txt b.txt --dry-run
        """,
    )

    parser.add_argument(
        "--input",
        nargs="+",
        required=True,
        help="UTF-8 text file(s) to chunk",
    )

    parser.add_argument(
        "--strategy",
        choices=["paragraph", "words"],
        default="paragraph",
        help="Chunking strategy to use (default: paragraph)",
    )

    parser.add_argument(
        "--size",
        type=int,
        help="Maximum chunk size in characters (default: DOCTRANSLATE_MAX_CHUNK_SIZE or 4500)",
    )

    parser.add_argument(
        "--sentence-mode",
        action="store_true",
        help="Use NLTK sentence segmentation when a paragraph is too long",
    )

    parser.add_argument(
        "--output",
        help="Output file path (JSON format)",
    )

    parser.add_argument(
        "--preview",
        action="store_true",
        help="Show chunk previews during processing",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging with timestamps and module names",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be processed without actually doing it",
    )

    args = parser.parse_args()

    if args.size is not None and args.size <= 0:
        parser.error("--size must be positive")

    if args.sentence_mode and args.strategy != "paragraph":
        parser.error("--sentence-mode only applies to the paragraph strategy")

    try:
        config = get_config()
    except (ValidationError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        logger.info("Check the DOCTRANSLATE_* environment variables")
        sys.exit(1)

    size = args.size or config.max_chunk_size

    missing = [p for p in args.input if not Path(p).is_file()]
    if missing:
        logger.error(f"Input file(s) not found: {', '.join(missing)}")
        sys.exit(1)

    if not args.output:
        args.output = _default_output_path(config.outputs_dir, args.input, args.strategy, size)

    if args.dry_run:
        logger.info("🔍 DRY RUN MODE - No actual processing will be performed")
        logger.info(f"📋 Would chunk {len(args.input)} file(s): {', '.join(args.input)}")
        logger.info(f"🔧 Would use chunking strategy: {args.strategy}")
        logger.info(f"🔧 Maximum chunk size: {size} characters")
        logger.info(f"💾 Would save results to: {args.output}")
        logger.info("✨ Dry run completed - no files were modified")
        return

    try:
        results = chunk_documents(
            input_paths=args.input,
            strategy=args.strategy,
            max_chunk_size=size,
            sentence_mode=args.sentence_mode,
            output_path=args.output,
            preview=args.preview,
        )

        if results and results["documents"]:
            logger.info("Chunking completed successfully!")
            logger.info(f"Results saved to: {args.output}")
        else:
            logger.error("Chunking failed or produced no results")
            sys.exit(1)

    except KeyboardInterrupt:
        logger.warning("Chunking interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
