"""
Common utilities for CLI modules.
"""

import json
import sys
from pathlib import Path
from typing import Any


def read_text_files(paths: list[str]) -> dict[str, str]:
    """
    Read UTF-8 text files into a document_id -> text mapping.

    The document id is the file stem; a repeated stem gets a numeric suffix.

    Raises:
        FileNotFoundError: If any path does not exist
    """
    documents = {}
    for path_str in paths:
        path = Path(path_str)
        if not path.is_file():
            raise FileNotFoundError(f"Input file not found: {path}")

        document_id = path.stem
        suffix = 2
        while document_id in documents:
            document_id = f"{path.stem}_{suffix}"
            suffix += 1

        documents[document_id] = path.read_text(encoding="utf-8")
    return documents


def save_json_output(
    data: dict[str, Any], output_path: str, pretty: bool = True
) -> None:
    """
    Save data to JSON file with error handling.

    Args:
        data: Data to save
        output_path: Path to save the JSON file
        pretty: Whether to pretty-print the JSON
    """
    try:
        output_file = Path(output_path)
        output_file.parent.mkdir(parents=True, exist_ok=True)

        with open(output_file, "w", encoding="utf-8") as f:
            if pretty:
                json.dump(data, f, indent=2, ensure_ascii=False)
            else:
                json.dump(data, f, ensure_ascii=False)

        print(f"✅ Output saved to: {output_file}")

    except OSError as e:
        print(f"❌ Error saving output to {output_path}: {e}", file=sys.stderr)
        sys.exit(1)


def print_summary_stats(stats: dict[str, Any]) -> None:
    """
    Print formatted summary statistics.

    Args:
        stats: Statistics dictionary to display
    """
    print("\n📊 Summary Statistics:")
    for key, value in stats.items():
        if isinstance(value, float):
            print(f"  {key}: {value:.1f}")
        else:
            print(f"  {key}: {value}")
