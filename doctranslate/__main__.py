"""
Main entry point for doctranslate package.

Enables: python -m doctranslate [command] [args]
"""

import sys

from doctranslate.logging_config import get_logger, setup_logging


logger = get_logger(__name__)


def main():
    """Main entry point that delegates to appropriate CLI modules."""
    setup_logging()

    if len(sys.argv) < 2:
        print_help()
        return

    command = sys.argv[1]

    # Remove the command from argv so submodules see the right arguments
    sys.argv = [sys.argv[0]] + sys.argv[2:]

    if command == "chunk":
        from doctranslate.cli.chunk import main as chunk_main

        chunk_main()
    elif command == "help" or command == "-h" or command == "--help":
        print_help()
    else:
        logger.error(f"Unknown command: {command}")
        print_help()
        sys.exit(1)


def print_help():
    """Print main help message."""
    print("doctranslate - Document chunking for translation APIs")
    print()
    print("Usage:")
    print("  python -m doctranslate <command> [options]")
    print()
    print("Available commands:")
    print("  chunk           Split documents into translation-sized chunks")
    print("  help            Show this help message")
    print()
    print("Examples:")
    print("  python -m doctranslate chunk --input report.txt")
    print("  python -m doctranslate chunk --input report.txt --strategy words --size 2000")
    print("  python -m doctranslate help")
    print()
    print("For command-specific help:")
    print("  python -m doctranslate chunk --help")


if __name__ == "__main__":
    main()
