"""This module provides the command line entry point for the word filter."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from src.word_filter.config import (
    ConfigBoolParsingError,
    ConfigNotFoundError,
    load_config_file,
)
from src.word_filter.dictionary import (
    DictionaryEncodingError,
    EmptyDictionaryError,
)
from src.word_filter.logger import LOG_FILE_PATH, setup_logging
from src.word_filter.word_filter import WordFilter

CONFIG_PATH = Path(__file__).parent / "config.txt"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser of the word filter."""
    parser = argparse.ArgumentParser(
        description="Censor dictionary words in text or look words up.",
    )
    parser.add_argument(
        "--config_path",
        type=str,
        default=str(CONFIG_PATH),
        help="Optional path to the config file.",
        required=False,
    )
    parser.add_argument(
        "--search",
        nargs="+",
        metavar="WORD",
        help="Check whether each WORD is in the dictionary.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--text", type=str, help="Text to filter.")
    source.add_argument(
        "--input",
        type=str,
        help="UTF-8 file whose content is filtered.",
    )
    parser.add_argument(
        "--replacement",
        type=str,
        default=None,
        help="Override the configured replacement token.",
    )
    parser.add_argument(
        "--log_file",
        type=str,
        default=str(LOG_FILE_PATH),
        help="Where to write the log records.",
    )
    return parser


# Errors that end the run with a message instead of a traceback
DICTIONARY_ERRORS = (
    OSError,
    UnicodeDecodeError,
    ConfigNotFoundError,
    ConfigBoolParsingError,
    DictionaryEncodingError,
    EmptyDictionaryError,
)


def read_input(args: argparse.Namespace) -> str:
    """Return the text to filter from --text, --input or stdin.

    Raises:
        OSError: If the --input file cannot be read.
        UnicodeDecodeError: If the --input file is not UTF-8.

    """
    if args.text is not None:
        return args.text
    if args.input is not None:
        return Path(args.input).read_text(encoding="utf-8")
    return sys.stdin.read()


def main(argv: Optional[list[str]] = None) -> int:
    """Run the word filter.

    Args:
        argv (Optional[list[str]]): The command line arguments, defaults
        to ``sys.argv[1:]``.

    Returns:
        int: The process exit status.

    """
    args = build_parser().parse_args(argv)
    setup_logging(Path(args.log_file))

    try:
        config = load_config_file(Path(args.config_path))
        word_filter = WordFilter(config)
    except DICTIONARY_ERRORS as e:
        logging.exception("Failed to initialize the word filter")
        print(f"[WORD FILTER] {e}", file=sys.stderr)
        return 1

    logging.info("Word filter started with settings: %r", config)

    try:
        if args.search:
            for word in args.search:
                found = word_filter.contains(word)
                print(f"{word}: {'FOUND' if found else 'NOT FOUND'}")
            if args.text is None and args.input is None:
                return 0

        try:
            text = read_input(args)
        except (OSError, UnicodeDecodeError) as e:
            logging.exception("Failed to read the input text")
            print(f"[WORD FILTER] {e}", file=sys.stderr)
            return 1

        filtered = word_filter.censor(text, args.replacement)
    except DICTIONARY_ERRORS as e:
        # Only reachable when reload_on_query re-reads the dictionary
        logging.exception("Failed to reload the dictionary")
        print(f"[WORD FILTER] {e}", file=sys.stderr)
        return 1

    sys.stdout.write(filtered)
    if args.text is not None:
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
