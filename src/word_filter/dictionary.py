"""Load word lists from disk into a Trie."""

import logging
from collections.abc import Iterable
from pathlib import Path

from src.custom_data_structures.Trie.Trie import Trie

logger = logging.getLogger(__name__)


class EmptyDictionaryError(Exception):
    """Raised when a dictionary directory holds no word list files."""


class DictionaryEncodingError(ValueError):
    """Raised when a word list file is not valid UTF-8."""


def _read_word_file(path: Path) -> list[str]:
    words = []
    try:
        with path.open("r", encoding="utf-8") as file:
            for line in file:
                word = line.strip()
                # Skip blank lines and comments
                if not word or word.startswith("#"):
                    continue
                words.append(word)
    except UnicodeDecodeError as e:
        raise DictionaryEncodingError(
            f"The word list {path} is not valid UTF-8: {e}",
        ) from e
    return words


def read_words(path: Path) -> list[str]:
    """Read the words of a word list file or directory.

    Args:
        path (Path): A UTF-8 file with one word per line, or a directory
        whose ``*.txt`` files are read in name order.

    Raises:
        FileNotFoundError: If `path` does not exist.
        EmptyDictionaryError: If `path` is a directory without word lists.
        DictionaryEncodingError: If a word list is not valid UTF-8.

    Returns:
        list[str]: The words, in file order.

    """
    if not path.exists():
        raise FileNotFoundError(
            f"The dictionary {path} doesn't exist.",
        )

    if not path.is_dir():
        return _read_word_file(path)

    files = sorted(path.glob("*.txt"))
    if not files:
        raise EmptyDictionaryError(
            f"No '*.txt' word lists found in the directory {path}.",
        )

    words: list[str] = []
    for txt_file in files:
        words.extend(_read_word_file(txt_file))
    return words


def build_trie(words: Iterable[str]) -> Trie:
    """Build a Trie holding every word of `words`."""
    trie = Trie()
    for word in words:
        trie.add(word)
    return trie


def load_dictionary(path: Path) -> Trie:
    """Build a Trie from the word list at `path`.

    Args:
        path (Path): A word list file or directory, see `read_words`.

    Returns:
        Trie: The populated trie.

    """
    words = read_words(path)
    trie = build_trie(words)
    logger.info("Loaded %d words from %s", len(words), path)
    return trie
