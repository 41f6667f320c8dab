"""Serve membership and censoring queries against a loaded dictionary."""

import logging
import time
from datetime import datetime
from typing import Optional

from src.custom_data_structures.Trie.Trie import Trie

from .config import FilterConfig
from .dictionary import load_dictionary
from .logger import log_query

logger = logging.getLogger(__name__)


class WordFilter:
    """Dictionary-backed word filter configured from a FilterConfig."""

    def __init__(self, config: FilterConfig) -> None:
        """Initialize the filter and load its dictionary.

        Args:
            config (FilterConfig): The settings naming the dictionary,
            the default replacement and the logging behavior.

        Raises:
            FileNotFoundError: If the dictionary path does not exist.
            DictionaryEncodingError: If a word list is not valid UTF-8.

        """
        self.config = config
        self.trie: Trie = load_dictionary(config.dictionary_path)

    def reload(self) -> None:
        """Rebuild the trie from the configured dictionary path."""
        self.trie = load_dictionary(self.config.dictionary_path)

    def contains(self, word: str) -> bool:
        """Check whether `word` is a dictionary word.

        Args:
            word (str): The word to look up.

        Returns:
            bool: True if `word` was loaded as a complete word.

        """
        if self.config.reload_on_query:
            self.reload()

        start_time = time.perf_counter()
        found = self.trie.search(word)
        self._log("search", len(word), start_time)
        return found

    def censor(self, text: str, replacement: Optional[str] = None) -> str:
        """Replace every dictionary word in `text`.

        Args:
            text (str): The text to filter.
            replacement (Optional[str]): The token to substitute, the
            configured replacement when omitted.

        Returns:
            str: The filtered text.

        """
        if replacement is None:
            replacement = self.config.replacement
        if self.config.reload_on_query:
            self.reload()

        start_time = time.perf_counter()
        filtered = self.trie.filter(text, replacement)
        self._log("filter", len(text), start_time)
        return filtered

    def _log(
        self,
        operation: str,
        text_length: int,
        start_time: float,
    ) -> None:
        duration = (time.perf_counter() - start_time) * 1000  # in milliseconds
        if self.config.log_details:
            log_query(
                datetime.now().isoformat(),
                operation,
                text_length,
                duration,
            )
        else:
            logger.debug("%s finished in %.2f ms", operation, duration)
