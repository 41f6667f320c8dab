"""Configuration parser for the word filter."""

from pathlib import Path
from typing import cast

DEFAULT_REPLACEMENT = "***"

_TRUE_VALUES = frozenset({"true", "1", "yes", "on"})
_FALSE_VALUES = frozenset({"false", "0", "no", "off"})


class ConfigBoolParsingError(ValueError):
    """Raised when a boolean setting holds an unrecognized value."""


class ConfigNotFoundError(Exception):
    """Raised when the config file has no dictionary_path line."""


class FilterConfig:
    """A class to save the word filter configuration settings."""

    def __init__(
        self,
        dictionary_path: Path,
        replacement: str = DEFAULT_REPLACEMENT,
        reload_on_query: bool = False,
        log_details: bool = False,
    ) -> None:
        """Initialize the filter configuration.

        Args:
            dictionary_path (Path): The word list file, or a directory
            of ``*.txt`` word lists.
            replacement (str): The token substituted for every match.
            reload_on_query (bool): Whether to re-read the dictionary
            before every query.
            log_details (bool): Whether every query is logged.

        """
        self.dictionary_path = dictionary_path
        self.replacement = replacement
        self.reload_on_query = reload_on_query
        self.log_details = log_details

    def __repr__(self) -> str:
        """Return a string representation of the configuration object.

        Returns:
            str: A formatted string representing the configuration settings.

        """
        return f"""
                Word filter configuration settings:
                Dictionary path: {self.dictionary_path}
                Replacement: {self.replacement}
                Reload on query: {"YES" if self.reload_on_query else "NO"}
                Detailed logging: {"YES" if self.log_details else "NO"}
            """


def parse_bool(key: str, val: str) -> bool:
    """Parse a boolean setting.

    Args:
        key (str): The setting name, used in the error message.
        val (str): The raw value, matched case-insensitively against
        `_TRUE_VALUES` and `_FALSE_VALUES`.

    Raises:
        ConfigBoolParsingError: If `val` is in neither set.

    Returns:
        bool: The parsed value.

    """
    normalized = val.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False

    accepted = ", ".join(sorted(_TRUE_VALUES | _FALSE_VALUES))
    raise ConfigBoolParsingError(
        f"Invalid boolean value for key '{key}': '{val}'. "
        f"Accepted values are {accepted}.",
    )


def load_config_file(config_file_path: Path) -> FilterConfig:
    """Load and parse the configuration file.

    Args:
        config_file_path (Path): Path to the config file.

    Raises:
        ConfigNotFoundError: If the dictionary path is missing.
        FileNotFoundError: If the config file or the dictionary
        does not exist.

    Returns:
        FilterConfig: Parsed config object.

    """
    if not config_file_path.exists():
        raise FileNotFoundError(
            f"Missing required configuration file: '{config_file_path}'. "
            "Please ensure the file exists and the path is correct.",
        )

    dictionary_path = None
    replacement = DEFAULT_REPLACEMENT
    reload_on_query = log_details = False

    with config_file_path.open("r", encoding="utf-8") as file:
        for line in file:
            line = line.strip()

            # Skip blank lines and comments
            if not line or line.startswith("#"):
                continue

            key, sep, value = line.partition("=")
            if sep != "=":
                continue

            key = key.strip().lower()
            value = value.strip()

            if key == "dictionary_path":
                # Relative paths are relative to the config file
                dictionary_path = Path(value)
                if not dictionary_path.is_absolute():
                    dictionary_path = config_file_path.parent / dictionary_path
            elif key == "replacement":
                replacement = value
            elif key == "reload_on_query":
                reload_on_query = parse_bool("reload_on_query", value)
            elif key == "log_details":
                log_details = parse_bool("log_details", value)

    if dictionary_path is None:
        raise ConfigNotFoundError(
            "Missing required configuration: 'dictionary_path'. "
            "Please ensure the config file includes a valid line for "
            "'DICTIONARY_PATH'.",
        )

    if not dictionary_path.exists():
        raise FileNotFoundError(
            f"The required dictionary {dictionary_path} doesn't exist.",
        )

    return FilterConfig(
        cast("Path", dictionary_path),
        replacement,
        reload_on_query,
        log_details,
    )
