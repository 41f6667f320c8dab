"""Structured debug logging (timestamp, operation, timing)."""

import logging
import logging.handlers
from pathlib import Path

LOG_FILE_PATH = Path(__file__).parent.parent.parent / "logs/word_filter.log"
_LOG_LEVEL = logging.INFO

LOG_FORMAT = (
    "level=%(levelname)s | time=%(asctime)s | process=%(process)d | "
    "module=%(module)s | funcName=%(funcName)s | "
    "lineno=%(lineno)d | message=%(message)s"
)


def setup_logging(
    log_file_path: Path = LOG_FILE_PATH,
    level: int = _LOG_LEVEL,
) -> logging.Handler:
    """Route the root logger to a rotating log file.

    Any handler previously attached to the root logger is removed, so
    calling this twice does not duplicate records.

    Args:
        log_file_path (Path): The file the records are written to.
        level (int): The minimum level of the records to keep.

    Returns:
        logging.Handler: The installed file handler.

    """
    log_file_path.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setFormatter(
        logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"),
    )
    root_logger.addHandler(file_handler)
    return file_handler


def log_query(
    time_stamp: str,
    operation: str,
    text_length: int,
    execution_time_ms: float,
) -> None:
    """Log the details of a query using the configured logging system.

    Args:
        time_stamp (str): The timestamp of the query.
        operation (str): The operation performed ("search" or "filter").
        text_length (int): Number of characters in the queried text.
        execution_time_ms (float): The execution time in milliseconds.

    """
    logging.info(
        "Timestamp: %s, Operation: %s, Length: %d, Execution Time: %.2f ms",
        time_stamp,
        operation,
        text_length,
        execution_time_ms,
    )
