"""
Centralized logging configuration.

While the render task owns the terminal, nothing may write to stdout or
stderr, so records go to a log file or are discarded.
"""

import logging
import warnings
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

NOISY_LIBRARIES = [
    "asyncio",
    "prompt_toolkit",
]


class NullHandler(logging.Handler):
    """Handler that discards all log records."""

    def emit(self, record):
        pass


def setup_logging(
    verbose: bool = False, log_file: Optional[Union[str, Path]] = None
) -> logging.Handler:
    """
    Configure the termloop logger and quiet third-party loggers.

    Args:
        verbose: Log at DEBUG instead of INFO and let noisy libraries through
        log_file: Append records to this file; discard them when None

    Returns:
        The handler attached to the termloop logger
    """
    if not verbose:
        warnings.filterwarnings("ignore", category=ResourceWarning)

    handler: logging.Handler
    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = NullHandler()

    package_logger = logging.getLogger("termloop")
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
        existing.close()
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    package_logger.propagate = False

    library_level = logging.DEBUG if verbose else logging.WARNING
    for logger_name in NOISY_LIBRARIES:
        logger = logging.getLogger(logger_name)
        logger.setLevel(library_level)
        logger.propagate = False
        logger.handlers = [handler]

    return handler
