"""Logging setup for the ghdist CLI.

Handlers are attached to the ``ghdist`` package logger, so the full DEBUG
trail goes to ``<log_dir>/ghdist.log`` while the console only shows what
the chosen verbosity allows.
"""

import logging
from pathlib import Path

LOGGER_NAME = "ghdist"
LOG_FILE = "ghdist.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def console_level(verbose: bool) -> int:
    """Console threshold: INFO progress with --verbose, warnings and errors otherwise."""
    return logging.INFO if verbose else logging.WARNING


def setup_logging(log_dir: Path, verbose: bool = False) -> logging.Logger:
    """Log everything to a file under ``log_dir`` and filtered output to stderr.

    Calling it again replaces the previously installed handlers.

    Returns:
        The configured ``ghdist`` package logger
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    file_handler = logging.FileHandler(log_dir / LOG_FILE)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    # StreamHandler defaults to stderr, keeping stdout free for the table
    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level(verbose))
    console_handler.setFormatter(formatter)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    return logger
