"""Reading GitHub usernames from text files."""

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def read_usernames(paths: Iterable[Path]) -> list[str]:
    """Read one username per line from each file, in order.

    Blank lines are ignored. Missing files are logged and skipped.
    """
    usernames: list[str] = []
    for path in paths:
        try:
            with open(path) as f:
                lines = f.read().splitlines()
        except FileNotFoundError:
            logger.warning(f"File '{path}' not found")
            continue

        names = [line.strip() for line in lines if line.strip()]
        logger.debug(f"Read {len(names)} usernames from {path}")
        usernames.extend(names)

    return usernames
