"""JSON export of user records."""

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from ghdist.core.models import UserRecord

logger = logging.getLogger(__name__)


def write_users_json(records: Iterable[UserRecord], path: Path) -> int:
    """Write records as a JSON array to ``path``.

    Returns:
        Number of records written
    """
    data = [record.model_dump() for record in records]
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(data, f, indent=1)

    logger.info(f"Wrote {len(data)} user records to {path}")
    return len(data)
