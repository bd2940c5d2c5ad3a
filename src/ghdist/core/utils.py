from datetime import datetime


def current_year() -> int:
    """Return the current calendar year."""
    return datetime.now().year
