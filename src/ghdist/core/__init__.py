"""Core functionality for ghdist."""

from ghdist.core.config import GhdistConfig, get_config, load_config
from ghdist.core.models import GitHubUser, Repository, UserRecord
from ghdist.core.utils import current_year

__all__ = [
    "GhdistConfig",
    "GitHubUser",
    "Repository",
    "UserRecord",
    "current_year",
    "get_config",
    "load_config",
]
