"""Data sources and sinks for ghdist."""

from ghdist.data.export import write_users_json
from ghdist.data.github import DataSource, GitHubAPIError, GitHubClient
from ghdist.data.users_file import read_usernames

__all__ = [
    "DataSource",
    "GitHubAPIError",
    "GitHubClient",
    "read_usernames",
    "write_users_json",
]
