"""
Pytest fixtures shared across the test suite.

Network access is never used: tests run the pipeline against an in-memory
data source.
"""

import logging
from datetime import datetime, timezone

import pytest

from ghdist.core.models import GitHubUser, Repository
from ghdist.data.github import DataSource, GitHubAPIError


def make_repo(name: str, created: int, updated: int | None = None, forks: int = 0) -> Repository:
    """Repository created and last updated on January 1st of the given years."""
    return Repository(
        name=name,
        forks_count=forks,
        created_at=datetime(created, 1, 1, tzinfo=timezone.utc),
        updated_at=datetime(updated if updated is not None else created, 1, 1, tzinfo=timezone.utc),
    )


class FakeSource(DataSource):
    """In-memory data source keyed by username."""

    def __init__(self, users=None, repos=None, languages=None, failing=()):
        self.users = users or {}
        self.repos = repos or {}
        self.languages = languages or {}
        self.failing = set(failing)

    def _check(self, username: str) -> None:
        if username in self.failing:
            raise GitHubAPIError(f"GET users/{username} failed with HTTP 404: Not Found")

    def get_user(self, username):
        self._check(username)
        return self.users.get(username, GitHubUser(login=username))

    def get_repositories(self, username):
        self._check(username)
        return self.repos.get(username, [])

    def get_languages(self, username, repo):
        self._check(username)
        return self.languages.get((username, repo.name), {})


@pytest.fixture
def octocat_source():
    """Data source with a single user owning three repositories."""
    repos = [
        make_repo("alpha", 2019, forks=2),
        make_repo("beta", 2020, forks=3),
        make_repo("legacy", 2015, 2015),
    ]
    return FakeSource(
        users={"octocat": GitHubUser(login="octocat", public_repos=3, followers=42)},
        repos={"octocat": repos},
        languages={
            ("octocat", "alpha"): {"Go": 600, "Python": 400},
            ("octocat", "beta"): {"Python": 1000},
        },
    )


@pytest.fixture
def restore_package_logging():
    """Undo handler changes made by setup_logging()."""
    package_logger = logging.getLogger("ghdist")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield package_logger
    for handler in package_logger.handlers:
        if handler not in handlers:
            handler.close()
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
