"""GitHub REST API data source."""

import json
import logging
import os
import urllib.error
import urllib.parse
import urllib.request
from abc import ABC, abstractmethod
from typing import Any

from pydantic import ValidationError

from ghdist.core.config import ApiConfig
from ghdist.core.models import GitHubUser, Repository

logger = logging.getLogger(__name__)

USER_AGENT = "ghdist"


class GitHubAPIError(Exception):
    """Raised when a GitHub API request fails or returns an unexpected payload."""


class DataSource(ABC):
    """Abstract provider of per-user GitHub data."""

    @abstractmethod
    def get_user(self, username: str) -> GitHubUser:
        """Fetch profile counters for ``username``."""
        ...

    @abstractmethod
    def get_repositories(self, username: str) -> list[Repository]:
        """Fetch the public repositories owned by ``username``."""
        ...

    @abstractmethod
    def get_languages(self, username: str, repo: Repository) -> dict[str, int]:
        """Fetch the language byte counts of one repository."""
        ...


class GitHubClient(DataSource):
    """Data source backed by the GitHub REST API."""

    def __init__(self, config: ApiConfig | None = None, token: str | None = None) -> None:
        self.config = config or ApiConfig()
        self.token = token if token is not None else os.environ.get("GITHUB_TOKEN")
        logger.debug(
            f"Initialized GitHubClient with base_url={self.config.base_url} "
            f"authenticated={bool(self.token)}"
        )

    def _url(self, path: str, **params: Any) -> str:
        url = f"{self.config.base_url}/{path.lstrip('/')}"
        if params:
            url = f"{url}?{urllib.parse.urlencode(params)}"
        return url

    def _get_json(self, url: str) -> Any:
        headers = {"Accept": "application/vnd.github.v3+json", "User-Agent": USER_AGENT}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        logger.debug(f"GET {url}")
        req = urllib.request.Request(url, headers=headers)
        try:
            with urllib.request.urlopen(req, timeout=self.config.timeout_seconds) as response:
                body = response.read().decode()
        except urllib.error.HTTPError as e:
            raise GitHubAPIError(f"GET {url} failed with HTTP {e.code}: {e.reason}") from e
        except urllib.error.URLError as e:
            raise GitHubAPIError(f"GET {url} failed: {e.reason}") from e

        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            raise GitHubAPIError(f"Can not decode JSON from {url}") from e

    def get_user(self, username: str) -> GitHubUser:
        data = self._get_json(self._url(f"users/{urllib.parse.quote(username)}"))
        try:
            return GitHubUser.model_validate(data)
        except ValidationError as e:
            raise GitHubAPIError(f"Unexpected user payload for {username}") from e

    def get_repositories(self, username: str) -> list[Repository]:
        url = self._url(f"users/{urllib.parse.quote(username)}/repos", per_page=self.config.per_page)
        data = self._get_json(url)
        if not isinstance(data, list):
            raise GitHubAPIError(f"Unexpected repositories payload for {username}")
        try:
            return [Repository.model_validate(item) for item in data]
        except ValidationError as e:
            raise GitHubAPIError(f"Unexpected repositories payload for {username}") from e

    def get_languages(self, username: str, repo: Repository) -> dict[str, int]:
        path = f"repos/{urllib.parse.quote(username)}/{urllib.parse.quote(repo.name)}/languages"
        data = self._get_json(self._url(path))
        if not isinstance(data, dict):
            raise GitHubAPIError(f"Unexpected languages payload for {username}/{repo.name}")
        return {str(language): int(size) for language, size in data.items()}
