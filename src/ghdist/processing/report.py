"""Per-user report assembly.

Chains the percentage calculator, bucketer and formatter over the data
fetched for one GitHub user.
"""

import logging
from collections import Counter
from collections.abc import Iterable, Mapping

from pydantic import BaseModel, Field

from ghdist.core.config import DistributionConfig
from ghdist.core.models import Repository, UserRecord
from ghdist.data.github import DataSource
from ghdist.processing.activity import (
    ActivityRecord,
    YearWindow,
    classify_activity,
    order_activity,
)
from ghdist.processing.distribution import (
    ACTIVITY_DIGITS,
    DEFAULT_TOP_N,
    LANGUAGE_DIGITS,
    bucket_top,
    rank,
    to_percentages,
)
from ghdist.processing.formatting import (
    DistributionStyle,
    flatten_distribution,
    format_distribution,
)

logger = logging.getLogger(__name__)


class UserSummary(BaseModel):
    """Display-ready summary of one GitHub user."""

    login: str
    public_repos: int
    followers: int
    forks_count: int = Field(description="Total forks across the user's repositories")
    languages: str = Field(description="Multi-line language distribution")
    activity: str = Field(description="Multi-line activity distribution")

    def to_record(self) -> UserRecord:
        """Build the JSON export record with single-line distributions."""
        return UserRecord(
            login=self.login,
            public_repos=self.public_repos,
            followers=self.followers,
            languages_distribution=flatten_distribution(self.languages),
            forks_count=self.forks_count,
            activity=flatten_distribution(self.activity),
        )


def merge_language_counts(maps: Iterable[Mapping[str, int]]) -> dict[str, int]:
    """Sum language byte counts across repositories."""
    total: Counter[str] = Counter()
    for languages in maps:
        total.update(languages)
    return dict(total)


def total_forks(repos: Iterable[Repository]) -> int:
    """Sum forks over forked repositories, counting each name once."""
    forks: dict[str, int] = {}
    for repo in repos:
        if repo.forks_count > 0:
            forks[repo.name] = repo.forks_count
    return sum(forks.values())


def language_distribution(
    counts: Mapping[str, int],
    top_n: int = DEFAULT_TOP_N,
    digits: int = LANGUAGE_DIGITS,
) -> str:
    percents = to_percentages(counts, digits)
    return format_distribution(bucket_top(rank(percents), top_n), DistributionStyle.PLAIN)


def activity_distribution(
    repos: Iterable[Repository],
    window: YearWindow,
    digits: int = ACTIVITY_DIGITS,
) -> str:
    records = [ActivityRecord.from_repository(repo) for repo in repos]
    percents = to_percentages(classify_activity(records, window), digits)
    return format_distribution(order_activity(percents, window), DistributionStyle.PERCENT_SIGN)


def build_user_summary(
    source: DataSource,
    username: str,
    settings: DistributionConfig,
    window: YearWindow,
) -> UserSummary:
    """Fetch one user's data and compute both distributions.

    Raises:
        GitHubAPIError: If any request to the data source fails
    """
    logger.info(f"Building summary for {username}")

    repos = source.get_repositories(username)
    logger.debug(f"{username}: {len(repos)} repositories")

    languages = merge_language_counts(source.get_languages(username, repo) for repo in repos)
    user = source.get_user(username)

    return UserSummary(
        login=user.login,
        public_repos=user.public_repos,
        followers=user.followers,
        forks_count=total_forks(repos),
        languages=language_distribution(languages, settings.top_n, settings.language_digits),
        activity=activity_distribution(repos, window, settings.activity_digits),
    )
