"""Implementation of the ``ghdist report`` command."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from ghdist.core.config import GhdistConfig
from ghdist.core.utils import current_year
from ghdist.data.export import write_users_json
from ghdist.data.github import DataSource, GitHubAPIError, GitHubClient
from ghdist.data.users_file import read_usernames
from ghdist.processing.activity import YearWindow
from ghdist.processing.report import UserSummary, build_user_summary

logger = logging.getLogger(__name__)

TABLE_COLUMNS = ["User", "Repositories", "Followers", "Programming languages", "Forks", "Activity"]


def activity_window(config: GhdistConfig) -> YearWindow:
    """Activity window from config, ending at the current year unless pinned."""
    settings = config.distribution
    end = settings.window_end if settings.window_end is not None else current_year()
    return YearWindow.ending_at(end, settings.window_years)


def build_table(summaries: list[UserSummary]) -> Table:
    table = Table(show_lines=True)
    for column in TABLE_COLUMNS:
        table.add_column(column)

    for summary in summaries:
        table.add_row(
            summary.login,
            str(summary.public_repos),
            str(summary.followers),
            summary.languages,
            str(summary.forks_count),
            summary.activity,
        )
    return table


def cmd_report(
    files: list[Path],
    config: GhdistConfig,
    output: Path | None = None,
    show_table: bool = True,
    source: DataSource | None = None,
    console: Console | None = None,
) -> None:
    """Build summaries for every username listed in ``files``.

    Writes the JSON export and optionally renders a table. Users whose data
    cannot be fetched are skipped; the command then exits with code 1.
    """
    source = source or GitHubClient(config.api)
    console = console or Console()
    output = output or config.paths.output
    window = activity_window(config)

    usernames = read_usernames(files)
    if not usernames:
        logger.warning("No usernames to process")

    summaries: list[UserSummary] = []
    failed: list[str] = []
    for username in usernames:
        try:
            summaries.append(build_user_summary(source, username, config.distribution, window))
        except GitHubAPIError as e:
            logger.error(f"Skipping {username}: {e}")
            failed.append(username)

    write_users_json([summary.to_record() for summary in summaries], output)

    if show_table:
        console.print(build_table(summaries))

    if failed:
        logger.error(f"Failed to process {len(failed)} user(s): {', '.join(failed)}")
        raise typer.Exit(code=1)
