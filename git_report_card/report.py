"""Assemble the report summary from commit history and review data."""

import logging
from datetime import datetime
from typing import List, Optional

from .api_client import GitHubAPIClient
from .changes import non_merge_commits, total_changes
from .config import ReportConfig
from .git_client import GitRepository
from .models import Commit, ReportSummary
from .reviews import ReviewFetcher, group_reviews_by_state

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR
MS_PER_YEAR = 365 * MS_PER_DAY


def format_duration(ms: float) -> str:
    """Format milliseconds as a compact human-readable duration.

    Examples: 0 -> '0ms', 450 -> '450ms', 1337 -> '1.3s',
    7380000 -> '2h 3m', 90061000 -> '1d 1h 1m 1s'.
    """
    ms = abs(ms)
    if ms < MS_PER_SECOND:
        return f"{int(round(ms))}ms"

    remaining = int(ms)
    parts = []
    for unit_ms, suffix in ((MS_PER_YEAR, 'y'), (MS_PER_DAY, 'd'),
                            (MS_PER_HOUR, 'h'), (MS_PER_MINUTE, 'm')):
        value, remaining = divmod(remaining, unit_ms)
        if value:
            parts.append(f"{value}{suffix}")

    if ms < MS_PER_MINUTE:
        seconds = f"{remaining / MS_PER_SECOND:.1f}"
        if seconds.endswith('.0'):
            seconds = seconds[:-2]
        parts.append(f"{seconds}s")
    elif remaining // MS_PER_SECOND:
        parts.append(f"{remaining // MS_PER_SECOND}s")

    return ' '.join(parts)


def span_ms(a: datetime, b: datetime) -> float:
    """Absolute difference between two timestamps in milliseconds."""
    return abs((a - b).total_seconds()) * MS_PER_SECOND


def commit_span(commits: List[Commit]) -> str:
    """Duration between the latest and earliest commit."""
    if not commits:
        return format_duration(0)
    ordered = sorted(commits, key=lambda c: c.date, reverse=True)
    return format_duration(span_ms(ordered[0].date, ordered[-1].date))


def build_summary(config: ReportConfig, repo: GitRepository = None,
                  review_fetcher: Optional[ReviewFetcher] = None) -> ReportSummary:
    """Run the whole pipeline and return the finished summary.

    Args:
        config: Run configuration
        repo: Repository to read (defaults to config.directory)
        review_fetcher: Review source; built from config when review stats
            are requested and none is given

    Returns:
        ReportSummary ready for rendering

    Raises:
        RepositoryAccessError: If git queries fail
        NetworkError: If review stats were requested and any API call fails
    """
    repo = repo or GitRepository(config.directory)

    commits = repo.log_by_author(config.author)
    changes = total_changes(repo, non_merge_commits(commits), config.max_workers)

    total_reviews = None
    review_counts = {}
    if config.wants_review_stats:
        if review_fetcher is None:
            review_fetcher = ReviewFetcher(
                config.github_repo,
                config.review_user,
                GitHubAPIClient(config.token),
                max_workers=config.max_workers
            )
        reviews = review_fetcher.get_reviews()
        total_reviews = len(reviews)
        review_counts = group_reviews_by_state(reviews)
    elif config.github:
        logging.warning("GitHub stats requested but --github-repo or --token is missing; skipping reviews")

    return ReportSummary(
        author_name=config.author,
        total_commits=len(commits),
        duration_span=commit_span(commits),
        total_insertions=changes.insertions,
        total_deletions=changes.deletions,
        total_reviews=total_reviews,
        review_counts_by_state=review_counts
    )
