"""Sum inserted and deleted lines across an author's non-merge commits."""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Optional

from .diff_stat import parse_diff_stat
from .git_client import GitRepository
from .models import ChangeStat, Commit

MERGE_MARKER = 'Merge'


def is_merge_commit(commit: Commit) -> bool:
    """Heuristic merge detection: the message mentions "Merge" anywhere.

    Parent count is not checked, so "Merge sort speedup" is treated as a
    merge too.
    """
    return MERGE_MARKER in commit.message


def non_merge_commits(commits: List[Commit]) -> List[Commit]:
    return [commit for commit in commits if not is_merge_commit(commit)]


def commit_changes(repo: GitRepository, commit: Commit) -> ChangeStat:
    """Fetch and parse the diff stat for one commit."""
    stat = parse_diff_stat(repo.show_stat(commit.hash))
    logging.debug(f"Commit {commit.hash[:8]}: +{stat.insertions}/-{stat.deletions}")
    return stat


def total_changes(repo: GitRepository, commits: List[Commit],
                  max_workers: Optional[int] = None) -> ChangeStat:
    """Query every commit's diff stat concurrently and sum the results.

    All queries are submitted at once. The first failing query is re-raised,
    so no partial total is ever returned.

    Args:
        repo: Repository the commits belong to
        commits: Commits to total (merge commits should already be removed)
        max_workers: Concurrency cap; None runs one worker per commit

    Returns:
        Summed ChangeStat (zero for an empty list)

    Raises:
        RepositoryAccessError: If any diff-stat query fails
    """
    if not commits:
        return ChangeStat()

    workers = max_workers or len(commits)
    logging.info(f"Fetching diff stats for {len(commits)} commits ({workers} workers)")

    total = ChangeStat()
    with ThreadPoolExecutor(max_workers=workers) as executor:
        future_to_commit = {
            executor.submit(commit_changes, repo, commit): commit
            for commit in commits
        }

        for future in as_completed(future_to_commit):
            commit = future_to_commit[future]
            try:
                total = total + future.result()
            except Exception:
                logging.error(f"Diff stat query failed for commit {commit.hash}")
                for pending in future_to_commit:
                    pending.cancel()
                raise

    return total
