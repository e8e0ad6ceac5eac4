"""Fetch a user's pull request reviews from a GitHub repository."""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, List, Optional

from .api_client import GitHubAPIClient
from .models import ReviewRecord

PER_PAGE = 100


class ReviewFetcher:
    """Collects reviews left by one user across all PRs of a repository."""

    def __init__(self, repo: str, username: str, api_client: GitHubAPIClient,
                 max_workers: Optional[int] = None):
        """Initialize the fetcher.

        Args:
            repo: Repository in format 'owner/name'
            username: GitHub login whose reviews are collected
            api_client: Client used for all requests
            max_workers: Concurrency cap for review requests (None = one per PR)
        """
        self.repo = repo
        self.username = username
        self.api_client = api_client
        self.max_workers = max_workers

    def get_pull_request_ids(self) -> List[int]:
        """Return the numbers of all PRs (open, closed and merged).

        Only the first page of results is requested.
        """
        pulls = self.api_client.get_json(
            f"repos/{self.repo}/pulls",
            params={'state': 'all', 'per_page': PER_PAGE}
        )
        ids = [pr['number'] for pr in pulls]
        logging.info(f"Found {len(ids)} pull requests in {self.repo}")
        return ids

    def get_pull_request_reviews(self, pr_number: int) -> List[ReviewRecord]:
        """Return every review on a single PR."""
        reviews = self.api_client.get_json(
            f"repos/{self.repo}/pulls/{pr_number}/reviews",
            params={'per_page': PER_PAGE}
        )
        records = []
        for review in reviews:
            user = review.get('user') or {}
            records.append(ReviewRecord(
                pull_request_id=pr_number,
                reviewer=user.get('login', ''),
                state=review.get('state', ''),
                submitted_at=review.get('submitted_at')
            ))
        return records

    def get_reviews(self) -> List[ReviewRecord]:
        """Fetch all reviews by `username`, requesting every PR concurrently.

        Raises:
            NetworkError: If the PR list or any review list cannot be fetched
        """
        pr_ids = self.get_pull_request_ids()
        if not pr_ids:
            return []

        workers = self.max_workers or len(pr_ids)
        results: Dict[int, List[ReviewRecord]] = {}

        with ThreadPoolExecutor(max_workers=workers) as executor:
            future_to_pr = {
                executor.submit(self.get_pull_request_reviews, pr_id): pr_id
                for pr_id in pr_ids
            }

            for future in as_completed(future_to_pr):
                pr_id = future_to_pr[future]
                try:
                    results[pr_id] = future.result()
                except Exception:
                    logging.error(f"Error fetching reviews for PR #{pr_id}")
                    for pending in future_to_pr:
                        pending.cancel()
                    raise

        # Flatten in PR list order so output does not depend on completion order
        reviews = [
            review
            for pr_id in pr_ids
            for review in results[pr_id]
            if review.reviewer and review.reviewer == self.username
        ]
        logging.info(f"Found {len(reviews)} reviews by '{self.username}' in {self.repo}")
        return reviews


def group_reviews_by_state(reviews: List[ReviewRecord]) -> Dict[str, int]:
    """Count reviews per state, in order of first appearance.

    States that never occur are absent from the result.
    """
    counts: Dict[str, int] = {}
    for review in reviews:
        counts[review.state] = counts.get(review.state, 0) + 1
    return counts
