"""Data models for contributor report generation."""

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class Commit:
    """A single commit as read from the repository log."""
    hash: str
    author: str
    date: datetime
    message: str  # Subject line only


@dataclass(frozen=True)
class ChangeStat:
    """Inserted/deleted line counts for one or more commits."""
    insertions: int = 0
    deletions: int = 0

    def __add__(self, other: 'ChangeStat') -> 'ChangeStat':
        return ChangeStat(self.insertions + other.insertions,
                          self.deletions + other.deletions)


@dataclass(frozen=True)
class ReviewRecord:
    """A review left on a pull request."""
    pull_request_id: int
    reviewer: str
    state: str  # APPROVED, CHANGES_REQUESTED, COMMENTED, DISMISSED, PENDING
    submitted_at: Optional[str] = None


@dataclass(frozen=True)
class ReportSummary:
    """Everything the renderer needs for one report."""
    author_name: str
    total_commits: int
    duration_span: str
    total_insertions: int = 0
    total_deletions: int = 0
    # None when review stats were not requested
    total_reviews: Optional[int] = None
    review_counts_by_state: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self):
        # Read-only copy so the finished summary cannot be altered
        object.__setattr__(self, 'review_counts_by_state',
                           MappingProxyType(dict(self.review_counts_by_state)))

    @property
    def has_review_stats(self) -> bool:
        return self.total_reviews is not None
