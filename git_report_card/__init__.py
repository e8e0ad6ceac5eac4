"""Git Report Card - summarize a contributor's commits and code reviews."""

from .models import Commit, ChangeStat, ReviewRecord, ReportSummary
from .exceptions import GitReportCardError, RepositoryAccessError, NetworkError
from .config import ReportConfig
from .git_client import GitRepository
from .diff_stat import parse_diff_stat
from .api_client import GitHubAPIClient
from .reviews import ReviewFetcher, group_reviews_by_state
from .report import build_summary
from .output import OutputFormatter

__all__ = [
    'Commit',
    'ChangeStat',
    'ReviewRecord',
    'ReportSummary',
    'GitReportCardError',
    'RepositoryAccessError',
    'NetworkError',
    'ReportConfig',
    'GitRepository',
    'parse_diff_stat',
    'GitHubAPIClient',
    'ReviewFetcher',
    'group_reviews_by_state',
    'build_summary',
    'OutputFormatter',
]
