"""Exceptions raised while building a report."""

from typing import Optional


class GitReportCardError(Exception):
    """Base exception for errors that abort a report run."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RepositoryAccessError(GitReportCardError):
    """Raised when the git repository cannot be queried.

    Covers a missing git binary, a path that is not a repository and any
    git invocation that exits non-zero.
    """

    def __init__(self, message: str, directory: str = None, stderr: str = ''):
        if stderr:
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)
        self.directory = directory
        self.stderr = stderr


class NetworkError(GitReportCardError):
    """Raised when a GitHub API request fails or returns a non-2xx status."""

    def __init__(self, message: str, url: str = None, status_code: Optional[int] = None):
        if status_code is not None:
            message = f"{message} (HTTP {status_code})"
        super().__init__(message)
        self.url = url
        self.status_code = status_code
