"""Read commit history and per-commit diff stats from a local git repository."""

import logging
import os
import subprocess
from datetime import datetime
from typing import List

from .exceptions import RepositoryAccessError
from .models import Commit

FIELD_SEP = '\x1f'
RECORD_SEP = '\x1e'
LOG_FORMAT = FIELD_SEP.join(['%H', '%an', '%aI', '%s']) + RECORD_SEP

# Untranslated output so the diff-stat summary keeps its English wording
GIT_ENV_OVERRIDES = {'LC_ALL': 'C', 'LANGUAGE': 'C'}


class GitRepository:
    """Runs git queries against a single repository directory."""

    def __init__(self, directory: str = '.'):
        self.directory = directory

    def run_git(self, args: List[str]) -> str:
        """Run a git command in the repository and return its stdout.

        Raises:
            RepositoryAccessError: If git is missing, the directory is invalid
                or the command exits non-zero
        """
        logging.debug(f"Running git {' '.join(args)} in {self.directory}")
        try:
            proc = subprocess.run(
                ['git', *args],
                cwd=self.directory,
                env={**os.environ, **GIT_ENV_OVERRIDES},
                capture_output=True,
                # Old commits may carry non-UTF-8 bytes in names and messages
                encoding='utf-8',
                errors='replace',
            )
        except FileNotFoundError as e:
            # Raised both for a missing git binary and a missing cwd
            raise RepositoryAccessError(
                f"Cannot run git in '{self.directory}' ({e.strerror or e})",
                directory=self.directory
            ) from e
        except (NotADirectoryError, PermissionError) as e:
            raise RepositoryAccessError(
                f"Cannot access repository '{self.directory}' ({e.strerror or e})",
                directory=self.directory
            ) from e

        if proc.returncode != 0:
            raise RepositoryAccessError(
                f"git {args[0]} failed in '{self.directory}'",
                directory=self.directory,
                stderr=proc.stderr
            )
        return proc.stdout

    def log_by_author(self, author: str) -> List[Commit]:
        """Fetch all commits whose author matches the given filter.

        Args:
            author: Author filter passed to `git log --author`

        Returns:
            Commits in git log order (newest first)
        """
        out = self.run_git(['log', f'--author={author}', f'--format={LOG_FORMAT}'])
        commits = []
        for record in out.split(RECORD_SEP):
            record = record.strip('\n')
            if not record:
                continue
            parts = record.split(FIELD_SEP, 3)
            if len(parts) != 4:
                logging.warning(f"Skipping malformed git log record: {record!r}")
                continue
            commit_hash, author_name, iso_date, message = parts
            commits.append(Commit(
                hash=commit_hash,
                author=author_name,
                date=datetime.fromisoformat(iso_date),
                message=message
            ))

        logging.info(f"Found {len(commits)} commits by '{author}' in {self.directory}")
        return commits

    def show_stat(self, commit_hash: str) -> str:
        """Return the `git show --stat` summary for a single commit."""
        return self.run_git(['show', '--stat', '--format=', commit_hash])
