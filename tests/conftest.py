"""Shared fixtures: real throwaway git repositories and fake data sources."""

import os
import shutil
import subprocess
from datetime import datetime, timezone

import pytest

from git_report_card.git_client import GitRepository
from git_report_card.models import Commit


requires_git = pytest.mark.skipif(shutil.which('git') is None, reason='git binary not available')


def _git(repo_dir, *args, author='alice', date='2024-01-01T12:00:00+00:00'):
    env = dict(os.environ)
    env.update({
        'GIT_AUTHOR_NAME': author,
        'GIT_AUTHOR_EMAIL': f'{author}@example.com',
        'GIT_COMMITTER_NAME': author,
        'GIT_COMMITTER_EMAIL': f'{author}@example.com',
        'GIT_AUTHOR_DATE': date,
        'GIT_COMMITTER_DATE': date,
    })
    subprocess.run(['git', *args], cwd=str(repo_dir), env=env, check=True,
                   capture_output=True, text=True)


@pytest.fixture
def git_repo(tmp_path, monkeypatch):
    """A small repository with commits by alice and bob."""
    monkeypatch.setenv('GIT_CEILING_DIRECTORIES', str(tmp_path))
    repo_dir = tmp_path / 'repo'
    repo_dir.mkdir()
    _git(repo_dir, 'init', '-q')

    (repo_dir / 'a.txt').write_text(''.join(f'line {i}\n' for i in range(10)))
    _git(repo_dir, 'add', 'a.txt')
    _git(repo_dir, 'commit', '-q', '-m', 'Add a.txt', date='2024-01-01T10:00:00+00:00')

    (repo_dir / 'b.txt').write_text('bob\n')
    _git(repo_dir, 'add', 'b.txt')
    _git(repo_dir, 'commit', '-q', '-m', 'Add b.txt', author='bob', date='2024-01-01T11:00:00+00:00')

    (repo_dir / 'a.txt').write_text(''.join(f'line {i}\n' for i in range(8)) + 'new\n')
    _git(repo_dir, 'commit', '-q', '-am', 'Trim a.txt', date='2024-01-01T12:03:00+00:00')

    return repo_dir


def make_commit(hash, message, date=None):
    return Commit(
        hash=hash,
        author='alice',
        date=date or datetime(2024, 1, 1, tzinfo=timezone.utc),
        message=message
    )


class FakeRepository(GitRepository):
    """GitRepository serving canned log and diff-stat output."""

    def __init__(self, commits, stats, failing=()):
        super().__init__('fake')
        self.commits = commits
        self.stats = stats
        self.failing = set(failing)
        self.shown = []

    def log_by_author(self, author):
        return list(self.commits)

    def show_stat(self, commit_hash):
        self.shown.append(commit_hash)
        if commit_hash in self.failing:
            from git_report_card.exceptions import RepositoryAccessError
            raise RepositoryAccessError(f'bad object {commit_hash}')
        return self.stats.get(commit_hash, '')


@pytest.fixture
def alice_repo():
    """Three commits by alice: one merge, two regular."""
    commits = [
        make_commit('c3', "Merge branch 'feature'", datetime(2024, 1, 3, 12, 0, tzinfo=timezone.utc)),
        make_commit('c2', 'Fix bug', datetime(2024, 1, 2, 12, 0, tzinfo=timezone.utc)),
        make_commit('c1', 'Add feature', datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)),
    ]
    stats = {
        'c3': ' 4 files changed, 40 insertions(+), 30 deletions(-)\n',
        'c2': ' 2 files changed, 10 insertions(+), 2 deletions(-)\n',
        'c1': ' 1 file changed, 5 insertions(+)\n',
    }
    return FakeRepository(commits, stats)
