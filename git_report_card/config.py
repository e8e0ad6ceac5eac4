"""Command-line configuration for the report generator."""

import argparse
import sys
from dataclasses import dataclass
from typing import List, Optional

USAGE_EXAMPLE = "git-report-card <author name> [--dir PATH] [--github --github-repo OWNER/NAME --token TOKEN]"


@dataclass(frozen=True)
class ReportConfig:
    """Settings for one report run, built once from CLI flags."""
    author: str
    directory: str = '.'
    github: bool = False
    github_user: Optional[str] = None
    github_repo: Optional[str] = None
    token: Optional[str] = None
    max_workers: Optional[int] = None  # None = one worker per request
    color: bool = True

    @property
    def review_user(self) -> Optional[str]:
        """Username reviews are matched against (falls back to the author)."""
        return self.github_user or self.author

    @property
    def wants_review_stats(self) -> bool:
        return bool(self.github and self.github_repo and self.review_user and self.token)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='git-report-card',
        description="Summarize an author's commit activity and, optionally, their GitHub reviews.",
        epilog=f"Example: {USAGE_EXAMPLE}"
    )
    parser.add_argument('author', help='Author name used to filter the git log')
    parser.add_argument('--dir', '-d', dest='directory', default='.',
                        help='Path to git directory (default: current directory)')
    parser.add_argument('--github', '-gh', action='store_true', default=False,
                        help='Print GitHub review stats')
    parser.add_argument('--github-user', '-ghu', dest='github_user', default=None,
                        help='GitHub username (default: author name)')
    parser.add_argument('--github-repo', '-ghr', dest='github_repo', default=None,
                        help='GitHub repo to get stats from, as owner/name')
    parser.add_argument('--token', '-t', default=None, help='GitHub API token')
    parser.add_argument('--jobs', '-j', dest='max_workers', type=int, default=None,
                        help='Maximum concurrent git/API requests (default: unbounded)')
    parser.add_argument('--no-color', dest='color', action='store_false', default=None,
                        help='Disable coloured output')
    return parser


def parse_config(argv: List[str] = None) -> ReportConfig:
    """Parse CLI arguments into a ReportConfig.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        The run configuration
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.max_workers is not None and args.max_workers < 1:
        parser.error('--jobs must be at least 1')

    color = args.color
    if color is None:
        color = sys.stdout.isatty()

    return ReportConfig(
        author=args.author,
        directory=args.directory,
        github=args.github,
        github_user=args.github_user,
        github_repo=args.github_repo,
        token=args.token,
        max_workers=args.max_workers,
        color=color
    )
