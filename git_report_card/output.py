"""Output formatting for the contributor report."""

from typing import List

from .models import ReportSummary


# ANSI color codes
GREEN = '\033[92m'
RED = '\033[91m'
RESET = '\033[0m'


class OutputFormatter:
    """Formats and prints a ReportSummary as plain text lines."""

    def __init__(self, color: bool = True):
        """Initialize the output formatter.

        Args:
            color: Whether to highlight additions and deletions with ANSI colors
        """
        self.color = color

    def _paint(self, value, code: str) -> str:
        if not self.color:
            return str(value)
        return f"{code}{value}{RESET}"

    def format_lines(self, summary: ReportSummary) -> List[str]:
        lines = [
            f"Name: {summary.author_name}",
            f"Total commits: {summary.total_commits}",
            f"Duration: {summary.duration_span}",
            f"Additions: {self._paint(summary.total_insertions, GREEN)}",
            f"Deletions: {self._paint(summary.total_deletions, RED)}",
        ]

        if summary.has_review_stats:
            lines.append(f"Reviews: {summary.total_reviews}")
            for state, count in summary.review_counts_by_state.items():
                lines.append(f"Reviews ({state}): {count}")

        return lines

    def print_summary(self, summary: ReportSummary):
        """Print the report to standard output."""
        for line in self.format_lines(summary):
            print(line)
