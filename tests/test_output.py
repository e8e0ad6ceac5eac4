"""
Unit tests for OutputFormatter
"""

from git_report_card.models import ReportSummary
from git_report_card.output import GREEN, RED, RESET, OutputFormatter


def make_summary(**overrides):
    fields = dict(
        author_name='alice',
        total_commits=3,
        duration_span='2d',
        total_insertions=15,
        total_deletions=2,
    )
    fields.update(overrides)
    return ReportSummary(**fields)


class TestOutputFormatter:
    """Test cases for OutputFormatter."""

    def test_base_lines_in_order(self):
        lines = OutputFormatter(color=False).format_lines(make_summary())
        assert lines == [
            'Name: alice',
            'Total commits: 3',
            'Duration: 2d',
            'Additions: 15',
            'Deletions: 2',
        ]

    def test_colored_additions_and_deletions(self):
        lines = OutputFormatter(color=True).format_lines(make_summary())
        assert lines[3] == f'Additions: {GREEN}15{RESET}'
        assert lines[4] == f'Deletions: {RED}2{RESET}'
        assert lines[0] == 'Name: alice'

    def test_review_lines(self):
        summary = make_summary(total_reviews=3,
                               review_counts_by_state={'APPROVED': 2, 'CHANGES_REQUESTED': 1})
        lines = OutputFormatter(color=False).format_lines(summary)
        assert lines[5:] == [
            'Reviews: 3',
            'Reviews (APPROVED): 2',
            'Reviews (CHANGES_REQUESTED): 1',
        ]

    def test_zero_reviews_prints_only_total(self):
        lines = OutputFormatter(color=False).format_lines(make_summary(total_reviews=0))
        assert lines[-1] == 'Reviews: 0'
        assert len(lines) == 6

    def test_print_summary(self, capsys):
        OutputFormatter(color=False).print_summary(make_summary())
        out = capsys.readouterr().out
        assert out.splitlines()[1] == 'Total commits: 3'
