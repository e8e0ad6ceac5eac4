"""Best-effort extraction of line counts from `git show --stat` output.

This is a scrape, not a parser: the first "<n> insertion(s)" and
"<n> deletion(s)" substrings win, and anything that does not match counts
as zero. It never raises.
"""

import re

from .models import ChangeStat

INSERTIONS_PATTERN = re.compile(r'([0-9]+) insertions?')
DELETIONS_PATTERN = re.compile(r'([0-9]+) deletions?')


def _first_count(pattern: re.Pattern, text: str) -> int:
    match = pattern.search(text)
    return int(match.group(1)) if match else 0


def parse_diff_stat(text: str) -> ChangeStat:
    """Extract insertion and deletion counts from diff-stat text.

    Args:
        text: Raw diff-stat output for a single commit

    Returns:
        ChangeStat with zero for any count that is not present
    """
    if not isinstance(text, str):
        return ChangeStat()
    return ChangeStat(
        insertions=_first_count(INSERTIONS_PATTERN, text),
        deletions=_first_count(DELETIONS_PATTERN, text)
    )
