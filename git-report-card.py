#!/usr/bin/env python3
"""
Git Report Card
Summarizes an author's commit activity and optional GitHub review stats.
"""

import sys

from git_report_card.cli import main


if __name__ == "__main__":
    sys.exit(main())
