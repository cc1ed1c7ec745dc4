"""Canonical issue filenames.

Issue files are named after the date range they cover:

    weeklies/20251001-20251007issue-report.html
"""

import re
from datetime import date, datetime

ISSUE_SUFFIX = "issue-report.html"

FILENAME_PATTERN = re.compile(
    r"^(?P<start>\d{8})-(?P<end>\d{8})" + re.escape(ISSUE_SUFFIX) + r"$"
)

COMPACT_DATE_FORMAT = "%Y%m%d"


def date_span(start: date, end: date) -> str:
    """Format a date range as the compact token used in file names.

    Examples:
        >>> date_span(date(2025, 10, 1), date(2025, 10, 7))
        '20251001-20251007'
    """
    return f"{start.strftime(COMPACT_DATE_FORMAT)}-{end.strftime(COMPACT_DATE_FORMAT)}"


def generate_filename(start: date, end: date, weekly_dir: str = "weeklies") -> str:
    """Build the canonical relative path for an issue.

    Args:
        start: First day covered by the issue
        end: Last day covered by the issue
        weekly_dir: Directory holding issue files

    Returns:
        Relative path such as "weeklies/20251001-20251007issue-report.html"
    """
    return f"{weekly_dir}/{date_span(start, end)}{ISSUE_SUFFIX}"


def parse_filename(name: str) -> tuple[date, date] | None:
    """Recover the date range from an issue file name.

    Only bare file names are accepted, not paths.

    Args:
        name: File name such as "20251001-20251007issue-report.html"

    Returns:
        (start, end) dates, or None if the name does not follow the pattern
    """
    match = FILENAME_PATTERN.match(name)
    if not match:
        return None
    try:
        start = datetime.strptime(match.group("start"), COMPACT_DATE_FORMAT).date()
        end = datetime.strptime(match.group("end"), COMPACT_DATE_FORMAT).date()
    except ValueError:
        return None
    return start, end
