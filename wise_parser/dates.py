"""Long-form date and statement period parsing."""

import re

from .errors import InvalidDate, InvalidDateRange
from .models import DateRange

MONTHS = {
    "January": "01",
    "February": "02",
    "March": "03",
    "April": "04",
    "May": "05",
    "June": "06",
    "July": "07",
    "August": "08",
    "September": "09",
    "October": "10",
    "November": "11",
    "December": "12",
}

MONTH_PATTERN = "|".join(MONTHS)

# "27 November 2025" with nothing before or after
DATE_RE = re.compile(rf"^([0-9]{{1,2}})\s+({MONTH_PATTERN})\s+([0-9]{{4}})$")

# Leading date run of an anchor line; the text after the year may follow
# without a space in the run-on layout.
LEADING_DATE_RE = re.compile(rf"^([0-9]{{1,2}}\s+(?:{MONTH_PATTERN})\s+[0-9]{{4}})")

DATE_RANGE_RE = re.compile(
    r"^([0-9]{1,2}\s+\w+\s+[0-9]{4})\s*\[[^\]]*\]\s*-\s*([0-9]{1,2}\s+\w+\s+[0-9]{4})\s*\[[^\]]*\]$"
)


def parse_date(raw: str) -> str:
    """
    Convert "27 November 2025" to "2025-11-27".

    Args:
        raw: Day, full English month name and four digit year

    Returns:
        ISO calendar date with zero-padded day

    Raises:
        InvalidDate: If the input does not match the expected format
    """
    match = DATE_RE.match(raw.strip())
    if not match:
        raise InvalidDate(raw)

    day, month, year = match.groups()
    return f"{year}-{MONTHS[month]}-{day.zfill(2)}"


def parse_date_range(raw: str) -> DateRange:
    """
    Parse "1 November 2025 [GMT] - 30 November 2025 [GMT]".

    The bracketed timezone annotations are discarded. A malformed date inside
    an otherwise well-formed range raises InvalidDate unchanged.
    """
    match = DATE_RANGE_RE.match(raw.strip())
    if not match:
        raise InvalidDateRange(raw)

    return DateRange(from_=parse_date(match.group(1)), to=parse_date(match.group(2)))


def leading_date(line: str):
    """Return the ISO date at the start of ``line``, or None."""
    match = LEADING_DATE_RE.match(line.strip())
    if not match:
        return None
    return parse_date(match.group(1))
