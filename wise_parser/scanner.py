"""Locate the structural anchors of a Wise statement text."""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from loguru import logger

from .dates import parse_date_range
from .errors import NotAWiseReason, NotAWiseStatement, StatementParseError
from .models import DateRange

CURRENCY_LINE_RE = re.compile(r"^[A-Z]{3}\s+statement$")
FOOTER_PREFIX = "Wise is the trading name"

# Lines after the currency banner that may hold the statement period.
DATE_RANGE_LOOKAHEAD = 4


@dataclass(frozen=True)
class StatementLayout:
    """Anchors found in a statement, plus the table body lines."""
    currency: str
    date_range: DateRange
    header_index: int
    footer_index: int
    table_lines: List[str]


def find_currency(lines: List[str]) -> Tuple[int, str]:
    for index, line in enumerate(lines):
        stripped = line.strip()
        if CURRENCY_LINE_RE.match(stripped):
            return index, stripped.split()[0]
    raise NotAWiseStatement(NotAWiseReason.NO_CURRENCY)


def find_date_range(lines: List[str], banner_index: int) -> DateRange:
    window = lines[banner_index + 1:banner_index + 1 + DATE_RANGE_LOOKAHEAD]
    for line in window:
        if not line.strip():
            continue
        try:
            return parse_date_range(line)
        except StatementParseError:
            continue
    raise NotAWiseStatement(NotAWiseReason.NO_DATE_RANGE)


def find_table_header(lines: List[str]) -> int:
    # Containment, not word match: the run-on layout renders the header as
    # "DescriptionIncomingOutgoingAmount".
    for index, line in enumerate(lines):
        if line.strip().startswith("Description") and "Amount" in line:
            return index
    raise NotAWiseStatement(NotAWiseReason.NO_TRANSACTION_TABLE)


def find_footer(lines: List[str], start: int) -> Optional[int]:
    for index in range(start, len(lines)):
        if lines[index].strip().startswith(FOOTER_PREFIX):
            return index
    return None


def scan_statement(text: str) -> StatementLayout:
    """
    Find currency, period and transaction table bounds.

    Args:
        text: Raw text extracted from the statement PDF

    Returns:
        StatementLayout with the lines strictly between header and footer

    Raises:
        NotAWiseStatement: If the banner, period or table header is missing
    """
    lines = text.splitlines()

    banner_index, currency = find_currency(lines)
    date_range = find_date_range(lines, banner_index)
    header_index = find_table_header(lines)

    footer_index = find_footer(lines, header_index + 1)
    if footer_index is None:
        logger.debug("No statement footer found, table runs to end of text")
        footer_index = len(lines)

    logger.debug(
        f"Statement layout: currency={currency}, header at line {header_index}, "
        f"footer at line {footer_index}"
    )

    return StatementLayout(
        currency=currency,
        date_range=date_range,
        header_index=header_index,
        footer_index=footer_index,
        table_lines=lines[header_index + 1:footer_index],
    )
