"""Wise balance statement import.

Parses the text of a Wise account statement PDF into transactions that can
be turned into draft invoices.
"""

from .errors import (
    InvalidDate,
    InvalidDateRange,
    NoTransactionsFound,
    NotAWiseReason,
    NotAWiseStatement,
    StatementFileError,
    StatementParseError,
)
from .models import DateRange, ParseResult, Transaction
from .parser import parse

__all__ = [
    "parse",
    "DateRange",
    "ParseResult",
    "Transaction",
    "StatementParseError",
    "InvalidDate",
    "InvalidDateRange",
    "NotAWiseReason",
    "NotAWiseStatement",
    "NoTransactionsFound",
    "StatementFileError",
]
