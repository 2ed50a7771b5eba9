"""Exceptions raised while reading and parsing Wise statements."""

from enum import Enum
from typing import Optional


class NotAWiseReason(str, Enum):
    """Why a text was rejected as a Wise statement."""
    NO_CURRENCY = "no_currency"
    NO_DATE_RANGE = "no_date_range"
    NO_TRANSACTION_TABLE = "no_transaction_table"


_REASON_MESSAGES = {
    NotAWiseReason.NO_CURRENCY: 'could not find currency line (e.g. "EUR statement")',
    NotAWiseReason.NO_DATE_RANGE: "could not find date range",
    NotAWiseReason.NO_TRANSACTION_TABLE: "could not find transaction table header",
}


class StatementParseError(Exception):
    """Base class for every statement import failure."""
    error_code = "STATEMENT_PARSE_ERROR"
    user_message = "The statement could not be read."

    def __init__(self, message: str, raw: str = ""):
        self.message = message
        self.raw = raw
        super().__init__(self.message)


class InvalidDate(StatementParseError):
    """A date-shaped field did not match "D Month YYYY"."""
    error_code = "INVALID_DATE"
    user_message = "The statement contains a date in an unexpected format."

    def __init__(self, raw: str):
        super().__init__(f'Invalid Wise date format: "{raw}"', raw)


class InvalidDateRange(StatementParseError):
    """The statement period line did not match "<date> [..] - <date> [..]"."""
    error_code = "INVALID_DATE_RANGE"
    user_message = "The statement period could not be read."

    def __init__(self, raw: str):
        super().__init__(f'Invalid Wise date range format: "{raw}"', raw)


class NotAWiseStatement(StatementParseError):
    """One of the structural anchors of a statement is missing."""
    error_code = "NOT_A_WISE_STATEMENT"
    user_message = "This does not look like a Wise account statement."

    def __init__(self, reason: NotAWiseReason, raw: str = ""):
        self.reason = reason
        super().__init__(f"Not a valid Wise statement: {_REASON_MESSAGES[reason]}", raw)


class NoTransactionsFound(StatementParseError):
    """The transaction table was found but yielded no records."""
    error_code = "NO_TRANSACTIONS_FOUND"
    user_message = "No transactions were found in this statement."

    def __init__(self, skipped: int = 0):
        self.skipped = skipped
        message = "No transactions found in Wise statement"
        if skipped:
            message += f" ({skipped} malformed entries skipped)"
        super().__init__(message)


class StatementFileError(StatementParseError):
    """The statement file could not be opened or has no text."""
    error_code = "STATEMENT_FILE_ERROR"
    user_message = "The uploaded file could not be read."

    def __init__(self, message: str, file_name: Optional[str] = None):
        self.file_name = file_name
        super().__init__(message, file_name or "")
