"""Wise statement parser.

Single entry point for turning the text of a Wise balance statement into
structured transactions:

    def parse(raw_text: str) -> ParseResult:
        \"\"\"Parse statement text or raise a StatementParseError.\"\"\"
"""

from loguru import logger

from .errors import NoTransactionsFound
from .models import ParseResult
from .scanner import scan_statement
from .segmenter import TransactionSegmenter


def parse(raw_text: str) -> ParseResult:
    """
    Parse the text extracted from a Wise statement PDF.

    Args:
        raw_text: Full statement text, one physical line per line

    Returns:
        ParseResult with currency, statement period and transactions in the
        order they appear in the statement

    Raises:
        NotAWiseStatement: If currency banner, period or table header is missing
        NoTransactionsFound: If the table holds no usable transaction records
    """
    layout = scan_statement(raw_text)

    segmentation = TransactionSegmenter(layout.table_lines, layout.currency).segment()
    if not segmentation.transactions:
        raise NoTransactionsFound(skipped=len(segmentation.skipped))

    result = ParseResult(
        currency=layout.currency,
        date_range=layout.date_range,
        transactions=tuple(segmentation.transactions),
        skipped=len(segmentation.skipped),
    )

    logger.info(
        f"Parsed {layout.currency} statement {result.date_range.from_} - {result.date_range.to}: "
        f"{len(result.transactions)} transactions, {result.skipped} skipped"
    )
    return result
