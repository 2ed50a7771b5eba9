"""Split the transaction table into individual records.

Every record has an anchor line carrying the "Transaction:" marker::

    Card transaction of 88.49 EUR issued by Claude.ai Subscription ANTHROPIC.
    COM
    26 November 2025 Card ending in 9924 ... Transaction: CARD-3162375092
    -88.49 722.66

The description sits above the anchor (possibly wrapped over several lines)
and the amount/balance row directly below it. Each anchor is run through a
small state machine:

    AT_ANCHOR -> SEEKING_DESCRIPTION_START -> SEEKING_AMOUNTS -> EMITTED
        \\                                          \\
         -> SKIPPED (no leading date)               -> SKIPPED (no amounts row)
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from loguru import logger

from .amounts import extract_amounts, is_amounts_line
from .dates import leading_date
from .models import Transaction

ANCHOR_MARKER = "Transaction:"

# The run-on layout glues "Reference:" straight onto the token.
REFERENCE_RE = re.compile(r"Transaction:\s*(\S+?)(?=Reference:|\s|$)")


class SegmenterState(str, Enum):
    """States an anchor passes through while its record is extracted."""
    AT_ANCHOR = "at_anchor"
    SEEKING_DESCRIPTION_START = "seeking_description_start"
    SEEKING_AMOUNTS = "seeking_amounts"
    EMITTED = "emitted"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class SkippedAnchor:
    """An anchor line that did not yield a transaction."""
    line_index: int
    line: str
    reason: str


@dataclass
class AnchorRecord:
    """Working state for one anchor line."""
    anchor_index: int
    anchor_line: str
    state: SegmenterState = SegmenterState.AT_ANCHOR
    date: Optional[str] = None
    reference: str = ""
    description_lines: List[str] = field(default_factory=list)
    amount: Optional[float] = None
    skip_reason: Optional[str] = None

    def skip(self, reason: str):
        self.state = SegmenterState.SKIPPED
        self.skip_reason = reason


@dataclass
class SegmentationResult:
    transactions: List[Transaction]
    skipped: List[SkippedAnchor]


def find_anchor_indices(lines: List[str]) -> List[int]:
    return [index for index, line in enumerate(lines) if ANCHOR_MARKER in line]


def extract_reference(anchor_line: str) -> str:
    match = REFERENCE_RE.search(anchor_line)
    return match.group(1) if match else ""


class TransactionSegmenter:
    """Extract transactions from the lines between table header and footer."""

    def __init__(self, lines: List[str], currency: str):
        self.lines = lines
        self.currency = currency

    def segment(self) -> SegmentationResult:
        """
        Run every anchor line through the state machine.

        Returns:
            Transactions in order of appearance plus the skipped anchors
        """
        transactions: List[Transaction] = []
        skipped: List[SkippedAnchor] = []

        anchors = find_anchor_indices(self.lines)
        logger.debug(f"Found {len(anchors)} anchor lines in transaction table")

        for anchor_index in anchors:
            record = self.run(anchor_index)

            if record.state is SegmenterState.SKIPPED:
                logger.warning(
                    f"Skipping anchor at table line {anchor_index} "
                    f"({record.skip_reason}): {record.anchor_line!r}"
                )
                skipped.append(SkippedAnchor(anchor_index, record.anchor_line, record.skip_reason))
                continue

            transactions.append(self.to_transaction(record))

        return SegmentationResult(transactions=transactions, skipped=skipped)

    def run(self, anchor_index: int) -> AnchorRecord:
        """Drive a single anchor until it is emitted or skipped."""
        record = AnchorRecord(anchor_index, self.lines[anchor_index].strip())

        while record.state not in (SegmenterState.EMITTED, SegmenterState.SKIPPED):
            if record.state is SegmenterState.AT_ANCHOR:
                self.read_anchor(record)
            elif record.state is SegmenterState.SEEKING_DESCRIPTION_START:
                self.collect_description(record)
            elif record.state is SegmenterState.SEEKING_AMOUNTS:
                self.read_amounts(record)

        return record

    def read_anchor(self, record: AnchorRecord):
        record.date = leading_date(record.anchor_line)
        if record.date is None:
            record.skip("no leading date")
            return

        record.reference = extract_reference(record.anchor_line)
        record.state = SegmenterState.SEEKING_DESCRIPTION_START

    def collect_description(self, record: AnchorRecord):
        # The previous record's amounts row, its anchor line, or the table
        # start bounds the description from above.
        for index in range(record.anchor_index - 1, -1, -1):
            line = self.lines[index].strip()
            if not line:
                continue
            if is_amounts_line(line):
                break
            if ANCHOR_MARKER in line:
                # First line after a skipped anchor sits in its amounts slot.
                if len(record.description_lines) > 1:
                    record.description_lines.pop(0)
                break
            record.description_lines.insert(0, line)

        record.state = SegmenterState.SEEKING_AMOUNTS

    def read_amounts(self, record: AnchorRecord):
        for index in range(record.anchor_index + 1, len(self.lines)):
            line = self.lines[index].strip()
            if not line:
                continue
            if not is_amounts_line(line):
                break

            # Second number is the running balance, not kept.
            amount = extract_amounts(line)[0]
            if amount == 0:
                record.skip("zero amount")
                return

            record.amount = amount
            record.state = SegmenterState.EMITTED
            return

        record.skip("no amounts line after anchor")

    def to_transaction(self, record: AnchorRecord) -> Transaction:
        amount = abs(record.amount)
        return Transaction(
            description=" ".join(record.description_lines),
            date=record.date,
            incoming=amount if record.amount > 0 else None,
            outgoing=amount if record.amount < 0 else None,
            amount=amount,
            reference=record.reference,
            currency=self.currency,
        )
