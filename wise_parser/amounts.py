"""Amount parsing for the numeric rows of a statement."""

import re
from typing import List

# One decimal number: optional minus, comma-grouped digits, two decimals.
NUMBER_PATTERN = r"-?[0-9][0-9,]*\.[0-9]{2}"

NUMBER_RE = re.compile(NUMBER_PATTERN)

# Amount and optional running balance. The run-on layout glues the two
# together ("-32.001,925.99"), so the separator may be empty.
AMOUNTS_LINE_RE = re.compile(rf"^{NUMBER_PATTERN}(?:\s*{NUMBER_PATTERN})?$")


def parse_amount(raw: str) -> float:
    """
    Parse a number string that may have commas and a leading minus sign.

    "-1,000.00" -> -1000.0, "6,788.00" -> 6788.0, "0.59" -> 0.59
    """
    return float(raw.strip().replace(",", ""))


def is_amounts_line(line: str) -> bool:
    """Whether ``line`` is an amount/balance row."""
    return bool(AMOUNTS_LINE_RE.match(line.strip()))


def extract_amounts(line: str) -> List[float]:
    """Return every decimal number on an amounts line, in order."""
    return [parse_amount(token) for token in NUMBER_RE.findall(line)]
