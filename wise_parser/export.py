"""Summaries and tabular exports of parsed statements."""

from pathlib import Path
from typing import Any, Dict, Optional

import pandas as pd
from loguru import logger

from .models import ParseResult

COLUMNS = ["Date", "Description", "Reference", "Incoming", "Outgoing", "Amount", "Currency"]


def to_summary(result: ParseResult, file_name: Optional[str] = None) -> Dict[str, Any]:
    """JSON-ready overview of a parsed statement."""
    return {
        "fileName": file_name,
        "currency": result.currency,
        "dateRange": result.date_range.model_dump(by_alias=True),
        "transactionCount": len(result.transactions),
        "skipped": result.skipped,
        "transactions": [
            {
                "date": tx.date,
                "description": tx.description,
                "amount": tx.amount,
                "currency": tx.currency,
                "reference": tx.reference,
                "type": tx.direction,
            }
            for tx in result.transactions
        ],
    }


def to_dataframe(result: ParseResult) -> pd.DataFrame:
    """
    Convert transactions to a DataFrame in statement order.

    The unset side of Incoming/Outgoing is NaN.
    """
    rows = [
        {
            "Date": tx.date,
            "Description": tx.description,
            "Reference": tx.reference,
            "Incoming": tx.incoming,
            "Outgoing": tx.outgoing,
            "Amount": tx.amount,
            "Currency": tx.currency,
        }
        for tx in result.transactions
    ]
    df = pd.DataFrame(rows, columns=COLUMNS)
    df[["Incoming", "Outgoing"]] = df[["Incoming", "Outgoing"]].astype(float)
    return df


def write_csv(result: ParseResult, output_path: str) -> Path:
    """Write transactions to a CSV file, creating parent directories as needed."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    to_dataframe(result).to_csv(output_path, index=False)
    logger.info(f"Wrote {len(result.transactions)} transactions to {output_path}")
    return output_path
