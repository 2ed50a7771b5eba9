"""Pydantic models for parsed Wise statements."""

from pydantic import BaseModel, Field, model_validator
from typing import Optional, Tuple


class Transaction(BaseModel):
    """One statement entry, mapped 1:1 to a draft invoice downstream."""
    description: str
    date: str = Field(..., description="ISO calendar date, YYYY-MM-DD")
    incoming: Optional[float] = None
    outgoing: Optional[float] = None
    amount: float = Field(..., description="Absolute value of the entry")
    reference: str
    currency: str = Field(..., min_length=3, max_length=3)

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "description": "Card transaction of 29.43 USD issued by Backblaze Inc BACKBLAZE.COM",
                "date": "2025-11-27",
                "incoming": None,
                "outgoing": 25.51,
                "amount": 25.51,
                "reference": "CARD-3166196743",
                "currency": "EUR"
            }
        }

    @model_validator(mode="after")
    def check_direction(self):
        if (self.incoming is None) == (self.outgoing is None):
            raise ValueError("exactly one of incoming/outgoing must be set")
        value = self.incoming if self.incoming is not None else self.outgoing
        if value <= 0:
            raise ValueError("incoming/outgoing must be positive")
        if self.amount != value:
            raise ValueError("amount must equal incoming or outgoing")
        return self

    @property
    def direction(self) -> str:
        return "incoming" if self.incoming is not None else "outgoing"


class DateRange(BaseModel):
    """Statement period; both ends are ISO calendar dates."""
    from_: str = Field(..., alias="from")
    to: str

    class Config:
        frozen = True
        populate_by_name = True


class ParseResult(BaseModel):
    """Everything recovered from one statement text."""
    currency: str
    date_range: DateRange = Field(..., alias="dateRange")
    transactions: Tuple[Transaction, ...]
    skipped: int = Field(0, ge=0, description="Anchor lines dropped as malformed")

    class Config:
        frozen = True
        populate_by_name = True

    def chronological(self) -> Tuple[Transaction, ...]:
        """Transactions oldest first; same-day entries keep statement order."""
        return tuple(sorted(self.transactions, key=lambda tx: tx.date))
