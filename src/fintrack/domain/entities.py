"""Domain model entities for fintrack.

These are pure data classes representing business concepts, independent of
database schema. The summary entity is derived and never persisted.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from fintrack.domain.errors import ValidationError, unsupported_transaction_type

# Storage column is NUMERIC(12, 2): 10 integer digits, 2 fractional digits
AMOUNT_PRECISION = 12
AMOUNT_SCALE = 2


class TransactionType(str, Enum):
    """Direction of a transaction; the amount itself is always non-negative."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"

    @classmethod
    def from_str(cls, value: str) -> "TransactionType":
        """Coerce arbitrary casing into a valid transaction type."""
        try:
            return cls(value.strip().upper())
        except (ValueError, AttributeError) as error:
            raise ValidationError(unsupported_transaction_type(value)) from error


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: int
    date: date
    amount: Decimal
    type: TransactionType
    description: Optional[str] = None
    category: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def signed_amount(self) -> Decimal:
        """Amount with the sign implied by the transaction type."""
        if self.type == TransactionType.EXPENSE:
            return -self.amount
        return self.amount


@dataclass(frozen=True)
class DashboardSummary:
    """Income, expense and balance totals over a set of transactions."""

    total_income: Decimal
    total_expense: Decimal
    balance: Decimal

    def as_dict(self) -> dict[str, str]:
        """Export with wire-format keys and exact decimal strings."""
        return {
            "totalIncome": str(self.total_income),
            "totalExpense": str(self.total_expense),
            "balance": str(self.balance),
        }
