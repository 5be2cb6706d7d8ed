"""Ledger aggregation: income, expense and balance totals.

The aggregator reads transactions and never mutates them. It does not trust
its input: a record whose type or amount breaks the ledger invariants fails
the whole computation instead of being skipped or counted in either bucket,
since either choice would give a summary that is invisibly wrong.
"""

from decimal import Decimal
from typing import Any, Iterable

from fintrack.domain.entities import DashboardSummary, Transaction, TransactionType
from fintrack.domain.errors import (
    ValidationError,
    inexact_amount,
    malformed_record,
    negative_amount,
    unsupported_transaction_type,
)
from fintrack.logging_utils import get_logger

LOGGER = get_logger(__name__)

ZERO = Decimal("0")


class LedgerAggregator:
    """Compute a DashboardSummary from a sequence of transactions."""

    def summarize(self, transactions: Iterable[Transaction]) -> DashboardSummary:
        """Sum income and expense amounts and compute the balance.

        Args:
            transactions: Transactions to aggregate (may be empty)

        Returns:
            DashboardSummary with exact decimal totals

        Raises:
            ValidationError: If any record has an unknown type or an amount
                that is negative, non-finite or not an exact number
        """
        totals = {TransactionType.INCOME: ZERO, TransactionType.EXPENSE: ZERO}
        count = 0

        for txn in transactions:
            txn_type = self._check_type(txn)
            amount = self._check_amount(txn)
            totals[txn_type] += amount
            count += 1

        total_income = totals[TransactionType.INCOME]
        total_expense = totals[TransactionType.EXPENSE]
        summary = DashboardSummary(
            total_income=total_income,
            total_expense=total_expense,
            balance=total_income - total_expense,
        )
        LOGGER.debug(
            "Summarized %s transactions: income=%s expense=%s balance=%s",
            count,
            summary.total_income,
            summary.total_expense,
            summary.balance,
        )
        return summary

    def _check_type(self, txn: Transaction) -> TransactionType:
        value: Any = getattr(txn, "type", None)
        if isinstance(value, TransactionType):
            return value
        if isinstance(value, str):
            # Exact stored values only; case folding belongs to input parsing
            try:
                return TransactionType(value)
            except ValueError:
                pass
        raise ValidationError(
            malformed_record(
                getattr(txn, "id", None), unsupported_transaction_type(value)
            )
        )

    def _check_amount(self, txn: Transaction) -> Decimal:
        value: Any = getattr(txn, "amount", None)
        if isinstance(value, bool) or not isinstance(value, (Decimal, int)):
            raise ValidationError(
                malformed_record(getattr(txn, "id", None), inexact_amount(value))
            )
        amount = Decimal(value)
        if not amount.is_finite():
            raise ValidationError(
                malformed_record(getattr(txn, "id", None), inexact_amount(value))
            )
        if amount < 0:
            raise ValidationError(
                malformed_record(getattr(txn, "id", None), negative_amount(amount))
            )
        return amount


def summarize(transactions: Iterable[Transaction]) -> DashboardSummary:
    """Summarize transactions with a default LedgerAggregator."""
    return LedgerAggregator().summarize(transactions)
