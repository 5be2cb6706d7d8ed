"""Transaction domain service."""

from typing import Any, Optional
from datetime import date
from decimal import Decimal
from fintrack.database.base import Database
from fintrack.domain.entities import (
    AMOUNT_PRECISION,
    AMOUNT_SCALE,
    Transaction as TransactionEntity,
    TransactionType,
)
from fintrack.domain.errors import (
    NotFoundError,
    ValidationError,
    amount_out_of_range,
    inexact_amount,
    negative_amount,
    transaction_not_found,
    unsupported_transaction_type,
)
from fintrack.logging_utils import get_logger

LOGGER = get_logger(__name__)

AMOUNT_QUANTUM = Decimal(1).scaleb(-AMOUNT_SCALE)
MAX_AMOUNT_EXCLUSIVE = Decimal(10) ** (AMOUNT_PRECISION - AMOUNT_SCALE)


def _coerce_type(value: TransactionType | str) -> TransactionType:
    if isinstance(value, TransactionType):
        return value
    if isinstance(value, str):
        return TransactionType.from_str(value)
    raise ValidationError(unsupported_transaction_type(value))


def _coerce_amount(value: Any) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (Decimal, int)):
        raise ValidationError(inexact_amount(value))
    amount = Decimal(value)
    if not amount.is_finite():
        raise ValidationError(inexact_amount(value))
    if amount < 0:
        raise ValidationError(negative_amount(amount))
    # Larger or finer amounts would be rounded by the NUMERIC column
    if amount >= MAX_AMOUNT_EXCLUSIVE or amount != amount.quantize(AMOUNT_QUANTUM):
        raise ValidationError(amount_out_of_range(amount, AMOUNT_PRECISION, AMOUNT_SCALE))
    return amount


def _clean_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class TransactionService:
    """Service for managing transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_transaction(
        self,
        date: date,
        amount: Decimal,
        type: TransactionType | str,
        description: Optional[str] = None,
        category: Optional[str] = None,
    ) -> int:
        """Create a transaction.

        Args:
            date: Transaction date
            amount: Non-negative transaction amount
            type: INCOME or EXPENSE (enum member or case-insensitive string)
            description: Optional description
            category: Optional category label

        Returns:
            Transaction ID

        Raises:
            ValidationError: If date is missing, amount is negative or not an
                exact decimal, or type is not INCOME/EXPENSE
        """
        if date is None:
            raise ValidationError("Transaction date is required")
        txn_type = _coerce_type(type)
        txn_amount = _coerce_amount(amount)

        transaction_id = self.db.create_transaction(
            date=date,
            amount=txn_amount,
            type=txn_type,
            description=_clean_text(description),
            category=_clean_text(category),
        )
        LOGGER.info(
            "Created %s transaction %s for %s", txn_type.value, transaction_id, txn_amount
        )
        return transaction_id

    def get_transaction(self, transaction_id: int) -> Optional[TransactionEntity]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def require_transaction(self, transaction_id: int) -> TransactionEntity:
        """Get transaction by ID or raise NotFoundError."""
        txn = self.db.get_transaction(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return txn

    def update_transaction(
        self,
        transaction_id: int,
        date: date,
        amount: Decimal,
        type: TransactionType | str,
        description: Optional[str] = None,
        category: Optional[str] = None,
    ) -> None:
        """Replace all fields of a transaction.

        Optional fields that are omitted are cleared; callers wanting a partial
        edit merge with the stored record first.

        Raises:
            NotFoundError: If the transaction doesn't exist
            ValidationError: If the new field values are invalid
        """
        self.require_transaction(transaction_id)
        if date is None:
            raise ValidationError("Transaction date is required")
        txn_type = _coerce_type(type)
        txn_amount = _coerce_amount(amount)

        self.db.replace_transaction(
            transaction_id=transaction_id,
            date=date,
            amount=txn_amount,
            type=txn_type,
            description=_clean_text(description),
            category=_clean_text(category),
        )
        LOGGER.info("Updated transaction %s", transaction_id)

    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If transaction doesn't exist
        """
        self.require_transaction(transaction_id)
        self.db.delete_transaction(transaction_id)
        LOGGER.info("Deleted transaction %s", transaction_id)

    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        type: Optional[TransactionType | str] = None,
        category: Optional[str] = None,
    ) -> list[TransactionEntity]:
        """List transactions with filters.

        Args:
            start_date: Optional start date filter
            end_date: Optional end date filter
            type: Optional INCOME/EXPENSE filter
            category: Optional exact category label filter

        Returns:
            List of transaction entities, newest first
        """
        if start_date is not None and end_date is not None and start_date > end_date:
            raise ValidationError(
                f"Start date {start_date} is after end date {end_date}"
            )
        txn_type = _coerce_type(type) if type is not None else None
        return self.db.list_transactions(
            start_date=start_date,
            end_date=end_date,
            type=txn_type,
            category=_clean_text(category),
        )
