"""Shared domain error messages and error types."""

from decimal import Decimal
from typing import Any, Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def unsupported_transaction_type(value: Any) -> str:
    """Return message for a type outside INCOME/EXPENSE."""
    return f"Unsupported transaction type: {value!r} (expected INCOME or EXPENSE)"


def negative_amount(amount: Decimal) -> str:
    """Return message for an amount carrying its own sign."""
    return (
        f"Amount must be non-negative, got {amount}. "
        "The sign is given by the transaction type."
    )


def inexact_amount(amount: Any) -> str:
    """Return message for an amount that is not an exact decimal."""
    return f"Amount must be an exact decimal value, got {amount!r}"


def malformed_record(transaction_id: Optional[int], reason: str) -> str:
    """Return message for a stored record that cannot be aggregated."""
    label = "without id" if transaction_id is None else str(transaction_id)
    return f"Malformed transaction record {label}: {reason}"


def amount_out_of_range(amount: Decimal, precision: int, scale: int) -> str:
    """Return message for an amount the ledger cannot store exactly."""
    return (
        f"Amount {amount} cannot be stored exactly: at most "
        f"{precision - scale} integer digits and {scale} decimal places are allowed"
    )
