"""Mapper functions to convert between domain models and SQLAlchemy models."""

from fintrack.domain import entities as domain
from fintrack.domain.errors import (
    ValidationError,
    malformed_record,
    unsupported_transaction_type,
)
from fintrack.database.models import Transaction as ORMTransaction


def transaction_type_to_domain(orm_transaction: ORMTransaction) -> domain.TransactionType:
    """Convert a stored type string, rejecting values outside the closed set."""
    try:
        return domain.TransactionType(orm_transaction.type)
    except ValueError as error:
        raise ValidationError(
            malformed_record(
                orm_transaction.id, unsupported_transaction_type(orm_transaction.type)
            )
        ) from error


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        date=orm_transaction.date,
        amount=orm_transaction.amount,
        type=transaction_type_to_domain(orm_transaction),
        description=orm_transaction.description,
        category=orm_transaction.category,
        created_at=orm_transaction.created_at,
    )
