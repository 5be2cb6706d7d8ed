"""Domain layer for fintrack application.

Services that need a Database (TransactionService, DashboardService) are
imported from their own modules; re-exporting them here would make
``fintrack.database.base`` and this package import each other.
"""

from fintrack.domain.aggregator import LedgerAggregator, summarize
from fintrack.domain.entities import DashboardSummary, Transaction, TransactionType

__all__ = [
    "LedgerAggregator",
    "summarize",
    "DashboardSummary",
    "Transaction",
    "TransactionType",
]
