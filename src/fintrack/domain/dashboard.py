"""Dashboard summary domain service."""

from fintrack.database.base import Database
from fintrack.domain.aggregator import LedgerAggregator
from fintrack.domain.entities import DashboardSummary


class DashboardService:
    """Service computing the dashboard summary over the whole ledger."""

    def __init__(self, db: Database, aggregator: LedgerAggregator | None = None):
        """Initialize dashboard service.

        Args:
            db: Database instance
            aggregator: Optional aggregator (a default one is created if omitted)
        """
        self.db = db
        self.aggregator = aggregator or LedgerAggregator()

    def get_summary(self) -> DashboardSummary:
        """Summarize every stored transaction.

        Raises:
            ValidationError: If a stored record breaks the ledger invariants
        """
        return self.aggregator.summarize(self.db.list_transactions())
