"""Mini README: Service facade binding a ledger store to its queries.

Structure:
    * LedgerService - synchronous implementations of every ledger operation.

Mutations go through the store; queries take a snapshot first and hand it to
the pure functions in ``queries`` so they never observe a half-applied
write. The tool layer wraps these methods in coroutines.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Union

from ..configuration import LedgerSettings
from ..logging_utils import get_logger
from . import queries
from .models import (
    Budget,
    BudgetAlert,
    BudgetStatus,
    Category,
    CategorySpending,
    LedgerSummary,
    Transaction,
    TransactionType,
    TrendPoint,
)
from .store import LedgerStore

LOGGER = get_logger(__name__)


class LedgerService:
    """Expose ledger mutations and queries as plain method calls."""

    def __init__(self, store: Optional[LedgerStore] = None, *, warning_percent: float = 80.0) -> None:
        self.store = store if store is not None else LedgerStore()
        self.warning_percent = warning_percent

    @classmethod
    def from_settings(cls, settings: LedgerSettings) -> "LedgerService":
        """Build a service whose store and alert threshold follow ``settings``."""

        return cls(
            LedgerStore.from_settings(settings),
            warning_percent=settings.budget_warning_percent,
        )

    def add_transaction(
        self,
        transaction_type: Union[TransactionType, str],
        amount: float,
        category: Union[Category, str],
        description: str,
        date: str,
        tags: Optional[Sequence[str]] = None,
    ) -> Transaction:
        """Record a transaction; expenses also update their budget."""

        return self.store.add_transaction(
            transaction_type, amount, category, description, date, tags=tags
        )

    def get_transactions(
        self,
        *,
        transaction_type: Optional[Union[TransactionType, str]] = None,
        category: Optional[Union[Category, str]] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[Transaction]:
        """Return matching transactions, newest first."""

        return queries.list_transactions(
            self.store.list_all_transactions(),
            transaction_type=transaction_type,
            category=category,
            start_date=start_date,
            end_date=end_date,
            limit=limit,
        )

    def get_spending_by_category(
        self,
        *,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        transaction_type: Optional[Union[TransactionType, str]] = None,
    ) -> List[CategorySpending]:
        """Return totals and shares per category, largest first."""

        return queries.spending_by_category(
            self.store.list_all_transactions(),
            start_date=start_date,
            end_date=end_date,
            transaction_type=transaction_type,
        )

    def get_spending_trend(
        self,
        *,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        group_by: Union[queries.TrendGranularity, str] = queries.TrendGranularity.DAY,
    ) -> List[TrendPoint]:
        """Return income and expenses bucketed by day, week or month."""

        return queries.spending_trend(
            self.store.list_all_transactions(),
            start_date=start_date,
            end_date=end_date,
            group_by=group_by,
        )

    def get_summary(
        self,
        *,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> LedgerSummary:
        """Return total income, expenses and balance for the date range."""

        return queries.summarise(
            self.store.list_all_transactions(),
            start_date=start_date,
            end_date=end_date,
        )

    def get_budget_status(self) -> List[Budget]:
        """Return copies of every budget with its current spend."""

        return self.store.list_all_budgets()

    def set_budget(self, category: Union[Category, str], limit: float) -> Budget:
        """Create or update a category limit without touching its spend."""

        return self.store.upsert_budget(category, limit)

    def get_budget_alerts(self) -> List[BudgetAlert]:
        """Return usage figures and ok/warning/over status per budget."""

        alerts = queries.budget_alerts(
            self.store.list_all_budgets(), warning_percent=self.warning_percent
        )
        flagged = [alert.category for alert in alerts if alert.status is not BudgetStatus.OK]
        if flagged:
            LOGGER.debug("Budgets needing attention: %s", ", ".join(flagged))
        return alerts
