"""Mini README: Ledger store, budget synchronisation and aggregate queries.

The ``store`` module owns transactions and budgets, ``budget_sync`` keeps
budget spend counters current, ``queries`` computes breakdowns, trends and
summaries from snapshots, and ``service`` ties them together behind one
facade used by the tool and web layers.
"""

from .errors import (
    InvalidDateRangeError,
    InvalidEnumValueError,
    LedgerError,
    MalformedDateError,
)
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
from .queries import TrendGranularity
from .service import LedgerService
from .store import LedgerStore

__all__ = [
    "Budget",
    "BudgetAlert",
    "BudgetStatus",
    "Category",
    "CategorySpending",
    "InvalidDateRangeError",
    "InvalidEnumValueError",
    "LedgerError",
    "LedgerService",
    "LedgerStore",
    "LedgerSummary",
    "MalformedDateError",
    "Transaction",
    "TransactionType",
    "TrendGranularity",
    "TrendPoint",
]
