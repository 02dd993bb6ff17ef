"""Mini README: In-memory ledger owning transactions and budgets.

Structure:
    * LedgerStore - append/upsert primitives plus defensive snapshots.

The store is the single owner of ledger state. Transactions are appended and
never edited; budgets are created at construction or lazily by
``upsert_budget``. Recording an expense updates the matching budget's
counter through ``budget_sync`` while the store lock is held, so concurrent
writers cannot lose an update. Readers always receive copies.
"""

from __future__ import annotations

import re
import threading
from dataclasses import replace
from typing import Iterable, List, Optional, Sequence, Set, Union

from ..configuration import BudgetMode, LedgerSettings
from ..logging_utils import get_logger
from . import budget_sync
from .errors import InvalidEnumValueError, LedgerError
from .models import (
    Budget,
    Category,
    Transaction,
    TransactionType,
    category_label,
    parse_iso_date,
)

LOGGER = get_logger(__name__)

_ID_PATTERN = re.compile(r"^txn_(\d+)$")


class LedgerStore:
    """Own the transaction sequence and the budget list."""

    def __init__(
        self,
        transactions: Optional[Iterable[Transaction]] = None,
        budgets: Optional[Iterable[Budget]] = None,
        *,
        seed_demo_data: bool = True,
        strict_categories: bool = False,
        budget_mode: Union[BudgetMode, str] = BudgetMode.INCREMENTAL,
    ) -> None:
        self._transactions: List[Transaction] = []
        self._budgets: List[Budget] = []
        self._known_ids: Set[str] = set()
        self._sequence = 0
        self._lock = threading.RLock()
        self.strict_categories = strict_categories
        self.budget_mode = BudgetMode(budget_mode)

        if transactions is None and budgets is None and seed_demo_data:
            self._seed_demo_data()
        else:
            for transaction in transactions or []:
                self._register(transaction)
            for budget in budgets or []:
                self._budgets.append(replace(budget))
        LOGGER.debug(
            "Ledger initialised with %s transactions and %s budgets (mode=%s)",
            len(self._transactions),
            len(self._budgets),
            self.budget_mode.value,
        )

    @classmethod
    def from_settings(cls, settings: LedgerSettings) -> "LedgerStore":
        """Build a store using the configured seeding, strictness and budget mode."""

        return cls(
            seed_demo_data=settings.seed_demo_data,
            strict_categories=settings.strict_categories,
            budget_mode=settings.budget_mode,
        )

    def _seed_demo_data(self) -> None:
        """Populate the ledger with deterministic demo data.

        The budget counters are seeded as-is and intentionally disagree with
        the seeded expenses; they are starting values, not derived totals.
        """

        demo_transactions = [
            (TransactionType.INCOME, 5000.0, Category.SALARY, "Monthly salary", "2024-01-15"),
            (TransactionType.EXPENSE, 45.50, Category.FOOD_AND_DINING, "Grocery shopping", "2024-01-16"),
            (TransactionType.EXPENSE, 1200.0, Category.BILLS_AND_UTILITIES, "Rent payment", "2024-01-01"),
            (TransactionType.EXPENSE, 89.99, Category.SHOPPING, "New headphones", "2024-01-18"),
            (TransactionType.EXPENSE, 25.00, Category.TRANSPORTATION, "Uber ride", "2024-01-17"),
            (TransactionType.INCOME, 500.0, Category.FREELANCE, "Web design project", "2024-01-20"),
        ]
        for transaction_type, amount, category, description, occurred_on in demo_transactions:
            self._register(
                Transaction(
                    transaction_id=self._next_id(),
                    transaction_type=transaction_type,
                    amount=amount,
                    category=category.value,
                    description=description,
                    date=occurred_on,
                )
            )
        self._budgets.extend(
            [
                Budget(category=Category.FOOD_AND_DINING.value, limit=500.0, spent=245.50),
                Budget(category=Category.SHOPPING.value, limit=300.0, spent=89.99),
                Budget(category=Category.TRANSPORTATION.value, limit=200.0, spent=25.00),
                Budget(category=Category.ENTERTAINMENT.value, limit=150.0, spent=0.0),
            ]
        )

    def _next_id(self) -> str:
        """Generate the next monotonic transaction identifier."""

        self._sequence += 1
        return f"txn_{self._sequence:04d}"

    def _register(self, transaction: Transaction) -> None:
        """Append a transaction ensuring identifiers remain unique."""

        if transaction.transaction_id in self._known_ids:
            raise LedgerError(f"Transaction {transaction.transaction_id} already exists.")
        self._transactions.append(transaction)
        self._known_ids.add(transaction.transaction_id)
        match = _ID_PATTERN.match(transaction.transaction_id)
        if match:
            self._sequence = max(self._sequence, int(match.group(1)))

    def _check_category(self, category: str) -> None:
        if self.strict_categories and category not in Category.labels():
            raise InvalidEnumValueError("category", category, Category.labels())

    def add_transaction(
        self,
        transaction_type: Union[TransactionType, str],
        amount: float,
        category: Union[Category, str],
        description: str,
        date: str,
        tags: Optional[Sequence[str]] = None,
    ) -> Transaction:
        """Record a new transaction and update its budget when it is an expense."""

        resolved_type = TransactionType.from_str(transaction_type)
        label = category_label(category)
        self._check_category(label)
        parse_iso_date(date)

        with self._lock:
            transaction = Transaction(
                transaction_id=self._next_id(),
                transaction_type=resolved_type,
                amount=float(amount),
                category=label,
                description=description,
                date=date,
                tags=tuple(tags) if tags is not None else None,
            )
            self._register(transaction)
            if transaction.is_expense and self.budget_mode is BudgetMode.INCREMENTAL:
                budget_sync.apply_expense(self._budgets, transaction)
        LOGGER.info(
            "Recorded %s %s of %.2f in '%s'",
            resolved_type.value,
            transaction.transaction_id,
            transaction.amount,
            label,
        )
        return transaction

    def list_all_transactions(self) -> List[Transaction]:
        """Return an independent copy of the ledger in insertion order."""

        with self._lock:
            return list(self._transactions)

    def upsert_budget(self, category: Union[Category, str], limit: float) -> Budget:
        """Set a category's limit, creating the budget with zero spend if missing."""

        label = category_label(category)
        self._check_category(label)
        with self._lock:
            budget = budget_sync.find_budget(self._budgets, label)
            if budget is not None:
                budget.limit = float(limit)
                LOGGER.info("Updated budget '%s' limit to %.2f", label, budget.limit)
            else:
                budget = Budget(category=label, limit=float(limit), spent=0.0)
                self._budgets.append(budget)
                LOGGER.info("Created budget '%s' with limit %.2f", label, budget.limit)
            if self.budget_mode is BudgetMode.DERIVED:
                return budget_sync.derive_spent([budget], self._transactions)[0]
            return replace(budget)

    def list_all_budgets(self) -> List[Budget]:
        """Return independent copies of every budget."""

        with self._lock:
            if self.budget_mode is BudgetMode.DERIVED:
                return budget_sync.derive_spent(self._budgets, self._transactions)
            return [replace(budget) for budget in self._budgets]
