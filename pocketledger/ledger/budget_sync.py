"""Mini README: Keep budget spend counters in step with recorded expenses.

Structure:
    * find_budget - first budget matching a category.
    * apply_expense - add an expense amount to its budget's running counter.
    * derive_spent - recompute every counter from the ledger instead.

``Budget.spent`` is an incremental counter: it only moves when an expense is
recorded or when a budget is seeded with an initial value. It is never
reconciled against the ledger, so seeded counters may disagree with the sum
of the recorded expenses. ``derive_spent`` is the alternative read model
selected with ``BudgetMode.DERIVED``.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Sequence, Set

from ..logging_utils import get_logger
from .models import Budget, Transaction

LOGGER = get_logger(__name__)


def find_budget(budgets: Iterable[Budget], category: str) -> Optional[Budget]:
    """Return the first budget for ``category``; duplicates after it are ignored."""

    for budget in budgets:
        if budget.category == category:
            return budget
    return None


def apply_expense(budgets: Sequence[Budget], transaction: Transaction) -> Optional[Budget]:
    """Add an expense to its budget in place and return the updated budget."""

    if not transaction.is_expense:
        return None
    budget = find_budget(budgets, transaction.category)
    if budget is None:
        LOGGER.debug(
            "No budget for category '%s'; expense %s recorded without budget update",
            transaction.category,
            transaction.transaction_id,
        )
        return None
    budget.spent += transaction.amount
    LOGGER.debug(
        "Budget '%s' spent now %.2f of %.2f", budget.category, budget.spent, budget.limit
    )
    return budget


def derive_spent(budgets: Iterable[Budget], transactions: Iterable[Transaction]) -> List[Budget]:
    """Return budget copies whose ``spent`` is the sum of matching expenses.

    Duplicate budgets after the first for a category report zero spend.
    """

    totals: Dict[str, float] = defaultdict(float)
    for transaction in transactions:
        if transaction.is_expense:
            totals[transaction.category] += transaction.amount

    # only the first budget per category is credited, as with apply_expense
    credited: Set[str] = set()
    derived: List[Budget] = []
    for budget in budgets:
        spent = 0.0 if budget.category in credited else totals.get(budget.category, 0.0)
        credited.add(budget.category)
        derived.append(replace(budget, spent=spent))
    return derived
