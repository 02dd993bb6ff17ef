"""Mini README: The default ledger tool set.

Structure:
    * DEFAULT_TOOLS - tool definitions for every ledger operation.
    * build_registry - registry bound to a service with the default tools.

Handlers translate validated parameter models into ``LedgerService`` calls
and convert the resulting records into their wire dictionaries.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..ledger.service import LedgerService
from . import schemas
from .registry import LedgerTool, ToolRegistry


def _add_transaction(service: LedgerService, params: schemas.AddTransactionParams) -> Dict[str, Any]:
    transaction = service.add_transaction(
        params.transaction_type,
        params.amount,
        params.category,
        params.description,
        params.date,
        tags=params.tags,
    )
    return transaction.as_dict()


def _get_transactions(
    service: LedgerService, params: schemas.GetTransactionsParams
) -> List[Dict[str, Any]]:
    transactions = service.get_transactions(
        transaction_type=params.transaction_type,
        category=params.category,
        start_date=params.start_date,
        end_date=params.end_date,
        limit=params.limit,
    )
    return [transaction.as_dict() for transaction in transactions]


def _get_spending_by_category(
    service: LedgerService, params: schemas.SpendingByCategoryParams
) -> List[Dict[str, Any]]:
    breakdown = service.get_spending_by_category(
        start_date=params.start_date,
        end_date=params.end_date,
        transaction_type=params.transaction_type,
    )
    return [entry.as_dict() for entry in breakdown]


def _get_spending_trend(
    service: LedgerService, params: schemas.SpendingTrendParams
) -> List[Dict[str, Any]]:
    trend = service.get_spending_trend(
        start_date=params.start_date,
        end_date=params.end_date,
        group_by=params.group_by,
    )
    return [point.as_dict() for point in trend]


def _get_budget_status(service: LedgerService, params: schemas.NoParams) -> List[Dict[str, Any]]:
    return [budget.as_dict() for budget in service.get_budget_status()]


def _set_budget(service: LedgerService, params: schemas.SetBudgetParams) -> Dict[str, Any]:
    return service.set_budget(params.category, params.limit).as_dict()


def _get_summary(service: LedgerService, params: schemas.SummaryParams) -> Dict[str, Any]:
    return service.get_summary(start_date=params.start_date, end_date=params.end_date).as_dict()


def _get_budget_alerts(service: LedgerService, params: schemas.NoParams) -> List[Dict[str, Any]]:
    return [alert.as_dict() for alert in service.get_budget_alerts()]


DEFAULT_TOOLS = (
    LedgerTool(
        name="addTransaction",
        description="Add a new income or expense transaction to the ledger.",
        params_model=schemas.AddTransactionParams,
        handler=_add_transaction,
    ),
    LedgerTool(
        name="getTransactions",
        description=(
            "Get a list of transactions with optional filtering by type, category,"
            " date range, or limit. Use this to show transaction history."
        ),
        params_model=schemas.GetTransactionsParams,
        handler=_get_transactions,
    ),
    LedgerTool(
        name="getSpendingByCategory",
        description=(
            "Get spending breakdown by category. Returns totals and percentages for"
            " each category. Useful for showing where money is being spent."
        ),
        params_model=schemas.SpendingByCategoryParams,
        handler=_get_spending_by_category,
    ),
    LedgerTool(
        name="getSpendingTrend",
        description=(
            "Get spending trends over time. Returns income, expenses, and net balance"
            " grouped by day, week, or month."
        ),
        params_model=schemas.SpendingTrendParams,
        handler=_get_spending_trend,
    ),
    LedgerTool(
        name="getBudgetStatus",
        description=(
            "Get current budget status for all categories. Shows budget limits and"
            " how much has been spent in each category."
        ),
        params_model=schemas.NoParams,
        handler=_get_budget_status,
    ),
    LedgerTool(
        name="setBudget",
        description=(
            "Set or update a budget limit for a specific category. Existing spend"
            " is kept."
        ),
        params_model=schemas.SetBudgetParams,
        handler=_set_budget,
    ),
    LedgerTool(
        name="getSummary",
        description=(
            "Get a financial summary including total income, total expenses, balance,"
            " and transaction count for an optional date range."
        ),
        params_model=schemas.SummaryParams,
        handler=_get_summary,
    ),
    LedgerTool(
        name="getBudgetAlerts",
        description=(
            "Get usage percentage, remaining amount and ok/warning/over status for"
            " every budget."
        ),
        params_model=schemas.NoParams,
        handler=_get_budget_alerts,
    ),
)


def build_registry(service: Optional[LedgerService] = None) -> ToolRegistry:
    """Return a registry exposing the default tools for ``service``."""

    return ToolRegistry(service if service is not None else LedgerService(), DEFAULT_TOOLS)
