"""Mini README: Read-side queries over ledger snapshots.

Structure:
    * TrendGranularity - bucket sizes accepted by ``spending_trend``.
    * list_transactions - filter, order newest first and truncate.
    * spending_by_category - totals and shares per category.
    * spending_trend - income/expense buckets by day, week or month.
    * summarise - totals and balance over a date range.
    * budget_alerts - usage figures and warning status per budget.

Every function takes a snapshot (a plain sequence copied from the store) and
has no side effects. Date bounds are compared as strings against the stored
ISO representation, while ordering and week/month buckets use parsed dates.
The two agree for uniformly formatted dates; mixing date-only and date-time
strings can make a bound include or exclude entries a parsed comparison
would not.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import timedelta
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Union

from ..logging_utils import get_logger
from .errors import InvalidDateRangeError, InvalidEnumValueError
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
    calendar_date,
    category_label,
    parse_iso_date,
)

LOGGER = get_logger(__name__)


class TrendGranularity(str, Enum):
    """Bucket sizes for trend queries."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"

    @classmethod
    def from_str(cls, value: object) -> "TrendGranularity":
        """Coerce a case-insensitive label into a granularity."""

        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as error:
            raise InvalidEnumValueError("groupBy", value, [member.value for member in cls]) from error


def validate_date_range(start_date: Optional[str], end_date: Optional[str]) -> None:
    """Reject unparsable bounds and ranges whose start sorts after their end."""

    for bound in (start_date, end_date):
        if bound is not None:
            parse_iso_date(bound)
    if start_date is not None and end_date is not None and start_date > end_date:
        raise InvalidDateRangeError(start_date, end_date)


def _within_dates(
    transactions: Iterable[Transaction],
    start_date: Optional[str],
    end_date: Optional[str],
) -> List[Transaction]:
    validate_date_range(start_date, end_date)
    return [
        transaction
        for transaction in transactions
        if (start_date is None or transaction.date >= start_date)
        and (end_date is None or transaction.date <= end_date)
    ]


def list_transactions(
    transactions: Sequence[Transaction],
    *,
    transaction_type: Optional[Union[TransactionType, str]] = None,
    category: Optional[Union[Category, str]] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    limit: Optional[int] = None,
) -> List[Transaction]:
    """Return matching transactions, newest first.

    Entries sharing a date keep their insertion order. ``limit`` truncates
    after sorting; zero or a negative limit yields an empty list.
    """

    matches = _within_dates(transactions, start_date, end_date)
    if transaction_type is not None:
        resolved_type = TransactionType.from_str(transaction_type)
        matches = [t for t in matches if t.transaction_type is resolved_type]
    if category is not None:
        label = category_label(category)
        matches = [t for t in matches if t.category == label]

    ordered = sorted(matches, key=lambda t: parse_iso_date(t.date), reverse=True)
    if limit is not None:
        ordered = ordered[: max(limit, 0)]
    LOGGER.debug("Listing %s of %s transactions", len(ordered), len(transactions))
    return ordered


def spending_by_category(
    transactions: Sequence[Transaction],
    *,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    transaction_type: Optional[Union[TransactionType, str]] = None,
) -> List[CategorySpending]:
    """Group transactions of one type (expenses by default) by category."""

    resolved_type = (
        TransactionType.EXPENSE
        if transaction_type is None
        else TransactionType.from_str(transaction_type)
    )
    totals: Dict[str, float] = {}
    counts: Dict[str, int] = {}
    for transaction in _within_dates(transactions, start_date, end_date):
        if transaction.transaction_type is not resolved_type:
            continue
        totals[transaction.category] = totals.get(transaction.category, 0.0) + transaction.amount
        counts[transaction.category] = counts.get(transaction.category, 0) + 1

    grand_total = sum(totals.values())
    breakdown = [
        CategorySpending(
            category=category,
            total=total,
            percentage=(total / grand_total * 100) if grand_total != 0 else 0.0,
            transaction_count=counts[category],
        )
        for category, total in totals.items()
    ]
    breakdown.sort(key=lambda entry: entry.total, reverse=True)
    return breakdown


def _bucket_key(transaction: Transaction, granularity: TrendGranularity) -> str:
    """Build the grouping key for a transaction's date."""

    occurred_on = calendar_date(transaction.date)
    if granularity is TrendGranularity.MONTH:
        return f"{occurred_on.year:04d}-{occurred_on.month:02d}"
    if granularity is TrendGranularity.WEEK:
        # weekday(): Monday=0 .. Sunday=6; weeks start on Sunday
        week_start = occurred_on - timedelta(days=(occurred_on.weekday() + 1) % 7)
        return week_start.isoformat()
    return transaction.date


def spending_trend(
    transactions: Sequence[Transaction],
    *,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    group_by: Union[TrendGranularity, str] = TrendGranularity.DAY,
) -> List[TrendPoint]:
    """Bucket income and expenses by day, week (Sunday start) or month."""

    granularity = TrendGranularity.from_str(group_by)
    buckets: Dict[str, List[float]] = defaultdict(lambda: [0.0, 0.0])
    for transaction in _within_dates(transactions, start_date, end_date):
        totals = buckets[_bucket_key(transaction, granularity)]
        if transaction.transaction_type is TransactionType.INCOME:
            totals[0] += transaction.amount
        else:
            totals[1] += transaction.amount

    # keys are zero-padded and big-endian, so string order is chronological
    return [
        TrendPoint(date=key, income=income, expenses=expenses)
        for key, (income, expenses) in sorted(buckets.items())
    ]


def summarise(
    transactions: Sequence[Transaction],
    *,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> LedgerSummary:
    """Total income and expenses of both types within the date range."""

    matches = _within_dates(transactions, start_date, end_date)
    return LedgerSummary(
        total_income=sum(
            t.amount for t in matches if t.transaction_type is TransactionType.INCOME
        ),
        total_expenses=sum(
            t.amount for t in matches if t.transaction_type is TransactionType.EXPENSE
        ),
        transaction_count=len(matches),
    )


def budget_alerts(
    budgets: Iterable[Budget],
    *,
    warning_percent: float = 80.0,
) -> List[BudgetAlert]:
    """Report how much of each budget has been used.

    A budget is ``over`` once spend exceeds the limit and ``warning`` when
    usage passes ``warning_percent``. A non-positive limit reports 0% used.
    """

    alerts: List[BudgetAlert] = []
    for budget in budgets:
        percent_used = (budget.spent / budget.limit * 100) if budget.limit > 0 else 0.0
        if budget.spent > budget.limit:
            status = BudgetStatus.OVER
        elif percent_used > warning_percent:
            status = BudgetStatus.WARNING
        else:
            status = BudgetStatus.OK
        alerts.append(
            BudgetAlert(
                category=budget.category,
                limit=budget.limit,
                spent=budget.spent,
                percent_used=percent_used,
                status=status,
            )
        )
    return alerts
