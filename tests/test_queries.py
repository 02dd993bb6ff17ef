"""Mini README: Tests for the read-side ledger queries.

Structure:
    * list_transactions - AND filters, newest-first stable ordering, limits.
    * spending_by_category - default expense type, shares and ranking.
    * spending_trend - day, week (Sunday start) and month buckets.
    * summarise / budget_alerts - totals and budget usage status.
    * date validation - inverted ranges and malformed bounds are rejected.
"""

from __future__ import annotations

from typing import List

import pytest

from pocketledger.ledger import (
    Budget,
    BudgetStatus,
    InvalidDateRangeError,
    InvalidEnumValueError,
    LedgerStore,
    MalformedDateError,
    Transaction,
    TransactionType,
)
from pocketledger.ledger import queries


@pytest.fixture()
def ledger() -> List[Transaction]:
    store = LedgerStore(seed_demo_data=False)
    entries = [
        ("income", 3000.0, "Salary", "February pay", "2024-02-01"),
        ("expense", 60.0, "Food & Dining", "Groceries", "2024-02-01"),
        ("expense", 15.0, "Transportation", "Metro card", "2024-02-03"),
        ("expense", 120.0, "Food & Dining", "Anniversary dinner", "2024-02-14"),
        ("expense", 40.0, "Entertainment", "Concert", "2024-03-02"),
        ("income", 450.0, "Freelance", "Logo design", "2024-03-05"),
        ("expense", 200.0, "Travel", "Flights", "2024-03-31"),
    ]
    for transaction_type, amount, category, description, occurred_on in entries:
        store.add_transaction(transaction_type, amount, category, description, occurred_on)
    return store.list_all_transactions()


def test_list_transactions_sorts_newest_first(ledger: List[Transaction]) -> None:
    dates = [t.date for t in queries.list_transactions(ledger)]

    assert dates == sorted(dates, reverse=True)
    assert len(dates) == len(ledger)


def test_list_transactions_keeps_insertion_order_for_ties(ledger: List[Transaction]) -> None:
    """The salary and groceries share a date and keep their recorded order."""

    results = queries.list_transactions(ledger, start_date="2024-02-01", end_date="2024-02-01")

    assert [t.description for t in results] == ["February pay", "Groceries"]


def test_list_transactions_combines_filters(ledger: List[Transaction]) -> None:
    results = queries.list_transactions(
        ledger,
        transaction_type="expense",
        category="Food & Dining",
        start_date="2024-02-02",
        end_date="2024-02-28",
    )

    assert [t.description for t in results] == ["Anniversary dinner"]


def test_list_transactions_date_bounds_are_inclusive(ledger: List[Transaction]) -> None:
    results = queries.list_transactions(ledger, start_date="2024-03-02", end_date="2024-03-31")

    assert [t.date for t in results] == ["2024-03-31", "2024-03-05", "2024-03-02"]


@pytest.mark.parametrize("limit, expected", [(2, 2), (100, 7), (0, 0), (-3, 0), (None, 7)])
def test_list_transactions_limit(ledger: List[Transaction], limit, expected: int) -> None:
    results = queries.list_transactions(ledger, limit=limit)

    assert len(results) == expected
    assert results == queries.list_transactions(ledger)[:expected]


def test_inverted_date_range_is_rejected(ledger: List[Transaction]) -> None:
    with pytest.raises(InvalidDateRangeError):
        queries.list_transactions(ledger, start_date="2024-03-01", end_date="2024-02-01")
    with pytest.raises(InvalidDateRangeError):
        queries.summarise(ledger, start_date="2024-03-01", end_date="2024-02-01")


def test_malformed_bound_is_rejected(ledger: List[Transaction]) -> None:
    with pytest.raises(MalformedDateError):
        queries.spending_trend(ledger, start_date="last tuesday")


def test_spending_by_category_defaults_to_expenses(ledger: List[Transaction]) -> None:
    breakdown = queries.spending_by_category(ledger)

    assert [entry.category for entry in breakdown] == [
        "Travel",
        "Food & Dining",
        "Entertainment",
        "Transportation",
    ]
    food = breakdown[1]
    assert food.total == pytest.approx(180.0)
    assert food.transaction_count == 2
    assert food.percentage == pytest.approx(180.0 / 435.0 * 100)
    assert sum(entry.percentage for entry in breakdown) == pytest.approx(100.0, rel=1e-9)


def test_spending_by_category_for_income(ledger: List[Transaction]) -> None:
    breakdown = queries.spending_by_category(ledger, transaction_type="income")

    assert [(entry.category, entry.total) for entry in breakdown] == [
        ("Salary", 3000.0),
        ("Freelance", 450.0),
    ]


def test_spending_by_category_empty_range(ledger: List[Transaction]) -> None:
    assert queries.spending_by_category(ledger, start_date="2025-01-01") == []


def test_spending_by_category_zero_totals_have_zero_share() -> None:
    store = LedgerStore(seed_demo_data=False)
    store.add_transaction("expense", 0.0, "Other", "Free sample", "2024-01-01")

    (entry,) = queries.spending_by_category(store.list_all_transactions())

    assert entry.percentage == 0.0
    assert entry.transaction_count == 1


def test_unknown_categories_form_their_own_bucket() -> None:
    store = LedgerStore(seed_demo_data=False)
    store.add_transaction("expense", 5.0, "Pets", "Food", "2024-01-01")
    store.add_transaction("expense", 15.0, "Other", "Misc", "2024-01-02")

    breakdown = queries.spending_by_category(store.list_all_transactions())

    assert [(entry.category, entry.percentage) for entry in breakdown] == [
        ("Other", pytest.approx(75.0)),
        ("Pets", pytest.approx(25.0)),
    ]


def test_spending_trend_by_day_uses_raw_dates(ledger: List[Transaction]) -> None:
    trend = queries.spending_trend(ledger)

    assert [point.date for point in trend] == [
        "2024-02-01",
        "2024-02-03",
        "2024-02-14",
        "2024-03-02",
        "2024-03-05",
        "2024-03-31",
    ]
    first = trend[0]
    assert (first.income, first.expenses, first.net) == (3000.0, 60.0, 2940.0)


def test_spending_trend_by_week_starts_on_sunday() -> None:
    store = LedgerStore(seed_demo_data=False)
    # 2024-01-14 and 2024-01-21 are Sundays
    for occurred_on in ("2024-01-14", "2024-01-16", "2024-01-20", "2024-01-21"):
        store.add_transaction("expense", 10.0, "Other", "Coffee", occurred_on)

    trend = queries.spending_trend(store.list_all_transactions(), group_by="week")

    assert [(point.date, point.expenses) for point in trend] == [
        ("2024-01-14", 30.0),
        ("2024-01-21", 10.0),
    ]


def test_spending_trend_by_month_matches_manual_sums(ledger: List[Transaction]) -> None:
    trend = {point.date: point for point in queries.spending_trend(ledger, group_by="month")}

    assert list(trend) == ["2024-02", "2024-03"]
    for month, point in trend.items():
        in_month = [t for t in ledger if t.date.startswith(month)]
        assert point.income == pytest.approx(
            sum(t.amount for t in in_month if not t.is_expense)
        )
        assert point.expenses == pytest.approx(sum(t.amount for t in in_month if t.is_expense))
        assert point.as_dict()["net"] == pytest.approx(point.income - point.expenses)


def test_spending_trend_month_keys_ignore_time_of_day() -> None:
    store = LedgerStore(seed_demo_data=False)
    store.add_transaction("income", 10.0, "Other", "Tip", "2024-12-31T23:30:00")
    store.add_transaction("income", 5.0, "Other", "Tip", "2025-01-01T00:15:00")

    trend = queries.spending_trend(store.list_all_transactions(), group_by="month")

    assert [point.date for point in trend] == ["2024-12", "2025-01"]


def test_spending_trend_rejects_unknown_granularity(ledger: List[Transaction]) -> None:
    with pytest.raises(InvalidEnumValueError):
        queries.spending_trend(ledger, group_by="fortnight")


def test_summarise_counts_both_types(ledger: List[Transaction]) -> None:
    summary = queries.summarise(ledger, start_date="2024-03-01")

    assert summary.total_income == pytest.approx(450.0)
    assert summary.total_expenses == pytest.approx(240.0)
    assert summary.balance == pytest.approx(210.0)
    assert summary.transaction_count == 3


def test_budget_alerts_report_status() -> None:
    alerts = queries.budget_alerts(
        [
            Budget(category="Food & Dining", limit=500.0, spent=100.0),
            Budget(category="Shopping", limit=300.0, spent=270.0),
            Budget(category="Travel", limit=200.0, spent=250.0),
            Budget(category="Other", limit=0.0, spent=0.0),
        ]
    )

    assert [alert.status for alert in alerts] == [
        BudgetStatus.OK,
        BudgetStatus.WARNING,
        BudgetStatus.OVER,
        BudgetStatus.OK,
    ]
    assert alerts[1].percent_used == pytest.approx(90.0)
    assert alerts[2].remaining == pytest.approx(-50.0)
    assert alerts[3].percent_used == 0.0


def test_basic_format_bound_is_rejected(ledger: List[Transaction]) -> None:
    with pytest.raises(MalformedDateError):
        queries.list_transactions(ledger, end_date="20240630")


def test_basic_format_date_cannot_form_a_bucket() -> None:
    """Directly built entries with compact dates raise instead of misordering."""

    compact = Transaction(
        transaction_id="txn_0001",
        transaction_type=TransactionType.EXPENSE,
        amount=5.0,
        category="Other",
        description="Compact",
        date="20240115",
    )

    with pytest.raises(MalformedDateError):
        queries.spending_trend([compact])
