"""Mini README: Tests for the async tool registry.

Tools are coroutines, so each test drives them with ``asyncio.run``. The
tests check discovery, camelCase wire parameters, boundary validation of
categories and dates, and that results are plain JSON-ready data.
"""

from __future__ import annotations

import asyncio

import pytest

from pocketledger.ledger import InvalidDateRangeError, LedgerService
from pocketledger.tools import ToolInvocationError, build_registry


@pytest.fixture()
def registry():
    return build_registry(LedgerService())


def test_registry_lists_every_ledger_tool(registry) -> None:
    assert registry.available_tools() == [
        "addTransaction",
        "getBudgetAlerts",
        "getBudgetStatus",
        "getSpendingByCategory",
        "getSpendingTrend",
        "getSummary",
        "getTransactions",
        "setBudget",
    ]


def test_tool_schema_uses_wire_names(registry) -> None:
    schemas = {schema["name"]: schema for schema in registry.describe()}

    trend_properties = schemas["getSpendingTrend"]["parameters"]["properties"]
    assert {"startDate", "endDate", "groupBy"} <= set(trend_properties)
    add_schema = schemas["addTransaction"]["parameters"]
    assert set(add_schema["required"]) == {"type", "amount", "category", "description", "date"}


def test_add_transaction_tool_returns_wire_shape(registry) -> None:
    result = asyncio.run(
        registry.invoke(
            "addTransaction",
            {
                "type": "expense",
                "amount": 50,
                "category": "Food & Dining",
                "description": "Team lunch",
                "date": "2024-01-22",
                "tags": ["work"],
            },
        )
    )

    assert result == {
        "id": "txn_0007",
        "type": "expense",
        "amount": 50.0,
        "category": "Food & Dining",
        "description": "Team lunch",
        "date": "2024-01-22",
        "tags": ["work"],
    }
    budgets = asyncio.run(registry.invoke("getBudgetStatus"))
    food = next(budget for budget in budgets if budget["category"] == "Food & Dining")
    assert food["spent"] == pytest.approx(295.50)


def test_get_transactions_tool_applies_filters(registry) -> None:
    result = asyncio.run(
        registry.invoke("getTransactions", {"type": "income", "limit": 1})
    )

    assert [entry["description"] for entry in result] == ["Web design project"]
    assert "tags" not in result[0]


def test_spending_trend_tool_groups_by_month(registry) -> None:
    result = asyncio.run(registry.invoke("getSpendingTrend", {"groupBy": "month"}))

    assert len(result) == 1
    assert result[0]["date"] == "2024-01"
    assert result[0]["net"] == pytest.approx(4139.51)


def test_set_budget_tool(registry) -> None:
    result = asyncio.run(registry.invoke("setBudget", {"category": "Entertainment", "limit": 200}))

    assert result == {"category": "Entertainment", "limit": 200.0, "spent": 0.0}


def test_unknown_category_rejected_at_boundary(registry) -> None:
    with pytest.raises(ToolInvocationError) as excinfo:
        asyncio.run(registry.invoke("setBudget", {"category": "Pets", "limit": 10}))

    assert excinfo.value.tool_name == "setBudget"
    assert excinfo.value.errors[0]["loc"] == ("category",)


def test_malformed_date_rejected_at_boundary(registry) -> None:
    with pytest.raises(ToolInvocationError):
        asyncio.run(
            registry.invoke(
                "addTransaction",
                {
                    "type": "expense",
                    "amount": 1,
                    "category": "Other",
                    "description": "Oops",
                    "date": "yesterday",
                },
            )
        )


def test_unexpected_parameters_are_rejected(registry) -> None:
    with pytest.raises(ToolInvocationError):
        asyncio.run(registry.invoke("getSummary", {"month": "2024-01"}))


def test_inverted_range_surfaces_ledger_error(registry) -> None:
    with pytest.raises(InvalidDateRangeError):
        asyncio.run(
            registry.invoke("getSummary", {"startDate": "2024-02-01", "endDate": "2024-01-01"})
        )


def test_unknown_tool_raises_key_error(registry) -> None:
    with pytest.raises(KeyError):
        asyncio.run(registry.invoke("deleteTransaction", {}))


def test_compact_date_rejected_at_boundary(registry) -> None:
    with pytest.raises(ToolInvocationError):
        asyncio.run(registry.invoke("getTransactions", {"startDate": "20240101"}))
